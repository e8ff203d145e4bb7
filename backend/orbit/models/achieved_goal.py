from sqlalchemy import Column, Integer, DateTime, ForeignKey
from sqlalchemy.sql import func
from orbit.db import Base


class AchievedGoal(Base):
    __tablename__ = "achieved_goals"

    id = Column(Integer, primary_key=True, index=True)
    goal_id = Column(Integer, ForeignKey("goals.id", ondelete="CASCADE"), nullable=False, index=True)

    # When the user marked the goal done
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), index=True)
