from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from orbit.db import Base


class Goal(Base):
    __tablename__ = "goals"

    id = Column(Integer, primary_key=True, index=True)

    title = Column(String, nullable=False)

    # How many times per week the user wants to complete this goal (1-7)
    desired_weekly_frequency = Column(Integer, nullable=False)

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
