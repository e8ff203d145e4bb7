from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from orbit.core.constants import MAX_WEEKLY_FREQUENCY, MIN_WEEKLY_FREQUENCY


class GoalBase(BaseModel):
    title: str
    desired_weekly_frequency: int


class GoalCreate(GoalBase):
    """Schema for creating a new goal."""

    title: str = Field(min_length=1)
    desired_weekly_frequency: int = Field(
        ge=MIN_WEEKLY_FREQUENCY, le=MAX_WEEKLY_FREQUENCY
    )


class GoalRead(GoalBase):
    """Schema returned to the frontend when reading a goal."""

    id: int
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class GoalWithAchievedCount(GoalRead):
    achieved_count: int = 0


class AchievedGoalRead(BaseModel):
    id: int
    goal_id: int
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class AchievedGoalEntry(BaseModel):
    id: int
    title: str
    achieved_at: datetime


class WeekSummary(BaseModel):
    total_achieved: int
    total: int
    # 'YYYY-MM-DD' -> achievements on that day, newest first.
    # Days without achievements are omitted.
    achieved_goals_per_day: dict[str, list[AchievedGoalEntry]]
