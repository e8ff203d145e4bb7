"""Goal creation, completion and weekly progress reporting.

All week-relative queries share one window computed from the injected clock,
the configured timezone and the configured first day of the week.
"""
import logging
from typing import Callable, Optional
from datetime import datetime

from sqlalchemy import func
from sqlalchemy.orm import Session

from orbit.core.config import settings
from orbit.core.constants import MAX_WEEKLY_FREQUENCY, MIN_WEEKLY_FREQUENCY
from orbit.core.time_utils import local_date_key, to_local_datetime, to_utc, utcnow, week_bounds
from orbit.models.achieved_goal import AchievedGoal
from orbit.models.goal import Goal
from orbit.schemas.goal import AchievedGoalEntry, GoalWithAchievedCount, WeekSummary

logger = logging.getLogger(__name__)


def created_up_to(end):
    """Goals created on or before `end`; there is no lower bound."""
    return Goal.created_at <= end


class GoalNotFoundError(LookupError):
    def __init__(self, goal_id: int):
        super().__init__(f"Goal {goal_id} not found")
        self.goal_id = goal_id


class GoalAlreadyCompletedError(Exception):
    def __init__(self, goal_id: int, desired_weekly_frequency: int):
        super().__init__(
            f"Goal {goal_id} already completed {desired_weekly_frequency}x this week"
        )
        self.goal_id = goal_id
        self.desired_weekly_frequency = desired_weekly_frequency


class GoalService:
    def __init__(
        self,
        db: Session,
        clock: Optional[Callable[[], datetime]] = None,
        week_start: Optional[str] = None,
        tz_name: Optional[str] = None,
    ):
        self.db = db
        self.clock = clock or utcnow
        self.week_start = week_start or settings.week_start
        self.tz_name = tz_name or settings.timezone

    def week_bounds(self, now=None):
        """(start, end) of the week containing `now` (default: the clock) in UTC, both inclusive."""
        if now is None:
            now = self.clock()
        return week_bounds(now, self.week_start, self.tz_name)

    def create(self, title: str, desired_weekly_frequency: int) -> Goal:
        if not title or not title.strip():
            raise ValueError("title must not be empty")
        if not MIN_WEEKLY_FREQUENCY <= desired_weekly_frequency <= MAX_WEEKLY_FREQUENCY:
            raise ValueError(
                f"desired_weekly_frequency must be between "
                f"{MIN_WEEKLY_FREQUENCY} and {MAX_WEEKLY_FREQUENCY}"
            )

        goal = Goal(
            title=title,
            desired_weekly_frequency=desired_weekly_frequency,
            created_at=to_utc(self.clock()),
        )
        self.db.add(goal)
        self.db.commit()
        self.db.refresh(goal)
        logger.info("Created goal %s (%r, %dx/week)", goal.id, goal.title, goal.desired_weekly_frequency)
        return goal

    def complete(self, goal_id: int) -> AchievedGoal:
        """Log one achievement of `goal_id` for the current week."""
        goal = self.db.query(Goal).filter(Goal.id == goal_id).first()
        if goal is None:
            raise GoalNotFoundError(goal_id)

        now = self.clock()
        start, end = self.week_bounds(now)
        done = (
            self.db.query(func.count(AchievedGoal.id))
            .filter(AchievedGoal.goal_id == goal_id)
            .filter(AchievedGoal.created_at >= start)
            .filter(AchievedGoal.created_at <= end)
            .scalar()
        )
        if done >= goal.desired_weekly_frequency:
            logger.warning(
                "Rejected completion of goal %s: %d/%d this week",
                goal_id, done, goal.desired_weekly_frequency,
            )
            raise GoalAlreadyCompletedError(goal_id, goal.desired_weekly_frequency)

        achieved = AchievedGoal(goal_id=goal_id, created_at=to_utc(now))
        self.db.add(achieved)
        self.db.commit()
        self.db.refresh(achieved)
        logger.info("Goal %s completed (%d/%d this week)", goal_id, done + 1, goal.desired_weekly_frequency)
        return achieved

    def get_many(self) -> list[GoalWithAchievedCount]:
        """All goals created up to the end of this week, with this week's achieved count."""
        start, end = self.week_bounds()

        achieved_count = (
            self.db.query(
                AchievedGoal.goal_id.label("goal_id"),
                func.count(AchievedGoal.id).label("achieved_count"),
            )
            .filter(AchievedGoal.created_at >= start)
            .filter(AchievedGoal.created_at <= end)
            .group_by(AchievedGoal.goal_id)
            .cte("achieved_goals_count")
        )

        rows = (
            self.db.query(Goal, func.coalesce(achieved_count.c.achieved_count, 0))
            .outerjoin(achieved_count, achieved_count.c.goal_id == Goal.id)
            .filter(created_up_to(end))
            .order_by(Goal.created_at, Goal.id)
            .all()
        )

        return [
            GoalWithAchievedCount(
                id=goal.id,
                title=goal.title,
                desired_weekly_frequency=goal.desired_weekly_frequency,
                created_at=goal.created_at,
                achieved_count=int(count),
            )
            for goal, count in rows
        ]

    def get_week_summary(self) -> WeekSummary:
        start, end = self.week_bounds()

        total = (
            self.db.query(func.coalesce(func.sum(Goal.desired_weekly_frequency), 0))
            .filter(created_up_to(end))
            .scalar()
        )

        achieved_in_week = (
            self.db.query(AchievedGoal.id, Goal.title, AchievedGoal.created_at)
            .select_from(AchievedGoal)
            .join(Goal, Goal.id == AchievedGoal.goal_id)
            .filter(AchievedGoal.created_at >= start)
            .filter(AchievedGoal.created_at <= end)
            .order_by(AchievedGoal.created_at.desc(), AchievedGoal.id.desc())
            .all()
        )

        # Rows are newest first, so days come out newest first too
        per_day: dict[str, list[AchievedGoalEntry]] = {}
        for achieved_id, title, achieved_at in achieved_in_week:
            per_day.setdefault(local_date_key(achieved_at, self.tz_name), []).append(
                AchievedGoalEntry(
                    id=achieved_id,
                    title=title,
                    achieved_at=to_local_datetime(achieved_at, self.tz_name),
                )
            )

        return WeekSummary(
            total_achieved=len(achieved_in_week),
            total=int(total),
            achieved_goals_per_day=per_day,
        )
