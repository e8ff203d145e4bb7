from datetime import timedelta
import random

from orbit.db import Base, SessionLocal, engine
from orbit.core.time_utils import utcnow
from orbit.models.achieved_goal import AchievedGoal
from orbit.models.goal import Goal
from orbit.services.goal_service import GoalAlreadyCompletedError, GoalService


DEMO_GOALS = [
    ("Wake up early", 5),
    ("Exercise", 3),
    ("Meditate", 7),
    ("Read 20 pages", 4),
]


def clear_goals(db) -> None:
    """Delete all goals and achievements so we can reseed cleanly."""
    db.query(AchievedGoal).delete()
    db.query(Goal).delete()
    db.commit()


def seed_demo_goals(db) -> None:
    """Create the demo goals a week ago and complete some of them on past days."""
    now = utcnow()
    created = now - timedelta(days=7)
    goals = [
        GoalService(db, clock=lambda: created).create(title, freq)
        for title, freq in DEMO_GOALS
    ]

    completed = 0
    for days_ago in range(6, -1, -1):
        day = now - timedelta(days=days_ago)
        service = GoalService(db, clock=lambda: day)
        for goal in goals:
            # Leave room so the week is not entirely done
            if random.random() < 0.5:
                continue
            try:
                service.complete(goal.id)
                completed += 1
            except GoalAlreadyCompletedError:
                continue

    print(f"Seeded {len(goals)} demo goals, {completed} completions")


def main():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        clear_goals(db)
        seed_demo_goals(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
