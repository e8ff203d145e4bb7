from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from orbit.core.time_utils import utcnow
from orbit.db import get_db
from orbit.schemas.goal import (
    AchievedGoalRead,
    GoalCreate,
    GoalRead,
    GoalWithAchievedCount,
    WeekSummary,
)
from orbit.services.goal_service import (
    GoalAlreadyCompletedError,
    GoalNotFoundError,
    GoalService,
)


router = APIRouter(prefix="/goals", tags=["goals"])


def get_clock():
    # Overridden in tests to pin the current week
    return utcnow


def get_goal_service(db: Session = Depends(get_db), clock=Depends(get_clock)) -> GoalService:
    return GoalService(db, clock=clock)


@router.post("/", response_model=GoalRead)
def create_goal(payload: GoalCreate, service: GoalService = Depends(get_goal_service)):
    try:
        return service.create(payload.title, payload.desired_weekly_frequency)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/", response_model=list[GoalWithAchievedCount])
def list_goals(service: GoalService = Depends(get_goal_service)):
    """
    Every goal created up to the end of the current week, each with
    how many times it was achieved this week.
    """
    return service.get_many()


@router.get("/summary", response_model=WeekSummary)
def get_week_summary(service: GoalService = Depends(get_goal_service)):
    return service.get_week_summary()


@router.post("/{goal_id}/achievements", response_model=AchievedGoalRead)
def complete_goal(goal_id: int, service: GoalService = Depends(get_goal_service)):
    try:
        return service.complete(goal_id)
    except GoalNotFoundError:
        raise HTTPException(status_code=404, detail="Goal not found")
    except GoalAlreadyCompletedError as e:
        raise HTTPException(status_code=409, detail=str(e))
