import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from orbit.api.goals import router as goals_router
from orbit.db import Base, engine
from orbit.models.goal import Goal  # noqa: F401  (import ensures table is registered)
from orbit.models.achieved_goal import AchievedGoal  # noqa: F401
from orbit.core.config import settings


logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI()

# Allow CORS for local frontend
origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create DB tables (goals, achieved_goals) on startup
Base.metadata.create_all(bind=engine)

app.include_router(goals_router)


@app.get("/")
def root():
    return {"message": "Orbit backend is running"}
