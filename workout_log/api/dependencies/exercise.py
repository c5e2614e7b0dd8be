from fastapi import Depends
from sqlalchemy.orm import Session

from workout_log.api.dependencies.db import get_db_session
from workout_log.repositories.exercise import ExerciseLogRepository
from workout_log.services.exercise_log import ExerciseLogService


def get_exercise_log_service(db: Session = Depends(get_db_session)) -> ExerciseLogService:
    return ExerciseLogService(db, ExerciseLogRepository(db))
