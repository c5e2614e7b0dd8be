from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from workout_log.api.dependencies.db import get_database
from workout_log.core.errors import StorageError
from workout_log.db.session import Database

router = APIRouter(tags=["health"])


@router.get("/health")
def health(database: Database = Depends(get_database)) -> dict[str, str]:
    try:
        database.ping()
    except SQLAlchemyError as exc:
        raise StorageError(f"Health check failed: {exc}") from exc
    return {"status": "ok"}
