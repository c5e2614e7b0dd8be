from fastapi import APIRouter

from workout_log.api.v1.endpoints import export, health, logs

api_router = APIRouter()
api_router.include_router(logs.router)
api_router.include_router(export.router)
api_router.include_router(health.router)
