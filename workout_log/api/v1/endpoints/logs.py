from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from workout_log.api.dependencies.exercise import get_exercise_log_service
from workout_log.api.dependencies.forms import get_submission
from workout_log.api.templating import templates
from workout_log.schemas.exercise import ExerciseLogSubmission
from workout_log.services.exercise_log import ExerciseLogService

router = APIRouter(tags=["logs"])


@router.get("/", response_class=HTMLResponse)
def entry_form(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request, "index.html")


@router.post("/submit")
def submit_entry(
    submission: ExerciseLogSubmission = Depends(get_submission),
    service: ExerciseLogService = Depends(get_exercise_log_service),
) -> RedirectResponse:
    service.submit_entry(submission)
    return RedirectResponse(url="/logs", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/logs", response_class=HTMLResponse)
def list_logs(
    request: Request,
    service: ExerciseLogService = Depends(get_exercise_log_service),
) -> HTMLResponse:
    view = service.build_log_view()
    return templates.TemplateResponse(
        request,
        "logs.html",
        {"entry_logs": view.entries, **view.averages},
    )
