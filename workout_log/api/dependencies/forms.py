from fastapi import Request

from workout_log.schemas.exercise import ExerciseLogSubmission


async def get_submission(request: Request) -> ExerciseLogSubmission:
    form = await request.form()
    fields = {key: value for key, value in form.items() if isinstance(value, str)}
    return ExerciseLogSubmission.model_validate(fields)
