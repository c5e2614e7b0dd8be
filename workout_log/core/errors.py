from __future__ import annotations


class WorkoutLogError(Exception):
    """Base error; ``public_message`` is the only text sent to the client."""

    public_message = "Internal Server Error"

    def __init__(self, message: str | None = None, *, public_message: str | None = None) -> None:
        super().__init__(message or self.public_message)
        if public_message is not None:
            self.public_message = public_message


class StorageError(WorkoutLogError):
    pass


class ExportError(WorkoutLogError):
    public_message = "Error exporting data"
