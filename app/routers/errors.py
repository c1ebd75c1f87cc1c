from fastapi import HTTPException

from app.services.narration import InvalidNarrationTransition
from app.services.orchestrator import MissingPrerequisite, StepFailed, StepInProgress
from app.services.session_store import SessionNotFound


def http_error(e: Exception) -> HTTPException:
    """Maps orchestration errors onto the HTTP status the client sees."""
    if isinstance(e, StepFailed):
        # Same shape as the toast: variant, title, description
        return HTTPException(
            status_code=502,
            detail=e.notification.model_dump(by_alias=True, mode="json"),
        )
    if isinstance(e, SessionNotFound):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, (StepInProgress, InvalidNarrationTransition)):
        return HTTPException(status_code=409, detail=str(e))
    if isinstance(e, MissingPrerequisite):
        return HTTPException(status_code=400, detail=str(e))
    return HTTPException(
        status_code=500,
        detail=f"An internal server error occurred: {str(e)}",
    )


HANDLED_ERRORS = (
    StepFailed,
    SessionNotFound,
    StepInProgress,
    InvalidNarrationTransition,
    MissingPrerequisite,
)
