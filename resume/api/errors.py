"""Error responses for the resume API."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse

from resume.core.logging import get_logger

HTTP_BAD_REQUEST = 400
HTTP_NOT_FOUND = 404
HTTP_INTERNAL_ERROR = 500

ERR_INVALID_ID = "invalid id"

logger = get_logger(__name__)


class ResumeAPIError(Exception):
    """An error answered as ``{"error": message}`` with ``status_code``."""

    def __init__(self, message: str, status_code: int = HTTP_INTERNAL_ERROR) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ProfileNotFound(ResumeAPIError):
    def __init__(self) -> None:
        super().__init__("profile not found", status_code=HTTP_NOT_FOUND)


class SectionNotFetched(ResumeAPIError):
    """The store failed while reading one resume section."""

    def __init__(self, section: str) -> None:
        super().__init__(f"failed to fetch {section}")
        self.section = section


async def _resume_error_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, ResumeAPIError)
    if exc.status_code >= HTTP_INTERNAL_ERROR:
        logger.error(
            "resume_request_failed",
            path=request.url.path,
            error=exc.message,
            cause=repr(exc.__cause__),
        )
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def _validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.info("invalid_request", path=request.url.path, error=str(exc))
    return JSONResponse({"error": ERR_INVALID_ID}, status_code=HTTP_BAD_REQUEST)


def register_error_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on ``app``."""
    app.add_exception_handler(ResumeAPIError, _resume_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
