"""Request-level bearer-token gate."""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.types import ASGIApp

from resume.auth.errors import TokenVerificationError
from resume.auth.verifier import TokenVerifier
from resume.core.logging import get_logger

HTTP_UNAUTHORIZED = 401
BEARER_SCHEME = "Bearer"
BEARER_PREFIX = BEARER_SCHEME + " "

MSG_NO_TOKEN = "no token sent"
MSG_NOT_BEARER = "not a bearer token"
MSG_UNAUTHORIZED = "unauthorized"
MSG_INVALID_TOKEN = "invalid token"

logger = get_logger(__name__)


def _reject(message: str) -> PlainTextResponse:
    return PlainTextResponse(
        message,
        status_code=HTTP_UNAUTHORIZED,
        headers={"WWW-Authenticate": BEARER_SCHEME},
    )


class AuthenticationGate(BaseHTTPMiddleware):
    """Lets a request through only with a verified bearer token.

    The health path bypasses the check. The verifier is read from
    ``app.state.token_verifier`` on every request.
    """

    def __init__(self, app: ASGIApp, health_path: str = "/health") -> None:
        super().__init__(app)
        self._health_path = health_path

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path == self._health_path:
            return await call_next(request)

        header = request.headers.get("Authorization")
        if not header:
            return _reject(MSG_NO_TOKEN)

        if not header.startswith(BEARER_PREFIX):
            return _reject(MSG_NOT_BEARER)

        token = header[len(BEARER_PREFIX) :]
        if not token:
            return _reject(MSG_UNAUTHORIZED)

        verifier: TokenVerifier = request.app.state.token_verifier
        try:
            claims = await verifier.verify(token)
        except TokenVerificationError as exc:
            cause = exc.__cause__
            logger.warning(
                "token_rejected",
                path=request.url.path,
                code=exc.code,
                cause=getattr(cause, "code", None),
                reason=str(exc),
            )
            return _reject(MSG_INVALID_TOKEN)

        request.state.claims = claims
        return await call_next(request)
