"""Remote JSON Web Key Set retrieval."""

import httpx
from pydantic import ValidationError

from resume.auth.errors import KeySetDecodeError, NetworkError, UnexpectedStatus
from resume.auth.types import SigningKeySet
from resume.core.logging import get_logger

JWKS_FETCH_TIMEOUT_SECONDS = 10.0
HTTP_OK = 200

logger = get_logger(__name__)


def build_http_client() -> httpx.AsyncClient:
    """Create the HTTP client used for key-set requests."""
    return httpx.AsyncClient(timeout=JWKS_FETCH_TIMEOUT_SECONDS)


class JWKSFetcher:
    """Fetches the identity provider's key set with a single GET per call."""

    def __init__(self, jwks_url: str, client: httpx.AsyncClient) -> None:
        if not jwks_url:
            raise ValueError("JWKS URL must be provided")
        self._jwks_url = jwks_url
        self._client = client

    @property
    def jwks_url(self) -> str:
        return self._jwks_url

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def fetch(self) -> SigningKeySet:
        """GET the key set and parse it."""
        try:
            resp = await self._client.get(
                self._jwks_url, headers={"Accept": "application/json"}
            )
        except httpx.HTTPError as exc:
            raise NetworkError(f"failed to fetch JWKS: {exc}") from exc

        if resp.status_code != HTTP_OK:
            raise UnexpectedStatus(resp.status_code)

        try:
            key_set = SigningKeySet.model_validate_json(resp.content)
        except ValidationError as exc:
            raise KeySetDecodeError(f"failed to decode JWKS: {exc}") from exc

        logger.debug("jwks_fetched", url=self._jwks_url, keys=len(key_set.keys))
        return key_set
