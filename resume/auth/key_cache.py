"""TTL cache of decoded signing keys, refreshed as a whole."""

import asyncio
import time
from collections.abc import Callable, Mapping
from types import MappingProxyType

from resume.auth.errors import KeyDecodeError, KeyNotFound
from resume.auth.fetcher import JWKSFetcher
from resume.auth.keys import decode_signing_key
from resume.auth.types import PublicKeyHandle
from resume.core.logging import get_logger

KEY_CACHE_TTL_SECONDS = 3600.0

logger = get_logger(__name__)

_EMPTY: Mapping[str, PublicKeyHandle] = MappingProxyType({})


class KeyCache:
    """Resolves key ids to public keys, refetching the key set on miss or expiry.

    The cached mapping is a read-only snapshot replaced in one assignment, so
    concurrent readers see either the previous set or the new one. Refreshes
    are serialized; a caller that waited out another caller's refresh reuses
    its result instead of fetching again.
    """

    def __init__(
        self,
        fetcher: JWKSFetcher,
        *,
        ttl_seconds: float = KEY_CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._fetcher = fetcher
        self._ttl = ttl_seconds
        self._clock = clock
        self._keys: Mapping[str, PublicKeyHandle] = _EMPTY
        self._fetched_at: float | None = None
        self._generation = 0
        self._lock = asyncio.Lock()

    @property
    def fetcher(self) -> JWKSFetcher:
        return self._fetcher

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    @property
    def key_ids(self) -> list[str]:
        """Key ids in the current snapshot."""
        return list(self._keys)

    def is_fresh(self) -> bool:
        """Whether the last successful fetch is within the TTL."""
        if self._fetched_at is None:
            return False
        return self._clock() - self._fetched_at < self._ttl

    def invalidate(self) -> None:
        """Mark the snapshot stale so the next lookup refetches."""
        self._fetched_at = None

    async def resolve(self, kid: str) -> PublicKeyHandle:
        """Return the public key for ``kid``, refreshing the key set if needed."""
        if self.is_fresh():
            cached = self._keys.get(kid)
            if cached is not None:
                return cached

        observed = self._generation
        async with self._lock:
            if self._generation == observed:
                await self._refresh()
            handle = self._keys.get(kid)

        if handle is None:
            raise KeyNotFound(kid)
        return handle

    async def _refresh(self) -> None:
        key_set = await self._fetcher.fetch()

        decoded: dict[str, PublicKeyHandle] = {}
        for jwk in key_set.keys:
            if not jwk.kid:
                logger.warning("signing_key_skipped", reason="missing kid")
                continue
            try:
                decoded[jwk.kid] = decode_signing_key(jwk)
            except KeyDecodeError as exc:
                logger.warning(
                    "signing_key_skipped",
                    kid=jwk.kid,
                    kty=jwk.kty,
                    code=exc.code,
                    reason=str(exc),
                )

        self._keys = MappingProxyType(decoded)
        self._fetched_at = self._clock()
        self._generation += 1
        logger.info(
            "jwks_refreshed",
            url=self._fetcher.jwks_url,
            keys=len(decoded),
            skipped=len(key_set.keys) - len(decoded),
        )
