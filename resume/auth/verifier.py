"""Bearer-token verification against the identity provider's signing keys."""

import jwt

from resume.auth.errors import (
    ClaimValidationFailed,
    ExpiredToken,
    InvalidAudience,
    InvalidIssuer,
    InvalidSignature,
    KeyResolutionFailed,
    KeySetError,
    MalformedToken,
    MissingKeyId,
    UnsupportedAlgorithm,
)
from resume.auth.key_cache import KeyCache
from resume.auth.types import TokenClaims

RSA_ALGORITHMS = frozenset({"RS256", "RS384", "RS512"})
REQUIRED_CLAIMS = ["exp", "iss", "aud"]


class TokenVerifier:
    """Verifies RS-signed JWTs: signature, issuer, audience, and expiry."""

    def __init__(self, key_cache: KeyCache, issuer: str, audience: str) -> None:
        self._key_cache = key_cache
        self._issuer = issuer
        self._audience = audience

    @property
    def key_cache(self) -> KeyCache:
        return self._key_cache

    async def verify(self, token: str) -> TokenClaims:
        """Verify ``token`` and return its claims.

        Raises a ``TokenVerificationError`` subclass at the first failing check.
        """
        try:
            header = jwt.get_unverified_header(token)
            jwt.decode(token, options={"verify_signature": False})
        except jwt.PyJWTError as exc:
            raise MalformedToken(f"failed to parse token: {exc}") from exc

        alg = header.get("alg")
        if alg not in RSA_ALGORITHMS:
            raise UnsupportedAlgorithm(f"unexpected signing method: {alg}")

        kid = header.get("kid")
        if not isinstance(kid, str) or not kid:
            raise MissingKeyId("token header missing kid")

        try:
            handle = await self._key_cache.resolve(kid)
        except KeySetError as exc:
            raise KeyResolutionFailed(str(exc)) from exc

        try:
            raw = jwt.decode(
                token,
                handle.key,
                algorithms=[alg],
                issuer=self._issuer,
                audience=self._audience,
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.InvalidSignatureError as exc:
            raise InvalidSignature("signature verification failed") from exc
        except jwt.ExpiredSignatureError as exc:
            raise ExpiredToken("token has expired") from exc
        except jwt.InvalidIssuerError as exc:
            raise InvalidIssuer(str(exc)) from exc
        except jwt.InvalidAudienceError as exc:
            raise InvalidAudience(str(exc)) from exc
        except jwt.MissingRequiredClaimError as exc:
            raise ClaimValidationFailed(str(exc)) from exc
        except jwt.InvalidTokenError as exc:
            raise ClaimValidationFailed(str(exc)) from exc

        try:
            claims = TokenClaims.model_validate(raw)
        except ValueError as exc:
            raise ClaimValidationFailed(f"unexpected claim shape: {exc}") from exc

        self.validate_custom_claims(claims)
        return claims

    def validate_custom_claims(self, claims: TokenClaims) -> None:
        """Hook for service-specific claim policy; accepts every token."""
