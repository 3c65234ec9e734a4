"""Type definitions for key sets, decoded keys, and verified claims."""

from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey
from pydantic import BaseModel, ConfigDict


class SigningKey(BaseModel):
    """Single JWK entry as published by the identity provider."""

    model_config = ConfigDict(extra="ignore")

    kty: str = ""
    kid: str = ""
    use: str = ""
    n: str = ""
    e: str = ""
    alg: str = ""


class SigningKeySet(BaseModel):
    """JSON Web Key Set response."""

    model_config = ConfigDict(extra="ignore")

    keys: list[SigningKey]


class PublicKeyHandle(BaseModel):
    """Decoded RSA public key, immutable once built."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kid: str
    n: int
    e: int
    alg: str = ""
    key: RSAPublicKey


class TokenClaims(BaseModel):
    """Registered claims of a verified token."""

    model_config = ConfigDict(frozen=True, extra="allow")

    iss: str
    aud: str | list[str]
    exp: int | float
    sub: str | None = None
    iat: int | float | None = None
    nbf: int | float | None = None
    jti: str | None = None
