"""JWK to RSA public key conversion."""

import base64
import binascii
import re

from cryptography.hazmat.primitives.asymmetric import rsa

from resume.auth.errors import MalformedKeyEncoding, UnsupportedKeyType
from resume.auth.types import PublicKeyHandle, SigningKey

RSA_KEY_TYPE = "RSA"

# Exponents are held as machine integers; real keys use 65537.
MAX_EXPONENT_BITS = 64

_BASE64URL_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


def _base64url_to_int(value: str, field: str) -> int:
    """Decode an unpadded base64url string as a big-endian unsigned integer."""
    stripped = value.rstrip("=")
    if not _BASE64URL_ALPHABET.fullmatch(stripped):
        raise MalformedKeyEncoding(f"failed to decode {field}: illegal base64url data")
    padded = stripped + "=" * (-len(stripped) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded)
    except (binascii.Error, ValueError) as exc:
        raise MalformedKeyEncoding(f"failed to decode {field}: {exc}") from exc
    if not raw:
        raise MalformedKeyEncoding(f"failed to decode {field}: empty value")
    return int.from_bytes(raw, byteorder="big")


def decode_signing_key(jwk: SigningKey) -> PublicKeyHandle:
    """Convert a JWK's modulus and exponent into a usable RSA public key."""
    if jwk.kty != RSA_KEY_TYPE:
        raise UnsupportedKeyType(f"unsupported key type: {jwk.kty}")

    n = _base64url_to_int(jwk.n, "modulus")
    e = _base64url_to_int(jwk.e, "exponent")
    if e.bit_length() > MAX_EXPONENT_BITS:
        raise MalformedKeyEncoding(
            f"exponent wider than {MAX_EXPONENT_BITS} bits is not supported"
        )

    try:
        public_key = rsa.RSAPublicNumbers(e=e, n=n).public_key()
    except ValueError as exc:
        raise MalformedKeyEncoding(f"invalid RSA public numbers: {exc}") from exc

    return PublicKeyHandle(kid=jwk.kid, n=n, e=e, alg=jwk.alg, key=public_key)
