"""Fake identity-provider helpers shared by the test suites."""

import asyncio
import base64
from typing import Any

import httpx
from cryptography.hazmat.primitives.asymmetric import rsa

ISSUER = "https://login.example.com/tenant-1/v2.0"
AUDIENCE = "resume-api-test"
JWKS_URL = "https://login.example.com/tenant-1/discovery/v2.0/keys"
KID = "key1"


def int_to_base64url(value: int) -> str:
    """Encode an integer as base64url without padding."""
    byte_length = (value.bit_length() + 7) // 8
    raw = value.to_bytes(byte_length, byteorder="big")
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()


def rsa_jwk(private_key: rsa.RSAPrivateKey, kid: str = KID) -> dict[str, str]:
    """Public JWK for ``private_key``."""
    numbers = private_key.public_key().public_numbers()
    return {
        "kty": "RSA",
        "kid": kid,
        "use": "sig",
        "n": int_to_base64url(numbers.n),
        "e": int_to_base64url(numbers.e),
        "alg": "RS256",
    }


class FakeJWKSEndpoint:
    """httpx mock handler standing in for the identity provider's JWKS URL."""

    def __init__(self, document: dict[str, Any]) -> None:
        self.document = document
        self.status_code = 200
        self.body: bytes | None = None
        self.error: Exception | None = None
        self.calls = 0

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls += 1
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        if self.body is not None:
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.document)
