"""Tests for remote key-set retrieval."""

import httpx
import pytest

from resume.auth.errors import KeySetDecodeError, NetworkError, UnexpectedStatus
from resume.auth.fetcher import (
    JWKS_FETCH_TIMEOUT_SECONDS,
    JWKSFetcher,
    build_http_client,
)
from tests.support import JWKS_URL, FakeJWKSEndpoint


class TestFetch:
    """Tests for JWKSFetcher.fetch."""

    async def test_returns_key_set(
        self, fetcher: JWKSFetcher, jwks_endpoint: FakeJWKSEndpoint
    ) -> None:
        key_set = await fetcher.fetch()
        assert len(key_set.keys) == 1
        assert key_set.keys[0].kid == "key1"
        assert key_set.keys[0].kty == "RSA"
        assert jwks_endpoint.calls == 1

    async def test_ignores_unknown_members(
        self, fetcher: JWKSFetcher, jwks_endpoint: FakeJWKSEndpoint
    ) -> None:
        jwks_endpoint.document = {
            "keys": [{"kty": "EC", "kid": "ec-1", "crv": "P-256", "x": "a", "y": "b"}],
            "issuer": "ignored",
        }
        key_set = await fetcher.fetch()
        assert key_set.keys[0].kid == "ec-1"
        assert key_set.keys[0].n == ""

    async def test_connection_failure_raises_network_error(
        self, fetcher: JWKSFetcher, jwks_endpoint: FakeJWKSEndpoint
    ) -> None:
        jwks_endpoint.error = httpx.ConnectError("connection refused")
        with pytest.raises(NetworkError):
            await fetcher.fetch()

    async def test_timeout_raises_network_error(
        self, fetcher: JWKSFetcher, jwks_endpoint: FakeJWKSEndpoint
    ) -> None:
        jwks_endpoint.error = httpx.ReadTimeout("too slow")
        with pytest.raises(NetworkError):
            await fetcher.fetch()

    async def test_non_200_raises_unexpected_status(
        self, fetcher: JWKSFetcher, jwks_endpoint: FakeJWKSEndpoint
    ) -> None:
        jwks_endpoint.status_code = 404
        with pytest.raises(UnexpectedStatus) as exc_info:
            await fetcher.fetch()
        assert exc_info.value.status_code == 404

    async def test_invalid_json_raises_decode_error(
        self, fetcher: JWKSFetcher, jwks_endpoint: FakeJWKSEndpoint
    ) -> None:
        jwks_endpoint.body = b"<html>not json</html>"
        with pytest.raises(KeySetDecodeError):
            await fetcher.fetch()

    async def test_missing_keys_array_raises_decode_error(
        self, fetcher: JWKSFetcher, jwks_endpoint: FakeJWKSEndpoint
    ) -> None:
        jwks_endpoint.document = {"not_keys": []}
        with pytest.raises(KeySetDecodeError):
            await fetcher.fetch()


class TestConstruction:
    """Tests for fetcher and client construction."""

    def test_requires_url(self) -> None:
        with pytest.raises(ValueError):
            JWKSFetcher("", httpx.AsyncClient())

    def test_exposes_url(self, fetcher: JWKSFetcher) -> None:
        assert fetcher.jwks_url == JWKS_URL

    async def test_http_client_has_fixed_timeout(self) -> None:
        async with build_http_client() as http:
            assert http.timeout.connect == JWKS_FETCH_TIMEOUT_SECONDS
            assert http.timeout.read == JWKS_FETCH_TIMEOUT_SECONDS
        assert JWKS_FETCH_TIMEOUT_SECONDS == 10.0
