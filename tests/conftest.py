"""Shared test fixtures for the resume API."""

import time
from collections.abc import AsyncIterator, Callable
from typing import Any

import httpx
import jwt
import pytest
from cryptography.hazmat.primitives.asymmetric import rsa
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from resume.auth.fetcher import JWKSFetcher
from resume.auth.key_cache import KeyCache
from resume.auth.verifier import TokenVerifier
from resume.core.app import create_app
from resume.db.base import BaseEntity
from resume.db.engine import get_session
from tests.support import (
    AUDIENCE,
    ISSUER,
    JWKS_URL,
    KID,
    FakeJWKSEndpoint,
    rsa_jwk,
)


@pytest.fixture(autouse=True)
def _set_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set environment variables for test settings."""
    monkeypatch.setenv("RESUME_AUTH_ISSUER", ISSUER)
    monkeypatch.setenv("RESUME_AUTH_AUDIENCE", AUDIENCE)
    monkeypatch.setenv("RESUME_AUTH_JWKS_URL", JWKS_URL)
    monkeypatch.setenv("RESUME_DB_BOOTSTRAP", "false")
    monkeypatch.setenv("RESUME_LOG_JSON_OUTPUT", "false")


@pytest.fixture(scope="session")
def signing_key() -> rsa.RSAPrivateKey:
    """RSA-2048 key the fake identity provider signs with."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture
def jwks_endpoint(signing_key: rsa.RSAPrivateKey) -> FakeJWKSEndpoint:
    return FakeJWKSEndpoint({"keys": [rsa_jwk(signing_key)]})


@pytest.fixture
async def jwks_http_client(
    jwks_endpoint: FakeJWKSEndpoint,
) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.MockTransport(jwks_endpoint)
    async with httpx.AsyncClient(transport=transport, timeout=10.0) as http:
        yield http


@pytest.fixture
def fetcher(jwks_http_client: httpx.AsyncClient) -> JWKSFetcher:
    return JWKSFetcher(JWKS_URL, jwks_http_client)


@pytest.fixture
def key_cache(fetcher: JWKSFetcher) -> KeyCache:
    return KeyCache(fetcher)


@pytest.fixture
def verifier(key_cache: KeyCache) -> TokenVerifier:
    return TokenVerifier(key_cache, issuer=ISSUER, audience=AUDIENCE)


@pytest.fixture
def issue_token(signing_key: rsa.RSAPrivateKey) -> Callable[..., str]:
    """Factory for tokens the fake identity provider would issue."""

    def _issue(
        *,
        kid: str | None = KID,
        key: rsa.RSAPrivateKey | None = None,
        algorithm: str = "RS256",
        **claims: Any,
    ) -> str:
        payload: dict[str, Any] = {
            "iss": ISSUER,
            "aud": AUDIENCE,
            "sub": "user-1",
            "iat": int(time.time()),
            "exp": int(time.time()) + 3600,
        }
        payload.update(claims)
        payload = {k: v for k, v in payload.items() if v is not None}
        headers = {"kid": kid} if kid is not None else {}
        return jwt.encode(
            payload, key or signing_key, algorithm=algorithm, headers=headers
        )

    return _issue


@pytest.fixture
def auth_headers(issue_token: Callable[..., str]) -> dict[str, str]:
    """Authorization header carrying a valid bearer token."""
    return {"Authorization": f"Bearer {issue_token()}"}


@pytest.fixture
async def db_session() -> AsyncIterator[AsyncSession]:
    """Create an in-memory SQLite async session for tests."""
    engine = create_async_engine("sqlite+aiosqlite://", echo=False)

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, _rec) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(BaseEntity.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session

    await engine.dispose()


@pytest.fixture
async def client(
    db_session: AsyncSession, verifier: TokenVerifier
) -> AsyncIterator[AsyncClient]:
    """httpx test client with DB session and token verifier overrides."""
    app = create_app()

    async def _override_session() -> AsyncIterator[AsyncSession]:
        try:
            yield db_session
            await db_session.commit()
        except Exception:
            await db_session.rollback()
            raise

    app.dependency_overrides[get_session] = _override_session
    app.state.token_verifier = verifier

    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
