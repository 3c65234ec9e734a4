"""FastAPI application factory for the resume API."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from resume.api.errors import register_error_handlers
from resume.api.router_resume import router as resume_router
from resume.api.routes_health import build_health_router
from resume.auth.fetcher import JWKSFetcher, build_http_client
from resume.auth.gate import AuthenticationGate
from resume.auth.key_cache import KeyCache
from resume.auth.verifier import TokenVerifier
from resume.core.logging import configure_logging, get_logger
from resume.core.settings import AuthSettings, DatabaseSettings, LogSettings
from resume.db.engine import dispose_engine
from resume.db.seed import bootstrap_store

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""
    auth_settings = AuthSettings()
    db_settings = DatabaseSettings()
    log_settings = LogSettings()
    configure_logging(log_settings.level, json=log_settings.json_output)

    http_client = build_http_client()
    verifier = TokenVerifier(
        KeyCache(JWKSFetcher(auth_settings.jwks_url, http_client)),
        issuer=auth_settings.issuer,
        audience=auth_settings.audience,
    )

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        if db_settings.bootstrap:
            await bootstrap_store()
        logger.info("resume_api_started", jwks_url=auth_settings.jwks_url)
        try:
            yield
        finally:
            await http_client.aclose()
            await dispose_engine()

    app = FastAPI(
        title="Resume API",
        version="1.0.0",
        description="Displays resume sections as read-only APIs",
        lifespan=lifespan,
    )
    app.state.token_verifier = verifier

    app.add_middleware(AuthenticationGate, health_path=auth_settings.health_path)
    register_error_handlers(app)

    app.include_router(build_health_router(auth_settings.health_path))
    app.include_router(resume_router)

    return app
