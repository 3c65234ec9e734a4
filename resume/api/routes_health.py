"""Unauthenticated liveness endpoint."""

from fastapi import APIRouter

from resume.api.schemas import HealthResponse


async def health() -> HealthResponse:
    """GET /health -- report that the service is up."""
    return HealthResponse()


def build_health_router(path: str = "/health") -> APIRouter:
    """Mount the liveness endpoint on the path the auth gate lets through."""
    router = APIRouter(tags=["health"])
    router.add_api_route(path, health, methods=["GET"])
    return router
