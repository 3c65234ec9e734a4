"""Pydantic response schemas for the resume API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ProfileResponse(BaseModel):
    """A resume profile."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    pronoun: str
    email: str
    location: str
    postal_code: int
    headline: str
    about: str
    birth_date: datetime


class ExperienceResponse(BaseModel):
    """A position; ``end_date`` is null while it is held."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    company: str
    location: str
    description: str
    start_date: datetime
    end_date: datetime | None = None


class EducationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    issued_at: datetime


class LicenceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    issuer: str
    issued_at: datetime
    expires: datetime | None = None
    licence_type: str


class SkillResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class HealthResponse(BaseModel):
    """Liveness status."""

    status: str = "healthy"
