"""Resume endpoints: profile, experiences, educations, licences, skills."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from resume.api.errors import ProfileNotFound, SectionNotFetched
from resume.api.schemas import (
    EducationResponse,
    ExperienceResponse,
    LicenceResponse,
    ProfileResponse,
    SkillResponse,
)
from resume.db.engine import get_session
from resume.db.repo_profile import get_profile_by_id
from resume.db.repo_sections import (
    get_educations_by_profile,
    get_experiences_by_profile,
    get_licences_by_profile,
    get_skills,
    get_skills_by_experience,
    get_skills_by_profile,
)

router = APIRouter(tags=["resume"])

DbSession = Annotated[AsyncSession, Depends(get_session)]


@router.get("/profiles/{profile_id}")
async def get_profile(profile_id: int, db: DbSession) -> ProfileResponse:
    """GET /profiles/{id} -- the profile header of the resume."""
    try:
        profile = await get_profile_by_id(db, profile_id)
    except SQLAlchemyError as exc:
        raise SectionNotFetched("profile") from exc
    if profile is None:
        raise ProfileNotFound()
    return ProfileResponse.model_validate(profile)


@router.get("/profiles/{profile_id}/experiences")
async def list_profile_experiences(
    profile_id: int, db: DbSession
) -> list[ExperienceResponse]:
    """GET /profiles/{id}/experiences."""
    try:
        rows = await get_experiences_by_profile(db, profile_id)
    except SQLAlchemyError as exc:
        raise SectionNotFetched("experiences") from exc
    return [ExperienceResponse.model_validate(r) for r in rows]


@router.get("/profiles/{profile_id}/educations")
async def list_profile_educations(
    profile_id: int, db: DbSession
) -> list[EducationResponse]:
    """GET /profiles/{id}/educations."""
    try:
        rows = await get_educations_by_profile(db, profile_id)
    except SQLAlchemyError as exc:
        raise SectionNotFetched("educations") from exc
    return [EducationResponse.model_validate(r) for r in rows]


@router.get("/profiles/{profile_id}/licences")
async def list_profile_licences(
    profile_id: int, db: DbSession
) -> list[LicenceResponse]:
    """GET /profiles/{id}/licences."""
    try:
        rows = await get_licences_by_profile(db, profile_id)
    except SQLAlchemyError as exc:
        raise SectionNotFetched("licences") from exc
    return [LicenceResponse.model_validate(r) for r in rows]


@router.get("/profiles/{profile_id}/skills")
async def list_profile_skills(profile_id: int, db: DbSession) -> list[SkillResponse]:
    """GET /profiles/{id}/skills -- distinct skills over all experiences."""
    try:
        rows = await get_skills_by_profile(db, profile_id)
    except SQLAlchemyError as exc:
        raise SectionNotFetched("skills") from exc
    return [SkillResponse.model_validate(r) for r in rows]


@router.get("/experiences/{experience_id}/skills")
async def list_experience_skills(
    experience_id: int, db: DbSession
) -> list[SkillResponse]:
    """GET /experiences/{id}/skills."""
    try:
        rows = await get_skills_by_experience(db, experience_id)
    except SQLAlchemyError as exc:
        raise SectionNotFetched("skills") from exc
    return [SkillResponse.model_validate(r) for r in rows]


@router.get("/skills")
async def list_skills(db: DbSession) -> list[SkillResponse]:
    """GET /skills -- every skill on record."""
    try:
        rows = await get_skills(db)
    except SQLAlchemyError as exc:
        raise SectionNotFetched("skills") from exc
    return [SkillResponse.model_validate(r) for r in rows]
