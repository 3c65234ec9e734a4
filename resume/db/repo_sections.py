"""Read queries for the experience, education, licence, and skill sections."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from resume.db.models_sections import (
    EducationEntity,
    ExperienceEntity,
    LicenceEntity,
    SkillEntity,
    skill_experience,
)


async def get_experiences_by_profile(
    session: AsyncSession, profile_id: int
) -> list[ExperienceEntity]:
    """Return a profile's experiences, oldest first."""
    stmt = (
        select(ExperienceEntity)
        .where(ExperienceEntity.profile_id == profile_id)
        .order_by(ExperienceEntity.start_date, ExperienceEntity.id)
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_educations_by_profile(
    session: AsyncSession, profile_id: int
) -> list[EducationEntity]:
    """Return a profile's education entries."""
    stmt = (
        select(EducationEntity)
        .where(EducationEntity.profile_id == profile_id)
        .order_by(EducationEntity.issued_at, EducationEntity.id)
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_licences_by_profile(
    session: AsyncSession, profile_id: int
) -> list[LicenceEntity]:
    """Return a profile's licences and certifications."""
    stmt = (
        select(LicenceEntity)
        .where(LicenceEntity.profile_id == profile_id)
        .order_by(LicenceEntity.issued_at, LicenceEntity.id)
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_skills(session: AsyncSession) -> list[SkillEntity]:
    """Return every skill."""
    stmt = select(SkillEntity).order_by(SkillEntity.id)
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_skills_by_profile(
    session: AsyncSession, profile_id: int
) -> list[SkillEntity]:
    """Return the distinct skills used across a profile's experiences."""
    stmt = (
        select(SkillEntity)
        .join(skill_experience, skill_experience.c.skill_id == SkillEntity.id)
        .join(
            ExperienceEntity,
            ExperienceEntity.id == skill_experience.c.experience_id,
        )
        .where(ExperienceEntity.profile_id == profile_id)
        .distinct()
        .order_by(SkillEntity.id)
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_skills_by_experience(
    session: AsyncSession, experience_id: int
) -> list[SkillEntity]:
    """Return the skills linked to one experience."""
    stmt = (
        select(SkillEntity)
        .join(skill_experience, skill_experience.c.skill_id == SkillEntity.id)
        .where(skill_experience.c.experience_id == experience_id)
        .distinct()
        .order_by(SkillEntity.id)
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())
