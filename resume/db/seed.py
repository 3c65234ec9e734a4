"""Seed data for a freshly bootstrapped resume store."""

from datetime import datetime

from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncSession

from resume.core.logging import get_logger
from resume.db.engine import create_schema, get_engine, get_session_factory
from resume.db.models_profile import ProfileEntity
from resume.db.models_sections import (
    CERTIFICATION,
    LICENCE,
    EducationEntity,
    ExperienceEntity,
    LicenceEntity,
    SkillEntity,
    skill_experience,
)
from resume.db.repo_profile import get_profile_by_id

SEED_PROFILE_ID = 1

logger = get_logger(__name__)

_SKILLS = [
    "PostgreSQL",
    "Git",
    "Apache Kafka",
    "OAuth2",
    "OIDC",
    "Terraform",
    "Ansible",
    "Azure",
    "Python",
    "Kubernetes",
]

# (experience id, skill id)
_SKILL_LINKS = [
    (1, 1),
    (1, 2),
    (2, 2),
    (2, 3),
    (2, 4),
    (2, 5),
    (2, 7),
    (3, 3),
    (3, 6),
    (3, 8),
    (3, 9),
    (3, 10),
]


def _profile() -> ProfileEntity:
    return ProfileEntity(
        id=SEED_PROFILE_ID,
        first_name="Alex",
        last_name="Doe",
        pronoun="They/Them",
        email="alex.doe@example.com",
        location="Switzerland - Vaud",
        postal_code=1000,
        headline="Integration Expert",
        about="There is no substitute for hard work.\n- Thomas Edison",
        birth_date=datetime(1990, 1, 1),
    )


def _experiences() -> list[ExperienceEntity]:
    return [
        ExperienceEntity(
            id=1,
            title="Information Technology Engineer",
            company="Regional Development Agency",
            location="Amiens",
            description="Customised an open-source ERP/CRM.\nWeb app development.",
            start_date=datetime(2014, 2, 1),
            end_date=datetime(2016, 7, 1),
            profile_id=SEED_PROFILE_ID,
        ),
        ExperienceEntity(
            id=2,
            title="Integration technical architect",
            company="Industrial Hydraulics",
            location="Verberie",
            description="Designed APIs and event-driven integrations.\n"
            "Built CI/CD pipelines and enforced API security policies.",
            start_date=datetime(2016, 8, 1),
            end_date=datetime(2023, 2, 1),
            profile_id=SEED_PROFILE_ID,
        ),
        ExperienceEntity(
            id=3,
            title="Integration expert",
            company="Insurance Group",
            location="Lausanne",
            description="Level 3 support on the integration platforms.\n"
            "Migration of the API management stack to the cloud.",
            start_date=datetime(2023, 2, 1),
            end_date=None,
            profile_id=SEED_PROFILE_ID,
        ),
    ]


def _educations() -> list[EducationEntity]:
    return [
        EducationEntity(
            id=1,
            title="University of Technology",
            description="System and Network Engineer.",
            issued_at=datetime(2014, 9, 1),
            profile_id=SEED_PROFILE_ID,
        ),
    ]


def _licences() -> list[LicenceEntity]:
    return [
        LicenceEntity(
            id=1,
            title="Certified Kubernetes Application Developer",
            issuer="The Linux Foundation",
            issued_at=datetime(2022, 10, 1),
            expires=datetime(2025, 10, 1),
            licence_type=CERTIFICATION,
            profile_id=SEED_PROFILE_ID,
        ),
        LicenceEntity(
            id=2,
            title="Certified Developer for Apache Kafka",
            issuer="Confluent",
            issued_at=datetime(2023, 1, 1),
            expires=datetime(2025, 1, 1),
            licence_type=CERTIFICATION,
            profile_id=SEED_PROFILE_ID,
        ),
        LicenceEntity(
            id=3,
            title="Driving licence",
            issuer="Road Traffic Office",
            issued_at=datetime(2008, 9, 1),
            expires=None,
            licence_type=LICENCE,
            profile_id=SEED_PROFILE_ID,
        ),
    ]


async def seed_resume(session: AsyncSession) -> bool:
    """Insert the seed resume unless the seed profile already exists."""
    if await get_profile_by_id(session, SEED_PROFILE_ID) is not None:
        return False

    session.add(_profile())
    session.add_all(
        [SkillEntity(id=i, name=name) for i, name in enumerate(_SKILLS, start=1)]
    )
    session.add_all(_experiences())
    session.add_all(_educations())
    session.add_all(_licences())
    await session.flush()

    await session.execute(
        insert(skill_experience),
        [{"experience_id": e, "skill_id": s} for e, s in _SKILL_LINKS],
    )
    await session.flush()
    return True


async def bootstrap_store() -> None:
    """Create the resume tables and insert the seed resume if it is missing."""
    await create_schema(get_engine())
    async with get_session_factory()() as session:
        inserted = await seed_resume(session)
        await session.commit()
    logger.info("store_bootstrapped", seeded=inserted)
