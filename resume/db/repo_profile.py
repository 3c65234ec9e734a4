"""Profile repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from resume.db.models_profile import ProfileEntity


async def get_profile_by_id(
    session: AsyncSession, profile_id: int
) -> ProfileEntity | None:
    """Look up a profile by primary key."""
    stmt = select(ProfileEntity).where(ProfileEntity.id == profile_id)
    result = await session.execute(stmt)
    return result.scalar_one_or_none()

