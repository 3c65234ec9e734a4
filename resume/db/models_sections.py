"""SQLAlchemy models for the resume sections linked to a profile."""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column

from resume.db.base import BaseEntity

LICENCE = "Licence"
CERTIFICATION = "Certification"

skill_experience = Table(
    "skill_experience",
    BaseEntity.metadata,
    Column("experience_id", ForeignKey("experience.id"), primary_key=True),
    Column("skill_id", ForeignKey("skill.id"), primary_key=True),
)


class ExperienceEntity(BaseEntity):
    """A position held; ``end_date`` is null for the current one."""

    __tablename__ = "experience"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    company: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    profile_id: Mapped[int | None] = mapped_column(
        ForeignKey("profile.id"), nullable=True, index=True
    )


class EducationEntity(BaseEntity):
    """A degree or course."""

    __tablename__ = "education"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    issued_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    profile_id: Mapped[int | None] = mapped_column(
        ForeignKey("profile.id"), nullable=True, index=True
    )


class LicenceEntity(BaseEntity):
    """A licence or certification, optionally expiring."""

    __tablename__ = "licence"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    issuer: Mapped[str] = mapped_column(String(255), nullable=False)
    issued_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    expires: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    licence_type: Mapped[str] = mapped_column(
        String(20), nullable=False, default=CERTIFICATION
    )
    profile_id: Mapped[int | None] = mapped_column(
        ForeignKey("profile.id"), nullable=True, index=True
    )


class SkillEntity(BaseEntity):
    """A named skill, linked to experiences through ``skill_experience``."""

    __tablename__ = "skill"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
