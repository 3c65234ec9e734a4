"""SQLAlchemy model for the profile table."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from resume.db.base import BaseEntity


class ProfileEntity(BaseEntity):
    """The person the resume describes."""

    __tablename__ = "profile"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column("firstname", String(100), nullable=False)
    last_name: Mapped[str] = mapped_column("lastname", String(100), nullable=False)
    pronoun: Mapped[str] = mapped_column(String(30), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    postal_code: Mapped[int] = mapped_column(Integer, nullable=False)
    headline: Mapped[str] = mapped_column(String(255), nullable=False)
    about: Mapped[str] = mapped_column(Text, nullable=False)
    birth_date: Mapped[datetime] = mapped_column(
        "birthdate", DateTime(timezone=False), nullable=False
    )
