"""Declarative base for resume SQLAlchemy models."""

from sqlalchemy.orm import DeclarativeBase


class BaseEntity(DeclarativeBase):
    """Base class for all resume database entities."""
