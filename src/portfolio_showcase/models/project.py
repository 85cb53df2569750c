# ABOUTME: SQLModel for portfolio projects.
# ABOUTME: Stores the technology list as a JSON column and tracks creation and update times.

from datetime import datetime

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from portfolio_showcase.models.base import utcnow


class Project(SQLModel, table=True):
    """A showcased project."""

    __tablename__ = "projects"

    id: int | None = Field(default=None, primary_key=True)
    title: str
    description: str
    technologies: list[str] = Field(sa_column=Column(JSON, nullable=False))
    demo_link: str | None = None
    github_link: str | None = None
    image_url: str | None = None
    featured: bool = Field(default=False, index=True)
    created_at: datetime = Field(default_factory=utcnow, index=True)
    updated_at: datetime = Field(default_factory=utcnow)
