# ABOUTME: SQLModel for the portfolio owner's profile.
# ABOUTME: A UNIQUE singleton column guarantees at most one profile row exists.

from datetime import datetime

from sqlmodel import Field, SQLModel

from portfolio_showcase.models.base import utcnow

PROFILE_SINGLETON_KEY = 1


class Profile(SQLModel, table=True):
    """The site owner's profile. Only one row is ever stored."""

    __tablename__ = "profile"

    id: int | None = Field(default=None, primary_key=True)
    singleton: int = Field(default=PROFILE_SINGLETON_KEY, unique=True)

    name: str
    title: str
    bio: str
    email: str

    location: str | None = None
    phone: str | None = None
    linkedin_url: str | None = None
    github_url: str | None = None
    twitter_url: str | None = None
    website_url: str | None = None
    avatar_url: str | None = None
    resume_url: str | None = None

    updated_at: datetime = Field(default_factory=utcnow)
