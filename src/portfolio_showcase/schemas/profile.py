# ABOUTME: Input and output schemas for the owner profile.
# ABOUTME: Every update field is optional; required columns may be omitted but not nulled.

from typing import Annotated, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from portfolio_showcase.schemas.common import EmailString, PartialUpdate, UrlString, UtcDatetime

PROFILE_OPTIONAL_FIELDS = (
    "location",
    "phone",
    "linkedin_url",
    "github_url",
    "twitter_url",
    "website_url",
    "avatar_url",
    "resume_url",
)


class ProfileUpdate(PartialUpdate):
    """Payload for updateProfile. Creates the profile on first use."""

    NON_NULLABLE: ClassVar[frozenset[str]] = frozenset({"name", "title", "bio", "email"})
    KEY_FIELDS: ClassVar[frozenset[str]] = frozenset()

    name: Annotated[str | None, Field(min_length=1)] = None
    title: Annotated[str | None, Field(min_length=1, description="Professional title")] = None
    bio: Annotated[str | None, Field(min_length=1)] = None
    email: EmailString | None = None
    location: str | None = None
    phone: str | None = None
    linkedin_url: UrlString | None = None
    github_url: UrlString | None = None
    twitter_url: UrlString | None = None
    website_url: UrlString | None = None
    avatar_url: UrlString | None = None
    resume_url: UrlString | None = None


class ProfileRead(BaseModel):
    """The owner profile as returned to API callers."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    title: str
    bio: str
    email: str
    location: str | None
    phone: str | None
    linkedin_url: str | None
    github_url: str | None
    twitter_url: str | None
    website_url: str | None
    avatar_url: str | None
    resume_url: str | None
    updated_at: UtcDatetime
