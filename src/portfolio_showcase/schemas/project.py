# ABOUTME: Input and output schemas for portfolio projects.
# ABOUTME: Enforces non-empty text, at least one technology and well-formed links.

from typing import Annotated, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from portfolio_showcase.schemas.common import InputModel, PartialUpdate, UrlString, UtcDatetime

NonEmptyStr = Annotated[str, Field(min_length=1)]


class ProjectCreate(InputModel):
    """Payload for createProject."""

    title: Annotated[str, Field(min_length=1, description="Title is required")]
    description: Annotated[str, Field(min_length=1, description="Description is required")]
    technologies: Annotated[
        list[str], Field(min_length=1, description="At least one technology is required")
    ]
    demo_link: UrlString | None = None
    github_link: UrlString | None = None
    image_url: UrlString | None = None
    featured: bool = False


class ProjectUpdate(PartialUpdate):
    """Payload for updateProject. Only supplied fields change."""

    NON_NULLABLE: ClassVar[frozenset[str]] = frozenset(
        {"title", "description", "technologies", "featured"}
    )

    id: int
    title: NonEmptyStr | None = None
    description: NonEmptyStr | None = None
    technologies: Annotated[list[str] | None, Field(min_length=1)] = None
    demo_link: UrlString | None = None
    github_link: UrlString | None = None
    image_url: UrlString | None = None
    featured: bool | None = None


class ProjectRead(BaseModel):
    """A project as returned to API callers."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    technologies: list[str]
    demo_link: str | None
    github_link: str | None
    image_url: str | None
    featured: bool
    created_at: UtcDatetime
    updated_at: UtcDatetime
