# ABOUTME: Input and output schemas for skills.
# ABOUTME: Proficiency is bounded to the 1-5 scale on create and update.

from typing import Annotated, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from portfolio_showcase.schemas.common import InputModel, PartialUpdate, UtcDatetime

ProficiencyLevel = Annotated[int, Field(ge=1, le=5, description="1 (novice) to 5 (expert)")]


class SkillCreate(InputModel):
    """Payload for createSkill."""

    name: Annotated[str, Field(min_length=1, description="Skill name is required")]
    category: Annotated[str, Field(min_length=1, description="Category is required")]
    proficiency_level: ProficiencyLevel


class SkillUpdate(PartialUpdate):
    """Payload for updateSkill. Only supplied fields change."""

    NON_NULLABLE: ClassVar[frozenset[str]] = frozenset({"name", "category", "proficiency_level"})

    id: int
    name: Annotated[str | None, Field(min_length=1)] = None
    category: Annotated[str | None, Field(min_length=1)] = None
    proficiency_level: ProficiencyLevel | None = None


class SkillRead(BaseModel):
    """A skill as returned to API callers."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category: str
    proficiency_level: int
    created_at: UtcDatetime
