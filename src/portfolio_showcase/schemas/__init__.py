# ABOUTME: Validation layer for API payloads and responses.
# ABOUTME: Exports the pydantic input models and read models for every entity.

from portfolio_showcase.schemas.common import PartialUpdate, RecordId
from portfolio_showcase.schemas.contact import ContactMessageCreate, ContactMessageRead
from portfolio_showcase.schemas.profile import ProfileRead, ProfileUpdate
from portfolio_showcase.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from portfolio_showcase.schemas.skill import SkillCreate, SkillRead, SkillUpdate

__all__ = [
    "ContactMessageCreate",
    "ContactMessageRead",
    "PartialUpdate",
    "ProfileRead",
    "ProfileUpdate",
    "ProjectCreate",
    "ProjectRead",
    "ProjectUpdate",
    "RecordId",
    "SkillCreate",
    "SkillRead",
    "SkillUpdate",
]
