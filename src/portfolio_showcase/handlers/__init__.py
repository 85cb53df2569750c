# ABOUTME: Query and mutation handlers for every portfolio entity.
# ABOUTME: Exports one handler class per table, each built on a shared DatabaseService.

from portfolio_showcase.handlers.contact import ContactMessageHandler
from portfolio_showcase.handlers.profile import PROFILE_PLACEHOLDERS, ProfileHandler
from portfolio_showcase.handlers.projects import ProjectHandler
from portfolio_showcase.handlers.skills import SkillHandler

__all__ = [
    "PROFILE_PLACEHOLDERS",
    "ContactMessageHandler",
    "ProfileHandler",
    "ProjectHandler",
    "SkillHandler",
]
