# ABOUTME: Models package for the portfolio record store.
# ABOUTME: Exports the Project, Skill, ContactMessage and Profile SQLModel tables.

from portfolio_showcase.models.base import utcnow
from portfolio_showcase.models.contact import ContactMessage
from portfolio_showcase.models.profile import Profile
from portfolio_showcase.models.project import Project
from portfolio_showcase.models.skill import Skill

__all__ = ["ContactMessage", "Profile", "Project", "Skill", "utcnow"]
