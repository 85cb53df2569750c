# ABOUTME: Database statistics functionality for the status command.
# ABOUTME: Provides aggregated counts for projects, skills, contact messages and the profile.

from typing import Any

from sqlmodel import func, select

from portfolio_showcase.database.service import DatabaseService
from portfolio_showcase.models import ContactMessage, Profile, Project, Skill


def get_database_stats(db_service: DatabaseService) -> dict[str, Any]:
    """Get statistics about the records stored in the database.

    Args:
        db_service: The DatabaseService instance to query.

    Returns:
        Dictionary containing:
            - total_projects: Number of stored projects
            - featured_projects: Number of projects flagged as featured
            - total_skills: Number of stored skills
            - skill_categories: Sorted list of distinct skill categories
            - total_messages: Number of contact messages received
            - latest_message_at: Creation time of the newest message, or None
            - has_profile: Whether the owner profile has been created
    """
    with db_service.get_session() as session:
        total_projects = session.exec(select(func.count()).select_from(Project)).one()

        featured_stmt = select(func.count()).select_from(Project).where(Project.featured)
        featured_projects = session.exec(featured_stmt).one()

        total_skills = session.exec(select(func.count()).select_from(Skill)).one()

        categories_stmt = select(Skill.category).distinct().order_by(Skill.category)
        skill_categories = list(session.exec(categories_stmt).all())

        total_messages = session.exec(select(func.count()).select_from(ContactMessage)).one()

        latest_stmt = select(func.max(ContactMessage.created_at))
        latest_message_at = session.exec(latest_stmt).one()

        profile_count = session.exec(select(func.count()).select_from(Profile)).one()

    return {
        "total_projects": total_projects,
        "featured_projects": featured_projects,
        "total_skills": total_skills,
        "skill_categories": skill_categories,
        "total_messages": total_messages,
        "latest_message_at": latest_message_at,
        "has_profile": profile_count > 0,
    }
