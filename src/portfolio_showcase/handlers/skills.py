# ABOUTME: Query and mutation handlers for skills.
# ABOUTME: Lists skills by category, strongest first; updates never touch timestamps.

from sqlmodel import col, select

from portfolio_showcase.handlers.base import BaseHandler
from portfolio_showcase.models import Skill
from portfolio_showcase.schemas import SkillCreate, SkillUpdate


class SkillHandler(BaseHandler):
    """Create, list, update and delete skills."""

    def create(self, data: SkillCreate) -> Skill:
        skill = Skill(
            name=data.name,
            category=data.category,
            proficiency_level=data.proficiency_level,
        )
        with self._session("Skill creation") as session:
            session.add(skill)
            session.commit()
            session.refresh(skill)
        self._logger.info("Created skill %s", skill.id)
        return skill

    def list_all(self) -> list[Skill]:
        """Return skills ordered by category asc, then proficiency desc."""
        statement = select(Skill).order_by(
            col(Skill.category).asc(),
            col(Skill.proficiency_level).desc(),
            col(Skill.id).asc(),
        )
        with self._session("Skill listing") as session:
            return list(session.exec(statement).all())

    def update(self, data: SkillUpdate) -> Skill | None:
        """Apply the supplied fields to a skill.

        A payload carrying only the id is a no-op that returns the stored skill.

        Returns:
            The current Skill, or None if no skill has that id.
        """
        with self._session("Skill update") as session:
            skill = session.get(Skill, data.id)
            if skill is None:
                return None

            if not data.has_changes():
                return skill

            for field, value in data.changes().items():
                setattr(skill, field, value)
            session.add(skill)
            session.commit()
            session.refresh(skill)
        self._logger.info("Updated skill %s", skill.id)
        return skill

    def delete(self, skill_id: int) -> bool:
        with self._session("Skill deletion") as session:
            skill = session.get(Skill, skill_id)
            if skill is None:
                return False
            session.delete(skill)
            session.commit()
        self._logger.info("Deleted skill %s", skill_id)
        return True
