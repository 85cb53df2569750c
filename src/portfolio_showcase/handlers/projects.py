# ABOUTME: Query and mutation handlers for portfolio projects.
# ABOUTME: Lists featured projects first, newest first in each group; applies partial updates.

from sqlmodel import col, select

from portfolio_showcase.handlers.base import BaseHandler
from portfolio_showcase.models import Project, utcnow
from portfolio_showcase.schemas import ProjectCreate, ProjectUpdate


class ProjectHandler(BaseHandler):
    """Create, list, fetch, update and delete projects."""

    def create(self, data: ProjectCreate) -> Project:
        """Persist a new project.

        Args:
            data: Validated creation payload.

        Returns:
            The stored Project with id and timestamps populated.
        """
        now = utcnow()
        project = Project(
            title=data.title,
            description=data.description,
            technologies=list(data.technologies),
            demo_link=data.demo_link,
            github_link=data.github_link,
            image_url=data.image_url,
            featured=data.featured,
            created_at=now,
            updated_at=now,
        )
        with self._session("Project creation") as session:
            session.add(project)
            session.commit()
            session.refresh(project)
        self._logger.info("Created project %s", project.id)
        return project

    def list_all(self) -> list[Project]:
        """Return every project, featured first, then newest first.

        Returns:
            Projects ordered by featured desc, created_at desc, id desc.
        """
        statement = select(Project).order_by(
            col(Project.featured).desc(),
            col(Project.created_at).desc(),
            col(Project.id).desc(),
        )
        with self._session("Project listing") as session:
            return list(session.exec(statement).all())

    def get_by_id(self, project_id: int) -> Project | None:
        """Fetch a single project.

        Args:
            project_id: Id of the project.

        Returns:
            The Project if found, None otherwise.
        """
        with self._session("Project lookup") as session:
            return session.get(Project, project_id)

    def update(self, data: ProjectUpdate) -> Project | None:
        """Apply the supplied fields to a project.

        Fields absent from the payload keep their stored values; fields
        sent as null are cleared. updated_at is refreshed on every call,
        even when nothing else changes.

        Args:
            data: Validated update payload.

        Returns:
            The updated Project, or None if no project has that id.
        """
        with self._session("Project update") as session:
            project = session.get(Project, data.id)
            if project is None:
                return None

            for field, value in data.changes().items():
                setattr(project, field, value)
            project.updated_at = utcnow()

            session.add(project)
            session.commit()
            session.refresh(project)
        self._logger.info("Updated project %s", project.id)
        return project

    def delete(self, project_id: int) -> bool:
        """Delete a project.

        Args:
            project_id: Id of the project.

        Returns:
            True if a project was removed, False if none matched.
        """
        with self._session("Project deletion") as session:
            project = session.get(Project, project_id)
            if project is None:
                return False
            session.delete(project)
            session.commit()
        self._logger.info("Deleted project %s", project_id)
        return True
