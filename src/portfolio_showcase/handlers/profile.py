# ABOUTME: Handler for the single owner profile.
# ABOUTME: Upsert that creates the profile with placeholders or patches the existing row.

from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, col, select

from portfolio_showcase.handlers.base import BaseHandler
from portfolio_showcase.models import Profile, utcnow
from portfolio_showcase.schemas import ProfileUpdate
from portfolio_showcase.schemas.profile import PROFILE_OPTIONAL_FIELDS

PROFILE_PLACEHOLDERS: dict[str, str] = {
    "name": "Default Name",
    "title": "Default Title",
    "bio": "Default Bio",
    "email": "default@example.com",
}


class ProfileHandler(BaseHandler):
    """Read and upsert the owner profile.

    There is no separate create operation: the first update on an empty
    store inserts the profile, filling required columns the caller did not
    supply with placeholders. Later updates patch that row. The profile
    table's UNIQUE singleton column keeps a second row from ever being
    inserted, even when two first updates race.
    """

    def get(self) -> Profile | None:
        """Return the profile, or None if it has not been created yet."""
        with self._session("Profile retrieval") as session:
            return self._first(session)

    def update(self, data: ProfileUpdate) -> Profile:
        """Create or patch the profile.

        Args:
            data: Validated payload; every field is optional.

        Returns:
            The stored Profile after the upsert.
        """
        changes = data.changes()
        with self._session("Profile update") as session:
            profile = self._first(session)
            if profile is None:
                try:
                    return self._insert(session, changes)
                except IntegrityError:
                    session.rollback()
                    profile = self._first(session)
                    if profile is None:
                        raise
                    self._logger.info(
                        "Profile %s was created concurrently; patching it instead", profile.id
                    )

            return self._patch(session, profile, changes)

    @staticmethod
    def _first(session: Session) -> Profile | None:
        # Lowest id wins if rows were ever inserted behind the API's back.
        statement = select(Profile).order_by(col(Profile.id)).limit(1)
        return session.exec(statement).first()

    def _insert(self, session: Session, changes: dict[str, Any]) -> Profile:
        values: dict[str, Any] = dict(PROFILE_PLACEHOLDERS)
        values.update({field: None for field in PROFILE_OPTIONAL_FIELDS})
        values.update(changes)

        profile = Profile(**values, updated_at=utcnow())
        session.add(profile)
        session.commit()
        session.refresh(profile)
        self._logger.info("Created profile %s", profile.id)
        return profile

    def _patch(self, session: Session, profile: Profile, changes: dict[str, Any]) -> Profile:
        for field, value in changes.items():
            setattr(profile, field, value)
        profile.updated_at = utcnow()

        session.add(profile)
        session.commit()
        session.refresh(profile)
        self._logger.info("Updated profile %s", profile.id)
        return profile
