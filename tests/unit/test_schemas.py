# ABOUTME: Unit tests for the validation layer (input and read models).
# ABOUTME: Tests partial-update change sets, URL handling, email checks and UTC timestamps.

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from portfolio_showcase.models import Project
from portfolio_showcase.schemas import (
    ContactMessageCreate,
    ProfileUpdate,
    ProjectCreate,
    ProjectRead,
    ProjectUpdate,
    RecordId,
    SkillUpdate,
)


class TestPartialUpdateChanges:
    """Tests for PartialUpdate.changes and has_changes."""

    def test_omitted_fields_are_absent(self):
        """Test that only supplied fields appear in the change set."""
        update = ProjectUpdate(id=3, title="New title")

        assert update.changes() == {"title": "New title"}

    def test_explicit_null_is_present(self):
        """Test that an explicit null is kept distinct from omission."""
        update = ProjectUpdate.model_validate({"id": 3, "demo_link": None})

        assert update.changes() == {"demo_link": None}
        assert "github_link" not in update.changes()

    def test_id_is_never_a_change(self):
        """Test that the record key is excluded from the change set."""
        update = SkillUpdate(id=7)

        assert update.changes() == {}
        assert update.has_changes() is False

    def test_has_changes_with_field(self):
        """Test that has_changes reports supplied fields."""
        assert SkillUpdate(id=7, category="Tools").has_changes() is True

    def test_changes_follow_declaration_order(self):
        """Test that the change set is ordered like the model fields."""
        update = ProfileUpdate.model_validate({"resume_url": None, "name": "N", "bio": "B"})

        assert list(update.changes()) == ["name", "bio", "resume_url"]

    def test_profile_update_has_no_key_field(self):
        """Test that profile updates do not require an id."""
        assert ProfileUpdate(title="Dev").changes() == {"title": "Dev"}


class TestInputValidation:
    """Tests for constraints shared by the input models."""

    def test_unknown_keys_rejected(self):
        """Test that unexpected keys fail validation."""
        with pytest.raises(ValidationError):
            ProjectCreate.model_validate(
                {
                    "title": "T",
                    "description": "D",
                    "technologies": ["Go"],
                    "stars": 5,
                }
            )

    def test_url_kept_verbatim(self):
        """Test that URLs are validated but stored exactly as supplied."""
        project = ProjectCreate(
            title="T",
            description="D",
            technologies=["Go"],
            demo_link="https://example.com",
        )

        assert project.demo_link == "https://example.com"

    def test_record_id_requires_integer(self):
        """Test that ids must be integers."""
        with pytest.raises(ValidationError):
            RecordId.model_validate({"id": "abc"})

    def test_contact_email_validated(self):
        """Test that contact messages need a well-formed email."""
        with pytest.raises(ValidationError):
            ContactMessageCreate(name="N", email="missing-at.example.com", subject="S", message="M")

    def test_email_kept_verbatim(self):
        """Test that a valid email is not case-normalized."""
        message = ContactMessageCreate(
            name="N", email="Someone@Example.ORG", subject="S", message="M"
        )

        assert message.email == "Someone@Example.ORG"

    def test_null_rejected_for_non_nullable_update_field(self):
        """Test that the error names the field that was nulled."""
        with pytest.raises(ValidationError) as exc_info:
            ProjectUpdate.model_validate({"id": 1, "featured": None})
        assert "featured cannot be null" in str(exc_info.value)


class TestReadModels:
    """Tests for the read models returned to API callers."""

    def test_project_read_marks_naive_timestamps_as_utc(self):
        """Test that timestamps read back without a zone are rendered as UTC."""
        stamp = datetime(2025, 6, 15, 10, 30, 0)
        project = Project(
            id=1,
            title="T",
            description="D",
            technologies=["Go"],
            created_at=stamp,
            updated_at=stamp,
        )

        read = ProjectRead.model_validate(project)

        assert read.created_at.tzinfo is not None
        assert read.created_at == stamp.replace(tzinfo=UTC)
        assert read.model_dump(mode="json")["created_at"].endswith(("Z", "+00:00"))
