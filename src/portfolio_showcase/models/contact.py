# ABOUTME: SQLModel for messages submitted through the contact form.
# ABOUTME: Messages are append-only; nothing updates or deletes them.

from datetime import datetime

from sqlmodel import Field, SQLModel

from portfolio_showcase.models.base import utcnow


class ContactMessage(SQLModel, table=True):
    """A message left by a site visitor."""

    __tablename__ = "contact_messages"

    id: int | None = Field(default=None, primary_key=True)
    name: str
    email: str
    subject: str
    message: str
    created_at: datetime = Field(default_factory=utcnow, index=True)
