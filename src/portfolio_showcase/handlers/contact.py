# ABOUTME: Handlers for the contact form inbox.
# ABOUTME: Messages can be submitted and listed newest first; they are never edited or removed.

from sqlmodel import col, select

from portfolio_showcase.handlers.base import BaseHandler
from portfolio_showcase.models import ContactMessage
from portfolio_showcase.schemas import ContactMessageCreate


class ContactMessageHandler(BaseHandler):
    """Append-only access to contact messages."""

    def create(self, data: ContactMessageCreate) -> ContactMessage:
        message = ContactMessage(
            name=data.name,
            email=str(data.email),
            subject=data.subject,
            message=data.message,
        )
        with self._session("Contact message creation") as session:
            session.add(message)
            session.commit()
            session.refresh(message)
        self._logger.info("Received contact message %s", message.id)
        return message

    def list_all(self, limit: int | None = None) -> list[ContactMessage]:
        """Return contact messages, newest first.

        Args:
            limit: Maximum number of messages to return. None for all of them.
        """
        statement = select(ContactMessage).order_by(
            col(ContactMessage.created_at).desc(),
            col(ContactMessage.id).desc(),
        )
        if limit is not None:
            statement = statement.limit(limit)
        with self._session("Contact message listing") as session:
            return list(session.exec(statement).all())
