# ABOUTME: Input and output schemas for contact form messages.
# ABOUTME: All fields are required and the sender address must be a valid email.

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from portfolio_showcase.schemas.common import EmailString, InputModel, UtcDatetime


class ContactMessageCreate(InputModel):
    """Payload for createContactMessage."""

    name: Annotated[str, Field(min_length=1, description="Name is required")]
    email: EmailString
    subject: Annotated[str, Field(min_length=1, description="Subject is required")]
    message: Annotated[str, Field(min_length=1, description="Message is required")]


class ContactMessageRead(BaseModel):
    """A stored contact message."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    subject: str
    message: str
    created_at: UtcDatetime
