# ABOUTME: SQLModel for skills listed on the portfolio.
# ABOUTME: Skills carry a free-form category and a 1-5 proficiency level; no update timestamp.

from datetime import datetime

from sqlmodel import Field, SQLModel

from portfolio_showcase.models.base import utcnow


class Skill(SQLModel, table=True):
    """A skill with a proficiency rating."""

    __tablename__ = "skills"

    id: int | None = Field(default=None, primary_key=True)
    name: str
    category: str = Field(index=True)
    proficiency_level: int = Field(ge=1, le=5, description="1 (novice) to 5 (expert)")
    created_at: datetime = Field(default_factory=utcnow)
