# ABOUTME: Shared building blocks for the input and output schemas.
# ABOUTME: Provides opaque URL and email strings, UTC timestamps and the partial-update base model.

from datetime import UTC, datetime
from typing import Annotated, Any, ClassVar, Self

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, AnyUrl, BaseModel, ConfigDict, TypeAdapter, model_validator

_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    """Validate that value parses as an absolute URL, returning it untouched."""
    _url_adapter.validate_python(value)
    return value


def _check_email(value: str) -> str:
    """Validate value as an email address, returning it untouched."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"value is not a valid email address: {e}") from e
    return value


def _as_utc(value: datetime) -> datetime:
    """Attach UTC to timestamps read back from stores that drop the zone."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


UrlString = Annotated[str, AfterValidator(_check_url)]
"""A URL that must parse but is stored exactly as supplied."""

EmailString = Annotated[str, AfterValidator(_check_email)]
"""An email address that must be valid but is stored exactly as supplied."""

UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class InputModel(BaseModel):
    """Base for request payloads. Unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")


class RecordId(InputModel):
    """Payload naming a single record."""

    id: int


class PartialUpdate(InputModel):
    """Base for update payloads where omission and explicit null differ.

    Every field is optional. A field the caller left out is absent from
    changes() and keeps its stored value; a field sent as null is present
    with value None and clears the stored value. Fields listed in
    NON_NULLABLE may be omitted but never sent as null.
    """

    NON_NULLABLE: ClassVar[frozenset[str]] = frozenset()
    KEY_FIELDS: ClassVar[frozenset[str]] = frozenset({"id"})

    @model_validator(mode="after")
    def _reject_null_for_required_columns(self) -> Self:
        for name in sorted(self.NON_NULLABLE & self.model_fields_set):
            if getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        """Return only the fields the caller supplied, keyed by name.

        Returns:
            Mapping of supplied field names to their values, in declaration order.
        """
        return {
            name: getattr(self, name)
            for name in type(self).model_fields
            if name in self.model_fields_set and name not in self.KEY_FIELDS
        }

    def has_changes(self) -> bool:
        """Return True if any field besides the record key was supplied."""
        return bool(self.model_fields_set - self.KEY_FIELDS)
