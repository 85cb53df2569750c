# ABOUTME: Registry of the named remote operations exposed by the API.
# ABOUTME: Validates each payload, invokes the matching handler and serializes the result.

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel

from portfolio_showcase.database import DatabaseService
from portfolio_showcase.errors import MethodNotAllowedError, UnknownOperationError
from portfolio_showcase.handlers import (
    ContactMessageHandler,
    ProfileHandler,
    ProjectHandler,
    SkillHandler,
)
from portfolio_showcase.schemas import (
    ContactMessageCreate,
    ContactMessageRead,
    ProfileRead,
    ProfileUpdate,
    ProjectCreate,
    ProjectRead,
    ProjectUpdate,
    RecordId,
    SkillCreate,
    SkillRead,
    SkillUpdate,
)


class OperationKind(str, Enum):
    """Whether an operation only reads or also writes."""

    QUERY = "query"
    MUTATION = "mutation"


@dataclass(frozen=True)
class Handlers:
    """One handler per entity, sharing a database service."""

    projects: ProjectHandler
    skills: SkillHandler
    contact: ContactMessageHandler
    profile: ProfileHandler

    @classmethod
    def from_db_service(cls, db_service: DatabaseService) -> "Handlers":
        return cls(
            projects=ProjectHandler(db_service),
            skills=SkillHandler(db_service),
            contact=ContactMessageHandler(db_service),
            profile=ProfileHandler(db_service),
        )


@dataclass(frozen=True)
class Operation:
    """A named operation callable through the API."""

    name: str
    kind: OperationKind
    call: Callable[[Handlers, Any], Any]
    input_model: type[BaseModel] | None = None
    output_model: type[BaseModel] | None = None


def _healthcheck(handlers: Handlers, payload: Any) -> dict[str, str]:
    return {"status": "ok", "timestamp": datetime.now(UTC).isoformat()}


OPERATIONS: dict[str, Operation] = {
    op.name: op
    for op in [
        Operation("healthcheck", OperationKind.QUERY, _healthcheck),
        # Projects
        Operation(
            "createProject",
            OperationKind.MUTATION,
            lambda h, data: h.projects.create(data),
            ProjectCreate,
            ProjectRead,
        ),
        Operation(
            "getProjects",
            OperationKind.QUERY,
            lambda h, data: h.projects.list_all(),
            output_model=ProjectRead,
        ),
        Operation(
            "getProjectById",
            OperationKind.QUERY,
            lambda h, data: h.projects.get_by_id(data.id),
            RecordId,
            ProjectRead,
        ),
        Operation(
            "updateProject",
            OperationKind.MUTATION,
            lambda h, data: h.projects.update(data),
            ProjectUpdate,
            ProjectRead,
        ),
        Operation(
            "deleteProject",
            OperationKind.MUTATION,
            lambda h, data: h.projects.delete(data.id),
            RecordId,
        ),
        # Skills
        Operation(
            "createSkill",
            OperationKind.MUTATION,
            lambda h, data: h.skills.create(data),
            SkillCreate,
            SkillRead,
        ),
        Operation(
            "getSkills",
            OperationKind.QUERY,
            lambda h, data: h.skills.list_all(),
            output_model=SkillRead,
        ),
        Operation(
            "updateSkill",
            OperationKind.MUTATION,
            lambda h, data: h.skills.update(data),
            SkillUpdate,
            SkillRead,
        ),
        Operation(
            "deleteSkill",
            OperationKind.MUTATION,
            lambda h, data: h.skills.delete(data.id),
            RecordId,
        ),
        # Contact messages
        Operation(
            "createContactMessage",
            OperationKind.MUTATION,
            lambda h, data: h.contact.create(data),
            ContactMessageCreate,
            ContactMessageRead,
        ),
        Operation(
            "getContactMessages",
            OperationKind.QUERY,
            lambda h, data: h.contact.list_all(),
            output_model=ContactMessageRead,
        ),
        # Profile
        Operation(
            "getProfile",
            OperationKind.QUERY,
            lambda h, data: h.profile.get(),
            output_model=ProfileRead,
        ),
        Operation(
            "updateProfile",
            OperationKind.MUTATION,
            lambda h, data: h.profile.update(data),
            ProfileUpdate,
            ProfileRead,
        ),
    ]
}


def serialize(result: Any, output_model: type[BaseModel] | None) -> Any:
    """Convert a handler result into JSON-compatible data.

    Args:
        result: Record, list of records, None, or a plain value.
        output_model: Read model used to render records, if any.

    Returns:
        JSON-compatible representation of the result.
    """
    if result is None or output_model is None:
        return result
    if isinstance(result, list):
        return [output_model.model_validate(item).model_dump(mode="json") for item in result]
    return output_model.model_validate(result).model_dump(mode="json")


class Dispatcher:
    """Routes operation names to handlers."""

    def __init__(self, handlers: Handlers) -> None:
        self._handlers = handlers

    @property
    def operation_names(self) -> list[str]:
        return list(OPERATIONS)

    def invoke(self, name: str, payload: Any = None, method: str = "POST") -> Any:
        """Validate the payload and run the named operation.

        Args:
            name: Operation name, e.g. "createProject".
            payload: Decoded JSON input, or None when the caller sent none.
            method: HTTP method used; mutations require POST.

        Returns:
            JSON-compatible result of the operation.

        Raises:
            UnknownOperationError: If no operation has that name.
            MethodNotAllowedError: If a mutation is invoked with GET.
            pydantic.ValidationError: If the payload fails validation.
        """
        operation = OPERATIONS.get(name)
        if operation is None:
            raise UnknownOperationError(name)
        if operation.kind is OperationKind.MUTATION and method.upper() != "POST":
            raise MethodNotAllowedError(name, method.upper())

        data = None
        if operation.input_model is not None:
            data = operation.input_model.model_validate({} if payload is None else payload)

        result = operation.call(self._handlers, data)
        return serialize(result, operation.output_model)
