# ABOUTME: FastAPI application exposing every operation through one multiplexed endpoint.
# ABOUTME: Configures CORS, maps validation, lookup and storage failures to JSON error bodies.

import json
import logging
from typing import Annotated, Any

from fastapi import FastAPI, Query, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from portfolio_showcase.api.operations import Dispatcher, Handlers
from portfolio_showcase.config import Settings, get_settings
from portfolio_showcase.database import DatabaseService
from portfolio_showcase.errors import MethodNotAllowedError, UnknownOperationError

logger = logging.getLogger(__name__)


class MalformedPayloadError(ValueError):
    """Raised when a request carries input that is not valid JSON."""


def _error_response(status_code: int, code: str, message: str, details: Any = None) -> JSONResponse:
    error: dict[str, Any] = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return JSONResponse(status_code=status_code, content={"error": error})


def _decode(raw: str | bytes | None) -> Any:
    if not raw:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedPayloadError(f"Input is not valid JSON: {e.msg}") from e


def register_error_handlers(app: FastAPI) -> None:
    """Translate application errors into JSON error bodies."""

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        details = jsonable_encoder(exc.errors(include_url=False, include_context=False))
        return _error_response(
            status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR", "Invalid input", details
        )

    @app.exception_handler(MalformedPayloadError)
    async def handle_malformed_payload(
        request: Request, exc: MalformedPayloadError
    ) -> JSONResponse:
        return _error_response(status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR", str(exc))

    @app.exception_handler(UnknownOperationError)
    async def handle_unknown_operation(
        request: Request, exc: UnknownOperationError
    ) -> JSONResponse:
        return _error_response(status.HTTP_404_NOT_FOUND, "NOT_FOUND", str(exc))

    @app.exception_handler(MethodNotAllowedError)
    async def handle_method_not_allowed(
        request: Request, exc: MethodNotAllowedError
    ) -> JSONResponse:
        return _error_response(status.HTTP_405_METHOD_NOT_ALLOWED, "METHOD_NOT_SUPPORTED", str(exc))

    @app.exception_handler(SQLAlchemyError)
    async def handle_storage_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error("Storage error while serving %s: %s", request.url.path, exc)
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_SERVER_ERROR", str(exc)
        )


def create_app(
    settings: Settings | None = None,
    db_service: DatabaseService | None = None,
) -> FastAPI:
    """Application factory for the portfolio API.

    Args:
        settings: Settings to use. Defaults to the cached environment settings.
        db_service: Database service to use. Defaults to one on settings.db_path.

    Returns:
        Configured FastAPI application.
    """
    settings = settings if settings is not None else get_settings()
    if db_service is None:
        db_service = DatabaseService(db_path=settings.db_path)
    db_service.init_db()

    dispatcher = Dispatcher(Handlers.from_db_service(db_service))

    app = FastAPI(
        title="Portfolio Showcase API",
        description="Profile, projects, skills and contact messages for a personal portfolio.",
    )
    app.state.settings = settings
    app.state.db_service = db_service
    app.state.dispatcher = dispatcher

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    @app.get("/")
    def read_root() -> dict[str, Any]:
        return {
            "message": "Portfolio Showcase API",
            "operations": dispatcher.operation_names,
        }

    @app.api_route("/rpc/{operation}", methods=["GET", "POST"])
    async def call_operation(
        operation: str,
        request: Request,
        input_json: Annotated[
            str | None, Query(alias="input", description="JSON-encoded input for GET calls")
        ] = None,
    ) -> dict[str, Any]:
        if request.method == "GET":
            payload = _decode(input_json)
        else:
            payload = _decode(await request.body())

        result = await run_in_threadpool(dispatcher.invoke, operation, payload, request.method)
        return {"result": result}

    return app
