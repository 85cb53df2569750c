# ABOUTME: API boundary package exposing handlers over HTTP.
# ABOUTME: Exports the FastAPI application factory and the operation registry.

from portfolio_showcase.api.app import create_app
from portfolio_showcase.api.operations import OPERATIONS, Dispatcher, Handlers, Operation

__all__ = ["OPERATIONS", "Dispatcher", "Handlers", "Operation", "create_app"]
