# ABOUTME: Base exception classes for portfolio showcase application errors.
# ABOUTME: Validation uses pydantic's ValidationError; storage errors come from SQLAlchemy.


class PortfolioError(Exception):
    """Base exception for all portfolio showcase errors.

    Missing records are not errors: lookups return None and deletes
    return False. Only conditions the caller cannot branch on are raised.
    """

    pass


class UnknownOperationError(PortfolioError):
    """Exception raised when the API is asked for an operation it does not expose."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"No operation named '{operation}'")
        self.operation = operation


class MethodNotAllowedError(PortfolioError):
    """Exception raised when a mutation is invoked through a read-only HTTP method."""

    def __init__(self, operation: str, method: str) -> None:
        super().__init__(f"Operation '{operation}' does not support {method} requests")
        self.operation = operation
        self.method = method
