# ABOUTME: Tests for the exception hierarchy and logging setup.
# ABOUTME: Covers PortfolioError subclasses and configure_logging.

import logging

import pytest

from portfolio_showcase.errors import (
    MethodNotAllowedError,
    PortfolioError,
    UnknownOperationError,
)
from portfolio_showcase.log import configure_logging


class TestPortfolioError:
    """Tests for the base PortfolioError exception."""

    def test_base_exception_is_exception(self) -> None:
        """Test that PortfolioError inherits from Exception."""
        error = PortfolioError("Test")

        assert isinstance(error, Exception)
        assert str(error) == "Test"

    def test_base_exception_can_be_raised_and_caught(self) -> None:
        """Test that PortfolioError can be raised and caught."""
        with pytest.raises(PortfolioError) as exc_info:
            raise PortfolioError("Test error")
        assert "Test error" in str(exc_info.value)


class TestOperationErrors:
    """Tests for errors raised by the operation dispatcher."""

    def test_unknown_operation(self) -> None:
        """Test that UnknownOperationError carries the operation name."""
        error = UnknownOperationError("launchRockets")

        assert isinstance(error, PortfolioError)
        assert error.operation == "launchRockets"
        assert "launchRockets" in str(error)

    def test_method_not_allowed(self) -> None:
        """Test that MethodNotAllowedError carries the operation and method."""
        error = MethodNotAllowedError("deleteProject", "GET")

        assert isinstance(error, PortfolioError)
        assert error.operation == "deleteProject"
        assert error.method == "GET"
        assert "GET" in str(error)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_level(self) -> None:
        """Test that the level name is applied to the package logger."""
        logger = configure_logging("debug")

        assert logger.name == "portfolio_showcase"
        assert logger.level == logging.DEBUG

    def test_handler_installed_once(self) -> None:
        """Test that repeated calls do not stack handlers."""
        configure_logging("INFO")
        logger = configure_logging("WARNING")

        marked = [h for h in logger.handlers if getattr(h, "_portfolio_handler", False)]
        assert len(marked) == 1
        assert logger.level == logging.WARNING
