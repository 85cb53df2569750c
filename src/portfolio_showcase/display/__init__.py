# ABOUTME: Display module for Rich terminal output formatting.
# ABOUTME: Exports MessageTable and error panels used by the CLI.

from portfolio_showcase.display.errors import display_error, display_validation_error
from portfolio_showcase.display.tables import MessageTable

__all__ = [
    "MessageTable",
    "display_error",
    "display_validation_error",
]
