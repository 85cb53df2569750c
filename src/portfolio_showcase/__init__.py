# ABOUTME: Main package initialization for the portfolio showcase backend.
# ABOUTME: Exports version information from the installed distribution metadata.

from importlib.metadata import version

__version__ = version("portfolio-showcase")
