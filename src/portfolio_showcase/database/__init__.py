# ABOUTME: Database package for the portfolio record store.
# ABOUTME: Provides DatabaseService for SQLite sessions using SQLModel.

from portfolio_showcase.database.service import DatabaseService

__all__ = ["DatabaseService"]
