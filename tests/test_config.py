# ABOUTME: Tests for the configuration module.
# ABOUTME: Covers Settings defaults, environment variable overrides and data directory creation.

import os
import tempfile
from pathlib import Path
from unittest import mock

import pytest
from pydantic import ValidationError

from portfolio_showcase.config import Settings, ensure_data_dir, get_settings


@pytest.fixture(autouse=True)
def clean_port_env():
    """Make sure port variables from the outer environment do not leak in."""
    with mock.patch.dict(os.environ, {}, clear=False):
        os.environ.pop("PORTFOLIO_PORT", None)
        os.environ.pop("SERVER_PORT", None)
        yield


class TestSettingsDefaults:
    """Tests for Settings class default values."""

    def test_db_path_default(self) -> None:
        """Test that db_path defaults to ~/.portfolio-showcase/data.db."""
        settings = Settings()
        expected_path = Path.home() / ".portfolio-showcase" / "data.db"
        assert settings.db_path == expected_path

    def test_port_default(self) -> None:
        """Test that the port defaults to 2022."""
        assert Settings().port == 2022

    def test_host_default(self) -> None:
        """Test that the server binds all interfaces by default."""
        assert Settings().host == "0.0.0.0"

    def test_cors_allows_any_origin_by_default(self) -> None:
        """Test that cross-origin requests are allowed from anywhere by default."""
        assert Settings().cors_origins == ["*"]

    def test_log_level_default(self) -> None:
        """Test that logging defaults to INFO."""
        assert Settings().log_level == "INFO"


class TestSettingsEnvironmentOverrides:
    """Tests for environment variable overrides."""

    def test_db_path_from_env(self) -> None:
        """Test that db_path can be overridden via environment variable."""
        with tempfile.TemporaryDirectory() as tmpdir:
            custom_path = Path(tmpdir) / "custom.db"
            with mock.patch.dict(os.environ, {"PORTFOLIO_DB_PATH": str(custom_path)}):
                settings = Settings()
                assert settings.db_path == custom_path

    def test_port_from_prefixed_env(self) -> None:
        """Test that PORTFOLIO_PORT sets the port."""
        with mock.patch.dict(os.environ, {"PORTFOLIO_PORT": "8080"}):
            assert Settings().port == 8080

    def test_port_from_server_port_env(self) -> None:
        """Test that the bare SERVER_PORT variable is honoured."""
        with mock.patch.dict(os.environ, {"SERVER_PORT": "3000"}):
            assert Settings().port == 3000

    def test_prefixed_port_wins_over_server_port(self) -> None:
        """Test that PORTFOLIO_PORT takes precedence over SERVER_PORT."""
        with mock.patch.dict(os.environ, {"PORTFOLIO_PORT": "8080", "SERVER_PORT": "3000"}):
            assert Settings().port == 8080

    def test_invalid_port_rejected(self) -> None:
        """Test that an out-of-range port fails validation."""
        with mock.patch.dict(os.environ, {"PORTFOLIO_PORT": "70000"}):
            with pytest.raises(ValidationError):
                Settings()

    def test_cors_origins_from_env(self) -> None:
        """Test that allowed origins can be given as a JSON list."""
        with mock.patch.dict(
            os.environ, {"PORTFOLIO_CORS_ORIGINS": '["https://portfolio.example.com"]'}
        ):
            assert Settings().cors_origins == ["https://portfolio.example.com"]


class TestGetSettings:
    """Tests for the cached settings accessor."""

    def test_get_settings_is_cached(self) -> None:
        """Test that get_settings returns the same instance until cleared."""
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()


class TestEnsureDataDir:
    """Tests for ensure_data_dir."""

    def test_creates_parent_directory(self) -> None:
        """Test that the database's parent directory is created."""
        with tempfile.TemporaryDirectory() as tmpdir:
            db_path = Path(tmpdir) / "deep" / "data.db"
            with mock.patch.dict(os.environ, {"PORTFOLIO_DB_PATH": str(db_path)}):
                get_settings.cache_clear()
                try:
                    data_dir = ensure_data_dir()
                finally:
                    get_settings.cache_clear()
            assert data_dir == db_path.parent
            assert data_dir.exists()
