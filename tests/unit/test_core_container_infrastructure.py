"""Unit tests for infrastructure dependency factories.

Tests cover:
- get_logger() adapter configuration per environment and singleton caching
- Generator factories
- get_database() reading the lifespan-owned Database from app.state
"""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from src.core.container import (
    get_database,
    get_date_generator,
    get_id_generator,
    get_logger,
)
from src.infrastructure.generators import SystemDateGenerator, UuidIdGenerator


@pytest.fixture(autouse=True)
def clear_logger_cache():
    get_logger.cache_clear()
    yield
    get_logger.cache_clear()


@pytest.mark.unit
class TestGetLogger:
    """Test get_logger() container function."""

    @pytest.mark.parametrize(
        "is_development,use_json",
        [(True, False), (False, True)],
    )
    def test_renderer_depends_on_environment(self, is_development, use_json):
        """Test development gets the console renderer, everything else JSON."""
        with (
            patch("src.core.container.infrastructure.settings") as mock_settings,
            patch(
                "src.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_console,
        ):
            mock_settings.is_development = is_development
            mock_settings.log_level = "DEBUG"
            mock_settings.app_name = "Webinars"

            logger = get_logger()

        mock_console.assert_called_once_with(
            use_json=use_json, log_level="DEBUG", service="Webinars"
        )
        assert logger is mock_console.return_value

    def test_returns_same_instance(self):
        """Test get_logger() is cached for the process."""
        assert get_logger() is get_logger()


@pytest.mark.unit
class TestGenerators:
    """Test generator factories."""

    def test_id_generator_is_uuid(self):
        assert isinstance(get_id_generator(), UuidIdGenerator)

    def test_date_generator_is_system_clock(self):
        assert isinstance(get_date_generator(), SystemDateGenerator)


@pytest.mark.unit
class TestGetDatabase:
    """Test get_database() request dependency."""

    def test_returns_database_from_app_state(self):
        database = MagicMock()
        request = MagicMock()
        request.app.state = SimpleNamespace(database=database)

        assert get_database(request) is database

    def test_raises_when_lifespan_not_run(self):
        request = MagicMock()
        request.app.state = SimpleNamespace()

        with pytest.raises(RuntimeError, match="Database not initialized"):
            get_database(request)
