"""Unit tests for logging setup."""

import logging
from collections.abc import Iterator

import pytest
from rich.logging import RichHandler
from vidsweep.utils.log import configure_logging


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    handlers = root.handlers[:]
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_default_level_is_warning(self) -> None:
        """Without flags only warnings and errors are logged."""
        configure_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_verbose(self) -> None:
        """--verbose enables debug logging."""
        configure_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_quiet(self) -> None:
        """--quiet restricts logging to errors."""
        configure_logging(quiet=True)
        assert logging.getLogger().level == logging.ERROR

    def test_verbose_wins_over_quiet(self) -> None:
        """verbose takes precedence when both are set."""
        configure_logging(verbose=True, quiet=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_uses_rich_handler(self) -> None:
        """Records are routed through a single RichHandler."""
        configure_logging()
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], RichHandler)
