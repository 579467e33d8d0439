"""Unit tests for logging setup."""

import logging

from blog.config import Settings
from blog.util.logging import setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_quiet_by_default(self):
        setup_logging(Settings(_env_file=None, debug=False))

        assert logging.getLogger("blog").level == logging.INFO
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
        assert logging.getLogger("aiosqlite").level == logging.WARNING

    def test_debug_shows_sql(self):
        setup_logging(Settings(_env_file=None, debug=True))

        assert logging.getLogger("blog").level == logging.DEBUG
        assert logging.getLogger("sqlalchemy.engine").level == logging.INFO
