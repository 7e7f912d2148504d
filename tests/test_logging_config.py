# =============================================================================
# tests/test_logging_config.py - Logging Setup Tests
# =============================================================================

import logging

from blog_api.app.core.logging_config import DATE_FORMAT, LOG_FORMAT, build_handlers, setup_logging


class TestBuildHandlers:
    def test_console_only(self):
        handlers = build_handlers()
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)
        assert handlers[0].formatter._fmt == LOG_FORMAT
        assert handlers[0].formatter.datefmt == DATE_FORMAT

    def test_with_file(self, tmp_path):
        handlers = build_handlers(str(tmp_path / "api.log"))
        try:
            assert isinstance(handlers[1], logging.FileHandler)
            assert handlers[1].baseFilename == str((tmp_path / "api.log").resolve())
        finally:
            for handler in handlers:
                handler.close()


class TestSetupLogging:
    def test_skips_when_root_already_configured(self):
        # pytest's capture handler is attached to the root logger.
        assert logging.getLogger().handlers
        assert setup_logging("DEBUG") is False
