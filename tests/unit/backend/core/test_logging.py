"""
Unit Tests for Logging Configuration.
"""

import json
import logging
from unittest.mock import MagicMock

import structlog

from notesapp.backend.core.config import get_app_config
from notesapp.backend.core.logging import get_logger, log_with_source, setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_level_override(self):
        setup_logging(level="DEBUG", enable_file_logging=False)

        assert logging.getLogger().level == logging.DEBUG

    def test_console_disabled_leaves_no_handlers(self):
        setup_logging(enable_console=False, enable_file_logging=False)

        assert logging.getLogger().handlers == []

    def test_file_handler_writes_json(self, tmp_path, monkeypatch):
        """Should write JSON lines to the configured path under the project root."""
        config = get_app_config().logging
        config = config.model_copy(
            update={
                "handlers": config.handlers.model_copy(
                    update={
                        "file": config.handlers.file.model_copy(
                            update={"enabled": True, "path": "logs/test.jsonl"}
                        )
                    }
                )
            }
        )
        (tmp_path / ".project_root").touch()
        monkeypatch.chdir(tmp_path)
        structlog.reset_defaults()

        setup_logging(level="INFO", enable_console=False, config=config)
        get_logger("tests.logging").info("Note created", note_id="abc")
        for handler in logging.getLogger().handlers:
            handler.flush()

        record = json.loads((tmp_path / "logs" / "test.jsonl").read_text().splitlines()[-1])
        assert record["event"] == "Note created"
        assert record["note_id"] == "abc"
        assert record["level"] == "info"

        for handler in logging.getLogger().handlers[:]:
            handler.close()
            logging.getLogger().removeHandler(handler)


class TestLogWithSource:
    def test_passes_source(self):
        logger = MagicMock()

        log_with_source(logger, "cli", "warning", "Something happened", note_id="abc")

        logger.warning.assert_called_once_with(
            "Something happened", source="cli", note_id="abc"
        )
