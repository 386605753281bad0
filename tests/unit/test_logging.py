"""Unit tests for logging setup."""

from loguru import logger

from automl_video_explorer.core import setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_messages_at_level_go_to_stderr(self, capsys):
        """Test that enabled messages are written to stderr only."""
        setup_logging("info")

        logger.info("listing models")

        captured = capsys.readouterr()
        assert "listing models" in captured.err
        assert captured.out == ""

    def test_messages_below_level_are_dropped(self, capsys):
        """Test that debug output is hidden at the default level."""
        setup_logging()

        logger.debug("request details")

        assert "request details" not in capsys.readouterr().err
