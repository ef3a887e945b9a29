"""
Tests for settings and logging configuration.
"""

import structlog

from eanscan.config import Settings, configure_logging


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        """Test default values."""
        monkeypatch.delenv("DECODER_VERIFY_GUARDS", raising=False)
        settings = Settings(_env_file=None)
        assert settings.decoder_verify_guards is True
        assert settings.log_format == "json"

    def test_environment_override(self, monkeypatch):
        """Test reading values from the environment."""
        monkeypatch.setenv("DECODER_VERIFY_GUARDS", "false")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        settings = Settings(_env_file=None)
        assert settings.decoder_verify_guards is False
        assert settings.log_level == "debug"


class TestConfigureLogging:
    """Tests for structlog configuration."""

    def test_text_format(self):
        """Test console rendering at debug level."""
        try:
            configure_logging(Settings(_env_file=None, log_format="text", log_level="DEBUG"))
            assert structlog.is_configured()
            structlog.get_logger("eanscan.test").debug("Configured", format="text")
        finally:
            structlog.reset_defaults()

    def test_json_format(self, capsys):
        """Test JSON rendering filters below the configured level."""
        try:
            configure_logging(Settings(_env_file=None, log_format="json", log_level="WARNING"))
            logger = structlog.get_logger("eanscan.test")
            logger.info("Hidden")
            logger.warning("Shown", stage="guard")
        finally:
            structlog.reset_defaults()

        output = capsys.readouterr().out
        assert "Hidden" not in output
        assert '"stage": "guard"' in output
