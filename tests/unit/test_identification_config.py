"""
Unit tests for environment-driven configuration.
"""
import logging

from mycoid import config


class TestConfig:
    """Test configuration defaults and logging setup."""

    def test_presentation_limits_are_ints(self):
        assert isinstance(config.MAX_SUGGESTED_ACTIONS, int)
        assert isinstance(config.MAX_FOLLOW_UP_QUESTIONS, int)
        assert isinstance(config.OTHER_CANDIDATES_IN_REASONING, int)
        assert isinstance(config.EDIBILITY_MISSING_CHECKS, int)

    def test_configure_logging(self):
        package_logger = logging.getLogger("mycoid")
        previous = package_logger.level
        try:
            config.configure_logging("DEBUG")
            assert package_logger.level == logging.DEBUG
            assert logging.getLogger("mycoid.services.identification.scorer").getEffectiveLevel() == logging.DEBUG
        finally:
            package_logger.setLevel(previous)

    def test_configure_logging_defaults_to_env_level(self, monkeypatch):
        package_logger = logging.getLogger("mycoid")
        previous = package_logger.level
        monkeypatch.setattr(config, "LOG_LEVEL", "ERROR")
        try:
            config.configure_logging()
            assert package_logger.level == logging.ERROR
        finally:
            package_logger.setLevel(previous)
