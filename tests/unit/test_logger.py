"""
Unit tests for logger setup.
"""
import logging

from pricecomp.logger import get_logger, setup_logger


class TestGetLogger:
    """Tests for module logger naming."""

    def test_package_module_name_kept(self):
        assert get_logger("pricecomp.search.serper_client").name == "pricecomp.search.serper_client"

    def test_script_name_nested_under_package(self):
        assert get_logger("__main__").name == "pricecomp.__main__"


class TestSetupLogger:
    """Tests for handler and level configuration."""

    def test_repeated_setup_keeps_one_handler(self):
        setup_logger("pricecomp.test_repeat")
        logger = setup_logger("pricecomp.test_repeat")

        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_explicit_level(self):
        logger = setup_logger("pricecomp.test_level", level="debug")

        assert logger.level == logging.DEBUG
        assert logger.handlers[0].level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        logger = setup_logger("pricecomp.test_unknown", level="chatty")

        assert logger.level == logging.INFO
