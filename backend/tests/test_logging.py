import copy
import logging

from library_api.core.logging import (
    LOGGER_NAMESPACE,
    LOGGING_CONFIG,
    build_logging_config,
    get_logger,
    setup_logging,
)


def test_setup_logging_leaves_base_config_untouched():
    before = copy.deepcopy(LOGGING_CONFIG)

    setup_logging("debug")
    try:
        assert LOGGING_CONFIG == before
        assert logging.getLogger(LOGGER_NAMESPACE).level == logging.DEBUG
    finally:
        setup_logging("INFO")

    assert logging.getLogger(LOGGER_NAMESPACE).level == logging.INFO


def test_build_logging_config_only_sets_library_level():
    config = build_logging_config("warning")

    assert config["loggers"][LOGGER_NAMESPACE]["level"] == "WARNING"
    assert config["loggers"]["sqlalchemy.engine"]["level"] == "WARNING"
    assert "root" not in config
    assert config is not LOGGING_CONFIG
    assert LOGGING_CONFIG["loggers"][LOGGER_NAMESPACE]["level"] == "INFO"


def test_get_logger_is_namespaced():
    assert get_logger("services.books").name == "library_api.services.books"
