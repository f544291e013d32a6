"""
Root logger setup.
"""

import json
import logging

import pytest

from northwind.core.logging import JsonFormatter, NorthwindHandler, setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        yield root
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_foreign_handlers_survive(root_logger, settings):
    foreign = logging.StreamHandler()
    root_logger.addHandler(foreign)

    setup_logging(settings)
    setup_logging(settings)

    assert foreign in root_logger.handlers
    assert len([h for h in root_logger.handlers if isinstance(h, NorthwindHandler)]) == 1


def test_level_from_settings(root_logger, settings):
    setup_logging(settings.model_copy(update={"LOG_LEVEL": "warning"}))
    assert root_logger.level == logging.WARNING


def test_json_lines(root_logger, settings):
    handler = setup_logging(settings.model_copy(update={"LOG_JSON": True, "APP_ENV": "test"}))
    assert isinstance(handler.formatter, JsonFormatter)

    record = logging.LogRecord("northwind.test", logging.INFO, __file__, 1, "Retrieving customer with id: %s", (3,), None)
    payload = json.loads(handler.format(record))

    assert payload["message"] == "Retrieving customer with id: 3"
    assert payload["level"] == "INFO"
    assert payload["env"] == "test"
    assert payload["app"] == settings.APP_NAME
