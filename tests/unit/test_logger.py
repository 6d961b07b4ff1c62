"""
------------------------------------------------------------------------------
Project:        GiroCode
File:           tests/unit/test_logger.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Unit tests for the centralized logging system.
------------------------------------------------------------------------------
"""

import io
import logging

import pytest

from girocode import Epc
from girocode.logger import setup_logging, get_logger, mask, set_component_level


def _flush():
    for handler in logging.getLogger("girocode").handlers:
        handler.flush()


def test_logger_namespace():
    """Verify that get_logger returns a child of the girocode root."""
    logger = get_logger("builder")
    assert logger.name == "girocode.builder"
    assert get_logger("girocode.serializer").name == "girocode.serializer"
    assert isinstance(logger, logging.Logger)


def test_logging_to_file(tmp_path):
    """Verify that logs are correctly written to a file."""
    log_file = tmp_path / "lib.log"
    setup_logging(level="DEBUG", log_file=str(log_file))

    get_logger("test").debug("Logging to file test message")
    _flush()

    assert log_file.exists()
    assert "Logging to file test message" in log_file.read_text()


def test_component_level_overrides(tmp_path):
    """Verify that specific components can have different log levels."""
    log_file = tmp_path / "component.log"
    setup_logging(level="INFO", log_file=str(log_file))

    set_component_level("serializer", "DEBUG")
    get_logger("serializer").debug("SERIALIZER DEBUG MESSAGE")
    get_logger("models").debug("MODELS DEBUG MESSAGE")
    _flush()

    content = log_file.read_text()
    assert "SERIALIZER DEBUG MESSAGE" in content
    assert "MODELS DEBUG MESSAGE" not in content


def test_rejected_build_is_logged(tmp_path):
    """A failed build() leaves an INFO record naming the error kind."""
    log_file = tmp_path / "build.log"
    setup_logging(level="INFO", log_file=str(log_file))

    with pytest.raises(ValueError):
        Epc.builder().beneficiary("Alice").build()
    _flush()

    assert "MissingRequiredField" in log_file.read_text()


def test_quiet_default_mode(tmp_path):
    """Verify that the library is quiet at default level."""
    log_file = tmp_path / "quiet.log"
    setup_logging(level="WARNING", log_file=str(log_file))

    Epc.builder().beneficiary("Alice").iban("DE02120300000000202051").build()
    get_logger("builder").info("THIS SHOULD NOT APPEAR")
    _flush()

    assert "THIS SHOULD NOT APPEAR" not in log_file.read_text()
    assert log_file.read_text() == ""


def test_console_output_goes_to_given_stream():
    stream = io.StringIO()
    setup_logging(level="INFO", stream=stream)

    get_logger("builder").info("console line")

    assert "girocode.builder: console line" in stream.getvalue()


def test_setup_keeps_application_handlers():
    """Repeated setup replaces only its own handlers."""
    root = logging.getLogger("girocode")
    own = logging.StreamHandler(io.StringIO())
    root.addHandler(own)

    setup_logging(level="INFO", stream=io.StringIO())
    setup_logging(level="INFO", stream=io.StringIO())

    assert own in root.handlers
    stream_handlers = [h for h in root.handlers if isinstance(h, logging.StreamHandler)]
    assert len(stream_handlers) == 2


@pytest.mark.parametrize("value, expected", [
    ("DE02120300000000202051", "DE02**************2051"),
    ("GENODEF1", "********"),
    ("", ""),
])
def test_mask(value, expected):
    assert mask(value) == expected


def test_account_numbers_are_masked():
    stream = io.StringIO()
    setup_logging(level="DEBUG", stream=stream)

    Epc.builder().beneficiary("Alice").iban("DE02120300000000202051").build()
    with pytest.raises(ValueError):
        Epc.builder().beneficiary("Alice").iban("DE02120300000000202052").build()

    output = stream.getvalue()
    assert "DE02**************2051" in output
    assert "InvalidChecksum in field 'iban'" in output
    assert "DE02120300000000202051" not in output
    assert "DE02120300000000202052" not in output
