import logging

import pytest

from fixbytes.json import from_json, register_json
from fixbytes.logger import log, TRACE
from fixbytes.size import Size, SizeParseError


class Ratio:
    pass


def test_logging() -> None:
    assert type(log) is logging.Logger
    assert log.name == "fixbytes"
    assert logging.getLevelName(TRACE) == "TRACE"
    assert callable(log.trace)


def test_hook_registration_is_traced(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(TRACE, logger="fixbytes")
    register_json(Ratio, lambda r: "ratio", lambda js: Ratio())
    assert "Register json structure hooks for class Ratio" in caplog.text


def test_failed_deserialization_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="fixbytes")
    with pytest.raises(SizeParseError):
        from_json("12 parsecs", Size)
    assert "Can not deserialize json into class Size" in caplog.text
