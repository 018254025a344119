import logging

import pytest

from php_type_to_schema.diagnostics import Diagnostics, Severity, TypeResolutionError


def test_error_is_recorded_and_logged(caplog):
    diagnostics = Diagnostics()
    with caplog.at_level(logging.WARNING, logger="php_type_to_schema.diagnostics"):
        diagnostics.error("Api::get", "discouraged")

    assert [str(d) for d in diagnostics.errors] == ["Api::get: discouraged"]
    assert "Api::get: discouraged" in caplog.text


def test_panic_raises():
    diagnostics = Diagnostics()
    with pytest.raises(TypeResolutionError, match="^Api::get: broken$"):
        diagnostics.panic("Api::get", "broken")
    assert diagnostics.entries[0].severity == Severity.FATAL
    assert diagnostics.errors == []


def test_errors_are_fatal():
    diagnostics = Diagnostics(errors_are_fatal=True)
    with pytest.raises(TypeResolutionError):
        diagnostics.error("Api::get", "discouraged")
