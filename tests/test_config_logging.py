import logging

import pytest

from openai_client_lib.base.constants import bool_env_value
from openai_client_lib.exceptions import TransportError
from openai_client_lib.utils.logger import prepare_logger


@pytest.mark.parametrize(
    "value, expected",
    [("1", True), ("TRUE", True), (" yes ", True), ("on", True), ("0", False), ("no", False)],
)
def test_bool_env_value(monkeypatch, value, expected):
    monkeypatch.setenv("OPENAI_CLIENT_TEST_FLAG", value)
    assert bool_env_value("OPENAI_CLIENT_TEST_FLAG") is expected


@pytest.mark.parametrize("value", [None, "", "   "])
def test_bool_env_value_default(monkeypatch, value):
    if value is None:
        monkeypatch.delenv("OPENAI_CLIENT_TEST_FLAG", raising=False)
    else:
        monkeypatch.setenv("OPENAI_CLIENT_TEST_FLAG", value)
    assert bool_env_value("OPENAI_CLIENT_TEST_FLAG", default=True) is True


def test_prepare_logger_is_idempotent():
    logger = prepare_logger("openai_client_lib.tests.logger", level="debug")
    again = prepare_logger("openai_client_lib.tests.logger", level="warning")

    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING


def test_transport_failures_are_logged(caplog, client, session, connection_error):
    session.respond(connection_error)
    with caplog.at_level(logging.ERROR):
        with pytest.raises(TransportError):
            client.models.list()
    assert any("connection refused" in r.getMessage() for r in caplog.records)
