import json
import logging

import pytest
import structlog

from storefront import observability
from storefront.config import CheckoutSettings, LogFormat
from storefront.observability import configure_logging, get_logger


@pytest.fixture(autouse=True)
def fresh_logging(monkeypatch):
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    monkeypatch.setattr(observability, "_CONFIGURED", False)
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_log_level_filters_structlog_loggers(capsys):
    configure_logging(CheckoutSettings(log_level="error"))
    log = get_logger("orders")

    log.info("order_submission_started", cart_id="cart_1")
    log.error("order_submission_failed", cart_id="cart_1")

    out = capsys.readouterr().out
    assert "order_submission_started" not in out
    assert "order_submission_failed" in out
    assert "component=orders" in out


def test_first_configuration_wins(capsys):
    configure_logging(CheckoutSettings(log_level="WARNING"))
    configure_logging(CheckoutSettings(log_level="DEBUG"))

    get_logger("promotions").info("promotion_applied", code="SUMMER10")

    assert capsys.readouterr().out == ""


def test_json_format(capsys):
    configure_logging(CheckoutSettings(log_format=LogFormat.JSON))

    get_logger("payment").info("payment_session_requested", cart_id="cart_1")

    record = json.loads(capsys.readouterr().out.strip())
    assert record["event"] == "payment_session_requested"
    assert record["component"] == "payment"
    assert record["cart_id"] == "cart_1"
    assert record["level"] == "info"
