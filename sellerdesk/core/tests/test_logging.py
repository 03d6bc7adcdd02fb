"""Tests for logging configuration."""

from sellerdesk.core.logging import (
    add_request_context,
    configure_logging,
    get_logger,
    redact_secrets,
    request_id_ctx,
    seller_id_ctx,
)


def test_get_logger_returns_bound_logger():
    """get_logger should return a structlog logger."""
    configure_logging()
    logger = get_logger("test")

    assert logger is not None
    assert hasattr(logger, "info")
    assert hasattr(logger, "error")


def test_request_id_context_variable():
    """request_id_ctx should store and retrieve values."""
    assert request_id_ctx.get() is None

    token = request_id_ctx.set("test-id-123")
    assert request_id_ctx.get() == "test-id-123"

    request_id_ctx.reset(token)
    assert request_id_ctx.get() is None


def test_add_request_context_injects_ids():
    """Events logged during a request carry request and seller ids."""
    request_token = request_id_ctx.set("req-1")
    seller_token = seller_id_ctx.set(42)
    try:
        event = add_request_context(None, "info", {"event": "x"})
    finally:
        seller_id_ctx.reset(seller_token)
        request_id_ctx.reset(request_token)

    assert event["request_id"] == "req-1"
    assert event["seller_id"] == 42


def test_add_request_context_outside_request():
    event = add_request_context(None, "info", {"event": "x"})

    assert "request_id" not in event
    assert "seller_id" not in event


def test_add_request_context_keeps_explicit_seller_id():
    token = seller_id_ctx.set(1)
    try:
        event = add_request_context(None, "info", {"event": "x", "seller_id": 99})
    finally:
        seller_id_ctx.reset(token)

    assert event["seller_id"] == 99


def test_configure_logging_completes():
    """configure_logging should complete without error."""
    configure_logging()  # Should not raise


def test_redact_secrets_masks_credentials():
    event = redact_secrets(
        None, "info", {"event": "x", "password": "hunter22", "token": "abc", "email": "a@b.c"}
    )

    assert event["password"] == "[redacted]"
    assert event["token"] == "[redacted]"
    assert event["email"] == "a@b.c"
