"""Tests for logging utilities and sensitive data redaction."""

from __future__ import annotations

import json
import logging

import pytest

from fridgeshare.logging_utils import REDACTED, JsonFormatter, configure_logging, redact


def _emit(msg: str, *args) -> logging.LogRecord:
    return logging.LogRecord(
        name="fridgeshare.test.redaction",
        level=logging.INFO,
        pathname=__file__,
        lineno=0,
        msg=msg,
        args=args,
        exc_info=None,
    )


@pytest.mark.parametrize("fmt", ["plain", "json"])
def test_sensitive_data_filter_redacts_tokens(fmt):
    secret = "top-secret-signing-key"
    configure_logging("INFO", fmt, [secret])

    handler = logging.getLogger().handlers[0]
    record = _emit("Authorization header Bearer %s signed with %s", "eyJhbGciOi.abc.def", secret)

    for filter_ in handler.filters:
        filter_.filter(record)

    formatted = handler.format(record)
    assert secret not in formatted
    assert "eyJhbGciOi" not in formatted
    assert REDACTED in formatted


def test_password_fields_and_token_params_are_masked():
    configure_logging("INFO", "plain", [])

    handler = logging.getLogger().handlers[0]
    record = _emit('body={"email": "a@b.c", "password": "hunter22"} url=/x?token=abc123&y=1')
    for filter_ in handler.filters:
        filter_.filter(record)

    formatted = handler.format(record)
    assert "hunter22" not in formatted
    assert "abc123" not in formatted
    assert "a@b.c" in formatted


def test_json_formatter_includes_request_context():
    record = _emit("claim decided")
    record.request_id = "req-1"
    record.user_id = 7

    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "claim decided"
    assert payload["request_id"] == "req-1"
    assert payload["user_id"] == 7
    assert payload["level"] == "INFO"


def test_redact_masks_configured_secrets_only():
    assert redact("signing with hush-hush", ["hush-hush"]) == f"signing with {REDACTED}"
    assert redact("nothing to hide here", ["", "hush"]) == "nothing to hide here"
