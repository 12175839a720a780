"""Root logging setup for FridgeShare.

Every handler installed here runs a :class:`SensitiveDataFilter`, so session
tokens, passwords and the JWT signing secret never reach the log output,
whether plain text or JSON lines are configured.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from typing import Iterable, Pattern, Sequence, Tuple

REDACTED = "[redacted]"

# (pattern, replacement) pairs applied in order to every formatted message.
_MASKS: Tuple[Tuple[Pattern[str], str], ...] = (
    (re.compile(r"(Bearer\s+)[A-Za-z0-9\-._~+/=]+", re.IGNORECASE), r"\1" + REDACTED),
    (re.compile(r"((?:access_)?token=)[^&\s]+", re.IGNORECASE), r"\1" + REDACTED),
    (re.compile(r"(\"password\"\s*:\s*\")[^\"]*(\")", re.IGNORECASE), r"\1" + REDACTED + r"\2"),
)

_CONTEXT_FIELDS = ("request_id", "user_id")
_THIRD_PARTY_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def redact(text: str, secrets: Sequence[str] = ()) -> str:
    """Return ``text`` with bearer tokens, password fields and ``secrets`` masked."""

    for pattern, replacement in _MASKS:
        text = pattern.sub(replacement, text)
    for secret in secrets:
        if secret:
            text = text.replace(secret, REDACTED)
    return text


class SensitiveDataFilter(logging.Filter):
    """Rewrites records in place so nothing secret survives formatting."""

    def __init__(self, secrets: Iterable[str]):
        super().__init__()
        self._secrets = tuple(secret.strip() for secret in secrets if secret and secret.strip())

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401 - standard interface
        rendered = record.getMessage()
        cleaned = redact(rendered, self._secrets)
        if cleaned != rendered:
            record.msg, record.args = cleaned, ()

        for key, value in list(vars(record).items()):
            if key not in ("msg", "args") and isinstance(value, str):
                setattr(record, key, redact(value, self._secrets))
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per line, carrying request context when present."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - override
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in _CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value:
                entry[field] = value
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            entry["stack"] = record.stack_info
        return json.dumps(entry, ensure_ascii=True)


def _build_formatter(fmt: str) -> logging.Formatter:
    if (fmt or "plain").lower() == "json":
        return JsonFormatter()
    return logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )


def configure_logging(level_name: str, fmt: str, secrets: Iterable[str]) -> None:
    """Install a single redacting stream handler on the root logger."""

    level = getattr(logging, (level_name or "INFO").upper(), logging.INFO)
    redactor = SensitiveDataFilter(secrets)

    handler = logging.StreamHandler()
    handler.setFormatter(_build_formatter(fmt))
    handler.addFilter(redactor)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)
    logging.captureWarnings(True)

    for name in _THIRD_PARTY_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers = []
        server_logger.setLevel(level)
        server_logger.propagate = True
        server_logger.addFilter(redactor)

    # SQL echo stays opt-in through the level of this logger.
    logging.getLogger("sqlalchemy.engine").setLevel(max(level, logging.WARNING))


__all__ = ["REDACTED", "redact", "SensitiveDataFilter", "JsonFormatter", "configure_logging"]
