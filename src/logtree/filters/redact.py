"""Filters – RedactingFilter."""
from __future__ import annotations

import dataclasses
from typing import Any

from logtree.records import Record

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {
        "password",
        "passwd",
        "secret",
        "token",
        "access_token",
        "refresh_token",
        "api_key",
        "authorization",
        "credit_card",
    }
)


class RedactingFilter:
    """Replace values of sensitive ``extra`` keys with ``[REDACTED]``.

    Never drops a record. When something was redacted, a replacement record is
    returned so that the original stays untouched for other destinations.
    """

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = frozenset(f.lower() for f in (sensitive_fields or DEFAULT_SENSITIVE_FIELDS))

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        """Recursively redact nested dicts."""
        result: dict[str, Any] = {}
        for k, v in data.items():
            if k.lower() in self._fields:
                result[k] = self.REDACTED
            elif isinstance(v, dict):
                result[k] = self.redact(v)
            else:
                result[k] = v
        return result

    def filter(self, record: Record) -> Record:
        if not record.extra:
            return record
        redacted = self.redact(dict(record.extra))
        if redacted == dict(record.extra):
            return record
        return dataclasses.replace(record, extra=redacted)


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "RedactingFilter"]
