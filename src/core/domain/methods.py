"""HTTP verbs accepted by the request executor.

Keeping the enum in the domain layer lets the CLI validate user input and
the adapters build requests from the same source of truth.
"""

from __future__ import annotations

from enum import Enum


class HttpMethod(str, Enum):
    """The only verbs the backend binding supports."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, value: "HttpMethod | str") -> "HttpMethod":
        """Normalize a user-supplied verb (case-insensitive)."""

        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise ValueError(f"Unsupported HTTP method {value!r} (expected one of: {allowed})") from None
