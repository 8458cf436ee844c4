"""Sinks de diagnóstico para el executor.

- `NullDiagnosticSink`: default, descarta todo.
- `StructlogDiagnosticSink`: escribe en el logger `storefront.api`.
- `token_preview`: recorte del token apto para logs.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

_ERROR_EVENTS = frozenset({"api_error_response", "api_transport_error"})


def token_preview(token: str | None, max_chars: int = 20) -> str:
    """Prefijo del token seguido de `...`, o `none` si no hay token.

    Nunca devuelve el token completo: con tokens cortos se muestra como mucho
    la mitad.
    """

    if not token:
        return "none"
    visible = min(max_chars, len(token) // 2)
    return f"{token[:visible]}..."


class NullDiagnosticSink:
    def emit(self, event: str, **fields: Any) -> None:
        return None


class StructlogDiagnosticSink:
    """Envía los eventos a structlog (debug para requests, warning para fallos)."""

    def __init__(self, logger: Any | None = None) -> None:
        self._log = logger or structlog.get_logger("storefront.api")

    def emit(self, event: str, **fields: Any) -> None:
        level = logging.WARNING if event in _ERROR_EVENTS else logging.DEBUG
        self._log.log(level, event, **fields)
