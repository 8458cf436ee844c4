"""Contrato del canal de diagnóstico del cliente.

Por qué Protocol:
- El executor no depende de stdout ni de un logger concreto.
- Los tests inyectan un sink que registra eventos y verifican que el token
  completo nunca aparece.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DiagnosticSink(Protocol):
    """Recibe eventos de depuración del executor.

    Reglas de diseño:
    - `emit` es síncrono y no debe bloquear.
    - Los campos nunca incluyen el token completo ni bodies de respuesta.
    """

    def emit(self, event: str, **fields: Any) -> None:
        ...
