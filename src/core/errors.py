"""Errores del cliente REST.

Por qué una jerarquía propia:
- Los llamadores capturan `ApiError` y tratan cualquier fallo como "la
  llamada falló", sin depender de las excepciones de httpx.
- `ApplicationError` y `TransportError` siguen siendo distinguibles cuando
  importa (p.ej. mostrar el mensaje del servidor vs. "sin conexión").
"""

from __future__ import annotations


class ApiError(Exception):
    """Base de todos los errores del cliente."""

    pass


class ApplicationError(ApiError):
    """El servidor respondió con un status fuera de 2xx."""

    def __init__(self, status_code: int, message: str, url: str | None = None):
        self.status_code = status_code
        self.message = message
        self.url = url
        super().__init__(message)


class TransportError(ApiError):
    """La llamada no llegó a completarse (red, DNS, timeout, redirects)."""

    def __init__(self, url: str, cause: Exception | None = None):
        self.url = url
        self.cause = cause
        message = f"Request to {url} failed"
        if cause:
            message += f": {cause}"
        super().__init__(message)


class InvalidResponseError(ApiError):
    """Respuesta 2xx cuyo body no es JSON válido."""

    def __init__(self, status_code: int, url: str | None = None, cause: Exception | None = None):
        self.status_code = status_code
        self.url = url
        self.cause = cause
        super().__init__(f"Response with status {status_code} is not valid JSON")
