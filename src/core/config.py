"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- La URL base del backend se lee una sola vez, al construir `AppSettings`,
  y se pasa explícitamente al cliente (nada de globales).
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "http://localhost:8080/api"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "storefront-client"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "storefront-client"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "storefront-client"
    return Path.home() / ".config" / "storefront-client"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# storefront-client user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central del cliente.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI y adaptadores.
    """

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_url: str = Field(
        default=DEFAULT_API_URL,
        min_length=1,
        # NEXT_PUBLIC_API_URL: mismo valor que usa el frontend.
        validation_alias=AliasChoices("STOREFRONT_API_URL", "NEXT_PUBLIC_API_URL"),
        description="URL base del backend REST; los endpoints se concatenan tal cual.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout del transporte httpx (segundos).",
    )
    user_agent: str = Field(
        default="storefront-client/0.1",
        min_length=1,
        description="User-Agent enviado al backend.",
    )
    token_preview_chars: int = Field(
        default=20,
        ge=0,
        le=64,
        description="Máximo de caracteres del token visibles en diagnósticos.",
    )

    verbose: bool = Field(
        default=False,
        description="Activa logs DEBUG (incluye diagnósticos de cada request).",
    )
    log_json: bool = Field(
        default=False,
        description="Emite logs como líneas JSON en lugar de salida de consola.",
    )
