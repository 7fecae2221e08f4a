"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/CSP) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import Credentials


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "csp-demo"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "csp-demo"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "csp-demo"
    return Path.home() / ".config" / "csp-demo"


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


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# CSP demo user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Los cuatro valores de conexión (URLs + credenciales) no tienen default útil:
    hay que proveerlos por entorno, `.env` o flags de la CLI antes de reservar.
    """

    model_config = SettingsConfigDict(
        env_prefix="CSP_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_url: str = Field(
        default="",
        description="Base URL de la API CSP (accounts, service matrix, jobs).",
    )
    authorisation_url: str = Field(
        default="",
        description="Base URL del servidor de autorización OAuth.",
    )
    username: str = Field(
        default="",
        description="Usuario CSP para el intercambio de token.",
    )
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Password CSP. Nunca se imprime.",
    )

    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="csp-demo/0.1",
        min_length=1,
        description="User-Agent enviado a la API.",
    )

    collection_address: str = Field(
        default="CSP Demo Collection",
        min_length=1,
        description="Primera línea de la dirección de recogida del job demo.",
    )
    delivery_address: str = Field(
        default="CSP Demo Delivery",
        min_length=1,
        description="Primera línea de la dirección de entrega del job demo.",
    )

    def credentials(self) -> Credentials:
        return Credentials(
            username=self.username,
            password=self.password,
            base_url=self.authorisation_url,
        )

    def missing_fields(self) -> list[str]:
        """Settings obligatorios que siguen vacíos."""

        missing: list[str] = []
        if not self.api_url.strip():
            missing.append("api_url")
        if not self.authorisation_url.strip():
            missing.append("authorisation_url")
        if not self.username.strip():
            missing.append("username")
        if not self.password.get_secret_value():
            missing.append("password")
        return missing
