"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que el transporte y el servicio de autenticación lean el endpoint
  y los timeouts de forma consistente.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from dotenv import set_key
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "empresas"
ENV_PREFIX = "EMPRESAS_"
DEFAULT_AUTH_ENDPOINT_URL = "https://empresas.ioasys.com.br/api/v1/users/auth/sign_in"


def get_user_env_file() -> Path:
    """`.env` por usuario en el directorio de config de la plataforma (vía Click/Typer)."""

    return Path(typer.get_app_dir(APP_NAME)) / ".env"


def save_connection_settings(
    endpoint_url: str,
    timeout_seconds: float,
    env_path: Path | None = None,
) -> Path:
    """Valida endpoint y timeout con `AppSettings` y los guarda en el `.env` de usuario.

    Lanza `pydantic.ValidationError` sin escribir nada si algún valor es inválido.
    El resto de claves del archivo se conserva.
    """

    validated = AppSettings(
        _env_file=None,
        auth_endpoint_url=endpoint_url,
        http_timeout_seconds=timeout_seconds,
    )

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.touch(exist_ok=True)
    set_key(env_path, f"{ENV_PREFIX}AUTH_ENDPOINT_URL", validated.auth_endpoint_url, quote_mode="never")
    set_key(
        env_path,
        f"{ENV_PREFIX}HTTP_TIMEOUT_SECONDS",
        str(validated.http_timeout_seconds),
        quote_mode="never",
    )
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars `EMPRESAS_*`).
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    auth_endpoint_url: str = Field(
        default=DEFAULT_AUTH_ENDPOINT_URL,
        min_length=8,
        description="URL del endpoint `sign_in`.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos). Al expirar: error de conectividad.",
    )
    user_agent: str = Field(
        default="empresas-auth/0.1",
        min_length=1,
        description="User-Agent de las peticiones.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging de la CLI (DEBUG, INFO, WARNING...).",
    )

    @field_validator("auth_endpoint_url")
    @classmethod
    def _http_endpoint(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("auth_endpoint_url must be an http(s) URL")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value!r}")
        return level
