"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que demos (logger singleton), servicios y exportadores lean la
  configuración de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.errors import InvalidConfigurationError
from core.domain.language import Language


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "patternbook"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "patternbook"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "patternbook"
    return Path.home() / ".config" / "patternbook"


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


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    Las claves existentes se conservan; los valores `None` se ignoran.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# patternbook user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core.
    - Un único contrato de configuración para CLI, demos y exportadores.
    """

    model_config = SettingsConfigDict(
        env_prefix="PATTERNBOOK_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    default_language: Language = Field(
        default=Language.ENGLISH,
        description="Idioma por defecto para intenciones y reportes (en/es).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel del logging de diagnóstico de la aplicación.",
    )
    log_dir: Path = Field(
        default_factory=lambda: get_user_config_dir() / "logs",
        description="Directorio donde escribe el logger de la demo Singleton.",
    )
    log_max_bytes: int = Field(
        default=5 * 1024,
        gt=0,
        le=100 * 1024 * 1024,
        description="Tamaño a partir del cual el logger singleton rota su fichero.",
    )
    reports_dir: Path = Field(
        default=Path("reports"),
        description="Directorio por defecto para exportaciones JSON/HTML/PDF.",
    )
    docs_dir: Path | None = Field(
        default=None,
        description="Ruta alternativa a las explicaciones markdown de los patrones.",
    )
    show_banner: bool = Field(
        default=True,
        description="Mostrar el banner al arrancar la CLI.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


def load_settings() -> AppSettings:
    """Construye `AppSettings` convirtiendo errores de validación en errores de dominio.

    Por qué:
    - Un valor inválido en el entorno o en un `.env` debe llegar a la CLI como
      `InvalidConfigurationError` (mensaje + exit code 2), no como traceback.
    """

    try:
        return AppSettings()
    except ValidationError as exc:
        problems = [
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in exc.errors()
        ]
        summary = "; ".join(f"{p['field']}: {p['message']}" for p in problems)
        raise InvalidConfigurationError(
            f"Invalid configuration: {summary}",
            details={"errors": problems},
            code="invalid_config",
        ) from exc
