"""Configuración del Core.

Por qué aquí:
- Centraliza los valores por defecto (pydantic-settings) sin contaminar los servicios.
- Permite que adaptadores (HTTP/imágenes/callbacks) lean config de forma consistente.

Nota:
- La librería no lee ficheros `.env`; solo variables de entorno con prefijo
  `NETWORKKIT_`. Cualquier argumento explícito (p.ej. `timeout=`) tiene prioridad.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from networkkit import __version__


class NetworkKitSettings(BaseSettings):
    """Configuración central de la librería."""

    model_config = SettingsConfigDict(
        env_prefix="NETWORKKIT_",
        extra="ignore",
        case_sensitive=False,
    )

    timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Deadline por request completo (segundos).",
    )
    image_compression_quality: float = Field(
        default=0.95,
        ge=0.0,
        le=1.0,
        description="Calidad JPEG (0..1) al re-codificar imágenes en `upload`.",
    )
    user_agent: str = Field(
        default=f"networkkit/{__version__}",
        min_length=1,
        description="User-Agent enviado en cada request.",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Seguir redirecciones HTTP automáticamente.",
    )
    callback_workers: int = Field(
        default=4,
        ge=1,
        le=64,
        description=(
            "Hilos del pool que ejecuta las variantes con callback; "
            "si cambia entre llamadas, el pool se recrea con el nuevo tamaño."
        ),
    )


def resolve_timeout(timeout: float | None, settings: NetworkKitSettings) -> float:
    """Devuelve el timeout explícito o, si falta, el de la configuración."""

    if timeout is None:
        return settings.timeout_seconds
    if timeout <= 0:
        raise ValueError(f"timeout must be positive, got {timeout!r}")
    return float(timeout)
