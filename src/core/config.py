"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los demos no leen config: sus valores son literales. Solo el logging y la
  ruta temporal del snapshot clone son configurables.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="CREATIONAL_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging (DEBUG, INFO, WARNING, ...).",
    )
    scratch_path: Path = Field(
        default=Path("a.txt"),
        description="Archivo temporal usado por el snapshot clone (ruta relativa al cwd).",
    )
    show_banner: bool = Field(
        default=True,
        description="Mostrar el banner en comandos interactivos.",
    )
