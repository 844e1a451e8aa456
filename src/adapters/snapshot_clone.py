"""Clon profundo por snapshot en archivo.

Por qué está en adapters:
- Toca el sistema de archivos (archivo temporal), un detalle de infraestructura.
- El dominio ya ofrece `Trophy.clone()` como copia estructural; esto es la
  variante serializar/reconstruir, útil para comparar ambos enfoques.

Formato:
- JSON de Pydantic (`model_dump_json`). El contenido del archivo no es un
  formato estable; solo vive durante el clon.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from core.config import AppSettings
from core.domain.errors import CloneError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def snapshot_clone(obj: ModelT, scratch_path: Path | None = None) -> ModelT:
    """Clona `obj` escribiéndolo completo en `scratch_path` y leyéndolo de nuevo.

    El grafo devuelto es independiente del original (ningún objeto anidado
    compartido). Cualquier fallo de I/O o de formato se convierte en
    `CloneError`; no hay reintentos.
    """

    path = scratch_path or AppSettings().scratch_path
    logger.debug("snapshot clone of %s via %s", type(obj).__name__, path)

    try:
        payload = obj.model_dump_json()

        with path.open("w", encoding="utf-8") as fh:
            fh.write(payload)

        with path.open("r", encoding="utf-8") as fh:
            raw = fh.read()

        return type(obj).model_validate_json(raw)
    except (OSError, PydanticSerializationError, ValidationError) as exc:
        raise CloneError(f"could not clone {type(obj).__name__} through {path}: {exc}") from exc
