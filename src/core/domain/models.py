"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación y documentación autocontenida (Field) para los productos.
- `model_dump_json` / `model_validate_json` dan el round trip que usa el
  snapshot clone sin escribir serializadores a mano.

Nota:
- Estos modelos describen *qué* es cada producto, no *cómo* se construye.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Phone(BaseModel):
    """Producto del demo Builder: configuración de un teléfono.

    Se crea vacío y el builder lo completa campo a campo.
    """

    model_config = ConfigDict(validate_assignment=True)

    size: float = Field(default=0.0, ge=0, description="Tamaño de pantalla (pulgadas).")
    fps: int = Field(default=0, ge=0, description="Tasa de refresco (Hz).")
    focal: int = Field(default=0, ge=0, description="Número de distancias focales.")
    battery: int = Field(default=0, ge=0, description="Capacidad de batería (mAh).")

    def __str__(self) -> str:
        return f"Phone{{size={self.size}, fps={self.fps}, focal={self.focal}, battery={self.battery}}}"


class Sheep(BaseModel):
    """Prototipo con clon superficial.

    Su único campo es un `str` (inmutable), así que la copia superficial ya es
    independiente del original.
    """

    name: str = Field(..., description="Nombre de la oveja.")

    def clone(self) -> Self:
        return self.model_copy()


class Human(BaseModel):
    """Objeto propiedad de un `Trophy`."""

    name: str = Field(..., description="Nombre de la persona premiada.")

    def clone(self) -> Self:
        return self.model_copy()


class Trophy(BaseModel):
    """Prototipo con clon profundo.

    El `Human` se guarda por referencia: `model_copy()` lo compartiría, por eso
    `clone` copia también el objeto anidado.
    """

    human: Human = Field(..., description="Persona a la que pertenece el trofeo.")

    def get_name(self) -> str:
        return self.human.name

    def set_name(self, name: str) -> None:
        self.human.name = name

    def clone(self) -> Self:
        return type(self)(human=self.human.clone())
