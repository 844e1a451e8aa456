"""Contratos del demo Factory Method."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from core.domain.families import ShapeKind


@runtime_checkable
class Shape(Protocol):
    kind: ShapeKind

    def show(self) -> None:
        ...


class ShapeFactory(ABC):
    """Creador abstracto: cada subclase decide qué `Shape` construir."""

    kind: ShapeKind

    @abstractmethod
    def create(self) -> Shape:
        """Devuelve una figura nueva en cada llamada."""
