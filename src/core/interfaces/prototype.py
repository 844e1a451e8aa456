"""Contrato del demo Prototype."""

from __future__ import annotations

from typing import Protocol, Self, runtime_checkable


@runtime_checkable
class Prototype(Protocol):
    """Objeto capaz de copiarse a sí mismo.

    - El clon nunca es el mismo objeto que el original.
    - Al momento de clonar, los campos son iguales; después evolucionan por separado.
    """

    def clone(self) -> Self:
        ...
