"""Contratos del demo Abstract Factory.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Cada familia (Windows, Linux) implementa los tres contratos y los tests
  pueden verificarlos con `isinstance` gracias a `runtime_checkable`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.families import Platform


@runtime_checkable
class OperatingSystem(Protocol):
    """Producto abstracto: sistema operativo."""

    platform: Platform

    def run(self) -> None:
        """Imprime el mensaje que identifica al sistema."""

        ...


@runtime_checkable
class Application(Protocol):
    """Producto abstracto: aplicación."""

    platform: Platform

    def open(self) -> None:
        ...


@runtime_checkable
class SoftwareFactory(Protocol):
    """Fábrica abstracta.

    Reglas de diseño:
    - Los dos productos devueltos pertenecen siempre a `platform`.
    - Crear no imprime nada; solo `run`/`open` tienen efectos.
    """

    platform: Platform

    def create_os(self) -> OperatingSystem:
        ...

    def create_app(self) -> Application:
        ...
