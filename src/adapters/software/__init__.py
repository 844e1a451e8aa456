"""Fábricas concretas del demo Abstract Factory.

Por qué un paquete:
- Un módulo por familia de productos.
- Cada fábrica implementa `core.interfaces.software.SoftwareFactory`.
"""

from __future__ import annotations

from rich.console import Console

from adapters.software.linux import LinuxFactory, LinuxSystem, Word
from adapters.software.windows import Excel, WindowsFactory, WindowsSystem
from core.domain.families import Platform
from core.interfaces.software import SoftwareFactory

_FACTORIES: dict[Platform, type[SoftwareFactory]] = {
    Platform.WINDOWS: WindowsFactory,
    Platform.LINUX: LinuxFactory,
}


def software_factory_for(platform: Platform | str, console: Console | None = None) -> SoftwareFactory:
    """Devuelve la fábrica de la familia pedida.

    Lanza `ValueError` si `platform` no es una familia conocida.
    """

    return _FACTORIES[Platform(platform)](console=console)


__all__ = [
    "Excel",
    "LinuxFactory",
    "LinuxSystem",
    "WindowsFactory",
    "WindowsSystem",
    "Word",
    "software_factory_for",
]
