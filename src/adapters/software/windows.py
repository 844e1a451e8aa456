"""Familia Windows: sistema operativo + Excel."""

from __future__ import annotations

import logging

from rich.console import Console

from core.domain.families import Platform
from core.interfaces.software import Application, OperatingSystem, SoftwareFactory
from core.output import emit

logger = logging.getLogger(__name__)


class WindowsSystem(OperatingSystem):
    platform = Platform.WINDOWS

    def __init__(self, console: Console | None = None) -> None:
        self._console = console

    def run(self) -> None:
        emit(self._console, "running windows")


class Excel(Application):
    platform = Platform.WINDOWS

    def __init__(self, console: Console | None = None) -> None:
        self._console = console

    def open(self) -> None:
        emit(self._console, "open excel")


class WindowsFactory(SoftwareFactory):
    """Fábrica concreta: solo devuelve productos de la familia Windows."""

    platform = Platform.WINDOWS

    def __init__(self, console: Console | None = None) -> None:
        self._console = console

    def create_os(self) -> OperatingSystem:
        logger.debug("windows factory: creating operating system")
        return WindowsSystem(console=self._console)

    def create_app(self) -> Application:
        logger.debug("windows factory: creating application")
        return Excel(console=self._console)
