"""Familia Linux: sistema operativo + Word."""

from __future__ import annotations

import logging

from rich.console import Console

from core.domain.families import Platform
from core.interfaces.software import Application, OperatingSystem, SoftwareFactory
from core.output import emit

logger = logging.getLogger(__name__)


class LinuxSystem(OperatingSystem):
    platform = Platform.LINUX

    def __init__(self, console: Console | None = None) -> None:
        self._console = console

    def run(self) -> None:
        emit(self._console, "running linux")


class Word(Application):
    platform = Platform.LINUX

    def __init__(self, console: Console | None = None) -> None:
        self._console = console

    def open(self) -> None:
        emit(self._console, "open word")


class LinuxFactory(SoftwareFactory):
    """Fábrica concreta: solo devuelve productos de la familia Linux."""

    platform = Platform.LINUX

    def __init__(self, console: Console | None = None) -> None:
        self._console = console

    def create_os(self) -> OperatingSystem:
        logger.debug("linux factory: creating operating system")
        return LinuxSystem(console=self._console)

    def create_app(self) -> Application:
        logger.debug("linux factory: creating application")
        return Word(console=self._console)
