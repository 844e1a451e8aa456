"""Salida de texto de los productos.

Los mensajes de los demos deben salir tal cual (sin markup ni resaltado de
Rich), una línea por llamada.
"""

from __future__ import annotations

from rich.console import Console


def emit(console: Console | None, line: str) -> None:
    target = console or Console()
    target.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)
