"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from core.domain.catalog import PatternInfo


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    - Los comandos de demo no lo usan: su salida debe ser exacta.
    """

    title = Text("creational-demos", style="bold cyan")
    subtitle = Text("Abstract Factory • Builder • Factory Method • Prototype", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_section(console: Console, title: str) -> None:
    console.print(Rule(title, style="cyan"))


def build_patterns_table(patterns: Iterable[PatternInfo]) -> Table:
    """Tabla con el catálogo de patrones."""

    table = Table(title="Creational Patterns")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Pattern", style="white")
    table.add_column("Command", style="magenta")
    table.add_column("Problem", style="dim")
    for info in patterns:
        table.add_row(info.key, info.title, info.command, info.problem)
    return table


def build_pattern_panel(info: PatternInfo) -> Panel:
    """Panel con la ficha completa de un patrón."""

    title = Text(info.title, style="bold yellow")
    body = Text()
    body.append("Problem:\n", style="bold")
    body.append(info.problem.strip() + "\n\n")
    body.append("Solution:\n", style="bold")
    body.append(info.solution.strip() + "\n")
    if info.roles:
        body.append("\nRoles:\n", style="bold")
        for role in info.roles:
            body.append(f"- {role.name}: {role.description}\n")
    if info.benefits:
        body.append("\nBenefits:\n", style="bold")
        for benefit in info.benefits:
            body.append(f"- {benefit}\n")
    body.append(f"\nRun: creational-demos {info.command}", style="dim")

    return Panel(body, title=title, border_style="yellow")
