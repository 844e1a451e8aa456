"""CLI (Typer) de creational-demos.

Por qué Typer + Rich:
- Un comando por demo, sin argumentos obligatorios: `creational-demos builder`.
- Rich solo para catálogo, errores y diagnósticos; las líneas de los demos
  salen sin formato.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from cli import doctor
from cli.ui_components import (
    build_pattern_panel,
    build_patterns_table,
    print_banner,
    print_section,
)
from core.config import AppSettings
from core.domain.catalog import get_pattern, list_patterns
from core.domain.errors import CloneError
from core.domain.families import PhoneModel, Platform, ShapeKind
from core.logging_setup import configure_logging
from core.services.demos import (
    run_abstract_factory_demo,
    run_builder_demo,
    run_deep_prototype_demo,
    run_factory_method_demo,
    run_prototype_demo,
)

logger = logging.getLogger(__name__)

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Demos of the creational design patterns.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)


@app.command("abstract-factory")
def abstract_factory(
    platform: list[Platform] = typer.Option(
        None,
        "--platform",
        "-p",
        help="Family to build (repeatable). Default: windows then linux.",
    ),
) -> None:
    """Abstract Factory: matched OS + application per family."""

    platforms = tuple(platform) if platform else (Platform.WINDOWS, Platform.LINUX)
    run_abstract_factory_demo(_console, platforms=platforms)


@app.command()
def builder(
    model: list[PhoneModel] = typer.Option(
        None,
        "--model",
        "-m",
        help="Phone model to build (repeatable). Default: 15-pro then 15-pro-max.",
    ),
) -> None:
    """Builder: a director assembles phones step by step."""

    models = tuple(model) if model else (PhoneModel.PRO, PhoneModel.PRO_MAX)
    run_builder_demo(_console, models=models)


@app.command("factory-method")
def factory_method(
    kind: list[ShapeKind] = typer.Option(
        None,
        "--kind",
        "-k",
        help="Shape to create (repeatable). Default: circle then rectangle.",
    ),
) -> None:
    """Factory Method: one factory per shape."""

    kinds = tuple(kind) if kind else (ShapeKind.CIRCLE, ShapeKind.RECTANGLE)
    run_factory_method_demo(_console, kinds=kinds)


@app.command()
def prototype(
    deep: bool = typer.Option(False, "--deep", help="Run the Trophy/Human deep-clone demo."),
    snapshot: bool = typer.Option(
        False,
        "--snapshot",
        help="Deep clone through a scratch-file round trip (implies --deep).",
    ),
    scratch_path: Path | None = typer.Option(
        None,
        "--scratch-path",
        help="Scratch file for --snapshot (default: CREATIONAL_SCRATCH_PATH or ./a.txt).",
    ),
) -> None:
    """Prototype: shallow clone (Sheep) or deep clone (Trophy)."""

    if not (deep or snapshot):
        run_prototype_demo(_console)
        return

    try:
        run_deep_prototype_demo(_console, use_snapshot=snapshot, scratch_path=scratch_path)
    except CloneError as exc:
        logger.debug("snapshot clone failed", exc_info=exc)
        _err_console.print(f"[red]Clone failed:[/red] {escape(str(exc))}", highlight=False)
        raise typer.Exit(code=1) from exc


@app.command("all")
def run_all() -> None:
    """Run the four demos one after another."""

    settings = AppSettings()
    if settings.show_banner:
        print_banner(_console)

    print_section(_console, "Abstract Factory")
    run_abstract_factory_demo(_console)
    print_section(_console, "Builder")
    run_builder_demo(_console)
    print_section(_console, "Factory Method")
    run_factory_method_demo(_console)
    print_section(_console, "Prototype")
    run_prototype_demo(_console)


@app.command()
def patterns() -> None:
    """List the patterns covered by the demos."""

    settings = AppSettings()
    if settings.show_banner:
        print_banner(_console)
    _console.print(build_patterns_table(list_patterns()))


@app.command()
def explain(pattern: str = typer.Argument(..., help="Pattern key, e.g. builder.")) -> None:
    """Show problem, solution and roles for one pattern."""

    try:
        info = get_pattern(pattern)
    except KeyError:
        keys = ", ".join(p.key for p in list_patterns())
        raise typer.BadParameter(f"unknown pattern {pattern!r} (choose from: {keys})", param_hint="PATTERN") from None
    _console.print(build_pattern_panel(info))


def run() -> None:
    app()
