"""Doctor command for environment diagnostics."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from adapters.snapshot_clone import snapshot_clone
from core.config import AppSettings
from core.domain.errors import CloneError
from core.domain.models import Human, Trophy

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_log_level(level: str) -> tuple[bool, str]:
    value = logging.getLevelName(level.strip().upper())
    if isinstance(value, int):
        return True, level.upper()
    return False, f"unknown level {level!r} -> WARNING will be used"


def _check_snapshot(path: Path) -> tuple[bool, str]:
    """Run a snapshot clone through a temp file next to `path`.

    `path` itself is never opened, so an existing scratch file keeps its contents.
    """

    directory = path.parent
    try:
        fd, name = tempfile.mkstemp(prefix=".creational-doctor-", suffix=".json", dir=directory)
    except OSError as exc:
        return False, f"cannot create files in {directory}: {exc}"
    os.close(fd)
    sibling = Path(name)

    try:
        trophy = Trophy(human=Human(name="doctor"))
        copy = snapshot_clone(trophy, sibling)
        ok = copy.get_name() == "doctor" and copy.human is not trophy.human
        return ok, "OK" if ok else "clone does not match the source"
    except CloneError as exc:
        return False, str(exc)
    finally:
        sibling.unlink(missing_ok=True)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="creational-demos Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    ok_level, detail_level = _check_log_level(settings.log_level)
    table.add_row("Log level", "OK" if ok_level else "WARN", detail_level)

    ok_scratch, detail_scratch = _check_snapshot(settings.scratch_path)
    table.add_row(f"Scratch file ({settings.scratch_path})", "OK" if ok_scratch else "FAIL", detail_scratch)

    tmp_path = Path(tempfile.gettempdir()) / "creational-demos-doctor.json"
    ok_tmp, detail_tmp = _check_snapshot(tmp_path)
    table.add_row("Temp dir snapshot", "OK" if ok_tmp else "FAIL", detail_tmp)

    _console.print(table)

    if not ok_scratch:
        _console.print(
            "\n[yellow]Note:[/yellow] set CREATIONAL_SCRATCH_PATH or pass `--scratch-path` "
            "to `prototype --snapshot` to use a writable location."
        )
