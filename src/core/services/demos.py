"""Demo runners for the four creational patterns.

Each runner reproduces one demonstration program: it wires the concrete
factories/builders/prototypes together and writes the demo lines to the
given Rich console. The CLI only picks a runner; tests can call the runners
directly and inspect the returned products.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, Sequence, TypeVar

from rich.console import Console

from adapters.phone_builders import phone_builder_for
from adapters.shapes import shape_factory_for
from adapters.snapshot_clone import snapshot_clone
from adapters.software import software_factory_for
from core.config import AppSettings
from core.domain.families import PhoneModel, Platform, ShapeKind
from core.domain.models import Human, Phone, Sheep, Trophy
from core.output import emit
from core.services.director import PhoneDirector

logger = logging.getLogger(__name__)

SEPARATOR = "---------------"

T = TypeVar("T")


@dataclass
class CloneOutcome(Generic[T]):
    """Original and clone after the clone has been edited."""

    original: T
    clone: T


def run_abstract_factory_demo(
    console: Console | None = None,
    platforms: Sequence[Platform] = (Platform.WINDOWS, Platform.LINUX),
) -> None:
    """Create an OS + app pair per family and use both, separated by a rule line."""

    for index, platform in enumerate(platforms):
        if index:
            emit(console, SEPARATOR)
        factory = software_factory_for(platform, console=console)
        operating_system = factory.create_os()
        application = factory.create_app()
        operating_system.run()
        application.open()


def run_builder_demo(
    console: Console | None = None,
    models: Sequence[PhoneModel] = (PhoneModel.PRO, PhoneModel.PRO_MAX),
) -> list[Phone]:
    """Build one phone per model through a fresh builder + director."""

    phones: list[Phone] = []
    for model in models:
        director = PhoneDirector(phone_builder_for(model))
        phone = director.create_phone()
        emit(console, str(phone))
        phones.append(phone)
    return phones


def run_factory_method_demo(
    console: Console | None = None,
    kinds: Sequence[ShapeKind] = (ShapeKind.CIRCLE, ShapeKind.RECTANGLE),
) -> None:
    for kind in kinds:
        shape = shape_factory_for(kind, console=console).create()
        shape.show()


def run_prototype_demo(console: Console | None = None) -> CloneOutcome[Sheep]:
    """Shallow clone: renaming the clone leaves the original untouched."""

    lazy_sheep = Sheep(name="lazySheep")

    duo_li = lazy_sheep.clone()
    duo_li.name = "duoLi"

    emit(console, lazy_sheep.name)
    emit(console, duo_li.name)
    emit(console, str(lazy_sheep is duo_li))
    return CloneOutcome(original=lazy_sheep, clone=duo_li)


def run_deep_prototype_demo(
    console: Console | None = None,
    *,
    use_snapshot: bool = False,
    scratch_path: Path | None = None,
    settings: AppSettings | None = None,
) -> CloneOutcome[Trophy]:
    """Deep clone: renaming the clone's human leaves the original's human untouched.

    With `use_snapshot` the copy goes through the scratch-file round trip
    instead of the structural `Trophy.clone()`; a failure there raises
    `CloneError`.
    """

    trophy = Trophy(human=Human(name="ZhangSan"))

    if use_snapshot:
        settings = settings or AppSettings()
        trophy2 = snapshot_clone(trophy, scratch_path or settings.scratch_path)
    else:
        trophy2 = trophy.clone()
    trophy2.set_name("LiSi")

    emit(console, trophy.get_name())
    emit(console, trophy2.get_name())
    return CloneOutcome(original=trophy, clone=trophy2)
