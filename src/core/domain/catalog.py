"""Catalog of the creational patterns shown by the demos.

Used by the `patterns` and `explain` CLI commands. Entries are static; the
catalog is read-only at runtime.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class PatternRole(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)


class PatternInfo(BaseModel):
    """Documentation entry for one pattern."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Identifier used on the CLI.")
    title: str = Field(..., min_length=1)
    command: str = Field(..., min_length=1, description="CLI command that runs the demo.")
    problem: str = Field(..., min_length=1)
    solution: str = Field(..., min_length=1)
    roles: tuple[PatternRole, ...] = Field(default_factory=tuple)
    benefits: tuple[str, ...] = Field(default_factory=tuple)


_PATTERNS: tuple[PatternInfo, ...] = (
    PatternInfo(
        key="abstract-factory",
        title="Abstract Factory",
        command="abstract-factory",
        problem="Related products must be created together and always belong to the same family.",
        solution=(
            "One factory interface creates every product of a family; each concrete factory "
            "returns a matched set (Windows -> Windows + Excel, Linux -> Linux + Word)."
        ),
        roles=(
            PatternRole(name="Abstract factory", description="SoftwareFactory: create_os() and create_app()."),
            PatternRole(name="Concrete factory", description="WindowsFactory, LinuxFactory."),
            PatternRole(name="Abstract product", description="OperatingSystem, Application."),
            PatternRole(name="Concrete product", description="WindowsSystem, LinuxSystem, Excel, Word."),
        ),
        benefits=(
            "Products of one family are never mixed.",
            "Switching family means switching one factory object.",
        ),
    ),
    PatternInfo(
        key="builder",
        title="Builder",
        command="builder",
        problem=(
            "Creating an object takes several steps and each variant implements the steps "
            "differently; one class holding every variant grows bloated."
        ),
        solution=(
            "Move each variant's steps into its own builder and let a director run the steps "
            "in a fixed order."
        ),
        roles=(
            PatternRole(name="Product", description="Phone: size, fps, focal, battery."),
            PatternRole(name="Abstract builder", description="PhoneBuilder: the four build steps and get_phone()."),
            PatternRole(name="Concrete builder", description="Phone15ProBuilder, Phone15ProMaxBuilder."),
            PatternRole(name="Director", description="PhoneDirector: size -> fps -> focal -> battery."),
        ),
        benefits=(
            "Construction is separated from representation.",
            "A new variant is a new builder.",
            "Clients never see the product's internal structure.",
        ),
    ),
    PatternInfo(
        key="factory-method",
        title="Factory Method",
        command="factory-method",
        problem="Callers should not depend on the concrete class of the object they need.",
        solution="An abstract creator declares create(); each subclass returns one concrete product.",
        roles=(
            PatternRole(name="Product", description="Shape: show()."),
            PatternRole(name="Concrete product", description="Circle, Rectangle."),
            PatternRole(name="Creator", description="ShapeFactory: create()."),
            PatternRole(name="Concrete creator", description="CircleFactory, RectangleFactory."),
        ),
        benefits=("Adding a shape means adding a product and its factory.",),
    ),
    PatternInfo(
        key="prototype",
        title="Prototype",
        command="prototype",
        problem=(
            "A copy of an object is needed, but building it from scratch is expensive or "
            "couples the caller to its concrete class."
        ),
        solution=(
            "Objects copy themselves through clone(). A shallow clone duplicates the top level; "
            "a deep clone also duplicates every owned object."
        ),
        roles=(
            PatternRole(name="Abstract prototype", description="Prototype: clone()."),
            PatternRole(name="Concrete prototype", description="Sheep (shallow), Trophy (deep)."),
            PatternRole(name="Client", description="Clones the prototype and edits the copy."),
        ),
        benefits=(
            "Skips repeated initialization of complex objects.",
            "Clients do not need to know the concrete class.",
        ),
    ),
)


def list_patterns() -> tuple[PatternInfo, ...]:
    return _PATTERNS


def get_pattern(key: str) -> PatternInfo:
    """Return the catalog entry for `key` (case-insensitive).

    Raises `KeyError` for unknown keys.
    """

    wanted = key.strip().lower()
    for info in _PATTERNS:
        if info.key == wanted:
            return info
    raise KeyError(key)
