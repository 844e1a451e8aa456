"""Variant tags for the demo product families.

Keeping them in the domain layer lets adapters, services and the CLI share a
single source of truth (the CLI uses them directly as Typer choices).
"""

from __future__ import annotations

from enum import Enum


class Platform(str, Enum):
    """Product family produced by an abstract software factory."""

    WINDOWS = "windows"
    LINUX = "linux"


class ShapeKind(str, Enum):
    """Shapes available through the factory-method demo."""

    CIRCLE = "circle"
    RECTANGLE = "rectangle"


class PhoneModel(str, Enum):
    """Phone variants with a concrete builder."""

    PRO = "15-pro"
    PRO_MAX = "15-pro-max"
