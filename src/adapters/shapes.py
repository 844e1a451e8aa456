"""Figuras y fábricas concretas del demo Factory Method."""

from __future__ import annotations

from rich.console import Console

from core.domain.families import ShapeKind
from core.interfaces.shapes import Shape, ShapeFactory
from core.output import emit


class Circle(Shape):
    kind = ShapeKind.CIRCLE

    def __init__(self, console: Console | None = None) -> None:
        self._console = console

    def show(self) -> None:
        emit(self._console, "create a circle")


class Rectangle(Shape):
    kind = ShapeKind.RECTANGLE

    def __init__(self, console: Console | None = None) -> None:
        self._console = console

    def show(self) -> None:
        emit(self._console, "create a rectangle")


class CircleFactory(ShapeFactory):
    kind = ShapeKind.CIRCLE

    def __init__(self, console: Console | None = None) -> None:
        self._console = console

    def create(self) -> Shape:
        return Circle(console=self._console)


class RectangleFactory(ShapeFactory):
    kind = ShapeKind.RECTANGLE

    def __init__(self, console: Console | None = None) -> None:
        self._console = console

    def create(self) -> Shape:
        return Rectangle(console=self._console)


_FACTORIES: dict[ShapeKind, type[ShapeFactory]] = {
    ShapeKind.CIRCLE: CircleFactory,
    ShapeKind.RECTANGLE: RectangleFactory,
}


def shape_factory_for(kind: ShapeKind | str, console: Console | None = None) -> ShapeFactory:
    return _FACTORIES[ShapeKind(kind)](console=console)
