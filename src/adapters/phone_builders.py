"""Builders concretos del demo Builder.

Cada builder asigna un literal fijo por paso; no hay validación adicional
más allá de la del modelo `Phone`.
"""

from __future__ import annotations

from core.domain.families import PhoneModel
from core.interfaces.phone_builder import PhoneBuilder


class Phone15ProBuilder(PhoneBuilder):
    def build_size(self) -> None:
        self.phone.size = 5.8

    def build_fps(self) -> None:
        self.phone.fps = 120

    def build_focal(self) -> None:
        self.phone.focal = 3

    def build_battery(self) -> None:
        self.phone.battery = 3200


class Phone15ProMaxBuilder(PhoneBuilder):
    def build_size(self) -> None:
        self.phone.size = 6.7

    def build_fps(self) -> None:
        self.phone.fps = 120

    def build_focal(self) -> None:
        self.phone.focal = 5

    def build_battery(self) -> None:
        self.phone.battery = 4500


_BUILDERS: dict[PhoneModel, type[PhoneBuilder]] = {
    PhoneModel.PRO: Phone15ProBuilder,
    PhoneModel.PRO_MAX: Phone15ProMaxBuilder,
}


def phone_builder_for(model: PhoneModel | str) -> PhoneBuilder:
    """Crea un builder nuevo para `model` (nunca reutiliza instancias)."""

    return _BUILDERS[PhoneModel(model)]()
