"""Builder abstracto del demo Builder.

Por qué ABC y no Protocol:
- El builder abstracto tiene estado (el `Phone` en construcción) y un
  `get_phone` concreto; solo los cuatro pasos son abstractos.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from core.domain.models import Phone


class PhoneBuilder(ABC):
    """Define los pasos para construir un `Phone`.

    Los pasos se invocan desde `PhoneDirector`, completos y en orden. El
    producto interno se reutiliza si el director vuelve a ejecutarse: cada
    paso reasigna el mismo literal sobre el mismo objeto.
    """

    def __init__(self) -> None:
        self._phone = Phone()

    @property
    def phone(self) -> Phone:
        """Producto en construcción (para subclases)."""

        return self._phone

    @abstractmethod
    def build_size(self) -> None: ...

    @abstractmethod
    def build_fps(self) -> None: ...

    @abstractmethod
    def build_focal(self) -> None: ...

    @abstractmethod
    def build_battery(self) -> None: ...

    def get_phone(self) -> Phone:
        """Entrega una copia del producto.

        El `Phone` devuelto no comparte estado con el builder: ejecutar de
        nuevo los pasos no modifica teléfonos ya entregados.
        """

        return self._phone.model_copy()
