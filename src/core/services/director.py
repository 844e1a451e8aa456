"""Director del demo Builder."""

from __future__ import annotations

import logging

from core.domain.models import Phone
from core.interfaces.phone_builder import PhoneBuilder

logger = logging.getLogger(__name__)


class PhoneDirector:
    """Ejecuta los pasos de un `PhoneBuilder` en orden fijo.

    Orden: tamaño -> refresco -> focal -> batería. El cliente solo habla con
    el director; nunca ve un `Phone` a medio construir.
    """

    def __init__(self, builder: PhoneBuilder) -> None:
        self._builder = builder

    def create_phone(self) -> Phone:
        logger.debug("building phone with %s", type(self._builder).__name__)
        self._builder.build_size()
        self._builder.build_fps()
        self._builder.build_focal()
        self._builder.build_battery()
        return self._builder.get_phone()
