"""Errores del dominio."""

from __future__ import annotations


class CloneError(RuntimeError):
    """Fallo no recuperable al clonar un prototipo.

    Envuelve el error de bajo nivel (I/O o formato) en `__cause__`; quien
    llama no debe reintentar.
    """
