"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan los productos y fábricas concretas.
- Los roles abstractos con estado o pasos obligatorios usan `abc.ABC`.
"""
