"""Interfaces/abstracciones del Core.

Por qué:
- Define el contrato (Protocol) que implementa cada demo de `patterns`.
- El Core ejecuta demos sin conocer sus clases concretas.
"""
