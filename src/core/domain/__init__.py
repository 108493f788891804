"""Modelos y errores del dominio.

Por qué:
- Aquí viven las estructuras de datos del catálogo (Pydantic v2).
- El dominio no conoce la CLI ni los exportadores: solo conceptos del problema.
"""
