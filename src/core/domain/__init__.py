"""Modelos y reglas del dominio.

Por qué:
- Aquí viven las estructuras de datos del juego (Pydantic v2) y las reglas locales.
- El dominio no conoce HTTP ni la CLI: solo conceptos del problema.
"""
