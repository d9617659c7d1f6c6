"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- El loop interactivo depende de `GameAPI`, no del cliente HTTP.
"""
