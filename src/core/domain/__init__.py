"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2) y el enum de verbos.
- El dominio no conoce httpx ni la CLI: solo conceptos de la API.
"""
