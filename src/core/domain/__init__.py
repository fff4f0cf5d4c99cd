"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (statefile, backend, respuestas TFE)
  y la jerarquía de errores.
- El dominio no conoce HTTP, CLI, ni ficheros: solo conceptos del problema.
"""
