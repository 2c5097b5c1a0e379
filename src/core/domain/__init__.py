"""Modelos y entidades del dominio.

Por qué:
- Aquí viven el agregado `Order`, sus eventos y la jerarquía de errores.
- El dominio no conoce HTTP, ficheros ni plantillas: solo conceptos del problema.
"""
