"""Adaptadores de persistencia.

Por qué un paquete:
- Agrupa las implementaciones de `core.interfaces.repository.OrderRepository`.
- El composition root (`bootstrap`) elige una por nombre.
"""

from adapters.repositories.json_file import JsonFileOrderRepository
from adapters.repositories.memory import InMemoryOrderRepository

__all__ = [
	"InMemoryOrderRepository",
	"JsonFileOrderRepository",
]
