# app/modules/users/__init__.py
"""
Módulo de Usuarios - Directorio y Roles

- Registro idempotente por email
- Listado por rol y consulta de rol
- Cambio de rol y eliminación (solo administradores)
- Ranking de repartidores
"""

from .router import router
from .service import UsersService
from .repository import UsersRepository

__all__ = [
    "router",
    "UsersService",
    "UsersRepository"
]
