# app/modules/users/router.py
from typing import Optional

from fastapi import APIRouter, Body, Depends, Path, Query
from pymongo.database import Database

from app.config.database import get_db
from app.core.auth.dependencies import get_current_user, get_admin_user
from app.shared.schemas.common import DeleteResponse, UpdateResponse
from .service import UsersService
from .schemas import Role, TopRidersResponse, UserRegisterRequest

router = APIRouter()

@router.post("/users/{email}")
async def register_user(
    email: str = Path(..., description="Email del usuario"),
    user_data: UserRegisterRequest = Body(...),
    db: Database = Depends(get_db)
):
    """
    Registrar usuario (idempotente)

    Si el email ya existe devuelve {"message": "User Already Registered"}
    sin modificar el registro existente.
    """
    service = UsersService(db)
    return await service.register_user(email, user_data)

@router.get("/users")
async def get_users(
    role: Optional[str] = Query(None, description="User, Rider, Admin o All"),
    current_user = Depends(get_current_user),
    db: Database = Depends(get_db)
):
    """Listar usuarios, opcionalmente filtrados por rol"""
    service = UsersService(db)
    return await service.get_users(role)

@router.get("/user-role/{email}")
async def get_user_role(
    email: str = Path(..., description="Email del usuario"),
    db: Database = Depends(get_db)
):
    """Rol del usuario para control de la interfaz"""
    service = UsersService(db)
    return await service.get_user_role(email)

@router.patch("/update-role/{email}", response_model=UpdateResponse)
async def update_role(
    email: str = Path(..., description="Email del usuario"),
    newRole: Role = Query(..., description="Nuevo rol"),
    current_user = Depends(get_admin_user),
    db: Database = Depends(get_db)
):
    """Cambiar rol de un usuario existente (solo administradores)"""
    service = UsersService(db)
    return await service.update_role(email, newRole)

@router.delete("/user-delete/{id}", response_model=DeleteResponse)
async def delete_user(
    id: str = Path(..., description="ID del usuario"),
    current_user = Depends(get_admin_user),
    db: Database = Depends(get_db)
):
    """Eliminar usuario (solo administradores)"""
    service = UsersService(db)
    return await service.delete_user(id)

@router.get("/top-riders", response_model=TopRidersResponse)
async def get_top_riders(db: Database = Depends(get_db)):
    """Top 5 repartidores por calificación y por cantidad de entregas"""
    service = UsersService(db)
    return await service.get_top_riders()
