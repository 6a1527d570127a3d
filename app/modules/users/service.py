# app/modules/users/service.py
import logging
from typing import Any, Dict, List, Optional

from fastapi import HTTPException
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from .repository import UsersRepository
from .schemas import UserRegisterRequest
from app.shared.database.documents import (
    delete_result, insert_result, serialize, serialize_many, to_object_id, update_result
)

logger = logging.getLogger(__name__)

ALREADY_REGISTERED = {"message": "User Already Registered"}


class UsersService:
    def __init__(self, db: Database):
        self.db = db
        self.repository = UsersRepository(db)

    async def register_user(self, email: str, user_data: UserRegisterRequest) -> Dict[str, Any]:
        """Registro idempotente: un email ya existente no se modifica"""
        user = {
            "email": email,
            "createdOn": user_data.createdOn,
            "role": user_data.role,
            "name": user_data.name,
            "photo": user_data.photo,
            "ratingAvg": 0,
            "deliveryCount": 0,
        }

        try:
            result = self.repository.create_user(user)
        except DuplicateKeyError:
            logger.info(f"Usuario ya registrado: {email}")
            return dict(ALREADY_REGISTERED)

        logger.info(f"👤 Usuario registrado: {email} ({user_data.role})")
        return insert_result(result)

    async def get_users(self, role: Optional[str]) -> List[Dict[str, Any]]:
        """Todos los usuarios si role es vacío o 'All'"""
        if not role or role == "All":
            role = None
        return serialize_many(self.repository.get_users(role))

    async def get_user_role(self, email: str) -> Optional[Dict[str, Any]]:
        return serialize(self.repository.get_user_role(email))

    async def update_role(self, email: str, new_role: str) -> Dict[str, Any]:
        result = self.repository.update_role(email, new_role)
        if result.matched_count == 0:
            raise HTTPException(status_code=404, detail="User not found")

        logger.info(f"🔑 Rol actualizado: {email} -> {new_role}")
        return update_result(result)

    async def delete_user(self, user_id: str) -> Dict[str, Any]:
        result = self.repository.delete_user(to_object_id(user_id))
        logger.info(f"🗑️ Usuario eliminado {user_id}: {result.deleted_count}")
        return delete_result(result)

    async def get_top_riders(self) -> Dict[str, Any]:
        return {
            "byRating": serialize_many(self.repository.get_top_riders("ratingAvg")),
            "byDelivery": serialize_many(self.repository.get_top_riders("deliveryCount")),
        }
