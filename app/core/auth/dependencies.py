from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pymongo.database import Database
from typing import Any, Dict, List, Optional

from app.config.database import get_db, USERS
from app.core.auth.service import AuthService

security = HTTPBearer(auto_error=False)

ADMIN_ROLE = "Admin"

class AuthenticationError(HTTPException):
    def __init__(self, detail: str = "Unauthorized Access"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )

class AuthorizationError(HTTPException):
    def __init__(self, detail: str = "Forbidden Access"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail
        )

async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Dict[str, Any]:
    """Obtener claims del usuario actual desde el token"""

    if credentials is None:
        raise AuthenticationError()

    payload = AuthService.verify_token(credentials.credentials)
    if payload is None:
        raise AuthenticationError()

    return payload

def require_roles(allowed_roles: List[str]):
    """Factory para crear dependency que requiere roles específicos"""
    def role_checker(
        current_user: Dict[str, Any] = Depends(get_current_user),
        db: Database = Depends(get_db)
    ) -> Dict[str, Any]:
        email = current_user.get("email")
        user = db[USERS].find_one({"email": email}, {"role": 1}) if email else None

        if user is None or user.get("role") not in allowed_roles:
            raise AuthorizationError()
        return current_user
    return role_checker

def get_admin_user(current_user: Dict[str, Any] = Depends(require_roles([ADMIN_ROLE]))):
    """Dependency para administradores"""
    return current_user
