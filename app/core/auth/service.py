from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from jose import jwt, JWTError
from app.config.settings import settings

class AuthService:
    """Servicio de tokens de sesión"""

    @staticmethod
    def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
        """Crear token de acceso con los claims recibidos"""
        to_encode = data.copy()

        if expires_delta:
            expire = datetime.now(timezone.utc) + expires_delta
        else:
            expire = datetime.now(timezone.utc) + timedelta(minutes=settings.access_token_expire_minutes)

        to_encode.update({"exp": expire})

        encoded_jwt = jwt.encode(to_encode, settings.token_secret, algorithm=settings.algorithm)

        return encoded_jwt

    @staticmethod
    def verify_token(token: Optional[str]) -> Optional[Dict[str, Any]]:
        """Verificar y decodificar token"""
        if not token:
            return None
        try:
            payload = jwt.decode(token, settings.token_secret, algorithms=[settings.algorithm])
            return payload
        except JWTError:
            return None
