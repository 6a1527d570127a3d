# app/config/settings.py
from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    # App Info
    app_name: str = "NiyeJai API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Database - MongoDB
    local_uri: str
    db_user: Optional[str] = None
    db_pass: Optional[str] = None
    db_name: str
    mongo_timeout_ms: int = 5000

    # Security
    token_secret: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 24 * 60
    cors_origins: List[str] = ["*"]

    # Pagos (Stripe)
    stripe_sk: str
    stripe_api_base: str = "https://api.stripe.com/v1"
    stripe_timeout: int = 30
    payment_currency: str = "usd"

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    @property
    def mongodb_uri(self) -> str:
        """Reemplazar credenciales en la URI de conexión"""
        uri = self.local_uri
        if self.db_user is not None:
            uri = uri.replace("<username>", self.db_user)
        if self.db_pass is not None:
            uri = uri.replace("<password>", self.db_pass)
        return uri

    @property
    def mongodb_host(self) -> str:
        """Host de la base de datos sin credenciales, para logs"""
        uri = self.local_uri
        return uri.split("@")[1] if "@" in uri else uri.split("//")[-1]

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = 'ignore'

settings = Settings()
