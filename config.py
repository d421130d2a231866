import os
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    """Runtime configuration for the API"""
    jwt_secret: str = Field(..., min_length=1)
    token_ttl_seconds: int = Field(3600, gt=0)
    cookie_name: str = "token"
    cookie_secure: bool = False
    bcrypt_rounds: int = Field(10, ge=4, le=31)
    seed_users: bool = True
    seed_password: str = "password123"
    cors_origins: List[str] = Field(default_factory=lambda: ["http://localhost:3000"])
    log_level: str = "INFO"
    sql_echo: bool = False
    host: str = "0.0.0.0"
    port: int = 8000


def get_settings() -> Settings:
    """
    Build settings from the environment

    Returns:
        Settings loaded from .env and process environment

    Raises:
        ValueError: If JWT_SECRET is not set
    """
    load_dotenv()

    secret = os.getenv("JWT_SECRET")
    if not secret:
        raise ValueError("JWT_SECRET environment variable is not set")

    cors_origins = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
        if origin.strip()
    ]

    return Settings(
        jwt_secret=secret,
        token_ttl_seconds=int(os.getenv("TOKEN_TTL_SECONDS", "3600")),
        cookie_secure=_env_bool("COOKIE_SECURE", False),
        bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", "10")),
        seed_users=_env_bool("SEED_USERS", True),
        seed_password=os.getenv("SEED_PASSWORD", "password123"),
        cors_origins=cors_origins,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        sql_echo=_env_bool("SQL_ECHO", False),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )
