"""Configuration management using pydantic-settings."""

from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")
    debug: bool = Field(default=False, description="Debug mode")
    cors_origins: str = Field(default="http://localhost:5173", description="Allowed CORS origins (comma separated)")

    # Database Configuration
    database_path: str = Field(default="./data/socialhub.db", description="DuckDB database file")

    # Auth Configuration
    jwt_secret: str = Field(default="change-me", description="Secret used to sign access tokens")
    jwt_algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    jwt_expire_hours: int = Field(default=24, description="Access token lifetime in hours")
    auth_cookie_name: str = Field(default="token", description="Cookie carrying the access token")
    password_hash_time_cost: int = Field(default=3, description="Argon2 time cost for new password hashes")
    password_hash_memory_cost: int = Field(default=65536, description="Argon2 memory cost (KiB) for new password hashes")

    # Realtime Configuration
    socketio_path: str = Field(default="socket.io", description="Socket.IO mount path")
    allow_user_id_handshake: bool = Field(
        default=False,
        description="Accept a raw userId query parameter when no token is sent"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level")
    log_file: str = Field(default="./logs/app.log", description="Log file path")

    def get_cors_origins(self) -> List[str]:
        """Get list of allowed CORS origins."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Global settings instance
settings = Settings()
