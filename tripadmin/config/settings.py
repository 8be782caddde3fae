"""
Configuration management system using Pydantic Settings.
Supports environment-based configuration for different deployment environments.
"""

import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from typing import Optional, Dict, Any, List
from enum import Enum


class Environment(str, Enum):
    """Supported deployment environments"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Supported log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class AdminSettings(BaseSettings):
    """Admin panel configuration"""

    path: str = Field(default="/admin", description="URL prefix of the admin panel")
    per_page: int = Field(default=25, ge=1, le=500)
    max_per_page: int = Field(default=100, ge=1, le=1000)

    @field_validator('path', mode='before')
    @classmethod
    def normalize_path(cls, v):
        """Ensure the prefix starts with a slash and has no trailing slash"""
        if isinstance(v, str):
            v = "/" + v.strip("/")
        return v

    model_config = {"env_prefix": "ADMIN_"}


class SecuritySettings(BaseSettings):
    """Security and authentication configuration"""

    jwt_secret: str = Field(default="please-change-me")
    jwt_algorithm: str = Field(default="HS256")
    token_expires_minutes: Optional[int] = Field(
        default=None,
        ge=1,
        description="Lifetime of personal access tokens; None means they live until revoked",
    )
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: List[str] = Field(
        default_factory=lambda: ["GET", "POST", "PUT", "DELETE"]
    )
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from environment variable or list"""
        if isinstance(v, str):
            origin_list = v.split(",")
            return [origin.strip() for origin in origin_list if origin.strip()]
        return v or ["*"]

    model_config = {"env_prefix": "SECURITY_"}


class Settings(BaseSettings):
    """Main application settings"""

    # Application Configuration
    app_name: str = Field(default="Trip Planner Admin")
    app_version: str = Field(default="1.0.0")
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = Field(default=False)
    api_docs_url: str = Field(default="http://localhost:8000/docs")

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)
    reload: bool = Field(default=False)
    workers: int = Field(default=1, ge=1, le=16)

    # Database Configuration
    database_url: str = Field(default="sqlite:///./tripplanner.db")
    database_echo: bool = Field(default=False)

    # Logging Configuration
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    log_json: bool = Field(default=True)
    log_file: Optional[str] = Field(default=None)

    # Nested Settings
    admin: AdminSettings = Field(default_factory=AdminSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)

    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment setting"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def get_cors_config(self) -> Dict[str, Any]:
        """Get CORS configuration for FastAPI"""
        return {
            "allow_origins": self.security.cors_origins,
            "allow_credentials": self.security.cors_allow_credentials,
            "allow_methods": self.security.cors_allow_methods,
            "allow_headers": self.security.cors_allow_headers,
        }

    model_config = {
        "env_file": (".env", f".env.{os.getenv('ENVIRONMENT', 'development').lower()}"),
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings instance"""
    return settings


def reload_settings(**overrides) -> Settings:
    """Reload settings from environment and files"""
    global settings
    settings = Settings(**overrides)
    return settings
