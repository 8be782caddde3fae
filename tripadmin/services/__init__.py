# Business logic services

from .token_service import TokenService

__all__ = ["TokenService"]
