"""Users feature: catalog accounts that own movies."""

from __future__ import annotations

from .models import User
from .repository import UserRepository, get_user_repository
from .schemas import UserCreate, UserResponse
from .service import UserService

__all__ = [
    "User",
    "UserCreate",
    "UserRepository",
    "UserResponse",
    "UserService",
    "get_user_repository",
]
