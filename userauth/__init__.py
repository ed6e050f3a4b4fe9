"""应用模块入口

提供统一的模块导入接口
"""

from . import (
    auth,
    config,
    crud,
    db,
    models,
    schemas,
    security,
)

from .config import settings
from .db import get_db, init_db, engine, Base
from .auth import create_jwt, is_valid, get_current_user
from .security import hash_password, verify_password

__all__ = [
    "auth",
    "config",
    "crud",
    "db",
    "models",
    "schemas",
    "security",
    "settings",
    "get_db",
    "init_db",
    "engine",
    "Base",
    "create_jwt",
    "is_valid",
    "get_current_user",
    "hash_password",
    "verify_password",
]
