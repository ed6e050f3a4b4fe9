from .user import (
    get_user_by_username,
    get_user_by_token,
    save_user,
    create_user,
    set_user_token,
)

__all__ = [
    "get_user_by_username",
    "get_user_by_token",
    "save_user",
    "create_user",
    "set_user_token",
]
