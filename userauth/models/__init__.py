"""数据库模型模块

定义所有 SQLAlchemy ORM 模型
"""

from .user import User

__all__ = ["User"]
