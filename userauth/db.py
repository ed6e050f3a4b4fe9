"""
数据库模块入口

此模块作为数据库相关功能的统一入口，实际功能在database包中实现
"""

from .database.connection import engine, get_db, init_db, Base, SessionLocal

__all__ = ["engine", "get_db", "init_db", "Base", "SessionLocal"]
