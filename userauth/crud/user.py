"""用户数据操作

定义对用户数据的查询与保存操作。这里不加锁，并发写入同一用户时依赖数据库自身的事务控制。
"""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models import User


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    """根据用户名获取用户（精确匹配，取第一条）"""
    return db.query(User).filter(User.username == username).first()


def get_user_by_token(db: Session, token: str) -> Optional[User]:
    """根据会话令牌获取用户"""
    return db.query(User).filter(User.token == token).first()


def save_user(db: Session, user: User) -> User:
    """保存用户并返回刷新后的记录（包含数据库生成的 id）

    出错时回滚会话并继续抛出异常。
    """
    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except SQLAlchemyError:
        db.rollback()
        raise
    return user


def create_user(db: Session, username: str, hashed_password: str, token: Optional[str]) -> User:
    """创建用户"""
    db_user = User(username=username, password=hashed_password, token=token)
    return save_user(db, db_user)


def set_user_token(db: Session, user: User, token: Optional[str]) -> User:
    """替换或清空（token=None）用户的会话令牌"""
    user.token = token
    return save_user(db, user)
