"""用户表模型

定义用户相关的数据模型
"""

from sqlalchemy import Column, Integer, String, Text
from ..database.connection import Base


class User(Base):

    """用户表

    password 只保存 bcrypt 哈希；token 为 None 表示当前没有登录会话。
    username 未加唯一约束，重复注册会产生多条记录。
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), nullable=False, index=True)
    password = Column(String(255), nullable=False)
    token = Column(Text, nullable=True)

    def __repr__(self):
        return f"<User id={self.id} username={self.username!r}>"
