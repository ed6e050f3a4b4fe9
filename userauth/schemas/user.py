"""用户数据结构定义

定义注册、登录接口的请求与响应模型
"""

from pydantic import BaseModel


class RequestUser(BaseModel):
    """注册/登录请求体，不做格式校验"""
    username: str
    password: str


class ResponseUser(BaseModel):
    """注册/登录成功后的响应体"""
    username: str
    id: int
    token: str

    class Config:
        from_attributes = True
