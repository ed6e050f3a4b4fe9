"""认证模块

负责签发 JWT 会话令牌，并提供 get_current_user 依赖：
从 Authorization: Bearer 头解析令牌，找到持有该令牌的用户后交给需要登录的路由（如登出）。
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from jose.exceptions import JOSEError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from . import crud, models
from .config.settings import settings
from .database.connection import get_db
from .security import SecurityError

logger = logging.getLogger(__name__)

_bearer_scheme = HTTPBearer(auto_error=False)


class TokenError(SecurityError):
    """令牌签发失败"""


def create_jwt(expires_delta: Optional[timedelta] = None) -> str:
    """签发新的会话令牌

    jti 为随机值，保证同一秒内签发的两个令牌也不相同。
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    claims = {
        "iat": now,
        "exp": expire,
        "jti": uuid.uuid4().hex,
    }
    try:
        return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    except JOSEError as exc:
        raise TokenError("could not sign token") from exc


def is_valid(token: str) -> bool:
    """校验令牌签名与有效期"""
    try:
        jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return False
    return True


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    db: Session = Depends(get_db),
) -> models.User:
    """解析 Bearer 令牌并返回对应的用户记录

    没有令牌、令牌无效或过期、或没有用户持有该令牌时返回 401。
    登出后 token 被清空，旧令牌因此无法再通过认证。
    """
    if credentials is None:
        raise _unauthorized()
    token = credentials.credentials

    try:
        user = crud.get_user_by_token(db, token)
    except SQLAlchemyError:
        logger.exception("Token lookup failed")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                            detail="Internal Server Error")
    if user is None:
        raise _unauthorized()

    if not is_valid(token):
        logger.info("Rejected expired or invalid token for user %s", user.id)
        raise _unauthorized()
    return user
