"""用户API路由

注册、登录、登出三个端点。错误只分三类对外暴露：
404（用户不存在或查询出错）、401（密码错误）、500（哈希、签名或保存失败）。
内部错误细节只写日志，不返回给调用方。
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ... import crud, models, schemas
from ...auth import TokenError, create_jwt, get_current_user
from ...database.connection import get_db
from ...security import PasswordHashError, hash_password, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


def _server_error() -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                         detail="Internal Server Error")


def _to_response(user: models.User) -> schemas.ResponseUser:
    return schemas.ResponseUser(username=user.username, id=user.id, token=user.token)


@router.post("/users", response_model=schemas.ResponseUser)
def create_user(request_user: schemas.RequestUser, db: Session = Depends(get_db)):
    """注册新用户，同时签发会话令牌

    不检查用户名是否已存在；若数据库层有唯一约束，冲突同样以 500 返回。
    """
    try:
        token = create_jwt()
        hashed = hash_password(request_user.password)
    except (TokenError, PasswordHashError):
        logger.exception("Could not prepare credentials for new user")
        raise _server_error()

    try:
        user = crud.create_user(db, request_user.username, hashed, token)
    except SQLAlchemyError:
        logger.exception("Could not save new user")
        raise _server_error()

    logger.info("Registered user %s (id=%s)", user.username, user.id)
    return _to_response(user)


@router.post("/users/login", response_model=schemas.ResponseUser)
def login(request_user: schemas.RequestUser, db: Session = Depends(get_db)):
    """用户名密码登录，每次成功登录都会替换令牌"""
    # 查询出错与用户不存在一样返回 404
    try:
        db_user = crud.get_user_by_username(db, request_user.username)
    except SQLAlchemyError:
        logger.exception("User lookup failed")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    if db_user is None:
        logger.info("Login for unknown username")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

    try:
        matches = verify_password(request_user.password, db_user.password)
    except PasswordHashError:
        logger.exception("Stored password hash for user %s is unusable", db_user.id)
        raise _server_error()
    if not matches:
        logger.warning("Wrong password for user %s", db_user.id)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")

    try:
        saved = crud.set_user_token(db, db_user, create_jwt())
    except TokenError:
        logger.exception("Could not sign token for user %s", db_user.id)
        raise _server_error()
    except SQLAlchemyError:
        logger.exception("Could not save token for user %s", db_user.id)
        raise _server_error()

    logger.info("User %s logged in", saved.id)
    return _to_response(saved)


@router.post("/users/logout")
def logout(user: models.User = Depends(get_current_user), db: Session = Depends(get_db)):
    """清空当前用户的令牌，成功时返回空响应体"""
    try:
        crud.set_user_token(db, user, None)
    except SQLAlchemyError:
        logger.exception("Could not clear token for user %s", user.id)
        raise _server_error()

    logger.info("User %s logged out", user.id)
    return Response(status_code=status.HTTP_200_OK)
