"""FastAPI主应用入口

挂载用户注册、登录、登出路由
- 使用依赖注入管理数据库会话
- 启动时创建缺失的数据表
"""

import logging

from fastapi import FastAPI

from .api.v1 import users_router
from .config.settings import settings
from .database.connection import init_db

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# 创建FastAPI应用实例
app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
)

# 挂载API路由
app.include_router(users_router)


@app.on_event("startup")
def on_startup():
    """创建数据表"""
    try:
        init_db()
    except Exception:
        logger.exception("Could not create tables on startup")
        raise


@app.get("/health")
def health():
    """存活检查"""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("userauth.main:app", host="0.0.0.0", port=8000)
