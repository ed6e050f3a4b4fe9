"""安全模块：密码哈希与校验

- 使用 Passlib 的 bcrypt 方案，工作因子由 settings.BCRYPT_ROUNDS 控制（默认 14）。
- 对于 bcrypt 的 72 字节限制，哈希与校验前都会做截断处理，两边保持一致。
- 底层算法出错（包括存储的哈希格式损坏）时抛出 PasswordHashError，由路由层转换为 500。
"""

from passlib.context import CryptContext
from .config.settings import settings

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

BCRYPT_MAX_BYTES = 72


class SecurityError(Exception):
    """密码哈希或令牌签发失败的基类"""


class PasswordHashError(SecurityError):
    """密码哈希计算或校验失败"""


def _truncate(password: str) -> str:
    pw_bytes = password.encode('utf-8')
    if len(pw_bytes) > BCRYPT_MAX_BYTES:
        return pw_bytes[:BCRYPT_MAX_BYTES].decode('utf-8', errors='ignore')
    return password


def hash_password(password: str) -> str:
    """对明文密码进行加盐哈希并返回哈希字符串。

    同一密码两次哈希得到不同的字符串，但都能通过 verify_password 校验。
    """
    try:
        return pwd_context.hash(_truncate(password))
    except (ValueError, TypeError) as exc:
        raise PasswordHashError("could not hash password") from exc


def verify_password(password: str, hashed_password: str) -> bool:
    """校验明文密码与哈希是否匹配。

    不匹配返回 False；哈希格式无法识别时抛出 PasswordHashError。
    """
    try:
        return pwd_context.verify(_truncate(password), hashed_password)
    except (ValueError, TypeError) as exc:
        raise PasswordHashError("malformed password hash") from exc
