from datetime import timedelta

from jose import jwt

import pytest

from userauth.auth import TokenError, create_jwt, is_valid
from userauth.config.settings import settings


def test_create_jwt_is_valid():
    token = create_jwt()
    assert token
    assert is_valid(token)


def test_tokens_are_unique():
    assert create_jwt() != create_jwt()


def test_token_carries_expiry():
    claims = jwt.decode(create_jwt(), settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    assert claims["exp"] > claims["iat"]


def test_expired_token_is_invalid():
    assert not is_valid(create_jwt(expires_delta=timedelta(seconds=-10)))


def test_token_signed_with_other_key_is_invalid():
    forged = jwt.encode({"jti": "x"}, "other-key", algorithm=settings.ALGORITHM)
    assert not is_valid(forged)
    assert not is_valid("garbage")


def test_signing_failure_raises_token_error(monkeypatch):
    monkeypatch.setattr(settings, "ALGORITHM", "bogus")
    with pytest.raises(TokenError):
        create_jwt()
