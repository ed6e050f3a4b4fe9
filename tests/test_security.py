import pytest

from userauth.config.settings import Settings, settings
from userauth.security import PasswordHashError, hash_password, verify_password


def test_same_password_hashes_differently_but_both_verify():
    first = hash_password("secret")
    second = hash_password("secret")
    assert first != second
    assert verify_password("secret", first)
    assert verify_password("secret", second)


def test_wrong_password_does_not_verify():
    hashed = hash_password("secret")
    assert verify_password("wrong", hashed) is False


def test_hash_uses_configured_work_factor():
    hashed = hash_password("secret")
    assert hashed.startswith("$2b$%02d$" % settings.BCRYPT_ROUNDS)


def test_default_work_factor_is_14():
    assert Settings.model_fields["BCRYPT_ROUNDS"].default == 14


def test_malformed_hash_raises():
    with pytest.raises(PasswordHashError):
        verify_password("secret", "not-a-hash")


def test_long_password_is_truncated_to_72_bytes():
    password = "a" * 100
    hashed = hash_password(password)
    assert verify_password(password, hashed)
    assert verify_password("a" * 72, hashed)
    assert not verify_password("a" * 71, hashed)
