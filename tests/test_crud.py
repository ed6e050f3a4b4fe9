from userauth import crud
from userauth.models import User


def test_create_user_assigns_id(db):
    user = crud.create_user(db, "alice", "hashed", "tok")
    assert user.id is not None
    assert user.token == "tok"


def test_get_user_by_username_exact_match(db):
    crud.create_user(db, "alice", "hashed", None)
    assert crud.get_user_by_username(db, "alice").username == "alice"
    assert crud.get_user_by_username(db, "Alice") is None
    assert crud.get_user_by_username(db, "bob") is None


def test_duplicate_usernames_are_not_rejected(db):
    first = crud.create_user(db, "alice", "h1", None)
    second = crud.create_user(db, "alice", "h2", None)
    assert first.id != second.id
    assert crud.get_user_by_username(db, "alice").id == first.id


def test_set_user_token_replaces_and_clears(db):
    user = crud.create_user(db, "alice", "hashed", "old")
    crud.set_user_token(db, user, "new")
    assert crud.get_user_by_token(db, "new").id == user.id
    assert crud.get_user_by_token(db, "old") is None

    crud.set_user_token(db, user, None)
    db.expire_all()
    assert db.get(User, user.id).token is None
