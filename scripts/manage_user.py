#!/usr/bin/env python3
"""Create a user, reset its password, or force a logout.

Usage:
  # create user 'alice' (or reset the password of the existing 'alice')
  python3 scripts/manage_user.py --username alice --password secret

  # clear alice's session token
  python3 scripts/manage_user.py --username alice --logout

Tables are created if missing. If several users share the username, the first one is changed.
"""
import sys
from pathlib import Path
import argparse

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from userauth.db import SessionLocal, init_db
from userauth import crud
from userauth.auth import create_jwt
from userauth.security import hash_password


def main(argv=None):
    parser = argparse.ArgumentParser(description='Create a user, reset its password, or force a logout')
    parser.add_argument("--username", required=True)
    parser.add_argument("--password")
    parser.add_argument("--logout", action="store_true", help="clear the user's session token")
    args = parser.parse_args(argv)

    if not args.logout and not args.password:
        parser.error("--password is required unless --logout is given")

    try:
        init_db()
    except Exception as exc:
        print("Warning: could not create tables on startup:", exc)

    with SessionLocal() as db:
        user = crud.get_user_by_username(db, args.username)
        if args.logout:
            if not user:
                print(f"No such user: {args.username}")
                return 1
            crud.set_user_token(db, user, None)
            print(f"Cleared session for {args.username}")
        elif user:
            print(f"Updating password for existing user: {args.username}")
            user.password = hash_password(args.password)
            crud.save_user(db, user)
            print("Password updated")
        else:
            print(f"Creating user: {args.username}")
            user = crud.create_user(db, args.username, hash_password(args.password), create_jwt())
            print(f"User created with id {user.id}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
