"""User accounts: password rules, SHA-256 hashing and persistence of credentials."""

from __future__ import annotations

import hashlib
import json
import string
from pathlib import Path

DEFAULT_USERS_FILE = "users.txt"
DEFAULT_USERS_JSON = "data/users.json"

_CHARACTER_CLASSES = (
    frozenset(string.ascii_uppercase),
    frozenset(string.ascii_lowercase),
    frozenset(string.digits),
    frozenset(string.punctuation),
)


def sha256(text: str) -> str:
    """Return the lower-case hexadecimal SHA-256 digest of *text* in UTF-8."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def validate_password(password: str) -> None:
    """Raise ValueError unless *password* meets the length and character rules."""
    if len(password.encode("utf-8")) < 6:
        raise ValueError("Password must be at least 6 characters long.")
    present = set(password)
    if not all(present & group for group in _CHARACTER_CLASSES):
        raise ValueError(
            "Password must contain an uppercase letter, a lowercase letter, "
            "a digit, and a special character."
        )


class User:
    """An account holding a username and the digest of its password."""

    def __init__(self, username: str, password: str) -> None:
        if not username:
            raise ValueError("Username cannot be empty.")
        validate_password(password)
        self.username = username
        self.password_hash = sha256(password)

    @classmethod
    def _from_hash(cls, username: str, password_hash: str) -> User:
        user = cls.__new__(cls)
        user.username = username
        user.password_hash = password_hash
        return user

    def __repr__(self) -> str:
        return f"User(username={self.username!r})"

    def verify_password(self, password: str) -> bool:
        """Tell whether *password* hashes to the stored digest."""
        return sha256(password) == self.password_hash


class AuthSystem:
    """Registered users kept in a text file of ``username,digest`` lines."""

    def __init__(self, path: str | Path = DEFAULT_USERS_FILE) -> None:
        self.path = Path(path)
        self.users: dict[str, User] = {}
        self.load()

    def register_user(self, username: str, password: str) -> bool:
        """Add a user and save; False if the username is taken."""
        if username in self.users:
            return False
        self.users[username] = User(username, password)
        self.save()
        return True

    def login_user(self, username: str, password: str) -> bool:
        """Tell whether the username exists and the password matches."""
        user = self.users.get(username)
        return user is not None and user.verify_password(password)

    def save(self) -> None:
        """Write every user to the users file."""
        with self.path.open("w", encoding="utf-8") as handle:
            for username, user in self.users.items():
                handle.write(f"{username},{user.password_hash}\n")

    def load(self) -> None:
        """Read users from the users file, if there is one."""
        if not self.path.exists():
            return
        with self.path.open(encoding="utf-8") as handle:
            for line in handle:
                username, separator, digest = line.removesuffix("\n").partition(",")
                if separator and digest:
                    self.users[username] = User._from_hash(username, digest)


def load_users(path: str | Path = DEFAULT_USERS_JSON) -> dict[str, str]:
    """Read a JSON object of username to digest; empty if the file is absent."""
    path = Path(path)
    if not path.exists():
        return {}
    with path.open(encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"{path} does not hold a JSON object")
    users = {}
    for username, digest in data.items():
        if not isinstance(digest, str):
            raise ValueError(f"digest for {username!r} is not a string")
        users[username] = digest
    return dict(sorted(users.items()))


def save_users(users: dict[str, str], path: str | Path = DEFAULT_USERS_JSON) -> None:
    """Write *users* as an indented JSON object with sorted keys."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(users, indent=4, sort_keys=True, ensure_ascii=False),
        encoding="utf-8",
    )