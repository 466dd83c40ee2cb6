import pytest

from nebuladb.auth import (
    AuthSystem,
    User,
    load_users,
    save_users,
    sha256,
    validate_password,
)

# An upper-case letter, a digit and a punctuation mark, to satisfy the rules.
COMPLEXITY_SUFFIX = "A1!"


def strong_password():
    return "password" + COMPLEXITY_SUFFIX


def test_sha256_empty_string():
    assert sha256("") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def test_sha256_abc():
    assert sha256("abc") == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


def test_sha256_is_lowercase_hex_of_fixed_length():
    digest = sha256(strong_password())
    assert len(digest) == 64
    assert set(digest) <= set("0123456789abcdef")


def test_validate_accepts_strong_password():
    password = strong_password()
    validate_password(password)
    assert User("alice", password).verify_password(password)


def test_validate_rejects_short():
    with pytest.raises(ValueError, match="at least 6 characters"):
        validate_password(COMPLEXITY_SUFFIX + "a")


@pytest.mark.parametrize(
    "candidate",
    [
        "password",
        "password".upper() + COMPLEXITY_SUFFIX,
        "password" + COMPLEXITY_SUFFIX[:2],
        "password" + COMPLEXITY_SUFFIX[0] + COMPLEXITY_SUFFIX[2],
    ],
)
def test_validate_rejects_missing_character_class(candidate):
    with pytest.raises(ValueError, match="uppercase letter"):
        validate_password(candidate)


def test_user_stores_digest():
    password = strong_password()
    user = User("alice", password)
    assert user.username == "alice"
    assert user.password_hash == sha256(password)
    assert not user.verify_password("password")


def test_user_rejects_empty_username():
    with pytest.raises(ValueError, match="Username cannot be empty"):
        User("", strong_password())


def test_register_and_login(tmp_path):
    password = strong_password()
    auth = AuthSystem(tmp_path / "users.txt")
    assert auth.register_user("alice", password) is True
    assert auth.login_user("alice", password) is True
    assert auth.login_user("alice", "password") is False
    assert auth.login_user("bob", password) is False


def test_register_duplicate_returns_false(tmp_path):
    password = strong_password()
    auth = AuthSystem(tmp_path / "users.txt")
    auth.register_user("alice", password)
    assert auth.register_user("alice", password) is False
    assert list(auth.users) == ["alice"]


def test_register_weak_password_raises(tmp_path):
    auth = AuthSystem(tmp_path / "users.txt")
    with pytest.raises(ValueError):
        auth.register_user("alice", "password")
    assert auth.users == {}


def test_users_file_format(tmp_path):
    password = strong_password()
    path = tmp_path / "users.txt"
    AuthSystem(path).register_user("alice", password)
    assert path.read_text(encoding="utf-8") == f"alice,{sha256(password)}\n"


def test_users_persist_between_instances(tmp_path):
    password = strong_password()
    path = tmp_path / "users.txt"
    AuthSystem(path).register_user("alice", password)
    reloaded = AuthSystem(path)
    assert reloaded.login_user("alice", password) is True
    assert reloaded.users["alice"].password_hash == sha256(password)


def test_load_skips_malformed_lines(tmp_path):
    path = tmp_path / "users.txt"
    digest = sha256(strong_password())
    path.write_text(f"bob\ncarol,\n\ndave,{digest}\n", encoding="utf-8")
    auth = AuthSystem(path)
    assert list(auth.users) == ["dave"]
    assert auth.users["dave"].password_hash == digest


def test_missing_users_file_starts_empty(tmp_path):
    auth = AuthSystem(tmp_path / "absent.txt")
    assert auth.users == {}
    assert not (tmp_path / "absent.txt").exists()


def test_json_users_round_trip(tmp_path):
    path = tmp_path / "data" / "users.json"
    users = {"zoe": sha256("zoe"), "alice": sha256("alice")}
    save_users(users, path)
    loaded = load_users(path)
    assert loaded == users
    assert list(loaded) == sorted(users)


def test_json_users_format(tmp_path):
    path = tmp_path / "users.json"
    save_users({"b": "2", "a": "1"}, path)
    assert path.read_text(encoding="utf-8") == '{\n    "a": "1",\n    "b": "2"\n}'


def test_json_users_missing_file(tmp_path):
    assert load_users(tmp_path / "nope.json") == {}


def test_json_users_rejects_non_string_digest(tmp_path):
    path = tmp_path / "users.json"
    path.write_text('{"alice": 5}', encoding="utf-8")
    with pytest.raises(ValueError, match="alice"):
        load_users(path)