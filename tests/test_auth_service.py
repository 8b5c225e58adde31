from __future__ import annotations

import pytest

from foodcart.core.errors import AuthError, ConflictError, ValidationError
from foodcart.services.auth_service import AuthService


def test_register_stores_hashed_password_and_empty_cart(repo):
    svc = AuthService(repo)
    svc.register("alice", "pw1")

    users = repo.read("users")
    assert [u["username"] for u in users] == ["alice"]
    assert users[0]["password"] != "pw1"
    assert users[0]["password"].startswith("argon2$")
    assert repo.read("carts") == {"alice": {}}


def test_register_overwrites_stale_cart_entry(repo):
    repo.replace_cart("alice", {"Vegetable Curry": 3})
    AuthService(repo).register("alice", "pw1")
    assert repo.get_cart("alice") == {}


def test_register_twice_keeps_single_record(repo):
    svc = AuthService(repo)
    svc.register("alice", "pw1")
    with pytest.raises(ConflictError) as exc:
        svc.register("alice", "pw2")
    assert exc.value.message == "Username already exists"
    assert repo.list_usernames() == ["alice"]


@pytest.mark.parametrize(
    "username,password",
    [(None, "pw"), ("alice", None), ("", "pw"), ("alice", ""), ("   ", "pw"), (42, "pw"), ("alice", ["pw"])],
)
def test_missing_fields_are_rejected(repo, username, password):
    svc = AuthService(repo)
    with pytest.raises(ValidationError):
        svc.register(username, password)
    with pytest.raises(ValidationError):
        svc.login(username, password)
    assert repo.read("users") == []


def test_login_requires_exact_match(repo):
    svc = AuthService(repo)
    svc.register("alice", "pw1")

    svc.login("alice", "pw1")
    with pytest.raises(AuthError):
        svc.login("alice", "pw2")
    with pytest.raises(AuthError):
        svc.login("Alice", "pw1")
    with pytest.raises(AuthError):
        svc.login("bob", "pw1")


def test_login_upgrades_legacy_plain_text_password(repo):
    repo.write("users", [{"username": "alice", "password": "pw1"}])
    svc = AuthService(repo)

    with pytest.raises(AuthError):
        svc.login("alice", "wrong")
    assert repo.get_user("alice")["password"] == "pw1"

    svc.login("alice", "pw1")
    stored = repo.get_user("alice")["password"]
    assert stored.startswith("argon2$")
    svc.login("alice", "pw1")


def test_list_users_hides_passwords(repo):
    svc = AuthService(repo)
    svc.register("alice", "pw1")
    svc.register("bob", "pw2")
    assert svc.list_users() == [{"username": "alice"}, {"username": "bob"}]


def test_login_with_numeric_stored_password_is_rejected(repo):
    repo.write("users", [{"username": "bob", "password": 1234}])
    svc = AuthService(repo)
    for attempt in ("wrong", "1234"):
        with pytest.raises(AuthError):
            svc.login("bob", attempt)
    assert repo.get_user("bob")["password"] == 1234


def test_unencodable_credentials_are_rejected(repo):
    svc = AuthService(repo)
    svc.register("alice", "pw1")
    with pytest.raises(ValidationError):
        svc.login("alice", "\ud800")
    with pytest.raises(ValidationError):
        svc.register("bob", "\ud800")
    with pytest.raises(ValidationError):
        svc.register("\ud800", "pw")
    assert repo.list_usernames() == ["alice"]


def test_whitespace_password_is_a_real_password(repo):
    repo.write("users", [{"username": "carol", "password": "  "}])
    svc = AuthService(repo)
    svc.login("carol", "  ")
    with pytest.raises(AuthError):
        svc.login("carol", " ")

    svc.register("dave", "   ")
    svc.login("dave", "   ")
