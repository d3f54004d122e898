import threading
import pytest
from service.token_auth_service import TokenAuthService
from util.constants import DEV_ADMIN_TOKEN, DEV_TOKENS
from util.errors import (
    Conflict,
    Forbidden,
    InvalidArgument,
    InvalidToken,
    NamespaceMismatch,
    NotFound,
    Unauthenticated,
)

ADMIN = "admin-secret"


def test_validate_scopes_token_to_namespace(auth):
    auth.validate("dev", "dev-token")
    with pytest.raises(NamespaceMismatch):
        auth.validate("staging", "dev-token")
    auth.validate("dev", "Bearer dev-token")


def test_validate_empty_token_is_unauthenticated(auth):
    with pytest.raises(Unauthenticated):
        auth.validate("dev", "")
    with pytest.raises(Unauthenticated):
        auth.validate("dev", None)


def test_validate_unknown_token(auth):
    with pytest.raises(InvalidToken):
        auth.validate("dev", "nope")
    with pytest.raises(InvalidToken):
        auth.validate("dev", "Bearer ")


def test_admin_token_is_not_a_namespace_token(auth):
    with pytest.raises(InvalidToken):
        auth.validate("dev", ADMIN)


def test_namespace_for(auth):
    assert auth.namespace_for("test-token") == "test"
    assert auth.namespace_for("Bearer test-token") == "test"
    with pytest.raises(InvalidToken):
        auth.namespace_for("missing")
    with pytest.raises(Unauthenticated):
        auth.namespace_for("")


def test_is_admin(auth):
    assert auth.is_admin(ADMIN)
    assert auth.is_admin(f"Bearer {ADMIN}")
    assert not auth.is_admin("dev-token")
    assert not auth.is_admin("")
    assert not auth.is_admin(None)


def test_create_validate_revoke_cycle():
    auth = TokenAuthService(admin_token="admin-secret", bindings="", dev_fallback=False)
    auth.create_token("admin-secret", "prod-1", "production")
    auth.validate("production", "prod-1")
    auth.revoke_token("admin-secret", "prod-1")
    with pytest.raises(InvalidToken):
        auth.validate("production", "prod-1")


def test_many_tokens_share_one_namespace(auth):
    auth.create_token(ADMIN, "dev-token-2", "dev")
    auth.validate("dev", "dev-token")
    auth.validate("dev", "dev-token-2")


def test_create_token_requires_admin(auth):
    with pytest.raises(Forbidden):
        auth.create_token("dev-token", "new", "ns")
    with pytest.raises(Forbidden):
        auth.create_token("", "new", "ns")


def test_create_token_rejects_empty_fields(auth):
    with pytest.raises(InvalidArgument):
        auth.create_token(ADMIN, "", "ns")
    with pytest.raises(InvalidArgument):
        auth.create_token(ADMIN, "tok", "")


def test_create_token_conflicts(auth):
    with pytest.raises(Conflict):
        auth.create_token(ADMIN, "dev-token", "other")
    assert auth.namespace_for("dev-token") == "dev"
    with pytest.raises(Conflict):
        auth.create_token(ADMIN, ADMIN, "x")


def test_revoke_token_rules(auth):
    with pytest.raises(Forbidden):
        auth.revoke_token("dev-token", "test-token")
    with pytest.raises(InvalidArgument):
        auth.revoke_token(ADMIN, "")
    with pytest.raises(Forbidden):
        auth.revoke_token(ADMIN, ADMIN)
    with pytest.raises(NotFound):
        auth.revoke_token(ADMIN, "ghost")
    assert auth.is_admin(ADMIN)


def test_list_all_is_a_snapshot(auth):
    tokens = auth.list_all(ADMIN)
    assert tokens == {"dev-token": "dev", "test-token": "test"}
    tokens["evil"] = "dev"
    tokens.pop("dev-token")
    with pytest.raises(InvalidToken):
        auth.validate("dev", "evil")
    auth.validate("dev", "dev-token")


def test_list_all_requires_admin(auth):
    with pytest.raises(Forbidden):
        auth.list_all("dev-token")


def test_dev_fallback_when_no_bindings():
    auth = TokenAuthService(admin_token=None, bindings=None)
    assert auth.is_admin(DEV_ADMIN_TOKEN)
    assert auth.list_all(DEV_ADMIN_TOKEN) == DEV_TOKENS


def test_dev_fallback_skipped_when_bindings_present():
    auth = TokenAuthService(admin_token=ADMIN, bindings="ci:build")
    assert auth.list_all(ADMIN) == {"ci": "build"}


def test_dev_fallback_can_be_disabled():
    auth = TokenAuthService(admin_token=ADMIN, bindings="", dev_fallback=False)
    assert auth.list_all(ADMIN) == {}


def test_admin_token_never_bootstrapped_into_table():
    auth = TokenAuthService(
        admin_token=ADMIN, bindings={ADMIN: "dev", "t": "ns"}, dev_fallback=False
    )
    assert auth.list_all(ADMIN) == {"t": "ns"}


def test_concurrent_token_creation_is_exclusive(auth):
    results = []
    lock = threading.Lock()

    def create():
        try:
            auth.create_token(ADMIN, "race", "ns")
            outcome = "ok"
        except Conflict:
            outcome = "conflict"
        with lock:
            results.append(outcome)

    threads = [threading.Thread(target=create) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)
    assert results.count("ok") == 1
    assert results.count("conflict") == 15
