from concurrent.futures import ThreadPoolExecutor

import pytest

from app.store import User, UserStore


def _user(user_id: str, name: str = "Alice", email: str = "alice@example.com") -> User:
    return User(id=user_id, name=name, email=email, created_at="2024-01-01T00:00:00+00:00")


def test_get_returns_inserted_record():
    store = UserStore()
    store.insert(_user("u1"))

    assert store.get("u1") == _user("u1")
    assert store.get("missing") is None


def test_insert_rejects_duplicate_id():
    store = UserStore()
    store.insert(_user("u1"))

    with pytest.raises(ValueError):
        store.insert(_user("u1", name="Bob"))
    assert store.get("u1").name == "Alice"


def test_list_empty_and_populated():
    store = UserStore()
    assert store.list() == []

    for i in range(3):
        store.insert(_user(f"u{i}"))

    assert sorted(u.id for u in store.list()) == ["u0", "u1", "u2"]


def test_update_overwrites_only_given_fields():
    store = UserStore()
    store.insert(_user("u1"))

    updated = store.update("u1", {"name": "Bob", "email": None, "id": "hijack", "created_at": "never"})

    assert updated == User(id="u1", name="Bob", email="alice@example.com", created_at="2024-01-01T00:00:00+00:00")
    assert store.get("u1") == updated
    assert store.get("hijack") is None


def test_update_missing_id_returns_none():
    store = UserStore()
    store.insert(_user("u1"))

    assert store.update("nope", {"name": "Bob"}) is None
    assert store.list() == [_user("u1")]


def test_remove():
    store = UserStore()
    store.insert(_user("u1"))

    assert store.remove("u1") is True
    assert store.remove("u1") is False
    assert store.count() == 0


def test_clear():
    store = UserStore()
    store.insert(_user("u1"))
    store.insert(_user("u2"))

    store.clear()

    assert store.count() == 0


def test_concurrent_inserts_are_not_lost():
    store = UserStore()
    n = 500

    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(lambda i: store.insert(_user(f"u{i}")), range(n)))

    assert store.count() == n
    assert len({u.id for u in store.list()}) == n


def test_concurrent_updates_and_removes_leave_consistent_state():
    store = UserStore()
    for i in range(100):
        store.insert(_user(f"u{i}"))

    def work(i: int):
        if i % 2:
            store.remove(f"u{i}")
        else:
            store.update(f"u{i}", {"name": f"renamed-{i}"})

    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(work, range(100)))

    remaining = store.list()
    assert len(remaining) == 50
    assert all(u.name == f"renamed-{u.id[1:]}" for u in remaining)
