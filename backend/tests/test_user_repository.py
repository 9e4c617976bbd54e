"""
Repository tests for UserRepository CRUD and the update_time hook.
"""
from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta

from sqlalchemy import inspect
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.orm import sessionmaker

from unisandbox.core.db import Base, build_engine
from unisandbox.models.user import User
from unisandbox.repositories.user_repository import UserRepository


class TestCreate:
    def test_create_assigns_id_and_update_time(self, db_session, user_repository, alice):
        before = datetime.now()
        user = user_repository.create(db_session, alice)

        assert user.id is not None
        assert user.update_time is not None
        assert before - timedelta(seconds=1) <= user.update_time <= datetime.now() + timedelta(seconds=1)

    def test_create_ignores_server_assigned_keys(self, db_session, user_repository):
        stale = datetime(2000, 1, 1)
        user = user_repository.create(db_session, {"id": 999, "update_time": stale, "name": "Bob"})

        assert user.id != 999
        assert user.update_time != stale
        assert user.name == "Bob"

    def test_all_fields_optional(self, db_session, user_repository):
        user = user_repository.create(db_session, {})

        assert user.id is not None
        assert user.username is None
        assert user.age is None

    def test_ids_are_unique(self, db_session, user_repository):
        ids = {user_repository.create(db_session, {"name": f"u{i}"}).id for i in range(3)}
        assert len(ids) == 3


class TestRead:
    def test_round_trip(self, db_session, user_repository, alice):
        created = user_repository.create(db_session, alice)
        db_session.expunge_all()

        loaded = user_repository.get_by_id(db_session, created.id)

        assert loaded is not None
        for field, value in alice.items():
            assert getattr(loaded, field) == value

    def test_get_missing_returns_none(self, db_session, user_repository):
        assert user_repository.get_by_id(db_session, 12345) is None

    def test_list_all_returns_every_record(self, db_session, user_repository):
        for i in range(5):
            user_repository.create(db_session, {"username": f"user{i}", "age": 20 + i})

        users = user_repository.list_all(db_session)

        assert [u.username for u in users] == [f"user{i}" for i in range(5)]
        assert [u.age for u in users] == [20, 21, 22, 23, 24]

    def test_list_all_empty(self, db_session, user_repository):
        assert user_repository.list_all(db_session) == []


class TestUpdate:
    def test_update_overwrites_only_given_fields(self, db_session, user_repository, alice):
        user = user_repository.create(db_session, alice)

        updated = user_repository.update(db_session, user.id, {"age": 31})

        assert updated.age == 31
        assert updated.name == "Alice"

    def test_update_restamps_without_field_changes(self, db_session, user_repository, alice):
        user = user_repository.create(db_session, alice)
        first = user.update_time
        time.sleep(0.01)

        updated = user_repository.update(db_session, user.id, {})

        assert updated.update_time > first

    def test_update_restamps_with_identical_values(self, db_session, user_repository, alice):
        user = user_repository.create(db_session, alice)
        first = user.update_time
        time.sleep(0.01)

        updated = user_repository.update(db_session, user.id, dict(alice))

        assert updated.update_time > first

    def test_update_does_not_change_id(self, db_session, user_repository, alice):
        user = user_repository.create(db_session, alice)

        updated = user_repository.update(db_session, user.id, {"id": user.id + 100, "name": "A"})

        assert updated.id == user.id

    def test_update_missing_returns_none(self, db_session, user_repository):
        assert user_repository.update(db_session, 404, {"name": "ghost"}) is None


class TestDelete:
    def test_delete_removes_record(self, db_session, user_repository, alice):
        user = user_repository.create(db_session, alice)

        assert user_repository.delete(db_session, user.id) is True
        assert user_repository.get_by_id(db_session, user.id) is None

    def test_delete_missing_returns_false(self, db_session, user_repository):
        assert user_repository.delete(db_session, 404) is False


def test_table_is_named_user(db_session):
    assert User.__table__.name == "user"
    assert "user" in inspect(db_session.get_bind()).get_table_names()


def test_id_column_is_64_bit_outside_sqlite():
    id_type = User.__table__.c.id.type

    assert id_type.compile(dialect=mysql.dialect()) == "BIGINT"
    assert id_type.compile(dialect=postgresql.dialect()) == "BIGINT"
    assert id_type.compile(dialect=sqlite.dialect()) == "INTEGER"


def test_concurrent_updates_last_write_wins(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'concurrent.db'}")
    Base.metadata.create_all(bind=engine)
    make_session = sessionmaker(bind=engine, autoflush=False, future=True)
    repo = UserRepository()

    with make_session() as db:
        user_id = repo.create(db, {"name": "shared", "status": 0}).id

    def write(status: int):
        with make_session() as db:
            updated = repo.update(db, user_id, {"status": status})
            return updated.status, updated.update_time

    with ThreadPoolExecutor(max_workers=2) as pool:
        results = list(pool.map(write, [1, 2]))

    assert {status for status, _ in results} == {1, 2}
    with make_session() as db:
        final = repo.get_by_id(db, user_id)
        assert (final.status, final.update_time) in results
    engine.dispose()
