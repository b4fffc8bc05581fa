"""Tests for engine registry and session helpers."""

import pytest
from sqlalchemy import inspect

from database import base
from database.base import (
    DB_FILE_NAME,
    create_app_engine,
    dispose_all_engines,
    dispose_engine,
    get_default_db_path,
    init_db,
)
from database.models import SettingEntry
from database.session import build_session_factory, session_scope


@pytest.fixture(autouse=True)
def _clean_registry():
    yield
    dispose_all_engines()


def test_default_db_path_uses_data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("PROCTOR_DATA_DIR", str(tmp_path))
    assert get_default_db_path() == tmp_path / DB_FILE_NAME


def test_create_app_engine_reuses_registered_engine(tmp_path):
    db_path = tmp_path / "nested" / "lab.db"

    first = create_app_engine(db_path)
    second = create_app_engine(db_path)

    assert first is second
    assert db_path.parent.is_dir()


def test_dispose_engine_removes_from_registry(tmp_path):
    db_path = tmp_path / "lab.db"
    engine = create_app_engine(db_path)

    dispose_engine(db_path)

    assert str(db_path.resolve()) not in base._engines
    assert create_app_engine(db_path) is not engine


def test_dispose_all_engines(tmp_path):
    create_app_engine(tmp_path / "a.db")
    create_app_engine(tmp_path / "b.db")

    dispose_all_engines()

    assert base._engines == {}


def test_init_db_creates_tables(in_memory_engine):
    init_db(in_memory_engine)
    tables = set(inspect(in_memory_engine).get_table_names())
    assert {"settings", "soil_proctors"} <= tables


def test_session_scope_commits(session_factory):
    with session_scope(session_factory) as session:
        session.add(SettingEntry(id="k", value="v"))

    with session_scope(session_factory) as session:
        assert session.get(SettingEntry, "k").value == "v"


def test_session_scope_rolls_back_on_error(session_factory):
    with pytest.raises(RuntimeError):
        with session_scope(session_factory) as session:
            session.add(SettingEntry(id="k", value="v"))
            session.flush()
            raise RuntimeError("boom")

    with session_scope(session_factory) as session:
        assert session.get(SettingEntry, "k") is None


def test_file_database_round_trip(tmp_path):
    factory = build_session_factory(create_app_engine(tmp_path / "lab.db"))

    with session_scope(factory) as session:
        session.add(SettingEntry(id="mainSplitPosition", value="0.3"))

    with session_scope(factory) as session:
        assert session.get(SettingEntry, "mainSplitPosition").value == "0.3"
