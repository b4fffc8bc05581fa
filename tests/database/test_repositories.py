"""Tests for repository classes - database operations and queries."""

from database.base_repository import BaseRepository
from database.models import SettingEntry, SoilProctorRecord
from database.repositories import SettingsRepository, SoilProctorRepository


def _record(record_id: str, project: str = "Riverside Park", sample: str = "RP-S01") -> SoilProctorRecord:
    return SoilProctorRecord(
        id=record_id,
        project_name=project,
        sample_id=sample,
        test_date="2023-06-10",
        location="Playground Area",
        max_dry_density=110.5,
        optimum_moisture_content=16.5,
        test_method="ASTM D698",
        technician="David Chen",
        status="In Progress",
    )


class TestBaseRepository:
    """Tests for BaseRepository base class."""

    def test_create_and_commit(self, db_session):
        repo = SettingsRepository(db_session)

        entry = repo.create(id="theme", value="dark")

        assert entry.id == "theme"
        assert entry.updated_at is not None

    def test_get_by_id_returns_none_for_missing(self, db_session):
        assert SettingsRepository(db_session).get_by_id("missing") is None

    def test_delete(self, db_session):
        repo = SettingsRepository(db_session)
        entry = repo.create(id="theme", value="dark")

        repo.delete(entry)

        assert repo.get_by_id("theme") is None
        assert repo.count() == 0

    def test_repositories_extend_base(self):
        assert issubclass(SettingsRepository, BaseRepository)
        assert issubclass(SoilProctorRepository, BaseRepository)


class TestSettingsRepository:
    def test_upsert_inserts_then_updates(self, db_session):
        repo = SettingsRepository(db_session)

        repo.upsert("mainSplitPosition", "0.25")
        repo.upsert("mainSplitPosition", "0.4")

        assert repo.get_value("mainSplitPosition") == "0.4"
        assert repo.count() == 1

    def test_get_value_missing(self, db_session):
        assert SettingsRepository(db_session).get_value("nope") is None

    def test_as_dict(self, db_session):
        repo = SettingsRepository(db_session)
        repo.upsert("a", "1")
        repo.upsert("b", "2")

        assert repo.as_dict() == {"a": "1", "b": "2"}

    def test_values_visible_from_new_session(self, session_factory):
        first = session_factory()
        SettingsRepository(first).upsert("topHorizontalSplitPosition", "0.6")
        first.close()

        second = session_factory()
        try:
            assert second.get(SettingEntry, "topHorizontalSplitPosition").value == "0.6"
        finally:
            second.close()


class TestSoilProctorRepository:
    def test_list_ordered_by_id(self, db_session):
        repo = SoilProctorRepository(db_session)
        repo.add_all([_record("SP003"), _record("SP001"), _record("SP002")])

        assert [r.id for r in repo.list_ordered()] == ["SP001", "SP002", "SP003"]

    def test_list_by_project(self, db_session):
        repo = SoilProctorRepository(db_session)
        repo.add_all([
            _record("SP001", project="Highway 101 Expansion"),
            _record("SP002", project="Riverside Park"),
            _record("SP003", project="Highway 101 Expansion"),
        ])

        ids = [r.id for r in repo.list_by_project("Highway 101 Expansion")]
        assert ids == ["SP001", "SP003"]

    def test_next_id_on_empty_table(self, db_session):
        assert SoilProctorRepository(db_session).next_id() == "SP001"

    def test_next_id_follows_highest_numeric_id(self, db_session):
        repo = SoilProctorRepository(db_session)
        repo.add_all([_record("SP002"), _record("SP010"), _record("LEGACY-7")])

        assert repo.next_id() == "SP011"

    def test_next_id_beyond_three_digits(self, db_session):
        repo = SoilProctorRepository(db_session)
        repo.add_all([_record("SP999")])

        assert repo.next_id() == "SP1000"

    def test_status_default(self, db_session):
        repo = SoilProctorRepository(db_session)
        record = repo.create(
            id="SP001",
            project_name="Lot Survey",
            sample_id="LS-1",
            test_date="2024-01-02",
            max_dry_density=120.0,
            optimum_moisture_content=10.0,
            test_method="ASTM D1557",
        )

        assert record.status == "In Progress"
        assert record.created_at is not None

    def test_add_all_returns_count(self, db_session):
        repo = SoilProctorRepository(db_session)
        assert repo.add_all([_record("SP001"), _record("SP002")]) == 2
        assert repo.count() == 2
