"""Data providers for soil proctor records."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, List, Optional, Protocol, Sequence

from database.models import SoilProctorRecord
from database.repositories import SoilProctorRepository
from database.session import SessionFactory, session_scope
from utils.error_handling import timed

from .proctor_models import SAMPLE_PROCTORS, ProctorStatus, SoilProctor, TEST_METHODS

logger = logging.getLogger(__name__)


class ProctorNotFoundError(LookupError):
    """Raised when no proctor exists for the requested id."""

    def __init__(self, proctor_id: str):
        super().__init__(f"Proctor not found with ID: {proctor_id}")
        self.proctor_id = proctor_id


class ProctorProvider(Protocol):
    """Read interface consumed by the lab controllers."""

    def list(self) -> List[SoilProctor]:
        ...

    def find_by_id(self, proctor_id: str) -> SoilProctor:
        ...


def filter_proctors(proctors: Iterable[SoilProctor], query: Optional[str]) -> List[SoilProctor]:
    """Case-insensitive match on project name or sample id; blank query keeps all."""
    proctors = list(proctors)
    if not query or not query.strip():
        return proctors

    needle = query.strip().lower()
    return [
        proctor
        for proctor in proctors
        if needle in proctor.project_name.lower() or needle in proctor.sample_id.lower()
    ]


class SampleProctorProvider:
    """In-memory provider over the bundled sample records."""

    def __init__(self, proctors: Optional[Sequence[SoilProctor]] = None):
        self._proctors: List[SoilProctor] = list(SAMPLE_PROCTORS if proctors is None else proctors)

    def list(self) -> List[SoilProctor]:
        return list(self._proctors)

    def find_by_id(self, proctor_id: str) -> SoilProctor:
        for proctor in self._proctors:
            if proctor.id == proctor_id:
                return proctor
        raise ProctorNotFoundError(proctor_id)


def _to_domain(record: SoilProctorRecord) -> SoilProctor:
    return SoilProctor(
        id=record.id,
        project_name=record.project_name,
        sample_id=record.sample_id,
        date=record.test_date,
        location=record.location or "",
        max_dry_density=record.max_dry_density,
        optimum_moisture_content=record.optimum_moisture_content,
        test_method=record.test_method,
        technician=record.technician or "",
        status=record.status,
    )


def _to_record(proctor: SoilProctor) -> SoilProctorRecord:
    return SoilProctorRecord(
        id=proctor.id,
        project_name=proctor.project_name,
        sample_id=proctor.sample_id,
        test_date=proctor.date,
        location=proctor.location,
        max_dry_density=proctor.max_dry_density,
        optimum_moisture_content=proctor.optimum_moisture_content,
        test_method=proctor.test_method,
        technician=proctor.technician,
        status=proctor.status,
    )


def validate_new_proctor(
    project_name: str,
    sample_id: str,
    date: str,
    max_dry_density: float,
    optimum_moisture_content: float,
    test_method: str,
    status: str,
) -> None:
    """Raise ValueError describing the first invalid field."""
    if not project_name or not project_name.strip():
        raise ValueError("Project name is required")
    if not sample_id or not sample_id.strip():
        raise ValueError("Sample ID is required")
    try:
        datetime.strptime(date, "%Y-%m-%d")
    except (TypeError, ValueError):
        raise ValueError(f"Invalid test date '{date}' (expected YYYY-MM-DD)") from None
    if max_dry_density <= 0:
        raise ValueError("Maximum dry density must be positive")
    if not 0 <= optimum_moisture_content <= 100:
        raise ValueError("Optimum moisture content must be between 0 and 100%")
    if test_method not in TEST_METHODS:
        raise ValueError(f"Unknown test method '{test_method}'")
    if status not in ProctorStatus.ALL:
        raise ValueError(f"Unknown status '{status}'")


class DatabaseProctorProvider:
    """Provider backed by the ``soil_proctors`` table."""

    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    def list(self) -> List[SoilProctor]:
        with session_scope(self._session_factory) as session:
            return [_to_domain(record) for record in SoilProctorRepository(session).list_ordered()]

    def find_by_id(self, proctor_id: str) -> SoilProctor:
        with session_scope(self._session_factory) as session:
            record = SoilProctorRepository(session).get_by_id(proctor_id)
            if record is None:
                raise ProctorNotFoundError(proctor_id)
            return _to_domain(record)

    @timed
    def seed_samples(self, samples: Sequence[SoilProctor] = SAMPLE_PROCTORS) -> int:
        """Insert the sample records when the table is empty. Returns rows added."""
        with session_scope(self._session_factory) as session:
            repo = SoilProctorRepository(session)
            if repo.count():
                return 0
            added = repo.add_all([_to_record(proctor) for proctor in samples])

        logger.info("Seeded sample proctor records", extra={"event": "seed", "count": added})
        return added

    def create(
        self,
        project_name: str,
        sample_id: str,
        date: str,
        location: str,
        max_dry_density: float,
        optimum_moisture_content: float,
        test_method: str,
        technician: str,
        status: str = ProctorStatus.IN_PROGRESS,
    ) -> SoilProctor:
        """Validate and store a new proctor test, assigning the next id."""
        validate_new_proctor(
            project_name,
            sample_id,
            date,
            max_dry_density,
            optimum_moisture_content,
            test_method,
            status,
        )

        with session_scope(self._session_factory) as session:
            repo = SoilProctorRepository(session)
            record = repo.create(
                id=repo.next_id(),
                project_name=project_name.strip(),
                sample_id=sample_id.strip(),
                test_date=date,
                location=(location or "").strip(),
                max_dry_density=float(max_dry_density),
                optimum_moisture_content=float(optimum_moisture_content),
                test_method=test_method,
                technician=(technician or "").strip(),
                status=status,
            )
            proctor = _to_domain(record)

        logger.info("Created proctor %s", proctor.id, extra={"event": "proctor_created"})
        return proctor
