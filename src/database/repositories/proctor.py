"""Proctor repository for SoilProctorRecord operations."""

import re
from typing import List

from ..models import SoilProctorRecord
from ..base_repository import BaseRepository

ID_PREFIX = "SP"
_ID_PATTERN = re.compile(rf"^{ID_PREFIX}(\d+)$")


class SoilProctorRepository(BaseRepository[SoilProctorRecord]):
    """Repository for SoilProctorRecord operations."""

    model = SoilProctorRecord

    def list_ordered(self) -> List[SoilProctorRecord]:
        return self.session.query(SoilProctorRecord).order_by(SoilProctorRecord.id).all()

    def list_by_project(self, project_name: str) -> List[SoilProctorRecord]:
        return (
            self.session.query(SoilProctorRecord)
            .filter(SoilProctorRecord.project_name == project_name)
            .order_by(SoilProctorRecord.id)
            .all()
        )

    def next_id(self) -> str:
        """Return the next 'SPnnn' id after the highest numeric id in use."""
        highest = 0
        for (record_id,) in self.session.query(SoilProctorRecord.id).all():
            match = _ID_PATTERN.match(record_id or "")
            if match:
                highest = max(highest, int(match.group(1)))
        return f"{ID_PREFIX}{highest + 1:03d}"

    def add_all(self, records: List[SoilProctorRecord]) -> int:
        self.session.add_all(records)
        self.session.commit()
        return len(records)
