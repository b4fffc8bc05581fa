"""Settings repository for key/value operations."""

from typing import Dict, Optional

from ..models import SettingEntry
from ..base_repository import BaseRepository


class SettingsRepository(BaseRepository[SettingEntry]):
    """Repository for SettingEntry operations."""

    model = SettingEntry

    def get_value(self, key: str) -> Optional[str]:
        entry = self.get_by_id(key)
        return entry.value if entry else None

    def upsert(self, key: str, value: str) -> SettingEntry:
        """Insert or replace the value stored under ``key``."""
        entry = self.get_by_id(key)
        if entry is None:
            return self.create(id=key, value=value)

        entry.value = value
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def as_dict(self) -> Dict[str, str]:
        return {entry.id: entry.value for entry in self.list_all()}
