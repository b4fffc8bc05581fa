"""Key/value settings table."""

from sqlalchemy import Column, String, DateTime
from datetime import datetime

from ..base import Base


class SettingEntry(Base):
    """A single persisted setting stored as text (e.g. a divider fraction)."""

    __tablename__ = "settings"

    id = Column(String(255), primary_key=True)
    value = Column(String(1024), nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<SettingEntry(id='{self.id}', value='{self.value}')>"
