"""Database models package.

Re-exports all models from submodules so callers can import from
``database.models`` directly.
"""

# Base class
from ..base import Base

# Application settings
from .settings import SettingEntry

# Lab records
from .proctor import SoilProctorRecord

__all__ = [
    "Base",
    "SettingEntry",
    "SoilProctorRecord",
]
