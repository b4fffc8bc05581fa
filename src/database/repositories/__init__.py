"""Repository package - provides clean interface to database operations."""

from .settings import SettingsRepository
from .proctor import SoilProctorRepository

__all__ = [
    "SettingsRepository",
    "SoilProctorRepository",
]
