"""Soil proctor test records."""

from sqlalchemy import Column, String, Float, DateTime, Index
from datetime import datetime

from ..base import Base


class SoilProctorRecord(Base):
    """Represents one laboratory proctor (compaction) test."""

    __tablename__ = "soil_proctors"

    id = Column(String(32), primary_key=True)  # e.g. 'SP001'
    project_name = Column(String(255), nullable=False)
    sample_id = Column(String(100), nullable=False)
    test_date = Column(String(10), nullable=False)  # ISO date, 'YYYY-MM-DD'
    location = Column(String(255), nullable=True)
    max_dry_density = Column(Float, nullable=False)  # pcf
    optimum_moisture_content = Column(Float, nullable=False)  # percent
    test_method = Column(String(50), nullable=False)  # 'ASTM D698', 'ASTM D1557'
    technician = Column(String(255), nullable=True)
    status = Column(String(50), nullable=False, default="In Progress")
    created_at = Column(DateTime, default=datetime.utcnow)

    __table_args__ = (Index("ix_soil_proctors_project", "project_name"),)

    def __repr__(self):
        return f"<SoilProctorRecord(id='{self.id}', sample_id='{self.sample_id}')>"
