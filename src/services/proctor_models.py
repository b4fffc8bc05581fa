"""Domain model for soil proctor tests plus the bundled sample records."""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict, Tuple


class ProctorStatus:
    COMPLETED = "Completed"
    IN_PROGRESS = "In Progress"
    PENDING_REVIEW = "Pending Review"

    ALL: Tuple[str, ...] = (COMPLETED, IN_PROGRESS, PENDING_REVIEW)


TEST_METHODS: Tuple[str, ...] = ("ASTM D698", "ASTM D1557")


@dataclass(frozen=True)
class SoilProctor:
    """A laboratory compaction test result."""

    id: str
    project_name: str
    sample_id: str
    date: str
    location: str
    max_dry_density: float  # pcf
    optimum_moisture_content: float  # percent
    test_method: str
    technician: str
    status: str

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)

    @property
    def summary_line(self) -> str:
        return (
            f"Max Dry Density: {self.max_dry_density} pcf | "
            f"OMC: {self.optimum_moisture_content}%"
        )


SAMPLE_PROCTORS: Tuple[SoilProctor, ...] = (
    SoilProctor(
        id="SP001",
        project_name="Highway 101 Expansion",
        sample_id="H101-S01",
        date="2023-05-15",
        location="Mile Marker 45",
        max_dry_density=125.4,
        optimum_moisture_content=12.8,
        test_method="ASTM D698",
        technician="John Smith",
        status=ProctorStatus.COMPLETED,
    ),
    SoilProctor(
        id="SP002",
        project_name="Downtown Office Building",
        sample_id="DOB-S03",
        date="2023-06-02",
        location="Foundation Area B",
        max_dry_density=118.7,
        optimum_moisture_content=14.2,
        test_method="ASTM D1557",
        technician="Maria Rodriguez",
        status=ProctorStatus.COMPLETED,
    ),
    SoilProctor(
        id="SP003",
        project_name="Riverside Park",
        sample_id="RP-S05",
        date="2023-06-10",
        location="Playground Area",
        max_dry_density=110.5,
        optimum_moisture_content=16.5,
        test_method="ASTM D698",
        technician="David Chen",
        status=ProctorStatus.IN_PROGRESS,
    ),
    SoilProctor(
        id="SP004",
        project_name="Highway 101 Expansion",
        sample_id="H101-S08",
        date="2023-06-18",
        location="Mile Marker 47",
        max_dry_density=127.1,
        optimum_moisture_content=11.9,
        test_method="ASTM D1557",
        technician="John Smith",
        status=ProctorStatus.COMPLETED,
    ),
    SoilProctor(
        id="SP005",
        project_name="Mountain View Residential",
        sample_id="MVR-S02",
        date="2023-07-05",
        location="Lot 23",
        max_dry_density=115.8,
        optimum_moisture_content=15.3,
        test_method="ASTM D698",
        technician="Sarah Johnson",
        status=ProctorStatus.PENDING_REVIEW,
    ),
)
