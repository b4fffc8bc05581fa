"""Export proctor records to CSV or Excel."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, Optional

import pandas as pd

from .proctor_models import SoilProctor

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = {
    "id": "ID",
    "project_name": "Project",
    "sample_id": "Sample ID",
    "date": "Date",
    "location": "Location",
    "max_dry_density": "Max Dry Density (pcf)",
    "optimum_moisture_content": "Optimum Moisture (%)",
    "test_method": "Method",
    "technician": "Technician",
    "status": "Status",
}

SUPPORTED_SUFFIXES = (".csv", ".xlsx")


def proctors_to_dataframe(proctors: Iterable[SoilProctor]) -> pd.DataFrame:
    """Build a DataFrame with display column names, one row per proctor."""
    rows = [proctor.to_dict() for proctor in proctors]
    df = pd.DataFrame(rows, columns=list(EXPORT_COLUMNS.keys()))
    return df.rename(columns=EXPORT_COLUMNS)


def export_proctors(
    proctors: Iterable[SoilProctor],
    output_path: Path,
    progress_callback: Optional[Callable[[str, int, int], None]] = None,
) -> Path:
    """Write proctors to ``output_path``; format chosen by file suffix."""
    progress_callback = progress_callback or (lambda msg, curr, total: None)
    output_path = Path(output_path)
    suffix = output_path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported export format '{suffix or output_path.name}'")

    total_steps = 2
    progress_callback("Preparing data...", 1, total_steps)
    df = proctors_to_dataframe(proctors)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".csv":
        df.to_csv(output_path, index=False)
    else:
        with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
            df.to_excel(writer, sheet_name="Soil Proctors", index=False)

    progress_callback("Export complete!", total_steps, total_steps)
    logger.info(
        "Exported proctors",
        extra={"event": "export", "rows": len(df), "path": str(output_path)},
    )
    return output_path
