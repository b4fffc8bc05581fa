"""Controller for the Materials Testing lab list state."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from services.proctor_models import SoilProctor
from services.proctor_service import ProctorProvider, filter_proctors

logger = logging.getLogger(__name__)


@dataclass
class LabState:
    search_query: str = ""
    selected_id: Optional[str] = None


class MaterialsLabController:
    """Holds the proctor list, search query and current selection."""

    def __init__(self, provider: ProctorProvider) -> None:
        self.provider = provider
        self.state = LabState()
        self._proctors: List[SoilProctor] = []
        self.refresh()

    # ---- Data ------------------------------------------------------------

    @property
    def proctors(self) -> List[SoilProctor]:
        return list(self._proctors)

    def refresh(self) -> None:
        """Reload proctors from the provider, dropping a selection that vanished."""
        self._proctors = self.provider.list()
        if self.state.selected_id and self.selected_proctor is None:
            self.state.selected_id = None

    # ---- Search ----------------------------------------------------------

    @property
    def search_query(self) -> str:
        return self.state.search_query

    def update_search_query(self, query: str) -> List[SoilProctor]:
        self.state.search_query = query or ""
        return self.filtered_proctors()

    def filtered_proctors(self) -> List[SoilProctor]:
        return filter_proctors(self._proctors, self.state.search_query)

    # ---- Selection -------------------------------------------------------

    @property
    def selected_proctor(self) -> Optional[SoilProctor]:
        if self.state.selected_id is None:
            return None
        return next((p for p in self._proctors if p.id == self.state.selected_id), None)

    def select_proctor(self, proctor_id: str) -> Optional[SoilProctor]:
        if not any(p.id == proctor_id for p in self._proctors):
            logger.debug("Ignoring selection of unknown proctor %s", proctor_id)
            return None
        self.state.selected_id = proctor_id
        return self.selected_proctor

    def clear_selection(self) -> None:
        self.state.selected_id = None
