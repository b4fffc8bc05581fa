"""Controller for the proctor detail panel."""

from __future__ import annotations

import logging
from typing import Optional

from services.proctor_models import SoilProctor
from services.proctor_service import ProctorNotFoundError, ProctorProvider
from utils.error_handling import format_error_message, log_exception

logger = logging.getLogger(__name__)


class ProctorDetailController:
    """Loads a single proctor and exposes proctor / loading / error state."""

    def __init__(self, provider: ProctorProvider) -> None:
        self.provider = provider
        self.proctor: Optional[SoilProctor] = None
        self.is_loading = False
        self.error_message: Optional[str] = None

    def load_proctor(self, proctor_id: str) -> Optional[SoilProctor]:
        self.is_loading = True
        self.error_message = None
        try:
            self.proctor = self.provider.find_by_id(proctor_id)
        except ProctorNotFoundError as exc:
            self.proctor = None
            self.error_message = str(exc)
        except Exception as exc:
            log_exception(exc, f"Error loading proctor {proctor_id}")
            self.proctor = None
            self.error_message = format_error_message(exc, "Error loading proctor", include_type=False)
        finally:
            self.is_loading = False
        return self.proctor

    def clear_proctor(self) -> None:
        self.proctor = None
        self.error_message = None
