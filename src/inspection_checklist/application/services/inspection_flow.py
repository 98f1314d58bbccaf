"""Common capability shared by the two inspection flows.

The checklist flow and the guided flow keep their own data shapes; this
interface only exposes what a caller needs to show progress and decide
whether the flow can hand off to report generation.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .inspection_store import InspectionStore
from .progress_service import can_finalize, compute_progress


class InspectionFlow(ABC):
    """An inspection flow the UI can drive."""

    name: str = "inspection"

    @property
    @abstractmethod
    def progress_percent(self) -> int:
        """Rounded completion percentage in [0, 100]."""
        raise NotImplementedError

    @property
    @abstractmethod
    def is_complete(self) -> bool:
        """Check if the flow is ready to hand off."""
        raise NotImplementedError


class ChecklistFlow(InspectionFlow):
    """Category checklist flow backed by an ``InspectionStore``.

    Progress counts rated items. Completion means the finalize gate passes;
    unrated items do not block it.
    """

    name = "checklist"

    def __init__(self, store: InspectionStore, odometer_max_digits: Optional[int] = None):
        self._store = store
        self._odometer_max_digits = odometer_max_digits

    @property
    def store(self) -> InspectionStore:
        """Get the backing store."""
        return self._store

    @property
    def progress_percent(self) -> int:
        """Rated items as a percentage of all items."""
        if not self._store.is_active:
            return 0
        return compute_progress(self._store.require_state()).progress_percent

    @property
    def is_complete(self) -> bool:
        """Check if the inspection may be finalized."""
        if not self._store.is_active:
            return False
        return can_finalize(self._store.require_state(), self._odometer_max_digits)
