"""Port interface for the report generation collaborator."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..services.report_sections import InspectionSnapshot


class ReportGenerator(ABC):
    """Receives a finalized inspection and produces a report."""

    @abstractmethod
    async def generate_report(self, snapshot: "InspectionSnapshot") -> Dict[str, Any]:
        """Generate a report from a finalized inspection snapshot."""
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, report_id: str) -> Optional[Dict[str, Any]]:
        """Find a previously generated report."""
        raise NotImplementedError

    @abstractmethod
    async def find_all(self) -> List[Dict[str, Any]]:
        """List generated reports, oldest first."""
        raise NotImplementedError
