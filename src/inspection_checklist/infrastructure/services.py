"""Dependency injection and service factory."""

import os
from typing import Optional

from ..application.ports.report_generator import ReportGenerator
from ..application.services.finalize_service import FinalizeService
from ..application.services.guided_sequencer import GuidedStepSequencer, StepCompletion
from ..application.services.inspection_flow import ChecklistFlow
from ..application.services.inspection_store import InspectionStore
from ..application.services.odometer_fraud import OdometerFraudDetector
from ..domain.entities.vehicle import VehicleType
from ..domain.templates import TemplateRegistry
from .logging import get_logger
from .report_generators import InMemoryReportGenerator


class ServiceFactory:
    """Owns the single active inspection session and builds services around it.

    There is one checklist store and at most one guided sequencer per
    factory; starting a new inspection replaces the previous one.
    """

    def __init__(
        self,
        odometer_max_digits: Optional[int] = None,
        average_annual_miles: int = 12000,
        registry: Optional[TemplateRegistry] = None,
        report_generator: Optional[ReportGenerator] = None
    ):
        self.odometer_max_digits = odometer_max_digits
        self.registry = registry or TemplateRegistry()
        self.store = InspectionStore(registry=self.registry)
        self.report_generator = report_generator or InMemoryReportGenerator()
        self.fraud_detector = OdometerFraudDetector(average_annual_miles=average_annual_miles)
        self._sequencer: Optional[GuidedStepSequencer] = None
        self._guided_completions: list = []
        self._logger = get_logger(__name__)

    @property
    def sequencer(self) -> Optional[GuidedStepSequencer]:
        """Get the active guided sequencer, if one was started."""
        return self._sequencer

    @property
    def guided_completions(self) -> list:
        """Get data recorded for completed guided steps, in completion order."""
        return list(self._guided_completions)

    def get_checklist_flow(self) -> ChecklistFlow:
        """Get the checklist flow over the active store."""
        return ChecklistFlow(self.store, self.odometer_max_digits)

    def get_finalize_service(self) -> FinalizeService:
        """Get the finalize service for the active store."""
        return FinalizeService(
            store=self.store,
            report_generator=self.report_generator,
            odometer_max_digits=self.odometer_max_digits
        )

    def start_guided(self, vehicle_type: Optional[VehicleType] = None) -> GuidedStepSequencer:
        """Start a fresh guided sequence, discarding any previous one."""
        self._guided_completions = []
        self._sequencer = GuidedStepSequencer(
            vehicle_type=vehicle_type,
            on_step_complete=self._record_guided_step,
            on_complete=lambda: self._logger.info("Guided inspection finished")
        )
        return self._sequencer

    def _record_guided_step(self, completion: StepCompletion) -> None:
        self._guided_completions.append(completion)


# Global service factory instance
_service_factory: Optional[ServiceFactory] = None


def get_service_factory() -> ServiceFactory:
    """Get the global service factory instance."""
    global _service_factory

    if _service_factory is None:
        max_digits = os.getenv("ODOMETER_MAX_DIGITS")
        _service_factory = ServiceFactory(
            odometer_max_digits=int(max_digits) if max_digits else None,
            average_annual_miles=int(os.getenv("AVERAGE_ANNUAL_MILES", "12000"))
        )

    return _service_factory


def set_service_factory(factory: Optional[ServiceFactory]) -> None:
    """Install ``factory`` as the global instance; None resets it."""
    global _service_factory
    _service_factory = factory


def has_service_factory() -> bool:
    """Check if a global service factory is installed."""
    return _service_factory is not None
