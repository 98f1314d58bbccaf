"""Finalize use case: gate the inspection and hand it to report generation."""

from typing import Any, Dict, Optional

from ..ports.report_generator import ReportGenerator
from ...domain.exceptions import InvalidOdometerReading
from ...infrastructure.logging import (
    get_logger,
    log_business_rule_violation,
    log_inspection_event
)
from .inspection_store import InspectionStore
from .progress_service import compute_progress, validate_odometer
from .report_sections import InspectionSnapshot, build_snapshot


class FinalizeService:
    """Application service for finalizing the active inspection."""

    def __init__(
        self,
        store: InspectionStore,
        report_generator: ReportGenerator,
        odometer_max_digits: Optional[int] = None
    ):
        self._store = store
        self._report_generator = report_generator
        self._odometer_max_digits = odometer_max_digits
        self._logger = get_logger(__name__)

    def prepare(self) -> InspectionSnapshot:
        """Validate the finalize gate and build the snapshot.

        Raises ``InvalidOdometerReading`` if the odometer is missing or not
        digits-only; nothing is changed in that case.
        """
        state = self._store.require_state()
        try:
            validate_odometer(state.odometer, self._odometer_max_digits)
        except InvalidOdometerReading as exc:
            log_business_rule_violation(
                self._logger, "odometer_reading", str(exc),
                odometer=state.odometer,
                vin=state.vehicle.vin
            )
            raise

        return build_snapshot(state, compute_progress(state))

    async def finalize(self) -> Dict[str, Any]:
        """Finalize and return whatever the report generator produced."""
        snapshot = self.prepare()
        log_inspection_event(
            self._logger, "finalized",
            vin=snapshot.state.vehicle.vin,
            vehicle_type=snapshot.state.vehicle_type.value,
            progress_percent=snapshot.progress.progress_percent,
            fail_count=snapshot.progress.fail_count,
            concern_count=snapshot.progress.concern_count
        )
        return await self._report_generator.generate_report(snapshot)
