"""Unit tests for report sections, finalize service and report generation."""

import pytest
from unittest.mock import AsyncMock

from inspection_checklist.application.services.finalize_service import FinalizeService
from inspection_checklist.application.services.inspection_store import InspectionStore
from inspection_checklist.application.services.report_sections import (
    ReportItem,
    build_report_sections,
    build_snapshot,
    summarize_section
)
from inspection_checklist.domain.entities.checklist_item import ChecklistItem
from inspection_checklist.domain.entities.vehicle import Vehicle, VehicleType
from inspection_checklist.domain.exceptions import InvalidOdometerReading, NoActiveInspection
from inspection_checklist.domain.value_objects.condition_rating import ConditionRating, ReportStatus
from inspection_checklist.domain.value_objects.media import Photo
from inspection_checklist.infrastructure.report_generators import InMemoryReportGenerator
from inspection_checklist.presentation.api.config import Settings


@pytest.fixture
def store():
    store = InspectionStore()
    store.initialize(
        Vehicle(vin="1M8GDM9AXKP042788", make="Freightliner", model="Cascadia", year=2019),
        VehicleType.COMMERCIAL
    )
    return store


class TestReportSections:
    """Test cases for report section composition."""

    def test_summarize_section(self):
        """Test section summaries."""
        items = (
            ReportItem(check="a", status=ReportStatus.PASS),
            ReportItem(check="b", status=ReportStatus.PASS),
            ReportItem(check="c", status=ReportStatus.FAIL),
            ReportItem(check="d", status=ReportStatus.CONCERN),
            ReportItem(check="e", status=ReportStatus.NOT_APPLICABLE),
        )

        assert summarize_section(items) == "2 passed, 1 failed, 1 concerns"
        assert summarize_section(items[4:]) == "Not inspected"

    def test_build_report_sections(self):
        """Test items map to report entries with statuses and photos."""
        photo = Photo(id="p1", category="Engine Bay", base64="QUJD", notes="leak")
        section = {
            "Engine": (
                ChecklistItem(label="Oil", condition=ConditionRating.FAIL, notes="Low", photos=(photo,)),
                ChecklistItem(label="Coolant", checked=True),
                ChecklistItem(label="Belts"),
            ),
            "Empty": (),
        }

        sections = build_report_sections(section)

        assert [s.title for s in sections] == ["Engine"]
        engine = sections[0]
        assert [item.status for item in engine.items] == [
            ReportStatus.FAIL, ReportStatus.PASS, ReportStatus.NOT_APPLICABLE
        ]
        assert engine.items[0].details == "Low"
        assert engine.items[0].photos[0].url == "data:image/jpeg;base64,QUJD"
        assert engine.items[0].photos[0].notes == "leak"
        assert engine.notes == "1 passed, 1 failed"
        assert engine.count(ReportStatus.FAIL) == 1

    def test_snapshot_keeps_sections_apart(self, store):
        """Test compliance categories produce separate report sections."""
        snapshot = build_snapshot(store.state)

        assert [s.title for s in snapshot.compliance_sections] == ["DOT/FMCSA Compliance", "Cargo Securement"]
        assert "DOT/FMCSA Compliance" not in [s.title for s in snapshot.sections]
        assert snapshot.progress.total_items == len(list(store.state.iter_items()))


class TestFinalizeService:
    """Test cases for FinalizeService."""

    def test_prepare_requires_odometer(self, store):
        """Test finalize is blocked without a valid odometer."""
        service = FinalizeService(store, InMemoryReportGenerator())

        for value in ["", "12a", "12 300"]:
            store.set_odometer(value)
            with pytest.raises(InvalidOdometerReading):
                service.prepare()

    def test_prepare_requires_active_inspection(self):
        """Test finalize fails without an inspection."""
        service = FinalizeService(InspectionStore(), InMemoryReportGenerator())

        with pytest.raises(NoActiveInspection):
            service.prepare()

    def test_prepare_respects_max_digits(self, store):
        """Test the configured odometer length cap."""
        store.set_odometer("12345678")
        service = FinalizeService(store, InMemoryReportGenerator(), odometer_max_digits=7)

        with pytest.raises(InvalidOdometerReading, match="7 digits"):
            service.prepare()

    def test_prepare_accepts_long_reading_with_default_settings(self, store):
        """Test the default settings put no length cap on the odometer."""
        settings = Settings()
        store.set_odometer("12345678")
        service = FinalizeService(
            store, InMemoryReportGenerator(), odometer_max_digits=settings.odometer_max_digits
        )

        assert settings.odometer_max_digits is None
        assert service.prepare().state.odometer == "12345678"

    def test_prepare_returns_snapshot(self, store):
        """Test a valid odometer yields a snapshot of the current state."""
        store.update_item("Cab Exterior", 0, condition=ConditionRating.PASS)
        store.set_odometer("123456")

        snapshot = FinalizeService(store, InMemoryReportGenerator()).prepare()

        assert snapshot.state is store.state
        assert snapshot.progress.checked_items == 1

    @pytest.mark.asyncio
    async def test_finalize_calls_generator(self, store):
        """Test finalize hands the snapshot to the report generator."""
        generator = AsyncMock()
        generator.generate_report.return_value = {"id": "rep-1"}
        store.set_odometer("0")

        result = await FinalizeService(store, generator).finalize()

        assert result == {"id": "rep-1"}
        snapshot = generator.generate_report.call_args.args[0]
        assert snapshot.state.odometer == "0"

    @pytest.mark.asyncio
    async def test_finalize_blocked_skips_generator(self, store):
        """Test the generator is not called when the gate fails."""
        generator = AsyncMock()

        with pytest.raises(InvalidOdometerReading):
            await FinalizeService(store, generator).finalize()

        generator.generate_report.assert_not_called()


class TestInMemoryReportGenerator:
    """Test cases for InMemoryReportGenerator."""

    @pytest.mark.asyncio
    async def test_generate_and_find(self, store):
        """Test a generated report is stored and retrievable."""
        store.update_item("Cab Exterior", 1, condition=ConditionRating.FAIL, notes="Cracked windshield")
        store.update_item("Cargo Securement", 0, condition=ConditionRating.CONCERN)
        store.set_odometer("250000")
        generator = InMemoryReportGenerator()

        report = await FinalizeService(store, generator).finalize()

        assert report["id"].startswith("rep-")
        assert report["status"] == "completed"
        assert report["vehicle"]["vin"] == "1M8GDM9AXKP042788"
        assert report["vehicle_type"] == "Commercial"
        assert report["odometer"] == "250000"
        assert "1 item(s) failed" in report["summary"]["overall_condition"]
        assert any("Cracked windshield" in finding for finding in report["summary"]["key_findings"])
        assert len(report["summary"]["recommendations"]) == 2
        assert [s["title"] for s in report["compliance_sections"]] == ["DOT/FMCSA Compliance", "Cargo Securement"]

        assert await generator.find_by_id(report["id"]) == report
        assert await generator.find_all() == [report]

    @pytest.mark.asyncio
    async def test_find_missing(self):
        """Test unknown report ids return None."""
        assert await InMemoryReportGenerator().find_by_id("rep-missing") is None
