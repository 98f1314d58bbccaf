"""Unit tests for progress counters, the finalize gate and the checklist flow."""

import pytest

from inspection_checklist.application.services.inspection_flow import ChecklistFlow
from inspection_checklist.application.services.inspection_store import InspectionStore
from inspection_checklist.application.services.progress_service import (
    can_finalize,
    compute_progress,
    validate_odometer
)
from inspection_checklist.domain.entities.vehicle import Vehicle, VehicleType
from inspection_checklist.domain.exceptions import InvalidOdometerReading
from inspection_checklist.domain.templates import TemplateRegistry
from inspection_checklist.domain.value_objects.condition_rating import ConditionRating
from inspection_checklist.domain.value_objects.media import Photo
from inspection_checklist.domain.value_objects.progress import ProgressSummary


@pytest.fixture
def vehicle():
    return Vehicle(vin="11111111111111111", make="Honda", model="Civic", year=2018)


@pytest.fixture
def twenty_item_store():
    """Store over a custom template with 20 items in 4 categories."""
    template = {f"Category {c}": [f"Item {c}.{i}" for i in range(5)] for c in range(4)}
    return InspectionStore(registry=TemplateRegistry(templates={VehicleType.STANDARD: template}))


class TestProgressSummary:
    """Test cases for ProgressSummary value object."""

    def test_empty_checklist_is_zero_percent(self):
        """Test no division by zero on an empty checklist."""
        summary = ProgressSummary(total_items=0, checked_items=0, photo_count=0)

        assert summary.progress_percent == 0
        assert summary.is_complete is False

    def test_rounding_is_half_up(self):
        """Test 1 of 8 (12.5%) rounds to 13."""
        assert ProgressSummary(total_items=8, checked_items=1, photo_count=0).progress_percent == 13
        assert ProgressSummary(total_items=3, checked_items=1, photo_count=0).progress_percent == 33
        assert ProgressSummary(total_items=3, checked_items=2, photo_count=0).progress_percent == 67

    def test_checked_cannot_exceed_total(self):
        """Test counter validation."""
        with pytest.raises(ValueError, match="between 0 and total"):
            ProgressSummary(total_items=2, checked_items=3, photo_count=0)


class TestComputeProgress:
    """Test cases for compute_progress."""

    def test_fresh_inspection(self, vehicle):
        """Test a new inspection is at 0%."""
        store = InspectionStore()
        state = store.initialize(vehicle, VehicleType.STANDARD)

        summary = compute_progress(state)

        assert summary.total_items == 27
        assert summary.checked_items == 0
        assert summary.progress_percent == 0

    def test_half_rated(self, vehicle, twenty_item_store):
        """Test 10 of 20 items rated gives 50%."""
        twenty_item_store.initialize(vehicle, VehicleType.STANDARD)
        for category in ("Category 0", "Category 1"):
            for index in range(5):
                twenty_item_store.update_item(category, index, condition=ConditionRating.PASS)

        summary = compute_progress(twenty_item_store.state)

        assert summary.total_items == 20
        assert summary.checked_items == 10
        assert summary.pass_count == 10
        assert summary.progress_percent == 50

    def test_checkbox_alone_does_not_count(self, vehicle, twenty_item_store):
        """Test progress counts ratings, not ticked checkboxes."""
        twenty_item_store.initialize(vehicle, VehicleType.STANDARD)
        twenty_item_store.update_item("Category 0", 0, checked=True)

        assert compute_progress(twenty_item_store.state).checked_items == 0

    def test_all_rated_is_complete(self, vehicle, twenty_item_store):
        """Test rating everything reaches 100%."""
        state = twenty_item_store.initialize(vehicle, VehicleType.STANDARD)
        ratings = [ConditionRating.PASS, ConditionRating.FAIL, ConditionRating.CONCERN, ConditionRating.NA]
        for c, category in enumerate(state.checklist):
            for index in range(5):
                twenty_item_store.update_item(category, index, condition=ratings[c])

        summary = compute_progress(twenty_item_store.state)

        assert summary.progress_percent == 100
        assert summary.is_complete is True
        assert (summary.pass_count, summary.fail_count, summary.concern_count, summary.na_count) == (5, 5, 5, 5)

    def test_progress_is_monotonic_while_rating(self, vehicle, twenty_item_store):
        """Test each new rating never lowers progress."""
        state = twenty_item_store.initialize(vehicle, VehicleType.STANDARD)
        last = 0
        for category in state.checklist:
            for index in range(5):
                twenty_item_store.update_item(category, index, condition=ConditionRating.PASS)
                percent = compute_progress(twenty_item_store.state).progress_percent
                assert percent >= last
                last = percent

    def test_compliance_items_count(self, vehicle):
        """Test compliance items are included in totals."""
        store = InspectionStore()
        state = store.initialize(vehicle, VehicleType.RV)
        store.update_item("Habitability & Safety", 0, condition=ConditionRating.PASS)

        summary = compute_progress(store.state)

        assert summary.total_items == len(list(state.iter_items()))
        assert summary.checked_items == 1

    def test_photo_count(self, vehicle):
        """Test photos across items are counted."""
        store = InspectionStore()
        store.initialize(vehicle, VehicleType.STANDARD)
        store.add_photo("Interior", 0, Photo(id="a", category="Seats", base64=""))
        store.add_photo("Interior", 1, Photo(id="b", category="Seats", base64=""))

        assert compute_progress(store.state).photo_count == 2


class TestOdometerGate:
    """Test cases for odometer validation and can_finalize."""

    def test_valid_readings(self):
        """Test digits-only readings pass."""
        for value in ["0", "123456", "0045000"]:
            assert validate_odometer(value) == value

    def test_invalid_readings(self):
        """Test empty and non-digit readings fail."""
        for value in ["", "   ", "12a", "12 300", "-5", "1.5", "١٢٣", None]:
            with pytest.raises(InvalidOdometerReading, match="valid odometer reading"):
                validate_odometer(value)

    def test_max_digits(self):
        """Test the optional length cap."""
        assert validate_odometer("9999999", max_digits=7) == "9999999"

        with pytest.raises(InvalidOdometerReading, match="longer than 7 digits"):
            validate_odometer("12345678", max_digits=7)

    def test_no_length_cap_by_default(self, vehicle):
        """Test long digits-only readings pass when no cap is configured."""
        store = InspectionStore()
        state = store.initialize(vehicle, VehicleType.STANDARD)

        assert validate_odometer("12345678") == "12345678"
        assert can_finalize(store.set_odometer("123456789012")) is True
        assert can_finalize(state.with_odometer("12345678"), max_digits=None) is True

    def test_can_finalize(self, vehicle):
        """Test the gate depends only on the odometer."""
        store = InspectionStore()
        store.initialize(vehicle, VehicleType.STANDARD)

        for value, expected in [("", False), ("12a", False), ("12 300", False), ("0", True), ("123456", True)]:
            assert can_finalize(store.set_odometer(value)) is expected


class TestChecklistFlow:
    """Test cases for ChecklistFlow."""

    def test_inactive_store(self):
        """Test the flow reports nothing before initialization."""
        flow = ChecklistFlow(InspectionStore())

        assert flow.progress_percent == 0
        assert flow.is_complete is False

    def test_half_rated_with_odometer(self, vehicle, twenty_item_store):
        """Test 10 of 20 items rated with a valid odometer can finalize."""
        twenty_item_store.initialize(vehicle, VehicleType.STANDARD)
        for category in ("Category 2", "Category 3"):
            for index in range(5):
                twenty_item_store.update_item(category, index, condition=ConditionRating.PASS)
        twenty_item_store.set_odometer("75300")

        flow = ChecklistFlow(twenty_item_store)

        assert flow.progress_percent == 50
        assert flow.is_complete is True

    def test_unrated_items_do_not_block(self, vehicle):
        """Test only the odometer gates completion."""
        store = InspectionStore()
        store.initialize(vehicle, VehicleType.STANDARD)
        store.set_odometer("1")

        assert ChecklistFlow(store).is_complete is True
