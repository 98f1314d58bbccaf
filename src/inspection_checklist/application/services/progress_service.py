"""Progress counters and the finalize precondition."""

import re
from typing import Optional

from ...domain.entities.inspection import InspectionState
from ...domain.exceptions import InvalidOdometerReading
from ...domain.value_objects.condition_rating import ConditionRating
from ...domain.value_objects.progress import ProgressSummary

# ASCII digits only; str.isdigit() and \d would also accept other scripts
ODOMETER_PATTERN = re.compile(r'[0-9]+')


def compute_progress(state: InspectionState) -> ProgressSummary:
    """Count items, ratings and photos across both checklist sections."""
    total = 0
    photos = 0
    by_condition = {condition: 0 for condition in ConditionRating}

    for item in state.iter_items():
        total += 1
        photos += len(item.photos)
        by_condition[item.condition] += 1

    return ProgressSummary(
        total_items=total,
        checked_items=total - by_condition[ConditionRating.UNCHECKED],
        photo_count=photos,
        pass_count=by_condition[ConditionRating.PASS],
        fail_count=by_condition[ConditionRating.FAIL],
        concern_count=by_condition[ConditionRating.CONCERN],
        na_count=by_condition[ConditionRating.NA],
    )


def validate_odometer(value: Optional[str], max_digits: Optional[int] = None) -> str:
    """Return ``value`` if it is a digits-only odometer reading, else raise."""
    if value is None or not value.strip() or not ODOMETER_PATTERN.fullmatch(value):
        raise InvalidOdometerReading(value or "")
    if max_digits is not None and len(value) > max_digits:
        raise InvalidOdometerReading(
            value, f"Odometer reading cannot be longer than {max_digits} digits."
        )
    return value


def can_finalize(state: InspectionState, max_digits: Optional[int] = None) -> bool:
    """Check the finalize precondition without raising."""
    try:
        validate_odometer(state.odometer, max_digits)
    except InvalidOdometerReading:
        return False
    return True
