"""Condition rating and report status enumerations."""

from enum import Enum
from typing import Union


class ReportStatus(Enum):
    """Status of a checklist item as printed in a report."""

    PASS = "Pass"
    FAIL = "Fail"
    CONCERN = "Concern"
    NOT_APPLICABLE = "N/A"


class ConditionRating(Enum):
    """Rating recorded against a single checklist item."""

    UNCHECKED = "unchecked"
    PASS = "pass"
    FAIL = "fail"
    CONCERN = "concern"
    NA = "na"

    @classmethod
    def coerce(cls, value: Union["ConditionRating", str]) -> "ConditionRating":
        """Accept either an enum member or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown condition rating: {value!r}") from None

    @property
    def is_rated(self) -> bool:
        """Check if the item has been given any rating."""
        return self is not ConditionRating.UNCHECKED

    def to_report_status(self, checked: bool = False) -> ReportStatus:
        """Map to a report status.

        Unrated items fall back to the checkbox: checked reads as Pass,
        anything else as N/A.
        """
        mapping = {
            ConditionRating.PASS: ReportStatus.PASS,
            ConditionRating.FAIL: ReportStatus.FAIL,
            ConditionRating.CONCERN: ReportStatus.CONCERN,
            ConditionRating.NA: ReportStatus.NOT_APPLICABLE,
        }
        if self is ConditionRating.UNCHECKED:
            return ReportStatus.PASS if checked else ReportStatus.NOT_APPLICABLE
        return mapping[self]
