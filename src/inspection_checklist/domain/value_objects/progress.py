"""Progress summary value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProgressSummary:
    """Derived counters for an inspection at a point in time."""

    total_items: int
    checked_items: int
    photo_count: int
    pass_count: int = 0
    fail_count: int = 0
    concern_count: int = 0
    na_count: int = 0

    def __post_init__(self) -> None:
        """Validate progress counters."""
        if self.total_items < 0:
            raise ValueError("Total items cannot be negative")
        if not (0 <= self.checked_items <= self.total_items):
            raise ValueError("Checked items must be between 0 and total items")
        if self.photo_count < 0:
            raise ValueError("Photo count cannot be negative")

    @property
    def progress_percent(self) -> int:
        """Rounded completion percentage; 0 for an empty checklist."""
        if self.total_items == 0:
            return 0
        # Half-up rounding rather than Python's banker's rounding
        return int(100 * self.checked_items / self.total_items + 0.5)

    @property
    def unchecked_items(self) -> int:
        """Number of items still awaiting a rating."""
        return self.total_items - self.checked_items

    @property
    def is_complete(self) -> bool:
        """Check if every item has been rated."""
        return self.total_items > 0 and self.checked_items == self.total_items
