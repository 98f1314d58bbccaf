"""Domain errors raised by the inspection checklist core.

Every error here is local and recoverable: the operation that raised it made
no state change, and the session carries on.
"""

from typing import Optional


class InspectionError(ValueError):
    """Base class for inspection errors.

    ``kind`` names the error category and is what API clients see in the
    ``type`` field of an error response.
    """

    kind = "InspectionError"


class InvalidOdometerReading(InspectionError):
    """Finalize was attempted with a missing or malformed odometer value."""

    kind = "InvalidOdometerReading"

    def __init__(self, value: str, message: Optional[str] = None):
        self.value = value
        super().__init__(message or "Please enter a valid odometer reading (numbers only).")


class InvalidChecklistReference(InspectionError):
    """A category/index pair does not exist in either checklist section."""

    kind = "InvalidChecklistReference"

    def __init__(self, category: str, index: int, reason: str = ""):
        self.category = category
        self.index = index
        message = f"No checklist item at {category!r}[{index}]"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InsufficientPhotos(InspectionError):
    """A guided step cannot be completed until enough photos are captured."""

    kind = "InsufficientPhotos"

    def __init__(self, step_id: str, required: int, collected: int):
        self.step_id = step_id
        self.required = required
        self.collected = collected
        super().__init__(f"Please take at least {required} photo(s) for this step")


class NoActiveInspection(InspectionError):
    """A mutation was requested before any inspection was initialized."""

    kind = "NoActiveInspection"

    def __init__(self, message: str = "No inspection is in progress"):
        super().__init__(message)


class InvalidVin(InspectionError):
    """VIN failed length, character set or checksum validation."""

    kind = "InvalidVin"

    def __init__(self, vin: str, message: str):
        self.vin = vin
        super().__init__(message)
