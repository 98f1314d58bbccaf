"""Guided inspection step value object."""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class GuidedStep:
    """Immutable description of one phase of a guided inspection."""

    id: str
    title: str
    description: str
    category: str
    photos_required: int
    image_category: Optional[str] = None
    tips: Tuple[str, ...] = field(default_factory=tuple)
    red_flags: Tuple[str, ...] = field(default_factory=tuple)
    audio_optional: bool = True

    def __post_init__(self) -> None:
        """Validate step data."""
        if not self.id or not self.id.strip():
            raise ValueError("Step ID cannot be empty")
        if not isinstance(self.photos_required, int) or self.photos_required < 0:
            raise ValueError("Photos required must be a non-negative integer")
        # Accept lists from callers but store tuples
        object.__setattr__(self, "tips", tuple(self.tips))
        object.__setattr__(self, "red_flags", tuple(self.red_flags))

    @property
    def photo_category(self) -> str:
        """Category label stamped on photos captured during this step."""
        return self.image_category or self.category

    @property
    def requires_photos(self) -> bool:
        """Check if the step needs any photos before it can be completed."""
        return self.photos_required > 0
