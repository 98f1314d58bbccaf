"""Checklist item entity."""

from dataclasses import dataclass, field, replace
from typing import Any, Optional, Tuple

from ..value_objects.condition_rating import ConditionRating
from ..value_objects.media import Audio, Photo

# Fields a partial update may touch; ``label`` is the item's identity
UPDATABLE_FIELDS = frozenset({"checked", "condition", "notes", "photos", "audio"})


@dataclass(frozen=True)
class ChecklistItem:
    """One inspectable point with its rating and evidence.

    Instances are immutable; every change returns a new item. A rated item
    (condition other than unchecked) is always checked.
    """

    label: str
    checked: bool = False
    condition: ConditionRating = ConditionRating.UNCHECKED
    notes: str = ""
    photos: Tuple[Photo, ...] = field(default_factory=tuple)
    audio: Optional[Audio] = None

    def __post_init__(self) -> None:
        """Validate item data and enforce the rated-implies-checked rule."""
        if not self.label or not self.label.strip():
            raise ValueError("Checklist item label cannot be empty")

        condition = ConditionRating.coerce(self.condition)
        object.__setattr__(self, "condition", condition)
        object.__setattr__(self, "checked", bool(self.checked) or condition.is_rated)

        photos = tuple(self.photos)
        for photo in photos:
            if not isinstance(photo, Photo):
                raise ValueError("All photos must be Photo instances")
        object.__setattr__(self, "photos", photos)

        if self.audio is not None and not isinstance(self.audio, Audio):
            raise ValueError("Audio must be an Audio instance")

    @property
    def is_rated(self) -> bool:
        """Check if the item has a condition rating."""
        return self.condition.is_rated

    @property
    def has_evidence(self) -> bool:
        """Check if any photo or audio is attached."""
        return bool(self.photos) or self.audio is not None

    def with_updates(self, **changes: Any) -> "ChecklistItem":
        """Return a copy with the given fields merged in."""
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update checklist item field(s): {', '.join(sorted(unknown))}")
        return replace(self, **changes)

    def with_photo(self, photo: Photo) -> "ChecklistItem":
        """Return a copy with the photo appended."""
        return replace(self, photos=self.photos + (photo,))

    def without_photo(self, photo_id: str) -> "ChecklistItem":
        """Return a copy with every photo matching ``photo_id`` removed."""
        return replace(self, photos=tuple(p for p in self.photos if p.id != photo_id))

    def with_audio(self, audio: Audio) -> "ChecklistItem":
        """Return a copy whose audio slot holds ``audio``."""
        return replace(self, audio=audio)
