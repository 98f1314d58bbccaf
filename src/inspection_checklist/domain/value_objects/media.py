"""Photo and audio evidence attached to checklist items."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Photo:
    """Immutable photo captured for a checklist item.

    The payload arrives already compressed and base64-encoded.
    """

    id: str
    category: str
    base64: str
    mime_type: str = "image/jpeg"
    notes: str = ""

    def __post_init__(self) -> None:
        """Validate photo data."""
        if not self.id or not self.id.strip():
            raise ValueError("Photo ID cannot be empty")
        if not self.mime_type or "/" not in self.mime_type:
            raise ValueError("Photo MIME type must look like 'image/jpeg'")

    @property
    def data_url(self) -> str:
        """Get the photo as a data URL."""
        return f"data:{self.mime_type};base64,{self.base64}"


@dataclass(frozen=True)
class Audio:
    """Immutable audio note; at most one per checklist item."""

    base64: str
    mime_type: str = "audio/webm"

    def __post_init__(self) -> None:
        """Validate audio data."""
        if not self.mime_type or "/" not in self.mime_type:
            raise ValueError("Audio MIME type must look like 'audio/webm'")
