"""Step-by-step guided inspection sequencer."""

from dataclasses import dataclass
from typing import Callable, FrozenSet, List, Optional, Sequence, Tuple

from ...domain.entities.vehicle import VehicleType
from ...domain.exceptions import InsufficientPhotos
from ...domain.guided_steps import generate_inspection_steps
from ...domain.value_objects.guided_step import GuidedStep
from ...domain.value_objects.media import Audio, Photo
from ...infrastructure.logging import (
    get_logger,
    log_business_rule_violation,
    log_inspection_event
)
from .inspection_flow import InspectionFlow


@dataclass(frozen=True)
class StepCompletion:
    """Data captured while a guided step was current."""

    step_id: str
    photos: Tuple[Photo, ...]
    notes: str = ""
    audio: Optional[Audio] = None


StepCompleteCallback = Callable[[StepCompletion], None]
FlowCompleteCallback = Callable[[], None]


class GuidedStepSequencer(InspectionFlow):
    """Walks the user through a fixed sequence of photo steps.

    Photos, notes and audio captured for the current step are held in a
    transient buffer. ``complete_step`` hands the buffer to the step
    callback and clears it; moving back a step clears it too, so captures
    never leak from one step into another.
    """

    name = "guided"

    def __init__(
        self,
        vehicle_type: Optional[VehicleType] = None,
        steps: Optional[Sequence[GuidedStep]] = None,
        on_step_complete: Optional[StepCompleteCallback] = None,
        on_complete: Optional[FlowCompleteCallback] = None
    ):
        self._vehicle_type = vehicle_type
        self._steps: List[GuidedStep] = list(steps) if steps is not None else generate_inspection_steps(vehicle_type)
        self._on_step_complete = on_step_complete
        self._on_complete = on_complete
        self._current_step_index = 0
        self._completed_step_ids: set = set()
        self._finished = False
        self._photos: List[Photo] = []
        self._notes = ""
        self._audio: Optional[Audio] = None
        self._logger = get_logger(__name__)

    @property
    def vehicle_type(self) -> Optional[VehicleType]:
        """Get the vehicle type the sequence was started for."""
        return self._vehicle_type

    @property
    def steps(self) -> List[GuidedStep]:
        """Get all steps in order."""
        return list(self._steps)

    @property
    def current_step_index(self) -> int:
        """Get the zero-based index of the current step."""
        return self._current_step_index

    @property
    def current_step(self) -> Optional[GuidedStep]:
        """Get the current step, or None if there are no steps."""
        if not self._steps:
            return None
        return self._steps[self._current_step_index]

    @property
    def completed_step_ids(self) -> FrozenSet[str]:
        """Get ids of steps completed so far."""
        return frozenset(self._completed_step_ids)

    @property
    def photos(self) -> Tuple[Photo, ...]:
        """Get photos buffered for the current step."""
        return tuple(self._photos)

    @property
    def notes(self) -> str:
        """Get notes buffered for the current step."""
        return self._notes

    @property
    def audio(self) -> Optional[Audio]:
        """Get the audio note buffered for the current step."""
        return self._audio

    @property
    def is_last_step(self) -> bool:
        """Check if the current step is the final one."""
        return bool(self._steps) and self._current_step_index == len(self._steps) - 1

    @property
    def step_counter(self) -> str:
        """Get a "Step i of N" label."""
        return f"Step {self._current_step_index + 1} of {len(self._steps)}"

    @property
    def can_advance(self) -> bool:
        """Check if enough photos are buffered to complete the current step."""
        step = self.current_step
        return step is not None and not self._finished and len(self._photos) >= step.photos_required

    @property
    def progress_percent(self) -> int:
        """Completed steps as a percentage of all steps."""
        if not self._steps:
            return 0
        return int(100 * len(self._completed_step_ids) / len(self._steps) + 0.5)

    @property
    def is_complete(self) -> bool:
        """Check if the final step has been completed."""
        return self._finished

    def capture_photo(self, photo: Photo) -> Tuple[Photo, ...]:
        """Buffer a photo for the current step."""
        if not isinstance(photo, Photo):
            raise ValueError("Photo must be a Photo instance")
        self._require_in_progress()
        self._photos.append(photo)
        return self.photos

    def discard_photo(self, photo_id: str) -> Tuple[Photo, ...]:
        """Drop a buffered photo by id."""
        self._photos = [photo for photo in self._photos if photo.id != photo_id]
        return self.photos

    def set_notes(self, notes: str) -> None:
        """Replace the notes buffered for the current step."""
        self._require_in_progress()
        self._notes = notes

    def set_audio(self, audio: Optional[Audio]) -> None:
        """Replace the audio note buffered for the current step."""
        self._require_in_progress()
        self._audio = audio

    def complete_step(self) -> StepCompletion:
        """Complete the current step and advance.

        Raises ``InsufficientPhotos`` without changing anything when fewer
        photos are buffered than the step requires.
        """
        step = self._require_in_progress()

        if len(self._photos) < step.photos_required:
            error = InsufficientPhotos(step.id, step.photos_required, len(self._photos))
            log_business_rule_violation(
                self._logger, "guided_step_photos", str(error),
                step_id=step.id,
                photos_required=step.photos_required,
                photos_collected=len(self._photos)
            )
            raise error

        completion = StepCompletion(
            step_id=step.id,
            photos=tuple(self._photos),
            notes=self._notes,
            audio=self._audio,
        )
        if self._on_step_complete is not None:
            self._on_step_complete(completion)

        self._completed_step_ids.add(step.id)
        self._clear_buffers()

        if self.is_last_step:
            self._finished = True
            log_inspection_event(self._logger, "guided_completed", steps=len(self._steps))
            if self._on_complete is not None:
                self._on_complete()
        else:
            self._current_step_index += 1
            log_inspection_event(
                self._logger, "guided_step_completed",
                step_id=step.id,
                next_step_index=self._current_step_index
            )

        return completion

    def previous_step(self) -> int:
        """Go back one step; no-op on the first step or once finished. Returns the new index."""
        if self._current_step_index > 0 and not self._finished:
            self._current_step_index -= 1
            self._clear_buffers()
            self._logger.debug(
                "Guided inspection moved back",
                extra={"step_index": self._current_step_index}
            )
        return self._current_step_index

    def _clear_buffers(self) -> None:
        self._photos = []
        self._notes = ""
        self._audio = None

    def _require_in_progress(self) -> GuidedStep:
        step = self.current_step
        if step is None:
            raise ValueError("Guided inspection has no steps")
        if self._finished:
            raise ValueError("Guided inspection is already complete")
        return step
