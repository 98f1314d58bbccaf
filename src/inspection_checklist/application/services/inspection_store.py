"""Store holding the single active checklist inspection."""

from typing import Any, Callable, Optional

from ...domain.entities.checklist_item import ChecklistItem
from ...domain.entities.inspection import InspectionState
from ...domain.entities.vehicle import Vehicle, VehicleType
from ...domain.exceptions import InvalidChecklistReference, NoActiveInspection
from ...domain.templates import TemplateRegistry
from ...domain.value_objects.media import Audio, Photo
from ...infrastructure.logging import (
    get_logger,
    log_business_rule_violation,
    log_checklist_mutation,
    log_inspection_event
)
from .checklist_materializer import materialize


class InspectionStore:
    """Single source of truth for the in-progress inspection.

    The methods below are the only way to change the inspection. Each one
    swaps in a new ``InspectionState``; the previous snapshot is never
    modified, so holders of an old ``state`` keep a consistent view.
    """

    def __init__(
        self,
        registry: Optional[TemplateRegistry] = None,
        materializer: Callable = materialize
    ):
        self._registry = registry or TemplateRegistry()
        self._materialize = materializer
        self._state: Optional[InspectionState] = None
        self._logger = get_logger(__name__)

    @property
    def state(self) -> Optional[InspectionState]:
        """Get the current snapshot, or None before initialization."""
        return self._state

    @property
    def is_active(self) -> bool:
        """Check if an inspection is in progress."""
        return self._state is not None

    @property
    def registry(self) -> TemplateRegistry:
        """Get the template registry used to build checklists."""
        return self._registry

    def require_state(self) -> InspectionState:
        """Get the current snapshot or raise if none is active."""
        if self._state is None:
            raise NoActiveInspection()
        return self._state

    def initialize(self, vehicle: Vehicle, vehicle_type: VehicleType) -> InspectionState:
        """Discard any prior inspection and start a new one."""
        if not isinstance(vehicle_type, VehicleType):
            raise ValueError("Vehicle type must be a VehicleType enum")

        if self._state is not None:
            log_inspection_event(
                self._logger, "discarded",
                vin=self._state.vehicle.vin,
                vehicle_type=self._state.vehicle_type.value
            )

        self._state = InspectionState(
            vehicle=vehicle,
            vehicle_type=vehicle_type,
            checklist=self._materialize(self._registry.get_template(vehicle_type)),
            compliance_checklist=self._materialize(self._registry.get_compliance_template(vehicle_type)),
            odometer="",
            overall_notes="",
        )

        log_inspection_event(
            self._logger, "initialized",
            vin=vehicle.vin,
            vehicle_type=vehicle_type.value,
            categories=len(self._state.categories),
            compliance_categories=len(self._state.compliance_checklist)
        )
        return self._state

    def clear(self) -> None:
        """Drop the active inspection."""
        self._state = None

    def update_item(self, category: str, index: int, **changes: Any) -> ChecklistItem:
        """Merge ``changes`` into ``category[index]`` and return the new item."""
        return self._replace_item(
            "update", category, index,
            lambda item: item.with_updates(**changes),
            fields=sorted(changes)
        )

    def add_photo(self, category: str, index: int, photo: Photo) -> ChecklistItem:
        """Append a photo to an item."""
        if not isinstance(photo, Photo):
            raise ValueError("Photo must be a Photo instance")
        return self._replace_item(
            "add_photo", category, index,
            lambda item: item.with_photo(photo),
            photo_id=photo.id
        )

    def remove_photo(self, category: str, index: int, photo_id: str) -> ChecklistItem:
        """Remove photos with ``photo_id`` from an item; unknown ids are ignored."""
        return self._replace_item(
            "remove_photo", category, index,
            lambda item: item.without_photo(photo_id),
            photo_id=photo_id
        )

    def add_audio(self, category: str, index: int, audio: Audio) -> ChecklistItem:
        """Store an audio note on an item, replacing any previous one."""
        if not isinstance(audio, Audio):
            raise ValueError("Audio must be an Audio instance")
        return self._replace_item(
            "add_audio", category, index,
            lambda item: item.with_audio(audio)
        )

    def set_odometer(self, value: str) -> InspectionState:
        """Replace the odometer reading; validated only on finalize."""
        self._state = self.require_state().with_odometer(value)
        self._logger.debug("Odometer set", extra={"odometer": value})
        return self._state

    def set_overall_notes(self, value: str) -> InspectionState:
        """Replace the overall inspection notes."""
        self._state = self.require_state().with_overall_notes(value)
        self._logger.debug("Overall notes set", extra={"notes_length": len(value)})
        return self._state

    def _replace_item(
        self,
        operation: str,
        category: str,
        index: int,
        transform: Callable[[ChecklistItem], ChecklistItem],
        **extra: Any
    ) -> ChecklistItem:
        state = self.require_state()
        try:
            current = state.get_item(category, index)
        except InvalidChecklistReference as exc:
            log_business_rule_violation(
                self._logger, "checklist_reference", str(exc),
                checklist_operation=operation
            )
            raise

        updated = transform(current)
        self._state = state.with_item(category, index, updated)
        log_checklist_mutation(self._logger, operation, category, index, **extra)
        return updated
