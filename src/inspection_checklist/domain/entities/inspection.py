"""Inspection state entity for the category-driven checklist."""

from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping, Tuple

from ..exceptions import InvalidChecklistReference
from .checklist_item import ChecklistItem
from .vehicle import Vehicle, VehicleType

# Category label -> ordered items. Sections are read-only views; changes
# build a new mapping and a new tuple for the touched category only.
InspectionSection = Mapping[str, Tuple[ChecklistItem, ...]]


class SectionKind(Enum):
    """Which checklist section a category lives in."""

    MAIN = "checklist"
    COMPLIANCE = "compliance_checklist"


@dataclass(frozen=True)
class InspectionState:
    """Snapshot of one in-progress inspection."""

    vehicle: Vehicle
    vehicle_type: VehicleType
    checklist: InspectionSection
    compliance_checklist: InspectionSection = field(default_factory=dict)
    odometer: str = ""
    overall_notes: str = ""

    def __post_init__(self) -> None:
        """Validate state consistency."""
        if not isinstance(self.vehicle, Vehicle):
            raise ValueError("Vehicle must be a Vehicle instance")
        if not isinstance(self.vehicle_type, VehicleType):
            raise ValueError("Vehicle type must be a VehicleType enum")

        object.__setattr__(self, "checklist", _freeze_section(self.checklist))
        object.__setattr__(self, "compliance_checklist", _freeze_section(self.compliance_checklist))

        shared = set(self.checklist) & set(self.compliance_checklist)
        if shared:
            raise ValueError(
                f"Categories cannot appear in both checklist sections: {', '.join(sorted(shared))}"
            )

    def section(self, kind: SectionKind) -> InspectionSection:
        """Get a section by kind."""
        return self.checklist if kind is SectionKind.MAIN else self.compliance_checklist

    def locate(self, category: str, index: int) -> Tuple[SectionKind, ChecklistItem]:
        """Find the item at ``category[index]``.

        The main checklist is searched first, then the compliance checklist.
        """
        if category in self.checklist:
            kind = SectionKind.MAIN
        elif category in self.compliance_checklist:
            kind = SectionKind.COMPLIANCE
        else:
            raise InvalidChecklistReference(category, index, "unknown category")

        items = self.section(kind)[category]
        # Negative indexes are rejected; they would silently address from the end
        if isinstance(index, bool) or not isinstance(index, int) or not (0 <= index < len(items)):
            raise InvalidChecklistReference(
                category, index, f"index out of range (category has {len(items)} items)"
            )
        return kind, items[index]

    def get_item(self, category: str, index: int) -> ChecklistItem:
        """Get the item at ``category[index]``."""
        return self.locate(category, index)[1]

    def with_item(self, category: str, index: int, item: ChecklistItem) -> "InspectionState":
        """Return a new state with ``category[index]`` replaced by ``item``."""
        kind, current = self.locate(category, index)
        if item.label != current.label:
            raise InvalidChecklistReference(
                category, index, f"item label {item.label!r} does not match {current.label!r}"
            )

        section = dict(self.section(kind))
        items = list(section[category])
        items[index] = item
        section[category] = tuple(items)
        return replace(self, **{kind.value: section})

    def with_odometer(self, odometer: str) -> "InspectionState":
        """Return a new state with the odometer replaced."""
        return replace(self, odometer=odometer)

    def with_overall_notes(self, overall_notes: str) -> "InspectionState":
        """Return a new state with the overall notes replaced."""
        return replace(self, overall_notes=overall_notes)

    def iter_items(self) -> Iterator[ChecklistItem]:
        """Iterate every item across both sections."""
        for section in (self.checklist, self.compliance_checklist):
            for items in section.values():
                yield from items

    @property
    def categories(self) -> Tuple[str, ...]:
        """All category labels, main checklist first."""
        return tuple(self.checklist) + tuple(self.compliance_checklist)

    @property
    def has_compliance_checklist(self) -> bool:
        """Check if a compliance checklist is present."""
        return bool(self.compliance_checklist)

    def __str__(self) -> str:
        """String representation."""
        return f"Inspection({self.vehicle.vin}, {self.vehicle_type.value})"


def _freeze_section(section: Mapping) -> InspectionSection:
    return MappingProxyType({category: tuple(items) for category, items in section.items()})
