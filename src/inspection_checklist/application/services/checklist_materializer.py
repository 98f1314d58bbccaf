"""Expands a checklist template into fresh checklist items."""

from typing import Dict, Mapping, Sequence, Tuple

from ...domain.entities.checklist_item import ChecklistItem
from ...domain.entities.inspection import InspectionSection


def materialize(template: Mapping[str, Sequence[str]]) -> InspectionSection:
    """Build an unrated section from ``template``, preserving category and item order."""
    section: Dict[str, Tuple[ChecklistItem, ...]] = {}
    for category, labels in template.items():
        if isinstance(labels, str):
            raise ValueError(f"Template category {category!r} must list item labels, not a single string")
        section[category] = tuple(ChecklistItem(label=label) for label in labels)
    return section
