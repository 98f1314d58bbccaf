"""Turns checklist sections into report-ready structures."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from ...domain.entities.inspection import InspectionSection, InspectionState
from ...domain.value_objects.condition_rating import ReportStatus
from ...domain.value_objects.progress import ProgressSummary
from .progress_service import compute_progress


@dataclass(frozen=True)
class ReportPhoto:
    """Photo reference as embedded in a report."""

    category: str
    url: str
    notes: str = ""


@dataclass(frozen=True)
class ReportItem:
    """One checklist item as it appears in a report."""

    check: str
    status: ReportStatus
    details: str = ""
    photos: Tuple[ReportPhoto, ...] = ()


@dataclass(frozen=True)
class ReportSection:
    """One checklist category as it appears in a report."""

    title: str
    notes: str
    items: Tuple[ReportItem, ...]

    def count(self, status: ReportStatus) -> int:
        """Number of items with ``status``."""
        return sum(1 for item in self.items if item.status is status)


@dataclass(frozen=True)
class InspectionSnapshot:
    """Everything handed to report generation on finalize."""

    state: InspectionState
    progress: ProgressSummary
    sections: Tuple[ReportSection, ...]
    compliance_sections: Tuple[ReportSection, ...]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def summarize_section(items: Tuple[ReportItem, ...]) -> str:
    """Describe pass/fail/concern counts, e.g. "3 passed, 1 failed"."""
    passed = sum(1 for item in items if item.status is ReportStatus.PASS)
    failed = sum(1 for item in items if item.status is ReportStatus.FAIL)
    concerns = sum(1 for item in items if item.status is ReportStatus.CONCERN)

    parts: List[str] = []
    if passed:
        parts.append(f"{passed} passed")
    if failed:
        parts.append(f"{failed} failed")
    if concerns:
        parts.append(f"{concerns} concerns")
    return ", ".join(parts) if parts else "Not inspected"


def build_report_sections(section: InspectionSection) -> Tuple[ReportSection, ...]:
    """Convert a checklist section into report sections; empty categories are skipped."""
    report_sections = []
    for category, items in section.items():
        if not items:
            continue

        report_items = tuple(
            ReportItem(
                check=item.label,
                status=item.condition.to_report_status(item.checked),
                details=item.notes,
                photos=tuple(
                    ReportPhoto(category=photo.category, url=photo.data_url, notes=photo.notes)
                    for photo in item.photos
                ),
            )
            for item in items
        )
        report_sections.append(
            ReportSection(title=category, notes=summarize_section(report_items), items=report_items)
        )
    return tuple(report_sections)


def build_snapshot(state: InspectionState, progress: Optional[ProgressSummary] = None) -> InspectionSnapshot:
    """Compose the full finalize payload for ``state``."""
    return InspectionSnapshot(
        state=state,
        progress=progress or compute_progress(state),
        sections=build_report_sections(state.checklist),
        compliance_sections=build_report_sections(state.compliance_checklist),
    )
