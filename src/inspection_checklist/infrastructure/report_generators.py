"""In-memory report generator for development and testing.

Produces the report structure the AI-backed generator would, with a
rule-based summary in place of the model-written one.
"""

import logging
from dataclasses import asdict
from typing import Any, Dict, List, Optional
from uuid import uuid4

from ..application.ports.report_generator import ReportGenerator
from ..application.services.report_sections import InspectionSnapshot, ReportSection
from ..domain.value_objects.condition_rating import ReportStatus
from .logging import get_logger, log_with_extra


class InMemoryReportGenerator(ReportGenerator):
    """Report generator that keeps generated reports in a dict."""

    def __init__(self):
        self._reports: Dict[str, Dict[str, Any]] = {}
        self._logger = get_logger(__name__)

    async def generate_report(self, snapshot: InspectionSnapshot) -> Dict[str, Any]:
        """Compose and store a report for ``snapshot``."""
        state = snapshot.state
        report_id = f"rep-{uuid4().hex[:12]}"
        all_sections = snapshot.sections + snapshot.compliance_sections

        report = {
            "id": report_id,
            "date": snapshot.created_at.isoformat(),
            "vehicle": asdict(state.vehicle),
            "vehicle_type": state.vehicle_type.value,
            "odometer": state.odometer,
            "overall_notes": state.overall_notes,
            "summary": {
                "overall_condition": self._overall_condition(snapshot),
                "key_findings": self._key_findings(all_sections),
                "recommendations": self._recommendations(all_sections),
            },
            "progress": {
                "total_items": snapshot.progress.total_items,
                "checked_items": snapshot.progress.checked_items,
                "progress_percent": snapshot.progress.progress_percent,
                "photo_count": snapshot.progress.photo_count,
                "fail_count": snapshot.progress.fail_count,
                "concern_count": snapshot.progress.concern_count,
            },
            "sections": [self._section_to_dict(section) for section in snapshot.sections],
            "compliance_sections": [self._section_to_dict(section) for section in snapshot.compliance_sections],
            "status": "completed",
        }
        self._reports[report_id] = report

        log_with_extra(
            self._logger, logging.INFO, f"Report generated: {report_id}",
            report_id=report_id,
            vin=state.vehicle.vin,
            sections=len(all_sections)
        )
        return report

    async def find_by_id(self, report_id: str) -> Optional[Dict[str, Any]]:
        """Find a report by ID."""
        return self._reports.get(report_id)

    async def find_all(self) -> List[Dict[str, Any]]:
        """List all reports."""
        return list(self._reports.values())

    @staticmethod
    def _overall_condition(snapshot: InspectionSnapshot) -> str:
        progress = snapshot.progress
        if progress.fail_count:
            return f"{progress.fail_count} item(s) failed inspection and need attention."
        if progress.concern_count:
            return f"No failures; {progress.concern_count} item(s) flagged as concerns."
        if progress.checked_items == 0:
            return "No checklist items were rated."
        return "All rated items passed inspection."

    @staticmethod
    def _key_findings(sections) -> List[str]:
        findings = []
        for section in sections:
            for item in section.items:
                if item.status in (ReportStatus.FAIL, ReportStatus.CONCERN):
                    detail = f" ({item.details})" if item.details else ""
                    findings.append(f"{section.title}: {item.check} - {item.status.value}{detail}")
        return findings

    @staticmethod
    def _recommendations(sections) -> List[str]:
        recommendations = []
        for section in sections:
            for item in section.items:
                if item.status is ReportStatus.FAIL:
                    recommendations.append(f"Repair or replace before purchase: {item.check}")
                elif item.status is ReportStatus.CONCERN:
                    recommendations.append(f"Have a mechanic re-check: {item.check}")
        return recommendations

    @staticmethod
    def _section_to_dict(section: ReportSection) -> Dict[str, Any]:
        return {
            "title": section.title,
            "notes": section.notes,
            "items": [
                {
                    "check": item.check,
                    "status": item.status.value,
                    "details": item.details,
                    "photos": [asdict(photo) for photo in item.photos],
                }
                for item in section.items
            ],
        }
