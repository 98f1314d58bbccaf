"""Generated report endpoints."""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from ....infrastructure.services import ServiceFactory
from .dependencies import get_factory

router = APIRouter()


@router.get("/")
async def list_reports(factory: ServiceFactory = Depends(get_factory)) -> List[Dict[str, Any]]:
    """List reports generated in this session."""
    return await factory.report_generator.find_all()


@router.get("/{report_id}")
async def get_report(report_id: str, factory: ServiceFactory = Depends(get_factory)) -> Dict[str, Any]:
    """Get a generated report by ID."""
    report = await factory.report_generator.find_by_id(report_id)
    if report is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Report with ID {report_id} not found"
        )
    return report
