"""Checklist template endpoints."""

from typing import List

from fastapi import APIRouter, Depends

from ....domain.entities.vehicle import VehicleType
from ....domain.templates import IMAGE_CATEGORIES
from ....infrastructure.services import ServiceFactory
from ..schemas.inspection_schemas import TemplateResponse, TemplateSummaryResponse
from .dependencies import get_factory

router = APIRouter()


@router.get("/", response_model=List[TemplateSummaryResponse])
async def list_vehicle_types(factory: ServiceFactory = Depends(get_factory)) -> List[TemplateSummaryResponse]:
    """List the vehicle types offered by the type selector."""
    return [
        TemplateSummaryResponse(
            vehicle_type=vehicle_type,
            description=vehicle_type.get_description(),
            has_compliance_checks=bool(factory.registry.get_compliance_template(vehicle_type)),
            item_count=factory.registry.count_items(vehicle_type)
        )
        for vehicle_type in factory.registry.vehicle_types
    ]


@router.get("/image-categories", response_model=List[str])
async def list_image_categories() -> List[str]:
    """List photo categories offered by capture screens."""
    return list(IMAGE_CATEGORIES)


@router.get("/{vehicle_type}", response_model=TemplateResponse)
async def get_template(
    vehicle_type: VehicleType,
    factory: ServiceFactory = Depends(get_factory)
) -> TemplateResponse:
    """Get the checklist and compliance templates for a vehicle type."""
    return TemplateResponse(
        vehicle_type=vehicle_type,
        description=vehicle_type.get_description(),
        checklist=factory.registry.get_template(vehicle_type),
        compliance_checklist=factory.registry.get_compliance_template(vehicle_type)
    )
