"""Checklist inspection endpoints for the single active inspection."""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Query, Response, status

from ....application.services.odometer_fraud import ServiceRecord
from ....application.services.progress_service import compute_progress, validate_odometer
from ....domain.entities.vehicle import Vehicle
from ....infrastructure.services import ServiceFactory
from ..config import get_settings
from ..schemas.inspection_schemas import (
    AddPhotoRequest,
    ChecklistItemResponse,
    ChecklistItemUpdateRequest,
    InspectionStateResponse,
    NotesRequest,
    OdometerAnalysisRequest,
    OdometerAnalysisResponse,
    OdometerRequest,
    ProgressResponse,
    SetAudioRequest,
    StartInspectionRequest
)
from .dependencies import get_factory

router = APIRouter()


def _state_response(factory: ServiceFactory) -> InspectionStateResponse:
    return InspectionStateResponse.from_domain(
        factory.store.require_state(),
        factory.odometer_max_digits
    )


@router.post("/current", response_model=InspectionStateResponse, status_code=status.HTTP_201_CREATED)
async def start_inspection(
    request: StartInspectionRequest,
    factory: ServiceFactory = Depends(get_factory)
) -> InspectionStateResponse:
    """
    Start a new inspection.

    Replaces any inspection in progress and builds the checklist (and, for
    Commercial, RV and Classic vehicles, the compliance checklist) for the
    selected vehicle type.
    """
    vehicle = Vehicle.create(
        vin=request.vehicle.vin,
        make=request.vehicle.make,
        model=request.vehicle.model,
        year=request.vehicle.year,
        validate=get_settings().vin_checksum_required
    )
    factory.store.initialize(vehicle, request.vehicle_type)
    return _state_response(factory)


@router.get("/current", response_model=InspectionStateResponse)
async def get_inspection(factory: ServiceFactory = Depends(get_factory)) -> InspectionStateResponse:
    """Get the active inspection."""
    return _state_response(factory)


@router.delete("/current", status_code=status.HTTP_204_NO_CONTENT)
async def discard_inspection(factory: ServiceFactory = Depends(get_factory)) -> Response:
    """Discard the active inspection."""
    factory.store.clear()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/current/items", response_model=ChecklistItemResponse)
async def update_item(
    request: ChecklistItemUpdateRequest,
    factory: ServiceFactory = Depends(get_factory)
) -> ChecklistItemResponse:
    """Update the rating, checkbox or notes of one checklist item."""
    item = factory.store.update_item(request.category, request.index, **request.changes())
    return ChecklistItemResponse.from_domain(item)


@router.post("/current/photos", response_model=ChecklistItemResponse, status_code=status.HTTP_201_CREATED)
async def add_photo(
    request: AddPhotoRequest,
    factory: ServiceFactory = Depends(get_factory)
) -> ChecklistItemResponse:
    """Attach a photo to a checklist item."""
    item = factory.store.add_photo(request.category, request.index, request.photo.to_domain())
    return ChecklistItemResponse.from_domain(item)


@router.delete("/current/photos/{photo_id}", response_model=ChecklistItemResponse)
async def remove_photo(
    photo_id: str,
    category: str = Query(..., min_length=1),
    index: int = Query(..., ge=0),
    factory: ServiceFactory = Depends(get_factory)
) -> ChecklistItemResponse:
    """Remove a photo from a checklist item."""
    item = factory.store.remove_photo(category, index, photo_id)
    return ChecklistItemResponse.from_domain(item)


@router.put("/current/audio", response_model=ChecklistItemResponse)
async def set_audio(
    request: SetAudioRequest,
    factory: ServiceFactory = Depends(get_factory)
) -> ChecklistItemResponse:
    """Attach an audio note to a checklist item, replacing any previous one."""
    item = factory.store.add_audio(request.category, request.index, request.audio.to_domain())
    return ChecklistItemResponse.from_domain(item)


@router.put("/current/odometer", response_model=InspectionStateResponse)
async def set_odometer(
    request: OdometerRequest,
    factory: ServiceFactory = Depends(get_factory)
) -> InspectionStateResponse:
    """Record the odometer reading."""
    factory.store.set_odometer(request.odometer)
    return _state_response(factory)


@router.put("/current/notes", response_model=InspectionStateResponse)
async def set_overall_notes(
    request: NotesRequest,
    factory: ServiceFactory = Depends(get_factory)
) -> InspectionStateResponse:
    """Record the overall inspection notes."""
    factory.store.set_overall_notes(request.notes)
    return _state_response(factory)


@router.get("/current/progress", response_model=ProgressResponse)
async def get_progress(factory: ServiceFactory = Depends(get_factory)) -> ProgressResponse:
    """Get completion and rating counters."""
    return ProgressResponse.from_domain(compute_progress(factory.store.require_state()))


@router.post("/current/odometer-analysis", response_model=OdometerAnalysisResponse)
async def analyze_odometer(
    request: OdometerAnalysisRequest,
    factory: ServiceFactory = Depends(get_factory)
) -> OdometerAnalysisResponse:
    """
    Check the recorded odometer reading for signs of rollback.

    Uses the vehicle's model year and any service history supplied.
    """
    state = factory.store.require_state()
    odometer = validate_odometer(state.odometer, factory.odometer_max_digits)
    analysis = factory.fraud_detector.analyze(
        odometer=int(odometer),
        vehicle_year=state.vehicle.year,
        service_history=[
            ServiceRecord(date=record.date, odometer=record.odometer)
            for record in request.service_history
        ],
        current_year=request.current_year
    )
    return OdometerAnalysisResponse.from_domain(analysis)


@router.post("/current/finalize", status_code=status.HTTP_201_CREATED)
async def finalize_inspection(factory: ServiceFactory = Depends(get_factory)) -> Dict[str, Any]:
    """
    Finalize the inspection and generate its report.

    Rejected with ``InvalidOdometerReading`` when the odometer is empty or
    not digits-only; the inspection is left untouched in that case.
    """
    return await factory.get_finalize_service().finalize()
