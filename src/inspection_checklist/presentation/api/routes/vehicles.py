"""Vehicle endpoints."""

from fastapi import APIRouter

from ....domain.value_objects.vin import normalize_vin, validate_vin
from ..schemas.inspection_schemas import VinRequest, VinValidationResponse

router = APIRouter()


@router.post("/validate-vin", response_model=VinValidationResponse)
async def check_vin(request: VinRequest) -> VinValidationResponse:
    """Validate a VIN's length, character set and check digit."""
    result = validate_vin(request.vin)
    return VinValidationResponse(
        vin=normalize_vin(request.vin),
        is_valid=result.is_valid,
        message=result.message
    )
