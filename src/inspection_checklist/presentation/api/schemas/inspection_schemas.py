"""Pydantic schemas for inspection API requests and responses."""

from datetime import date as Date
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from ....application.services.guided_sequencer import GuidedStepSequencer
from ....application.services.odometer_fraud import OdometerFraudAnalysis
from ....application.services.progress_service import can_finalize, compute_progress
from ....domain.entities.checklist_item import ChecklistItem
from ....domain.entities.inspection import InspectionSection, InspectionState
from ....domain.entities.vehicle import Vehicle, VehicleType
from ....domain.value_objects.condition_rating import ConditionRating
from ....domain.value_objects.guided_step import GuidedStep
from ....domain.value_objects.media import Audio, Photo
from ....domain.value_objects.progress import ProgressSummary


# Requests
class VehicleRequest(BaseModel):
    """Vehicle identity as returned by VIN decoding."""
    vin: str = Field(..., min_length=17, max_length=17, description="17-character VIN")
    make: str = Field("", max_length=60)
    model: str = Field("", max_length=60)
    year: int = Field(..., ge=1886, le=2100)

    @field_validator('vin')
    @classmethod
    def normalize_vin(cls, v: str) -> str:
        """Uppercase and trim the VIN."""
        return v.strip().upper()


class StartInspectionRequest(BaseModel):
    """Request model for starting an inspection."""
    vehicle: VehicleRequest
    vehicle_type: VehicleType = Field(..., description="Selects the checklist template")


class ItemReference(BaseModel):
    """Addresses one checklist item; category labels may contain slashes."""
    category: str = Field(..., min_length=1)
    index: int = Field(..., ge=0)


class ChecklistItemUpdateRequest(ItemReference):
    """Partial update for a checklist item; omitted fields are left alone."""
    checked: Optional[bool] = None
    condition: Optional[ConditionRating] = None
    notes: Optional[str] = Field(None, max_length=2000)

    def changes(self) -> dict:
        """Fields the client actually sent, excluding the item reference."""
        return self.model_dump(exclude_unset=True, exclude_none=True, exclude={"category", "index"})


class PhotoPayload(BaseModel):
    """Compressed, base64-encoded photo."""
    id: str = Field(..., min_length=1)
    category: str = ""
    base64: str
    mime_type: str = "image/jpeg"
    notes: str = ""

    def to_domain(self) -> Photo:
        """Convert to a domain photo."""
        return Photo(
            id=self.id,
            category=self.category,
            base64=self.base64,
            mime_type=self.mime_type,
            notes=self.notes
        )


class AudioPayload(BaseModel):
    """Base64-encoded audio note."""
    base64: str
    mime_type: str = "audio/webm"

    def to_domain(self) -> Audio:
        """Convert to a domain audio note."""
        return Audio(base64=self.base64, mime_type=self.mime_type)


class AddPhotoRequest(ItemReference):
    """Request model for attaching a photo to an item."""
    photo: PhotoPayload


class SetAudioRequest(ItemReference):
    """Request model for attaching an audio note to an item."""
    audio: AudioPayload


class OdometerRequest(BaseModel):
    """Odometer reading as typed; validated on finalize."""
    odometer: str = Field(..., max_length=32)


class NotesRequest(BaseModel):
    """Free-form notes."""
    notes: str = Field(..., max_length=5000)


class VinRequest(BaseModel):
    """VIN to validate."""
    vin: str = Field(..., max_length=32)


class ServiceRecordRequest(BaseModel):
    """Odometer reading from a past service visit."""
    date: Date
    odometer: int = Field(..., ge=0)


class OdometerAnalysisRequest(BaseModel):
    """Service history for odometer rollback analysis."""
    service_history: List[ServiceRecordRequest] = Field(default_factory=list)
    current_year: Optional[int] = Field(None, ge=1886, le=2100)


class StartGuidedRequest(BaseModel):
    """Request model for starting a guided inspection."""
    vehicle_type: Optional[VehicleType] = None


# Responses
class PhotoResponse(BaseModel):
    """Photo attached to an item."""
    id: str
    category: str
    mime_type: str
    notes: str
    base64: str

    @classmethod
    def from_domain(cls, photo: Photo) -> "PhotoResponse":
        return cls(
            id=photo.id,
            category=photo.category,
            mime_type=photo.mime_type,
            notes=photo.notes,
            base64=photo.base64
        )


class AudioResponse(BaseModel):
    """Audio note attached to an item."""
    mime_type: str
    base64: str


class ChecklistItemResponse(BaseModel):
    """Checklist item with its rating and evidence."""
    label: str
    checked: bool
    condition: ConditionRating
    notes: str
    photos: List[PhotoResponse]
    audio: Optional[AudioResponse]

    @classmethod
    def from_domain(cls, item: ChecklistItem) -> "ChecklistItemResponse":
        return cls(
            label=item.label,
            checked=item.checked,
            condition=item.condition,
            notes=item.notes,
            photos=[PhotoResponse.from_domain(photo) for photo in item.photos],
            audio=AudioResponse(mime_type=item.audio.mime_type, base64=item.audio.base64) if item.audio else None
        )


class VehicleResponse(BaseModel):
    """Vehicle identity."""
    vin: str
    make: str
    model: str
    year: int

    @classmethod
    def from_domain(cls, vehicle: Vehicle) -> "VehicleResponse":
        return cls(vin=vehicle.vin, make=vehicle.make, model=vehicle.model, year=vehicle.year)


class ProgressResponse(BaseModel):
    """Derived progress counters."""
    total_items: int
    checked_items: int
    progress_percent: int
    photo_count: int
    pass_count: int
    fail_count: int
    concern_count: int
    na_count: int

    @classmethod
    def from_domain(cls, progress: ProgressSummary) -> "ProgressResponse":
        return cls(
            total_items=progress.total_items,
            checked_items=progress.checked_items,
            progress_percent=progress.progress_percent,
            photo_count=progress.photo_count,
            pass_count=progress.pass_count,
            fail_count=progress.fail_count,
            concern_count=progress.concern_count,
            na_count=progress.na_count
        )


def _section_response(section: InspectionSection) -> Dict[str, List[ChecklistItemResponse]]:
    return {
        category: [ChecklistItemResponse.from_domain(item) for item in items]
        for category, items in section.items()
    }


class InspectionStateResponse(BaseModel):
    """Full view of the active inspection."""
    vehicle: VehicleResponse
    vehicle_type: VehicleType
    checklist: Dict[str, List[ChecklistItemResponse]]
    compliance_checklist: Dict[str, List[ChecklistItemResponse]]
    odometer: str
    overall_notes: str
    progress: ProgressResponse
    can_finalize: bool

    @classmethod
    def from_domain(cls, state: InspectionState, odometer_max_digits: Optional[int] = None) -> "InspectionStateResponse":
        return cls(
            vehicle=VehicleResponse.from_domain(state.vehicle),
            vehicle_type=state.vehicle_type,
            checklist=_section_response(state.checklist),
            compliance_checklist=_section_response(state.compliance_checklist),
            odometer=state.odometer,
            overall_notes=state.overall_notes,
            progress=ProgressResponse.from_domain(compute_progress(state)),
            can_finalize=can_finalize(state, odometer_max_digits)
        )


class TemplateSummaryResponse(BaseModel):
    """Vehicle type offered by the type selector."""
    vehicle_type: VehicleType
    description: str
    has_compliance_checks: bool
    item_count: int


class TemplateResponse(BaseModel):
    """Checklist and compliance templates for one vehicle type."""
    vehicle_type: VehicleType
    description: str
    checklist: Dict[str, List[str]]
    compliance_checklist: Dict[str, List[str]]


class VinValidationResponse(BaseModel):
    """VIN validation outcome."""
    vin: str
    is_valid: bool
    message: Optional[str]


class OdometerAnalysisResponse(BaseModel):
    """Odometer rollback analysis."""
    detected: bool
    confidence: float
    risk_level: str
    reasons: List[str]
    expected_min: float
    expected_max: float

    @classmethod
    def from_domain(cls, analysis: OdometerFraudAnalysis) -> "OdometerAnalysisResponse":
        return cls(
            detected=analysis.detected,
            confidence=analysis.confidence,
            risk_level=analysis.risk_level,
            reasons=list(analysis.reasons),
            expected_min=analysis.expected_min,
            expected_max=analysis.expected_max
        )


class GuidedStepResponse(BaseModel):
    """One guided step with its tips and red flags."""
    id: str
    title: str
    description: str
    category: str
    photo_category: str
    tips: List[str]
    red_flags: List[str]
    photos_required: int
    audio_optional: bool

    @classmethod
    def from_domain(cls, step: GuidedStep) -> "GuidedStepResponse":
        return cls(
            id=step.id,
            title=step.title,
            description=step.description,
            category=step.category,
            photo_category=step.photo_category,
            tips=list(step.tips),
            red_flags=list(step.red_flags),
            photos_required=step.photos_required,
            audio_optional=step.audio_optional
        )


class GuidedStateResponse(BaseModel):
    """Position and buffers of the guided inspection."""
    vehicle_type: Optional[VehicleType]
    total_steps: int
    current_step_index: int
    step_counter: str
    current_step: Optional[GuidedStepResponse]
    photos_collected: int
    notes: str
    has_audio: bool
    completed_step_ids: List[str]
    can_advance: bool
    progress_percent: int
    is_complete: bool

    @classmethod
    def from_domain(cls, sequencer: GuidedStepSequencer) -> "GuidedStateResponse":
        step = sequencer.current_step
        return cls(
            vehicle_type=sequencer.vehicle_type,
            total_steps=len(sequencer.steps),
            current_step_index=sequencer.current_step_index,
            step_counter=sequencer.step_counter,
            current_step=GuidedStepResponse.from_domain(step) if step else None,
            photos_collected=len(sequencer.photos),
            notes=sequencer.notes,
            has_audio=sequencer.audio is not None,
            completed_step_ids=sorted(sequencer.completed_step_ids),
            can_advance=sequencer.can_advance,
            progress_percent=sequencer.progress_percent,
            is_complete=sequencer.is_complete
        )


class StepCompletionResponse(BaseModel):
    """Data recorded when a guided step was completed."""
    step_id: str
    photo_ids: List[str]
    notes: str
    has_audio: bool
