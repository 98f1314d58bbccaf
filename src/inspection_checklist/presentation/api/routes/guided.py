"""Guided step-by-step inspection endpoints."""

from typing import List

from fastapi import APIRouter, Depends, status

from ....domain.guided_steps import generate_inspection_steps
from ....infrastructure.services import ServiceFactory
from ..schemas.inspection_schemas import (
    AudioPayload,
    GuidedStateResponse,
    GuidedStepResponse,
    NotesRequest,
    PhotoPayload,
    StartGuidedRequest,
    StepCompletionResponse
)
from .dependencies import get_factory, require_sequencer

router = APIRouter()


@router.get("/steps", response_model=List[GuidedStepResponse])
async def list_steps() -> List[GuidedStepResponse]:
    """List the guided steps with tips, red flags and photo requirements."""
    return [GuidedStepResponse.from_domain(step) for step in generate_inspection_steps()]


@router.post("/", response_model=GuidedStateResponse, status_code=status.HTTP_201_CREATED)
async def start_guided(
    request: StartGuidedRequest,
    factory: ServiceFactory = Depends(get_factory)
) -> GuidedStateResponse:
    """Start a guided inspection from the first step."""
    return GuidedStateResponse.from_domain(factory.start_guided(request.vehicle_type))


@router.get("/", response_model=GuidedStateResponse)
async def get_guided(factory: ServiceFactory = Depends(get_factory)) -> GuidedStateResponse:
    """Get the current position in the guided inspection."""
    return GuidedStateResponse.from_domain(require_sequencer(factory))


@router.post("/photos", response_model=GuidedStateResponse, status_code=status.HTTP_201_CREATED)
async def capture_photo(
    photo: PhotoPayload,
    factory: ServiceFactory = Depends(get_factory)
) -> GuidedStateResponse:
    """Buffer a photo for the current step."""
    sequencer = require_sequencer(factory)
    sequencer.capture_photo(photo.to_domain())
    return GuidedStateResponse.from_domain(sequencer)


@router.delete("/photos/{photo_id}", response_model=GuidedStateResponse)
async def discard_photo(
    photo_id: str,
    factory: ServiceFactory = Depends(get_factory)
) -> GuidedStateResponse:
    """Drop a buffered photo."""
    sequencer = require_sequencer(factory)
    sequencer.discard_photo(photo_id)
    return GuidedStateResponse.from_domain(sequencer)


@router.put("/notes", response_model=GuidedStateResponse)
async def set_notes(
    request: NotesRequest,
    factory: ServiceFactory = Depends(get_factory)
) -> GuidedStateResponse:
    """Replace the notes for the current step."""
    sequencer = require_sequencer(factory)
    sequencer.set_notes(request.notes)
    return GuidedStateResponse.from_domain(sequencer)


@router.put("/audio", response_model=GuidedStateResponse)
async def set_audio(
    audio: AudioPayload,
    factory: ServiceFactory = Depends(get_factory)
) -> GuidedStateResponse:
    """Replace the audio note for the current step."""
    sequencer = require_sequencer(factory)
    sequencer.set_audio(audio.to_domain())
    return GuidedStateResponse.from_domain(sequencer)


@router.post("/complete-step", response_model=GuidedStateResponse)
async def complete_step(factory: ServiceFactory = Depends(get_factory)) -> GuidedStateResponse:
    """
    Complete the current step and advance.

    Rejected with ``InsufficientPhotos`` when fewer photos are buffered than
    the step requires.
    """
    sequencer = require_sequencer(factory)
    sequencer.complete_step()
    return GuidedStateResponse.from_domain(sequencer)


@router.post("/previous-step", response_model=GuidedStateResponse)
async def previous_step(factory: ServiceFactory = Depends(get_factory)) -> GuidedStateResponse:
    """Go back one step, discarding anything buffered for the current one."""
    sequencer = require_sequencer(factory)
    sequencer.previous_step()
    return GuidedStateResponse.from_domain(sequencer)


@router.get("/completions", response_model=List[StepCompletionResponse])
async def list_completions(factory: ServiceFactory = Depends(get_factory)) -> List[StepCompletionResponse]:
    """List data recorded for completed steps."""
    require_sequencer(factory)
    return [
        StepCompletionResponse(
            step_id=completion.step_id,
            photo_ids=[photo.id for photo in completion.photos],
            notes=completion.notes,
            has_audio=completion.audio is not None
        )
        for completion in factory.guided_completions
    ]
