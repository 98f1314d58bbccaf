"""Shared route dependencies."""

from fastapi import HTTPException, status

from ....application.services.guided_sequencer import GuidedStepSequencer
from ....infrastructure.services import ServiceFactory, get_service_factory


def get_factory() -> ServiceFactory:
    """Get the service factory owning the active session."""
    return get_service_factory()


def require_sequencer(factory: ServiceFactory) -> GuidedStepSequencer:
    """Get the active guided sequencer or fail with 404."""
    if factory.sequencer is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No guided inspection is in progress"
        )
    return factory.sequencer
