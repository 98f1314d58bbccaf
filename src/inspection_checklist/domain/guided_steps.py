"""Step catalogue for the guided (photo-first) inspection flow."""

from typing import List, Optional

from .entities.vehicle import VehicleType
from .value_objects.guided_step import GuidedStep

GUIDED_STEPS = (
    GuidedStep(
        id='exterior-front',
        title='Front Exterior',
        description='Take photos of the vehicle from the front at a 45-degree angle',
        category='Exterior',
        image_category='Front View (45° angle)',
        tips=(
            'Stand about 10 feet away from the vehicle',
            'Make sure all headlights and grille are visible',
            'Look for any damage, dents, or scratches',
            'Check alignment of body panels',
        ),
        red_flags=(
            'Mismatched paint colors (could indicate previous repair)',
            'Uneven panel gaps',
            'Cracked or foggy headlights',
            'Rust around wheel wells',
        ),
        photos_required=2,
    ),
    GuidedStep(
        id='exterior-sides',
        title='Side Panels',
        description='Take photos of both sides of the vehicle',
        category='Exterior',
        image_category='Side View',
        tips=(
            'Walk around the vehicle slowly',
            'Take one photo of each side',
            'Look for door dings, scratches, or dents',
            'Check window condition',
        ),
        red_flags=(
            'Misaligned doors',
            'Rust or bubbling paint',
            'Cracked windows',
            'Damaged side mirrors',
        ),
        photos_required=2,
    ),
    GuidedStep(
        id='exterior-rear',
        title='Rear Exterior',
        description='Take photos of the vehicle from the rear',
        category='Exterior',
        image_category='Rear View',
        tips=(
            'Check tail lights for cracks or moisture',
            'Examine bumper for damage',
            'Look at exhaust pipe condition',
            'Check tire tread depth',
        ),
        red_flags=(
            'Excessive rust around exhaust',
            'Damaged tail lights',
            'Uneven tire wear',
            'Leaking fluids near exhaust',
        ),
        photos_required=2,
    ),
    GuidedStep(
        id='engine-bay',
        title='Engine Bay',
        description='Open the hood and photograph the engine',
        category='Engine',
        image_category='Engine Bay',
        tips=(
            'Take photo with hood fully open',
            'Look for fluid leaks (oil, coolant)',
            'Check battery condition',
            'Inspect belts and hoses',
            'Look for aftermarket modifications',
        ),
        red_flags=(
            'Oil leaks (dark puddles or residue)',
            'Corroded battery terminals',
            'Cracked or fraying belts',
            'Coolant leaks (usually green, orange, or pink)',
            'Modified or missing emission components',
        ),
        photos_required=3,
    ),
    GuidedStep(
        id='interior-front',
        title='Interior - Front Seats',
        description='Photograph the front interior and dashboard',
        category='Interior',
        image_category='Dashboard & Front Interior',
        tips=(
            'Check dashboard for warning lights',
            'Test all controls (AC, radio, windows)',
            'Inspect seat condition',
            'Check odometer reading',
            'Smell for smoke, mold, or musty odors',
        ),
        red_flags=(
            'Check Engine light is on',
            'Torn or heavily worn seats',
            'Non-functioning controls',
            'Strong odors',
            'Odometer seems unusually low for vehicle age',
        ),
        photos_required=2,
    ),
    GuidedStep(
        id='interior-rear',
        title='Interior - Rear Seats',
        description='Photograph the rear seating area',
        category='Interior',
        image_category='Rear Seats',
        tips=(
            'Check seat condition',
            'Look for water damage or stains',
            'Test rear controls if applicable',
        ),
        red_flags=(
            'Water stains (could indicate leaks or flood damage)',
            'Torn upholstery',
            'Musty smell',
        ),
        photos_required=1,
    ),
    GuidedStep(
        id='undercarriage',
        title='Undercarriage',
        description='If possible, photograph underneath the vehicle',
        category='Undercarriage',
        image_category='Undercarriage',
        tips=(
            'Use a flashlight or phone light',
            'Look for fluid leaks',
            'Check for rust or damage',
            'Inspect exhaust system',
        ),
        red_flags=(
            'Active fluid leaks',
            'Excessive rust',
            'Damaged exhaust',
            'Bent frame components',
        ),
        photos_required=2,
    ),
    GuidedStep(
        id='test-drive',
        title='Test Drive',
        description='Record your observations during the test drive',
        category='Test Drive',
        tips=(
            'Listen for unusual noises',
            'Test brakes (should feel firm)',
            'Check steering response',
            'Test acceleration',
            'Verify all gears shift smoothly',
        ),
        red_flags=(
            'Grinding or squealing brakes',
            'Vibration at high speeds',
            'Pulling to one side',
            'Rough shifting',
            'Engine hesitation',
        ),
        photos_required=0,
    ),
)


def generate_inspection_steps(vehicle_type: Optional[VehicleType] = None) -> List[GuidedStep]:
    """Build the ordered guided steps.

    The step list is currently the same for every vehicle type; the argument
    is accepted so callers do not need to change if that stops being true.
    """
    return list(GUIDED_STEPS)
