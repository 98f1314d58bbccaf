"""Checklist templates per vehicle type.

A template maps category label -> ordered item labels. Every vehicle type has
a main template; Commercial, RV and Classic also carry a compliance template
whose category labels never collide with the main one.
"""

from typing import Dict, List, Mapping, Optional, Sequence

from .entities.vehicle import VehicleType

ChecklistTemplate = Dict[str, List[str]]

IMAGE_CATEGORIES = (
    'Front Exterior',
    'Rear Exterior',
    'Driver Side',
    'Passenger Side',
    'Interior (Front)',
    'Interior (Rear)',
    'Tires & Wheels',
    'Engine Bay',
    'Undercarriage',
    'Dashboard/VIN',
    'Odometer',
    'Damage/Misc',
)

VEHICLE_INSPECTION_TEMPLATES: Mapping[VehicleType, Mapping[str, Sequence[str]]] = {
    VehicleType.STANDARD: {
        'Exterior & Body': (
            'Body Panels for Dents/Scratches', 'Glass & Mirrors Condition', 'Lights & Lenses Function',
            'Frame/Unibody Integrity', 'Wiper Blade Condition',
        ),
        'Tires & Brakes': (
            'Tire Tread Depth & Condition (All 4 + Spare)', 'Brake Pad Life (Visual)', 'Rotors/Drums Condition',
            'Brake Fluid Level & Color', 'Emergency Brake Function',
        ),
        'Engine Compartment': (
            'Engine Oil Level & Condition', 'Coolant Level & Condition', 'Belts & Hoses Condition',
            'Battery Terminals & Health', 'Visible Fluid Leaks', 'Engine Air Filter',
        ),
        'Interior': (
            'Upholstery & Carpet Condition', 'Dashboard & Controls Function', 'HVAC System (Heat & A/C)',
            'Audio & Infotainment System', 'Warning Lights on Dash', 'Odor Check',
        ),
        'Test Drive': (
            'Engine Performance & Acceleration', 'Transmission Shifting Smoothness', 'Steering & Alignment',
            'Suspension Noise & Performance', 'Braking Performance (Noises, Pulsation)',
        ),
    },
    VehicleType.EV: {
        'Exterior & Body': (
            'Body Panels for Dents/Scratches', 'Glass & Mirrors Condition', 'LED Lights & Lenses Function',
            'Frame/Unibody Integrity',
        ),
        'Tires & Brakes': (
            'Tire Tread Depth & Condition', 'Brake Pad Life (Regen affects wear)', 'Brake Fluid Level & Color',
            'Emergency Brake Function',
        ),
        'Battery & Charging': (
            'State of Health (SoH) Reading', 'Charge Port Condition', 'Charging Cable Included & Condition',
            'Onboard Charger Function', 'Thermal Management System (Visual)',
        ),
        'Interior & Electronics': (
            'Upholstery & Carpet Condition', 'Main Display & Controls Function', 'HVAC System (Heat Pump/Resistive)',
            'Driver Assist Systems (ADAS) Function', 'Warning Lights on Dash',
        ),
        'Test Drive': (
            'Motor Performance & Acceleration', 'Regenerative Braking Function', 'Steering & Alignment',
            'Suspension Noise & Performance', 'Unusual Electrical Noises',
        ),
    },
    VehicleType.COMMERCIAL: {
        'Cab Exterior': (
            'Body Panels & Fairings', 'Windshield & Mirrors (No Cracks)', 'Lights & Reflective Tapes (DOT)',
            'Entry Steps & Grab Handles',
        ),
        'Chassis & Drivetrain': (
            'Frame Rails (No Cracks/Bends)', 'Visible Fluid Leaks (Engine, Trans, Axles)', 'Exhaust System Integrity',
            'Driveshaft & U-Joints',
        ),
        'Tires, Wheels & Brakes': (
            'Tire Tread Depth (>4/32" Steer, >2/32" Other)', 'Dual Tire Spacing & Condition', 'Hub Oil Levels',
            'Air Brake System (Leaks, Hoses)', 'Brake Adjustment (Slack Adjusters)',
        ),
        'Cab Interior': (
            'Gauges & Warning Lights', 'HVAC & Defroster', 'Safety Equipment (Horn, Wipers, Fire Ext.)',
            'Hours & Odometer Reading',
        ),
        'Special Equipment': (
            'Fifth Wheel & Locking Jaw', 'Hydraulic Systems (If applicable)', 'Liftgate Operation (If applicable)',
        ),
    },
    VehicleType.RV: {
        'Coach Exterior': (
            'Roof Condition & Seals', 'Sidewalls (Delamination Check)', 'Awnings & Slide-Outs Operation',
            'Windows & Seals', 'Storage Compartment Doors',
        ),
        'Chassis (Motorhome) / Frame (Trailer)': (
            'Frame Condition (Rust, Cracks)', 'Tire Age & Condition (Sidewall Cracking)',
            'Suspension Components (Springs, Airbags)', 'Leveling Jacks Operation',
        ),
        'Life Support Systems': (
            'Propane System (Leak Check)', 'Freshwater System (Pump, Faucets)', 'Wastewater Tanks & Valves',
            'House Battery Bank Health',
        ),
        'Interior Appliances': (
            'Refrigerator Operation (Gas & Electric)', 'Stove & Oven Function', 'Water Heater Function',
            'Furnace & AC Operation',
        ),
        'Cabin': (
            'Signs of Water Intrusion (Stains)', 'Cabinetry & Flooring Condition', 'Furniture Upholstery',
            'Safety Devices (Smoke, LP, CO Detectors)',
        ),
    },
    VehicleType.CLASSIC: {
        'Body & Paint': (
            'Paint Quality & Originality', 'Panel Gaps & Alignment', 'Chrome & Trim Condition',
            'Evidence of Bondo/Fillers (Magnet Test)',
        ),
        'Frame & Undercarriage': (
            'Frame Rails for Rust/Rot/Repairs', 'Floor Pans Integrity', 'Suspension Bushings & Components (Age)',
            'Originality of Undercarriage',
        ),
        'Engine & Drivetrain': (
            'Engine Numbers Matching (If applicable)', 'Carburetor/Fuel Injection Condition',
            'Originality of Components', 'Exhaust System (Rust, Originality)',
        ),
        'Interior': (
            'Upholstery Originality & Condition', 'Dashboard, Gauges & Radio Originality', 'Headliner & Carpet',
            'Correctness of Switches & Knobs',
        ),
        'Documentation': (
            'History & Service Records', 'Original Bill of Sale / Window Sticker', 'Restoration Photo Album',
            'VIN & Title Verification',
        ),
    },
    VehicleType.MOTORCYCLE: {
        'Controls & Electrical': (
            'Handlebars, Levers, Switches', 'Lights & Signals Function', 'Battery Health & Terminals',
            'Wiring Condition',
        ),
        'Engine & Transmission': (
            'Visible Oil Leaks', 'Clutch Engagement & Feel', 'Exhaust System Condition',
            'Engine Noises (Cold & Warm)',
        ),
        'Frame, Wheels & Tires': (
            'Frame for Damage/Cracks', 'Tire Age & Tread', 'Wheel Rims & Spokes/Casting', 'Fork Seals (No Leaks)',
        ),
        'Final Drive': (
            'Chain/Belt Tension & Condition', 'Sprocket/Pulley Wear', 'Shaft Drive Fluid (If applicable)',
        ),
        'Brakes & Suspension': (
            'Brake Pad Life & Rotor Condition', 'Brake Fluid Level & Color', 'Front & Rear Suspension Action',
        ),
    },
}

COMPLIANCE_TEMPLATES: Mapping[VehicleType, Mapping[str, Sequence[str]]] = {
    VehicleType.COMMERCIAL: {
        'DOT/FMCSA Compliance': (
            'Annual DOT Inspection Sticker Current', 'Registration & IFTA Decals Current',
            'ELD / Logbook Compliance', 'Emergency Warning Triangles (3)', 'Fire Extinguisher Rated & Secured',
        ),
        'Cargo Securement': (
            'Tie-Downs & Straps Condition', 'Load Bars & Chains', 'Trailer Doors, Seals & Locks',
        ),
    },
    VehicleType.RV: {
        'Habitability & Safety': (
            'LP Gas Detector Tested', 'Carbon Monoxide Detector Tested', 'Smoke Detector Tested',
            'Emergency Exit Window Operation', 'Fire Extinguisher Present & Charged',
        ),
        'Shore Power & Electrical': (
            'Shore Power Cord & Adapters', 'Converter/Inverter Function', 'GFCI Outlets Trip & Reset',
            'Generator Operation & Hours',
        ),
    },
    VehicleType.CLASSIC: {
        'Authenticity & Provenance': (
            'VIN Plate & Rivets Original', 'Trim/Cowl Tag Decoded & Matches', 'Date Codes on Glass & Components',
            'Matching Numbers Documentation',
        ),
        'Title & Ownership Chain': (
            'Title Brand History Consistent', 'Ownership Chain Documented', 'Registry / Club Records Checked',
        ),
    },
}


class TemplateRegistry:
    """Lookup of checklist templates by vehicle type.

    Lookups hand out fresh dicts and lists; callers may mutate what they get
    without touching the registry.
    """

    def __init__(
        self,
        templates: Optional[Mapping[VehicleType, Mapping[str, Sequence[str]]]] = None,
        compliance_templates: Optional[Mapping[VehicleType, Mapping[str, Sequence[str]]]] = None
    ):
        self._templates = templates if templates is not None else VEHICLE_INSPECTION_TEMPLATES
        self._compliance_templates = (
            compliance_templates if compliance_templates is not None else COMPLIANCE_TEMPLATES
        )

        for vehicle_type in self._templates:
            main = set(self._templates[vehicle_type])
            compliance = set(self._compliance_templates.get(vehicle_type, {}))
            shared = main & compliance
            if shared:
                raise ValueError(
                    f"{vehicle_type.value} compliance categories overlap the main checklist: "
                    f"{', '.join(sorted(shared))}"
                )

    @property
    def vehicle_types(self) -> List[VehicleType]:
        """Vehicle types that have a template."""
        return list(self._templates)

    def get_template(self, vehicle_type: VehicleType) -> ChecklistTemplate:
        """Get the main checklist template for a vehicle type."""
        if vehicle_type not in self._templates:
            raise ValueError(f"No checklist template for vehicle type {vehicle_type!r}")
        return _copy_template(self._templates[vehicle_type])

    def get_compliance_template(self, vehicle_type: VehicleType) -> ChecklistTemplate:
        """Get the compliance template; empty for types without one."""
        return _copy_template(self._compliance_templates.get(vehicle_type, {}))

    def count_items(self, vehicle_type: VehicleType) -> int:
        """Total number of items across the main and compliance templates."""
        main = self.get_template(vehicle_type)
        compliance = self.get_compliance_template(vehicle_type)
        return sum(len(items) for items in main.values()) + sum(len(items) for items in compliance.values())


def _copy_template(template: Mapping[str, Sequence[str]]) -> ChecklistTemplate:
    return {category: list(items) for category, items in template.items()}
