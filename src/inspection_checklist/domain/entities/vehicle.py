"""Vehicle entity and vehicle type enumeration."""

from dataclasses import dataclass
from enum import Enum

from ..exceptions import InvalidVin
from ..value_objects.vin import VIN_LENGTH, normalize_vin, validate_vin


class VehicleType(Enum):
    """Vehicle type enumeration; selects the checklist template."""

    STANDARD = "Standard"
    EV = "EV"
    COMMERCIAL = "Commercial"
    RV = "RV"
    CLASSIC = "Classic"
    MOTORCYCLE = "Motorcycle"

    def get_description(self) -> str:
        """Get human-readable description of the vehicle type."""
        descriptions = {
            VehicleType.STANDARD: "Passenger cars, SUVs and light trucks",
            VehicleType.EV: "Battery electric vehicles",
            VehicleType.COMMERCIAL: "Commercial trucks, DOT/FMCSA",
            VehicleType.RV: "RV / Motorhome, habitability + mechanical",
            VehicleType.CLASSIC: "Classic / Vintage, authenticity + provenance",
            VehicleType.MOTORCYCLE: "Motorcycles and scooters",
        }
        return descriptions[self]

    @property
    def has_compliance_checks(self) -> bool:
        """Check if this type carries a specialized compliance checklist."""
        return self in (VehicleType.COMMERCIAL, VehicleType.RV, VehicleType.CLASSIC)


@dataclass(frozen=True)
class Vehicle:
    """Vehicle identity as resolved by VIN decoding."""

    vin: str
    make: str
    model: str
    year: int

    def __post_init__(self) -> None:
        """Normalize and validate vehicle data."""
        vin = normalize_vin(self.vin)
        if len(vin) != VIN_LENGTH:
            raise InvalidVin(vin, "VIN must be exactly 17 characters long.")
        object.__setattr__(self, "vin", vin)
        object.__setattr__(self, "make", (self.make or "").strip())
        object.__setattr__(self, "model", (self.model or "").strip())

        try:
            year = int(self.year)
        except (TypeError, ValueError):
            raise ValueError(f"Vehicle year must be a number, got {self.year!r}") from None
        if year < 1886:
            raise ValueError("Vehicle year cannot be earlier than 1886")
        object.__setattr__(self, "year", year)

    @classmethod
    def create(cls, vin: str, make: str, model: str, year: int, validate: bool = False) -> "Vehicle":
        """Build a vehicle, optionally enforcing the VIN checksum."""
        if validate:
            result = validate_vin(vin)
            if not result.is_valid:
                raise InvalidVin(normalize_vin(vin), result.message)
        return cls(vin=vin, make=make, model=model, year=year)

    @property
    def display_name(self) -> str:
        """Get "year make model" label."""
        return " ".join(part for part in (str(self.year), self.make, self.model) if part)

    def __str__(self) -> str:
        """String representation."""
        return f"Vehicle({self.vin}, {self.display_name})"
