"""Heuristics for spotting odometer rollback."""

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence, Tuple

from ...infrastructure.logging import get_logger

COMMON_ROLLBACK_TARGETS = (25000, 50000, 75000, 100000, 125000, 150000)
ROLLBACK_TARGET_TOLERANCE = 500
DETECTION_THRESHOLD = 50


@dataclass(frozen=True)
class ServiceRecord:
    """Odometer reading taken at a past service visit."""

    date: date
    odometer: int

    def __post_init__(self) -> None:
        """Validate service record data."""
        if self.odometer < 0:
            raise ValueError("Service record odometer cannot be negative")


@dataclass(frozen=True)
class OdometerFraudAnalysis:
    """Result of odometer rollback analysis."""

    detected: bool
    confidence: float
    reasons: Tuple[str, ...]
    expected_min: float
    expected_max: float

    @property
    def risk_level(self) -> str:
        """Get human-readable risk level."""
        if self.confidence > 75:
            return "HIGH"
        elif self.confidence > DETECTION_THRESHOLD:
            return "MEDIUM"
        elif self.confidence > 0:
            return "LOW"
        else:
            return "NONE"


class OdometerFraudDetector:
    """Scores how likely an odometer reading has been rolled back."""

    def __init__(self, average_annual_miles: int = 12000):
        if average_annual_miles <= 0:
            raise ValueError("Average annual miles must be positive")
        self.average_annual_miles = average_annual_miles
        self._logger = get_logger(__name__)

    def expected_range(self, vehicle_year: int, current_year: int) -> Tuple[float, float]:
        """Plausible mileage window for a vehicle of this age."""
        vehicle_age = max(current_year - vehicle_year, 0)
        return (
            vehicle_age * self.average_annual_miles * 0.5,
            vehicle_age * self.average_annual_miles * 1.5,
        )

    def analyze(
        self,
        odometer: int,
        vehicle_year: int,
        service_history: Sequence[ServiceRecord] = (),
        current_year: Optional[int] = None
    ) -> OdometerFraudAnalysis:
        """Run every heuristic and combine them into one confidence score."""
        if odometer < 0:
            raise ValueError("Odometer reading cannot be negative")

        current_year = current_year or date.today().year
        expected_min, expected_max = self.expected_range(vehicle_year, current_year)
        vehicle_age = max(current_year - vehicle_year, 0)
        reasons = []
        confidence = 0.0

        if odometer < expected_min:
            reasons.append(
                f"Odometer reading ({odometer:,}) is unusually low for a {vehicle_age}-year-old vehicle"
            )
            confidence += 30

        if service_history:
            history = sorted(service_history, key=lambda record: record.date)

            for previous, current in zip(history, history[1:]):
                if current.odometer < previous.odometer:
                    reasons.append(
                        f"Service history shows odometer decreased from "
                        f"{previous.odometer:,} to {current.odometer:,}"
                    )
                    confidence += 50
                    break

            last_service = history[-1]
            if odometer < last_service.odometer:
                reasons.append(
                    f"Current odometer ({odometer:,}) is lower than last service record "
                    f"({last_service.odometer:,})"
                )
                confidence += 60

        tampering_score = self.digital_tampering_score(odometer)
        if tampering_score > 50:
            reasons.append("Digital odometer shows signs of potential tampering")
            confidence += tampering_score / 2

        confidence = min(confidence, 100)
        analysis = OdometerFraudAnalysis(
            detected=confidence > DETECTION_THRESHOLD,
            confidence=confidence,
            reasons=tuple(reasons),
            expected_min=expected_min,
            expected_max=expected_max,
        )

        if analysis.detected:
            self._logger.warning(
                "Possible odometer rollback",
                extra={"odometer": odometer, "confidence": confidence, "reasons": list(reasons)}
            )
        return analysis

    @staticmethod
    def digital_tampering_score(odometer: int) -> int:
        """Score patterns typical of a digitally reset odometer."""
        score = 0

        if odometer % 5000 == 0:
            score += 20

        last_three = str(odometer)[-3:]
        if len(last_three) == 3 and len(set(last_three)) == 1:
            score += 15

        if any(abs(odometer - target) < ROLLBACK_TARGET_TOLERANCE for target in COMMON_ROLLBACK_TARGETS):
            score += 25

        return score
