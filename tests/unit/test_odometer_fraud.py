"""Unit tests for odometer rollback heuristics."""

import pytest
from datetime import date

from inspection_checklist.application.services.odometer_fraud import (
    OdometerFraudAnalysis,
    OdometerFraudDetector,
    ServiceRecord
)


class TestOdometerFraudDetector:
    """Test cases for OdometerFraudDetector."""

    @pytest.fixture
    def detector(self):
        return OdometerFraudDetector()

    def test_expected_range(self, detector):
        """Test the plausible mileage window for a vehicle's age."""
        assert detector.expected_range(2020, 2025) == (30000.0, 90000.0)
        assert detector.expected_range(2026, 2025) == (0.0, 0.0)

    def test_normal_reading(self, detector):
        """Test an ordinary reading raises nothing."""
        analysis = detector.analyze(odometer=48213, vehicle_year=2020, current_year=2025)

        assert analysis.detected is False
        assert analysis.confidence == 0
        assert analysis.reasons == ()
        assert analysis.risk_level == "NONE"

    def test_low_for_age(self, detector):
        """Test an unusually low reading is flagged but not detected."""
        analysis = detector.analyze(odometer=5000, vehicle_year=2015, current_year=2025)

        assert analysis.confidence == 30
        assert analysis.detected is False
        assert analysis.risk_level == "LOW"
        assert "unusually low" in analysis.reasons[0]

    def test_service_history_rollback(self, detector):
        """Test decreasing service records and a lower current reading."""
        history = [
            ServiceRecord(date=date(2022, 5, 1), odometer=40000),
            ServiceRecord(date=date(2020, 5, 1), odometer=60000),
        ]

        analysis = detector.analyze(
            odometer=30000, vehicle_year=2015, service_history=history, current_year=2025
        )

        assert analysis.detected is True
        assert analysis.confidence == 100
        assert analysis.risk_level == "HIGH"
        assert len(analysis.reasons) == 3
        assert "decreased from 60,000 to 40,000" in analysis.reasons[1]

    def test_lower_than_last_service(self, detector):
        """Test a current reading below the last service is detected."""
        history = [ServiceRecord(date=date(2023, 1, 1), odometer=70000)]

        analysis = detector.analyze(
            odometer=64321, vehicle_year=2020, service_history=history, current_year=2025
        )

        assert analysis.confidence == 60
        assert analysis.detected is True
        assert analysis.risk_level == "MEDIUM"

    def test_digital_tampering_score(self):
        """Test tampering patterns."""
        assert OdometerFraudDetector.digital_tampering_score(50000) == 60
        assert OdometerFraudDetector.digital_tampering_score(37777) == 15
        assert OdometerFraudDetector.digital_tampering_score(123457) == 0

    def test_tampering_adds_half_score(self, detector):
        """Test a tampering score above 50 adds half of it."""
        analysis = detector.analyze(odometer=50000, vehicle_year=2021, current_year=2025)

        assert analysis.confidence == 30
        assert "tampering" in analysis.reasons[0]

    def test_invalid_inputs(self, detector):
        """Test negative readings and mileage baselines are rejected."""
        with pytest.raises(ValueError, match="cannot be negative"):
            detector.analyze(odometer=-1, vehicle_year=2020)

        with pytest.raises(ValueError, match="must be positive"):
            OdometerFraudDetector(average_annual_miles=0)

        with pytest.raises(ValueError, match="cannot be negative"):
            ServiceRecord(date=date(2020, 1, 1), odometer=-5)

    def test_risk_levels(self):
        """Test risk level thresholds."""
        def level(confidence):
            return OdometerFraudAnalysis(
                detected=confidence > 50, confidence=confidence, reasons=(), expected_min=0, expected_max=0
            ).risk_level

        assert level(0) == "NONE"
        assert level(30) == "LOW"
        assert level(50) == "LOW"
        assert level(60) == "MEDIUM"
        assert level(80) == "HIGH"
