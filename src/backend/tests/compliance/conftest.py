from datetime import datetime

import pytest

from common.compliance.models import (
    BestManagementPractice,
    DischargePoint,
    PrecipitationReading,
    ReadingSource,
    SwpppInspection,
    Turbidity,
    Violation,
    ViolationSeverity,
)


@pytest.fixture
def make_bmp():
    def _make(*, id: str = "BMP-1", functional: bool = True, maintenance_required: bool = False):
        return BestManagementPractice(
            id=id,
            name="Silt fence",
            functional=functional,
            maintenance_required=maintenance_required,
        )

    return _make


@pytest.fixture
def make_discharge_point():
    def _make(*, id: str = "DP-1", has_discharge: bool = False, turbidity=Turbidity.CLEAR):
        return DischargePoint(id=id, location="North outfall", has_discharge=has_discharge, turbidity=turbidity)

    return _make


@pytest.fixture
def make_violation():
    def _make(
        *,
        severity: ViolationSeverity = ViolationSeverity.MINOR,
        corrective_action: str | None = "Re-trench silt fence",
    ):
        return Violation(
            description="Silt fence undercut",
            severity=severity,
            location="East perimeter",
            corrective_action=corrective_action,
        )

    return _make


@pytest.fixture
def make_inspection(make_bmp, make_discharge_point):
    """A clean, fully documented inspection unless overridden."""

    def _make(**overrides) -> SwpppInspection:
        fields = {
            "bmps": [make_bmp()],
            "discharge_points": [make_discharge_point()],
            "violations": [],
            "weather_triggered": False,
            "additional_notes": "Site stabilized; no sediment tracking observed.",
        }
        fields.update(overrides)
        return SwpppInspection(**fields)

    return _make


@pytest.fixture
def make_reading():
    def _make(amount_inches: float, observed_at: datetime, source=ReadingSource.PRIMARY_PROVIDER):
        return PrecipitationReading(amount_inches=amount_inches, observed_at=observed_at, source=source)

    return _make
