from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, Field

from .constants import DEFAULT_WORKDAY_END_HOUR, DEFAULT_WORKDAY_START_HOUR
from .errors import ConfigurationError


class ReadingSource(str, Enum):
    PRIMARY_PROVIDER = "PRIMARY_PROVIDER"
    FALLBACK_PROVIDER = "FALLBACK_PROVIDER"
    MANUAL = "MANUAL"


class Turbidity(str, Enum):
    CLEAR = "CLEAR"
    SLIGHTLY_TURBID = "SLIGHTLY_TURBID"
    TURBID = "TURBID"
    VERY_TURBID = "VERY_TURBID"


class ViolationSeverity(str, Enum):
    MINOR = "MINOR"
    MAJOR = "MAJOR"
    CRITICAL = "CRITICAL"


@dataclass(frozen=True)
class WorkingHours:
    """Daily window (local site time) in which an inspection deadline may fall.

    `end_hour` is exclusive: a deadline at 17:00 with an end of 17 is outside the window.
    """

    start_hour: int = DEFAULT_WORKDAY_START_HOUR
    end_hour: int = DEFAULT_WORKDAY_END_HOUR

    def __post_init__(self) -> None:
        for name in ("start_hour", "end_hour"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"Working hours {name} must be an int, got {value!r}.")
            if not 0 <= value <= 23:
                raise ConfigurationError(f"Working hours {name} must be within 0-23, got {value}.")
        if self.start_hour >= self.end_hour:
            raise ConfigurationError(
                f"Working hours start ({self.start_hour}) must be before end ({self.end_hour})."
            )

    def contains_hour(self, hour: int) -> bool:
        return self.start_hour <= hour < self.end_hour


DEFAULT_WORKING_HOURS = WorkingHours()


@dataclass(frozen=True)
class InspectionDeadline:
    # Kept together with its inputs so the deadline can be audited and recomputed.
    triggering_event_at: datetime
    deadline_at: datetime
    working_hours: WorkingHours = DEFAULT_WORKING_HOURS


class PrecipitationReading(BaseModel):
    amount_inches: float = Field(..., ge=0, allow_inf_nan=False)
    observed_at: datetime
    source: ReadingSource = ReadingSource.PRIMARY_PROVIDER

    model_config = {"frozen": True}


@dataclass(frozen=True)
class WeatherEvent:
    reading: PrecipitationReading
    requires_inspection: bool
    deadline: Optional[InspectionDeadline] = None


class BestManagementPractice(BaseModel):
    id: str
    name: str = ""
    functional: bool
    maintenance_required: bool = False
    notes: Optional[str] = None

    model_config = {"frozen": True}


class DischargePoint(BaseModel):
    id: str
    location: str = ""
    has_discharge: bool
    turbidity: Optional[Turbidity] = None

    model_config = {"frozen": True}

    def is_turbid_discharge(self) -> bool:
        return self.has_discharge and self.turbidity in (Turbidity.TURBID, Turbidity.VERY_TURBID)


class Violation(BaseModel):
    description: str
    severity: ViolationSeverity
    location: str = ""
    corrective_action: Optional[str] = None

    model_config = {"frozen": True}


class SwpppInspection(BaseModel):
    """A submitted SWPPP field inspection, as handed over by the host application.

    The three collections are required. They default to None so that a record which
    never carried them can be told apart from one that recorded nothing.
    """

    bmps: Optional[List[BestManagementPractice]] = None
    discharge_points: Optional[List[DischargePoint]] = None
    violations: Optional[List[Violation]] = None
    weather_triggered: bool = False
    precipitation_inches: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    additional_notes: Optional[str] = None
    jurisdiction: Optional[str] = None
    inspected_at: Optional[datetime] = None
    # State-specific attachments, e.g. {"npdes_permit": "FLR10XXXX"}.
    form_data: Dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}


class SafetyInspection(BaseModel):
    competent_person: Optional[str] = None
    hazard_assessment: bool = False
    fall_protection: bool = False
    work_height_feet: float = Field(0, ge=0)
    has_excavation: bool = False
    excavation_inspection: bool = False

    model_config = {"frozen": True}


class RuleFindings(BaseModel):
    rule_id: str
    violations: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)

    def is_clean(self) -> bool:
        return not (self.violations or self.warnings or self.recommendations)


class ComplianceValidation(BaseModel):
    is_compliant: bool
    violations: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)

    model_config = {"frozen": True}

    @classmethod
    def from_findings(cls, findings: Iterable[RuleFindings]) -> "ComplianceValidation":
        violations: List[str] = []
        warnings: List[str] = []
        recommendations: List[str] = []
        for item in findings:
            violations.extend(item.violations)
            warnings.extend(item.warnings)
            recommendations.extend(item.recommendations)
        # Warnings and recommendations never affect the verdict.
        return cls(
            is_compliant=not violations,
            violations=violations,
            warnings=warnings,
            recommendations=recommendations,
        )


class FineEstimate(BaseModel):
    min_fine: Decimal
    max_fine: Decimal
    daily_fine: Decimal
    currency: str = "USD"

    model_config = {"frozen": True}


class ComplianceReport(BaseModel):
    run_id: str
    generated_at: datetime
    jurisdiction: Optional[str] = None

    findings: List[RuleFindings] = Field(default_factory=list)
    validation: ComplianceValidation
    fines: FineEstimate
