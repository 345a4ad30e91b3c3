"""SWPPP compliance core: rain triggers, inspection deadlines and inspection verdicts.

This package intentionally contains only domain logic:
- Inputs are precipitation readings and submitted inspection records.
- No persistence, weather-provider, or network calls live here.
"""

from .constants import (
    DEFAULT_WORKDAY_END_HOUR,
    DEFAULT_WORKDAY_START_HOUR,
    INSPECTION_WINDOW_HOURS,
    RAIN_THRESHOLD_INCHES,
)
from .deadline import (
    build_inspection_deadline,
    compute_deadline,
    is_inspection_timely,
    is_within_working_hours,
)
from .errors import ComplianceError, ConfigurationError, InvalidInputError
from .fines import estimate_fines
from .models import (
    DEFAULT_WORKING_HOURS,
    BestManagementPractice,
    ComplianceReport,
    ComplianceValidation,
    DischargePoint,
    FineEstimate,
    InspectionDeadline,
    PrecipitationReading,
    SafetyInspection,
    SwpppInspection,
    Violation,
    WeatherEvent,
    WorkingHours,
)
from .rain_trigger import aggregate_precipitation, record_weather_event, requires_inspection
from .runner import ComplianceRunner
from .safety import validate_safety_inspection
from .validator import validate_inspection, validate_jurisdiction

# Import built-in rules so they self-register with the global registry.
from . import jurisdictions as _jurisdiction_rules  # noqa: F401
from . import rules as _builtin_rules  # noqa: F401
