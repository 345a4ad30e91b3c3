# Import order is evaluation order, and therefore the order of verdict messages.
from . import bmp_completeness
from . import discharge_points
from . import critical_violations
from . import weather_trigger_consistency
from . import documentation

__all__ = [
    "bmp_completeness",
    "discharge_points",
    "critical_violations",
    "weather_trigger_consistency",
    "documentation",
]
