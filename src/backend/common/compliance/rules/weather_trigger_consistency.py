from __future__ import annotations

from ..constants import RAIN_THRESHOLD_INCHES
from ..models import RuleFindings, SwpppInspection
from ..registry import register_rule

RULE_ID = "SWPPP-WEATHER-TRIGGER-CONSISTENCY"


@register_rule(
    RULE_ID,
    title="Weather-triggered inspection records a qualifying storm event",
    reference="EPA CGP Part 4.2",
)
def evaluate(inspection: SwpppInspection) -> RuleFindings:
    """Checks the record against itself, not against live weather data."""
    findings = RuleFindings(rule_id=RULE_ID)
    if not inspection.weather_triggered:
        return findings

    amount = inspection.precipitation_inches
    if amount is None:
        findings.warnings.append("Weather-triggered inspection missing precipitation amount")
    elif amount < RAIN_THRESHOLD_INCHES:
        findings.warnings.append(
            f'Precipitation {amount}" below EPA trigger threshold of {RAIN_THRESHOLD_INCHES}"'
        )
    return findings
