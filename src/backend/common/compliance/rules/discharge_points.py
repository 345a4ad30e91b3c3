from __future__ import annotations

from ..models import RuleFindings, SwpppInspection
from ..registry import register_rule

RULE_ID = "SWPPP-DISCHARGE-POINTS"


@register_rule(
    RULE_ID,
    title="Discharge points inspected and free of turbid discharge",
    reference="EPA CGP Part 4.1",
)
def evaluate(inspection: SwpppInspection) -> RuleFindings:
    findings = RuleFindings(rule_id=RULE_ID)
    points = inspection.discharge_points or []
    if not points:
        findings.violations.append("Discharge points must be inspected per EPA CGP Part 4.1")
        return findings

    # Only TURBID / VERY_TURBID discharges count; SLIGHTLY_TURBID does not.
    turbid = sum(1 for point in points if point.is_turbid_discharge())
    if turbid:
        findings.violations.append(f"{turbid} discharge points show potential violations")
    return findings
