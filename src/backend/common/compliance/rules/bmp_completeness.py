from __future__ import annotations

from ..constants import MAINTENANCE_WINDOW_DAYS
from ..models import RuleFindings, SwpppInspection
from ..registry import register_rule

RULE_ID = "SWPPP-BMP-COMPLETENESS"


@register_rule(
    RULE_ID,
    title="All BMPs documented, functional and maintained",
    reference="EPA CGP Part 4.2",
)
def evaluate(inspection: SwpppInspection) -> RuleFindings:
    findings = RuleFindings(rule_id=RULE_ID)
    bmps = inspection.bmps or []
    if not bmps:
        findings.violations.append("No BMPs documented - EPA requires all BMPs to be inspected")
        return findings

    non_functional = sum(1 for bmp in bmps if not bmp.functional)
    if non_functional:
        findings.violations.append(f"{non_functional} non-functional BMPs require immediate corrective action")

    needs_maintenance = sum(1 for bmp in bmps if bmp.maintenance_required)
    if needs_maintenance:
        findings.warnings.append(
            f"{needs_maintenance} BMPs require maintenance within {MAINTENANCE_WINDOW_DAYS} days"
        )
    return findings
