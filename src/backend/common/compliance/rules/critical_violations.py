from __future__ import annotations

from ..models import RuleFindings, SwpppInspection, ViolationSeverity
from ..registry import register_rule

RULE_ID = "SWPPP-CRITICAL-VIOLATIONS"


@register_rule(
    RULE_ID,
    title="No unresolved critical violations logged",
    reference="EPA CGP Part 5",
)
def evaluate(inspection: SwpppInspection) -> RuleFindings:
    findings = RuleFindings(rule_id=RULE_ID)
    critical = sum(1 for v in inspection.violations or [] if v.severity == ViolationSeverity.CRITICAL)
    if critical:
        findings.violations.append(f"{critical} CRITICAL violations require immediate action")
    return findings
