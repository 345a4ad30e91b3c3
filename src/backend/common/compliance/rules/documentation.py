from __future__ import annotations

from ..models import RuleFindings, SwpppInspection
from ..registry import register_rule

RULE_ID = "SWPPP-DOCUMENTATION"


@register_rule(
    RULE_ID,
    title="Corrective actions and site observations documented",
    reference="EPA CGP Part 4.7",
)
def evaluate(inspection: SwpppInspection) -> RuleFindings:
    # Recommendations only; never affects the verdict.
    findings = RuleFindings(rule_id=RULE_ID)
    if any(not (v.corrective_action or "").strip() for v in inspection.violations or []):
        findings.recommendations.append("Document corrective actions for all violations")
    if not (inspection.additional_notes or "").strip():
        findings.recommendations.append("Consider adding site-specific observations in notes")
    return findings
