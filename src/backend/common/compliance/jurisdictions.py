"""State overlays applied on top of the federal (EPA CGP) verdict.

Each state's rules are registered under its postal code. A state with no
registered rules contributes nothing; it is not an error.
"""

from __future__ import annotations

from typing import Any

from .constants import TX_MIN_BMP_COUNT
from .models import RuleFindings, SwpppInspection
from .registry import register_rule


def _form_value(inspection: SwpppInspection, *keys: str) -> Any:
    # Host forms post camelCase keys; fixtures and the CLI use snake_case.
    for key in keys:
        value = inspection.form_data.get(key)
        if value:
            return value
    return None


@register_rule(
    "CA-CASQA-DOCUMENTATION",
    title="California CASQA compliance documentation",
    reference="California Construction General Permit",
    jurisdiction="CA",
)
def california_casqa(inspection: SwpppInspection) -> RuleFindings:
    findings = RuleFindings(rule_id="CA-CASQA-DOCUMENTATION")
    if not _form_value(inspection, "casqa_compliant", "casqaCompliant"):
        findings.warnings.append("California CASQA compliance documentation recommended")
    return findings


@register_rule(
    "TX-TCEQ-MIN-BMPS",
    title="Texas TCEQ minimum BMP count",
    reference="TCEQ TXR150000",
    jurisdiction="TX",
)
def texas_min_bmps(inspection: SwpppInspection) -> RuleFindings:
    findings = RuleFindings(rule_id="TX-TCEQ-MIN-BMPS")
    if len(inspection.bmps or []) < TX_MIN_BMP_COUNT:
        findings.warnings.append(
            f"Texas TCEQ typically requires minimum {TX_MIN_BMP_COUNT} BMPs for construction sites"
        )
    return findings


@register_rule(
    "FL-NPDES-PERMIT",
    title="Florida NPDES permit documentation",
    reference="FDEP Generic Permit 62-621.300(4)",
    jurisdiction="FL",
)
def florida_npdes_permit(inspection: SwpppInspection) -> RuleFindings:
    findings = RuleFindings(rule_id="FL-NPDES-PERMIT")
    if not _form_value(inspection, "npdes_permit", "npdesPermit"):
        findings.violations.append("Florida requires NPDES permit documentation")
    return findings
