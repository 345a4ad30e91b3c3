from __future__ import annotations

import logging
from typing import List, Optional

from .errors import InvalidInputError
from .models import ComplianceValidation, RuleFindings, SwpppInspection
from .registry import InspectionRule, normalize_state_code, registry

logger = logging.getLogger(__name__)


def validate_inspection(inspection: SwpppInspection) -> ComplianceValidation:
    """Federal (EPA CGP) verdict for a completed inspection."""
    return ComplianceValidation.from_findings(evaluate_federal_rules(inspection))


def validate_jurisdiction(state_code: Optional[str], inspection: SwpppInspection) -> ComplianceValidation:
    """Federal verdict plus the state overlay for `state_code`.

    The overlay only adds findings; an unknown or empty code leaves the federal
    verdict untouched.
    """
    findings = evaluate_federal_rules(inspection) + evaluate_state_rules(state_code, inspection)
    return ComplianceValidation.from_findings(findings)


def evaluate_federal_rules(inspection: SwpppInspection) -> List[RuleFindings]:
    ensure_collections_present(inspection)
    return _evaluate(registry.federal(), inspection)


def evaluate_state_rules(state_code: Optional[str], inspection: SwpppInspection) -> List[RuleFindings]:
    ensure_collections_present(inspection)
    rules = registry.for_jurisdiction(state_code)
    if not rules:
        logger.debug("No jurisdiction rules for state code %r", state_code)
        return []
    logger.debug("Applying %d %s rules", len(rules), normalize_state_code(state_code))
    return _evaluate(rules, inspection)


def ensure_collections_present(inspection: SwpppInspection) -> None:
    missing = [
        name
        for name in ("bmps", "discharge_points", "violations")
        if getattr(inspection, name) is None
    ]
    if missing:
        raise InvalidInputError(
            f"Inspection is missing required collections: {', '.join(missing)} (use an empty list when none)."
        )


def _evaluate(rules: List[InspectionRule], inspection: SwpppInspection) -> List[RuleFindings]:
    results = []
    for rule in rules:
        findings = rule.evaluate(inspection)
        logger.debug(
            "%s: %d violations, %d warnings, %d recommendations",
            rule.rule_id,
            len(findings.violations),
            len(findings.warnings),
            len(findings.recommendations),
        )
        results.append(findings)
    return results
