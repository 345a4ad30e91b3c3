from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from .fines import estimate_fines
from .models import ComplianceReport, ComplianceValidation, SwpppInspection
from .registry import normalize_state_code
from .validator import evaluate_federal_rules, evaluate_state_rules

logger = logging.getLogger(__name__)


class ComplianceRunner:
    """Runs the federal rules and the state overlay and prices the outcome."""

    def __init__(self, default_jurisdiction: Optional[str] = None):
        self._default_jurisdiction = normalize_state_code(default_jurisdiction) or None

    def run(self, inspection: SwpppInspection, *, state_code: Optional[str] = None) -> ComplianceReport:
        jurisdiction = (
            normalize_state_code(state_code)
            or normalize_state_code(inspection.jurisdiction)
            or self._default_jurisdiction
        )

        findings = evaluate_federal_rules(inspection)
        if jurisdiction:
            findings += evaluate_state_rules(jurisdiction, inspection)

        validation = ComplianceValidation.from_findings(findings)
        report = ComplianceReport(
            run_id=str(uuid.uuid4()),
            generated_at=datetime.now(timezone.utc),
            jurisdiction=jurisdiction,
            findings=findings,
            validation=validation,
            fines=estimate_fines(validation.violations),
        )
        logger.info(
            "Compliance run %s: compliant=%s violations=%d warnings=%d",
            report.run_id,
            validation.is_compliant,
            len(validation.violations),
            len(validation.warnings),
        )
        return report
