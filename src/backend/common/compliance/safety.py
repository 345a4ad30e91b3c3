"""OSHA construction safety checks (29 CFR 1926).

Independent of the SWPPP rules; shares only the verdict shape.
"""

from __future__ import annotations

from .constants import FALL_PROTECTION_HEIGHT_FEET
from .models import ComplianceValidation, SafetyInspection


def validate_safety_inspection(inspection: SafetyInspection) -> ComplianceValidation:
    violations = []

    if not (inspection.competent_person or "").strip():
        violations.append("OSHA requires designation of competent person (29 CFR 1926.32(f))")

    if not inspection.hazard_assessment:
        violations.append("Hazard assessment required before work begins")

    if inspection.work_height_feet > FALL_PROTECTION_HEIGHT_FEET and not inspection.fall_protection:
        violations.append(
            f"Fall protection required for work above {FALL_PROTECTION_HEIGHT_FEET} feet (29 CFR 1926.501)"
        )

    if inspection.has_excavation and not inspection.excavation_inspection:
        violations.append("Daily excavation inspections required (29 CFR 1926.651)")

    return ComplianceValidation(is_compliant=not violations, violations=violations)
