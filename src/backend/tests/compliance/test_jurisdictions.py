import pytest

from common.compliance.registry import registry
from common.compliance.validator import validate_inspection, validate_jurisdiction


@pytest.mark.parametrize("state_code", ["ZZ", "", None, "NY"])
def test_unknown_state_leaves_federal_verdict_unchanged(make_inspection, make_bmp, state_code):
    inspection = make_inspection(bmps=[make_bmp(functional=False)], discharge_points=[])
    federal = validate_inspection(inspection)
    overlaid = validate_jurisdiction(state_code, inspection)
    assert overlaid == federal
    assert len(overlaid.violations) == len(federal.violations)


def test_florida_requires_npdes_permit(make_inspection):
    result = validate_jurisdiction("FL", make_inspection())
    assert result.is_compliant is False
    assert result.violations == ["Florida requires NPDES permit documentation"]


def test_florida_with_permit_is_compliant(make_inspection):
    result = validate_jurisdiction("fl", make_inspection(form_data={"npdes_permit": "FLR10AB123"}))
    assert result.is_compliant is True


def test_texas_minimum_bmps_warning(make_inspection, make_bmp):
    result = validate_jurisdiction("TX", make_inspection(bmps=[make_bmp(id=f"B{i}") for i in range(4)]))
    assert result.is_compliant is True
    assert result.warnings == ["Texas TCEQ typically requires minimum 5 BMPs for construction sites"]

    result = validate_jurisdiction("TX", make_inspection(bmps=[make_bmp(id=f"B{i}") for i in range(5)]))
    assert result.warnings == []


def test_california_casqa_warning(make_inspection):
    assert validate_jurisdiction(" ca ", make_inspection()).warnings == [
        "California CASQA compliance documentation recommended"
    ]
    assert validate_jurisdiction("CA", make_inspection(form_data={"casqa_compliant": True})).warnings == []


def test_overlay_adds_to_federal_findings(make_inspection):
    inspection = make_inspection(bmps=[], weather_triggered=True)
    federal = validate_inspection(inspection)
    result = validate_jurisdiction("FL", inspection)
    assert result.violations[: len(federal.violations)] == federal.violations
    assert result.violations[-1] == "Florida requires NPDES permit documentation"
    assert result.warnings == federal.warnings


def test_registered_jurisdictions():
    assert registry.jurisdictions() == ["CA", "FL", "TX"]


def test_host_camel_case_form_keys_are_honored(make_inspection):
    florida = make_inspection(form_data={"npdesPermit": "FLR10AB123"})
    assert validate_jurisdiction("FL", florida).is_compliant is True

    california = make_inspection(form_data={"casqaCompliant": True})
    assert validate_jurisdiction("CA", california).warnings == []


def test_host_payload_through_model_validate():
    from common.compliance.models import SwpppInspection

    payload = {
        "bmps": [{"id": "B1", "functional": True}],
        "discharge_points": [{"id": "D1", "has_discharge": False}],
        "violations": [],
        "additional_notes": "Outfall dry.",
        "form_data": {"npdesPermit": "FLR10AB123"},
    }
    assert validate_jurisdiction("FL", SwpppInspection.model_validate(payload)).violations == []
