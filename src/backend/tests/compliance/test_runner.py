from decimal import Decimal

from common.compliance.runner import ComplianceRunner
from common.compliance.validator import validate_inspection


def test_report_matches_federal_verdict_and_prices_violations(make_inspection):
    inspection = make_inspection(bmps=[], discharge_points=[])
    report = ComplianceRunner().run(inspection)

    assert report.jurisdiction is None
    assert report.validation == validate_inspection(inspection)
    assert report.fines.min_fine == Decimal("50000")
    assert [f.rule_id for f in report.findings] == [
        "SWPPP-BMP-COMPLETENESS",
        "SWPPP-DISCHARGE-POINTS",
        "SWPPP-CRITICAL-VIOLATIONS",
        "SWPPP-WEATHER-TRIGGER-CONSISTENCY",
        "SWPPP-DOCUMENTATION",
    ]


def test_jurisdiction_resolution_order(make_inspection):
    runner = ComplianceRunner(default_jurisdiction="tx")
    assert runner.run(make_inspection()).jurisdiction == "TX"
    assert runner.run(make_inspection(jurisdiction="ca")).jurisdiction == "CA"
    assert runner.run(make_inspection(jurisdiction="CA"), state_code="FL").jurisdiction == "FL"


def test_state_findings_included(make_inspection):
    report = ComplianceRunner().run(make_inspection(jurisdiction="FL"))
    assert report.validation.is_compliant is False
    assert report.findings[-1].rule_id == "FL-NPDES-PERMIT"
    assert report.fines.max_fine == Decimal("50000")


def test_each_run_gets_its_own_id(make_inspection):
    runner = ComplianceRunner()
    first = runner.run(make_inspection())
    second = runner.run(make_inspection())
    assert first.run_id != second.run_id
    assert first.validation == second.validation
