from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path


def _ensure_backend_on_path() -> None:
    backend_dir = Path(__file__).resolve().parents[1]
    if str(backend_dir) not in sys.path:
        sys.path.insert(0, str(backend_dir))


_ensure_backend_on_path()

from common.compliance import (  # noqa: E402
    ComplianceRunner,
    PrecipitationReading,
    SwpppInspection,
    record_weather_event,
)
from common.compliance.config import get_compliance_config  # noqa: E402
from common.compliance.models import ComplianceReport, ReadingSource  # noqa: E402


def _load_json(path: Path):
    with path.open() as handle:
        return json.load(handle)


def load_inspection(path: Path) -> SwpppInspection:
    if not path.exists():
        raise SystemExit(f"Inspection file not found: {path}")
    return SwpppInspection.model_validate(_load_json(path))


def _write_markdown(report: ComplianceReport, out_path: Path) -> None:
    validation = report.validation
    verdict = "COMPLIANT" if validation.is_compliant else "NOT COMPLIANT"
    lines = [
        f"# SWPPP Inspection Review ({verdict})",
        "",
        f"Generated at: {report.generated_at.isoformat()}",
        f"Jurisdiction: {report.jurisdiction or 'federal only'}",
        "",
    ]
    for title, items in (
        ("Violations", validation.violations),
        ("Warnings", validation.warnings),
        ("Recommendations", validation.recommendations),
    ):
        lines.append(f"## {title}")
        lines.extend(f"- {item}" for item in items)
        if not items:
            lines.append("- None")
        lines.append("")

    fines = report.fines
    lines.extend(
        [
            "## Potential Fines",
            f"- Minimum: ${fines.min_fine:,}",
            f"- Maximum: ${fines.max_fine:,}",
            f"- Daily: ${fines.daily_fine:,}",
            "",
        ]
    )
    out_path.write_text("\n".join(lines))


def run_trigger(args: argparse.Namespace) -> int:
    config = get_compliance_config()
    reading = PrecipitationReading(
        amount_inches=args.precipitation,
        observed_at=datetime.fromisoformat(args.event_at),
        source=ReadingSource(args.source),
    )
    event = record_weather_event(reading, config.working_hours)
    payload = {
        "precipitation_inches": reading.amount_inches,
        "observed_at": reading.observed_at.isoformat(),
        "requires_inspection": event.requires_inspection,
        "deadline": event.deadline.deadline_at.isoformat() if event.deadline else None,
    }
    print(json.dumps(payload, indent=2))
    return 0


def run_validate(args: argparse.Namespace) -> int:
    config = get_compliance_config()
    inspection_path = Path(args.inspection).resolve()
    inspection = load_inspection(inspection_path)

    runner = ComplianceRunner(default_jurisdiction=config.default_jurisdiction)
    report = runner.run(inspection, state_code=args.state)

    output_dir = Path(args.output_dir).resolve() if args.output_dir else inspection_path.parent
    output_dir.mkdir(parents=True, exist_ok=True)
    base_name = f"compliance_review_{inspection_path.stem}"
    out_json = output_dir / f"{base_name}.json"
    out_md = output_dir / f"{base_name}.md"

    out_json.write_text(json.dumps(report.model_dump(mode="json"), indent=2))
    _write_markdown(report, out_md)

    print(f"Wrote {out_json}")
    print(f"Wrote {out_md}")
    return 0 if report.validation.is_compliant else 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="SWPPP rain-trigger and inspection compliance checks.")
    sub = parser.add_subparsers(dest="command", required=True)

    trigger = sub.add_parser("trigger", help="Decide whether a reading triggers an inspection and when it is due.")
    trigger.add_argument("--precipitation", type=float, required=True, help="Rainfall in inches.")
    trigger.add_argument(
        "--event-at",
        required=True,
        help="Observation time in site-local ISO format (e.g. 2024-01-18T14:00:00).",
    )
    trigger.add_argument(
        "--source",
        choices=[s.value for s in ReadingSource],
        default=ReadingSource.MANUAL.value,
    )
    trigger.set_defaults(handler=run_trigger)

    validate = sub.add_parser("validate", help="Validate a completed inspection JSON file.")
    validate.add_argument("--inspection", required=True, help="Path to an inspection JSON file.")
    validate.add_argument("--state", default=None, help="State code for the jurisdiction overlay (e.g. FL).")
    validate.add_argument(
        "--output-dir",
        default=None,
        help="Output directory for review files (defaults to the inspection file's directory).",
    )
    validate.set_defaults(handler=run_validate)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=get_compliance_config().log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
    return args.handler(args)


if __name__ == "__main__":
    raise SystemExit(main())
