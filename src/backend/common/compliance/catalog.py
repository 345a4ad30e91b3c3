from __future__ import annotations

import argparse
import json
from typing import Any, List, Optional

from pydantic import BaseModel

from .registry import InspectionRule, registry

# Ensure built-in rules are imported/registered when generating a catalog.
from . import jurisdictions as _jurisdiction_rules  # noqa: F401
from . import rules as _builtin_rules  # noqa: F401


class RuleCatalogEntry(BaseModel):
    rule_id: str
    rule_title: str
    regulation_reference: str = ""
    jurisdiction: Optional[str] = None

    module: str
    function_name: str


def build_catalog(jurisdiction: Optional[str] = None) -> List[RuleCatalogEntry]:
    """All registered rules, or only those that apply at a site in `jurisdiction`.

    A site in a state is bound by every federal rule plus that state's overlay;
    an unknown state yields the federal rules alone.
    """
    if jurisdiction is None:
        rules: List[InspectionRule] = [registry.get(rule_id) for rule_id in registry.ids()]
    else:
        rules = registry.federal() + registry.for_jurisdiction(jurisdiction)

    entries = [
        RuleCatalogEntry(
            rule_id=rule.rule_id,
            rule_title=rule.rule_title,
            regulation_reference=rule.regulation_reference,
            jurisdiction=rule.jurisdiction,
            module=getattr(rule.evaluate, "__module__", ""),
            function_name=getattr(rule.evaluate, "__name__", ""),
        )
        for rule in rules
    ]

    # Federal rules first, then states alphabetically.
    entries.sort(key=lambda e: (e.jurisdiction or "", e.rule_id))
    return entries


def render_catalog(entries: List[RuleCatalogEntry], fmt: str) -> str:
    rows: list[dict[str, Any]] = [e.model_dump() for e in entries]
    if fmt == "json":
        return json.dumps(rows, indent=2, sort_keys=True)

    import yaml

    return yaml.safe_dump(rows, sort_keys=True)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="List the registered SWPPP inspection rules.")
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="yaml",
        help="Output format (default: yaml).",
    )
    parser.add_argument(
        "--jurisdiction",
        default=None,
        help="State code (e.g. FL); list only the federal rules plus that state's overlay.",
    )
    args = parser.parse_args(argv)

    print(render_catalog(build_catalog(args.jurisdiction), args.format))


if __name__ == "__main__":
    main()
