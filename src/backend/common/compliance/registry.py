from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from .models import RuleFindings, SwpppInspection

RuleFn = Callable[[SwpppInspection], RuleFindings]


@dataclass(frozen=True)
class InspectionRule:
    rule_id: str
    rule_title: str
    regulation_reference: str
    evaluate: RuleFn
    # None for federal (EPA CGP) rules, otherwise an upper-case state code.
    jurisdiction: Optional[str] = None


def normalize_state_code(state_code: Optional[str]) -> str:
    return (state_code or "").strip().upper()


class RuleRegistry:
    def __init__(self):
        self._rules: Dict[str, InspectionRule] = {}

    def register(self, rule: InspectionRule) -> None:
        if not rule.rule_id:
            raise ValueError("Rule missing rule_id")
        if rule.rule_id in self._rules:
            raise ValueError(f"Duplicate rule_id registered: {rule.rule_id}")
        self._rules[rule.rule_id] = rule

    def federal(self) -> List[InspectionRule]:
        return [r for r in self._rules.values() if r.jurisdiction is None]

    def for_jurisdiction(self, state_code: Optional[str]) -> List[InspectionRule]:
        code = normalize_state_code(state_code)
        if not code:
            return []
        return [r for r in self._rules.values() if r.jurisdiction == code]

    def jurisdictions(self) -> List[str]:
        return sorted({r.jurisdiction for r in self._rules.values() if r.jurisdiction})

    def get(self, rule_id: str) -> InspectionRule:
        return self._rules[rule_id]

    def ids(self) -> Iterable[str]:
        return self._rules.keys()


registry = RuleRegistry()


def register_rule(
    rule_id: str,
    *,
    title: str,
    reference: str = "",
    jurisdiction: Optional[str] = None,
) -> Callable[[RuleFn], RuleFn]:
    def _decorator(fn: RuleFn) -> RuleFn:
        registry.register(
            InspectionRule(
                rule_id=rule_id,
                rule_title=title,
                regulation_reference=reference,
                evaluate=fn,
                jurisdiction=normalize_state_code(jurisdiction) or None,
            )
        )
        return fn

    return _decorator
