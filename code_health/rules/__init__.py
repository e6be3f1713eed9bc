"""Rule registry."""

from __future__ import annotations

from code_health.rules.base import Rule
from code_health.rules.big_file import BigFileRule
from code_health.rules.circular_deps import CircularDepsRule
from code_health.rules.context_provider_value import ContextProviderValueRule
from code_health.rules.img_alt import ImgAltRule
from code_health.rules.index_as_key import IndexAsKeyRule
from code_health.rules.inline_function_prop import InlineFunctionPropRule
from code_health.rules.jsx_literal_prop import JsxLiteralPropRule


def default_rules() -> list[Rule]:
    return [
        BigFileRule(),
        ImgAltRule(),
        CircularDepsRule(),
        InlineFunctionPropRule(),
        JsxLiteralPropRule(),
        IndexAsKeyRule(),
        ContextProviderValueRule(),
    ]


def select_rules(rule_ids: list[str] | None = None) -> list[Rule]:
    """Default rules, optionally narrowed to ``rule_ids``."""
    rules = default_rules()
    if not rule_ids:
        return rules

    known = {r.id for r in rules}
    unknown = [rid for rid in rule_ids if rid not in known]
    if unknown:
        raise ValueError(f"Unknown rule id(s): {', '.join(unknown)}")
    return [r for r in rules if r.id in rule_ids]


__all__ = [
    "Rule",
    "BigFileRule",
    "CircularDepsRule",
    "ContextProviderValueRule",
    "ImgAltRule",
    "IndexAsKeyRule",
    "InlineFunctionPropRule",
    "JsxLiteralPropRule",
    "default_rules",
    "select_rules",
]
