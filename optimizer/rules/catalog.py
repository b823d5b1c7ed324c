"""
Built-in rule catalog.

The catalog is built once per CodeOptimizer and never mutated afterwards.
Rules keep their declaration order (JavaScript, Python, Rust), which is also
the order the engine evaluates them in. Adding a built-in rule means adding it
to one of the language modules; nothing here changes.
"""

from __future__ import annotations

from typing import Iterator, Optional, Sequence, Tuple

from optimizer.findings.models import Language
from optimizer.rules.base import OptimizationRule
from optimizer.rules.javascript import JAVASCRIPT_RULES
from optimizer.rules.python import PYTHON_RULES
from optimizer.rules.rust import RUST_RULES


def built_in_rules() -> Tuple[OptimizationRule, ...]:
    """Return every built-in rule, grouped by language in declaration order."""
    return (*JAVASCRIPT_RULES, *PYTHON_RULES, *RUST_RULES)


class RuleCatalog:
    """Immutable, ordered collection of built-in rules."""

    def __init__(self, rules: Optional[Sequence[OptimizationRule]] = None) -> None:
        self._rules: Tuple[OptimizationRule, ...] = (
            tuple(rules) if rules is not None else built_in_rules()
        )

    @property
    def rules(self) -> Tuple[OptimizationRule, ...]:
        return self._rules

    def __iter__(self) -> Iterator[OptimizationRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def get(self, name: str) -> Optional[OptimizationRule]:
        """Return the first built-in rule called ``name``, or None."""
        for rule in self._rules:
            if rule.name == name:
                return rule
        return None

    def for_language(self, language: Language) -> Tuple[OptimizationRule, ...]:
        return tuple(rule for rule in self._rules if rule.language == language)
