"""
Analysis engine: run the active rules over every line of a source text.

CodeOptimizer holds the built-in catalog (built once, never mutated) and the
current OptimizerConfig. analyze_code() is a pure read of both, so several
callers may analyze concurrently on one instance; update_config() swaps the
config reference and must not race with them (callers synchronize).
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from optimizer.config import OptimizerConfig, get_active_rules
from optimizer.findings.models import Language, Optimization
from optimizer.matcher import matches_pattern
from optimizer.rewriter import apply_replacement
from optimizer.rules.base import OptimizationRule
from optimizer.rules.catalog import RuleCatalog

OPTIMIZER_NAME = "Advanced Code Optimizer"


def split_lines(code: str) -> List[str]:
    """
    Split source text on newlines.

    A trailing newline does not produce an extra empty line and a ``\\r``
    before each newline is dropped, so "" gives [] and "a\\r\\nb\\n" gives ["a", "b"].
    """
    if not code:
        return []
    lines = code.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class CodeOptimizer:
    """Rule-driven, line-oriented code analyzer producing ranked suggestions."""

    def __init__(self, config: Optional[OptimizerConfig] = None) -> None:
        self.name = OPTIMIZER_NAME
        self._catalog = RuleCatalog()
        self._config = config if config is not None else OptimizerConfig()

    @classmethod
    def with_config(cls, config: OptimizerConfig) -> "CodeOptimizer":
        return cls(config)

    @property
    def config(self) -> OptimizerConfig:
        return self._config

    @property
    def rules(self) -> Tuple[OptimizationRule, ...]:
        """The built-in rules, in catalog order."""
        return self._catalog.rules

    def update_config(self, config: OptimizerConfig) -> None:
        """Replace the whole configuration."""
        self._config = config

    def get_enabled_rules(self) -> List[OptimizationRule]:
        return get_active_rules(self._catalog, self._config)

    def summary(self) -> str:
        """Human-readable rule counts: total, enabled and custom."""
        custom = len(self._config.custom_rules)
        total = len(self._catalog) + custom
        enabled = len(self.get_enabled_rules())
        return (
            f"Hello from {self.name}!\n"
            f"  Total rules: {total}\n"
            f"  Enabled rules: {enabled}\n"
            f"  Custom rules: {custom}"
        )

    hello = summary

    def analyze_code(self, code: str, language: Language) -> List[Optimization]:
        """
        Return suggestions for ``code`` written in ``language``, highest confidence first.

        Ties keep scan order (by line, then rule evaluation order). Never raises
        on text input; no matches gives an empty list.
        """
        config = self._config
        rules = [
            rule for rule in get_active_rules(self._catalog, config)
            if rule.language == language
        ]
        if not rules:
            return []

        optimizations: List[Optimization] = []
        for index, line in enumerate(split_lines(code)):
            for rule in rules:
                if not matches_pattern(line, rule.pattern):
                    continue
                if not config.allows(rule.severity):
                    continue
                optimizations.append(
                    Optimization(
                        rule_name=rule.name,
                        language=language,
                        line_number=index + 1,
                        original_code=line,
                        suggested_code=apply_replacement(line, rule),
                        explanation=rule.explanation,
                        severity=rule.severity,
                        confidence=rule.confidence,
                    )
                )

        optimizations.sort(key=lambda opt: opt.confidence, reverse=True)
        return optimizations
