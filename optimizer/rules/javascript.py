# JavaScript / TypeScript built-in rules: prefer const, prefer arrow functions.

from __future__ import annotations

from optimizer.findings.models import INFO, Language
from optimizer.rules.base import Contains, OptimizationRule

USE_CONST = OptimizationRule(
    name="use-const",
    language=Language.JAVASCRIPT,
    pattern=Contains(text="let "),
    replacement="const ",
    explanation="Use 'const' for variables that never change",
    severity=INFO,
    confidence=0.8,
)

ARROW_FUNCTION = OptimizationRule(
    name="arrow-function",
    language=Language.JAVASCRIPT,
    pattern=Contains(text="function("),
    replacement="(",
    explanation="Consider using arrow functions for shorter syntax",
    severity=INFO,
    confidence=0.6,
)

JAVASCRIPT_RULES = (USE_CONST, ARROW_FUNCTION)
