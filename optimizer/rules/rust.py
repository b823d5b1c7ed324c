# Rust built-in rules: flag clone() calls that are likely unnecessary.

from __future__ import annotations

from optimizer.findings.models import WARNING, Language
from optimizer.rules.base import Contains, OptimizationRule

CLIPPY_STYLE = OptimizationRule(
    name="clippy-style",
    language=Language.RUST,
    pattern=Contains(text=".clone()"),
    replacement="",
    explanation="Unnecessary clone() - consider borrowing instead",
    severity=WARNING,
    confidence=0.8,
)

RUST_RULES = (CLIPPY_STYLE,)
