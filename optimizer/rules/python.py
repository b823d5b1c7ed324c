# Python built-in rules: comprehensions over append loops, pathlib over os.path.

from __future__ import annotations

from optimizer.findings.models import INFO, WARNING, Language
from optimizer.rules.base import Contains, OptimizationRule

LIST_COMPREHENSION = OptimizationRule(
    name="list-comprehension",
    language=Language.PYTHON,
    pattern=Contains(text="for "),
    replacement="[",
    explanation="Consider using list comprehension for better performance",
    severity=INFO,
    confidence=0.7,
)

# Matches "os.path" without the trailing dot so `import os.path` is reported too.
PATHLIB_USAGE = OptimizationRule(
    name="pathlib-usage",
    language=Language.PYTHON,
    pattern=Contains(text="os.path"),
    replacement="pathlib",
    explanation="Use pathlib instead of os.path for modern path handling",
    severity=WARNING,
    confidence=0.9,
)

PYTHON_RULES = (LIST_COMPREHENSION, PATHLIB_USAGE)
