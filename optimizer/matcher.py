# Pattern matching: test one line of source text against one rule pattern.

from __future__ import annotations

import re
from functools import lru_cache
from typing import Optional

from optimizer.rules.base import Contains, EndsWith, PatternType, Regex, StartsWith

# Pattern for "assignment to a let-declared identifier"; honored even without a regex engine.
LET_ASSIGNMENT_PATTERN = r"let\s+\w+\s*="

_WHITESPACE_ESCAPE = r"\s+"


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> Optional[re.Pattern[str]]:
    """Compile a rule regex, or return None if it is not a valid Python regex."""
    try:
        return re.compile(pattern)
    except re.error:
        return None


def collapse_whitespace_escapes(pattern: str) -> str:
    """Replace every literal ``\\s+`` in the pattern text with a single space."""
    return pattern.replace(_WHITESPACE_ESCAPE, " ")


def matches_regex(line: str, pattern: str) -> bool:
    """
    True if ``line`` matches the Regex pattern.

    The literal let-assignment pattern matches any line with both "let " and
    "="; any pattern matches a line containing its whitespace-collapsed text.
    Beyond those, a pattern that compiles is searched with ``re``. Invalid
    regexes never raise, they just fall back to the literal checks.
    """
    if pattern == LET_ASSIGNMENT_PATTERN and "let " in line and "=" in line:
        return True
    if collapse_whitespace_escapes(pattern) in line:
        return True
    compiled = compile_pattern(pattern)
    return compiled is not None and compiled.search(line) is not None


def matches_pattern(line: str, pattern: PatternType) -> bool:
    """Return True if ``line`` matches ``pattern``."""
    if isinstance(pattern, Contains):
        return pattern.text in line
    if isinstance(pattern, StartsWith):
        return line.lstrip().startswith(pattern.text)
    if isinstance(pattern, EndsWith):
        return line.rstrip().endswith(pattern.text)
    if isinstance(pattern, Regex):
        return matches_regex(line, pattern.pattern)
    return False
