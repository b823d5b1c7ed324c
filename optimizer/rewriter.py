# Suggested rewrites: turn a matched line into the text the rule proposes instead.

from __future__ import annotations

from optimizer.matcher import collapse_whitespace_escapes, compile_pattern
from optimizer.rules.base import Contains, EndsWith, OptimizationRule, Regex, StartsWith


def _rewrite_suffix(line: str, suffix: str, replacement: str) -> str:
    stripped = line.rstrip()
    if not stripped.endswith(suffix):
        return line
    trailing = line[len(stripped):]
    head = stripped[: len(stripped) - len(suffix)] if suffix else stripped
    return head + replacement + trailing


def _rewrite_regex(line: str, pattern: str, replacement: str) -> str:
    compiled = compile_pattern(pattern)
    if compiled is not None:
        # Replacement is literal; zero-width matches are left alone.
        return compiled.sub(lambda m: replacement if m.group() else "", line)
    literal = collapse_whitespace_escapes(pattern)
    if literal and literal in line:
        return line.replace(literal, replacement)
    return line


def apply_replacement(line: str, rule: OptimizationRule) -> str:
    """
    Return the suggested version of ``line`` for ``rule``.

    - Contains: every occurrence of the text is replaced.
    - StartsWith: the first occurrence is replaced, only if the left-trimmed
      line starts with the text.
    - EndsWith: the trailing occurrence is replaced, only if the right-trimmed
      line ends with the text; trailing whitespace is kept.
    - Regex: every match is replaced with the literal replacement text.

    A line the pattern does not apply to is returned unchanged.
    """
    pattern = rule.pattern
    if isinstance(pattern, Contains):
        return line.replace(pattern.text, rule.replacement)
    if isinstance(pattern, StartsWith):
        if line.lstrip().startswith(pattern.text):
            return line.replace(pattern.text, rule.replacement, 1)
        return line
    if isinstance(pattern, EndsWith):
        return _rewrite_suffix(line, pattern.text, rule.replacement)
    if isinstance(pattern, Regex):
        return _rewrite_regex(line, pattern.pattern, rule.replacement)
    return line
