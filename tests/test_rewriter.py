"""Unit tests for optimizer.rewriter: suggested text for a matched line."""

from optimizer.findings.models import Language
from optimizer.rewriter import apply_replacement
from optimizer.rules.base import Contains, EndsWith, OptimizationRule, Regex, StartsWith


def _rule(pattern, replacement):
    return OptimizationRule(
        name="test-rule",
        language=Language.JAVASCRIPT,
        pattern=pattern,
        replacement=replacement,
        explanation="test",
        confidence=0.5,
    )


def test_contains_replaces_every_occurrence():
    rule = _rule(Contains(text="let "), "const ")
    assert apply_replacement("let a = 1; let b = 2;", rule) == "const a = 1; const b = 2;"


def test_contains_with_empty_replacement():
    rule = _rule(Contains(text=".clone()"), "")
    assert apply_replacement("let s = name.clone();", rule) == "let s = name;"


def test_starts_with_replaces_first_occurrence_only():
    rule = _rule(StartsWith(text="var "), "let ")
    assert apply_replacement("  var a = 'var ';", rule) == "  let a = 'var ';"


def test_starts_with_leaves_non_matching_line_unchanged():
    rule = _rule(StartsWith(text="var "), "let ")
    line = "x = 1; var y = 2;"
    assert apply_replacement(line, rule) == line


def test_ends_with_replaces_trailing_occurrence_and_keeps_whitespace():
    rule = _rule(EndsWith(text=";"), "")
    assert apply_replacement("let a = b;c;  ", rule) == "let a = b;c  "


def test_ends_with_leaves_non_matching_line_unchanged():
    rule = _rule(EndsWith(text=";"), "")
    line = "let a = 1; // note"
    assert apply_replacement(line, rule) == line


def test_regex_substitutes_matches():
    rule = _rule(Regex(pattern=r"let\s+(\w+)\s*="), "const x =")
    assert apply_replacement("let   total = 0;", rule) == "const x = 0;"


def test_regex_replacement_is_literal():
    rule = _rule(Regex(pattern=r"\bvar\b"), r"\1let")
    assert apply_replacement("var a", rule) == r"\1let a"


def test_invalid_regex_uses_literal_text():
    rule = _rule(Regex(pattern="call(foo"), "call(bar")
    assert apply_replacement("x = call(foo)", rule) == "x = call(bar)"
    assert apply_replacement("nothing here", rule) == "nothing here"


def test_regex_zero_width_matches_do_not_insert_replacement():
    rule = _rule(Regex(pattern=r"x*"), "y")
    assert apply_replacement("abc", rule) == "abc"
    assert apply_replacement("axxb", rule) == "ayb"
    assert apply_replacement("abc", _rule(Regex(pattern=""), "y")) == "abc"
