"""Tests for optimizer.reporting.console output."""

import io
from pathlib import Path

from rich.console import Console

from optimizer.config import OptimizerConfig
from optimizer.engine import CodeOptimizer
from optimizer.findings.models import DEFAULT_SEVERITY_FILTER, Language, Severity
from optimizer.reporting.console import format_confidence, print_optimizations, print_rules
from optimizer.rules.base import Contains, OptimizationRule


def _console() -> tuple[Console, io.StringIO]:
    buf = io.StringIO()
    return Console(file=buf, width=160, color_system=None), buf


def test_format_confidence():
    assert format_confidence(0.8) == "80%"
    assert format_confidence(0.95) == "95%"
    assert format_confidence(1.0) == "100%"


def test_print_optimizations_table_and_summary():
    code = "values = arr[i]\nfor x in os.path.listdir(d):"
    results = {Path("tool.py"): CodeOptimizer().analyze_code(code, Language.PYTHON)}
    console, buf = _console()
    print_optimizations(results, verbose=True, console=console)
    out = buf.getvalue()
    assert "tool.py" in out
    assert "[pathlib-usage]" in out
    assert "[list-comprehension]" in out
    assert "pathlib.listdir(d)" in out
    assert "Use pathlib instead of os.path" in out
    assert "2 suggestions" in out


def test_print_optimizations_keeps_brackets_in_code():
    results = {Path("app.js"): CodeOptimizer().analyze_code("let v = arr[i];", Language.JAVASCRIPT)}
    console, buf = _console()
    print_optimizations(results, console=console)
    assert "const v = arr[i];" in buf.getvalue()


def test_print_optimizations_no_findings():
    console, buf = _console()
    print_optimizations({Path("empty.rs"): []}, console=console)
    assert "No optimization suggestions found for 'empty.rs'" in buf.getvalue()


def test_print_rules():
    optimizer = CodeOptimizer()
    console, buf = _console()
    print_rules(optimizer.summary(), optimizer.rules, optimizer.get_enabled_rules(), console=console)
    out = buf.getvalue()
    assert "Enabled rules: 5" in out
    for rule in optimizer.rules:
        assert rule.name in out
    assert "OFF" not in out


def _custom_rule(label: str) -> OptimizationRule:
    return OptimizationRule(
        name="from-import",
        language=Language.PYTHON,
        pattern=Contains(text="import "),
        replacement="from x import ",
        explanation="Prefer from-imports",
        severity=Severity.custom(label),
        confidence=0.5,
    )


def _analyze_with_custom(label: str, code: str) -> str:
    config = OptimizerConfig(severity_filter=[*DEFAULT_SEVERITY_FILTER, Severity.custom(label)])
    config.add_custom_rule(_custom_rule(label))
    results = {Path("tool.py"): CodeOptimizer.with_config(config).analyze_code(code, Language.PYTHON)}
    console, buf = _console()
    print_optimizations(results, verbose=True, console=console)
    return buf.getvalue()


def test_summary_prints_bracketed_custom_label():
    out = _analyze_with_custom("a[/b]", "import sys")
    assert "1 suggestion" in out
    assert "1 a[/b]" in out


def test_summary_keeps_custom_label_apart_from_builtin():
    out = _analyze_with_custom("warning", "import os.path")
    assert "2 suggestions" in out
    assert out.count("1 warning") == 2
