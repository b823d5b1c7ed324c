from __future__ import annotations

"""
Typer CLI entry point and orchestration of the analysis pipeline.

- `analyze TARGET`: TARGET is a source file (.js, .ts, .py, .rs) or a
  directory walked with traversal.find_source_files(). Each file is read into
  a FileContext, analyzed by CodeOptimizer, and the ranked suggestions are
  printed with reporting.console.
- `rules`: print the optimizer summary and every rule's effective state.

Exit codes: 0 on success (zero suggestions included), 1 when a file cannot be
read, its language cannot be determined, or a rules file is malformed.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import typer
from pydantic import ValidationError

from optimizer.config import (
    OptimizerConfig,
    get_default_config,
    load_custom_rules,
    parse_severities,
)
from optimizer.context import FileContext, create_context, load_contexts
from optimizer.engine import CodeOptimizer
from optimizer.errors import OptimizerError
from optimizer.findings.models import Optimization
from optimizer.reporting.console import print_optimizations, print_rules
from optimizer.traversal import find_source_files

logger = logging.getLogger(__name__)

app = typer.Typer(help="Code Optimizer - rule-based style suggestions for JavaScript, Python and Rust.")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _fail(message: str) -> typer.Exit:
    typer.echo(f"Error: {message}", err=True)
    return typer.Exit(code=1)


def build_config(
    config_path: Optional[Path] = None,
    rules_path: Optional[Path] = None,
    severities: Optional[Sequence[str]] = None,
) -> OptimizerConfig:
    """
    Assemble an OptimizerConfig from CLI inputs.

    Raises FileReadError for unreadable files and pydantic.ValidationError for
    a malformed rules file.
    """
    config = OptimizerConfig.from_file(config_path) if config_path else get_default_config()
    if rules_path is not None:
        for rule in load_custom_rules(rules_path):
            config.add_custom_rule(rule)
    if severities:
        config.severity_filter = parse_severities(severities)
    return config


def _collect_contexts(target: Path) -> List[FileContext]:
    """
    Resolve a target path into FileContexts.

    A single file must be readable and have a supported extension (errors
    propagate). Under a directory, unreadable files are logged and skipped.
    """
    if target.is_dir():
        files = find_source_files(target)
        if not files:
            logger.warning("No supported source files found under %s", target)
        return load_contexts(files)
    return [create_context(target)]


@app.command()
def analyze(
    target: Path = typer.Argument(..., help="Source file or directory to analyze."),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Directive file (disable_rule: NAME / enable_rule: NAME)."
    ),
    rules_path: Optional[Path] = typer.Option(
        None, "--rules", "-r", help="JSON file with a list of custom rules."
    ),
    severity: Optional[List[str]] = typer.Option(
        None,
        "--severity",
        "-s",
        help="Severity to report (repeatable): info, warning, error, or a custom label.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show explanations and debug logs."),
) -> None:
    """
    Analyze a single source file or every supported file under a directory.
    """
    _configure_logging(verbose)
    try:
        config = build_config(config_path, rules_path, severity)
        contexts = _collect_contexts(target)
    except OptimizerError as exc:
        raise _fail(str(exc))
    except ValidationError as exc:
        raise _fail(f"invalid rules file '{rules_path}':\n{exc}")

    optimizer = CodeOptimizer.with_config(config)
    results: Dict[Path, List[Optimization]] = {}
    for ctx in contexts:
        results[ctx.path] = optimizer.analyze_code(ctx.source, ctx.language)
        logger.debug("%s: %d suggestion(s)", ctx.path, len(results[ctx.path]))

    print_optimizations(results, verbose=verbose)


@app.command()
def rules(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Directive file (disable_rule: NAME / enable_rule: NAME)."
    ),
    rules_path: Optional[Path] = typer.Option(
        None, "--rules", "-r", help="JSON file with a list of custom rules."
    ),
) -> None:
    """
    List built-in and custom rules with their effective enabled state.
    """
    _configure_logging(False)
    try:
        config = build_config(config_path, rules_path)
    except OptimizerError as exc:
        raise _fail(str(exc))
    except ValidationError as exc:
        raise _fail(f"invalid rules file '{rules_path}':\n{exc}")

    optimizer = CodeOptimizer.with_config(config)
    print_rules(
        optimizer.summary(),
        [*optimizer.rules, *config.custom_rules],
        optimizer.get_enabled_rules(),
    )


def main() -> None:
    """Entry point for `python -m optimizer.main` and the code-optimizer script."""
    app()


if __name__ == "__main__":
    main()
