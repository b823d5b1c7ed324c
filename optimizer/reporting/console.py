# Rich console output: format optimization suggestions for terminal display.

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from optimizer.findings.models import Optimization, Severity, SeverityLevel
from optimizer.rules.base import OptimizationRule

# Severity level -> Rich style
SEVERITY_STYLE = {
    SeverityLevel.ERROR: "bold red",
    SeverityLevel.WARNING: "bold yellow",
    SeverityLevel.INFO: "bold blue",
    SeverityLevel.CUSTOM: "bold magenta",
}

DEFAULT_SEVERITY_STYLE = "bold white"


def _severity_style(severity: Severity) -> str:
    return SEVERITY_STYLE.get(severity.level, DEFAULT_SEVERITY_STYLE)


def format_confidence(confidence: float) -> str:
    """0.8 -> "80%"."""
    return f"{confidence * 100:.0f}%"


def print_optimizations(
    results: Mapping[Path, Sequence[Optimization]],
    verbose: bool = False,
    console: Console | None = None,
) -> None:
    """
    Print suggestions grouped by file, in the order the engine ranked them.

    Each file gets a table of line, confidence, severity, rule and the
    original/suggested text. If verbose, each suggestion's explanation is
    printed below the table. Ends with a summary panel.
    """
    console = console or Console()
    all_optimizations = [opt for opts in results.values() for opt in opts]

    if not all_optimizations:
        for path in results:
            console.print(f"[green]No optimization suggestions found for '{escape(str(path))}'.[/green]")
        if not results:
            console.print(
                Panel(
                    "[green]No optimization suggestions found.[/green]",
                    title="Code Optimizer",
                    border_style="green",
                    box=box.ROUNDED,
                )
            )
        return

    for path, optimizations in results.items():
        console.print()
        if not optimizations:
            console.print(f"[green]No optimization suggestions found for '{escape(str(path))}'.[/green]")
            continue

        console.print(Panel(
            f"[bold cyan]{escape(str(path))}[/bold cyan]: found {len(optimizations)} potential optimization"
            f"{'s' if len(optimizations) != 1 else ''}",
            box=box.SIMPLE_HEAD,
            border_style="blue",
            padding=(0, 1),
        ))

        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE,
            padding=(0, 1),
            expand=False,
        )
        table.add_column("Line", justify="right", style="dim", width=5)
        table.add_column("Conf.", justify="right", width=5)
        table.add_column("Severity", width=10)
        table.add_column("Rule", width=20)
        table.add_column("Original", style="white")
        table.add_column("Suggested", style="green")

        for opt in optimizations:
            table.add_row(
                str(opt.line_number),
                format_confidence(opt.confidence),
                Text(opt.severity.display_name.upper(), style=_severity_style(opt.severity)),
                Text(f"[{opt.rule_name}]", style="dim"),
                Text(opt.original_code.strip()),
                Text(opt.suggested_code.strip()),
            )

        console.print(table)

        if verbose:
            for opt in optimizations:
                console.print(
                    f"  [dim]Line {opt.line_number}[/dim] {escape(f'[{opt.rule_name}]')} "
                    f"({format_confidence(opt.confidence)}): {escape(opt.explanation)}"
                )
            console.print()

    _print_summary(all_optimizations, console)


def _print_summary(optimizations: Sequence[Optimization], console: Console) -> None:
    """Print a compact summary of suggestions by severity."""
    by_severity: dict[Severity, int] = {}
    for opt in optimizations:
        by_severity[opt.severity] = by_severity.get(opt.severity, 0) + 1

    total = len(optimizations)
    summary_parts = [f"[bold]{total} suggestion{'s' if total != 1 else ''}[/bold]"]
    for severity, count in by_severity.items():
        summary_parts.append(
            f"[{_severity_style(severity)}]{count} {escape(severity.display_name)}[/]"
        )

    console.print()
    console.print(
        Panel(
            " | ".join(summary_parts),
            title="Summary",
            border_style="yellow" if total > 0 else "green",
            box=box.ROUNDED,
        )
    )


def print_rules(
    summary: str,
    rules: Sequence[OptimizationRule],
    enabled: Sequence[OptimizationRule],
    console: Console | None = None,
) -> None:
    """Print the optimizer summary and a table of rules with their effective state."""
    console = console or Console()
    console.print(Panel(summary, title="Code Optimizer", border_style="cyan", box=box.ROUNDED))

    enabled_ids = {id(rule) for rule in enabled}
    table = Table(show_header=True, header_style="bold cyan", box=box.ROUNDED, padding=(0, 1))
    table.add_column("Rule")
    table.add_column("Language")
    table.add_column("Severity", width=10)
    table.add_column("Conf.", justify="right", width=5)
    table.add_column("Status", width=8)
    table.add_column("Explanation", style="white")

    for rule in rules:
        is_enabled = id(rule) in enabled_ids
        table.add_row(
            Text(rule.name),
            rule.language.value,
            Text(rule.severity.display_name.upper(), style=_severity_style(rule.severity)),
            format_confidence(rule.confidence),
            Text("ON", style="bold green") if is_enabled else Text("OFF", style="dim"),
            Text(rule.explanation),
        )

    console.print(table)
