# Rich console output: summarize a SARIF document's runs and results in the terminal.

from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from sarifgen.sarif.document import ReportDocument
from sarifgen.sarif.schema import Level, Result, Run

# Level → Rich style
LEVEL_STYLE = {
    "error": "bold red",
    "warning": "bold yellow",
    "note": "bold blue",
    "none": "bold dim",
}

DEFAULT_LEVEL_STYLE = "bold white"

LEVEL_ORDER = ("error", "warning", "note", "none")


def _level_name(result: Result) -> str:
    return result.level.value if isinstance(result.level, Level) else "none"


def _level_style(level: str) -> str:
    return LEVEL_STYLE.get(level.lower(), DEFAULT_LEVEL_STYLE)


def _first_location(result: Result) -> str:
    """First location as uri:line:col; unknown coordinates are shown as '?'."""
    if not result.locations or result.locations[0].physical_location is None:
        return "-"
    physical = result.locations[0].physical_location
    uri = physical.artifact_location.uri or "?"
    region = physical.region
    if region is None:
        return uri
    line = str(region.start_line) if region.start_line != -1 else "?"
    col = str(region.start_column) if region.start_column != -1 else "?"
    return f"{uri}:{line}:{col}"


def print_document(
    document: ReportDocument,
    verbose: bool = False,
    console: Optional[Console] = None,
) -> None:
    """
    Print every run of the document using Rich.

    One panel per run (tool name and version), a results table colored by
    level, and a footer counting results per level across all runs. If
    verbose, the short description of each reported rule is listed below its
    run's table.
    """
    if console is None:
        console = Console()

    runs = document.runs
    if not runs:
        console.print(
            Panel(
                "[dim]No runs in the report.[/dim]",
                title="SARIF Report",
                border_style="green",
                box=box.ROUNDED,
            )
        )
        return

    for number, run in enumerate(runs, start=1):
        _print_run(number, run, verbose, console)

    _print_summary([r for run in runs for r in (run.results or [])], console)


def _print_run(number: int, run: Run, verbose: bool, console: Console) -> None:
    driver = run.tool.driver
    console.print()
    console.print(Panel(
        f"[bold cyan]Run {number}[/bold cyan]  {escape(driver.name)} {escape(driver.version or '')}".rstrip(),
        box=box.SIMPLE_HEAD,
        border_style="blue",
        padding=(0, 1),
    ))

    results = run.results or []
    if not results:
        console.print("  [green]No results.[/green]")
        return

    table = Table(
        show_header=True,
        header_style="bold magenta",
        box=box.SIMPLE,
        padding=(0, 1),
        expand=False,
    )
    table.add_column("Level", width=8)
    table.add_column("Kind", width=14)
    table.add_column("Rule", width=22)
    table.add_column("Location", style="dim")
    table.add_column("Message", style="white")

    for result in results:
        level = _level_name(result)
        table.add_row(
            Text(level.upper(), style=_level_style(level)),
            Text(result.kind or ""),
            Text(f"[{result.rule_id}]", style="dim"),
            Text(_first_location(result)),
            Text(result.message.text),
        )

    console.print(table)

    if verbose:
        rules = driver.rules or []
        seen: set[str] = set()
        for result in results:
            if result.rule_id in seen or result.rule_index < 0 or result.rule_index >= len(rules):
                continue
            seen.add(result.rule_id)
            short = rules[result.rule_index].short_description
            if short and short.text:
                console.print(f"  [dim]Rule:[/dim] {escape(f'[{result.rule_id}]')} {escape(short.text)}")
        if seen:
            console.print()


def _print_summary(results: Sequence[Result], console: Console) -> None:
    """Print a compact count of results per level."""
    by_level: dict[str, int] = {}
    for result in results:
        level = _level_name(result)
        by_level[level] = by_level.get(level, 0) + 1

    total = len(results)
    summary_parts = [f"[bold]{total} result{'s' if total != 1 else ''}[/bold]"]
    for level in LEVEL_ORDER:
        if level in by_level:
            summary_parts.append(f"[{_level_style(level)}]{by_level[level]} {level}[/]")

    failing = by_level.get("error", 0) + by_level.get("warning", 0)
    console.print()
    console.print(
        Panel(
            " | ".join(summary_parts),
            title="Summary",
            border_style="yellow" if failing > 0 else "green",
            box=box.ROUNDED,
        )
    )
