"""Rich terminal reporter — score badge, hotspots, notable files."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from prmanager.heuristics.engine import prioritize_files
from prmanager.heuristics.models import AnalysisResult

_LEVEL_STYLE = {
    "High": "bold white on red",
    "Medium": "bold black on yellow",
    "Low": "bold black on green",
}

_LEVEL_ICON = {
    "High": "🔴",
    "Medium": "🟡",
    "Low": "🟢",
}


def _risk_badge(level: str, score: int) -> Text:
    style = _LEVEL_STYLE.get(level, "")
    icon = _LEVEL_ICON.get(level, "")
    return Text(f" {icon} {level.upper()} RISK · {score}/100 ", style=style)


def render(
    result: AnalysisResult,
    *,
    show_files: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print the analysis to the terminal using Rich."""
    console = console or Console(stderr=True)
    stats = result.stats

    console.print()
    console.print(f"[bold]{result.pr.title}[/bold]", end="")
    if result.pr.number:
        console.print(f" [dim]#{result.pr.number} by {result.pr.author}[/dim]")
    else:
        console.print()
    console.print(_risk_badge(result.risk_level, stats.risk_score_pre))

    console.print()
    console.print(
        f"[dim]Files:[/dim] {stats.total_files}   "
        f"[green]+{stats.additions}[/green] [red]-{stats.deletions}[/red]   "
        f"[dim]Areas:[/dim] {', '.join(a.value for a in stats.touched_areas) or '-'}"
    )

    if result.hotspots:
        console.print()
        console.print("[bold]Hotspots[/bold]")
        for hotspot in result.hotspots:
            console.print(f"  [yellow]•[/yellow] {hotspot}")
    else:
        console.print()
        console.print("[bold green]✅ No hotspots detected.[/bold green]")

    if show_files and result.files:
        console.print()
        table = Table(
            title="Notable files",
            title_style="bold",
            border_style="dim",
        )
        table.add_column("File", style="magenta")
        table.add_column("Type", style="cyan")
        table.add_column("Lang")
        table.add_column("+", justify="right", style="green")
        table.add_column("-", justify="right", style="red")
        table.add_column("Flags", style="yellow")
        for f in prioritize_files(result.files):
            table.add_row(
                f"{f.previous_path} → {f.path}" if f.previous_path else f.path,
                f.type.value,
                f.language,
                str(f.additions),
                str(f.deletions),
                ", ".join(flag.value for flag in f.flags) or "-",
            )
        console.print(table)
