"""PR Manager CLI — Typer application with analyze and init commands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from prmanager import __version__

app = typer.Typer(
    name="prmanager",
    help="Score the risk of a pull request before you review it.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)
logger = logging.getLogger("prmanager.cli")


class InputError(Exception):
    """Raised when the analysis input cannot be resolved."""


def _project_root(require_git: bool) -> Path:
    """Git repo root, or the working directory when git is optional."""
    from prmanager.git.adapter import GitError, get_repo_root

    try:
        return get_repo_root()
    except GitError as exc:
        if require_git:
            console.print(f"[bold red]Error:[/bold red] {exc}")
            raise typer.Exit(code=2) from exc
        logger.debug("Not in a git repository (%s); using %s", exc, Path.cwd())
        return Path.cwd()


def _read_diff(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        raise InputError(f"Diff file not found: {source}")
    return path.read_text(encoding="utf-8", errors="replace")


# ── analyze ───────────────────────────────────────────────────────────────────


@app.command()
def analyze(
    diff: Optional[str] = typer.Option(None, "--diff", "-d", help="Unified diff file ('-' for stdin)"),
    pr_url: Optional[str] = typer.Option(None, "--pr-url", help="GitHub pull request URL"),
    staged: bool = typer.Option(False, "--staged", help="Analyse staged changes"),
    from_ref: Optional[str] = typer.Option(None, "--from", help="Base commit of a local range"),
    to_ref: Optional[str] = typer.Option(None, "--to", help="Head commit of a local range (default HEAD)"),
    github_token: Optional[str] = typer.Option(
        None, "--github-token", envvar="GITHUB_TOKEN", help="Token for private repositories"
    ),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .prmanager.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write JSON report to file"),
    fail_on: Optional[str] = typer.Option(None, "--fail-on", help="Risk threshold: never | low | medium | high"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output with timing"),
) -> None:
    """Analyse a diff, a local commit range, or a GitHub pull request."""
    from prmanager.config.loader import ConfigError, load_config
    from prmanager.config.schema import risk_at_or_above
    from prmanager.git.adapter import GitError, get_range_diff, get_staged_diff
    from prmanager.github.client import GitHubError, fetch_pull_request, parse_pr_url
    from prmanager.heuristics.engine import (
        AnalysisLimitError,
        analyze_diff,
        analyze_pull_request,
    )
    from prmanager.logging_config import setup_logging
    from prmanager.output import json_report, terminal
    from prmanager.rules.registry import RuleError, build_registry

    setup_logging(verbose=verbose, debug=debug)

    sources = [s for s in (diff is not None, pr_url is not None, staged, from_ref is not None) if s]
    if len(sources) != 1:
        console.print(
            "[bold red]Error:[/bold red] provide exactly one of "
            "--diff, --pr-url, --staged or --from"
        )
        raise typer.Exit(code=2)
    if to_ref is not None and from_ref is None:
        console.print("[bold red]Error:[/bold red] --to requires --from")
        raise typer.Exit(code=2)

    uses_git = staged or from_ref is not None
    repo_root = _project_root(require_git=uses_git)

    # --- Load config ---
    try:
        cfg = load_config(repo_root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    # --- CLI overrides ---
    if format:
        if format not in ("terminal", "json"):
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    if fail_on:
        if fail_on not in ("never", "low", "medium", "high"):
            console.print(f"[bold red]Invalid fail-on level:[/bold red] {fail_on}")
            raise typer.Exit(code=2)
        cfg.analyze.fail_on = fail_on  # type: ignore[assignment]

    # --- Build rules ---
    try:
        registry = build_registry(cfg, repo_root)
    except RuleError as exc:
        console.print(f"[bold red]Rule error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    logger.info("Type rules: %d, flag rules: %d", len(registry.type_rules()), len(registry.flag_rules()))
    logger.info("Project root: %s", repo_root)

    # --- Resolve input and analyse ---
    try:
        if pr_url is not None:
            ref = parse_pr_url(pr_url)
            if ref is None:
                raise InputError("Invalid GitHub PR URL format")
            pr, gh_files = fetch_pull_request(ref, token=github_token)
            result = analyze_pull_request(pr, gh_files, cfg, registry)
        else:
            if diff is not None:
                diff_text = _read_diff(diff)
            elif staged:
                diff_text = get_staged_diff(repo_root)
            else:
                diff_text = get_range_diff(repo_root, from_ref, to_ref or "HEAD")
            if not diff_text.strip():
                console.print("[dim]No changes to analyse.[/dim]")
                raise typer.Exit(code=0)
            result = analyze_diff(diff_text, cfg, registry)
    except InputError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    except GitHubError as exc:
        console.print(f"[bold red]GitHub error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    except AnalysisLimitError as exc:
        console.print(f"[bold red]Too large:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    logger.debug("Analysis duration: %.0fms", result.duration_ms)

    # --- Output ---
    report_text: Optional[str] = None
    if cfg.output.format == "terminal":
        terminal.render(result, show_files=cfg.output.show_files, console=console)
    else:
        report_text = json_report.render(result)
        print(report_text)

    if output:
        Path(output).write_text(report_text or json_report.render(result), encoding="utf-8")
        logger.info("Report written to %s", output)

    # --- Exit code ---
    if risk_at_or_above(result.risk_level, cfg.analyze.fail_on):
        raise typer.Exit(code=1)
    raise typer.Exit(code=0)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init(
    force: bool = typer.Option(False, "--force", help="Overwrite an existing .prmanager.toml"),
) -> None:
    """Generate a starter .prmanager.toml in the repo root."""
    from prmanager.config.defaults import DEFAULT_TOML
    from prmanager.config.loader import CONFIG_FILENAME

    repo_root = _project_root(require_git=False)
    config_path = repo_root / CONFIG_FILENAME

    if config_path.exists() and not force:
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"prmanager {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """PR Manager — heuristic risk scoring for pull requests."""
