"""CLI entry point for commentlint.

Invoked as::

    commentlint [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m commentlint.cli.main

Commands
--------
lint        Lint one or more comment dumps
rules       List the registered rules
version     Show version information

Exit codes for ``lint``: 0 when clean, 1 when any finding is reported or
a dump cannot be read, 2 on a configuration error.
"""
from __future__ import annotations

import json
import logging
import sys
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

if TYPE_CHECKING:
    from commentlint.ast.nodes import Comment
    from commentlint.linter.diagnostics import Diagnostic

console = Console()
err_console = Console(stderr=True)

EXIT_FINDINGS = 1
EXIT_CONFIG_ERROR = 2


def _load_or_none(path: str) -> "list[Comment] | None":
    """Load a comment dump, printing the error and returning None on failure."""
    from commentlint.ast.serializer import CommentFormatError, load_comments

    try:
        return load_comments(path)
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
    except CommentFormatError as exc:
        err_console.print(f"[red]Format error[/red] in {path}: {exc}")
    return None


def _severity_color(severity_name: str) -> str:
    """Map a DiagnosticSeverity name to a Rich color string."""
    colors = {
        "ERROR": "red",
        "WARNING": "yellow",
        "INFORMATION": "blue",
        "HINT": "dim",
    }
    return colors.get(severity_name, "white")


def _enable_debug_logging() -> None:
    """Send debug logs to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _print_table(path: str, diagnostics: "list[Diagnostic]") -> None:
    table = Table(title=f"Lint: {path}", show_lines=True)
    table.add_column("Severity", style="bold", min_width=10)
    table.add_column("Code", min_width=8)
    table.add_column("Location", min_width=10)
    table.add_column("Message")

    for d in diagnostics:
        color = _severity_color(d.severity.name)
        table.add_row(
            f"[{color}]{d.severity.name}[/{color}]",
            d.code,
            str(d.location),
            d.message,
        )

    console.print(table)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="commentlint")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """Comment style linter with textblock-aware capitalization."""
    if verbose:
        _enable_debug_logging()


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from commentlint import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]commentlint[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# rules command
# ---------------------------------------------------------------------------


@cli.command(name="rules")
def rules_command() -> None:
    """List the registered rules, including installed plugins."""
    from commentlint.linter.rules import RULES

    RULES.load_entrypoints()

    table = Table(title="Rules")
    table.add_column("Option", style="bold", no_wrap=True)
    table.add_column("Code")
    table.add_column("Description")
    for name in RULES.list_rules():
        rule_cls = RULES.get(name)
        table.add_row(name, rule_cls.code, rule_cls.description)
    console.print(table)


# ---------------------------------------------------------------------------
# lint command
# ---------------------------------------------------------------------------


@cli.command(name="lint")
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=False))
@click.option(
    "--config",
    "-c",
    "config_path",
    default=None,
    type=click.Path(exists=False),
    help="Config file (defaults to the nearest .commentlintrc)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default="table",
    help="Output format",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr")
def lint_command(
    files: tuple[str, ...],
    config_path: str | None,
    output_format: str,
    verbose: bool,
) -> None:
    """Lint comment dumps.

    FILES are JSON or YAML comment dumps, one per source file.
    """
    if verbose:
        _enable_debug_logging()

    from commentlint.config import find_config, load_config
    from commentlint.linter import CommentLinter, ConfigurationError
    from commentlint.linter.rules import RULES

    RULES.load_entrypoints()

    try:
        resolved = config_path or find_config()
        options = load_config(resolved) if resolved is not None else None
        linter = CommentLinter(options)
    except ConfigurationError as exc:
        err_console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(EXIT_CONFIG_ERROR)

    failed = False
    report: dict[str, list[dict[str, object]]] = {}
    total = 0

    for path in files:
        comments = _load_or_none(path)
        if comments is None:
            failed = True
            continue
        diagnostics = linter.lint(comments)
        total += len(diagnostics)
        if output_format == "json":
            report[path] = [d.to_dict() for d in diagnostics]
        elif diagnostics:
            _print_table(path, diagnostics)
        else:
            console.print(f"[green]OK[/green] {path} — no lint issues found")

    if output_format == "json":
        click.echo(json.dumps(report, indent=2, ensure_ascii=False))
    else:
        console.print(f"\n[bold]{total}[/bold] lint finding(s)")

    if failed or total:
        sys.exit(EXIT_FINDINGS)


if __name__ == "__main__":
    cli()
