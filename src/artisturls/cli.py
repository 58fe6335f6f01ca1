"""
artisturls CLI - Command Line Interface

Entry point for inspecting artist URLs: normalization, site parsing,
display ranking, rewrite strategies and format validation.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from artisturls import __version__
from artisturls.classifier.deduper import URLDeduper
from artisturls.classifier.normalizer import normalize as normalize_url
from artisturls.core.config import Settings, load_settings
from artisturls.core.entry import URLEntry
from artisturls.core.exceptions import ConfigError, FormatError
from artisturls.core.validation import validate_format
from artisturls.rewrite.registry import StrategyRegistry
from artisturls.sources.parser import parse as parse_url

# Create CLI app
app = typer.Typer(
    name="artisturls",
    help="artisturls - Artist profile URL canonicalization and ranking",
    add_completion=False,
    no_args_is_help=True,
)

# Rich console for output
console = Console()

# Settings shared by commands, filled in by the callback
state: dict[str, Settings] = {"settings": Settings()}


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"artisturls {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Settings YAML file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Configure logging and load settings."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        state["settings"] = load_settings(config)
    except ConfigError as e:
        console.print(f"[red]Error loading config:[/red] {e}")
        raise typer.Exit(code=1)


# ============================================================================
# Commands
# ============================================================================

@app.command()
def normalize(
    urls: List[str] = typer.Argument(..., help="Artist URLs to normalize"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
) -> None:
    """
    Show the normalized form used for equality and lookup.
    """
    rows = [{"url": url, "normalized_url": normalize_url(url)} for url in urls]

    if as_json:
        typer.echo(json.dumps(rows, indent=2))
        return

    table = Table(title="Normalized URLs")
    table.add_column("URL", style="cyan", overflow="fold")
    table.add_column("Normalized", style="green", overflow="fold")
    for row in rows:
        table.add_row(row["url"], row["normalized_url"])
    console.print(table)


@app.command()
def parse(
    url: str = typer.Argument(..., help="Artist URL to parse"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a panel"),
) -> None:
    """
    Show the site, domain and profile URL recognized for a URL.
    """
    classifier = state["settings"].build_classifier()
    parsed = parse_url(url)
    info = {
        **parsed.to_dict(),
        "is_secondary": classifier.is_secondary(parsed),
        "priority": classifier.priority_rank(parsed),
    }

    if as_json:
        typer.echo(json.dumps(info, indent=2))
        return

    console.print(Panel.fit(
        f"Site: [green]{info['site_name']}[/green]\n"
        f"Domain: [yellow]{info['domain'] or 'N/A'}[/yellow]\n"
        f"Profile URL: [cyan]{info['profile_url'] or 'N/A'}[/cyan]\n"
        f"Secondary: {'yes' if info['is_secondary'] else 'no'}\n"
        f"Priority: {info['priority']}",
        title=url,
    ))


@app.command()
def rank(
    urls: List[str] = typer.Argument(..., help="Artist URLs; prefix with '-' to mark inactive"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
) -> None:
    """
    Deduplicate and order URLs for display, most preferred first.
    """
    classifier = state["settings"].build_classifier()
    entries = []
    for raw in urls:
        try:
            entries.append(URLEntry.from_string(raw))
        except FormatError as e:
            console.print(f"[yellow]Skipping:[/yellow] {e}")

    entries = URLDeduper().deduplicate(entries, key=lambda entry: entry.url)
    entries = classifier.sort_by_priority(entries, key=lambda entry: entry.parsed_url)

    if as_json:
        rows = [
            {
                **entry.to_dict(),
                "site_name": entry.site_name,
                "is_secondary": entry.is_secondary,
                "priority": entry.priority_rank(classifier),
            }
            for entry in entries
        ]
        typer.echo(json.dumps(rows, indent=2))
        return

    table = Table(title="Ranked URLs")
    table.add_column("#", justify="right")
    table.add_column("Site", style="green")
    table.add_column("URL", style="cyan", overflow="fold")
    table.add_column("Secondary")
    for index, entry in enumerate(entries, start=1):
        table.add_row(
            str(index),
            entry.site_name,
            str(entry),
            "yes" if entry.is_secondary else "",
        )
    console.print(table)


@app.command()
def rewrite(
    url: str = typer.Argument(..., help="URL to rewrite"),
    probe: bool = typer.Option(True, "--probe/--no-probe", help="Allow HTTP HEAD probes"),
    timeout: Optional[float] = typer.Option(None, "--timeout", "-t", help="Probe timeout in seconds"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of text"),
) -> None:
    """
    Apply the matching rewrite strategy to a URL.
    """
    settings = state["settings"]
    if timeout is not None:
        if timeout <= 0:
            console.print("[red]Error:[/red] --timeout must be positive")
            raise typer.Exit(code=1)
        settings = Settings(
            probe_timeout=timeout,
            user_agent=settings.user_agent,
            follow_redirects=settings.follow_redirects,
            site_priority=settings.site_priority,
        )

    registry = StrategyRegistry(probe=settings.build_probe() if probe else None)
    strategy = registry.resolve(url)
    new_url, headers, _ = strategy.rewrite(url, {}, {})

    if as_json:
        typer.echo(json.dumps({
            "url": url,
            "strategy": strategy.name,
            "rewritten_url": new_url,
            "headers": headers,
        }, indent=2))
        return

    console.print(f"[blue]Strategy:[/blue] {strategy.name}")
    console.print(f"[blue]URL:[/blue] {new_url}", overflow="fold")
    for name, value in (headers or {}).items():
        console.print(f"[blue]Header:[/blue] {name}: {value}")


@app.command()
def validate(
    urls: List[str] = typer.Argument(..., help="Artist URLs to validate"),
) -> None:
    """
    Check URL format; exits with code 1 if any URL is invalid.
    """
    failed = False
    for url in urls:
        try:
            validate_format(url)
        except FormatError as e:
            failed = True
            for error in e.errors:
                console.print(f"[red]Invalid:[/red] {error}", overflow="fold")
        else:
            console.print(f"[green]OK:[/green] {url}", overflow="fold")

    if failed:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
