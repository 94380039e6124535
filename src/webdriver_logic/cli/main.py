"""CLI application for webdriver-logic."""

import json
import logging
from contextlib import nullcontext
from typing import Any, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from webdriver_logic.browser.context import search_domain
from webdriver_logic.browser.oracle import BaseOracle, resolve
from webdriver_logic.browser.scope import Scope
from webdriver_logic.browser.vocabulary import is_known_tag
from webdriver_logic.core.config import Config
from webdriver_logic.core.exceptions import ScopeError, WebDriverLogicError
from webdriver_logic.core.session import end_session, start_session
from webdriver_logic.logic import Goal, run, var
from webdriver_logic.relations import (
    attributeo,
    childo,
    current_urlo,
    displayedo,
    enabledo,
    existso,
    selectedo,
    tago,
    texto,
    titleo,
)

app = typer.Typer(
    name="webdriver-logic",
    help="Query a live web page with logic relations",
    no_args_is_help=True,
)

console = Console()
logger = logging.getLogger(__name__)


@app.callback()
def configure(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level (default: WDL_LOG_LEVEL)"),
) -> None:
    """Configure logging for every command."""
    level = (log_level or Config.from_env().log_level).upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def open_session(url: str) -> BaseOracle:
    """Start a browser session at ``url`` or exit with an error."""
    try:
        config = Config.from_env()
        config.validate()
        return start_session(url, config)
    except ValueError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(1)
    except WebDriverLogicError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def parse_attribute(pair: str) -> tuple[str, str]:
    """Split a ``NAME=VALUE`` option into its parts."""
    name, sep, value = pair.partition("=")
    if not sep or not name:
        raise typer.BadParameter(f"Expected NAME=VALUE, got {pair!r}", param_hint="--attr")
    return name.strip(), value


def parse_scope(expression: str, option: str) -> Scope:
    """Parse a scope option or reject it as a bad parameter."""
    try:
        return Scope.parse(expression)
    except ScopeError as e:
        raise typer.BadParameter(str(e), param_hint=option)


def describe(oracle: BaseOracle, element: Any) -> dict[str, str]:
    """Summarize an element for display."""
    tag = resolve(oracle.tag, element)
    element_id = resolve(oracle.attribute, element, "id")
    text = resolve(oracle.text, element)
    return {
        "tag": tag or "",
        "id": element_id or "",
        "text": (text or "")[:60],
    }


@app.command("facts")
def show_facts(
    url: str = typer.Argument(..., help="Page to open"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the page title and current URL."""
    open_session(url)
    try:
        q = var("q")
        title = run(1, q, titleo(q))
        current = run(1, q, current_urlo(q))
        facts = {
            "title": title[0] if title else "",
            "url": current[0] if current else "",
        }
    except WebDriverLogicError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    finally:
        end_session()

    if json_output:
        console.print(json.dumps(facts, indent=2))
    else:
        console.print(Panel(
            f"[bold]{facts['title']}[/bold]\n{facts['url']}",
            title="Page",
            border_style="green",
        ))


@app.command("find")
def find_elements(
    url: str = typer.Argument(..., help="Page to open"),
    tag: Optional[str] = typer.Option(None, "--tag", "-t", help="Element tag name"),
    text: Optional[str] = typer.Option(None, "--text", help="Exact visible text"),
    attr: Optional[list[str]] = typer.Option(None, "--attr", "-a", help="Attribute as NAME=VALUE (repeatable)"),
    displayed: bool = typer.Option(False, "--displayed", help="Only displayed elements"),
    enabled: bool = typer.Option(False, "--enabled", help="Only enabled elements"),
    selected: bool = typer.Option(False, "--selected", help="Only selected elements"),
    scope: Optional[str] = typer.Option(None, "--scope", "-s", help="Root scope, e.g. 'css=#content *'"),
    within: Optional[str] = typer.Option(
        None, "--within", "-w", help="Only descendants of the first element matching this scope"
    ),
    limit: int = typer.Option(20, "--limit", "-n", min=0, help="Maximum results (0 for all)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Find elements matching every given constraint."""
    el = var("el")
    goals: list[Goal] = []

    if tag:
        if not is_known_tag(tag):
            logger.warning(f"'{tag}' is not a standard HTML tag")
        goals.append(tago(el, tag))
    if text is not None:
        goals.append(texto(el, text))
    for pair in attr or []:
        name, value = parse_attribute(pair)
        goals.append(attributeo(el, name, value))
    if displayed:
        goals.append(displayedo(el))
    if enabled:
        goals.append(enabledo(el))
    if selected:
        goals.append(selectedo(el))
    parent_scope = parse_scope(within, "--within") if within else None
    if not goals and parent_scope is None:
        goals.append(existso(el))

    oracle = open_session(url)
    try:
        rows: list[dict[str, str]] = []
        parent = oracle.find_element(parent_scope) if parent_scope else None
        if parent_scope and parent is None:
            logger.warning(f"No element matches {parent_scope}")
        else:
            if parent is not None:
                goals.insert(0, childo(el, parent))
            with search_domain(root=scope) if scope else nullcontext():
                elements = run(limit, el, *goals)
                rows = [describe(oracle, element) for element in elements]
    except WebDriverLogicError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    finally:
        end_session()

    if json_output:
        console.print(json.dumps(rows, indent=2))
        return

    if not rows:
        console.print("[yellow]No matching elements[/yellow]")
        return

    table = Table(title=f"{len(rows)} matching element(s)")
    table.add_column("#", justify="right")
    table.add_column("Tag", style="cyan")
    table.add_column("Id", style="magenta")
    table.add_column("Text")
    for index, row in enumerate(rows, start=1):
        table.add_row(str(index), row["tag"], row["id"], row["text"])
    console.print(table)


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from webdriver_logic import __version__
    console.print(f"webdriver-logic v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
