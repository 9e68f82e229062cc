"""
Report Rendering
================

Writes the collected facts to a rich Console.

Formats:
    plain - "Label: value" per line (or the fact's "not found" sentence)
    table - key/value table inside a panel
    json  - list of {"key", "label", "value"} objects

License: MIT
"""

import json
import logging
from typing import Iterable, List

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..checks.models import SystemFact

log = logging.getLogger(__name__)

FORMATS = ("plain", "table", "json")


def create_info_table(facts: Iterable[SystemFact]) -> Table:
    """Fact list as a two-column table."""
    table = Table(box=None, padding=(0, 2), show_header=False)
    table.add_column("Component", style="cyan", no_wrap=True)
    table.add_column("Value", style="magenta")

    for fact in facts:
        display_value = escape(fact.value) if fact.is_known else "[dim]unknown[/dim]"
        table.add_row(fact.label, display_value)

    return table


def render_plain(console: Console, facts: List[SystemFact]) -> None:
    for fact in facts:
        console.print(fact.render(), markup=False, highlight=False)


def render_table(console: Console, facts: List[SystemFact]) -> None:
    hostname = next((f.value for f in facts if f.key == "hostname" and f.is_known), None)
    title = f"[bold]{escape(hostname)}[/bold]" if hostname else "[bold]xfetch[/bold]"
    console.print(Panel(
        create_info_table(facts),
        title=title,
        border_style="green",
        expand=False
    ))


def render_json(console: Console, facts: List[SystemFact]) -> None:
    payload = [fact.to_dict() for fact in facts]
    console.print(json.dumps(payload, indent=2, ensure_ascii=False), markup=False, highlight=False)


def display_report(console: Console, facts: List[SystemFact], fmt: str = "plain") -> None:
    """
    Renders the report in the requested format.

    Raises:
        ValueError: Unknown format
    """
    renderers = {
        "plain": render_plain,
        "table": render_table,
        "json": render_json,
    }
    if fmt not in renderers:
        raise ValueError(f"Unknown format: '{fmt}'. Available formats: {', '.join(FORMATS)}")

    log.debug(f"Rendering {len(facts)} facts as {fmt}")
    renderers[fmt](console, facts)
