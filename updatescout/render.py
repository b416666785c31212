"""Report rendering: JSON document or coloured terminal tables."""

from __future__ import annotations

import json
import os

from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from updatescout.engines.update_checker.models import UpdateRecord, UpdateReport

UP_TO_DATE_MESSAGE = "All dependencies are up to date."


def report_to_dict(report: UpdateReport) -> dict[str, list[dict[str, str]]]:
    return {
        "priorityUpdates": [u.to_dict() for u in report.priority_updates],
        "otherUpdates": [u.to_dict() for u in report.other_updates],
    }


def render_json(report: UpdateReport) -> str:
    return json.dumps(report_to_dict(report), indent=2)


def supports_hyperlinks(console: Console) -> bool:
    """OSC 8 links work on most TTYs; Apple Terminal prints them raw."""
    return console.is_terminal and os.environ.get("TERM_PROGRAM") != "Apple_Terminal"


def build_table(title: str, updates: list[UpdateRecord], hyperlinks: bool) -> Table:
    """One titled table; the docs cell is a ``Link`` hyperlink or the raw URL."""
    table = Table(title=title, title_style="bold yellow", header_style="cyan")
    table.add_column("Package", no_wrap=True)
    table.add_column("Current -> Latest", no_wrap=True)
    table.add_column("Docs", overflow="fold")
    for update in updates:
        version = Text.assemble(
            (update.current_version, "red"),
            " ",
            ("->", "yellow"),
            " ",
            (update.latest_version, "green"),
        )
        if hyperlinks:
            docs = Text("Link", style=Style(link=update.doc_url))
        else:
            docs = Text(update.doc_url, style="blue underline")
        table.add_row(Text(update.name), version, docs)
    return table


def print_tables(
    report: UpdateReport,
    console: Console,
    hyperlinks: bool | None = None,
) -> None:
    """Print the priority and other tables to *console*; empty groups are skipped."""
    if hyperlinks is None:
        hyperlinks = supports_hyperlinks(console)
    if report.total == 0:
        console.print(UP_TO_DATE_MESSAGE)
        return

    first = True
    for label, updates in (
        ("Priority", report.priority_updates),
        ("Other", report.other_updates),
    ):
        if not updates:
            continue
        if not first:
            console.print()
        console.print(build_table(f"{label} Updates from {report.source}", updates, hyperlinks))
        first = False
