"""
CLI-specific formatting functions for the demo catalogue listing.

This module handles presentation formatting for the CLI, including:
- JSON and YAML dumps
- Rich tables
- Plain list formatting
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "demos" in data:
        return format_demos_table(data["demos"])
    return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a plain list."""
    if isinstance(data, dict) and "demos" in data:
        return format_demos_list(data["demos"])
    return json.dumps(data, indent=2, default=str)


def format_demos_table(demos: List[Dict[str, str]]) -> str:
    """Format the demo catalogue as a Rich table."""
    if not demos:
        return "No demos registered."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Category", style="cyan")
    table.add_column("Pattern", style="green")
    table.add_column("Demo", style="yellow")

    for demo in demos:
        table.add_row(demo.get("category", "N/A"), demo.get("title", "N/A"), demo.get("name", "N/A"))

    # Capture Rich output as string
    console = Console(width=100, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_demos_list(demos: List[Dict[str, str]]) -> str:
    """One ``category/name - title`` line per demo."""
    if not demos:
        return "No demos registered."
    return "\n".join(
        f"{demo.get('category', 'N/A')}/{demo.get('name', 'N/A')} - {demo.get('title', 'N/A')}"
        for demo in demos
    )
