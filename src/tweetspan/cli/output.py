"""Output formatting for CLI commands."""

from __future__ import annotations

import json
from typing import Any

import click


class OutputFormatter:
    """Format command output as a table or JSON.

    Usage::

        fmt = OutputFormatter(output_format)
        fmt.print_table(rows, columns=["kind", "text", "start", "end"])
    """

    def __init__(self, output_format: str = "table") -> None:
        self.format = output_format

    def print_table(
        self,
        data: list[dict[str, Any]],
        columns: list[str] | None = None,
    ) -> None:
        """Print *data* as a formatted table or a JSON array.

        Always prints the header row even when *data* is empty so callers
        can tell the command succeeded.
        """
        if self.format == "json":
            click.echo(json.dumps(data, indent=2, ensure_ascii=False, default=str))
            return

        if columns is None:
            columns = list(data[0].keys()) if data else []
        if not columns:
            return

        headers = {c: c.replace("_", " ").title() for c in columns}
        widths: dict[str, int] = {c: len(headers[c]) for c in columns}
        for row in data:
            for c in columns:
                widths[c] = max(widths[c], len(str(row.get(c, ""))))
        # Cap widths at 50 chars
        widths = {c: min(w, 50) for c, w in widths.items()}

        header = "  ".join(headers[c].ljust(widths[c]) for c in columns)
        click.echo(header)
        click.echo("-" * len(header))

        for row in data:
            parts: list[str] = []
            for c in columns:
                val = str(row.get(c, ""))
                if len(val) > widths[c]:
                    val = val[: widths[c] - 3] + "..."
                parts.append(val.ljust(widths[c]))
            click.echo("  ".join(parts).rstrip())
