"""Human/JSON output for ServiceResult.

The CLI renders results for humans (Rich text) or machines (``--json``).
Interface listings render as a table; everything else as key-value lines.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from commonkit.output.console import create_console, get_output, style_for_visibility

if TYPE_CHECKING:
    from rich.console import Console

    from commonkit.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Rendering switches derived from CLI settings."""

    json_output: bool = False
    quiet: bool = False
    no_color: bool = False
    width: int | None = None


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return _format_quiet(result)

    console = create_console(no_color=settings.no_color, width=settings.width)
    if result.ok:
        _status_line(console, result)
        items = result.data.get("items")
        if isinstance(items, list):
            _render_items(console, result.data, items)
        else:
            _render_fields(console, result.data)
    else:
        _render_error(console, result)
    return get_output(console).rstrip("\n")


_QUIET_KEYS: dict[str, str] = {
    "parse_date": "value",
    "parse_datetime": "value",
    "format_date": "text",
    "format_datetime": "text",
    "get_field": "name",
}


def _format_quiet(result: ServiceResult) -> str:
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("name", "")) for item in items)
    key = _QUIET_KEYS.get(result.op)
    if key is not None and key in result.data:
        return str(result.data[key])
    return f"OK: {result.op}"


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "ck.ok"), (f" {result.op}", "ck.op")))


def _render_fields(console: Console, data: dict[str, Any]) -> None:
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            value = _json.dumps(value, separators=(",", ":"))
        style = style_for_visibility(str(value)) if key == "visibility" else ""
        if key in ("type", "declaring_type"):
            style = "ck.type"
        console.print(Text.assemble((f"  {key}: ", "ck.key"), (str(value), style)))


def _render_items(console: Console, data: dict[str, Any], items: list[dict[str, Any]]) -> None:
    console.print(Text.assemble(("  type: ", "ck.key"), (str(data.get("type", "")), "ck.type")))
    if not items:
        console.print(Text("  (no interfaces)", style="ck.key"))
        return
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", justify="right")
    table.add_column("Interface")
    for i, item in enumerate(items, start=1):
        table.add_row(str(i), str(item.get("name", "")))
    console.print(table)


def _render_error(console: Console, result: ServiceResult) -> None:
    error = result.error
    message = error.message if error else "Unknown error"
    console.print(Text.assemble(("ERROR", "ck.error"), (f" {result.op}", "ck.op"), f": {message}"))
    if error and error.hint:
        console.print(Text(f"  hint: {error.hint}", style="ck.hint"))
    if error and error.detail:
        _render_fields(console, error.detail)
