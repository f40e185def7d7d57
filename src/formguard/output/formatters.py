"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output, colors) or machines
(--json). The formatter layer adapts ServiceResult to the requested mode.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.markup import escape

from formguard.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from formguard.services.result import ServiceResult


def _print_data(console: Console, data: dict[str, Any]) -> None:
    """Print result data as indented key-value pairs."""
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            shown = _json.dumps(value, separators=(",", ":"), ensure_ascii=False)
        else:
            shown = str(value)
        console.print(f"  [fg.key]{key}:[/] {escape(shown)}")


def _print_check_field(console: Console, data: dict[str, Any]) -> None:
    prop = escape(str(data.get("property", "")))
    if data.get("valid"):
        console.print(f"[fg.ok]VALID[/]: [fg.property]{prop}[/] = {escape(str(data['value']))}")
        return
    console.print(f"[fg.invalid]INVALID[/]: [fg.property]{prop}[/]")
    for message in data.get("messages", []):
        text = message.get("text") or ""
        console.print(f"  [fg.message_id]{escape(message['message_id'])}[/] {escape(text)}")


def format_result(
    result: ServiceResult,
    *,
    json_output: bool = False,
    no_color: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
        no_color: Disable ANSI escape codes in human mode.
    """
    if json_output:
        return result.model_dump_json(indent=2)

    console = create_console(no_color=no_color)
    if not result.ok:
        error_msg = result.error.message if result.error else "Unknown error"
        code = f" [{result.error.code}]" if result.error else ""
        console.print(
            f"[fg.error]ERROR[/]: [fg.op]{result.op}[/]{escape(code)} - {escape(error_msg)}"
        )
    elif result.op == "check_field":
        _print_check_field(console, result.data)
    else:
        console.print(f"[fg.ok]OK[/]: [fg.op]{result.op}[/]")
        if result.data:
            _print_data(console, result.data)
    return get_output(console).rstrip("\n")
