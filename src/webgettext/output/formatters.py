"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich markup) or machines
(--json). Quiet mode prints only the op on success.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.markup import escape

from webgettext.output.console import create_console, get_output

if TYPE_CHECKING:
    from webgettext.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _render_value(value: Any) -> str:
    if isinstance(value, list):
        return ", ".join(str(item) for item in value) or "-"
    return str(value)


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    console = create_console()
    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        console.print(f"[wg.error]ERROR[/]: [wg.op]{result.op}[/] - {escape(message)}")
        if settings.verbose and result.error and result.error.detail:
            for key, value in result.error.detail.items():
                console.print(f"  [wg.key]{key}[/]: {escape(_render_value(value))}")
        return get_output(console).rstrip("\n")

    console.print(f"[wg.ok]OK[/]: [wg.op]{result.op}[/]")
    if not settings.quiet:
        for key, value in result.data.items():
            console.print(f"  [wg.key]{key}[/]: {escape(_render_value(value))}")
    return get_output(console).rstrip("\n")
