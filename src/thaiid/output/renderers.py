"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from thaiid.domain.ids import format_id
from thaiid.output.console import create_console, get_output, style_for_status

if TYPE_CHECKING:
    from rich.console import Console

    from thaiid.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Results with items print one ID per line so the output can be piped.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(_extract_id(item) for item in items if _extract_id(item))
    if "id" in result.data:
        return str(result.data["id"])

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _extract_id(item: Any) -> str:
    if isinstance(item, dict):
        for key in ("id", "idcard"):
            val = item.get(key)
            if val is not None:
                return str(val)
    return ""


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="thaiid.ok")
    op = Text(f"  {result.op}", style="thaiid.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="thaiid.key")
    if key in ("id", "idcard"):
        v = Text(str(value), style="thaiid.id")
    elif key == "check_digit":
        v = Text(str(value), style="thaiid.digit")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="thaiid.error")
    op = Text(f"  {result.op}", style="thaiid.op")
    console.print(label, op, Text(" — "), Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")

    # Failed validations still show the per-candidate table.
    if result.op == "validate" and result.data.get("items"):
        console.print(_validation_table(result.data["items"]))


# ── Operation renderers ───────────────────────────────────────────────


def _render_generate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "mode", result.data.get("mode", ""))
    _field(console, "count", result.data.get("count", 0))

    seeded = result.data.get("mode") == "seeded"
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("ID", style="thaiid.id", no_wrap=True)
    table.add_column("Printed", no_wrap=True)
    table.add_column("Check", style="thaiid.digit", justify="right")
    if seeded:
        table.add_column("Seed", justify="right")

    for item in result.data.get("items", []):
        row = [item["id"], format_id(item["id"]), str(item["check_digit"])]
        if seeded:
            row.append(str(item["seed"]))
        table.add_row(*row)
    console.print(table)

    if verbose:
        _render_meta(console, result)


def _validation_table(items: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Candidate", no_wrap=True)
    table.add_column("Status")
    for item in items:
        status = str(item.get("status", ""))
        table.add_row(str(item.get("id", "")), Text(status, style=style_for_status(status)))
    return table


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "valid", f"{result.data.get('valid_count', 0)}/{result.data.get('count', 0)}")
    if verbose:
        console.print(_validation_table(result.data.get("items", [])))
        _render_meta(console, result)


def _render_checksum(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("body", "check_digit", "id"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_fixtures(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    items = result.data.get("items", [])
    if not items:
        return
    table = Table(show_header=True, pad_edge=False, expand=False)
    columns = list(items[0].keys())
    for col in columns:
        style = "thaiid.id" if col == "idcard" else ""
        table.add_column(col, style=style, no_wrap=col == "idcard")
    for item in items:
        table.add_row(*(str(item.get(col, "")) for col in columns))
    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback: status line plus one field per data key."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    "generate": _render_generate,
    "validate": _render_validate,
    "checksum": _render_checksum,
    "customer_fixtures": _render_fixtures,
}
