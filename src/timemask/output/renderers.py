"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from timemask.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from timemask.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render only the primary value for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if result.op == "duration":
        return str(data.get("text", ""))
    if result.op == "mask":
        return str(data.get("pattern") or compact_mask(data.get("mask", [])))
    if result.op == "tokenize":
        return " ".join(
            seg["symbol"] for seg in data.get("segments", []) if seg.get("kind") == "token"
        )
    return f"OK: {result.op}"


# Placeholder glyphs for the compact mask notation.
_GLYPHS: dict[str, str] = {"digit": "9", "digits": "9+", "letter": "a", "either": "*"}


def compact_mask(elements: list[dict[str, str]]) -> str:
    """Render mask payload elements as ``99/99/9999``-style notation."""
    parts: list[str] = []
    for element in elements:
        if "placeholder" in element:
            parts.append(_GLYPHS.get(element["placeholder"], "?"))
        else:
            parts.append(element.get("literal", ""))
    return "".join(parts)


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="tm.ok")
    op = Text(f"  {result.op}", style="tm.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="tm.key")
    v = Text(str(value), style=style)
    console.print(k, v, end="")
    console.print()


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
    label = Text("ERROR", style="tm.error")
    op = Text(f"  {result.op}", style="tm.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_tokenize(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "format", result.data.get("format", ""))

    segments = result.data.get("segments", [])
    if not segments:
        _field(console, "segments", 0)
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind")
    table.add_column("Value", no_wrap=True)
    table.add_column("Type")
    table.add_column("Unit")
    for index, seg in enumerate(segments):
        kind = seg.get("kind", "")
        value = seg.get("symbol") if kind == "token" else repr(seg.get("text", ""))
        table.add_row(
            str(index),
            Text(kind, style=style_for_kind(kind)),
            Text(str(value)),
            str(seg.get("type") or ""),
            str(seg.get("unit") or ""),
        )
    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_mask(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "format", data.get("format", ""))
    _field(console, "mask", compact_mask(data.get("mask", [])), style="tm.placeholder")
    if "pattern" in data:
        _field(console, "pattern", data["pattern"])
    if verbose:
        _render_meta(console, result)


def _render_duration(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "duration_ms", result.data.get("duration_ms"))
    _field(console, "text", result.data.get("text", ""), style="tm.duration")
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_Renderer = Callable[..., None]

_OP_RENDERERS: dict[str, _Renderer] = {
    "tokenize": _render_tokenize,
    "mask": _render_mask,
    "duration": _render_duration,
}
