"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from folio.output.console import create_console, get_output, style_for_status

if TYPE_CHECKING:
    from rich.console import Console

    from folio.services.result import ServiceResult


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
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    items = result.data.get("items")
    if isinstance(items, list) and items:
        return "\n".join(str(item["slug"]) for item in items if "slug" in item)

    tags = result.data.get("tags")
    if isinstance(tags, list) and tags:
        return "\n".join(tags)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="folio.ok")
    op = Text(f"  {result.op}", style="folio.op")
    console.print(label, op, sep="")


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="folio.key")
    if key == "slug":
        v = Text(str(value), style="folio.slug")
    elif key in ("path", "output_dir"):
        v = Text(str(value), style="folio.path")
    elif key == "title":
        v = Text(str(value), style="folio.title")
    elif isinstance(value, list):
        v = Text(", ".join(str(x) for x in value))
    elif isinstance(value, dict):
        v = Text(", ".join(f"{name}={count}" for name, count in value.items()))
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _status_text(status: Any) -> Text:
    value = str(status or "")
    return Text(value, style=style_for_status(value))


def _item_table(items: list[dict[str, Any]], *, verbose: bool = False) -> Table:
    """Build a Rich Table for a list of content summaries."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Slug", style="folio.slug", no_wrap=True)
    table.add_column("Title", style="folio.title")
    table.add_column("Date", style="folio.date", no_wrap=True)
    table.add_column("Status")
    table.add_column("Tags")
    if verbose:
        table.add_column("Excerpt", style="dim")

    for item in items:
        row: list[Any] = [
            str(item.get("slug", "")),
            str(item.get("title", "")),
            str(item.get("date", "")),
            _status_text(item.get("status") or item.get("category")),
            ", ".join(item.get("tags", [])),
        ]
        if verbose:
            row.append(str(item.get("excerpt", "")))
        table.add_row(*row)

    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="folio.error")
    op = Text(f"  {result.op}", style="folio.op")
    console.print(label, op, Text(": "), Text(msg), sep="")
    if err is None:
        return

    if err.code == "CONTENT_INVALID":
        _render_issues(console, err.detail.get("issues", []))
    elif err.detail.get("errors"):
        for line in err.detail["errors"]:
            console.print(Text(f"  - {line}"))
    if verbose and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Query renderers ───────────────────────────────────────────────────


def _render_item_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_items results as a table."""
    items = result.data.get("items", [])
    if not items:
        console.print(f"No {result.data.get('category', '')} items.")
        return
    console.print(_item_table(items, verbose=verbose))
    console.print(f"\n{result.data.get('count', len(items))} items")


def _render_single_item(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a get result as a panel with metadata above the body."""
    d = result.data
    lines: list[str] = []
    for key in ("date", "status", "category", "reading_time", "excerpt"):
        val = d.get(key)
        if val is not None:
            lines.append(f"{key}: {val}")

    tags = d.get("tags", [])
    if tags:
        lines.append(f"tags: {', '.join(tags)}")
    for key in ("githubUrl", "liveUrl"):
        if d.get(key):
            lines.append(f"{key}: {d[key]}")

    content = "\n".join(lines)
    body = d.get("html") if d.get("html") is not None else d.get("body", "")
    if body:
        content += f"\n\n{body.strip()}"

    title = Text(f"{d.get('slug', '?')} | {d.get('title', 'Untitled')}")
    border = style_for_status(str(d.get("status", ""))) or "dim"
    console.print(Panel(Text(content), title=title, border_style=border, expand=False))


def _render_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render slugs or tags as one value per line."""
    if "tags" in result.data:
        values = list(result.data["tags"])
        noun = "tags"
    else:
        values = [item["slug"] for item in result.data.get("items", [])]
        noun = "slugs"
    for value in values:
        console.print(f"  {value}")
    console.print(f"\n{len(values)} {noun}")


# ── Check / build renderers ───────────────────────────────────────────


def _render_issues(console: Console, issues: list[dict[str, Any]]) -> None:
    by_category: dict[str, list[dict[str, Any]]] = {}
    for issue in issues:
        by_category.setdefault(str(issue.get("category", "unknown")), []).append(issue)

    for cat, cat_issues in by_category.items():
        console.print(f"\n[bold]{cat}[/bold]")
        for issue in cat_issues:
            path = Text(str(issue.get("path")), style="folio.path")
            console.print(Text("  error ", style="folio.error"), path)
            for line in issue.get("errors", []):
                console.print(Text(f"    {line}"))


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a clean check run; failures go through :func:`_render_error`."""
    checked = result.data.get("checked", 0)
    console.print(f"[folio.ok]OK[/folio.ok]  {checked} content files valid.")


def _render_build(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("output_dir", "pages", "sitemap_urls", "static_files"):
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose:
        for key in ("listed", "details"):
            if key in result.data:
                _field(console, key, result.data[key])
        if result.meta is not None:
            _field(console, "elapsed_ms", result.meta.elapsed_ms)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback: status line then every data field."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "list_items": _render_item_table,
    "get": _render_single_item,
    "slugs": _render_list,
    "tags": _render_list,
    "check": _render_check,
    "build": _render_build,
}
