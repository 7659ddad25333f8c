"""Pick an output mode for a ServiceResult.

``--json`` serializes the whole result, ``--quiet`` prints the bare
minimum (slugs, tags, or ``OK: op``), and the default renders Rich
tables and panels.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from folio.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags lifted off :class:`FolioSettings`."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet; quiet wins over the Rich renderers.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    from folio.output.renderers import render_quiet, render_result

    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
