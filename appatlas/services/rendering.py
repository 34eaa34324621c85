"""Human and JSON renderers for application descriptions.

Both renderers return the complete document as a string so callers can write
it in one go; nothing is written when rendering fails.
"""

from __future__ import annotations

import json
from typing import Sequence

from pydantic_core import PydanticSerializationError

from appatlas.services.dto import ApplicationDescription
from appatlas.services.errors import ErrorKind, ShowAppError

NONE_MARKER = "None"
_INDENT = "  "
_CELL_PADDING = 4


def _format_rows(rows: Sequence[Sequence[str]]) -> list[str]:
    """Left-align every column to its widest cell."""
    all_rows = [list(row) for row in rows]
    widths = [max(len(row[i]) for row in all_rows) for i in range(len(all_rows[0]))]
    lines = []
    for row in all_rows:
        cells = [
            cell.ljust(widths[i] + _CELL_PADDING) if i < len(row) - 1 else cell
            for i, cell in enumerate(row)
        ]
        lines.append(f"{_INDENT}{''.join(cells)}".rstrip())
    return lines


def _format_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> list[str]:
    underline = ["-" * len(header) for header in headers]
    return _format_rows([headers, underline, *rows])


def render_human(description: ApplicationDescription) -> str:
    """Render a multi-section report; identical input gives identical output."""
    lines = ["About", ""]
    lines.extend(
        _format_rows(
            [["Name", description.name], ["URI", description.uri or NONE_MARKER]]
        )
    )

    lines.extend(["", "Environments", ""])
    lines.extend(
        _format_table(
            ["Name", "AccountID", "Region", "Production"],
            [
                [env.name, env.account_id, env.region, "yes" if env.prod else "no"]
                for env in description.environments
            ],
        )
    )

    lines.extend(["", "Services", ""])
    lines.extend(
        _format_table(
            ["Name", "Type"],
            [[svc.name, svc.type] for svc in description.workloads],
        )
    )

    lines.extend(["", "Pipelines", ""])
    lines.extend(
        _format_table(["Name"], [[pipeline.name] for pipeline in description.pipelines])
    )
    return "\n".join(lines) + "\n"


def render_json(description: ApplicationDescription) -> str:
    """Render the canonical JSON document followed by a newline."""
    try:
        payload = description.to_payload()
        return json.dumps(payload, ensure_ascii=False) + "\n"
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise ShowAppError(
            ErrorKind.RENDER_ERROR, "get JSON string for application", description.name
        ) from exc


def render_description(description: ApplicationDescription, *, as_json: bool) -> str:
    if as_json:
        return render_json(description)
    return render_human(description)


__all__ = ["NONE_MARKER", "render_description", "render_human", "render_json"]
