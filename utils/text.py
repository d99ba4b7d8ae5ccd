"""
Utility to render a leaderboard table as aligned plain text for chat.
"""

from __future__ import annotations

from typing import List, Sequence

from dto.leaderboard import CellValue


def _format_cell(value: CellValue) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render_table_text(
    headers: Sequence[CellValue],
    rows: Sequence[Sequence[CellValue]],
    code_block: bool = True,
) -> str:
    """
    Render *headers* and *rows* as left-aligned columns separated by two
    spaces.  Absent cells render blank.

    With *code_block* the result is wrapped in a Markdown code fence so
    chat clients keep the alignment.
    """
    table: List[List[str]] = [[_format_cell(v) for v in headers]]
    table.extend([_format_cell(v) for v in row] for row in rows)

    n_cols = max(len(r) for r in table)
    widths = [0] * n_cols
    for r in table:
        for i, text in enumerate(r):
            widths[i] = max(widths[i], len(text))

    lines: List[str] = []
    for r in table:
        padded = [text.ljust(widths[i]) for i, text in enumerate(r)]
        lines.append("  ".join(padded).rstrip())
    if headers:
        lines.insert(1, "  ".join("-" * w for w in widths))

    body = "\n".join(lines)
    if code_block:
        return f"```\n{body}\n```"
    return body
