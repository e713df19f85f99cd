#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/parsers/tables.py
"""GFM pipe tables that keep ragged rows.

mistune's bundled ``table`` plugin rejects a table as soon as one body row
has a different number of cells from the header, and the whole block falls
back to a paragraph. Documentation tables are passed through as written, so
this plugin registers replacement ``table`` and ``nptable`` rules that keep
every row's cells. Only the header and the delimiter row must agree.

The produced tokens have the same shape as mistune's::

    {"type": "table", "children": [
        {"type": "table_head", "children": [<table_cell>...]},
        {"type": "table_body", "children": [{"type": "table_row", "children": [<table_cell>...]}...]},
    ]}

"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Callable, Match, Optional

if TYPE_CHECKING:
    from mistune import Markdown
    from mistune.block_parser import BlockParser
    from mistune.core import BlockState

# Leading and trailing pipes
TABLE_PATTERN = r"^ {0,3}\|[^\n]*\|[ \t]*(?:\n|$)"
# No outer pipes, at least one inner pipe
NP_TABLE_PATTERN = r"^ {0,3}\S[^\n]*\|[^\n]*(?:\n|$)"

_DELIMITER_CELL = re.compile(r"^:?-+:?$")


def _strip_pipe_row(line: str) -> Optional[str]:
    text = line.rstrip("\n").rstrip(" \t").lstrip(" ")
    if len(text) < 2 or not text.startswith("|") or not text.endswith("|"):
        return None
    return text[1:-1]


def _strip_bare_row(line: str) -> Optional[str]:
    text = line.rstrip("\n").rstrip(" \t")
    if not text.strip() or "|" not in text:
        return None
    return text


def split_cells(text: str) -> list[str]:
    """Split a table row on unescaped pipes and strip each cell."""
    cells = []
    start = 0
    backslashes = 0
    for pos, char in enumerate(text):
        if char == "|" and backslashes % 2 == 0:
            cells.append(text[start:pos].strip())
            start = pos + 1
        backslashes = backslashes + 1 if char == "\\" else 0
    cells.append(text[start:].strip())
    return cells


def _alignment(cell: str) -> Optional[str]:
    if cell.startswith(":") and cell.endswith(":"):
        return "center"
    if cell.startswith(":"):
        return "left"
    if cell.endswith(":"):
        return "right"
    return None


def _parse_delimiter_row(cells: list[str]) -> Optional[list[Optional[str]]]:
    if not all(_DELIMITER_CELL.match(cell) for cell in cells):
        return None
    return [_alignment(cell) for cell in cells]


def _cell_token(text: str, align: Optional[str], head: bool) -> dict[str, Any]:
    return {"type": "table_cell", "text": text, "attrs": {"align": align, "head": head}}


def _row_cells(cells: list[str], aligns: list[Optional[str]], head: bool) -> list[dict[str, Any]]:
    # Cells past the delimiter row's width have no alignment
    return [_cell_token(text, aligns[i] if i < len(aligns) else None, head) for i, text in enumerate(cells)]


def _make_table_rule(strip_row: Callable[[str], Optional[str]]) -> Callable[..., Optional[int]]:
    def parse(block: BlockParser, m: Match[str], state: BlockState) -> Optional[int]:
        header = strip_row(m.group(0))
        if header is None:
            return None

        pos = m.end()
        delimiter_line = state.get_line(pos)
        delimiter = strip_row(delimiter_line)
        if delimiter is None:
            return None

        headers = split_cells(header)
        aligns = _parse_delimiter_row(split_cells(delimiter))
        if aligns is None or len(aligns) != len(headers):
            return None
        pos += len(delimiter_line)

        rows = []
        while pos < state.cursor_max:
            line = state.get_line(pos)
            text = strip_row(line)
            if text is None:
                break
            rows.append({"type": "table_row", "children": _row_cells(split_cells(text), aligns, head=False)})
            pos += len(line)

        state.append_token(
            {
                "type": "table",
                "children": [
                    {"type": "table_head", "children": _row_cells(headers, aligns, head=True)},
                    {"type": "table_body", "children": rows},
                ],
            }
        )
        return pos

    return parse


parse_table = _make_table_rule(_strip_pipe_row)
parse_nptable = _make_table_rule(_strip_bare_row)


def ragged_table(md: Markdown) -> None:
    """mistune plugin registering pipe tables that accept ragged rows."""
    md.block.register("table", TABLE_PATTERN, parse_table, before="paragraph")
    md.block.register("nptable", NP_TABLE_PATTERN, parse_nptable, before="paragraph")
