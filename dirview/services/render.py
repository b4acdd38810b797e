from __future__ import annotations

from rich.cells import cell_len, set_cell_size
from rich.text import Text

from dirview.models.entry import Entry
from dirview.models.enums import VerticalAlign
from dirview.models.listing import DirectoryView


def required_size(view: DirectoryView) -> tuple[int, int]:
    """Natural ``(width, height)`` of the listing: longest name by total rows."""
    width = max((cell_len(entry.name) for entry in view.entries()), default=1)
    return max(1, width), max(1, view.total)


def content_offset(view: DirectoryView, height: int, align: VerticalAlign) -> int:
    return align.offset(view.total, height)


def format_row(entry: Entry, width: int, highlighted: bool) -> Text:
    style = entry.color.highlight if highlighted else entry.color.regular
    size_w = cell_len(entry.size)
    name_w = width - size_w - 1
    if name_w < 1:
        # Too narrow for both columns; keep the name.
        return Text(set_cell_size(entry.name, max(0, width)), style=style)
    name = entry.name
    if cell_len(name) > name_w:
        name = set_cell_size(name, name_w - 1) + "…" if name_w > 1 else set_cell_size(name, name_w)
    pad = width - cell_len(name) - size_w
    return Text(name + " " * pad + entry.size, style=style)


def render_rows(
    view: DirectoryView,
    focus: int,
    window_start: int,
    width: int,
    height: int,
    align: VerticalAlign = VerticalAlign.TOP,
) -> list[Text]:
    """Produce exactly *height* rows for the visible part of *view*."""
    offset = content_offset(view, height, align)
    rows: list[Text] = [Text("") for _ in range(offset)]
    for row in range(height - offset):
        index = window_start + row
        entry = view.entry_at(index)
        if entry is None:
            rows.append(Text(""))
            continue
        rows.append(format_row(entry, width, index == focus))
    return rows
