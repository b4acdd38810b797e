from __future__ import annotations

from typing import override

from rich.text import Text
from textual.geometry import Size
from textual.widgets import Static

from dirview.models.entry import Entry
from dirview.models.enums import VerticalAlign
from dirview.models.listing import DirectoryView
from dirview.services.navigation import FocusController
from dirview.services.render import content_offset, render_rows, required_size


class DirectoryListing(Static):
    """Draws one ``DirectoryView`` and owns its ``FocusController``.

    Every state change goes through :meth:`redraw`, which settles the scroll
    window for the current height and then pushes the rendered rows.
    """

    def __init__(
        self,
        view: DirectoryView,
        align: VerticalAlign = VerticalAlign.TOP,
        id: str | None = None,  # noqa: A002
    ) -> None:
        super().__init__(id=id)
        self._align = align
        self.controller = FocusController(view)

    @property
    def view(self) -> DirectoryView:
        return self.controller.view

    @property
    def focused_entry(self) -> Entry | None:
        return self.view.entry_at(self.controller.focus)

    def show(self, view: DirectoryView, focus_path: str | None = None) -> None:
        self.controller = FocusController(view)
        if focus_path is not None:
            self.controller.move_to_path(focus_path)
        self.redraw()

    def move_by(self, delta: int) -> None:
        self.controller.move_by(delta)
        self.redraw()

    def move_to_start(self) -> None:
        self.controller.move_to_start()
        self.redraw()

    def move_to_end(self) -> None:
        self.controller.move_to_end()
        self.redraw()

    def redraw(self) -> None:
        width, height = self.size.width, self.size.height
        if width <= 0 or height <= 0:
            return
        offset = content_offset(self.view, height, self._align)
        start = self.controller.settle_window(height - offset)
        rows = render_rows(self.view, self.controller.focus, start, width, height, self._align)
        self.update(Text("\n").join(rows))

    def on_mount(self) -> None:
        self.redraw()

    def on_resize(self) -> None:
        self.redraw()

    @override
    def get_content_width(self, container: Size, viewport: Size) -> int:
        return required_size(self.view)[0]

    @override
    def get_content_height(self, container: Size, viewport: Size, width: int) -> int:
        return required_size(self.view)[1]
