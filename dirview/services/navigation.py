from __future__ import annotations

from dirview.models.listing import DirectoryView


class FocusController:
    """Focus cursor and scroll window over one ``DirectoryView``.

    ``focus`` indexes the combined ``dirs ++ files`` order. Moves never wrap
    and are no-ops on an empty view. ``last_window_start`` only changes through
    :meth:`settle_window`, which the UI calls after a move and before drawing.
    """

    __slots__ = ("view", "focus", "last_window_start")

    def __init__(self, view: DirectoryView) -> None:
        self.view = view
        self.focus = 0
        self.last_window_start = 0

    @property
    def total(self) -> int:
        return self.view.total

    def _set_focus(self, index: int) -> None:
        self.focus = max(0, min(self.total - 1, index))

    def move_by(self, delta: int) -> None:
        if self.total == 0:
            return
        self._set_focus(self.focus + delta)

    def move_to_start(self) -> None:
        if self.total == 0:
            return
        self.focus = 0

    def move_to_end(self) -> None:
        if self.total == 0:
            return
        self.focus = self.total - 1

    def move_to_path(self, path: str) -> bool:
        index = self.view.index_of(path)
        if index is None:
            return False
        self.focus = index
        return True

    def window_start(self, height: int) -> int:
        height = max(1, height)
        last = self.last_window_start
        if self.focus < last:
            return self.focus
        if self.focus > last + height - 1:
            return self.focus - height + 1
        return last

    def settle_window(self, height: int) -> int:
        start = self.window_start(height)
        self.last_window_start = start
        return start
