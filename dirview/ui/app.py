from __future__ import annotations

import logging
import os
from typing import override

from result import Err
from rich.markup import escape
from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static

from dirview.config.schema import AppConfig
from dirview.models.enums import EntryKind
from dirview.models.listing import DirectoryView
from dirview.services.colors import ExtensionColors
from dirview.services.fs import DEFAULT_FS, FileSystem
from dirview.services.loader import load_directory
from dirview.ui.listing import DirectoryListing

log = logging.getLogger(__name__)


class HelpOverlay(ModalScreen[None]):
    CSS = """
    HelpOverlay {
        align: center middle;
        background: rgba(0,0,0,0.45);
    }
    #help-box {
        width: 60%;
        height: auto;
        background: #282a2e;
        border: solid #81a2be;
        padding: 1 2;
        color: #c5c8c6;
    }
    """

    @override
    def compose(self) -> ComposeResult:
        content = "\n".join(
            [
                "[b #81a2be]Navigation[/]",
                "  j/k or arrows: Move",
                "  gg / G / Home / End: Top/Bottom",
                "  PgUp/PgDn, Ctrl+U/Ctrl+D: Page",
                "",
                "[b #81a2be]Directories[/]",
                "  Enter / l / Right: Open directory",
                "  Backspace / h / Left: Parent directory",
                "  r: Reload",
                "",
                "[b #81a2be]Other[/]",
                "  ?: Toggle help",
                "  q / Ctrl+C: Quit",
            ]
        )
        yield Static(content, id="help-box")

    def on_key(self, event: events.Key) -> None:
        # Keys stop here while the overlay is open.
        event.stop()
        if event.key in {"escape", "q", "question_mark"}:
            self.dismiss()


class DirViewApp(App[None]):
    CSS = """
    #app-grid {
        height: 100%;
        padding: 0 1;
        background: #1d1f21;
    }
    #path-row {
        height: 1;
        color: #c5c8c6;
    }
    #separator-top, #separator-bottom {
        height: 1;
        color: #373b41;
    }
    #listing {
        height: 1fr;
        width: 1fr;
    }
    #status-row {
        height: 1;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        view: DirectoryView,
        config: AppConfig,
        fs: FileSystem = DEFAULT_FS,
    ) -> None:
        super().__init__()
        self.config = config
        self._fs = fs
        self._extension_colors = ExtensionColors.from_config(config.extension_colors)
        self._initial_view = view
        self.pending_g = False
        self.last_error: str = ""

    @override
    def compose(self) -> ComposeResult:
        yield Container(
            Static(id="path-row"),
            Static("─" * 200, id="separator-top"),
            DirectoryListing(self._initial_view, align=self.config.vertical_align, id="listing"),
            Static("─" * 200, id="separator-bottom"),
            Static(id="status-row"),
            id="app-grid",
        )

    @property
    def listing(self) -> DirectoryListing:
        return self.query_one("#listing", DirectoryListing)

    def on_mount(self) -> None:
        self._render_header_row()
        self._render_status_row()

    def _render_header_row(self) -> None:
        path = self.listing.view.path
        self.query_one("#path-row", Static).update(Text.from_markup(f"[#81a2be]Path:[/] {escape(path)}"))

    def _render_status_row(self) -> None:
        listing = self.listing
        total = listing.view.total
        position = listing.controller.focus + 1 if total else 0
        left = f"{position}/{total}"
        entry = listing.focused_entry
        if entry is not None:
            left += f" | {escape(entry.name)}: {escape(entry.size)}"
        if self.last_error:
            status = f"[#969896]{left}[/]  [#cc6666]{escape(self.last_error)}[/]"
        else:
            status = f"[#969896]{left}    q quit | ? help | Enter open | Backspace parent[/]"
        self.query_one("#status-row", Static).update(Text.from_markup(status))

    def _refresh_all(self) -> None:
        self._render_header_row()
        self._render_status_row()

    def navigate(self, path: str, focus_path: str | None = None) -> bool:
        """Load *path* into the listing; on failure keep the current view."""
        result = load_directory(path, self.config, fs=self._fs, extension_colors=self._extension_colors)
        if isinstance(result, Err):
            error = result.unwrap_err()
            log.info("Cannot open %s: %s", error.path, error.message)
            self.last_error = f"{error.path}: {error.message}"
            self.bell()
            self._render_status_row()
            return False
        self.last_error = ""
        self.listing.show(result.unwrap(), focus_path=focus_path)
        self._refresh_all()
        return True

    def enter_focused(self) -> None:
        entry = self.listing.focused_entry
        if entry is None or entry.kind not in {EntryKind.DIRECTORY, EntryKind.SYMLINK}:
            return
        self.navigate(entry.path)

    def go_parent(self) -> None:
        current = self.listing.view.path
        parent = os.path.dirname(current)
        if not parent or parent == current:
            return
        self.navigate(parent, focus_path=current)

    def reload(self) -> None:
        entry = self.listing.focused_entry
        self.navigate(self.listing.view.path, focus_path=entry.path if entry is not None else None)

    def _move(self, delta: int) -> None:
        self.listing.move_by(delta)
        self._render_status_row()

    def _move_top(self) -> None:
        self.listing.move_to_start()
        self._render_status_row()

    def _move_bottom(self) -> None:
        self.listing.move_to_end()
        self._render_status_row()

    def _handle_global_key(self, key: str) -> bool:
        if key in {"q", "ctrl+c"}:
            self.exit()
            return True
        if key == "question_mark":
            self.push_screen(HelpOverlay())
            return True
        if key == "r":
            self.reload()
            return True
        return False

    def _handle_navigation_key(self, key: str, char: str) -> bool:
        page = self.config.page_step
        if key in {"j", "down"}:
            self._move(1)
            return True
        if key in {"k", "up"}:
            self._move(-1)
            return True
        if key in {"ctrl+d", "pagedown"}:
            self._move(page)
            return True
        if key in {"ctrl+u", "pageup"}:
            self._move(-page)
            return True
        if key in {"home", "ctrl+home"}:
            self._move_top()
            return True
        if key in {"end", "ctrl+end"}:
            self._move_bottom()
            return True
        if key == "g" or char == "g":
            if self.pending_g:
                self.pending_g = False
                self._move_top()
            else:
                self.pending_g = True
                self.set_timer(0.5, lambda: setattr(self, "pending_g", False))
            return True
        if key in {"G", "shift+g"} or char == "G":
            self._move_bottom()
            return True
        return False

    def _handle_directory_key(self, key: str) -> bool:
        if key in {"enter", "l", "right"}:
            self.enter_focused()
            return True
        if key in {"backspace", "h", "left"}:
            self.go_parent()
            return True
        return False

    @override
    def on_key(self, event: events.Key) -> None:  # type: ignore[override]
        if isinstance(self.screen, ModalScreen):
            return
        key = event.key
        char = event.character or ""

        if self._handle_global_key(key):
            return
        if self._handle_navigation_key(key, char):
            return
        self._handle_directory_key(key)
