from __future__ import annotations

import logging
from collections.abc import Mapping

from rich.color import Color, ColorParseError
from rich.style import Style

from dirview.models.entry import ColorPair
from dirview.models.enums import EntryKind
from dirview.services.fs import StatResult

log = logging.getLogger(__name__)

BACKGROUND = "#1d1f21"


def _pair(color: Color | str) -> ColorPair:
    return ColorPair(
        regular=Style(color=color),
        highlight=Style(color=BACKGROUND, bgcolor=color, bold=True),
    )


DIRECTORY_COLORS = _pair("#81a2be")
EXECUTABLE_COLORS = _pair("#b5bd68")
SYMLINK_COLORS = _pair("#8abeb7")
PLAIN_COLORS = _pair("#c5c8c6")
DEFAULT_COLORS = ColorPair(regular=Style(), highlight=Style(reverse=True))


class ExtensionColors:
    """Extension to color pair lookup, parsed once from configuration.

    Keys are matched exactly (``"py"``, not ``".py"``, case-sensitive).
    Colors that ``rich`` cannot parse are dropped.
    """

    __slots__ = ("_pairs",)

    def __init__(self, pairs: Mapping[str, ColorPair] | None = None) -> None:
        self._pairs: dict[str, ColorPair] = dict(pairs or {})

    @classmethod
    def from_config(cls, table: Mapping[str, str]) -> ExtensionColors:
        pairs: dict[str, ColorPair] = {}
        for extension, value in table.items():
            try:
                color = Color.parse(str(value))
            except ColorParseError:
                log.debug("Ignoring unparseable color %r for extension %r", value, extension)
                continue
            pairs[str(extension).lstrip(".")] = _pair(color)
        return cls(pairs)

    def get(self, extension: str | None) -> ColorPair | None:
        if not extension:
            return None
        return self._pairs.get(extension)

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, extension: object) -> bool:
        return extension in self._pairs


def resolve_colors(
    stat: StatResult | None,
    extension: str | None,
    extension_colors: ExtensionColors,
) -> ColorPair:
    if stat is None:
        return DEFAULT_COLORS

    kind = stat.kind
    if kind is EntryKind.DIRECTORY:
        return DIRECTORY_COLORS
    if kind is EntryKind.FILE:
        if stat.is_executable:
            return EXECUTABLE_COLORS
        return extension_colors.get(extension) or PLAIN_COLORS
    if kind is EntryKind.SYMLINK:
        return SYMLINK_COLORS
    return DEFAULT_COLORS
