from __future__ import annotations

from dataclasses import dataclass, field

from rich.style import Style

from dirview.models.enums import EntryKind


@dataclass(slots=True, frozen=True)
class ColorPair:
    regular: Style
    highlight: Style


@dataclass(slots=True, frozen=True, order=True)
class Entry:
    name: str
    path: str
    kind: EntryKind = field(compare=False)
    size: str = field(compare=False)
    color: ColorPair = field(compare=False)

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY
