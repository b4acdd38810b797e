from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from result import Result

from dirview.models.entry import Entry


@dataclass(slots=True)
class DirectoryView:
    path: str
    dirs: list[Entry] = field(default_factory=list)
    files: list[Entry] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.dirs) + len(self.files)

    def entries(self) -> Iterator[Entry]:
        """Iterate the combined display order: directories, then files."""
        yield from self.dirs
        yield from self.files

    def entry_at(self, index: int) -> Entry | None:
        if index < 0:
            return None
        if index < len(self.dirs):
            return self.dirs[index]
        index -= len(self.dirs)
        if index < len(self.files):
            return self.files[index]
        return None

    def index_of(self, path: str) -> int | None:
        for index, entry in enumerate(self.entries()):
            if entry.path == path:
                return index
        return None


class LoadErrorCode(str, Enum):
    NOT_FOUND = "not_found"
    NOT_DIRECTORY = "not_directory"
    PERMISSION_DENIED = "permission_denied"
    READ_FAILED = "read_failed"


@dataclass(slots=True, frozen=True)
class LoadError:
    code: LoadErrorCode
    path: str
    message: str


LoadResult = Result[DirectoryView, LoadError]
