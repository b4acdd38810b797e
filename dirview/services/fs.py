from __future__ import annotations

import os
import stat as statmod
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Protocol

from dirview.models.enums import EntryKind


@dataclass(slots=True, frozen=True)
class StatResult:
    size: int
    mode: int

    @property
    def kind(self) -> EntryKind:
        if statmod.S_ISDIR(self.mode):
            return EntryKind.DIRECTORY
        if statmod.S_ISREG(self.mode):
            return EntryKind.FILE
        if statmod.S_ISLNK(self.mode):
            return EntryKind.SYMLINK
        return EntryKind.OTHER

    @property
    def is_dir(self) -> bool:
        return statmod.S_ISDIR(self.mode)

    @property
    def is_executable(self) -> bool:
        return bool(self.mode & 0o111)


@dataclass(slots=True, frozen=True)
class DirEntry:
    path: str
    name: str
    stat: StatResult | None = None


class FileSystem(Protocol):
    def expanduser(self, path: str) -> str: ...

    def exists(self, path: str) -> bool: ...

    def absolute(self, path: str) -> str: ...

    def stat(self, path: str, follow_symlinks: bool = False) -> StatResult: ...

    def scandir(self, path: str) -> Iterable[DirEntry]: ...

    def listdir(self, path: str) -> list[str]: ...

    def readlink(self, path: str) -> str: ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str: ...


def _to_stat_result(st: os.stat_result) -> StatResult:
    return StatResult(size=st.st_size, mode=st.st_mode)


class OsFileSystem:
    def expanduser(self, path: str) -> str:
        return str(Path(path).expanduser())

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def absolute(self, path: str) -> str:
        return os.path.abspath(path)

    def stat(self, path: str, follow_symlinks: bool = False) -> StatResult:
        return _to_stat_result(os.stat(path, follow_symlinks=follow_symlinks))

    def scandir(self, path: str) -> Iterable[DirEntry]:
        # os.scandir opens eagerly so a bad root raises here, not on iteration.
        entries = os.scandir(path)
        return self._iter_entries(entries)

    @staticmethod
    def _iter_entries(entries: Iterable[os.DirEntry[str]]) -> Iterable[DirEntry]:
        with entries:  # type: ignore[attr-defined]
            for e in entries:
                try:
                    sr: StatResult | None = _to_stat_result(e.stat(follow_symlinks=False))
                except OSError:
                    sr = None
                yield DirEntry(path=e.path, name=e.name, stat=sr)

    def listdir(self, path: str) -> list[str]:
        return os.listdir(path)

    def readlink(self, path: str) -> str:
        return os.readlink(path)

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        return Path(path).read_text(encoding=encoding)


DEFAULT_FS: FileSystem = OsFileSystem()
