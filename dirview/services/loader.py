from __future__ import annotations

import logging
import os

from result import Err, Ok

from dirview.config.schema import AppConfig
from dirview.models.entry import Entry
from dirview.models.enums import EntryKind
from dirview.models.listing import DirectoryView, LoadError, LoadErrorCode, LoadResult
from dirview.services.colors import ExtensionColors, resolve_colors
from dirview.services.formatting import format_bytes
from dirview.services.fs import DEFAULT_FS, DirEntry, FileSystem, StatResult

log = logging.getLogger(__name__)

BROKEN_LINK = "Broken Link"
UNREADABLE_DIR = "?"
UNKNOWN_TYPE = "Error"


def resolve_directory(path: str, fs: FileSystem) -> str | LoadError:
    """Validate and resolve a directory path.

    Returns the absolute path, or a ``LoadError`` on failure. Symlinks to
    directories are accepted.
    """
    expanded = fs.expanduser(path)
    if not fs.exists(expanded):
        return LoadError(
            code=LoadErrorCode.NOT_FOUND,
            path=expanded,
            message="Path does not exist",
        )

    resolved = fs.absolute(expanded)
    try:
        st = fs.stat(resolved, follow_symlinks=True)
    except OSError as exc:
        return LoadError(
            code=LoadErrorCode.READ_FAILED,
            path=resolved,
            message=f"Cannot stat directory: {exc}",
        )
    if not st.is_dir:
        return LoadError(
            code=LoadErrorCode.NOT_DIRECTORY,
            path=resolved,
            message="Path is not a directory",
        )
    return resolved


def _is_decodable(name: str) -> bool:
    # Undecodable bytes come through os.scandir as lone surrogates.
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _extension(name: str) -> str | None:
    ext = os.path.splitext(name)[1]
    return ext[1:] or None


class _SizeDescriber:
    __slots__ = ("_fs",)

    def __init__(self, fs: FileSystem) -> None:
        self._fs = fs

    def describe(self, path: str, st: StatResult) -> str:
        kind = st.kind
        if kind is EntryKind.DIRECTORY:
            return self._child_count(path)
        if kind is EntryKind.FILE:
            return format_bytes(st.size)
        if kind is EntryKind.SYMLINK:
            return "-> " + self._link_target(path)
        return UNKNOWN_TYPE

    def _child_count(self, path: str) -> str:
        try:
            return str(len(self._fs.listdir(path)))
        except OSError as exc:
            log.debug("Cannot count children of %s: %s", path, exc)
            return UNREADABLE_DIR

    def _link_target(self, path: str) -> str:
        # Full resolution fails for dangling and looping chains.
        try:
            self._fs.stat(path, follow_symlinks=True)
            target = os.path.join(os.path.dirname(path), self._fs.readlink(path))
            target_stat = self._fs.stat(target)
        except OSError as exc:
            log.debug("Broken link %s: %s", path, exc)
            return BROKEN_LINK
        return self.describe(target, target_stat)


def _build_entry(entry: DirEntry, describer: _SizeDescriber, extension_colors: ExtensionColors) -> Entry | None:
    """Build an ``Entry`` for one directory child, or ``None`` to skip it."""
    if not _is_decodable(entry.name):
        log.debug("Skipping undecodable name in %s", os.path.dirname(entry.path))
        return None
    st = entry.stat
    if st is None:
        log.debug("Skipping %s: metadata unavailable", entry.path)
        return None
    return Entry(
        name=entry.name,
        path=entry.path,
        kind=st.kind,
        size=describer.describe(entry.path, st),
        color=resolve_colors(st, _extension(entry.name), extension_colors),
    )


def load_directory(
    path: str,
    config: AppConfig,
    fs: FileSystem = DEFAULT_FS,
    extension_colors: ExtensionColors | None = None,
) -> LoadResult:
    resolved = resolve_directory(path, fs)
    if isinstance(resolved, LoadError):
        return Err(resolved)

    try:
        children = fs.scandir(resolved)
    except PermissionError:
        return Err(
            LoadError(
                code=LoadErrorCode.PERMISSION_DENIED,
                path=resolved,
                message="Permission denied",
            )
        )
    except OSError as exc:
        return Err(
            LoadError(
                code=LoadErrorCode.READ_FAILED,
                path=resolved,
                message=f"Cannot read directory: {exc}",
            )
        )

    if extension_colors is None:
        extension_colors = ExtensionColors.from_config(config.extension_colors)
    describer = _SizeDescriber(fs)

    view = DirectoryView(path=resolved)
    try:
        for child in children:
            entry = _build_entry(child, describer, extension_colors)
            if entry is None:
                continue
            (view.dirs if entry.is_dir else view.files).append(entry)
    except OSError as exc:
        log.debug("Listing of %s stopped early: %s", resolved, exc)

    view.dirs.sort()
    view.files.sort()
    log.info("Loaded %s: %d dirs, %d files", resolved, len(view.dirs), len(view.files))
    return Ok(view)
