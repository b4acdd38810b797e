from __future__ import annotations

from result import Err, Ok

from dirview.config.defaults import default_config
from dirview.config.schema import AppConfig
from dirview.models.enums import EntryKind
from dirview.models.listing import DirectoryView, LoadErrorCode
from dirview.services.colors import (
    DEFAULT_COLORS,
    DIRECTORY_COLORS,
    EXECUTABLE_COLORS,
    PLAIN_COLORS,
    SYMLINK_COLORS,
    ExtensionColors,
)
from dirview.services.loader import load_directory
from tests.fs_mock import MemoryFileSystem


def _load(fs: MemoryFileSystem, path: str = "/root", config: AppConfig | None = None) -> DirectoryView:
    result = load_directory(path, config or AppConfig(), fs=fs)
    assert isinstance(result, Ok)
    return result.unwrap()


def _sample_fs() -> MemoryFileSystem:
    return (
        MemoryFileSystem()
        .add_dir("/root")
        .add_file("/root/b.txt", size=10)
        .add_dir("/root/a")
        .add_file("/root/a/one", size=1)
        .add_file("/root/a/two", size=2)
        .add_file("/root/c.txt", size=10, mode=0o755)
    )


def test_sample_directory_order_sizes_and_colors() -> None:
    view = _load(_sample_fs())

    assert [e.name for e in view.entries()] == ["a", "b.txt", "c.txt"]
    sizes = {e.name: e.size for e in view.entries()}
    assert sizes == {"a": "2", "b.txt": "10 B", "c.txt": "10 B"}

    colors = {e.name: e.color for e in view.entries()}
    assert colors["a"] == DIRECTORY_COLORS
    assert colors["b.txt"] == PLAIN_COLORS
    assert colors["c.txt"] == EXECUTABLE_COLORS


def test_dirs_precede_files_regardless_of_name() -> None:
    fs = (
        MemoryFileSystem()
        .add_dir("/root")
        .add_file("/root/Alpha", size=1)
        .add_file("/root/alpha", size=1)
        .add_dir("/root/zeta")
        .add_dir("/root/Beta")
    )
    view = _load(fs)

    assert [e.name for e in view.dirs] == ["Beta", "zeta"]
    # case-sensitive: uppercase sorts before lowercase
    assert [e.name for e in view.files] == ["Alpha", "alpha"]
    assert [e.name for e in view.entries()] == ["Beta", "zeta", "Alpha", "alpha"]


def test_broken_symlink_reports_broken_link() -> None:
    fs = MemoryFileSystem().add_dir("/root").add_symlink("/root/link", "missing_target")
    view = _load(fs)

    (entry,) = view.files
    assert entry.kind is EntryKind.SYMLINK
    assert entry.size == "-> Broken Link"
    assert entry.color == SYMLINK_COLORS


def test_symlink_chain_is_followed() -> None:
    fs = (
        MemoryFileSystem()
        .add_dir("/root")
        .add_file("/root/data.bin", size=4096)
        .add_symlink("/root/first", "data.bin")
        .add_symlink("/root/second", "/root/first")
    )
    view = _load(fs)
    sizes = {e.name: e.size for e in view.files}

    assert sizes["first"] == "-> 4 KiB"
    assert sizes["second"] == "-> -> 4 KiB"


def test_symlink_loop_is_broken() -> None:
    fs = MemoryFileSystem().add_dir("/root").add_symlink("/root/x", "y").add_symlink("/root/y", "x")
    view = _load(fs)

    assert [e.size for e in view.files] == ["-> Broken Link", "-> Broken Link"]


def test_symlink_to_directory_is_listed_with_files() -> None:
    fs = (
        MemoryFileSystem()
        .add_dir("/root")
        .add_dir("/root/real")
        .add_file("/root/real/f", size=3)
        .add_symlink("/root/alias", "real")
    )
    view = _load(fs)

    assert [e.name for e in view.dirs] == ["real"]
    assert [e.name for e in view.files] == ["alias"]
    assert view.files[0].size == "-> 1"


def test_unreadable_subdirectory_has_unknown_count() -> None:
    fs = MemoryFileSystem().add_dir("/root").add_dir("/root/locked", readable=False)
    view = _load(fs)

    assert view.dirs[0].size == "?"
    assert view.dirs[0].color == DIRECTORY_COLORS


def test_special_file_reports_error_size() -> None:
    fs = MemoryFileSystem().add_dir("/root").add_fifo("/root/pipe")
    view = _load(fs)

    (entry,) = view.files
    assert entry.kind is EntryKind.OTHER
    assert entry.size == "Error"
    assert entry.color == DEFAULT_COLORS


def test_entry_without_metadata_is_skipped() -> None:
    fs = MemoryFileSystem().add_dir("/root").add_file("/root/ok", size=1).add_file("/root/gone", size=1)
    fs.broken_stat.add("/root/gone")
    view = _load(fs)

    assert [e.name for e in view.files] == ["ok"]


def test_undecodable_name_is_skipped() -> None:
    fs = MemoryFileSystem().add_dir("/root").add_file("/root/fine.txt", size=1).add_file("/root/bad\udcff", size=1)
    view = _load(fs)

    assert [e.name for e in view.files] == ["fine.txt"]


def test_extension_colors_apply_to_plain_files_only() -> None:
    fs = (
        MemoryFileSystem()
        .add_dir("/root")
        .add_file("/root/script.py", size=1)
        .add_file("/root/tool.py", size=1, mode=0o700)
        .add_file("/root/notes.PY", size=1)
    )
    config = AppConfig(extension_colors={"py": "red"})
    view = _load(fs, config=config)
    colors = {e.name: e.color for e in view.files}

    assert colors["script.py"] == ExtensionColors.from_config({"py": "red"}).get("py")
    assert colors["tool.py"] == EXECUTABLE_COLORS
    assert colors["notes.PY"] == PLAIN_COLORS


def test_loading_twice_is_identical() -> None:
    fs = _sample_fs().add_symlink("/root/link", "b.txt")
    config = default_config()

    first = _load(fs, config=config)
    second = _load(fs, config=config)

    assert first.dirs == second.dirs
    assert first.files == second.files
    assert [e.size for e in first.entries()] == [e.size for e in second.entries()]


def test_empty_directory_loads() -> None:
    view = _load(MemoryFileSystem().add_dir("/root"))

    assert view.total == 0
    assert view.entry_at(0) is None


def test_missing_path_returns_error() -> None:
    result = load_directory("/does-not-exist", AppConfig(), fs=MemoryFileSystem())

    assert isinstance(result, Err)
    error = result.unwrap_err()
    assert error.code is LoadErrorCode.NOT_FOUND
    assert "does not exist" in error.message.lower()


def test_file_path_returns_not_directory() -> None:
    fs = MemoryFileSystem().add_file("/root/file.txt", size=1)
    result = load_directory("/root/file.txt", AppConfig(), fs=fs)

    assert isinstance(result, Err)
    assert result.unwrap_err().code is LoadErrorCode.NOT_DIRECTORY


def test_unreadable_root_returns_permission_denied() -> None:
    fs = MemoryFileSystem().add_dir("/root", readable=False)
    result = load_directory("/root", AppConfig(), fs=fs)

    assert isinstance(result, Err)
    assert result.unwrap_err().code is LoadErrorCode.PERMISSION_DENIED


def test_symlinked_root_is_browsable() -> None:
    fs = (
        MemoryFileSystem()
        .add_dir("/real")
        .add_file("/real/f", size=1)
        .add_file("/real/sub/x", size=1)
        .add_symlink("/link", "/real")
    )
    view = _load(fs, path="/link")

    assert view.path == "/link"
    assert [e.path for e in view.entries()] == ["/link/sub", "/link/f"]
    assert view.dirs[0].size == "1"


def test_child_counts_do_not_stat_grandchildren() -> None:
    fs = _sample_fs()
    scanned: list[str] = []
    original_scandir = fs.scandir

    def recording_scandir(path: str):  # type: ignore[no-untyped-def]
        scanned.append(path)
        return original_scandir(path)

    fs.scandir = recording_scandir  # type: ignore[method-assign]
    view = _load(fs)

    assert scanned == ["/root"]
    assert view.dirs[0].size == "2"
