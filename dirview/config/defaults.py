from __future__ import annotations

from dirview.config.schema import AppConfig


def default_config() -> AppConfig:
    extension_colors = {
        # source
        "py": "#f0c674",
        "rs": "#de935f",
        "c": "#de935f",
        "h": "#de935f",
        "js": "#f0c674",
        "ts": "#f0c674",
        "sh": "#b5bd68",
        # docs and data
        "md": "#b294bb",
        "txt": "#c5c8c6",
        "json": "#8abeb7",
        "toml": "#8abeb7",
        "yaml": "#8abeb7",
        "yml": "#8abeb7",
        # archives
        "zip": "#cc6666",
        "tar": "#cc6666",
        "gz": "#cc6666",
        "xz": "#cc6666",
        "7z": "#cc6666",
        # media
        "png": "#b294bb",
        "jpg": "#b294bb",
        "jpeg": "#b294bb",
        "gif": "#b294bb",
        "svg": "#b294bb",
        "mp3": "#b294bb",
        "mp4": "#b294bb",
    }
    return AppConfig(extension_colors=extension_colors)
