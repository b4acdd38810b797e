from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from dirview.models.enums import VerticalAlign


@dataclass(slots=True)
class AppConfig:
    extension_colors: dict[str, str] = field(default_factory=dict)
    page_step: int = 10
    vertical_align: VerticalAlign = VerticalAlign.TOP

    def to_dict(self) -> dict[str, Any]:
        return {
            "extensionColors": dict(self.extension_colors),
            "pageStep": self.page_step,
            "verticalAlign": self.vertical_align.value,
        }


def _parse_align(value: Any, default: VerticalAlign) -> VerticalAlign:
    try:
        return VerticalAlign(str(value))
    except ValueError:
        return default


def _parse_colors(value: Any, default: dict[str, str]) -> dict[str, str]:
    if not isinstance(value, dict):
        return dict(default)
    return {str(k).lstrip("."): str(v) for k, v in value.items() if isinstance(v, str)}


def _parse_step(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        return max(1, int(value))
    except (TypeError, ValueError):
        return default


def from_dict(data: dict[str, Any], defaults: AppConfig) -> AppConfig:
    return AppConfig(
        extension_colors=_parse_colors(data.get("extensionColors", defaults.extension_colors), defaults.extension_colors),
        page_step=_parse_step(data.get("pageStep", defaults.page_step), defaults.page_step),
        vertical_align=_parse_align(data.get("verticalAlign", defaults.vertical_align.value), defaults.vertical_align),
    )
