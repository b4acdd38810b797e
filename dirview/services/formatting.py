from __future__ import annotations

UNITS = ["B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB"]


def format_bytes(size: int) -> str:
    if size <= 0:
        return "0 B"
    value = float(size)
    unit = 0
    # Compare the rounded value so a unit never reads 1024.
    while round(value) >= 1024 and unit < len(UNITS) - 1:
        value /= 1024.0
        unit += 1
    return f"{round(value)} {UNITS[unit]}"
