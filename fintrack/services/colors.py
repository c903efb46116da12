from __future__ import annotations

from collections.abc import Sequence

UNRESOLVED_CATEGORY_NAME = "Other"


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _utf16_units(text: str) -> list[int]:
    encoded = text.encode("utf-16-le")
    return [int.from_bytes(encoded[i : i + 2], "little") for i in range(0, len(encoded), 2)]


def name_hash(name: str) -> int:
    """Hash a category name with the ``hash * 31 + code`` recurrence.

    Only the shifted term wraps to a signed 32-bit integer; the running value
    itself is kept exact. This matches the colors already produced for stored
    categories, so a category keeps its chart color across releases.
    """
    value = 0
    for unit in _utf16_units(name):
        shifted = _to_int32(_to_int32(value) << 5)
        value = unit + (shifted - value)
    return value


class ColorAssigner:
    def __init__(self, palette: Sequence[str]) -> None:
        if not palette:
            raise ValueError("Color palette must not be empty")
        self._palette = tuple(palette)

    @property
    def palette(self) -> tuple[str, ...]:
        return self._palette

    def assign(self, name: str | None) -> str:
        key = name or UNRESOLVED_CATEGORY_NAME
        return self._palette[abs(name_hash(key)) % len(self._palette)]
