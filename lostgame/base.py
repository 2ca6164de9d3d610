"""Geometry shared by the level, the player and the enemies."""

from __future__ import annotations

from dataclasses import dataclass

TILE_SIZE = 75
CELL_SIZE = 50


@dataclass
class Rect:
    """An axis-aligned rectangle in pixels."""

    x: int
    y: int
    w: int
    h: int

    def collides(self, other: Rect) -> bool:
        """Return True when the two rectangles overlap; touching edges do not count."""
        return not (
            self.y >= other.y + other.h
            or self.x >= other.x + other.w
            or self.y + self.h <= other.y
            or self.x + self.w <= other.x
        )

    def moved(self, dx: int, dy: int) -> Rect:
        """Return a copy shifted by (dx, dy)."""
        return Rect(self.x + dx, self.y + dy, self.w, self.h)


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


def visible_columns(view: Rect, map_width: int, divisor: int, extra: int) -> range:
    """Columns of the map that lie around the visible window.

    The start column is measured in TILE_SIZE units, the end column in
    ``divisor`` units plus ``extra``; both are clamped to the map.
    """
    right = view.x + view.w
    start = _trunc_div(view.x - _trunc_mod(view.x, TILE_SIZE), TILE_SIZE)
    end = _trunc_div(right + TILE_SIZE - _trunc_mod(right, TILE_SIZE), divisor) + extra
    return range(max(start, 0), min(end, map_width))