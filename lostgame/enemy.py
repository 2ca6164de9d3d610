"""Walking enemies that turn around at walls."""

from __future__ import annotations

import pygame

from lostgame.base import CELL_SIZE, Rect, visible_columns

_FRAME_SIZE = 40
_FRAME_COUNT = 2
_FALL_SPEED = 8


class Enemy:
    """An enemy that walks, falls and reverses when it hits a wall."""

    def __init__(self, image, x, y, xvel, yvel):
        self.image = image
        self.rect = Rect(x, y, image.get_width() // 2, image.get_height())
        self.xvel = xvel
        self.yvel = yvel
        self.on_ground = False
        self.frame = 0.0
        self._clips = [
            pygame.Rect(i * _FRAME_SIZE, 0, _FRAME_SIZE, _FRAME_SIZE) for i in range(_FRAME_COUNT)
        ]

    def frame_index(self) -> int:
        """Index of the animation frame to draw."""
        return min(int(self.frame + 0.7), _FRAME_COUNT - 1)

    def move(self, tiles, view: Rect) -> None:
        """Advance one step, colliding with the solid tiles of the map."""
        width = len(tiles[0]) if tiles else 0
        columns = visible_columns(view, width, CELL_SIZE, 2)
        supported = False
        for i, row in enumerate(tiles):
            for j in columns:
                if row[j] == 0:
                    continue
                cell = Rect(j * CELL_SIZE, i * CELL_SIZE, CELL_SIZE, CELL_SIZE)
                if not self.rect.collides(cell):
                    continue
                if cell.y >= self.rect.y + self.rect.h - 8:
                    self.on_ground = True
                    self.yvel = 0
                    supported = True
                else:
                    self.xvel = -self.xvel
        if not supported:
            self.yvel = _FALL_SPEED

        self.rect.x += self.xvel
        self.rect.y += self.yvel
        self.frame += 0.2
        if self.frame >= 2.1:
            self.frame = 0.0

    def show(self, screen, view: Rect) -> None:
        """Draw the enemy relative to the view."""
        screen.blit(self.image, (self.rect.x - view.x, self.rect.y), self._clips[self.frame_index()])