"""The player-controlled hero."""

from __future__ import annotations

from enum import Enum

import pygame

from lostgame.base import CELL_SIZE, Rect, visible_columns

_FRAME_SIZE = 50
_FRAME_COUNT = 4
_FALL_SPEED = 8


class Direction(str, Enum):
    """Which way the hero faces."""

    RIGHT = "r"
    LEFT = "l"


class Player:
    """The hero: walks, falls, jumps and loses health to enemies."""

    def __init__(self, image):
        self.image = image
        self.rect = Rect(0, 0, _FRAME_SIZE, _FRAME_SIZE)
        self.xvel = 0
        self.yvel = 0
        self.on_ground = False
        self.jumping = False
        self.direction = Direction.RIGHT
        self.frame = 0.0
        self.moving = False
        self.health = 10
        self._clips = [
            pygame.Rect(i * _FRAME_SIZE, 0, _FRAME_SIZE, _FRAME_SIZE) for i in range(_FRAME_COUNT)
        ]

    def frame_index(self) -> int:
        """Index of the animation frame to draw."""
        return min(int(self.frame + 0.5), _FRAME_COUNT - 1)

    def set_direction(self, direction) -> None:
        """Face the given direction; unknown directions are ignored."""
        try:
            direction = Direction(direction)
        except ValueError:
            return
        if direction is self.direction:
            return
        self.direction = direction
        self.frame = 0.0 if direction is Direction.RIGHT else 1.2

    def jump(self) -> None:
        """Start a jump when standing on the ground."""
        if self.on_ground and not self.jumping:
            self.jumping = True
            self.on_ground = False
            self.xvel = -15
            self.rect.y -= 5

    def move(self, tiles, view: Rect) -> None:
        """Advance one step, colliding with the solid tiles of the map."""
        width = len(tiles[0]) if tiles else 0
        columns = visible_columns(view, width, CELL_SIZE, 0)
        box = self.rect
        touched = False
        for i, row in enumerate(tiles):
            for j in columns:
                if row[j] == 0:
                    continue
                cell = Rect(j * CELL_SIZE - view.x, i * CELL_SIZE, CELL_SIZE, CELL_SIZE)
                if not box.collides(cell):
                    continue
                touched = True
                if cell.y >= box.y + box.h - 16:
                    self.on_ground = True
                    self.yvel = 0
                elif cell.y + cell.h <= box.y + 16:
                    box.x += 1
                    self.yvel = 30
                if (
                    box.x + box.w >= cell.x - 8
                    and box.y + box.h >= cell.y + 9
                    and box.x + box.w <= cell.x + 30
                ):
                    self.xvel = 0
                    box.x -= 1
                elif box.x <= cell.x + cell.w and box.y + box.h >= cell.y + 9:
                    self.xvel = 0
                    box.x += 1

        if not touched and not self.jumping:
            self.yvel = _FALL_SPEED
        if self.jumping and self.yvel < _FALL_SPEED:
            self.yvel += 1
        else:
            self.jumping = False

        box.x += self.xvel
        box.y += self.yvel
        if self.moving:
            self.frame += 0.1
            if self.direction is Direction.RIGHT and self.frame >= 1.4:
                self.frame = 0.0
            elif self.direction is Direction.LEFT and self.frame >= 3.4:
                self.frame = 2.75

    def show(self, screen) -> None:
        """Draw the hero at its screen position."""
        screen.blit(self.image, (self.rect.x, self.rect.y), self._clips[self.frame_index()])