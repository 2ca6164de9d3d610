"""Level loading, the main loop and the pause menu."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from lostgame.base import CELL_SIZE, TILE_SIZE, Rect, visible_columns
from lostgame.enemy import Enemy
from lostgame.player import Direction, Player

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
BACKGROUND_WIDTH = 2000
FRAME_MS = 1000 // 30
MENU_ITEMS = ("Jouer", "Exit")
ENEMY_SPAWN = -1
FINISH_TILE = 2
MAX_TILE = 3


class MapFormatError(ValueError):
    """A map file is truncated or holds something other than integers."""


@dataclass
class Level:
    """A parsed map: tile rows, enemy spawn points and the finish cell."""

    tiles: list[list[int]]
    enemy_spawns: list[tuple[int, int]] = field(default_factory=list)
    finish: Rect = field(default_factory=lambda: Rect(0, 0, CELL_SIZE, CELL_SIZE))


def parse_map(text: str) -> Level:
    """Parse map text: width, height, then width*height integer cells."""
    tokens = iter(text.split())

    def next_int(what: str) -> int:
        try:
            token = next(tokens)
        except StopIteration:
            raise MapFormatError(f"map data ends before {what}") from None
        try:
            return int(token)
        except ValueError:
            raise MapFormatError(f"invalid number {token!r} in {what}") from None

    width = next_int("the width")
    height = next_int("the height")
    if width <= 0 or height <= 0:
        raise MapFormatError(f"map size must be positive, got {width}x{height}")

    level = Level(tiles=[])
    for i in range(height):
        row = []
        for j in range(width):
            cell = next_int(f"row {i}, column {j}")
            x, y = j * CELL_SIZE, i * CELL_SIZE
            if cell == ENEMY_SPAWN:
                level.enemy_spawns.append((x, y))
                cell = 0
            elif cell == FINISH_TILE:
                level.finish = Rect(x, y, CELL_SIZE, CELL_SIZE)
            elif not 0 <= cell <= MAX_TILE:
                cell = 0
            row.append(cell)
        level.tiles.append(row)
    return level


def load_map(path) -> Level:
    """Read and parse a map file."""
    with open(path, encoding="utf-8") as fh:
        return parse_map(fh.read())


def _inside(rect: pygame.Rect, point) -> bool:
    x, y = point
    return rect.x <= x <= rect.x + rect.w and rect.y <= y <= rect.y + rect.h


class Game:
    """The window, the level state and the main loop."""

    def __init__(self, asset_dir="."):
        assets = Path(asset_dir)
        pygame.init()
        icon = assets / "icone.bmp"
        if icon.is_file():
            pygame.display.set_icon(pygame.image.load(str(icon)))
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("lost")
        self.block_image = self._load_image(assets / "blocks.bmp")
        self.background = self._load_image(assets / "BG.bmp")
        self.enemy_image = self._load_image(assets / "enemy.bmp")
        font_path = assets / "fonds.ttf"
        self.font = pygame.font.Font(str(font_path) if font_path.is_file() else None, 30)
        self.view = Rect(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT)
        self.camera = Rect(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT)
        self.left_held = False
        self.right_held = False
        self.running = True
        self.player = Player(self._load_image(assets / "hero.bmp"))
        self.tiles: list[list[int]] = []
        self.enemies: list[Enemy] = []
        self.finish = Rect(0, 0, CELL_SIZE, CELL_SIZE)

    @staticmethod
    def _load_image(path: Path):
        return pygame.image.load(str(path)).convert()

    def load_level(self, path) -> None:
        """Load a map file and spawn its enemies."""
        level = load_map(path)
        self.tiles = level.tiles
        self.enemies = [Enemy(self.enemy_image, x, y, 1, 0) for x, y in level.enemy_spawns]
        self.finish = level.finish

    def update(self):
        """Advance the game one frame; return "game over", "You Win" or None."""
        player = self.player
        if self.left_held:
            player.set_direction(Direction.LEFT)
            if player.rect.x > 0:
                player.xvel = -1
            else:
                player.xvel = 0
                self.camera.x -= 1
                self.view.x -= 1
            if self.camera.x < 0:
                self.camera.x = BACKGROUND_WIDTH - SCREEN_WIDTH
        elif self.right_held:
            player.set_direction(Direction.RIGHT)
            if player.rect.x < 80:
                player.xvel = 1
            else:
                player.xvel = 0
                self.camera.x += 1
                self.view.x += 1
            if self.camera.x >= BACKGROUND_WIDTH - SCREEN_WIDTH:
                self.camera.x = 0
        else:
            player.xvel = 0

        self.resolve_enemy_contacts()
        player.move(self.tiles, self.view)
        for enemy in self.enemies:
            enemy.move(self.tiles, self.view)

        if player.health <= 0 or player.rect.y >= self.screen.get_height():
            return "game over"
        if player.rect.collides(self.finish.moved(-self.view.x, 0)):
            return "You Win"
        return None

    def resolve_enemy_contacts(self) -> None:
        """Stomped enemies die; any other contact costs the player health."""
        player = self.player.rect
        survivors = []
        for enemy in self.enemies:
            on_screen = Rect(enemy.rect.x - self.view.x, enemy.rect.y, CELL_SIZE, CELL_SIZE)
            if on_screen.collides(player):
                if player.y + player.h >= enemy.rect.y + 20:
                    continue
                self.player.health -= 1
            survivors.append(enemy)
        self.enemies = survivors

    def handle_events(self) -> None:
        """Process pending window and keyboard events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_LEFT:
                    self.left_held = True
                    self.player.moving = True
                elif event.key == pygame.K_RIGHT:
                    self.right_held = True
                elif event.key == pygame.K_SPACE:
                    self.player.jump()
                elif event.key == pygame.K_ESCAPE:
                    if self.show_menu() == 1:
                        self.running = False
            elif event.type == pygame.KEYUP:
                if event.key == pygame.K_LEFT:
                    self.left_held = False
                    self.player.moving = False
                elif event.key == pygame.K_RIGHT:
                    self.right_held = False
                    self.player.moving = False

    def show_menu(self) -> int:
        """Show the pause menu; return 0 to play, 1 to exit, 2 if the window closed."""
        white, red = (255, 255, 255), (255, 0, 0)
        labels = [self.font.render(text, False, white) for text in MENU_ITEMS]
        width, height = self.screen.get_size()
        positions = [
            label.get_rect(topleft=(width // 2 - label.get_width() // 2, height // 2 + i * label.get_height()))
            for i, label in enumerate(labels)
        ]
        overlay = pygame.Surface((width, height))
        overlay.fill((0, 0, 0))
        overlay.set_alpha(129)
        self.screen.blit(overlay, (0, 0))

        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 2
            if event.type == pygame.MOUSEMOTION:
                labels = [
                    self.font.render(text, False, red if _inside(pos, event.pos) else white)
                    for text, pos in zip(MENU_ITEMS, positions)
                ]
            elif event.type == pygame.MOUSEBUTTONDOWN:
                for index, pos in enumerate(positions):
                    if _inside(pos, event.pos):
                        return index
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return 0
            for label, pos in zip(labels, positions):
                self.screen.blit(label, pos)
            pygame.display.flip()

    def show_message(self, text: str) -> None:
        """Draw a red message centred at the top of the screen."""
        rendered = self.font.render(text, False, (255, 0, 0))
        self.screen.blit(rendered, (self.screen.get_width() // 2 - rendered.get_width() // 2, 20))
        pygame.display.flip()

    def _draw_map(self) -> None:
        width = len(self.tiles[0]) if self.tiles else 0
        for i, row in enumerate(self.tiles):
            for j in visible_columns(self.view, width, CELL_SIZE, 0):
                tile = row[j]
                if tile:
                    source = pygame.Rect((tile - 1) * TILE_SIZE, 0, TILE_SIZE, TILE_SIZE)
                    self.screen.blit(self.block_image, (j * TILE_SIZE - self.view.x, i * CELL_SIZE), source)

    def draw(self) -> None:
        """Draw background, map, hero and enemies, then flip."""
        cam = self.camera
        self.screen.blit(self.background, (0, 0), pygame.Rect(cam.x, cam.y, cam.w, cam.h))
        self._draw_map()
        self.player.show(self.screen)
        for enemy in self.enemies:
            enemy.show(self.screen, self.view)
        pygame.display.flip()

    def run(self, map_path="map.map") -> None:
        """Load the map and play until the game ends or the window closes."""
        self.load_level(map_path)
        try:
            while self.running:
                started = pygame.time.get_ticks()
                self.handle_events()
                message = self.update()
                self.draw()
                if message:
                    self.running = False
                    self.show_message(message)
                    pygame.time.delay(1000)
                elapsed = pygame.time.get_ticks() - started
                if elapsed < FRAME_MS:
                    pygame.time.delay(FRAME_MS - elapsed)
        finally:
            pygame.quit()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="lostgame", description="A side-scrolling platform game.")
    parser.add_argument("map", nargs="?", default="map.map", help="map file to play")
    parser.add_argument("--assets", default=".", help="directory holding the images and font")
    args = parser.parse_args(argv)
    Game(args.assets).run(args.map)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())