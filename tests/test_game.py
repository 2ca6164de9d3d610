import pygame
import pytest

from lostgame.base import CELL_SIZE, Rect
from lostgame.enemy import Enemy
from lostgame.game import (
    BACKGROUND_WIDTH,
    SCREEN_WIDTH,
    Game,
    Level,
    MapFormatError,
    load_map,
    parse_map,
)


def test_parse_map_cells():
    level = parse_map("3 2\n0 1 2\n-1 3 7\n")
    assert level.tiles == [[0, 1, 2], [0, 3, 0]]
    assert level.enemy_spawns == [(0, CELL_SIZE)]
    assert level.finish == Rect(2 * CELL_SIZE, 0, CELL_SIZE, CELL_SIZE)


def test_parse_map_default_finish():
    level = parse_map("2 1 0 1")
    assert level.finish == Rect(0, 0, CELL_SIZE, CELL_SIZE)
    assert level.enemy_spawns == []


@pytest.mark.parametrize("text", ["", "3", "3 2 0 0 0 0", "2 1 0 x"])
def test_parse_map_rejects_bad_input(text):
    with pytest.raises(MapFormatError):
        parse_map(text)


def test_parse_map_rejects_zero_size():
    with pytest.raises(MapFormatError):
        parse_map("0 0")


def test_load_map_round_trip(tmp_path):
    path = tmp_path / "level.map"
    path.write_text("2 2\n1 0\n0 3\n", encoding="utf-8")
    assert load_map(path) == Level(tiles=[[1, 0], [0, 3]])


def test_load_map_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_map(tmp_path / "nope.map")


@pytest.fixture
def game(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    sizes = {"blocks.bmp": (300, 75), "BG.bmp": (2000, 480), "enemy.bmp": (80, 40), "hero.bmp": (200, 50)}
    for name, size in sizes.items():
        pygame.image.save(pygame.Surface(size), str(tmp_path / name))
    g = Game(tmp_path)
    yield g
    pygame.quit()


def write_map(tmp_path, text):
    path = tmp_path / "level.map"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_level_spawns_enemies(game, tmp_path):
    game.load_level(write_map(tmp_path, "3 1\n-1 0 -1\n"))
    assert [(e.rect.x, e.rect.y) for e in game.enemies] == [(0, 0), (2 * CELL_SIZE, 0)]
    assert all(e.xvel == 1 for e in game.enemies)


def test_falling_off_the_map_ends_the_game(game, tmp_path):
    game.load_level(write_map(tmp_path, "4 2\n0 0 0 0\n0 0 0 0\n"))
    outcome = None
    for _ in range(200):
        outcome = game.update()
        if outcome:
            break
    assert outcome == "game over"


def test_reaching_finish_wins(game, tmp_path):
    game.load_level(write_map(tmp_path, "4 2\n2 0 0 0\n0 0 0 0\n"))
    assert game.update() == "You Win"


def test_left_at_edge_scrolls_view(game, tmp_path):
    game.load_level(write_map(tmp_path, "4 1\n0 0 0 0\n"))
    game.left_held = True
    game.update()
    assert game.view.x == -1
    assert game.camera.x == BACKGROUND_WIDTH - SCREEN_WIDTH
    assert game.player.xvel == 0


def test_right_moves_player(game, tmp_path):
    game.load_level(write_map(tmp_path, "4 1\n0 0 0 0\n"))
    game.right_held = True
    game.update()
    assert game.player.rect.x == 1
    assert game.view.x == 0


def test_enemy_contact_costs_health(game):
    before = game.player.health
    game.enemies = [Enemy(game.enemy_image, 0, 40, 1, 0)]
    game.resolve_enemy_contacts()
    assert game.player.health == before - 1
    assert len(game.enemies) == 1


def test_stomping_removes_enemy(game):
    before = game.player.health
    game.enemies = [Enemy(game.enemy_image, 0, 25, 1, 0), Enemy(game.enemy_image, 400, 300, 1, 0)]
    game.resolve_enemy_contacts()
    assert [(e.rect.x, e.rect.y) for e in game.enemies] == [(400, 300)]
    assert game.player.health == before