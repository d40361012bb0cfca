import io
import random

import pytest

from zombiesurvival.app import HIDDEN_CELL, STATUS_ROW, Game, main
from zombiesurvival.world import (
    WALL_CELL,
    ZOMBIE_CELL,
    PLAYER_CELL,
    Direction,
    GameMap,
    Player,
    Point,
    World,
    Zombie,
    draw_border,
)


class FakeScreen:
    def __init__(self):
        self.chars = {}
        self.texts = {}

    def addch(self, y, x, ch, attr=0):
        self.chars[(y, x)] = (ch, attr)

    def addstr(self, y, x, text, attr=0):
        self.texts[(y, x)] = text


def make_world(zombies=()):
    game_map = GameMap(30, 60)
    draw_border(game_map)
    player = Player(point=Point(10, 10))
    game_map[player.point] = PLAYER_CELL
    zombie_list = []
    for point in zombies:
        game_map[point] = ZOMBIE_CELL
        zombie_list.append(Zombie(point))
    return World(map=game_map, player=player, zombies=zombie_list)


def make_clock(values):
    it = iter(values)
    return lambda: next(it)


def test_handle_key_moves_player_and_sets_status():
    world = make_world()
    game = Game(world, random.Random(0), make_clock([0.0]))
    point = game.handle_key(ord("d"))
    assert point == Point(10, 11)
    assert world.player.point == Point(10, 11)
    assert world.player.look_dir is Direction.RIGHT
    assert world.map.glyph_at(Point(10, 10)) == "."
    assert world.map.glyph_at(Point(10, 11)) == "8"
    assert game.status == "y:10, x:11"


def test_handle_key_without_key_changes_nothing():
    world = make_world()
    game = Game(world, random.Random(0), make_clock([0.0]))
    assert game.handle_key(-1) is None
    assert game.handle_key(None) is None
    assert world.player.point == Point(10, 10)
    assert game.status == ""


def test_handle_key_blocked_by_wall():
    world = make_world()
    world.map[Point(9, 10)] = WALL_CELL
    game = Game(world, random.Random(0), make_clock([0.0]))
    assert game.handle_key("w") == Point(10, 10)
    assert world.player.look_dir is Direction.RIGHT


def test_tick_waits_for_interval():
    world = make_world(zombies=[Point(12, 12)])
    game = Game(world, random.Random(3), make_clock([0.0, 0.2, 0.5]))
    assert game.tick() is False
    assert world.zombies[0].point == Point(12, 12)
    assert game.tick() is True
    zombie = world.zombies[0].point
    distance = abs(zombie.y - 10) + abs(zombie.x - 10)
    assert distance == 3
    assert world.map[zombie] == ZOMBIE_CELL


def test_tick_interval_restarts_after_move():
    world = make_world(zombies=[Point(12, 12)])
    game = Game(world, random.Random(3), make_clock([0.0, 0.5, 0.6, 0.9]))
    assert game.tick() is True
    assert game.tick() is False
    assert game.tick() is True


def test_render_draws_whole_viewport():
    world = make_world()
    world.map[Point(10, 3)] = WALL_CELL
    world.map[Point(10, 20)] = WALL_CELL
    game = Game(world, random.Random(0), make_clock([0.0]))
    screen = FakeScreen()
    viewport = game.render(screen)
    assert len(screen.chars) == viewport.height * viewport.width
    row, col = viewport.to_screen(world.player.point)
    assert screen.chars[(row, col)][0] == "8"
    ahead = viewport.to_screen(Point(10, 20))
    assert screen.chars[ahead][0] == "#"
    behind = viewport.to_screen(Point(10, 3))
    assert screen.chars[behind][0] == HIDDEN_CELL.glyph


def test_render_hidden_and_visible_ground_differ_in_colour():
    world = make_world()
    game = Game(world, random.Random(0), make_clock([0.0]))
    screen = FakeScreen()
    viewport = game.render(screen)
    visible_ground = screen.chars[viewport.to_screen(Point(10, 12))]
    hidden_ground = screen.chars[viewport.to_screen(Point(10, 5))]
    assert visible_ground[0] == hidden_ground[0] == "."
    assert visible_ground[1] != hidden_ground[1]


def test_render_writes_status_after_move():
    world = make_world()
    game = Game(world, random.Random(0), make_clock([0.0]))
    game.handle_key("s")
    screen = FakeScreen()
    game.render(screen)
    assert screen.texts[(STATUS_ROW, 0)] == "y:11, x:10"


def test_main_exit_choice(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n"))
    out = io.StringIO()
    monkeypatch.setattr("sys.stdout", out)
    assert main(["--seed", "1"]) == 0
    assert "ZOMBIE SURVIVAL" in out.getvalue()


def test_main_rejects_bad_seed(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n"))
    with pytest.raises(SystemExit):
        main(["--seed", "abc"])