"""Map, actors and world generation for the zombie survival game."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, IntEnum

MAP_HEIGHT = 150
MAP_WIDTH = 300
HOUSE_COUNT = 12
ZOMBIE_MIN = 100
ZOMBIE_MAX = 200
ITEM_COUNT = 20
VACCINE_LETTERS = "DEBUG"
VIEW_HEIGHT = 21
VIEW_WIDTH = 51
PLAYER_START_HP = 100

CENTER_BUILDING_HEIGHT = 6
CENTER_BUILDING_WIDTH = 12


class Tile(str, Enum):
    """Glyphs used for the things that occupy a map cell."""

    PLAYER = "8"
    ZOMBIE = "z"
    ITEM = "!"
    WALL = "#"
    GROUND = "."


class ColorPair(IntEnum):
    """Terminal colour pairs used when drawing cells."""

    EMPTY = 1
    WALL = 2
    PLAYER = 3
    ZOMBIE = 4
    ITEM = 5
    VACCINE = 6
    HIDDEN = 7


class Direction(Enum):
    """Movement and facing directions, keyed by the key code that selects them."""

    UP = ord("w")
    RIGHT = ord("d")
    DOWN = ord("s")
    LEFT = ord("a")

    @classmethod
    def from_key(cls, key: int | str) -> Direction | None:
        """Return the direction bound to a key code or character, or None."""
        if isinstance(key, str):
            if len(key) != 1:
                return None
            key = ord(key)
        try:
            return cls(key)
        except ValueError:
            return None

    @property
    def delta(self) -> tuple[int, int]:
        """The (dy, dx) step taken when moving this way."""
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}


@dataclass(frozen=True)
class Point:
    """A map coordinate, row first."""

    y: int
    x: int

    def step(self, direction: Direction) -> Point:
        """The neighbouring point in the given direction."""
        dy, dx = direction.delta
        return Point(self.y + dy, self.x + dx)


@dataclass(frozen=True)
class Rect:
    """A rectangle given by two opposite corners, inclusive."""

    y1: int
    x1: int
    y2: int
    x2: int

    def normalized(self) -> Rect:
        """The same rectangle with y1 <= y2 and x1 <= x2."""
        return Rect(
            min(self.y1, self.y2),
            min(self.x1, self.x2),
            max(self.y1, self.y2),
            max(self.x1, self.x2),
        )


@dataclass(frozen=True)
class Cell:
    """What one map square shows: a glyph with its colour and attributes."""

    glyph: str
    color: ColorPair
    bold: bool = False
    blink: bool = False


GROUND_CELL = Cell(Tile.GROUND.value, ColorPair.EMPTY)
WALL_CELL = Cell(Tile.WALL.value, ColorPair.WALL)
PLAYER_CELL = Cell(Tile.PLAYER.value, ColorPair.PLAYER, bold=True)
ZOMBIE_CELL = Cell(Tile.ZOMBIE.value, ColorPair.ZOMBIE)
ITEM_CELL = Cell(Tile.ITEM.value, ColorPair.ITEM, blink=True)

BUILDINGS = (
    Rect(5, 5, 10, 15),
    Rect(8, 50, 15, 70),
    Rect(2, 120, 10, 150),
    Rect(20, 180, 30, 210),
    Rect(35, 30, 45, 75),
    Rect(60, 80, 72, 110),
    Rect(90, 10, 105, 45),
    Rect(110, 140, 125, 170),
    Rect(130, 200, 145, 240),
    Rect(40, 250, 55, 290),
    Rect(80, 200, 95, 260),
    Rect(60, 150, 75, 190),
)


class GameMap:
    """A rectangular grid of cells, initially all ground."""

    def __init__(self, height: int, width: int) -> None:
        if height <= 0 or width <= 0:
            raise ValueError("map dimensions must be positive")
        self.height = height
        self.width = width
        self._rows = [[GROUND_CELL] * width for _ in range(height)]

    def _check(self, point: Point) -> None:
        if point not in self:
            raise IndexError(f"point {point} is outside the map")

    def __getitem__(self, point: Point) -> Cell:
        self._check(point)
        return self._rows[point.y][point.x]

    def __setitem__(self, point: Point, cell: Cell) -> None:
        self._check(point)
        self._rows[point.y][point.x] = cell

    def __contains__(self, point: object) -> bool:
        return (
            isinstance(point, Point)
            and 0 <= point.y < self.height
            and 0 <= point.x < self.width
        )

    def glyph_at(self, point: Point) -> str:
        """The character shown at a point, without colour or attributes."""
        return self[point].glyph

    def is_ground(self, point: Point) -> bool:
        """Whether the point shows open ground."""
        return self.glyph_at(point) == Tile.GROUND.value

    def random_empty_point(self, rng: random.Random) -> Point:
        """Pick random interior points until one holding plain ground is found."""
        while True:
            point = Point(
                rng.randrange(self.height - 2) + 1,
                rng.randrange(self.width - 2) + 1,
            )
            if self[point] == GROUND_CELL:
                return point


@dataclass
class Zombie:
    """A zombie and where it stands."""

    point: Point
    alive: bool = True
    hp: int = 0


@dataclass
class Player:
    """The player character."""

    point: Point = field(default_factory=lambda: Point(10, 10))
    hp: int = PLAYER_START_HP
    look_dir: Direction = Direction.RIGHT
    role: Tile = Tile.PLAYER


@dataclass
class World:
    """Everything that makes up one game: the map, the player and the zombies."""

    map: GameMap
    player: Player
    zombies: list[Zombie]


def draw_border(game_map: GameMap) -> None:
    """Surround the map with a wall."""
    last_row = game_map.height - 1
    last_col = game_map.width - 1
    for x in range(game_map.width):
        game_map[Point(0, x)] = WALL_CELL
        game_map[Point(last_row, x)] = WALL_CELL
    for y in range(game_map.height):
        game_map[Point(y, 0)] = WALL_CELL
        game_map[Point(y, last_col)] = WALL_CELL


def _draw_outline(game_map: GameMap, rect: Rect, cell: Cell) -> None:
    for x in range(rect.x1, rect.x2 + 1):
        game_map[Point(rect.y1, x)] = cell
        game_map[Point(rect.y2, x)] = cell
    for y in range(rect.y1, rect.y2 + 1):
        game_map[Point(y, rect.x1)] = cell
        game_map[Point(y, rect.x2)] = cell


def draw_building(
    game_map: GameMap, rect: Rect, color: ColorPair, rng: random.Random
) -> Point:
    """Draw a walled building with one door in the middle of a random side.

    Returns the position of the door.
    """
    rect = rect.normalized()
    _draw_outline(game_map, rect, Cell(Tile.WALL.value, ColorPair(color)))
    mid_x = (rect.x1 + rect.x2) // 2
    mid_y = (rect.y1 + rect.y2) // 2
    doors = (
        Point(rect.y1, mid_x),
        Point(rect.y2, mid_x),
        Point(mid_y, rect.x1),
        Point(mid_y, rect.x2),
    )
    door = doors[rng.randrange(4)]
    game_map[door] = GROUND_CELL
    return door


def make_vaccine(game_map: GameMap, letter: str, rng: random.Random) -> Point:
    """Place one vaccine letter on a random empty square and return where."""
    point = game_map.random_empty_point(rng)
    game_map[point] = Cell(letter, ColorPair.VACCINE, blink=True)
    return point


def _draw_center_building(game_map: GameMap) -> None:
    top = game_map.height // 2 - CENTER_BUILDING_HEIGHT // 2
    left = game_map.width // 2 - CENTER_BUILDING_WIDTH // 2
    rect = Rect(
        top, left, top + CENTER_BUILDING_HEIGHT - 1, left + CENTER_BUILDING_WIDTH - 1
    )
    _draw_outline(game_map, rect, WALL_CELL)


def generate_world(rng: random.Random) -> World:
    """Build a fresh world: walls, buildings, zombies, items, vaccines and player."""
    game_map = GameMap(MAP_HEIGHT, MAP_WIDTH)
    draw_border(game_map)
    _draw_center_building(game_map)
    for rect in BUILDINGS[: HOUSE_COUNT - 1]:
        draw_building(game_map, rect, ColorPair.WALL, rng)

    zombies = []
    for _ in range(rng.randint(ZOMBIE_MIN, ZOMBIE_MAX)):
        point = game_map.random_empty_point(rng)
        game_map[point] = ZOMBIE_CELL
        zombies.append(Zombie(point))

    for _ in range(ITEM_COUNT):
        game_map[game_map.random_empty_point(rng)] = ITEM_CELL

    for letter in VACCINE_LETTERS:
        make_vaccine(game_map, letter, rng)

    player = Player()
    game_map[player.point] = PLAYER_CELL
    return World(map=game_map, player=player, zombies=zombies)