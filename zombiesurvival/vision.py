"""What part of the map the player can see, by casting rays from where they stand."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from dataclasses import dataclass

from zombiesurvival.world import (
    VIEW_HEIGHT,
    VIEW_WIDTH,
    Cell,
    Direction,
    GameMap,
    Player,
    Point,
    Tile,
)

VIEW_ANGLE = 0.2

_SEE_THROUGH = frozenset({Tile.PLAYER.value, Tile.GROUND.value})

# Forward unit step and the lateral axis along which rays fan out.
_FORWARD = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.RIGHT: (0, 1),
    Direction.LEFT: (0, -1),
}
_LATERAL = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, 1),
    Direction.RIGHT: (1, 0),
    Direction.LEFT: (1, 0),
}


def _f32(value: float) -> float:
    """Round a value to single precision, as the ray arithmetic is done."""
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True)
class Viewport:
    """The inclusive window of map squares shown on screen."""

    top: int
    left: int
    bottom: int
    right: int

    @property
    def height(self) -> int:
        return self.bottom - self.top + 1

    @property
    def width(self) -> int:
        return self.right - self.left + 1

    def __contains__(self, point: object) -> bool:
        return (
            isinstance(point, Point)
            and self.top <= point.y <= self.bottom
            and self.left <= point.x <= self.right
        )

    def to_screen(self, point: Point) -> tuple[int, int]:
        """The (row, column) on screen where a map point inside the window is drawn."""
        if point not in self:
            raise ValueError(f"point {point} is outside the viewport")
        return point.y - self.top, point.x - self.left


def view_bounds(center: Point, map_height: int, map_width: int) -> Viewport:
    """The window centred on a point, pushed back inside the map at its edges."""
    if map_height < VIEW_HEIGHT or map_width < VIEW_WIDTH:
        raise ValueError("map is smaller than the view")
    half_h = (VIEW_HEIGHT - 1) // 2
    half_w = (VIEW_WIDTH - 1) // 2
    top, bottom = center.y - half_h, center.y + half_h
    left, right = center.x - half_w, center.x + half_w

    if top < 0:
        top, bottom = 0, VIEW_HEIGHT - 1
    if left < 0:
        left, right = 0, VIEW_WIDTH - 1
    if bottom >= map_height:
        top, bottom = map_height - VIEW_HEIGHT, map_height - 1
    if right >= map_width:
        left, right = map_width - VIEW_WIDTH, map_width - 1
    return Viewport(top, left, bottom, right)


def _angles(start: float, stop: float) -> Iterator[float]:
    a = _f32(start)
    while a < stop:
        yield a
        a = _f32(a + 0.1 * a)


def _ray_steps(a: float) -> Iterator[tuple[float, float]]:
    """Successive (lateral, forward) offsets along a ray of slope a."""
    tx = ty = 0.0
    while True:
        yield tx, ty
        if a < 1:
            tx = _f32(tx + 0.2)
        else:
            tx = _f32(tx + _f32(1 / _f32(a * 2)))
        ty = _f32(a * tx)


def _ray_points(origin: Point, direction: Direction, a: float, side: int) -> Iterator[Point]:
    fy, fx = _FORWARD[direction]
    ly, lx = _LATERAL[direction]
    for tx, ty in _ray_steps(a):
        yield Point(
            int(_f32(origin.y + fy * ty + ly * side * tx)),
            int(_f32(origin.x + fx * ty + lx * side * tx)),
        )


def _line_points(origin: Point, direction: Direction, offset: int) -> Iterator[Point]:
    fy, fx = _FORWARD[direction]
    ly, lx = _LATERAL[direction]
    k = 0
    while True:
        yield Point(origin.y + fy * k + ly * offset, origin.x + fx * k + lx * offset)
        k += 1


def visible_cells(game_map: GameMap, player: Player) -> dict[Point, Cell]:
    """Map every square the player can see to the cell shown there.

    Rays fan out in the direction the player faces and stop at the first
    square that is neither ground nor the player; that square is seen too.
    """
    viewport = view_bounds(player.point, game_map.height, game_map.width)
    seen: dict[Point, Cell] = {}

    def passable(point: Point) -> bool:
        return point in viewport and game_map.glyph_at(point) in _SEE_THROUGH

    def trace(points: Iterator[Point]) -> None:
        first = next(points)
        if not passable(first):
            return
        seen[first] = game_map[first]
        for point in points:
            if point in viewport:
                seen[point] = game_map[point]
            if not passable(point):
                return

    direction = player.look_dir
    if direction in (Direction.UP, Direction.DOWN):
        angles = list(_angles(VIEW_ANGLE, 7))
    else:
        angles = list(_angles(_f32(_f32(VIEW_ANGLE) + 1), 15))

    for side in (-1, 1):
        for a in angles:
            trace(_ray_points(player.point, direction, a, side))
    for offset in (-1, 0, 1):
        trace(_line_points(player.point, direction, offset))
    return seen