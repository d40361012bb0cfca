"""Player and zombie movement across the map."""

from __future__ import annotations

import random

from zombiesurvival.world import (
    GROUND_CELL,
    PLAYER_CELL,
    VIEW_HEIGHT,
    VIEW_WIDTH,
    ZOMBIE_CELL,
    Direction,
    Point,
    World,
    Zombie,
)

ZOMBIE_MOVE_INTERVAL = 0.3


def move_player(world: World, key: int | str) -> Point:
    """Apply one key press to the player and return where the player stands.

    Movement keys step the player onto open ground and turn them to face
    that way; a blocked step or any other key leaves the player in place.
    """
    player = world.player
    game_map = world.map
    game_map[player.point] = GROUND_CELL

    direction = Direction.from_key(key)
    if direction is not None:
        target = player.point.step(direction)
        if target in game_map and game_map.is_ground(target):
            player.point = target
            player.look_dir = direction

    game_map[player.point] = PLAYER_CELL
    return player.point


def zombie_in_range(zombie: Zombie, target: Point) -> bool:
    """Whether the zombie is close enough to the target to chase it."""
    dy = abs(zombie.point.y - target.y)
    dx = abs(zombie.point.x - target.x)
    return dy <= VIEW_HEIGHT // 2 and dx <= VIEW_WIDTH // 2


def _toward(current: int, goal: int) -> int:
    if goal < current:
        return current - 1
    if goal > current:
        return current + 1
    return current


def _occupied_by_other(world: World, zombie: Zombie, point: Point) -> bool:
    return any(
        other is not zombie and other.alive and other.point == point
        for other in world.zombies
    )


def move_zombies(world: World, rng: random.Random) -> int:
    """Step every living zombie near the player one square toward them.

    Each zombie picks at random whether to close in along the rows or the
    columns. It moves only onto open ground not held by another living
    zombie or the player. Returns how many zombies moved.
    """
    game_map = world.map
    target = world.player.point
    moved = 0
    for zombie in world.zombies:
        if not zombie.alive or not zombie_in_range(zombie, target):
            continue

        current = zombie.point
        if rng.randrange(2):
            step = Point(_toward(current.y, target.y), current.x)
        else:
            step = Point(current.y, _toward(current.x, target.x))

        if step not in game_map or not game_map.is_ground(step):
            continue
        if _occupied_by_other(world, zombie, step):
            continue
        if step == world.player.point:
            continue

        game_map[current] = GROUND_CELL
        zombie.point = step
        game_map[step] = ZOMBIE_CELL
        moved += 1
    return moved