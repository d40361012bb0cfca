"""The interactive game: input handling, timed zombie moves and drawing."""

from __future__ import annotations

import argparse
import curses
import random
import sys
import time
from collections.abc import Callable, Sequence
from contextlib import suppress

from zombiesurvival.menu import MenuChoice, show_menu
from zombiesurvival.movement import ZOMBIE_MOVE_INTERVAL, move_player, move_zombies
from zombiesurvival.vision import Viewport, view_bounds, visible_cells
from zombiesurvival.world import Cell, ColorPair, Point, Tile, World, generate_world

STATUS_ROW = 55

COLOR_PAIRS = {
    ColorPair.EMPTY: (245, 245),
    ColorPair.WALL: (15, 0),
    ColorPair.PLAYER: (21, 245),
    ColorPair.ZOMBIE: (196, 245),
    ColorPair.ITEM: (226, 245),
    ColorPair.VACCINE: (46, 46),
    ColorPair.HIDDEN: (240, 240),
}

HIDDEN_CELL = Cell(Tile.GROUND.value, ColorPair.HIDDEN)


def _pair_attr(pair: ColorPair) -> int:
    try:
        return curses.color_pair(int(pair))
    except curses.error:
        # Before the terminal is set up, use the standard pair encoding.
        return int(pair) << 8


def _attributes(cell: Cell) -> int:
    attr = _pair_attr(cell.color)
    if cell.bold:
        attr |= curses.A_BOLD
    if cell.blink:
        attr |= curses.A_BLINK
    return attr


class Game:
    """One running game: reacts to keys, moves zombies on a timer and draws."""

    def __init__(
        self,
        world: World,
        rng: random.Random,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.world = world
        self.rng = rng
        self.clock = clock
        self.status = ""
        self._last_zombie_move = clock()

    def handle_key(self, key: int | str | None) -> Point | None:
        """Apply a key press; -1 or None means no key and changes nothing."""
        if key is None or key == -1:
            return None
        point = move_player(self.world, key)
        self.status = f"y:{point.y}, x:{point.x}"
        return point

    def tick(self) -> bool:
        """Move the zombies if enough time has passed; report whether they moved."""
        now = self.clock()
        if now - self._last_zombie_move > ZOMBIE_MOVE_INTERVAL:
            move_zombies(self.world, self.rng)
            self._last_zombie_move = now
            return True
        return False

    def render(self, screen) -> Viewport:
        """Draw the player's view onto a curses-like screen and return its window."""
        game_map = self.world.map
        viewport = view_bounds(self.world.player.point, game_map.height, game_map.width)
        frame = {
            Point(y, x): HIDDEN_CELL
            for y in range(viewport.top, viewport.bottom + 1)
            for x in range(viewport.left, viewport.right + 1)
        }
        frame.update(visible_cells(game_map, self.world.player))
        for point, cell in frame.items():
            row, col = viewport.to_screen(point)
            with suppress(curses.error):
                screen.addch(row, col, cell.glyph, _attributes(cell))
        if self.status:
            with suppress(curses.error):
                screen.addstr(STATUS_ROW, 0, self.status)
        return viewport


def _setup_colors() -> None:
    curses.start_color()
    with suppress(curses.error):
        curses.curs_set(0)
    for pair, (fg, bg) in COLOR_PAIRS.items():
        with suppress(curses.error, ValueError):
            curses.init_pair(int(pair), fg, bg)


def run(screen, rng: random.Random | None = None) -> None:
    """Play on an initialised curses screen until interrupted."""
    rng = rng if rng is not None else random.Random()
    screen.nodelay(True)
    _setup_colors()
    game = Game(generate_world(rng), rng, time.monotonic)
    while True:
        game.render(screen)
        screen.refresh()
        game.handle_key(screen.getch())
        game.tick()
        curses.napms(10)


def main(argv: Sequence[str] | None = None) -> int:
    """Show the title menu, then start the game unless Exit was chosen."""
    parser = argparse.ArgumentParser(prog="zombiesurvival", description="Zombie survival game.")
    parser.add_argument("--seed", type=int, default=None, help="seed for world generation")
    args = parser.parse_args(argv)

    if show_menu(sys.stdin, sys.stdout) is MenuChoice.EXIT:
        return 0

    rng = random.Random(args.seed)
    try:
        curses.wrapper(run, rng)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())