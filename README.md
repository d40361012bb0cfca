# zombiesurvival

A zombie survival game that runs in your terminal.

You wander a walled town of 150 × 300 tiles. A small building stands in
the middle, and eleven more buildings are spread across the map, each
with a single doorway in the middle of one randomly chosen side. Between
100 and 200 zombies (`z`) are placed at random, twenty items (`!`) lie
about, and five vaccine pieces are hidden somewhere, shown as the letters
`D`, `E`, `B`, `U` and `G`.

## Installing

```
pip install .
```

The game draws with the standard `curses` module, so it needs a terminal
that supports colour (256 colours give the intended look).

## Playing

```
zombiesurvival
```

Pass `--seed N` to generate the same world every time:

```
zombiesurvival --seed 42
```

A start menu appears first:

```
==============================
	ZOMBIE SURVIVAL
==============================
	1. New Game
	2. Load Game (not implemented) 
	3. Options (not implemented) 
	4. Exit
GAME START? :
```

Enter `4` to quit. Any other answer starts a new game.

In the game you are the `8`, starting at row 10, column 10. Move with:

| Key | Move  |
|-----|-------|
| `w` | up    |
| `a` | left  |
| `s` | down  |
| `d` | right |

You can only step onto open ground (`.`); walls (`#`), zombies, items and
vaccine letters block your way. The direction you last moved in is the
direction you are facing. The screen shows a 21 × 51 window around you
(pushed back inside the map near its edges); only what lies in your cone
of sight, up to and including the first thing that blocks it, is drawn in
full, and the rest of the window is shaded. Your position is printed as
`y:<row>, x:<column>` on screen row 55 after each key press.

Every 0.3 seconds each zombie within 10 rows and 25 columns of you takes
one step towards you, along either the rows or the columns, chosen at
random. Zombies only step onto open ground, never onto another zombie or
onto you.

Press Ctrl+C to leave the game.

## What the game does not do

- There is no way to win or lose: zombies reaching you do no harm, and
  your hit points never change.
- Items and vaccine letters cannot be picked up; they only block the way.
- There is no saving or loading, and no options screen; the menu entries
  for them start a new game like any other answer.

## Using it as a library

- `zombiesurvival.world` holds the map (`GameMap`, `Cell`, `Point`,
  `Rect`), the actors (`Player`, `Zombie`, `World`) and `generate_world(rng)`,
  which builds a fresh world from a `random.Random`.
- `zombiesurvival.movement` provides `move_player(world, key)`,
  `move_zombies(world, rng)` and `zombie_in_range(zombie, target)`.
- `zombiesurvival.vision` provides `view_bounds(center, map_height, map_width)`,
  which returns a `Viewport`, and `visible_cells(game_map, player)`, which
  maps every point the player can see to its cell.
- `zombiesurvival.menu` provides `show_menu(stdin, stdout)` and
  `parse_choice(text)`, returning a `MenuChoice` or `None`.
- `zombiesurvival.app` provides `Game`, with `handle_key`, `tick` and
  `render`, and `run(screen, rng)` for an already initialised curses screen.

## Tests

```
pip install .[test]
pytest
```