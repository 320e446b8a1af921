# solong

The game logic, map handling and image loading for a small tile puzzle game.
The player walks around a map, picks up every collectible and then steps onto
the exit. Each successful move is counted and reported.

The package has no dependencies outside the standard library.

## Map characters

| Character | Tile           |
|-----------|----------------|
| `1`       | wall           |
| `0`       | empty floor    |
| `C`       | collectible    |
| `E`       | exit           |
| `P`       | player         |

Example:

```
1111111
1P0C0E1
1111111
```

## Modules

### `solong.gamemap`

- `read_map(path)` reads a map file, one row per line, into a `GameMap`.
  It raises `MapError` when the file cannot be opened or is empty.
- `GameMap(rows)` holds the grid as lists of characters (`cells`); line
  endings are stripped. `x_max`, `y_max`, `num_rows` and `rows` describe it.
- Flood fills starting from a cell, which never enter the last column or
  the last row:
  - `step(x, y)` marks every reachable cell in lower case (`0` becomes `o`);
  - `step_col(x, y)` does the same without crossing the exit and returns the
    number of collectibles reached;
  - `res_step(x, y)` undoes those marks.

### `solong.game`

- `Game(rows, collectibles, player, on_change=None)` holds the map, the
  player position, the collectibles left and the step count.
- `Game.move(direction)` takes a `Direction` (`UP`, `LEFT`, `DOWN`,
  `RIGHT`) and returns a `MoveResult`:
  - walls, cells outside the map and a closed exit give `BLOCKED`;
  - the exit with nothing left to collect gives `WON` and prints `YOU WON`;
  - anything else moves the player, picks up a collectible if there is one,
    calls `on_change`, increases `steps`, prints `Movements: N` and gives
    `MOVED`.
  Moving after the game has finished raises `RuntimeError`.
- `Game.handle_key(key)` maps the key symbols of `w`, `a`, `s`, `d` to moves
  and `KEY_ESCAPE` to `quit()`; other keys give `None`.
- `Game.tiles()` yields `(x, y, character)` for every cell, row by row.

### `solong.xpm`

- `xpm_file_to_image(path)` reads an XPM file into an `Image`;
  `xpm_to_image(lines)` does the same from the quoted lines in memory.
- `parse_xpm(lines)` returns rows of `0xRRGGBB` values; transparent pixels
  become `0xFF000000`.
- `strip_comments`, `quoted_lines` and `text_rgb` are the helpers behind
  them. Malformed data raises `XpmError`.

### `solong.image`

- `Image(width, height, bpp=32, big_endian=False)` is a byte-buffer pixel
  image with rows padded to 32 bits; `set_pixel`, `get_pixel` and
  `size_line` work on it.
- `rgb_shifts` and `get_color_value` convert `0xRRGGBB` colours to pixel
  values for visuals of lower depth.

### `solong.colors`

- `lookup_color(name)` resolves an X11 colour name, ignoring case;
  `lookup_color("snow")` gives `0xfffafa` and `"none"` gives `-1`.
- `color_names()` lists every known name.

### `solong.wordtab`

- `str_to_wordtab`, `str_str` and `str_str_quoted` split and search text as
  XPM reading needs.

## What the package does not do

- It opens no window and draws nothing on screen; a front end has to render
  `Game.tiles()` and feed key symbols to `Game.handle_key`.
- It has no command to start a game.
- `read_map` does not check that a map is rectangular, enclosed by walls or
  solvable; the flood fills in `GameMap` are the tools for such checks.