# icyisland

This package holds the game logic of a small side-scrolling platformer. It
also holds two command-line tools that turn data files into C arrays and
strings that can be embedded in a program.

## Modules

- `icyisland.timer` has two classes.
  - `GameClock` is a millisecond clock. Its game ticks stand still while the
    clock is paused, through `pause()` and `resume()`. `raw_ticks()` ignores
    pauses.
  - `Timer` is a countdown that runs on game ticks or raw ticks. It has
    `start`, `stop`, `check`, `started`, `time_left` and `time_gone`.
    `write` and `read` save a timer to a binary stream as three 32-bit words
    and restore it from one.
- `icyisland.stringlist` has `StringList`. It keeps strings in the order
  they were added and tracks an active item. The first string added becomes
  the active item.
- `icyisland.text` holds the text helpers.
  - `Text` lays out a fixed-width bitmap font, in the kinds
    `TextKind.TEXT` and `TextKind.NUM`. It returns `DrawOp` blits: `layout`
    gives the text, and `draw` gives the shadow and then the text.
  - `aligned_origin` and `screen_origin` work out where aligned text starts,
    by `HAlign` and `VAlign`. `erase_rect` and `centered_erase_rect` give
    the rectangle that covers drawn text.
  - `parse_credits` sorts the lines of a scrolling text file into
    `LineStyle`s, by the first character of each line.
  - `load_text_lines` takes a text file's lines from a mapping of bundled
    files. When the file is missing, it returns a "File was not found!"
    message instead.
  - `ScrollState` tracks the scroll position and the speed. It reacts to
    the keys up, down, space, return and escape.
- `icyisland.tile` has three classes.
  - `Tile` holds a level tile's properties. `frame_index` picks the
    animation frame to show.
  - `TileGroup` is a named set of tile ids. Groups compare by name.
  - `TileManager` stores tiles by id, with an optional tileset offset.
    Unknown ids fall back to tile 0.
- `icyisland.maptiles` has world-map directions, one-way tiles and
  `MapTileManager`. `Direction` and `reverse_dir` cover the directions,
  and `direction_to_string` and `string_to_direction` convert them to and
  from names. `OneWay` and `parse_one_way` cover one-way tiles, and
  `MapTile` is a world-map tile.
- `icyisland.worldmap` has three classes.
  - `WorldMap` is a grid of map tiles with `MapLevel` markers on it.
    Markers can be levels, message spots or teleporters.
    - Movement: `path_ok` applies the walking rules, including one-way
      tiles. `auto_path_direction` picks the way on after a level is solved.
    - Screen: `camera_offset` works out where to draw the map.
    - Saving: `savegame_text` writes the savegame contents. `apply_solved`
      marks levels solved by name.
  - `Tux` walks over the map one tile at a time. `update(delta)` moves him
    forward, and he stops on stop tiles and level markers. He also follows
    auto-walk tiles.
  - `Point` is a grid or pixel position.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Resource tools

### icyisland-resmaker

`icyisland-resmaker` writes C source to standard output.

```
icyisland-resmaker img image.png label [image2.png label2 ...]
icyisland-resmaker txt notes.txt label [notes2.txt label2 ...]
```

- **Images** become `static unsigned short` arrays of RGB565 pixels. Each
  array starts with four words: `0x2a01`, the width, the height and
  `0x0000`. Fully transparent pixels become `0xf81f`.
- **Text files** become `static const char *file_<label>` string constants,
  one escaped line at a time. Quotes are escaped. Carriage returns and
  `\xff` bytes are dropped. A text file that cannot be read is skipped.

`icyisland-resmaker -magic_code` exits with status 42. The scanner uses this
status to check that the maker it was given works.

### icyisland-scanner

`icyisland-scanner` walks a data directory and calls the maker for every file
whose extension is listed in a configuration file. It appends the maker's
output to the raw-data header configured for that extension.

```
icyisland-scanner <datadir> <configFile> [resource-maker]
```

The third argument defaults to `resource-maker`, so in most cases you pass
`icyisland-resmaker` there. The scanner also does the following:

- It wraps each raw-data header in an include guard. The guard name comes
  from `make_constant`, so `data_manager.h` gives `__DATA_MANAGER__`.
- It can write an index header. For every resource, the index holds an
  `if (file == "data/<path>")` line followed by `return <label>;`. Text
  labels get a `file_` prefix. When the scan ends, the index is closed with
  a `return 0;` and `#endif`.

Each entry in the configuration file is a group of lines, in this order:

1. The extension, without the dot.
2. The content type: `image`, `IMAGE` or `img`, or `text`, `TEXT` or `txt`.
   An entry with any other type is skipped.
3. The raw-data output file.
4. Whether to write an index: `true`, `TRUE`, `True`, `1` or `yes`. Any
   other value means no index.
5. If an index is written, the index file, and then a header block for it.
   Every line of the header block except the last ends with a backslash.

If two entries have the same extension, the first one is used.

## Using the library

```python
from icyisland.timer import GameClock, Timer

clock = GameClock(source=lambda: 1000)
timer = Timer(clock, use_game_ticks=True)
timer.start(500)
timer.check()  # True while the period has not run out
```

## What this package does not do

This package does not include the following:

- **Drawing.** It has no window, screen, sprites or sound. `Text.draw`
  returns a list of blits and does not draw anything itself.
- **A game loop.** Nothing reads keyboard input or runs the title screen,
  the world map or the levels.
- **Loading data files.** It does not read level, tileset, world-map or
  savegame files. You build tiles, maps and levels yourself.
  `WorldMap.savegame_text` produces savegame text, but nothing reads it
  back. `WorldMap.apply_solved` takes the solved states you have read
  yourself.