# fdfview

`fdfview` reads a height map and draws it as a coloured grid on an 800 × 800
canvas, which it then saves as an image file. A height map is a text file of
rows of integers separated by spaces, with the same number of values on every
row.

Each value becomes a grid point. Map columns and rows are 20 pixels apart, and
grid coordinates start 100 pixels in from the top-left corner. Rows are
numbered from 1, so the first row is drawn at y = 120. A point draws the
horizontal segment from the previous point in its row and the vertical segment
from the point above it. Segments are coloured by the height of that point:
yellow (`0xFFFF00`) above zero, green (`0x00CC2C`) below zero and red
(`0xFF0000`) at zero.

## Installing

```
pip install .
```

## Command line

```
fdfview map.fdf
```

This writes `map.png` next to the map and prints `Valid File`. The options are:

- `-o FILE`, `--output FILE`: write the picture to `FILE`. Pillow chooses the
  image format from the file extension.
- `--line X1 Y1 X2 Y2`: also draw a straight yellow line from `(X1, Y1)` to
  `(X2, Y2)`, in the same way as `LineTool` (see below). The option can be
  given more than once.

Exit status and messages:

- If the command is not given exactly one input file, it prints
  `Usage: fdfview input_file` and exits with status 0.
- If the rows of the map do not all have the same number of columns, it prints
  `Invalid File` and exits with status 1.
- If the map cannot be read or the image cannot be written, it prints `error`
  and exits with status 1.

## Library use

```python
from fdfview.heightmap import load_map
from fdfview.canvas import Canvas, draw_map

points = load_map("map.fdf")
canvas = Canvas()
draw_map(canvas, points)
canvas.to_image().save("map.png")
```

### `fdfview.heightmap`

- `load_map(path)` reads a map file. `parse_map(lines)` works on rows that are
  already in memory. Both return a list of `Point(num, x, y)` in reading order.
- `validate(lines)` returns the number of columns shared by every row. It
  raises `InvalidMapError`, a subclass of `ValueError`, when two rows have
  different counts or when no row has any column. Rows without columns are
  skipped only before the first row that has some.
- `count_columns(line)`, `strip_number(text)` and `build_points(lines, width)`
  are the pieces that `parse_map` is built from.

### `fdfview.canvas`

- `Canvas(width=800, height=800, title="fdf")` is a black RGB pixel grid.
  `put_pixel(x, y, color)` takes a `0xRRGGBB` colour and ignores pixels
  outside the canvas. `pixel(x, y)` reads a colour back and raises
  `IndexError` outside the canvas. `to_image()` returns a copy as a Pillow
  image.
- `draw_map(canvas, points)` draws a grid as described above.
  `height_color(num)` gives the colour used for a height.
- `LineTool(canvas)` draws lines from clicks. `click(MouseButton.LEFT, x, y)`
  (button 1) sets the start point. `click(MouseButton.RIGHT, x, y)`
  (button 2) sets the end point and draws one pixel for each column to the
  right of the start, up to and including the end. It returns the pixels that
  were drawn. The slope uses the absolute vertical distance, so lines always
  go downwards. Nothing is drawn if the end point is not to the right of the
  start point.

### Other modules

- `fdfview.xpm`: `load_xpm(path)`, `parse_xpm_text(text)` and
  `parse_xpm_lines(lines)` decode XPM pixmaps into `XpmImage` objects, which
  have `width`, `height`, row-major 32-bit `pixels`, `pixel(x, y)` and `rows()`.
  Colours may be `#RRGGBB` or X11 names. Pixels coloured `None` get the value
  `TRANSPARENT` (`0xFF000000`). Malformed data raises `XpmError`. The helpers
  `split_words`, `find_unquoted`, `strip_comments` and `text_to_rgb` are
  public as well.
- `fdfview.colors.color_by_name(name)` looks up an X11 colour name, ignoring
  case. It returns `None` for unknown names and -1 for `none`.
- `fdfview.lines.read_lines(stream, chunk_size=32)` yields the lines of a text
  or binary stream without their newlines. It reads the stream in chunks of
  `chunk_size`.
- `fdfview.cstring` provides small helpers with C-like behaviour: `atoi`,
  `itoa`, `count_words`, `power`, `exact_sqrt`, `split` and `trim`.

## What it does not do

`fdfview` does not open a window and is not interactive. The grid is drawn
flat, with no projection, zoom or rotation, and height only changes the
colour. The command's only output is an image file. Clicks can only be
simulated, either with `--line` or by calling `LineTool.click` directly.

## Tests

```
pip install .[test]
pytest
```