# fdfview

`fdfview` draws a wireframe of a height map stored in a `.fdf` file. You can rotate it, move it, zoom in and out, and raise or lower its relief, all in a window.

## The `.fdf` format

A `.fdf` file is a plain-text grid of integer heights. Each line is one row, and the values on a line are separated by spaces:

```
0 0 0 0
0 5 5 0
0 5 5 0
0 0 0 0
```

Every row must have the same number of values, and the file must have at least one row. The file name must end in `.fdf`. Empty lines and repeated spaces are ignored. Only the leading integer of each value is used as the height.

## Installation

```
pip install .
```

The window is drawn with `pygame`, which is installed along with the package.

## Usage

```
fdfview map.fdf
```

Called with no file name or with more than one, the command prints `Usage : fdfview file.fdf`.

If the file cannot be used, the program prints the problems it found, one per line, each with its error code:

```
Error(s):
0x001 : wrong file format (*.fdf).
0x010 : unable to open or read the file.
```

The possible problems are:

- `0x001`: the name does not end in `.fdf`
- `0x008`: the map is empty, or its rows have different lengths
- `0x010`: the file cannot be opened or read

### Controls

| Input               | Action                   |
|---------------------|--------------------------|
| numpad 4 / 6        | rotate around Y          |
| numpad 2 / 8        | rotate around X          |
| numpad 7 / 9        | rotate around Z          |
| numpad 1 / 3        | raise / lower the relief |
| arrow keys          | move the view            |
| mouse wheel         | zoom in / out at the pointer |
| Escape              | print `EXIT PROGRAM.` and quit |

Closing the window also ends the program. The list of commands, the current angles and the number of points in the map are shown in the top-left corner of the window. Edges between flat points are drawn in blue; raised edges are green, darker the higher they go.

## Library use

The parts of the viewer can also be used without opening a window:

```python
from fdfview.check import load_checked_grid
from fdfview.scene import Scene
from fdfview.raster import render

grid = load_checked_grid("map.fdf")
scene = Scene(grid, 2300, 1300)
scene.center()
scene.project(0)
image = render(scene)
print(image.pixel(1150, 650))
```

- `fdfview.parser`: `read_grid`, `to_grid`, `read_lines` and `split_words` turn map text into a grid of words.
- `fdfview.check`: `check_path_format` and `check_grid` return `ErrorFlag` bits; `load_checked_grid` raises `GridError`, whose `flags` attribute holds them; `describe_errors` renders the report shown above.
- `fdfview.scene`: `Scene` holds the vertices and the view state. `handle_key` and `handle_mouse` take `Key` codes and return whether the view was reprojected; `scale`, `modify_z`, `center` and `project` can be called directly. `build_map` and `get_angle` are also available.
- `fdfview.color`: `edge_color` picks an edge's colour from its heights; `Color.pack` and `rgba` pack colours into `0xAARRGGBB` integers.
- `fdfview.raster`: `bresenham` yields the points of a segment, `draw_line` draws one into an `Image`, `render` draws a whole scene, and `overlay_lines` gives the help and status text with its positions.
- `fdfview.xpm`: `xpm_from_file`, `xpm_from_data` and `parse_xpm` decode XPM pixmaps into `XpmImage` objects and raise `XpmError` on bad data. `strip_comments`, `find_unquoted` and `text_to_rgb` are the helpers they use.
- `fdfview.colornames`: `lookup_color` resolves X11 colour names, ignoring case; `COLOR_NAMES` is the full table.
- `fdfview.app`: `main` is the `fdfview` command, and `run_window` shows a prepared `Scene` in a window.

## What it does not do

The viewer does not save the rendered picture to a file, and it does not use the XPM reader itself; `fdfview.xpm` is there only for library use. Colours given in a `.fdf` file alongside the heights are not read.

## Running the tests

```
pip install .[test]
pytest
```