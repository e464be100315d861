# wiremap

Building blocks for drawing a grid of heights as a coloured wireframe: a
height-map reader, rotation matrices, mouse-driven view state, colour-graded
line drawing, and a small in-memory display, image and XPM toolkit to draw on.

## Installing

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## Modules

- `wiremap.mapfile` reads height maps. Each line is a row of
  whitespace-separated heights; a height may carry a colour as
  `height,0xRRGGBB` (without one the point is white, `0xFFFFFF`).
  `parse_point(token)` returns `(height, colour)` for one token.
  `read_map(lines)` and `load_map(path)` return a `HeightMap` with `width`,
  `height`, `heights`, `colors` (row by row), `top` and `bottom`;
  `HeightMap.line_count()` gives the number of segments joining horizontal and
  vertical neighbours. An empty map or a row whose length differs from the
  first raises `MapError`.
- `wiremap.rotation` returns 3×3 matrices as tuples of rows:
  `x_rotation_matrix(r)`, `y_rotation_matrix(r)`, `z_rotation_matrix(r)` (angles
  in radians) and `projection_matrix()`, which takes `(x, y, z)` to `(x, z, 0)`.
- `wiremap.controls` holds `ViewState`, the view's offset, rotations, scale and
  mouse state. `mouse_down(button, x, y)` zooms on `MouseButton.SCROLL_UP` /
  `SCROLL_DOWN` and starts a drag on `LEFT` or `RIGHT`; `mouse_up` ends it;
  `mouse_drag(x, y)` pans while the left button is held and rotates about the
  x and y axes while the right one is.
- `wiremap.render` has `interpolate_color(start, end, fraction)`, which blends
  two `0xRRGGBB` colours channel by channel, and
  `draw_line(image, start, end, start_color, end_color, offset_x, offset_y)`,
  which draws between two points given relative to the image centre, skips
  pixels outside the image and returns how many pixels it wrote.
- `wiremap.image.Image(width, height, bits_per_pixel=32, big_endian=False)` is a
  byte buffer with rows padded to 32 bits; `put_pixel`, `get_pixel` and
  `data_info()` (buffer, bits per pixel, row size, byte order).
- `wiremap.xpm` reads XPM pictures into images: `xpm_from_file(path)` and
  `xpm_from_data(lines)`. Colours may be `#RRGGBB` or X11 names; `None` pixels
  become `0xFF000000`. Malformed data raises `XpmError`. Helpers
  `strip_comments`, `quoted_lines`, `text_rgb`, `color_key` and `parse_xpm` are
  public too.
- `wiremap.colors` resolves X11 colour names with `lookup_color(name)`
  (case-insensitive, `KeyError` when unknown) and converts colours for visuals
  shallower than 24 bits with `rgb_shifts` and `get_good_color`.
- `wiremap.text` has the substring search (`find`, `find_unquoted`) and word
  splitting (`split_words`) used by the XPM reader.
- `wiremap.display` offers a `Display` (screen size and a TrueColor depth of
  15, 16, 24 or 32) holding `Window`s. Windows take hooks (`hook`, `key_hook`,
  `mouse_hook`, `expose_hook`), draw with `pixel_put`, `put_image` and `clear`,
  and report a pixel with `pixel(x, y)`. Events (`Event`, `EventType`) are
  queued with `post_event` and delivered by `loop()` until `loop_end()` is
  called, no window is left, or — without a loop hook — the queue runs empty.

## Example

```python
from wiremap.image import Image
from wiremap.render import draw_line

image = Image(1920, 1080, 32, False)
written = draw_line(image, (-100.0, 0.0), (100.0, 0.0), 0xFF0000, 0x0000FF, 0, 0)
print(written, hex(image.get_pixel(860, 540)))
```

Event handling on a window:

```python
from wiremap.display import Display, Event, EventType

display = Display(1920, 1080, 24)
window = display.new_window(400, 300, "map")
window.key_hook(lambda key, param: display.loop_end(), None)
display.post_event(Event(EventType.KEY_RELEASE, window, key=0xFF1B))
display.loop()
```

## What it does not do

- There is no command and no on-screen viewer. `Display` and its windows live
  in memory only; nothing is shown on a real screen and no events arrive from a
  real keyboard or mouse — they are posted with `post_event`.
- No function turns a whole `HeightMap` into a picture. Applying the rotation
  and projection matrices to the map's points and calling `draw_line` for each
  segment is left to the caller.