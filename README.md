# mandelview

An interactive viewer for the Mandelbrot set. It opens an 800×600 window titled
"Mandelbrot". You can pan and zoom the picture from the keyboard. After every
frame it clears the terminal and prints three lines of status: the current mode,
the frame rate, and an average nanosecond tick count per frame. The tick average
is updated once every 256 frames.

## Renderers

There are four renderers for the escape counts. You can switch between them
while the viewer runs. They are in `mandelview.render`, and the `Mode` enum
selects among them:

| Mode | `Mode`   | Function                 | How it iterates                                                              |
|------|----------|--------------------------|------------------------------------------------------------------------------|
| 0    | `SCALAR` | `escape_counts_scalar`   | single precision, point by point; an escaped point stops counting           |
| 1    | `LANES`  | `escape_counts_lanes`    | single precision, groups of four pixels; escaped lanes are held out         |
| 2    | `MASKED` | `escape_counts_masked`   | single precision, strict `<` test each step; failed lanes parked at `(rmax, rmax)` |
| 3    | `VECTOR` | `escape_counts_vector`   | double precision; a group of four keeps counting until all four have escaped |

Modes 1 to 3 raise `ValueError` if the width is not a multiple of four. Each
renderer iterates at most `nmax` times. The default is 256, with an escape
radius `rmax` of 10.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running

```
mandelview
```

With `mandelview --no-graphics`, every frame is still computed and timed, but
nothing is drawn to the window.

### Keys

| Key                          | Action                                                       |
|------------------------------|--------------------------------------------------------------|
| Arrow keys                   | move the centre by `0.1 × scale` (Shift: ten times as far)   |
| `=` or keypad `+`            | zoom in: scale × 0.9 (Shift: × 0.9 × 0.81)                   |
| `-` or keypad `-`            | zoom out: scale ÷ 0.9 (Shift: ÷ (0.9 × 0.81))                |
| `0`, `1`, `2`, `3`           | select the rendering mode                                    |
| Escape or closing the window | quit                                                         |

## Using it as a library

```python
from mandelview.settings import Settings, Key
from mandelview.render import Mode, compute_counts, render

settings = Settings()              # x in [-2, 1], y in [-1.25, 1.25]
settings.mode = Mode.SCALAR
settings.apply_key(Key.RIGHT)      # returns True only for Key.ESCAPE
counts = compute_counts(settings)  # (height, width) array of escape counts
image = render(settings)           # (height, width, 4) RGBA uint8 array
```

- `Settings` holds the centre (`x0`, `y0`), `scale`, the per-pixel steps `dx`
  and `dy`, `nmax`, `rmax`, `mode`, `width` and `height`. `pixel_step()` returns
  the step between neighbouring pixels at the current scale, and `rmax2` is the
  squared escape radius.
- `mandelview.colors.colorize(counts, nmax)` turns a 2-D array of escape counts
  into an RGBA image. Points that reach `nmax` are drawn black.
  `pixel_color(n, nmax)` gives the colour of a single count. Both raise
  `ValueError` for a non-positive `nmax` or for counts outside `0..nmax`.
- `mandelview.app` provides `main`, `handle_events`, `translate_key` and
  `FrameStats`, which the viewer uses for its event handling and its timing
  report.