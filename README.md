# pivkit

Building blocks for particle image velocimetry (PIV) in pure Python, with no
third-party dependencies: pixel types, images and views onto them, size,
point and rectangle geometry, interrogation-grid generation, lazy per-pixel
image expressions, and image utilities such as peak finding and sub-pixel
Gaussian fitting.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `pivkit.pixels`: pixel types `G` (greyscale), `RGBA`, `YUVA` and `Complex`,
  each holding channels of a `ValueType` (`UINT8`, `UINT16`, `UINT32`,
  `DOUBLE`). Integral channels wrap modulo their width. `convert` moves
  between pixel kinds (RGBA to grey, grey to RGBA, complex to grey by
  magnitude, grey to complex), `pixeltype_name` gives names such as
  `g<uint8_t>`, and `complex_exp` is the complex exponential.
- `pivkit.size`: `Size`, an unsigned (width, height) pair, with
  `maximal_size`, `minimal_size` and `transpose`.
- `pivkit.point`: `Point` and `Vector`; subtracting two points gives a vector,
  and vectors can be added to points, scaled and divided.
- `pivkit.rect`: `Rect`, given by a bottom-left `Point` and a `Size`, with
  corner and edge accessors, `within`, `contains` and `dilate` (an integer
  grows each side by that many pixels, a float scales about the centre).
- `pivkit.grid`: `generate_cartesian_grid` lays a centred grid of
  interrogation windows over an image, with the step given either as a
  fraction of the window size or as an (x, y) pair of pixels.
- `pivkit.image`: `Image`, a grid of pixels of one kind stored row by row,
  indexed by a flat index or an `(x, y)` pair; `Image.convert` converts every
  pixel and `Image.from_expression` evaluates an expression.
- `pivkit.image_view`: `create_image_view` (or `ImageView`) gives a window
  onto part of an image or of another view; reads and writes go through to the
  underlying image.
- `pivkit.expression`: lazy per-pixel arithmetic. `as_expression` wraps an
  image, view, pixel or number; the resulting nodes support `+ - * / %` and
  unary minus, and `conj`, `absolute`, `abs_sqr`, `real` and `imag` act on
  complex images. A node's `evaluate()` computes it into an `Image`.
- `pivkit.image_utils`: `find_peaks`, `fit_simple_gaussian`, `apply`, `fill`,
  `pixel_sum`, `split_to_channels`, `join_from_channels`, `transpose`,
  `swap_quadrants`, `extract` and `get_underlying`.
- `pivkit.settings`: `Settings` holds processing (window length, overlap,
  region of interest `Roi`, mask), vector display, batch and output options,
  and calls callbacks registered with `connect` when a `Signal` is emitted.
- `pivkit.log`: an asynchronous `Logger` with pluggable sinks and `Level`s,
  plus `fatal`, `error`, `warn`, `info`, `debug` and `sync_debug`.
- `pivkit.util`: `is_pow2`, `checked_unsigned_conversion`, `strided_copy`,
  and the context managers `EntryExitLogger` and `Peeker`.
- `pivkit.ranges`, `pivkit.enums`, `pivkit.streams`: `make_range` /
  `IntRange`, enum `to_string` / `from_string`, and `join` for formatting
  sequences.

## Examples

A grid of 32x32 windows with 50% overlap over a 100x50 image:

```python
from pivkit.size import Size
from pivkit.grid import generate_cartesian_grid

windows = generate_cartesian_grid(Size(100, 50), Size(32, 32), 0.5)
print(len(windows))   # 10
print(windows[0])     # (2,1) -> [32,32]
```

Per-pixel arithmetic on an image:

```python
from pivkit.expression import as_expression
from pivkit.image import Image
from pivkit.pixels import G

image = Image((2, 2), G(1.0))
doubled = (as_expression(image) * 2).evaluate()
print(doubled[0])     # g2
```

## What the package does not do

pivkit provides the primitives only. It does not read or write image files,
does not compute cross-correlations or run a full PIV analysis (the
`Processor` and `Detector` values in `pivkit.settings` are settings only),
does not write vector results to disk, and has no command-line program or
graphical interface.