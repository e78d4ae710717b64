# svgnative

Pieces for working with SVG Native documents in Python.

## Modules

- `svgnative.colors` — the CSS named colour keywords as RGBA tuples with
  channels in the 0–1 range. `named_color(name)` returns the colour and raises
  `KeyError` for an unknown keyword; `is_named_color(name)` tests a keyword;
  `CSS_NAMED_COLORS` holds every entry as a `CSSColorInfo` (`name`, `color`,
  `length`).
- `svgnative.styles` — the style model handed to a renderer: `GraphicStyle`,
  `FillStyle`, `StrokeStyle`, `Gradient`, `ClippingPath`, `Rect`, and the
  enums `WindingRule`, `LineCap`, `LineJoin`, `SpreadMethod`, `GradientType`
  and `ImageEncoding`. Gradient coordinates that were never given stay NaN.
- `svgnative.xmltree` — a minimal element tree. `XMLDocument.parse` accepts a
  `str` or `bytes` document; a malformed document gives an `XMLDocument` whose
  `first_node()` is `None`. Each `XMLNode` has a `name`, `attributes`, its
  direct text as `value`, and `first_node()`, `next_sibling()`, `children()`
  and `attribute(name, ns_prefix)`, which falls back to `prefix:name` when the
  plain name is missing. When an attribute is repeated, the first value wins.
- `svgnative.imageinfo` — image helpers. `surface_from_jpeg(data)` decodes
  JPEG data (with Pillow) into an `ImageSurface` in `PixelFormat.RGB24`, one
  native-endian 32-bit word per pixel, and raises `ValueError` when the data is
  not a decodable JPEG. `stride_for_width(pixel_format, width)` gives the row
  length in bytes, aligned to 4. `PngBlobReader(blob).read(length)` returns
  the next chunk of a blob, zero-padded at the end, and raises `EOFError` once
  the blob is used up.
- `svgnative.stringrender` — `StringRenderer` writes every drawing call
  (`save`, `restore`, `draw_path`, `draw_image`) as indented text, with
  numbers formatted to three significant digits by `format_number`. Its
  `create_path()` returns a `StringPath` and `create_transform(...)` a
  `StringTransform`, which prints itself as `matrix(a,b,c,d,e,f)`. Calling
  `restore()` without a matching `save()` raises `RuntimeError`.

## Installation

```
pip install .
```

## Example

```python
from svgnative.colors import named_color
from svgnative.styles import FillStyle, GraphicStyle, StrokeStyle
from svgnative.stringrender import StringRenderer

renderer = StringRenderer()
path = renderer.create_path()
path.move_to(0, 0)
path.line_to(10, 0)
path.line_to(10, 10)
path.close_path()

fill = FillStyle(paint=named_color("rebeccapurple"))
renderer.draw_path(path, GraphicStyle(), fill, StrokeStyle())
print(str(renderer))
```

Parsing a document:

```python
from svgnative.xmltree import XMLDocument

doc = XMLDocument.parse('<svg xmlns:xlink="x"><image xlink:href="a.png"/></svg>')
root = doc.first_node()
image = root.first_node()
print(image.attribute("href", "xlink"))  # a.png
```

## What it does not do

The package does not read an SVG document and turn it into drawing calls, and
it has no renderer that produces pixels: `StringRenderer` only describes what
would be drawn. There is no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```