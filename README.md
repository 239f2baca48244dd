# skribidi

Building blocks for working with text and icons, in pure Python with no
third-party dependencies.

## What is in the package

- **Geometry** (`skribidi.geometry`): frozen dataclasses `Vec2`, `Rect2`,
  `Mat2` (a 2×3 affine transform whose default is the identity; it has
  `Mat2.identity()` and `inverse()`, which gives the identity for a singular
  matrix), and `Color` (8-bit RGBA channels, a `ValueError` outside 0..255).
  `rgba()` builds a color, and `Color.mul_alpha(alpha)` scales alpha by
  `alpha/255`.
- **Hash table** (`skribidi.hashtable`): `HashTable` maps unsigned 64-bit hash
  values to integers. `add` returns `True` when it replaces a value that was
  there already. `find` returns the value or `None`. `remove` returns whether
  the hash was present. It also supports `in`, `len()` and iteration.
- **Unicode helpers** (`skribidi.unicode`):
  - Classifiers: `is_regional_indicator_symbol`, `is_emoji_modifier`,
    `is_variation_selector`, `is_keycap_base`, `is_tag_spec_char` and
    `is_paragraph_separator`.
  - UTF-8 / UTF-32 conversion: `utf8_to_utf32`, `utf8_to_utf32_count`,
    `utf8_codepoint_offset`, `utf8_num_units`, `utf8_encode`, `utf32_to_utf8`
    and `utf32_to_utf8_count`.
  - The decoder stops producing code points at the first invalid byte
    sequence.
  - `utf8_encode` returns empty bytes for code points at or above `0x200000`.
- **XML scanning** (`skribidi.xml`): `iter_xml(text)` is a small, forgiving
  scanner.
  - It yields `StartElement`, `EndElement` and `Content` events in document
    order.
  - It skips comments, declarations and processing instructions.
  - A self-closing tag yields both a start and an end event.
- **SVG values** (`skribidi.svgvalues`): `atof`, `parse_number`, `parse_color`,
  `parse_transform_args` and `parse_matrix`.
  - `parse_color` accepts `#rgb`, `#rrggbb`, `rgb(...)` and a few basic color
    names.
  - Unknown names give mid gray.
- **Icons** (`skribidi.icon`): an `Icon` has a view box, a tree of `IconShape`
  nodes and a list of `Gradient`s.
  - Shapes hold `PathCommand`s, added with `move_to`, `line_to`, `quad_to`,
    `cubic_to` and `close_path`.
  - Gradients are added with `Icon.create_linear_gradient` and
    `Icon.create_radial_gradient`, which return the gradient's index.
- **Pico SVG reader** (`skribidi.picosvg`): `parse_svg_icon(text)` and
  `load_svg_icon(path)` build an `Icon` from the restricted SVG subset
  produced by picosvg. It understands:
  - `viewBox`;
  - `g` and `path` elements with `fill`, `opacity` and `d`;
  - linear and radial gradients with their stops inside `defs`;
  - the absolute path commands `M`, `L`, `Q`, `C`, `A` and `Z`.
  Arcs are turned into cubic curves (`add_arc`).
- **Icon collection** (`skribidi.icon_collection`): `IconCollection` holds
  icons by name. It has `add_icon`, `add_picosvg_icon` and `find_icon`.
  - `add_picosvg_icon` raises `ValueError` for an empty name.
  - File errors are raised as `OSError`.
- **Font matching** (`skribidi.font_collection`): `FontCollection` holds
  `Font` descriptions.
  - `match_fonts` filters them by family and script, then narrows them by
    stretch, style and weight, following the CSS font matching steps.
  - Fonts of the `FontFamily.EMOJI` family match any script.
  - `get_default_font` returns the best normal-style, normal-width, weight 400
    font for the `"Latn"` script, or `None`.
  - A collection holds at most 256 fonts.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Convert between UTF-8 bytes and code points:

```python
from skribidi.unicode import utf8_to_utf32, utf32_to_utf8

codepoints = utf8_to_utf32("héllo".encode("utf-8"))
assert utf32_to_utf8(codepoints) == "héllo".encode("utf-8")
```

Load an SVG icon into a collection and look it up by name:

```python
from skribidi.icon_collection import IconCollection

icons = IconCollection()
icons.add_picosvg_icon("star", "icons/star.svg")
star = icons.find_icon("star")
print(star.size())
```

Build an icon by hand:

```python
from skribidi.geometry import Vec2, rgba
from skribidi.icon_collection import IconCollection

icon = IconCollection().add_icon("square", 24.0, 24.0)
shape = icon.add_shape()
shape.move_to(Vec2(2, 2))
shape.line_to(Vec2(22, 2))
shape.line_to(Vec2(22, 22))
shape.close_path()
shape.color = rgba(255, 0, 0, 255)
```

Match fonts:

```python
from skribidi.font_collection import (
    Font, FontCollection, FontFamily, FontStretch, FontStyle,
)

fonts = FontCollection()
fonts.add_font(Font("Sans-Regular", scripts={"Latn"}, weight=400))
fonts.add_font(Font("Sans-Bold", scripts={"Latn"}, weight=700))
fonts.add_font(Font("Sans-Italic", scripts={"Latn"}, style=FontStyle.ITALIC))

bold = fonts.match_fonts("Latn", FontFamily.DEFAULT, FontStyle.NORMAL,
                         FontStretch.NORMAL, 700)
default = fonts.get_default_font(FontFamily.DEFAULT)
```

## What the package does not do

- It does not read font files. A `Font` is a description that you fill in
  yourself: name, scripts, style, weight, stretch and metrics.
- It does not shape, lay out, edit or render text.
- It does not draw icons. It only builds their shape and gradient data.
- There is no command-line program.