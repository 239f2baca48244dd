"""Font sets and CSS style font matching."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Hashable, Iterator, Optional, Sequence

MAX_FONTS = 256
LATIN_SCRIPT = "Latn"

_STRETCH_TOLERANCE = 0.01
_INF = float("inf")


class FontStyle(IntEnum):
    """Slant style of a font."""

    NORMAL = 0
    ITALIC = 1
    OBLIQUE = 2


class FontStretch(IntEnum):
    """Requested width of a font."""

    NORMAL = 0
    ULTRA_CONDENSED = 1
    EXTRA_CONDENSED = 2
    CONDENSED = 3
    SEMI_CONDENSED = 4
    SEMI_EXPANDED = 5
    EXPANDED = 6
    EXTRA_EXPANDED = 7
    ULTRA_EXPANDED = 8


class FontFamily(IntEnum):
    """Family a font belongs to; emoji fonts match any script."""

    DEFAULT = 0
    EMOJI = 1


_STRETCH_VALUES = (1.0, 0.5, 0.625, 0.75, 0.875, 1.125, 1.25, 1.5, 2.0)


def stretch_value(stretch: int) -> float:
    """Return the width factor of a stretch; out of range values are clamped."""
    index = min(max(int(stretch), 0), len(_STRETCH_VALUES) - 1)
    return _STRETCH_VALUES[index]


def _stretch_equal(a: float, b: float) -> bool:
    return abs(a - b) <= _STRETCH_TOLERANCE


@dataclass
class Font:
    """A font and the properties used to pick it.

    stretch is the width factor (1.0 is normal). scripts holds the writing
    systems the font supports. Metrics are in units of the font size.
    """

    name: str
    font_family: int = FontFamily.DEFAULT
    style: FontStyle = FontStyle.NORMAL
    weight: int = 400
    stretch: float = 1.0
    scripts: frozenset = field(default_factory=frozenset)
    is_color: bool = False
    upem: int = 1000
    ascender: float = 0.0
    descender: float = 0.0
    line_gap: float = 0.0
    x_height: float = 0.0
    caret_offset: float = 0.0
    caret_slope: float = 0.0
    idx: Optional[int] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        self.scripts = frozenset(self.scripts)

    def supports_script(self, script: Hashable) -> bool:
        """True if the font covers script."""
        return script in self.scripts


class FontCollection:
    """An ordered set of fonts with style matching."""

    _ids = itertools.count(1)

    def __init__(self) -> None:
        self.id: int = next(FontCollection._ids)
        self.fonts: list[Font] = []

    def add_font(self, font: Font) -> Font:
        """Add font, give it its index in the collection and return it."""
        if len(self.fonts) >= MAX_FONTS:
            raise OverflowError(f"a font collection holds at most {MAX_FONTS} fonts")
        font.idx = len(self.fonts)
        self.fonts.append(font)
        return font

    def get_font(self, index: int) -> Font:
        """Return the font at index."""
        if not 0 <= index < len(self.fonts):
            raise IndexError(f"font index {index} out of range")
        return self.fonts[index]

    def __len__(self) -> int:
        return len(self.fonts)

    def __iter__(self) -> Iterator[Font]:
        return iter(self.fonts)

    def match_fonts(
        self,
        script: Hashable,
        font_family: int,
        style: FontStyle,
        stretch: int,
        weight: int,
    ) -> list[Font]:
        """Return the fonts that best match the request, in collection order.

        Fonts are filtered by family and script, then narrowed by stretch,
        style and weight following the CSS font matching rules.
        """
        candidates: list[Font] = []
        multiple_stretch = multiple_styles = multiple_weights = False
        for font in self.fonts:
            if font.font_family != font_family:
                continue
            # Emoji look the same in every writing system.
            if font_family != FontFamily.EMOJI and not font.supports_script(script):
                continue
            if candidates:
                prev = candidates[-1]
                multiple_stretch |= not _stretch_equal(prev.stretch, font.stretch)
                multiple_styles |= prev.style != font.style
                multiple_weights |= prev.weight != font.weight
            candidates.append(font)

        if not candidates:
            return []

        if multiple_stretch:
            candidates = _select_stretch(candidates, stretch_value(stretch))
            if len(candidates) <= 1:
                return candidates

        if multiple_styles:
            candidates = _select_style(candidates, style)
            if len(candidates) <= 1:
                return candidates

        if multiple_weights:
            candidates = _select_weight(candidates, weight)

        return candidates

    def get_default_font(self, font_family: int) -> Optional[Font]:
        """Return the best normal Latin font of a family, or None."""
        results = self.match_fonts(
            LATIN_SCRIPT, font_family, FontStyle.NORMAL, FontStretch.NORMAL, 400
        )
        return results[0] if results else None


def _select_stretch(candidates: Sequence[Font], requested: float) -> list[Font]:
    exact = False
    narrow_error = wide_error = _INF
    nearest_narrow = nearest_wide = requested
    for font in candidates:
        if _stretch_equal(requested, font.stretch):
            exact = True
            break
        error = abs(font.stretch - requested)
        if font.stretch <= 0.0:
            if error < narrow_error:
                narrow_error, nearest_narrow = error, font.stretch
        elif error < wide_error:
            wide_error, nearest_wide = error, font.stretch

    selected = -1.0
    if exact:
        selected = requested
    elif requested <= 1.0:
        if narrow_error < _INF:
            selected = nearest_narrow
        elif wide_error < _INF:
            selected = nearest_wide
    else:
        if wide_error < _INF:
            selected = nearest_wide
        elif narrow_error < _INF:
            selected = nearest_narrow

    return [font for font in candidates if _stretch_equal(selected, font.stretch)]


_STYLE_PREFERENCES = {
    FontStyle.ITALIC: (FontStyle.ITALIC, FontStyle.OBLIQUE, FontStyle.NORMAL),
    FontStyle.OBLIQUE: (FontStyle.OBLIQUE, FontStyle.ITALIC, FontStyle.NORMAL),
    FontStyle.NORMAL: (FontStyle.NORMAL, FontStyle.OBLIQUE, FontStyle.ITALIC),
}


def _select_style(candidates: Sequence[Font], requested: FontStyle) -> list[Font]:
    available = {font.style for font in candidates}
    order = _STYLE_PREFERENCES.get(requested, _STYLE_PREFERENCES[FontStyle.NORMAL])
    selected = next((s for s in order if s in available), FontStyle.NORMAL)
    return [font for font in candidates if font.style == selected]


def _select_weight(candidates: Sequence[Font], requested: int) -> list[Font]:
    exact = False
    has_400 = has_500 = False
    lighter_error = darker_error = _INF
    nearest_lighter = nearest_darker = requested
    for font in candidates:
        if font.weight == requested:
            exact = True
            break
        error = abs(font.weight - requested)
        if font.weight <= 450:
            if error < lighter_error:
                lighter_error, nearest_lighter = error, font.weight
        elif error < darker_error:
            darker_error, nearest_darker = error, font.weight
        has_400 |= font.weight == 400
        has_500 |= font.weight == 500

    selected = 0
    if exact:
        selected = requested
    elif 400 <= requested < 450 and has_500:
        selected = 500
    elif requested == 450 and has_400:
        selected = 400
    elif requested <= 450:
        if lighter_error < _INF:
            selected = nearest_lighter
        elif darker_error < _INF:
            selected = nearest_darker
    else:
        if darker_error < _INF:
            selected = nearest_darker
        elif lighter_error < _INF:
            selected = nearest_lighter

    return [font for font in candidates if font.weight == selected]