"""Parsers for the attribute values found in simple SVG documents."""

from __future__ import annotations

from typing import Optional

from skribidi.geometry import Color, Mat2, rgba

_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_HEX_DIGITS = "0123456789abcdefABCDEF"
_NUMBER_BUFFER_LIMIT = 63

_NAMED_COLORS = {
    "red": rgba(255, 0, 0, 255),
    "green": rgba(0, 128, 0, 255),
    "blue": rgba(0, 0, 255, 255),
    "yellow": rgba(255, 255, 0, 255),
    "cyan": rgba(0, 255, 255, 255),
    "magenta": rgba(255, 0, 255, 255),
    "black": rgba(0, 0, 0, 255),
    "grey": rgba(128, 128, 128, 255),
    "gray": rgba(128, 128, 128, 255),
    "white": rgba(255, 255, 255, 255),
}
_UNKNOWN_COLOR = rgba(128, 128, 128, 255)


def _take_digits(text: str, pos: int) -> int:
    """Return the index just past the run of digits starting at pos."""
    while pos < len(text) and text[pos] in _DIGITS:
        pos += 1
    return pos


def atof(text: str) -> float:
    """Convert the leading number in text to a float.

    Accepts an optional sign, integer and fractional digits and an optional
    exponent. Text without integer or fractional digits gives 0.0.
    """
    pos = 0
    sign = 1.0
    if text[:1] == "+":
        pos = 1
    elif text[:1] == "-":
        sign = -1.0
        pos = 1

    result = 0.0
    has_digits = False

    end = _take_digits(text, pos)
    if end > pos:
        result = float(int(text[pos:end]))
        has_digits = True
        pos = end

    if text[pos : pos + 1] == ".":
        pos += 1
        end = _take_digits(text, pos)
        if end > pos:
            result += int(text[pos:end]) / 10.0 ** (end - pos)
            has_digits = True
            pos = end

    if not has_digits:
        return 0.0

    if text[pos : pos + 1] in ("e", "E"):
        pos += 1
        exp_start = pos
        while pos < len(text) and text[pos] in _SPACE:
            pos += 1
        if text[pos : pos + 1] in ("+", "-"):
            pos += 1
        end = _take_digits(text, pos)
        if end > pos:
            result *= 10.0 ** int(text[exp_start:end].strip(_SPACE))

    return result * sign


def parse_number(text: str) -> tuple[float, str]:
    """Parse a number at the start of text.

    Returns the value and the text that follows the number. An exponent
    marker followed by 'm' or 'x' is treated as a unit (em, ex), not as
    part of the number.
    """
    n = len(text)
    pos = 0
    chars: list[str] = []

    def keep(ch: str) -> None:
        if len(chars) < _NUMBER_BUFFER_LIMIT:
            chars.append(ch)

    if pos < n and text[pos] in "+-":
        keep(text[pos])
        pos += 1
    while pos < n and text[pos] in _DIGITS:
        keep(text[pos])
        pos += 1
    if pos < n and text[pos] == ".":
        keep(text[pos])
        pos += 1
        while pos < n and text[pos] in _DIGITS:
            keep(text[pos])
            pos += 1
    if pos < n and text[pos] in "eE" and text[pos + 1 : pos + 2] not in ("m", "x"):
        keep(text[pos])
        pos += 1
        if pos < n and text[pos] in "+-":
            keep(text[pos])
            pos += 1
        while pos < n and text[pos] in _DIGITS:
            keep(text[pos])
            pos += 1

    return atof("".join(chars)), text[pos:]


def _parse_color_hex(text: str) -> Color:
    digits = []
    for ch in text[1:]:
        if ch not in _HEX_DIGITS or len(digits) == 6:
            break
        digits.append(ch)
    if len(digits) == 6:
        return rgba(
            int("".join(digits[0:2]), 16),
            int("".join(digits[2:4]), 16),
            int("".join(digits[4:6]), 16),
            255,
        )
    if len(digits) == 3:
        r, g, b = (int(d * 2, 16) for d in digits)
        return rgba(r, g, b, 255)
    return rgba(0, 0, 0, 255)


def _parse_color_rgb(text: str) -> Color:
    rest = text[4:]
    channels = [0.0, 0.0, 0.0]
    for i, delimiter in enumerate((",", ",", ")")):
        rest = rest.lstrip(_SPACE)
        if not rest:
            break
        if rest[0] == "+":
            rest = rest[1:]
        if not rest:
            break
        pos = 0
        while pos < len(rest) and pos < 31 and (rest[pos] in _DIGITS or rest[pos] == "."):
            pos += 1
        channels[i] = atof(rest[:pos])
        rest = rest[pos:]
        if rest[:1] == "%":
            channels[i] *= 2.5
            rest = rest[1:]
        rest = rest.lstrip(_SPACE)
        if rest[:1] != delimiter:
            break
        rest = rest[1:]

    r, g, b = (int(min(max(c, 0.0), 255.0)) for c in channels)
    return rgba(r, g, b, 255)


def parse_color(text: str) -> Color:
    """Parse a '#rgb', '#rrggbb', 'rgb(...)' or named color.

    Unknown names give mid gray; malformed hex gives opaque black.
    """
    value = text.lstrip(_SPACE)
    if value.startswith("#"):
        return _parse_color_hex(value)
    if value.startswith("rgb("):
        return _parse_color_rgb(value)
    return _NAMED_COLORS.get(value, _UNKNOWN_COLOR)


def parse_transform_args(text: str, max_args: int) -> list[float]:
    """Parse the numbers between the parentheses of a transform function.

    At most max_args values are returned; text without a closing
    parenthesis gives no values.
    """
    open_idx = text.find("(")
    if open_idx < 0:
        return []
    body = text[open_idx + 1 :]
    close_idx = body.rfind(")")
    body = body[:close_idx] if close_idx > 0 else ""

    args: list[float] = []
    while body:
        if body[0] in "+-." or body[0] in _DIGITS:
            value, body = parse_number(body)
            if len(args) < max_args:
                args.append(value)
        else:
            body = body[1:]
    return args


def parse_matrix(text: str) -> Optional[Mat2]:
    """Parse 'matrix(a b c d e f)'; return None unless exactly six values are given."""
    args = parse_transform_args(text, 6)
    if len(args) != 6:
        return None
    xx, yx, xy, yy, dx, dy = args
    return Mat2(xx=xx, yx=yx, xy=xy, yy=yy, dx=dx, dy=dy)