"""Reads icons from the restricted SVG subset produced by picosvg."""

from __future__ import annotations

import math
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence, Union

from skribidi.geometry import Mat2, Rect2, Vec2, rgba
from skribidi.icon import (
    ColorStop,
    Gradient,
    GradientType,
    Icon,
    IconShape,
    SpreadMethod,
)
from skribidi.svgvalues import atof, parse_color, parse_matrix, parse_number
from skribidi.xml import EndElement, StartElement, iter_xml

_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_NUMBER_BUFFER_LIMIT = 63
_MAX_PATH_ARGS = 10
_MAX_SHAPE_DEPTH = 32
_MAX_GRADIENT_ID = 31

_ARG_COUNTS = {"M": 2, "L": 2, "Q": 4, "C": 6, "A": 7}

_SPREAD_METHODS = {
    "pad": SpreadMethod.PAD,
    "reflect": SpreadMethod.REFLECT,
    "repeat": SpreadMethod.REPEAT,
}


def _next_item(text: str) -> tuple[str, str]:
    """Return the next number or command letter and the text after it."""
    text = text.lstrip(_SPACE + ",")
    if not text:
        return "", ""
    first = text[0]
    if first in "+-." or first in _DIGITS:
        _, rest = parse_number(text)
        consumed = text[: len(text) - len(rest)]
        return consumed[:_NUMBER_BUFFER_LIMIT], rest
    return first, text[1:]


def _next_arc_flag(text: str) -> tuple[str, str]:
    """Return a single '0' or '1' arc flag, or an empty item if there is none."""
    text = text.lstrip(_SPACE + ",")
    if text[:1] in ("0", "1") and text:
        return text[0], text[1:]
    return "", text


def _is_coordinate(item: str) -> bool:
    if item[:1] in ("+", "-"):
        item = item[1:]
    return bool(item) and (item[0] in _DIGITS or item[0] == ".")


def _emit_command(shape: IconShape, cmd: str, args: Sequence[float]) -> None:
    if cmd == "M":
        shape.move_to(Vec2(args[0], args[1]))
    elif cmd == "L":
        shape.line_to(Vec2(args[0], args[1]))
    elif cmd == "C":
        shape.cubic_to(Vec2(args[0], args[1]), Vec2(args[2], args[3]), Vec2(args[4], args[5]))
    elif cmd == "Q":
        shape.quad_to(Vec2(args[0], args[1]), Vec2(args[2], args[3]))
    elif cmd == "A":
        add_arc(shape, args)


def parse_path(shape: IconShape, path_data: str) -> None:
    """Append the commands of SVG path data to shape.

    Only absolute commands M, L, Q, C, A and Z are understood, each followed
    by exactly one set of arguments; anything else is skipped.
    """
    args: list[float] = []
    required = 0
    cmd = ""
    rest = path_data
    while rest:
        if cmd == "A" and len(args) in (3, 4):
            item, rest = _next_arc_flag(rest)
        else:
            item, rest = _next_item(rest)
        if not item:
            break
        if cmd:
            if len(args) < _MAX_PATH_ARGS and _is_coordinate(item):
                args.append(atof(item))
            if len(args) >= required:
                _emit_command(shape, cmd, args)
                args = []
                cmd = ""
        elif not _is_coordinate(item):
            cmd = item[0]
            if cmd == "Z":
                shape.close_path()
                cmd = ""
                required = 0
            elif cmd in _ARG_COUNTS:
                required = _ARG_COUNTS[cmd]
            else:
                cmd = ""
                required = 0


def _vector_angle(ux: float, uy: float, vx: float, vy: float) -> float:
    denom = math.hypot(ux, uy) * math.hypot(vx, vy)
    ratio = (ux * vx + uy * vy) / denom if denom else 1.0
    ratio = min(max(ratio, -1.0), 1.0)
    return (-1.0 if ux * vy < uy * vx else 1.0) * math.acos(ratio)


def add_arc(shape: IconShape, args: Sequence[float]) -> None:
    """Append an elliptical arc as cubic curves, starting at the last path point.

    args are rx, ry, x-axis rotation in degrees, large-arc flag, sweep flag,
    and the end point x, y. Nothing is added to an empty path.
    """
    if not shape.path:
        return
    start = shape.path[-1].pt

    rx = abs(args[0])
    ry = abs(args[1])
    rotx = args[2] / 180.0 * math.pi
    large_arc = abs(args[3]) > 1e-6
    sweep = abs(args[4]) > 1e-6
    x1, y1 = start.x, start.y
    x2, y2 = args[5], args[6]

    dir_x = x1 - x2
    dir_y = y1 - y2
    d = math.hypot(dir_x, dir_y)
    if d < 1e-6 or rx < 1e-6 or ry < 1e-6:
        shape.line_to(Vec2(x2, y2))
        return

    sinrx = math.sin(rotx)
    cosrx = math.cos(rotx)

    # Convert to the centre point parameterisation.
    x1p = cosrx * dir_x / 2.0 + sinrx * dir_y / 2.0
    y1p = -sinrx * dir_x / 2.0 + cosrx * dir_y / 2.0
    d = x1p * x1p / (rx * rx) + y1p * y1p / (ry * ry)
    if d > 1.0:
        d = math.sqrt(d)
        rx *= d
        ry *= d

    s = 0.0
    sa = rx * rx * ry * ry - rx * rx * y1p * y1p - ry * ry * x1p * x1p
    sb = rx * rx * y1p * y1p + ry * ry * x1p * x1p
    if sa < 0.0:
        sa = 0.0
    if sb > 0.0:
        s = math.sqrt(sa / sb)
    if large_arc == sweep:
        s = -s
    cxp = s * rx * y1p / ry
    cyp = s * -ry * x1p / rx

    cx = (x1 + x2) / 2.0 + cosrx * cxp - sinrx * cyp
    cy = (y1 + y2) / 2.0 + sinrx * cxp + cosrx * cyp

    ux = (x1p - cxp) / rx
    uy = (y1p - cyp) / ry
    vx = (-x1p - cxp) / rx
    vy = (-y1p - cyp) / ry
    a1 = _vector_angle(1.0, 0.0, ux, uy)
    da = _vector_angle(ux, uy, vx, vy)

    if not sweep and da > 0.0:
        da -= 2.0 * math.pi
    elif sweep and da < 0.0:
        da += 2.0 * math.pi

    # Split into segments of at most 90 degrees.
    num_divs = int(abs(da) / (math.pi * 0.5) + 1.0)
    hda = (da / num_divs) / 2.0
    if -1e-3 < hda < 1e-3:
        hda *= 0.5
    else:
        hda = (1.0 - math.cos(hda)) / math.sin(hda)
    kappa = abs(4.0 / 3.0 * hda)
    if da < 0.0:
        kappa = -kappa

    prev_x = prev_y = prev_tanx = prev_tany = 0.0
    for i in range(num_divs + 1):
        a = a1 + da * (i / num_divs)
        dx = math.cos(a)
        dy = math.sin(a)
        lx = dx * rx
        ly = dy * ry
        x = lx * cosrx - ly * sinrx + cx
        y = lx * sinrx + ly * cosrx + cy
        ltanx = -dy * rx * kappa
        ltany = dx * ry * kappa
        tanx = ltanx * cosrx - ltany * sinrx
        tany = ltanx * sinrx + ltany * cosrx
        if i > 0:
            shape.cubic_to(
                Vec2(prev_x + prev_tanx, prev_y + prev_tany),
                Vec2(x - tanx, y - tany),
                Vec2(x, y),
            )
        prev_x, prev_y, prev_tanx, prev_tany = x, y, tanx, tany


class _SvgReader:
    """Builds an icon from XML events."""

    def __init__(self) -> None:
        self.icon = Icon()
        self.stack: list[IconShape] = [self.icon.root]
        self.inside_defs = False
        self.gradient_ids: list[tuple[str, int]] = []

    @property
    def current(self) -> IconShape:
        return self.stack[-1]

    def push_shape(self) -> None:
        child = self.current.add_child()
        if len(self.stack) < _MAX_SHAPE_DEPTH:
            self.stack.append(child)

    def pop_shape(self) -> None:
        if len(self.stack) > 1:
            self.stack.pop()

    def start(self, element: StartElement) -> None:
        name = element.name
        attrs = element.attributes
        if self.inside_defs:
            if name == "linearGradient":
                self.parse_gradient(GradientType.LINEAR, attrs)
            elif name == "radialGradient":
                self.parse_gradient(GradientType.RADIAL, attrs)
            elif name == "stop":
                self.parse_stop(attrs)
            return
        if name == "g":
            self.push_shape()
            self.parse_shape_attributes(attrs)
        elif name == "path":
            self.push_shape()
            self.parse_shape_attributes(attrs)
            self.pop_shape()
        elif name == "defs":
            self.inside_defs = True
        elif name == "svg":
            self.parse_header(attrs)

    def end(self, element: EndElement) -> None:
        if element.name == "g":
            self.pop_shape()
        elif element.name == "defs":
            self.inside_defs = False

    def parse_header(self, attrs: Sequence[tuple[str, str]]) -> None:
        for key, value in attrs:
            if key != "viewBox":
                continue
            numbers = []
            rest = value
            for i in range(4):
                if i:
                    rest = rest.lstrip(_SPACE + "%,")
                number, rest = parse_number(rest)
                numbers.append(number)
            self.icon.view = Rect2(*numbers)

    def find_gradient(self, reference: str) -> Optional[int]:
        hash_idx = reference.find("#")
        key = reference[hash_idx + 1 :] if hash_idx >= 0 else ""
        close_idx = key.rfind(")")
        key = key[:close_idx] if close_idx >= 0 else ""
        for gradient_id, index in self.gradient_ids:
            if gradient_id == key:
                return index
        return None

    def parse_shape_attributes(self, attrs: Sequence[tuple[str, str]]) -> None:
        shape = self.current
        for key, value in attrs:
            if key == "fill":
                if value.startswith("url("):
                    shape.gradient_idx = self.find_gradient(value)
                else:
                    shape.color = parse_color(value)
            elif key == "opacity":
                shape.opacity, _ = parse_number(value)
            elif key == "d":
                parse_path(shape, value)

    def parse_stop(self, attrs: Sequence[tuple[str, str]]) -> None:
        color = rgba(0, 0, 0, 255)
        opacity = 1.0
        offset = 0.0
        for key, value in attrs:
            if key == "stop-color":
                color = parse_color(value)
            elif key == "stop-opacity":
                opacity, _ = parse_number(value)
            elif key == "offset":
                offset, _ = parse_number(value)
        if self.icon.gradients:
            alpha = int(min(max(opacity * 255.0, 0.0), 255.0))
            self.icon.gradients[-1].stops.append(ColorStop(offset, color.mul_alpha(alpha)))

    def parse_gradient(self, kind: GradientType, attrs: Sequence[tuple[str, str]]) -> None:
        grad = Gradient(type=kind, xform=Mat2.identity())
        self.icon.gradients.append(grad)
        index = len(self.icon.gradients) - 1
        gradient_id = ""
        for key, value in attrs:
            if key == "id":
                gradient_id = value[:_MAX_GRADIENT_ID]
            elif key in ("cx", "x1"):
                grad.p0 = replace(grad.p0, x=parse_number(value)[0])
            elif key in ("cy", "y1"):
                grad.p0 = replace(grad.p0, y=parse_number(value)[0])
            elif key == "r":
                grad.radius = parse_number(value)[0]
            elif key in ("fx", "x2"):
                grad.p1 = replace(grad.p1, x=parse_number(value)[0])
            elif key in ("fy", "y2"):
                grad.p1 = replace(grad.p1, y=parse_number(value)[0])
            elif key == "gradientTransform":
                matrix = parse_matrix(value)
                if matrix is not None:
                    grad.xform = matrix
            elif key == "spreadMethod":
                if value in _SPREAD_METHODS:
                    grad.spread = _SPREAD_METHODS[value]
        self.gradient_ids.append((gradient_id, index))


def parse_svg_icon(text: str) -> Icon:
    """Build an icon from the text of a picosvg document."""
    reader = _SvgReader()
    for event in iter_xml(text):
        if isinstance(event, StartElement):
            reader.start(event)
        elif isinstance(event, EndElement):
            reader.end(event)
    return reader.icon


def load_svg_icon(path: Union[str, Path]) -> Icon:
    """Read a picosvg file and build an icon from it."""
    data = Path(path).read_bytes()
    return parse_svg_icon(data.decode("utf-8", errors="replace"))