"""Vector icons: shapes holding paths, colors and gradients."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from skribidi.geometry import Color, Mat2, Rect2, Vec2


class PathCommandType(Enum):
    """Kind of a path command."""

    MOVE_TO = "move_to"
    LINE_TO = "line_to"
    QUAD_TO = "quad_to"
    CUBIC_TO = "cubic_to"
    CLOSE_PATH = "close_path"


@dataclass(frozen=True)
class PathCommand:
    """One path command; unused control points stay at the origin."""

    type: PathCommandType
    pt: Vec2 = Vec2()
    cp0: Vec2 = Vec2()
    cp1: Vec2 = Vec2()


@dataclass
class IconShape:
    """A node of an icon: an optional path plus child shapes."""

    path: list[PathCommand] = field(default_factory=list)
    children: list[IconShape] = field(default_factory=list)
    color: Color = Color(0, 0, 0, 0)
    gradient_idx: Optional[int] = None
    opacity: float = 1.0

    def add_child(self) -> IconShape:
        """Append an empty child shape and return it."""
        child = IconShape()
        self.children.append(child)
        return child

    def move_to(self, pt: Vec2) -> None:
        """Start a new sub-path at pt."""
        self.path.append(PathCommand(PathCommandType.MOVE_TO, pt=pt))

    def line_to(self, pt: Vec2) -> None:
        """Add a straight segment to pt."""
        self.path.append(PathCommand(PathCommandType.LINE_TO, pt=pt))

    def quad_to(self, cp: Vec2, pt: Vec2) -> None:
        """Add a quadratic curve through control point cp to pt."""
        self.path.append(PathCommand(PathCommandType.QUAD_TO, pt=pt, cp0=cp))

    def cubic_to(self, cp0: Vec2, cp1: Vec2, pt: Vec2) -> None:
        """Add a cubic curve with control points cp0 and cp1 to pt."""
        self.path.append(PathCommand(PathCommandType.CUBIC_TO, pt=pt, cp0=cp0, cp1=cp1))

    def close_path(self) -> None:
        """Close the current sub-path."""
        self.path.append(PathCommand(PathCommandType.CLOSE_PATH))


class GradientType(Enum):
    """Kind of a gradient."""

    LINEAR = "linear"
    RADIAL = "radial"


class SpreadMethod(Enum):
    """How a gradient continues outside its range."""

    PAD = "pad"
    REFLECT = "reflect"
    REPEAT = "repeat"


@dataclass(frozen=True)
class ColorStop:
    """A color at a position along a gradient."""

    offset: float
    color: Color


@dataclass
class Gradient:
    """A linear or radial gradient."""

    type: GradientType
    p0: Vec2 = Vec2()
    p1: Vec2 = Vec2()
    radius: float = 0.0
    xform: Mat2 = Mat2()
    spread: SpreadMethod = SpreadMethod.PAD
    stops: list[ColorStop] = field(default_factory=list)


@dataclass
class Icon:
    """A vector icon with a view box, a shape tree and gradients."""

    name: Optional[str] = None
    view: Rect2 = Rect2()
    root: IconShape = field(default_factory=IconShape)
    gradients: list[Gradient] = field(default_factory=list)

    def size(self) -> Vec2:
        """Return the width and height of the view box."""
        return Vec2(self.view.width, self.view.height)

    def add_shape(self) -> IconShape:
        """Add a top level shape and return it."""
        return self.root.add_child()

    def _add_gradient(self, gradient: Gradient) -> int:
        self.gradients.append(gradient)
        return len(self.gradients) - 1

    def create_linear_gradient(
        self,
        p0: Vec2,
        p1: Vec2,
        xform: Mat2,
        spread: SpreadMethod,
        stops: Iterable[ColorStop],
    ) -> int:
        """Add a linear gradient from p0 to p1 and return its index."""
        return self._add_gradient(
            Gradient(
                type=GradientType.LINEAR,
                p0=p0,
                p1=p1,
                radius=0.0,
                xform=xform,
                spread=spread,
                stops=list(stops),
            )
        )

    def create_radial_gradient(
        self,
        p0: Vec2,
        p1: Vec2,
        radius: float,
        xform: Mat2,
        spread: SpreadMethod,
        stops: Iterable[ColorStop],
    ) -> int:
        """Add a radial gradient centred at p0 with focus p1 and return its index."""
        return self._add_gradient(
            Gradient(
                type=GradientType.RADIAL,
                p0=p0,
                p1=p1,
                radius=radius,
                xform=xform,
                spread=spread,
                stops=list(stops),
            )
        )