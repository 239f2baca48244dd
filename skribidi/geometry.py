"""Small value types for 2D geometry and colors."""

from __future__ import annotations

from dataclasses import dataclass

_SINGULAR_EPSILON = 1e-6


@dataclass(frozen=True)
class Vec2:
    """A 2D point or vector."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Rect2:
    """An axis aligned rectangle given by its origin and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class Mat2:
    """A 2x3 affine transform.

    A point (x, y) maps to (xx*x + xy*y + dx, yx*x + yy*y + dy).
    The default value is the identity transform.
    """

    xx: float = 1.0
    yx: float = 0.0
    xy: float = 0.0
    yy: float = 1.0
    dx: float = 0.0
    dy: float = 0.0

    @classmethod
    def identity(cls) -> Mat2:
        """Return the identity transform."""
        return cls()

    def inverse(self) -> Mat2:
        """Return the inverse transform, or identity if the matrix is singular."""
        det = self.xx * self.yy - self.xy * self.yx
        if -_SINGULAR_EPSILON < det < _SINGULAR_EPSILON:
            return Mat2.identity()
        inv_det = 1.0 / det
        return Mat2(
            xx=self.yy * inv_det,
            xy=-self.xy * inv_det,
            dx=(self.xy * self.dy - self.yy * self.dx) * inv_det,
            yx=-self.yx * inv_det,
            yy=self.xx * inv_det,
            dy=(self.yx * self.dx - self.xx * self.dy) * inv_det,
        )


@dataclass(frozen=True)
class Color:
    """An 8-bit per channel RGBA color."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"color channel {name}={value} is outside 0..255")

    def mul_alpha(self, alpha: int) -> Color:
        """Return this color with its alpha scaled by alpha/255."""
        if not 0 <= alpha <= 255:
            raise ValueError(f"alpha {alpha} is outside 0..255")
        return Color(self.r, self.g, self.b, (self.a * alpha) // 255)


def rgba(r: int, g: int, b: int, a: int = 255) -> Color:
    """Build a color from its channels."""
    return Color(r, g, b, a)