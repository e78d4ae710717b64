"""A renderer that describes every drawing call as indented text."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List, Optional

from svgnative.styles import (
    FillStyle,
    Gradient,
    GradientType,
    GraphicStyle,
    Paint,
    Rect,
    StrokeStyle,
    WindingRule,
)

_INDENT_STEP = 4


def format_number(value: float) -> str:
    """Format a number with three significant digits, as the text output uses."""
    return f"{value:.3g}"


def _join(*values: float) -> str:
    return ",".join(format_number(v) for v in values)


class StringPath:
    """A path that records its drawing commands as text."""

    def __init__(self) -> None:
        self._parts: List[str] = []

    @property
    def string(self) -> str:
        """The commands recorded so far."""
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.string

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        """Add a rectangle."""
        self._parts.append(f" Rect({_join(x, y, width, height)})")

    def rounded_rect(
        self, x: float, y: float, width: float, height: float, rx: float, ry: float
    ) -> None:
        """Add a rectangle with rounded corners."""
        self._parts.append(f" RoundedRect({_join(x, y, width, height, rx, ry)})")

    def ellipse(self, cx: float, cy: float, rx: float, ry: float) -> None:
        """Add an ellipse."""
        self._parts.append(f" Ellipse({_join(cx, cy, rx, ry)})")

    def move_to(self, x: float, y: float) -> None:
        """Start a new subpath at (x, y)."""
        self._parts.append(f" M{_join(x, y)}")

    def line_to(self, x: float, y: float) -> None:
        """Add a straight line to (x, y)."""
        self._parts.append(f" L{_join(x, y)}")

    def curve_to(
        self, x1: float, y1: float, x2: float, y2: float, x3: float, y3: float
    ) -> None:
        """Add a cubic Bézier curve."""
        self._parts.append(f" C{_join(x1, y1, x2, y2, x3, y3)}")

    def curve_to_v(self, x2: float, y2: float, x3: float, y3: float) -> None:
        """Add a quadratic Bézier curve."""
        self._parts.append(f" Q{_join(x2, y2, x3, y3)}")

    def close_path(self) -> None:
        """Close the current subpath."""
        self._parts.append(" Z")


@dataclass
class AffineTransform:
    """A 2D affine matrix [a c e; b d f; 0 0 1]."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0


class StringTransform:
    """An affine transform that prints itself as an SVG matrix()."""

    def __init__(
        self,
        a: float = 1.0,
        b: float = 0.0,
        c: float = 0.0,
        d: float = 1.0,
        tx: float = 0.0,
        ty: float = 0.0,
    ) -> None:
        self.matrix = AffineTransform(a, b, c, d, tx, ty)

    def set(self, a: float, b: float, c: float, d: float, tx: float, ty: float) -> None:
        """Replace the matrix."""
        self.matrix = AffineTransform(a, b, c, d, tx, ty)

    def rotate(self, degrees: float) -> None:
        """Rotate by ``degrees`` before the current transform."""
        radians = math.radians(degrees)
        cos_a = math.cos(radians)
        sin_a = math.sin(radians)
        self.multiply(AffineTransform(cos_a, sin_a, -sin_a, cos_a, 0.0, 0.0))

    def translate(self, tx: float, ty: float) -> None:
        """Translate before the current transform."""
        m = self.matrix
        m.e += tx * m.a + ty * m.c
        m.f += tx * m.b + ty * m.d

    def scale(self, sx: float, sy: float) -> None:
        """Scale before the current transform."""
        m = self.matrix
        m.a *= sx
        m.b *= sx
        m.c *= sy
        m.d *= sy

    def concat(self, a: float, b: float, c: float, d: float, tx: float, ty: float) -> None:
        """Apply another matrix before the current transform."""
        self.multiply(AffineTransform(a, b, c, d, tx, ty))

    def multiply(self, other: AffineTransform) -> None:
        """Replace the matrix by current × other."""
        m = self.matrix
        self.matrix = AffineTransform(
            other.a * m.a + other.b * m.c,
            other.a * m.b + other.b * m.d,
            other.c * m.a + other.d * m.c,
            other.c * m.b + other.d * m.d,
            other.e * m.a + other.f * m.c + m.e,
            other.e * m.b + other.f * m.d + m.f,
        )

    @property
    def string(self) -> str:
        """The transform as ``matrix(a,b,c,d,e,f)``."""
        m = self.matrix
        return f"matrix({_join(m.a, m.b, m.c, m.d, m.e, m.f)})"

    def __str__(self) -> str:
        return self.string


class StringRenderer:
    """Writes a textual, indented description of everything drawn."""

    def __init__(self) -> None:
        self._parts: List[str] = []
        self._indent = 0
        self._depth = 0

    @property
    def string(self) -> str:
        """Everything written so far."""
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.string

    def create_path(self) -> StringPath:
        """Return a new empty path."""
        return StringPath()

    def create_transform(
        self, a: float, b: float, c: float, d: float, tx: float, ty: float
    ) -> StringTransform:
        """Return a new transform with the given matrix."""
        return StringTransform(a, b, c, d, tx, ty)

    def save(self, graphic_style: GraphicStyle) -> None:
        """Open a group carrying ``graphic_style``."""
        self._write_indent()
        self._write("[group")
        self._write_graphic(graphic_style)
        self._indent += _INDENT_STEP
        self._depth += 1
        self._write("\n")

    def restore(self) -> None:
        """Close the innermost open group."""
        if self._depth == 0:
            raise RuntimeError("restore() without a matching save()")
        self._depth -= 1
        self._indent -= _INDENT_STEP
        self._write_indent()
        self._write("]\n")

    def draw_path(
        self,
        path: StringPath,
        graphic_style: GraphicStyle,
        fill_style: FillStyle,
        stroke_style: StrokeStyle,
    ) -> None:
        """Describe a filled and/or stroked path."""
        self._write_indent()
        self._write(f"[path{path}")
        self._write_graphic(graphic_style)

        self._indent += _INDENT_STEP
        self._write("\n")
        self._write_indent()

        self._write_fill(fill_style)
        self._write("\n")
        self._write_indent()

        self._write_stroke(stroke_style)
        self._write("]")
        self._indent -= _INDENT_STEP
        self._write("\n")

    def draw_image(
        self, image: Any, graphic_style: GraphicStyle, clip_area: Rect, fill_area: Rect
    ) -> None:
        """Describe an image; the image itself is written with ``str()``."""
        self._write_indent()
        self._write("[image ")
        self._write(f"clip({self._rect_text(clip_area)}) ")
        self._write(f"fill({self._rect_text(fill_area)}) ")
        self._write_graphic(graphic_style)
        self._write(f" {image}]")
        self._write("\n")

    @staticmethod
    def _rect_text(rect: Rect) -> str:
        return ", ".join(format_number(v) for v in (rect.x, rect.y, rect.width, rect.height))

    def _write(self, text: str) -> None:
        self._parts.append(text)

    def _write_indent(self) -> None:
        self._write(" " * self._indent)

    @staticmethod
    def _winding(rule: WindingRule) -> str:
        return "nonzero" if rule == WindingRule.NON_ZERO else "evenodd"

    def _write_fill(self, fill_style: FillStyle) -> None:
        self._write("fill: {")
        self._write(f"hasFill: {'true' if fill_style.has_fill else 'false'}")
        self._write(f" winding: {self._winding(fill_style.fill_rule)}")
        if fill_style.fill_opacity != 1.0:
            self._write(f" opacity: {format_number(fill_style.fill_opacity)}")
        self._write_paint(fill_style.paint)
        self._write("}")

    def _write_stroke(self, stroke_style: StrokeStyle) -> None:
        self._write("stroke: {")
        self._write(f"hasStroke: {'true' if stroke_style.has_stroke else 'false'}")
        self._write(f" width: {format_number(stroke_style.line_width)}")
        if stroke_style.stroke_opacity != 1.0:
            self._write(f" opacity: {format_number(stroke_style.stroke_opacity)}")
        self._write(f" cap: {stroke_style.line_cap.value}")
        self._write(f" join: {stroke_style.line_join.value}")
        self._write(f" miter: {format_number(stroke_style.miter_limit)}")
        if stroke_style.dash_array:
            self._write(" dash:")
            self._write("".join(f" {format_number(d)}" for d in stroke_style.dash_array))
        self._write(f" dashOffset: {format_number(stroke_style.dash_offset)}")
        self._write_paint(stroke_style.paint)
        self._write("}")

    def _write_graphic(self, graphic_style: GraphicStyle) -> None:
        if graphic_style.opacity != 1.0:
            self._write(f" opacity: {format_number(graphic_style.opacity)}")
        if graphic_style.transform is not None:
            self._write(f" transform: {graphic_style.transform}")
        clipping = graphic_style.clipping_path
        if clipping is not None and clipping.path is not None:
            self._write(" clipping: {")
            self._write(f" winding: {self._winding(clipping.clip_rule)}")
            if clipping.transform is not None:
                self._write(f" transform: {clipping.transform}")
            self._write(f" [path{clipping.path}")
            self._write("]}")

    def _write_paint(self, paint: Paint) -> None:
        if isinstance(paint, Gradient):
            self._write_gradient(paint)
        elif isinstance(paint, tuple):
            self._write(f" paint: rgba({_join(*paint)})")

    def _write_gradient(self, gradient: Gradient) -> None:
        self._write(" paint: {")
        self._write("\n")
        self._indent += _INDENT_STEP
        self._write_indent()
        self._write(f"{gradient.type.value}:")
        if gradient.transform is not None:
            self._write(f" transform: {gradient.transform}")
        if gradient.type == GradientType.LINEAR:
            names = ("x1", "y1", "x2", "y2")
        else:
            names = ("cx", "cy", "fx", "fy", "r")
        for name in names:
            value: Optional[float] = getattr(gradient, name)
            if value is not None and math.isfinite(value):
                self._write(f" {name}: {format_number(value)}")
        self._write(f" method: {gradient.method.value}")
        self._write(" stops: {")
        self._write("\n")
        self._indent += _INDENT_STEP
        for offset, color in gradient.color_stops:
            self._write_indent()
            self._write(f"offset: {format_number(offset)}")
            self._write(f" rgba({_join(*color)})")
            self._write("\n")
        self._indent -= _INDENT_STEP
        self._write_indent()
        self._write("}}")
        self._indent -= _INDENT_STEP