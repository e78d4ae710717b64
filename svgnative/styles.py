"""Style, geometry and paint descriptions handed to renderers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple, Union

Color = Tuple[float, float, float, float]
"""An RGBA colour with every channel in the range 0..1."""

ColorStop = Tuple[float, Color]
"""A gradient stop: an offset and the colour at that offset."""

BLACK: Color = (0.0, 0.0, 0.0, 1.0)


class WindingRule(str, Enum):
    """Rule deciding which regions of a path are inside it."""

    NON_ZERO = "nonzero"
    EVEN_ODD = "evenodd"


class LineCap(str, Enum):
    """Shape drawn at the open ends of a stroked path."""

    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"


class LineJoin(str, Enum):
    """Shape drawn where two stroked segments meet."""

    MITER = "miter"
    ROUND = "round"
    BEVEL = "bevel"


class SpreadMethod(str, Enum):
    """How a gradient fills the area outside its own extent."""

    PAD = "pad"
    REFLECT = "reflect"
    REPEAT = "repeat"


class GradientType(str, Enum):
    """Kind of gradient."""

    LINEAR = "linearGradient"
    RADIAL = "radialGradient"


class ImageEncoding(str, Enum):
    """Encoding of an embedded raster image."""

    PNG = "png"
    JPEG = "jpeg"


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def is_empty(self) -> bool:
        """True when the rectangle covers no area."""
        return self.width <= 0 or self.height <= 0


@dataclass
class Gradient:
    """A linear or radial gradient paint.

    Coordinates that were never given stay NaN.
    """

    type: GradientType = GradientType.LINEAR
    method: SpreadMethod = SpreadMethod.PAD
    color_stops: List[ColorStop] = field(default_factory=list)
    x1: float = math.nan
    y1: float = math.nan
    x2: float = math.nan
    y2: float = math.nan
    cx: float = math.nan
    cy: float = math.nan
    fx: float = math.nan
    fy: float = math.nan
    r: float = math.nan
    transform: Optional[Any] = None


Paint = Union[Color, Gradient]


@dataclass
class ClippingPath:
    """A path that clips what is drawn, with its own transform and rule."""

    path: Optional[Any] = None
    transform: Optional[Any] = None
    clip_rule: WindingRule = WindingRule.NON_ZERO


@dataclass
class GraphicStyle:
    """Opacity, transform and clipping shared by a group or a shape."""

    opacity: float = 1.0
    transform: Optional[Any] = None
    clipping_path: Optional[ClippingPath] = None


@dataclass
class FillStyle:
    """How the interior of a path is painted."""

    has_fill: bool = True
    fill_rule: WindingRule = WindingRule.NON_ZERO
    fill_opacity: float = 1.0
    paint: Paint = BLACK


@dataclass
class StrokeStyle:
    """How the outline of a path is painted."""

    has_stroke: bool = False
    stroke_opacity: float = 1.0
    line_width: float = 1.0
    line_cap: LineCap = LineCap.BUTT
    line_join: LineJoin = LineJoin.MITER
    miter_limit: float = 4.0
    dash_array: List[float] = field(default_factory=list)
    dash_offset: float = 0.0
    paint: Paint = BLACK