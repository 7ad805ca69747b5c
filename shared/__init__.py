"""Shared types, geometry helpers, and SVG preview utilities."""

from .types import (
    Point, Ring, Direction, CornerKey, Side,
    Rect, LotBounds, EdgeOffsets, CornerRadii, Shape,
)
from .geometry import (
    GeometryError,
    arc_poly, quad_bezier,
    append_pt, extend_pts, close_ring, is_closed, rect_ring, rect_valid,
    poly_area, signed_area, dist,
)
from .svg import make_svg_transform, W, H
