"""Intersection boxes with concave quarter-arc notches at the corners.

The box is the ROW x ROW overlap of two perpendicular roads. A notch is cut
into a box corner with the same radius as the fillet that sits there, so the
box fill and the fillet share a boundary.
"""
import math
from typing import NamedTuple

from shared.types import Rect, Ring, CornerRadii
from shared.geometry import arc_poly, append_pt, extend_pts, close_ring
from roads.bands import clamp_radius
from roads.constants import ARC_SEGMENTS


class NotchedRect(NamedTuple):
    ring: Ring
    rect: Rect
    radii: CornerRadii     # after clamping


def _notch(ring: Ring, corner, r: float, sa: float, ea: float, start, end, segments: int) -> None:
    # arc centred on the box corner, traced clockwise so it bites into the box
    if r <= 0:
        append_pt(ring, corner)
        return
    pts = arc_poly(corner[0], corner[1], r, sa, ea, segments)
    pts[0], pts[-1] = start, end
    extend_pts(ring, pts)


def notched_rect(rect: Rect, radii: CornerRadii, segments: int = ARC_SEGMENTS) -> NotchedRect | None:
    """Closed CCW box ring, or None when the box has no area."""
    x0, x1, y0, y1 = rect
    w = x1 - x0; h = y1 - y0
    if w <= 0 or h <= 0:
        return None
    r_bl, r_br, r_tr, r_tl = (clamp_radius(r, w, h) for r in radii)
    pi = math.pi

    ring = [(x0 + r_bl, y0)]
    append_pt(ring, (x1 - r_br, y0))
    _notch(ring, (x1, y0), r_br, pi, pi/2, (x1 - r_br, y0), (x1, y0 + r_br), segments)
    append_pt(ring, (x1, y1 - r_tr))
    _notch(ring, (x1, y1), r_tr, 3*pi/2, pi, (x1, y1 - r_tr), (x1 - r_tr, y1), segments)
    append_pt(ring, (x0 + r_tl, y1))
    _notch(ring, (x0, y1), r_tl, 2*pi, 3*pi/2, (x0 + r_tl, y1), (x0, y1 - r_tl), segments)
    append_pt(ring, (x0, y0 + r_bl))
    _notch(ring, (x0, y0), r_bl, pi/2, 0.0, (x0, y0 + r_bl), (x0 + r_bl, y0), segments)
    return NotchedRect(close_ring(ring), rect, CornerRadii(r_bl, r_br, r_tr, r_tl))
