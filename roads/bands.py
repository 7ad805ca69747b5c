"""Continuous corridor bands wrapping the lot: one ring shape per zone band.

Each band is the region between two offset rectangles around the lot. Offsets
come from each edge's band boundaries, so a band can be thick on one edge and
absent on another. Disabled edges contribute zero offsets.
"""
import logging
from typing import Mapping, NamedTuple

from shared.types import Direction, Rect, Ring, EdgeOffsets, CornerRadii, Shape
from shared.geometry import quad_bezier, append_pt, extend_pts, close_ring, rect_valid
from roads.constants import BAND_ZONES, BAND_BASE_Z, BAND_Z_STEP, CORNER_SEGMENTS
from roads.profile import DIRECTIONS, RoadProfile, is_active, curb_depth
from roads.styles import Drawable, band_style, fill_of

_logger = logging.getLogger(__name__)


class ZoneBand(NamedTuple):
    """Ring shape for one band of the continuous network."""
    index: int
    zone_type: str
    shape: Shape
    inner: EdgeOffsets
    outer: EdgeOffsets
    z_offset: float


# ============================================================
# Boundaries and radii
# ============================================================

def band_boundaries(profile: RoadProfile) -> list[float]:
    """Cumulative offsets b0..b5 from the lot edge outward.

    Near strips use the toward-lot side, the far sidewalk the away side.
    Every boundary is capped at the right-of-way, and b4 never drops below
    b3, so the far sidewalk cannot overlap the near strips.
    """
    row = profile.right_of_way
    near, far = profile.right, profile.left
    b1 = min(near.sidewalk, row)
    b2 = min(b1 + near.verge, row)
    b3 = min(b2 + profile.road_width, row)
    b4 = max(b3, row - far.sidewalk)
    return [0.0, b1, b2, b3, b4, row]


def clamp_radius(r: float, w: float, h: float) -> float:
    """Largest usable corner radius: never negative, never past half of either side."""
    return max(0.0, min(r, w / 2, h / 2))


def _corner(ring: Ring, ctrl, end, r: float, segments: int) -> None:
    if r > 0:
        extend_pts(ring, quad_bezier(ring[-1], ctrl, end, segments)[1:])
    else:
        append_pt(ring, ctrl)


def rounded_rect_ring(rect: Rect, radii: CornerRadii, segments: int = CORNER_SEGMENTS) -> Ring:
    """Closed CCW rectangle ring with per-corner quadratic rounding.

    A zero radius gives a straight joint. Radii are clamped to half the
    smaller side. Degenerate rectangles give an empty ring.
    """
    left, right, bottom, top = rect
    w = right - left; h = top - bottom
    if w <= 0 or h <= 0:
        return []
    r_bl, r_br, r_tr, r_tl = (clamp_radius(r, w, h) for r in radii)

    ring = [(left + r_bl, bottom)]
    append_pt(ring, (right - r_br, bottom))
    _corner(ring, (right, bottom), (right, bottom + r_br), r_br, segments)
    append_pt(ring, (right, top - r_tr))
    _corner(ring, (right, top), (right - r_tr, top), r_tr, segments)
    append_pt(ring, (left + r_tl, top))
    _corner(ring, (left, top), (left, top - r_tl), r_tl, segments)
    append_pt(ring, (left, bottom + r_bl))
    _corner(ring, (left, bottom), (left + r_bl, bottom), r_bl, segments)
    return close_ring(ring)


def offset_rect(lot: Rect, off: EdgeOffsets) -> Rect:
    """Lot rectangle pushed outward by a per-edge offset."""
    return Rect(lot.x_min - off.left, lot.x_max + off.right,
                lot.y_min - off.front, lot.y_max + off.rear)


def _corner_radius(depth_a: float, depth_b: float, limit: float) -> float:
    return max(0.0, min(depth_a, depth_b, limit))


def band_corner_radii(off: EdgeOffsets, limits: CornerRadii) -> CornerRadii:
    """Corner radius = min(the two adjacent edge offsets, the corner's ceiling)."""
    return CornerRadii(
        bl=_corner_radius(off.front, off.left, limits.bl),
        br=_corner_radius(off.front, off.right, limits.br),
        tr=_corner_radius(off.rear, off.right, limits.tr),
        tl=_corner_radius(off.rear, off.left, limits.tl),
    )


def default_corner_limits(profiles: Mapping[Direction, RoadProfile]) -> CornerRadii:
    """Rounding ceiling per lot corner: the smaller curb depth where both edges carry a road."""
    def limit(a, b):
        pa, pb = profiles.get(a), profiles.get(b)
        if not (is_active(pa) and is_active(pb)):
            return 0.0
        return min(curb_depth(pa), curb_depth(pb))
    return CornerRadii(
        bl=limit("front", "left"), br=limit("front", "right"),
        tr=limit("rear", "right"), tl=limit("rear", "left"),
    )


# ============================================================
# Shapes
# ============================================================

def create_band_shape(
    lot: Rect, inner: EdgeOffsets, outer: EdgeOffsets, corner_limits: CornerRadii,
) -> Shape | None:
    """Ring between the inner and outer offset rectangles, or None if no edge has thickness."""
    if not rect_valid(lot):
        return None
    if not any(o > i for o, i in zip(outer, inner)):
        return None
    outer_ring = rounded_rect_ring(offset_rect(lot, outer), band_corner_radii(outer, corner_limits))
    hole = rounded_rect_ring(offset_rect(lot, inner), band_corner_radii(inner, corner_limits))
    return Shape(outer=outer_ring, holes=(hole[::-1],) if hole else ())


def build_corridor_bands(
    lot: Rect,
    profiles: Mapping[Direction, RoadProfile],
    corner_limits: CornerRadii | None = None,
) -> list[ZoneBand]:
    """Five bands (sidewalk, verge, pavement, verge, sidewalk) around the lot."""
    bounds = {}
    for d in DIRECTIONS:
        p = profiles.get(d)
        bounds[d] = band_boundaries(p) if is_active(p) else [0.0] * 6
    if corner_limits is None:
        corner_limits = default_corner_limits(profiles)

    bands = []
    for i, kind in enumerate(BAND_ZONES):
        inner = EdgeOffsets(**{d: bounds[d][i] for d in DIRECTIONS})
        outer = EdgeOffsets(**{d: bounds[d][i+1] for d in DIRECTIONS})
        shape = create_band_shape(lot, inner, outer, corner_limits)
        if shape is None:
            _logger.debug("band %d (%s) has no thickness; omitted", i, kind)
            continue
        bands.append(ZoneBand(i, kind, shape, inner, outer, BAND_BASE_Z + i * BAND_Z_STEP))
    return bands


def band_drawables(bands: list[ZoneBand], styles: Mapping | None) -> list[Drawable]:
    """Fill-only drawables for the band network."""
    return [
        Drawable(key=f"band-{b.index}", kind=b.zone_type, shape=b.shape, z_offset=b.z_offset,
                 fill=fill_of(band_style(styles, b.zone_type)), outlines=(), stroke=None)
        for b in bands
    ]
