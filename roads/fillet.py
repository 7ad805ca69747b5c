"""Curved corner fillets where two perpendicular roads meet.

A fillet is a stack of annular sectors centred on a corner point. Each sector
is one zone kind (transition zone, sidewalk, verge, parking) merged from the
two roads' zone stacks, stacked outward from radius 0 at the corner point.

Corner quadrants (angles in radians, counter-clockwise from +x):

    rear-left   [pi/2, pi]      rear-right  [0, pi/2]
    front-left  [pi, 3pi/2]     front-right [3pi/2, 2pi]
"""
import logging
import math
from typing import Mapping, NamedTuple

from shared.types import CornerKey, Point, Ring, Shape, Side
from shared.geometry import GeometryError, arc_poly, extend_pts, close_ring
from roads.constants import ARC_SEGMENTS, FILLET_BASE_Z, FILLET_Z_STEP, MERGE_ORDER, ZONE_ORDER
from roads.profile import (
    TOWARD_LOT, RoadProfile, is_active, is_alley, opposite, zone_key, zone_width,
)
from roads.styles import Drawable, Fill, Stroke, resolve_style, fill_of, stroke_of

_logger = logging.getLogger(__name__)

_CORNER_ANGLES = {
    "front-left": (math.pi, 1.5 * math.pi),
    "front-right": (1.5 * math.pi, 2 * math.pi),
    "rear-left": (0.5 * math.pi, math.pi),
    "rear-right": (0.0, 0.5 * math.pi),
}


class ZoneEntry(NamedTuple):
    """One present zone on one side of a road."""
    kind: str
    depth: float
    style_key: str


class MergedZoneEntry(NamedTuple):
    kind: str
    depth: float
    style_key: str


class FilletZone(NamedTuple):
    """One annular sector of a corner fillet."""
    zone_type: str
    style_key: str
    shape: Shape
    inner_radius: float
    outer_radius: float
    fill: Fill
    stroke: Stroke
    outer_arc: list[Point]
    inner_arc: list[Point]   # empty when inner_radius == 0
    z_offset: float


# ============================================================
# Arc Geometry
# ============================================================

def corner_angles(corner: CornerKey) -> tuple[float, float]:
    """(start, end) angles of the 90 degree quadrant swept at a corner."""
    try:
        return _CORNER_ANGLES[corner]
    except KeyError:
        raise GeometryError(f"unknown corner key {corner!r}") from None


def arc_points(radius: float, start: float, end: float, segments: int = ARC_SEGMENTS,
               center: Point = (0.0, 0.0)) -> list[Point]:
    """segments+1 samples along a circular arc."""
    return arc_poly(center[0], center[1], radius, start, end, segments)


def compute_zone_arc(inner: float, outer: float, start: float, end: float,
                     segments: int = ARC_SEGMENTS, center: Point = (0.0, 0.0)) -> Ring:
    """Closed annular sector ring.

    Traced inner@start -> outer@start -> outer arc to end -> inner@end ->
    inner arc back to start. With inner == 0 the inner arc collapses to the
    centre and the ring is a pie slice.
    """
    outer_pts = arc_points(outer, start, end, segments, center)
    inner_pts = arc_points(inner, start, end, segments, center)
    ring = []
    extend_pts(ring, [inner_pts[0]] + outer_pts + inner_pts[::-1])
    return close_ring(ring)


# ============================================================
# Zone Stacks
# ============================================================

def zone_stack(road: RoadProfile, side: Side) -> list[ZoneEntry]:
    """Present zones (depth > 0) on one side, in storage order."""
    return [
        ZoneEntry(kind, zone_width(road, side, kind), zone_key(side, kind))
        for kind in ZONE_ORDER
        if zone_width(road, side, kind) > 0
    ]


def resolve_side(road: RoadProfile, side: Side) -> tuple[Side, list[ZoneEntry]]:
    """Zone stack for the requested side, falling back to the opposite side when it is empty."""
    stack = zone_stack(road, side)
    if stack:
        return side, stack
    other = opposite(side)
    stack = zone_stack(road, other)
    if stack:
        return other, stack
    return side, []


def merge_zone(a: ZoneEntry | None, b: ZoneEntry | None) -> MergedZoneEntry | None:
    """Merge one zone kind from two roads.

    Both present -> mean depth; one present -> its depth; nothing usable -> None.
    The style key comes from road A when it has the zone.
    """
    if a is None and b is None:
        return None
    if a is not None and b is not None:
        depth = (a.depth + b.depth) / 2
    else:
        depth = (a or b).depth
    if depth <= 0:
        return None
    src = a if a is not None else b
    return MergedZoneEntry(src.kind, depth, src.style_key)


def merge_zone_stacks(stack_a: list[ZoneEntry], stack_b: list[ZoneEntry]) -> list[MergedZoneEntry]:
    """Merged zones in lot-corner-outward order."""
    by_a = {z.kind: z for z in stack_a}
    by_b = {z.kind: z for z in stack_b}
    merged = []
    for kind in MERGE_ORDER:
        m = merge_zone(by_a.get(kind), by_b.get(kind))
        if m is not None:
            merged.append(m)
    return merged


def stack_radii(merged: list[MergedZoneEntry]) -> list[tuple[float, float]]:
    """Contiguous (inner, outer) radius pairs starting at 0."""
    radii = []
    r = 0.0
    for m in merged:
        radii.append((r, r + m.depth))
        r += m.depth
    return radii


# ============================================================
# Corner Stack
# ============================================================

def compute_corner_zone_stack(
    road_a: RoadProfile | None,
    road_b: RoadProfile | None,
    corner: CornerKey,
    styles: Mapping | None = None,
    side_a: Side = TOWARD_LOT,
    side_b: Side = TOWARD_LOT,
    center: Point = (0.0, 0.0),
    segments: int = ARC_SEGMENTS,
    base_z: float = FILLET_BASE_Z,
    line_scale: float = 1.0,
) -> list[FilletZone]:
    """Fillet sectors for one corner, lot corner outward.

    Missing or disabled roads give no fillet. An alley on either side vetoes
    the whole corner.
    """
    start, end = corner_angles(corner)
    if not (is_active(road_a) and is_active(road_b)):
        return []
    if is_alley(road_a) or is_alley(road_b):
        _logger.debug("%s: alley road, fillet suppressed", corner)
        return []

    _, stack_a = resolve_side(road_a, side_a)
    _, stack_b = resolve_side(road_b, side_b)
    merged = merge_zone_stacks(stack_a, stack_b)

    zones = []
    for i, (m, (r0, r1)) in enumerate(zip(merged, stack_radii(merged))):
        style = resolve_style(styles, m.style_key, m.kind)
        zones.append(FilletZone(
            zone_type=m.kind,
            style_key=m.style_key,
            shape=Shape(compute_zone_arc(r0, r1, start, end, segments, center)),
            inner_radius=r0,
            outer_radius=r1,
            fill=fill_of(style),
            stroke=stroke_of(style, line_scale),
            outer_arc=arc_points(r1, start, end, segments, center),
            inner_arc=arc_points(r0, start, end, segments, center) if r0 > 0 else [],
            z_offset=base_z + i * FILLET_Z_STEP,
        ))
    return zones


def fillet_outer_radius(zones: list[FilletZone]) -> float:
    """Outer radius of the whole fillet, 0 when there is none."""
    return zones[-1].outer_radius if zones else 0.0


def fillet_drawables(key: str, zones: list[FilletZone]) -> list[Drawable]:
    """Drawables for a fillet: each sector filled, its arcs stroked."""
    out = []
    for i, z in enumerate(zones):
        outlines = (z.outer_arc, z.inner_arc) if z.inner_arc else (z.outer_arc,)
        out.append(Drawable(key=f"{key}-{i}", kind=z.zone_type, shape=z.shape, z_offset=z.z_offset,
                            fill=z.fill, outlines=outlines, stroke=z.stroke))
    return out
