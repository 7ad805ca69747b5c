"""Site layout: corridors, corner fillets and intersection boxes for one lot.

Each lot corner pairs a front/rear road (road A) with a left/right road
(road B). Where both are streets the corner gets an intersection box (the
ROW x ROW square beyond the lot corner) with a fillet at each of its four
corners:

    tt  the lot corner itself            both roads' toward-lot sides
    ta  across road B                    road A toward-lot, road B away side
    at  across road A                    road A away side, road B toward-lot
    aa  the diagonal corner              both away sides

Each box corner is notched by the outer radius of the fillet sitting there.
Alley corners get no fillet: the street runs through the alley footprint
and a fill patch joins the alley pavement to the street's curb.
"""
import logging
import math
from typing import Mapping, NamedTuple

from shared.types import CornerKey, Direction, Point, Rect, Shape, CornerRadii
from shared.geometry import GeometryError, rect_ring, rect_valid
from roads.bands import build_corridor_bands, band_drawables, default_corner_limits
from roads.constants import (
    ARC_SEGMENTS, INTERSECTION_Z, ALLEY_FILL_Z, ALLEY_FILL_KEY, ROAD_SURFACE_KEY, ROAD_SURFACE_STYLE,
)
from roads.corridor import build_corridor_strips, corridor_strip_rect, road_span
from roads.fillet import (
    FilletZone, corner_angles, compute_corner_zone_stack, fillet_outer_radius, fillet_drawables,
)
from roads.notch import NotchedRect, notched_rect
from roads.profile import (
    TOWARD_LOT, AWAY_FROM_LOT, RoadProfile, is_active, is_alley, curb_to_lot_line, resolve_roads, zone_offsets,
)
from roads.styles import Drawable, resolve_style, surface_style, fill_of

_logger = logging.getLogger(__name__)

CORNERS: tuple[CornerKey, ...] = ("front-left", "front-right", "rear-left", "rear-right")

# end-state tags
CAPPED = "capped"
OPEN = "open"
EXTENDED = "extended"

_FLIP = {"front": "rear", "rear": "front", "left": "right", "right": "left"}
_OUTWARD = {"front": -1.0, "rear": 1.0, "left": -1.0, "right": 1.0}

# direction -> (corner at u_start, corner at u_end)
_END_CORNERS = {
    "front": ("front-left", "front-right"),
    "rear": ("rear-left", "rear-right"),
    "left": ("front-left", "rear-left"),
    "right": ("front-right", "rear-right"),
}

# lot corner -> rectangle corner of the band network
_LOT_CORNER_LABEL = {"front-left": "bl", "front-right": "br", "rear-left": "tl", "rear-right": "tr"}

# sub-corner label, crosses road A, crosses road B
_SUB_CORNERS = (
    ("tt", False, False),
    ("ta", False, True),
    ("at", True, False),
    ("aa", True, True),
)


class RoadEnds(NamedTuple):
    start: str
    end: str


class IntersectionPlan(NamedTuple):
    """Everything produced at one lot corner.

    kind is "fillet" (two streets), "alley" (street meets alley),
    "alley-alley" or "none" (a road is missing or disabled).
    """
    corner: CornerKey
    kind: str
    fillets: dict[str, list[FilletZone]]
    box: NotchedRect | None
    patch: Rect | None
    dominant: Direction | None
    drawables: list[Drawable]


class SiteLayout(NamedTuple):
    drawables: list[Drawable]
    intersections: dict[CornerKey, IntersectionPlan]
    ends: dict[Direction, RoadEnds]


# ============================================================
# Corner Geometry
# ============================================================

def corner_for(dir_a: Direction, dir_b: Direction) -> CornerKey:
    """Corner key where two perpendicular roads meet, in either argument order."""
    pair = {dir_a, dir_b}
    fr = pair & {"front", "rear"}
    lr = pair & {"left", "right"}
    if len(fr) != 1 or len(lr) != 1:
        raise GeometryError(f"{dir_a} and {dir_b} roads do not meet at a corner")
    return f"{fr.pop()}-{lr.pop()}"


def corner_roads(corner: CornerKey) -> tuple[Direction, Direction]:
    """(road A, road B) directions meeting at a corner."""
    corner_angles(corner)
    a, b = corner.split("-")
    return a, b


def corner_point(corner: CornerKey, lot: Rect) -> Point:
    a, b = corner_roads(corner)
    return (lot.x_min if b == "left" else lot.x_max,
            lot.y_min if a == "front" else lot.y_max)


def box_rect(corner: CornerKey, lot: Rect, row_a: float, row_b: float) -> Rect:
    """ROW x ROW square beyond the lot corner."""
    a, b = corner_roads(corner)
    px, py = corner_point(corner, lot)
    x0, x1 = sorted((px, px + _OUTWARD[b] * row_b))
    y0, y1 = sorted((py, py + _OUTWARD[a] * row_a))
    return Rect(x0, x1, y0, y1)


def _flip_a(corner: CornerKey) -> CornerKey:
    a, b = corner.split("-")
    return f"{_FLIP[a]}-{b}"


def _flip_b(corner: CornerKey) -> CornerKey:
    a, b = corner.split("-")
    return f"{a}-{_FLIP[b]}"


def box_corner_label(quadrant: CornerKey) -> str:
    """Box corner ("bl", "br", "tr", "tl") that a fillet sweeping this quadrant notches."""
    start, end = corner_angles(quadrant)
    mid = (start + end) / 2
    return ("b" if math.sin(mid) > 0 else "t") + ("l" if math.cos(mid) > 0 else "r")


# ============================================================
# Road Ends
# ============================================================

def _end_state(road: RoadProfile, other: RoadProfile | None) -> str:
    if not is_active(other):
        return CAPPED
    if is_alley(road) or not is_alley(other):
        return OPEN
    return EXTENDED


def plan_road_ends(roads: Mapping[Direction, RoadProfile]) -> dict[Direction, RoadEnds]:
    """End state at (start, end) of every enabled road.

    capped    no enabled road continues the corridor at that end
    open      the perpendicular road's box or strips take over
    extended  this street runs on through the alley's footprint, capped beyond it
    """
    ends = {}
    for d, road in roads.items():
        if not is_active(road):
            continue
        states = []
        for corner in _END_CORNERS[d]:
            a, b = corner_roads(corner)
            states.append(_end_state(road, roads.get(b if d == a else a)))
        ends[d] = RoadEnds(*states)
    return ends


def road_strip_span(direction: Direction, ends: RoadEnds, roads: Mapping[Direction, RoadProfile],
                    lot: Rect) -> tuple[float, float]:
    """Lot-edge span, lengthened by the alley's ROW at each extended end."""
    u0, u1 = road_span(direction, lot)
    start_corner, end_corner = _END_CORNERS[direction]
    if ends.start == EXTENDED:
        u0 -= roads[_other_road(start_corner, direction)].right_of_way
    if ends.end == EXTENDED:
        u1 += roads[_other_road(end_corner, direction)].right_of_way
    return u0, u1


def _other_road(corner: CornerKey, direction: Direction) -> Direction:
    a, b = corner_roads(corner)
    return b if direction == a else a


# ============================================================
# Intersections
# ============================================================

def _alley_patch(corner: CornerKey, alley: RoadProfile, street: RoadProfile, lot: Rect) -> Rect:
    # alley pavement, carried across the street's curb-to-lot-line strip
    pave = zone_offsets(alley)[0]
    depth = curb_to_lot_line(street)
    u0, u1 = road_span(alley.direction, lot)
    if corner == _END_CORNERS[alley.direction][0]:
        u_lo, u_hi = u0 - depth, u0
    else:
        u_lo, u_hi = u1, u1 + depth
    return corridor_strip_rect(alley.direction, lot, u_lo, u_hi, pave.v0, pave.v1)


def _fill_drawable(key: str, kind: str, ring, z: float, style: Mapping) -> Drawable:
    return Drawable(key=key, kind=kind, shape=Shape(ring), z_offset=z,
                    fill=fill_of(style), outlines=(), stroke=None)


def plan_intersection(
    corner: CornerKey,
    roads: Mapping[Direction, RoadProfile],
    lot: Rect,
    styles: Mapping | None = None,
    line_scale: float = 1.0,
    segments: int = ARC_SEGMENTS,
) -> IntersectionPlan:
    """Fillets, notched box or alley treatment at one lot corner."""
    dir_a, dir_b = corner_roads(corner)
    road_a, road_b = roads.get(dir_a), roads.get(dir_b)
    if not (is_active(road_a) and is_active(road_b)):
        return IntersectionPlan(corner, "none", {}, None, None, None, [])

    alley_fill = resolve_style(styles, ALLEY_FILL_KEY, ROAD_SURFACE_KEY, default=ROAD_SURFACE_STYLE)
    alley_a, alley_b = is_alley(road_a), is_alley(road_b)

    if alley_a and alley_b:
        rect = box_rect(corner, lot, road_a.right_of_way, road_b.right_of_way)
        drawables = [_fill_drawable(f"{corner}-alley-box", ALLEY_FILL_KEY, rect_ring(rect), ALLEY_FILL_Z, alley_fill)]
        _logger.debug("%s: alley meets alley, plain box", corner)
        return IntersectionPlan(corner, "alley-alley", {}, None, rect, None, drawables)

    if alley_a or alley_b:
        street, alley = (road_b, road_a) if alley_a else (road_a, road_b)
        patch = _alley_patch(corner, alley, street, lot)
        drawables = []
        if rect_valid(patch):
            drawables.append(_fill_drawable(f"{corner}-alley-fill", ALLEY_FILL_KEY, rect_ring(patch),
                                            ALLEY_FILL_Z, alley_fill))
        _logger.debug("%s: alley corner, %s road extended", corner, street.direction)
        return IntersectionPlan(corner, "alley", {}, None, patch, street.direction, drawables)

    px, py = corner_point(corner, lot)
    row_a, row_b = road_a.right_of_way, road_b.right_of_way
    fillets = {}
    radii = {}
    drawables = []
    for label, cross_a, cross_b in _SUB_CORNERS:
        quadrant = corner
        if cross_a:
            quadrant = _flip_a(quadrant)
        if cross_b:
            quadrant = _flip_b(quadrant)
        center = (px + (_OUTWARD[dir_b] * row_b if cross_b else 0.0),
                  py + (_OUTWARD[dir_a] * row_a if cross_a else 0.0))
        zones = compute_corner_zone_stack(
            road_a, road_b, quadrant, styles,
            side_a=AWAY_FROM_LOT if cross_a else TOWARD_LOT,
            side_b=AWAY_FROM_LOT if cross_b else TOWARD_LOT,
            center=center, segments=segments, line_scale=line_scale,
        )
        fillets[label] = zones
        radii[box_corner_label(quadrant)] = fillet_outer_radius(zones)
        drawables.extend(fillet_drawables(f"{corner}-{label}", zones))

    box = notched_rect(box_rect(corner, lot, row_a, row_b), CornerRadii(**radii), segments)
    if box is not None:
        drawables.insert(0, _fill_drawable(f"{corner}-box", "intersection", box.ring,
                                           INTERSECTION_Z, surface_style(styles)))
    return IntersectionPlan(corner, "fillet", fillets, box, None, None, drawables)


# ============================================================
# Layout
# ============================================================

def compute_layout(
    lot: Rect,
    roads: Mapping,
    styles: Mapping | None = None,
    line_scale: float = 1.0,
    unified: bool = False,
    segments: int = ARC_SEGMENTS,
) -> SiteLayout:
    """All drawables for a lot and its roads, ordered by z-offset.

    roads maps direction -> host record, RoadProfile or None. With unified
    the per-road strips are replaced by the continuous band network, left
    square at corners the intersections already cover.
    """
    profiles = resolve_roads(roads)
    if not rect_valid(lot):
        _logger.debug("degenerate lot %s, nothing to lay out", lot)
        return SiteLayout([], {}, {})

    ends = plan_road_ends(profiles)
    plans = {c: plan_intersection(c, profiles, lot, styles, line_scale, segments) for c in CORNERS}

    drawables = []
    if unified:
        limits = default_corner_limits(profiles)
        handled = {_LOT_CORNER_LABEL[c]: 0.0 for c, p in plans.items()
                   if p.kind != "none" and (p.kind != "fillet" or any(p.fillets.values()))}
        bands = build_corridor_bands(lot, profiles, limits._replace(**handled))
        drawables.extend(band_drawables(bands, styles))
    else:
        for d, road_ends in ends.items():
            span = road_strip_span(d, road_ends, profiles, lot)
            capped = (road_ends.start != OPEN, road_ends.end != OPEN)
            drawables.extend(build_corridor_strips(profiles[d], lot, styles, span, capped, line_scale))

    for plan in plans.values():
        drawables.extend(plan.drawables)
    drawables.sort(key=lambda dr: dr.z_offset)
    return SiteLayout(drawables, plans, ends)
