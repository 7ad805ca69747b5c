"""Per-road corridor strips: pavement and side-zone rectangles along one lot edge.

Strips are laid out in a canonical frame (u along the road, v outward from the
lot line) and mapped to world space per direction:

    front  (u, y_min - v)      rear   (u, y_max + v)
    left   (x_min - v, u)      right  (x_max + v, u)

u runs from the low-coordinate end ("start") to the high one ("end").
"""
from typing import Mapping

from shared.types import Direction, Point, Rect, Shape
from shared.geometry import rect_ring, rect_valid
from roads.constants import STRIP_Z, STRIP_Z_STEP, ROW_LINE_Z, ROW_LINE_KEY, ROW_LINE_STYLE
from roads.profile import RoadProfile, is_active, zone_offsets
from roads.styles import Drawable, resolve_style, surface_style, zone_style, fill_of, stroke_of


def to_world(direction: Direction, lot: Rect, u: float, v: float) -> Point:
    if direction == "front":
        return (u, lot.y_min - v)
    if direction == "rear":
        return (u, lot.y_max + v)
    if direction == "left":
        return (lot.x_min - v, u)
    return (lot.x_max + v, u)


def corridor_strip_rect(direction: Direction, lot: Rect, u0: float, u1: float, v0: float, v1: float) -> Rect:
    """World rectangle for the canonical strip [u0, u1] x [v0, v1]."""
    if direction == "front":
        return Rect(u0, u1, lot.y_min - v1, lot.y_min - v0)
    if direction == "rear":
        return Rect(u0, u1, lot.y_max + v0, lot.y_max + v1)
    if direction == "left":
        return Rect(lot.x_min - v1, lot.x_min - v0, u0, u1)
    return Rect(lot.x_max + v0, lot.x_max + v1, u0, u1)


def road_span(direction: Direction, lot: Rect) -> tuple[float, float]:
    """(u_start, u_end) of the lot edge the road runs along."""
    if direction in ("front", "rear"):
        return (lot.x_min, lot.x_max)
    return (lot.y_min, lot.y_max)


def _strip_outlines(direction, lot, u0, u1, v0, v1, capped) -> tuple[list[Point], ...]:
    a, b, c, d = (u0, v0), (u1, v0), (u1, v1), (u0, v1)
    start_cap, end_cap = capped
    if start_cap and end_cap:
        lines = [[a, b, c, d, a]]
    elif start_cap:
        lines = [[b, a, d, c]]
    elif end_cap:
        lines = [[a, b, c, d]]
    else:
        lines = [[a, b], [d, c]]
    return tuple([to_world(direction, lot, u, v) for u, v in line] for line in lines)


def build_corridor_strips(
    profile: RoadProfile,
    lot: Rect,
    styles: Mapping | None = None,
    span: tuple[float, float] | None = None,
    capped: tuple[bool, bool] = (True, True),
    line_scale: float = 1.0,
) -> list[Drawable]:
    """Pavement and zone strips plus the two right-of-way lines for one road.

    capped is (start, end). An uncapped end leaves the strip's end edge
    unstroked so the corridor reads as continuing into the next road.
    """
    if not is_active(profile) or not rect_valid(lot):
        return []
    direction = profile.direction
    u0, u1 = span if span is not None else road_span(direction, lot)
    if u1 <= u0:
        return []

    out = []
    for i, zo in enumerate(zone_offsets(profile)):
        rect = corridor_strip_rect(direction, lot, u0, u1, zo.v0, zo.v1)
        if not rect_valid(rect):
            continue
        if zo.side is None:
            style = surface_style(styles)
            key = f"{direction}-{zo.kind}"
        else:
            style = zone_style(styles, zo.side, zo.kind)
            key = f"{direction}-{zo.side}-{zo.kind}"
        out.append(Drawable(
            key=key, kind=zo.kind, shape=Shape(rect_ring(rect)),
            z_offset=STRIP_Z + i * STRIP_Z_STEP,
            fill=fill_of(style),
            outlines=_strip_outlines(direction, lot, u0, u1, zo.v0, zo.v1, capped),
            stroke=stroke_of(style, line_scale),
        ))

    row_stroke = stroke_of(resolve_style(styles, ROW_LINE_KEY, default=ROW_LINE_STYLE), line_scale)
    for name, v in (("near", 0.0), ("far", profile.right_of_way)):
        line = [to_world(direction, lot, u0, v), to_world(direction, lot, u1, v)]
        out.append(Drawable(key=f"{direction}-row-{name}", kind=ROW_LINE_KEY, shape=None,
                            z_offset=ROW_LINE_Z, fill=None, outlines=(line,), stroke=row_stroke))
    return out
