"""Style-table lookup and the drawable record handed to the host renderer."""
from typing import Mapping, NamedTuple

from shared.types import Point, Shape
from roads.constants import (
    DEFAULT_STYLE, ROAD_SURFACE_STYLE, BAND_FALLBACK_FILLS,
    ROAD_SURFACE_KEY, LINE_SCALE_DAMPING,
)
from roads.profile import zone_key


class Fill(NamedTuple):
    color: str
    opacity: float


class Stroke(NamedTuple):
    color: str
    width: float
    dashed: bool
    opacity: float


class Drawable(NamedTuple):
    """One renderable primitive.

    shape is None for stroke-only primitives (right-of-way lines).
    outlines holds the border polylines to stroke; empty means no border.
    """
    key: str
    kind: str
    shape: Shape | None
    z_offset: float
    fill: Fill | None
    outlines: tuple[list[Point], ...]
    stroke: Stroke | None


def resolve_style(styles: Mapping | None, *keys: str, default: Mapping = DEFAULT_STYLE) -> dict:
    """First style entry found under keys, completed field-by-field from default.

    Null fields in the entry count as missing. No entry at all yields a copy of default.
    """
    if styles:
        for key in keys:
            entry = styles.get(key)
            if entry:
                return {**default, **{k: v for k, v in entry.items() if v is not None}}
    return dict(default)


def zone_style(styles: Mapping | None, side: str, kind: str) -> dict:
    """Style of a side zone: side-specific key first (rightVerge), then the bare kind (verge)."""
    return resolve_style(styles, zone_key(side, kind), kind)


def surface_style(styles: Mapping | None) -> dict:
    return resolve_style(styles, ROAD_SURFACE_KEY, default=ROAD_SURFACE_STYLE)


def band_style(styles: Mapping | None, kind: str) -> dict:
    """Style for a continuous-network band: pavement, verge or sidewalk."""
    if kind == "pavement":
        keys = (ROAD_SURFACE_KEY,)
    else:
        keys = (zone_key("right", kind), zone_key("left", kind))
    fallback = dict(DEFAULT_STYLE, fillColor=BAND_FALLBACK_FILLS.get(kind, DEFAULT_STYLE["fillColor"]),
                    fillOpacity=1.0)
    return resolve_style(styles, *keys, default=fallback)


def dampened_line_scale(line_scale: float) -> float:
    """Stroke multiplier for export scaling; non-positive scales count as 1."""
    if not line_scale or line_scale <= 0:
        return 1.0
    return line_scale ** LINE_SCALE_DAMPING


def fill_of(style: Mapping) -> Fill:
    return Fill(color=style["fillColor"], opacity=float(style["fillOpacity"]))


def stroke_of(style: Mapping, line_scale: float = 1.0) -> Stroke:
    return Stroke(
        color=style["lineColor"],
        width=float(style["lineWidth"]) * dampened_line_scale(line_scale),
        dashed=bool(style["lineDashed"]),
        opacity=float(style["lineOpacity"]),
    )
