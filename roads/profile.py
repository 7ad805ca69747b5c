"""Road profile resolution: host road records -> RoadProfile value records.

Host records are plain mappings with camelCase keys (``rightOfWay``,
``roadWidth``, ``leftParking``, ``rightSidewalk``, ``leftTransitionZone``, ...).
Defaults are applied once here so the geometry modules never see a missing
field.

Canonical orientation (front road): the lot line is at v = 0 and the far
right-of-way line at v = rightOfWay. The right side of the record faces the
lot, the left side faces away from it.
"""
import math
from typing import Mapping, NamedTuple

from shared.types import Direction, Side
from roads.constants import (
    DEFAULT_RIGHT_OF_WAY, DEFAULT_ROAD_WIDTH, DEFAULT_ROAD_TYPE,
    ALLEY_TYPES, PRESETS, MAIN_STREET, REAR_ALLEY, ZONE_ORDER,
)

TOWARD_LOT: Side = "right"
AWAY_FROM_LOT: Side = "left"

DIRECTIONS: tuple[Direction, ...] = ("front", "right", "rear", "left")

# host zone kind -> SideZones field
_ZONE_FIELDS = {
    "parking": "parking",
    "verge": "verge",
    "sidewalk": "sidewalk",
    "transitionZone": "transition_zone",
}


class SideZones(NamedTuple):
    """Zone widths on one side of the pavement (all >= 0)."""
    parking: float = 0.0
    verge: float = 0.0
    sidewalk: float = 0.0
    transition_zone: float = 0.0


class RoadProfile(NamedTuple):
    """Fully-resolved cross-section of the road along one lot edge."""
    direction: Direction
    type: str = DEFAULT_ROAD_TYPE
    enabled: bool = True
    right_of_way: float = DEFAULT_RIGHT_OF_WAY
    road_width: float = DEFAULT_ROAD_WIDTH
    left: SideZones = SideZones()
    right: SideZones = SideZones()


class ZoneOffset(NamedTuple):
    """One strip of the cross-section, measured outward from the lot line (v0 <= v1)."""
    kind: str
    side: Side | None     # None for the pavement
    v0: float
    v1: float


def zone_key(side: Side, kind: str) -> str:
    """Host key for a side zone, e.g. ("left", "transitionZone") -> "leftTransitionZone"."""
    return side + kind[0].upper() + kind[1:]


def opposite(side: Side) -> Side:
    return "left" if side == "right" else "right"


def _width(value, default: float = 0.0) -> float:
    """Coerce a host width to a non-negative float; unusable values take the default."""
    if value is None:
        return default
    try:
        w = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(w):
        return default
    return max(0.0, w)


def _side_zones(record: Mapping, side: Side) -> SideZones:
    return SideZones(**{
        field: _width(record.get(zone_key(side, kind)))
        for kind, field in _ZONE_FIELDS.items()
    })


# ============================================================
# Resolution
# ============================================================

def profile_from_preset(direction: Direction, preset_name: str) -> RoadProfile:
    """Profile for a named preset ("S1" main street, "S3" alley), zones mirrored on both sides."""
    preset = PRESETS.get(preset_name, MAIN_STREET)
    zones = SideZones(verge=preset["verge"], sidewalk=preset["sidewalk"])
    return RoadProfile(
        direction=direction, type=preset["type"], enabled=True,
        right_of_way=preset["rightOfWay"], road_width=preset["roadWidth"],
        left=zones, right=zones,
    )


def resolve_profile(direction: Direction, record: Mapping | None = None) -> RoadProfile:
    """Resolve a host road record into a RoadProfile.

    With no record the direction's preset applies: the rear edge gets the
    alley preset, every other edge the main-street preset.
    """
    if record is None:
        return profile_from_preset(direction, REAR_ALLEY["type"] if direction == "rear" else MAIN_STREET["type"])
    row = _width(record.get("rightOfWay"), DEFAULT_RIGHT_OF_WAY)
    road_width = min(_width(record.get("roadWidth"), DEFAULT_ROAD_WIDTH), row)
    return RoadProfile(
        direction=direction,
        type=str(record.get("type") or DEFAULT_ROAD_TYPE),
        enabled=bool(record.get("enabled", True)),
        right_of_way=row,
        road_width=road_width,
        left=_side_zones(record, "left"),
        right=_side_zones(record, "right"),
    )


def resolve_roads(records: Mapping) -> dict[Direction, RoadProfile]:
    """Resolve a direction-keyed mapping of host records (or ready profiles).

    Unknown directions are ignored; ``None`` entries mean "no road on that edge".
    """
    roads = {}
    for direction in DIRECTIONS:
        rec = records.get(direction)
        if rec is None:
            continue
        roads[direction] = rec if isinstance(rec, RoadProfile) else resolve_profile(direction, rec)
    return roads


# ============================================================
# Queries
# ============================================================

def is_alley(profile: RoadProfile) -> bool:
    return profile.type.strip().lower() in ALLEY_TYPES


def is_active(profile: RoadProfile | None) -> bool:
    """Road exists and is enabled."""
    return profile is not None and profile.enabled


def side_zones(profile: RoadProfile, side: Side) -> SideZones:
    return profile.left if side == "left" else profile.right


def zone_width(profile: RoadProfile, side: Side, kind: str) -> float:
    return getattr(side_zones(profile, side), _ZONE_FIELDS[kind])


def curb_depth(profile: RoadProfile, side: Side = TOWARD_LOT) -> float:
    """Sidewalk + verge on one side: the depth of the curb strip at the lot line."""
    z = side_zones(profile, side)
    return z.sidewalk + z.verge


def curb_to_lot_line(profile: RoadProfile) -> float:
    """Distance from the lot line to the near pavement edge."""
    return max(0.0, (profile.right_of_way - profile.road_width) / 2)


def zone_offsets(profile: RoadProfile) -> list[ZoneOffset]:
    """Signed cross-section: pavement first, then toward-lot zones, then away zones.

    Side zones stack outward from the pavement edges in storage order
    (parking, verge, sidewalk, transition zone). Widths are not checked
    against the right-of-way, so v can leave [0, rightOfWay] when they overflow.
    """
    half_row = profile.right_of_way / 2
    half_rw = profile.road_width / 2
    v_near = half_row - half_rw
    v_far = half_row + half_rw
    out = [ZoneOffset("pavement", None, v_near, v_far)]

    v = v_near
    for kind in ZONE_ORDER:
        d = zone_width(profile, "right", kind)
        if d > 0:
            out.append(ZoneOffset(kind, "right", v - d, v))
            v -= d

    v = v_far
    for kind in ZONE_ORDER:
        d = zone_width(profile, "left", kind)
        if d > 0:
            out.append(ZoneOffset(kind, "left", v, v + d))
            v += d
    return out
