"""Road corridor and intersection geometry for a rectangular lot."""

from .profile import (
    TOWARD_LOT, AWAY_FROM_LOT, DIRECTIONS,
    SideZones, RoadProfile, ZoneOffset,
    resolve_profile, resolve_roads, profile_from_preset,
    is_alley, is_active, curb_depth, curb_to_lot_line, zone_offsets,
)
from .styles import Fill, Stroke, Drawable, resolve_style, dampened_line_scale
from .bands import (
    ZoneBand, band_boundaries, clamp_radius, rounded_rect_ring,
    create_band_shape, default_corner_limits, build_corridor_bands,
)
from .fillet import (
    ZoneEntry, MergedZoneEntry, FilletZone,
    corner_angles, arc_points, compute_zone_arc, zone_stack, resolve_side,
    merge_zone, merge_zone_stacks, stack_radii, compute_corner_zone_stack,
)
from .notch import NotchedRect, notched_rect
from .corridor import corridor_strip_rect, road_span, build_corridor_strips
from .layout import (
    CORNERS, RoadEnds, IntersectionPlan, SiteLayout,
    corner_for, corner_point, plan_road_ends, plan_intersection, compute_layout,
)
from .cache import fingerprint, LayoutCache
