"""Named policy constants for road corridors and intersections.

All lengths in feet (world units). z-offsets are draw-order hints for the host.
"""

# Profile defaults
DEFAULT_RIGHT_OF_WAY = 50.0       # total corridor width when the record omits it
DEFAULT_ROAD_WIDTH = 24.0         # pavement width when the record omits it
DEFAULT_ROAD_TYPE = "S1"          # primary street

# Road type tags
ROAD_TYPE_NAMES = {
    "S1": "Primary Street",
    "S2": "Secondary Street",
    "S3": "Alley",
}
ALLEY_TYPES = frozenset({"s3", "alley"})  # compared case-insensitively

# Cross-section presets (per side zones are mirrored on both sides)
MAIN_STREET = {"type": "S1", "rightOfWay": 50.0, "roadWidth": 24.0, "verge": 7.0, "sidewalk": 6.0}
REAR_ALLEY = {"type": "S3", "rightOfWay": 30.0, "roadWidth": 20.0, "verge": 5.0, "sidewalk": 0.0}
PRESETS = {"S1": MAIN_STREET, "S3": REAR_ALLEY}

# Zone kinds
ZONE_ORDER = ("parking", "verge", "sidewalk", "transitionZone")       # storage order, road edge outward
MERGE_ORDER = ("transitionZone", "sidewalk", "verge", "parking")      # lot corner toward road surface
BAND_ZONES = ("sidewalk", "verge", "pavement", "verge", "sidewalk")   # ring bands, lot edge outward

# Tessellation
ARC_SEGMENTS = 24                 # segments per quarter arc
CORNER_SEGMENTS = 12              # segments per quadratic band corner

# Draw order
STRIP_Z = 0.01                    # road pavement strip
STRIP_Z_STEP = 0.001              # per side zone
BAND_BASE_Z = 0.02                # continuous band network
BAND_Z_STEP = 0.001
ROW_LINE_Z = 0.03                 # right-of-way lines
INTERSECTION_Z = 0.04             # notched intersection box
ALLEY_FILL_Z = 0.045              # alley fill patch
FILLET_BASE_Z = 0.05              # first fillet zone
FILLET_Z_STEP = 0.001             # per fillet zone, lot corner outward

# Stroke scaling
LINE_SCALE_DAMPING = 0.15         # stroke width multiplier = line_scale ** damping

# Styles (host style-table shape)
DEFAULT_STYLE = {
    "fillColor": "#888888", "fillOpacity": 0.6,
    "lineColor": "#000000", "lineWidth": 1.0, "lineDashed": False, "lineOpacity": 1.0,
}
ROAD_SURFACE_STYLE = dict(DEFAULT_STYLE, fillColor="#666666", fillOpacity=0.8)
ROW_LINE_STYLE = dict(DEFAULT_STYLE, fillOpacity=0.0, lineDashed=True)
BAND_FALLBACK_FILLS = {
    "pavement": "#666666",
    "verge": "#c4a77d",
    "sidewalk": "#90EE90",
}

# Style table keys
ROAD_SURFACE_KEY = "roadWidth"
ROW_LINE_KEY = "rightOfWay"
ALLEY_FILL_KEY = "alleyIntersectionFill"
