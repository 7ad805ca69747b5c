"""Pure geometry functions, ring operations, and polygon utilities."""
import math

import numpy as np

from .types import Point, Ring, Rect

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry requests (programming errors, not bad input)."""

# ============================================================
# Sampling
# ============================================================
def arc_poly(cx: float, cy: float, r: float, sa: float, ea: float, n: int = 24) -> list[Point]:
    """Generate n+1 points (n at least 1) along a circular arc from angle sa to ea (radians)."""
    n = max(1, n)
    return [(cx+r*math.cos(sa+(ea-sa)*i/n), cy+r*math.sin(sa+(ea-sa)*i/n))
            for i in range(n+1)]

def quad_bezier(p0: Point, c: Point, p1: Point, n: int = 12) -> list[Point]:
    """Generate n+1 points along the quadratic Bezier p0 -> p1 with control point c."""
    n = max(1, n)
    t = np.linspace(0.0, 1.0, n+1)[:, None]
    pts = ((1-t)**2)*np.asarray(p0) + (2*(1-t)*t)*np.asarray(c) + (t**2)*np.asarray(p1)
    return [(float(x), float(y)) for x, y in pts]

# ============================================================
# Ring Operations
# ============================================================
def append_pt(ring: Ring, p: Point) -> None:
    """Append p unless it repeats the last point of ring."""
    if not ring or ring[-1] != p:
        ring.append(p)

def extend_pts(ring: Ring, pts: list[Point]) -> None:
    """Append each of pts, skipping consecutive duplicates."""
    for p in pts:
        append_pt(ring, p)

def close_ring(ring: Ring) -> Ring:
    """Return ring with its first point repeated at the end (no-op if already closed)."""
    if ring and ring[-1] != ring[0]:
        return ring + [ring[0]]
    return list(ring)

def is_closed(ring: Ring) -> bool:
    return len(ring) >= 4 and ring[0] == ring[-1]

def rect_ring(rect: Rect) -> Ring:
    """Closed CCW ring for an axis-aligned rectangle."""
    x0, x1, y0, y1 = rect
    return [(x0, y0), (x1, y0), (x1, y1), (x0, y1), (x0, y0)]

def rect_valid(rect: Rect) -> bool:
    """True when the rectangle has positive width and height."""
    return rect.x_max > rect.x_min and rect.y_max > rect.y_min

# ============================================================
# Polygon Utilities
# ============================================================
def poly_area(verts: list[Point]) -> float:
    """Polygon area via the shoelace formula. Works for either winding order."""
    return abs(signed_area(verts))

def signed_area(verts: list[Point]) -> float:
    """Signed shoelace area: positive for CCW rings, negative for CW.

    A repeated closing point contributes nothing, so open and closed rings agree.
    """
    if len(verts) < 3:
        return 0.0
    xy = np.asarray(verts, dtype=float)
    x, y = xy[:, 0], xy[:, 1]
    return float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y)) / 2

def dist(p1: Point, p2: Point) -> float:
    return math.hypot(p2[0]-p1[0], p2[1]-p1[1])
