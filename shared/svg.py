"""SVG transform factory, page constants, and point serialisation."""
from typing import Callable

from .types import Point, Rect, Shape

# US Letter landscape at 72 dpi (11" x 8.5")
W, H = 792, 612

_MARGIN = 36  # 0.5" page margin

def make_svg_transform(world: Rect, margin: float = _MARGIN) -> Callable[[float, float], tuple[float, float]]:
    """Create to_svg closure that fits the world rectangle on the page (y flipped, uniform scale)."""
    ww = max(world.x_max - world.x_min, 1e-9)
    wh = max(world.y_max - world.y_min, 1e-9)
    s = min((W - 2*margin) / ww, (H - 2*margin) / wh)
    px = (W - s*ww) / 2 - s*world.x_min
    py = (H + s*wh) / 2 + s*world.y_min
    def to_svg(x: float, y: float) -> tuple[float, float]:
        return (px + x * s, py - y * s)
    return to_svg

def svg_pts(points: list[Point], to_svg) -> str:
    """Space-separated "x,y" list for polygon/polyline points attributes."""
    return " ".join(f"{to_svg(*p)[0]:.2f},{to_svg(*p)[1]:.2f}" for p in points)

def path_d(shape: Shape, to_svg) -> str:
    """SVG path data for a shape: outer ring plus holes, each a closed subpath."""
    parts = []
    for ring in (shape.outer, *shape.holes):
        if len(ring) < 3:
            continue
        head, *rest = [to_svg(*p) for p in ring]
        parts.append(f"M{head[0]:.2f},{head[1]:.2f}"
                     + "".join(f" L{x:.2f},{y:.2f}" for x, y in rest) + " Z")
    return " ".join(parts)
