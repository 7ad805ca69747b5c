"""Generate a site plan preview SVG for a default lot and its four roads.

Front, left and right are main streets; the rear edge is an alley.
Writes siteplan.svg (per-road strips) and siteplan_unified.svg (band network)
next to this script.
"""
import os

from shared.types import Rect
from shared.svg import make_svg_transform, svg_pts, path_d, W, H
from roads.constants import ROAD_TYPE_NAMES
from roads.profile import DIRECTIONS, resolve_profile
from roads.layout import compute_layout

LOT = Rect(0.0, 100.0, 0.0, 150.0)

# ============================================================
# Data
# ============================================================

def build_siteplan_data(unified=False):
    """Lay out the default configuration. Returns dict of layout + page transform."""
    roads = {d: resolve_profile(d) for d in DIRECTIONS}
    layout = compute_layout(LOT, roads, unified=unified)

    xs = [LOT.x_min, LOT.x_max]; ys = [LOT.y_min, LOT.y_max]
    for dr in layout.drawables:
        rings = [dr.shape.outer] if dr.shape is not None else []
        for pts in rings + list(dr.outlines):
            xs.extend(p[0] for p in pts); ys.extend(p[1] for p in pts)
    world = Rect(min(xs), max(xs), min(ys), max(ys))

    return {"roads": roads, "layout": layout, "to_svg": make_svg_transform(world)}

# ============================================================
# SVG
# ============================================================

def render_siteplan_svg(data):
    """Render the layout drawables in z order. Returns SVG string."""
    to_svg = data["to_svg"]
    out = []
    out.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{W}" height="{H}" viewBox="0 0 {W} {H}">')
    out.append(f'<rect x="0" y="0" width="{W}" height="{H}" fill="white"/>')

    lot_pts = [(LOT.x_min, LOT.y_min), (LOT.x_max, LOT.y_min), (LOT.x_max, LOT.y_max), (LOT.x_min, LOT.y_max)]
    out.append(f'<polygon points="{svg_pts(lot_pts, to_svg)}" fill="#f4f1e8" stroke="#333" stroke-width="1.2"/>')

    for dr in data["layout"].drawables:
        if dr.shape is not None and dr.fill is not None:
            out.append(f'<path d="{path_d(dr.shape, to_svg)}" fill="{dr.fill.color}"'
                       f' fill-opacity="{dr.fill.opacity:.2f}" fill-rule="evenodd" stroke="none"/>')
        if dr.stroke is None:
            continue
        dash = ' stroke-dasharray="6,4"' if dr.stroke.dashed else ""
        for line in dr.outlines:
            out.append(f'<polyline points="{svg_pts(line, to_svg)}" fill="none" stroke="{dr.stroke.color}"'
                       f' stroke-width="{dr.stroke.width * 0.5:.2f}" stroke-opacity="{dr.stroke.opacity:.2f}"{dash}/>')

    out.append('</svg>')
    return "\n".join(out)

# ============================================================
# Main entry point
# ============================================================

if __name__ == "__main__":
    _dir = os.path.dirname(os.path.abspath(__file__))
    for unified, name in ((False, "siteplan.svg"), (True, "siteplan_unified.svg")):
        data = build_siteplan_data(unified)
        svg_path = os.path.join(_dir, name)
        with open(svg_path, "w") as f:
            f.write(render_siteplan_svg(data))
        print(f"Site plan written to {svg_path} ({len(data['layout'].drawables)} drawables)")

    print()
    for d, road in data["roads"].items():
        ends = data["layout"].ends.get(d)
        print(f"  {d:<6s} {ROAD_TYPE_NAMES.get(road.type, road.type):<17s}"
              f" ROW {road.right_of_way:5.1f}  pavement {road.road_width:5.1f}"
              f"  ends {ends.start}/{ends.end}")
    for corner, plan in data["layout"].intersections.items():
        radii = f"  notches {tuple(round(r, 2) for r in plan.box.radii)}" if plan.box else ""
        print(f"  {corner:<12s} {plan.kind}{radii}")
