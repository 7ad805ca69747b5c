"""Tests for roads/layout.py: corner planning, road ends, full site layout."""
import logging
import pytest
from shared.geometry import GeometryError
from shared.types import Rect
from roads.constants import ALLEY_FILL_KEY, ALLEY_FILL_Z, INTERSECTION_Z
from roads.layout import (
    CORNERS, RoadEnds,
    corner_for, corner_point, box_rect, box_corner_label,
    plan_road_ends, road_strip_span, plan_intersection, compute_layout,
)
from roads.profile import resolve_profile


# --- corner geometry ---

@pytest.mark.parametrize("a, b, corner", [
    ("front", "left", "front-left"),
    ("left", "front", "front-left"),
    ("front", "right", "front-right"),
    ("rear", "left", "rear-left"),
    ("right", "rear", "rear-right"),
])
def test_corner_for(a, b, corner):
    assert corner_for(a, b) == corner


@pytest.mark.parametrize("a, b", [("front", "rear"), ("left", "right"), ("left", "left")])
def test_corner_for_not_perpendicular(a, b):
    with pytest.raises(GeometryError, match="do not meet"):
        corner_for(a, b)


@pytest.mark.parametrize("corner, point", [
    ("front-left", (0.0, 0.0)), ("front-right", (100.0, 0.0)),
    ("rear-left", (0.0, 150.0)), ("rear-right", (100.0, 150.0)),
])
def test_corner_point(lot, corner, point):
    assert corner_point(corner, lot) == point


def test_corner_point_unknown(lot):
    with pytest.raises(GeometryError):
        corner_point("middle-left", lot)


def test_box_rect(lot):
    assert box_rect("front-left", lot, 50, 30) == Rect(-30, 0, -50, 0)
    assert box_rect("rear-right", lot, 30, 50) == Rect(100, 150, 150, 180)


@pytest.mark.parametrize("quadrant, label", [
    ("front-left", "tr"), ("front-right", "tl"), ("rear-left", "br"), ("rear-right", "bl"),
])
def test_box_corner_label(quadrant, label):
    assert box_corner_label(quadrant) == label


# --- road ends ---

class TestRoadEnds:
    def test_all_streets_open(self, street_roads):
        ends = plan_road_ends(street_roads)
        assert all(e == RoadEnds("open", "open") for e in ends.values())

    def test_lone_road_capped(self):
        ends = plan_road_ends({"front": resolve_profile("front")})
        assert ends == {"front": RoadEnds("capped", "capped")}

    def test_alley_corners(self, preset_roads):
        ends = plan_road_ends(preset_roads)
        assert ends["left"] == RoadEnds("open", "extended")
        assert ends["right"] == RoadEnds("open", "extended")
        assert ends["rear"] == RoadEnds("open", "open")
        assert ends["front"] == RoadEnds("open", "open")

    def test_disabled_neighbour(self, street_roads):
        roads = dict(street_roads)
        roads["left"] = roads["left"]._replace(enabled=False)
        ends = plan_road_ends(roads)
        assert "left" not in ends
        assert ends["front"] == RoadEnds("capped", "open")
        assert ends["rear"] == RoadEnds("capped", "open")

    def test_extended_span(self, lot, preset_roads):
        ends = plan_road_ends(preset_roads)
        assert road_strip_span("left", ends["left"], preset_roads, lot) == (0.0, 180.0)
        assert road_strip_span("front", ends["front"], preset_roads, lot) == (0.0, 100.0)

    def test_extended_at_start(self, lot):
        roads = {"front": resolve_profile("front", {"type": "alley", "rightOfWay": 20, "roadWidth": 16}),
                 "left": resolve_profile("left")}
        ends = plan_road_ends(roads)
        assert ends["left"] == RoadEnds("extended", "capped")
        assert road_strip_span("left", ends["left"], roads, lot) == (-20.0, 150.0)


# --- intersections ---

class TestStreetCorner:
    def test_scenario_tt_fillet(self, street_layout):
        plan = street_layout.intersections["front-left"]
        assert plan.kind == "fillet"
        tt = plan.fillets["tt"]
        assert [z.zone_type for z in tt] == ["sidewalk", "verge"]
        assert [(z.inner_radius, z.outer_radius) for z in tt] == [(0.0, 6.0), (6.0, 13.0)]
        # lot corner is the box's top-right corner
        assert plan.box.radii.tr == 13.0

    def test_four_sub_corners(self, street_layout):
        plan = street_layout.intersections["front-left"]
        assert set(plan.fillets) == {"tt", "ta", "at", "aa"}
        # away sides are empty, so every sub-corner falls back to the toward-lot zones
        assert all(z[-1].outer_radius == 13.0 for z in plan.fillets.values())
        assert plan.box.radii == (13.0, 13.0, 13.0, 13.0)

    def test_box_rect(self, street_layout):
        assert street_layout.intersections["front-left"].box.rect == Rect(-50.0, 0.0, -50.0, 0.0)
        assert street_layout.intersections["rear-right"].box.rect == Rect(100.0, 150.0, 150.0, 200.0)

    def test_sub_corner_centres(self, street_layout):
        fillets = street_layout.intersections["front-left"].fillets
        assert fillets["tt"][0].outer_arc[0] == pytest.approx((-6.0, 0.0))
        assert fillets["aa"][0].outer_arc[0] == pytest.approx((-44.0, -50.0))

    def test_box_drawable(self, street_layout):
        box = [d for d in street_layout.drawables if d.key == "front-left-box"][0]
        assert box.z_offset == INTERSECTION_Z
        assert box.fill.color == "#555555"
        assert box.outlines == () and box.stroke is None

    def test_distinct_radii(self, lot):
        roads = {
            "front": resolve_profile("front", {"rightSidewalk": 5, "leftSidewalk": 8, "leftVerge": 4}),
            "left": resolve_profile("left", {"rightSidewalk": 5, "leftParking": 10}),
        }
        plan = plan_intersection("front-left", roads, lot)
        assert plan.fillets["tt"][-1].outer_radius == 5.0
        # front away side (sidewalk 8, verge 4) meets left toward side (sidewalk 5)
        assert plan.fillets["at"][-1].outer_radius == pytest.approx(6.5 + 4.0)
        # front toward side (sidewalk 5) meets left away side (parking 10)
        assert plan.fillets["ta"][-1].outer_radius == 15.0
        assert plan.box.radii.tr == 5.0
        assert plan.box.radii.br == pytest.approx(10.5)
        assert plan.box.radii.tl == 15.0


class TestAlleyCorner:
    def test_no_fillet_no_notch(self, preset_layout):
        plan = preset_layout.intersections["rear-left"]
        assert plan.kind == "alley"
        assert plan.fillets == {} and plan.box is None
        assert plan.dominant == "left"

    def test_patch(self, preset_layout):
        # alley pavement (ROW 30, 20 wide) across the street's 13' curb strip
        assert preset_layout.intersections["rear-left"].patch == Rect(-13.0, 0.0, 155.0, 175.0)
        assert preset_layout.intersections["rear-right"].patch == Rect(100.0, 113.0, 155.0, 175.0)

    def test_patch_drawable(self, preset_layout):
        fills = [d for d in preset_layout.drawables if d.kind == ALLEY_FILL_KEY]
        assert len(fills) == 2
        assert all(d.z_offset == ALLEY_FILL_Z for d in fills)
        assert fills[0].fill.color == "#666666"

    def test_alley_fill_style(self, lot, preset_roads):
        styles = {"alleyIntersectionFill": {"fillColor": "#123456"}}
        plan = plan_intersection("rear-left", preset_roads, lot, styles)
        assert plan.drawables[0].fill.color == "#123456"

    def test_alley_meets_alley(self, lot):
        alley = {"type": "S3", "rightOfWay": 30, "roadWidth": 20}
        roads = {"front": resolve_profile("front", alley), "left": resolve_profile("left", alley)}
        plan = plan_intersection("front-left", roads, lot)
        assert plan.kind == "alley-alley"
        assert plan.patch == Rect(-30.0, 0.0, -30.0, 0.0)
        assert plan.fillets == {} and plan.box is None
        assert len(plan.drawables) == 1

    def test_missing_road(self, lot, street_roads):
        roads = {"front": street_roads["front"]}
        plan = plan_intersection("front-left", roads, lot)
        assert plan.kind == "none" and plan.drawables == []


# --- full layout ---

class TestComputeLayout:
    def test_drawable_count(self, street_layout):
        # 4 roads x (3 strips + 2 ROW lines) + 4 corners x (box + 4 sub-corners x 2 zones)
        assert len(street_layout.drawables) == 4 * 5 + 4 * 9

    def test_sorted_by_z(self, street_layout, preset_layout):
        for layout in (street_layout, preset_layout):
            zs = [d.z_offset for d in layout.drawables]
            assert zs == sorted(zs)

    def test_every_corner_planned(self, street_layout):
        assert tuple(street_layout.intersections) == CORNERS

    def test_open_strips_not_capped(self, street_layout):
        pave = [d for d in street_layout.drawables if d.key == "front-pavement"][0]
        assert len(pave.outlines) == 2

    def test_extended_strip(self, preset_layout):
        pave = [d for d in preset_layout.drawables if d.key == "left-pavement"][0]
        ys = [p[1] for p in pave.shape.outer]
        assert max(ys) == 180.0
        # open at the front, capped beyond the alley
        assert len(pave.outlines) == 1

    def test_host_records(self, lot, s1_record):
        layout = compute_layout(lot, {"front": s1_record, "left": s1_record, "rear": None})
        assert layout.intersections["front-left"].kind == "fillet"
        assert layout.intersections["rear-left"].kind == "none"
        assert layout.ends["front"] == RoadEnds("open", "capped")

    def test_degenerate_lot(self, street_roads):
        assert compute_layout(Rect(0, 0, 0, 10), street_roads).drawables == []

    def test_idempotent(self, lot, street_roads, styles, street_layout):
        assert compute_layout(lot, street_roads, styles) == street_layout

    def test_unified_bands(self, lot, street_roads):
        layout = compute_layout(lot, street_roads, unified=True)
        keys = [d.key for d in layout.drawables]
        assert "front-pavement" not in keys
        assert "band-0" in keys
        band0 = [d for d in layout.drawables if d.key == "band-0"][0]
        # corners are left square for the intersection boxes
        assert band0.shape.outer == [(-6, -6), (106, -6), (106, 156), (-6, 156), (-6, -6)]

    def test_unified_keeps_intersections(self, lot, preset_roads):
        layout = compute_layout(lot, preset_roads, unified=True)
        kinds = {d.kind for d in layout.drawables}
        assert "intersection" in kinds and ALLEY_FILL_KEY in kinds

    def test_logs_alley_corner(self, lot, preset_roads, caplog):
        caplog.set_level(logging.DEBUG, logger="roads.layout")
        compute_layout(lot, preset_roads)
        assert "alley corner" in caplog.text

    def test_null_style_fields(self, lot, street_roads):
        layout = compute_layout(lot, street_roads, {"roadWidth": {"fillOpacity": None, "lineWidth": None}})
        box = [d for d in layout.drawables if d.key == "front-left-box"][0]
        assert box.fill.color == "#666666" and box.fill.opacity == 0.8
        pave = [d for d in layout.drawables if d.key == "front-pavement"][0]
        assert pave.stroke.width == 1.0

    def test_zero_segments(self, lot, street_roads):
        layout = compute_layout(lot, street_roads, segments=0)
        assert layout.intersections["front-left"].box.radii.tr == 13.0
        assert len(layout.drawables) == 4 * 5 + 4 * 9
