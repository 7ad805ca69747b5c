"""Shared type definitions for the road geometry engine."""
from typing import Literal, NamedTuple

Point = tuple[float, float]
Ring = list[Point]

Direction = Literal["front", "rear", "left", "right"]
CornerKey = Literal["front-left", "front-right", "rear-left", "rear-right"]
Side = Literal["left", "right"]

class Rect(NamedTuple):
    x_min: float; x_max: float
    y_min: float; y_max: float

LotBounds = Rect

class EdgeOffsets(NamedTuple):
    front: float = 0.0; right: float = 0.0
    rear: float = 0.0; left: float = 0.0

class CornerRadii(NamedTuple):
    bl: float = 0.0; br: float = 0.0
    tr: float = 0.0; tl: float = 0.0

class Shape(NamedTuple):
    outer: Ring
    holes: tuple[Ring, ...] = ()
