"""
Geometry helpers shared by the simulation systems
"""

from __future__ import annotations
import math
import random
from typing import Tuple, Optional
import numpy as np


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points"""
    return math.hypot(x2 - x1, y2 - y1)


def angle_to(x1: float, y1: float, x2: float, y2: float) -> float:
    """Angle in radians from (x1, y1) toward (x2, y2), screen coordinates"""
    return math.atan2(y2 - y1, x2 - x1)


def normalize(x: float, y: float, eps: float = 1e-8) -> Tuple[float, float]:
    """Normalize a vector to unit length; a zero vector stays zero"""
    l = math.hypot(x, y)
    if l < eps:
        return 0.0, 0.0
    return x / l, y / l


def point_in_box(px: float, py: float, cx: float, cy: float, w: float, h: float) -> bool:
    """Strict test of a point against a box centred on (cx, cy)"""
    return (cx - w / 2 < px < cx + w / 2) and (cy - h / 2 < py < cy + h / 2)


def circle_collide(x1, y1, r1, x2, y2, r2) -> bool:
    """Check if two circles overlap (touching does not count)"""
    dx = x1 - x2
    dy = y1 - y2
    rr = r1 + r2
    return (dx * dx + dy * dy) < (rr * rr)


def out_of_bounds(x: float, y: float, width: float, height: float) -> bool:
    """True once a point has left the play area"""
    return x < 0 or x > width or y < 0 or y > height


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
