"""
Geometry kernel for paper folding.

Points are plain (x, y) tuples. Coordinates may be floats or
fractions.Fraction; every function only uses + - * / and comparisons, so
rational input stays exact. Functions that classify against a line take an
``eps`` tolerance (0 for exact rationals).

Orientation convention:
  - A segment (a, b) is directed from a to b.
  - A point p is ON_LEFT of it when cross(b - a, p - a) > eps,
    ON_RIGHT when cross < -eps, ON_LINE otherwise.
  - Creases are treated as infinite lines through their two endpoints.
"""

from __future__ import annotations
from dataclasses import dataclass


# Type aliases
Point = tuple[float, float]
Segment = tuple[Point, Point]
Polygon = list[Point]

# Side classification
ON_LINE = "ON_LINE"
ON_LEFT = "ON_LEFT"
ON_RIGHT = "ON_RIGHT"

DEFAULT_EPS = 1e-9


@dataclass
class BoundingBox:
    """Axis-aligned bounding box."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def min_corner(self) -> Point:
        return (self.min_x, self.min_y)

    def contains(self, x: float, y: float) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y


# =============================================================================
# Basic Geometry Functions
# =============================================================================

def _cross(o: Point, a: Point, b: Point):
    """2D cross product of vectors OA and OB."""
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def side_value(point: Point, segment: Segment):
    """
    Signed side value of a point relative to a directed segment.

    Returns:
        > 0 on the left, < 0 on the right, 0 on the line (before tolerance).
    """
    a, b = segment
    return _cross(a, b, point)


def relative_to(point: Point, segment: Segment, eps: float = DEFAULT_EPS) -> str:
    """Classify a point as ON_LEFT, ON_RIGHT or ON_LINE of a segment's line."""
    value = side_value(point, segment)
    if value > eps:
        return ON_LEFT
    if value < -eps:
        return ON_RIGHT
    return ON_LINE


def points_equal(p1: Point, p2: Point, eps: float = DEFAULT_EPS) -> bool:
    """Check if two points are equal within epsilon tolerance."""
    return abs(p1[0] - p2[0]) <= eps and abs(p1[1] - p2[1]) <= eps


def polygon_edges(polygon: Polygon) -> list[Segment]:
    """Return edges as (start, end) pairs, wrapping from the last vertex to the first."""
    n = len(polygon)
    if n < 2:
        return []
    return [(polygon[i], polygon[(i + 1) % n]) for i in range(n)]


def signed_area(polygon: Polygon):
    """
    Calculate signed area of polygon using shoelace formula.

    Returns:
        Positive for CCW winding, negative for CW winding.
    """
    n = len(polygon)
    if n < 3:
        return 0
    area = 0
    for i in range(n):
        j = (i + 1) % n
        area += polygon[i][0] * polygon[j][1]
        area -= polygon[j][0] * polygon[i][1]
    return area / 2


def polygon_area(polygon: Polygon):
    """Unsigned polygon area."""
    return abs(signed_area(polygon))


def polygon_center(polygon: Polygon) -> Point:
    """Average of the polygon's vertices."""
    if not polygon:
        return (0, 0)
    x = sum(p[0] for p in polygon) / len(polygon)
    y = sum(p[1] for p in polygon) / len(polygon)
    return (x, y)


def bounding_box(polygon: Polygon) -> BoundingBox:
    if not polygon:
        return BoundingBox(0, 0, 0, 0)
    xs = [p[0] for p in polygon]
    ys = [p[1] for p in polygon]
    return BoundingBox(min(xs), min(ys), max(xs), max(ys))


def is_convex(polygon: Polygon) -> bool:
    """
    Check convexity from the turn direction at every vertex.

    Collinear vertices are allowed; the polygon is convex when all
    consecutive edge cross products share a sign (zero counts for both).
    """
    n = len(polygon)
    if n < 3:
        return False

    vectors = [
        (polygon[(i + 1) % n][0] - polygon[i][0], polygon[(i + 1) % n][1] - polygon[i][1])
        for i in range(n)
    ]
    products = [
        vectors[i][0] * vectors[(i + 1) % n][1] - vectors[(i + 1) % n][0] * vectors[i][1]
        for i in range(n)
    ]
    return all(p >= 0 for p in products) or all(p <= 0 for p in products)


def clean_polygon(polygon: Polygon, eps: float = DEFAULT_EPS) -> Polygon:
    """Remove duplicate consecutive vertices, including a closing duplicate."""
    cleaned = []
    for p in polygon:
        if not cleaned or not points_equal(p, cleaned[-1], eps):
            cleaned.append(p)

    if len(cleaned) > 1 and points_equal(cleaned[0], cleaned[-1], eps):
        cleaned.pop()

    return cleaned


# =============================================================================
# Transformations
# =============================================================================

def translate_point(vector: Point, point: Point) -> Point:
    return (point[0] + vector[0], point[1] + vector[1])


def translate_polygon(vector: Point, polygon: Polygon) -> Polygon:
    """Shift every vertex by vector (maps the origin to vector)."""
    return [translate_point(vector, p) for p in polygon]


def flip_point(segment: Segment, point: Point) -> Point:
    """Reflect a point across the line through segment."""
    (x1, y1), (x2, y2) = segment
    dx = x2 - x1
    dy = y2 - y1
    len_sq = dx * dx + dy * dy
    if len_sq == 0:
        return point

    t = ((point[0] - x1) * dx + (point[1] - y1) * dy) / len_sq
    proj_x = x1 + t * dx
    proj_y = y1 + t * dy
    return (2 * proj_x - point[0], 2 * proj_y - point[1])


def flip_polygon(segment: Segment, polygon: Polygon) -> Polygon:
    """
    Reflect a polygon across the line through segment.

    Vertex order is kept, so the winding direction is reversed.
    """
    return [flip_point(segment, p) for p in polygon]


# =============================================================================
# Cutting
# =============================================================================

def _edge_crossing(p1: Point, p2: Point, d1, d2) -> Point:
    """Intersection of edge p1-p2 with the line, given both side values."""
    t = d1 / (d1 - d2)
    return (p1[0] + t * (p2[0] - p1[0]), p1[1] + t * (p2[1] - p1[1]))


def cut_polygon(segment: Segment, polygon: Polygon,
                eps: float = DEFAULT_EPS) -> tuple[Polygon, Polygon]:
    """
    Cut a convex polygon by the infinite line through segment.

    Args:
        segment: Two distinct points defining the cutting line
        polygon: Convex polygon vertices
        eps: Tolerance for classifying vertices as on the line

    Returns:
        (left, right) sub-polygons. Vertices on the line belong to both
        halves, and every edge strictly crossing the line contributes its
        intersection point to both. A half with no vertex strictly inside
        it is returned as an empty list.
    """
    left = []
    right = []
    n = len(polygon)
    if n == 0:
        return ([], [])

    values = [side_value(p, segment) for p in polygon]
    sides = [relative_to(p, segment, eps) for p in polygon]

    for i in range(n):
        curr = polygon[i]
        side_curr = sides[i]
        side_next = sides[(i + 1) % n]

        if side_curr != ON_RIGHT:
            left.append(curr)
        if side_curr != ON_LEFT:
            right.append(curr)

        if {side_curr, side_next} == {ON_LEFT, ON_RIGHT}:
            crossing = _edge_crossing(curr, polygon[(i + 1) % n], values[i], values[(i + 1) % n])
            left.append(crossing)
            right.append(crossing)

    if ON_LEFT not in sides:
        left = []
    if ON_RIGHT not in sides:
        right = []

    return (clean_polygon(left, eps), clean_polygon(right, eps))


# =============================================================================
# Creases
# =============================================================================

def elongate(segment: Segment) -> Segment:
    """
    Extend a segment to a chord of the unit square along its line.

    Vertical segments become x = c for y in [0, 1], horizontal ones
    y = c for x in [0, 1]. Other lines are parametrised by y when
    |slope| > 1 and by x otherwise.

    Raises:
        ValueError: If the segment has zero length.
    """
    (x1, y1), (x2, y2) = segment

    if x1 == x2 and y1 == y2:
        raise ValueError(f"Cannot elongate a zero-length segment at {format_point((x1, y1))}")

    if x1 == x2:
        return ((x1, 0), (x1, 1))
    if y1 == y2:
        return ((0, y1), (1, y1))

    k = (y2 - y1) / (x2 - x1)
    b = y1 - k * x1

    if abs(k) > 1:
        return ((-b / k, 0), ((1 - b) / k, 1))
    return ((0, b), (1, k + b))


# =============================================================================
# Formatting
# =============================================================================

def format_point(point: Point) -> str:
    """Format as "x,y"; fractions print as n/d."""
    return f"{point[0]},{point[1]}"


def format_segment(segment: Segment) -> str:
    return f"{format_point(segment[0])} {format_point(segment[1])}"


def format_polygon(polygon: Polygon) -> str:
    return " ".join(format_point(p) for p in polygon)
