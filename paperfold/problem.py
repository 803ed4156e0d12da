"""
Problem file parser and discovery.

A problem file lists the silhouette polygons followed by the skeleton
segments, one item per line, with rational coordinates:

    1           <- number of silhouette polygons
    4           <- vertices in the first polygon
    0,0
    1,0
    1/2,1/2
    0,1/2
    5           <- number of skeleton segments
    0,0 1,0
    ...

Coordinates are parsed as fractions.Fraction so the solver can run exactly.
"""

from dataclasses import dataclass, field
from fractions import Fraction
from pathlib import Path
from typing import Iterator, Union

from .geometry import Point, Polygon, Segment, is_convex


@dataclass
class Problem:
    """A parsed problem: target silhouette polygons and skeleton segments."""
    silhouette: list[Polygon]
    skeleton: list[Segment] = field(default_factory=list)

    @property
    def target(self) -> Polygon:
        """The single silhouette polygon of a simple problem."""
        if len(self.silhouette) != 1:
            raise ValueError(f"Problem has {len(self.silhouette)} silhouette polygons, expected 1")
        return self.silhouette[0]


class _LineReader:
    """Yields non-empty stripped lines with their line numbers."""

    def __init__(self, text: str):
        self.lines = [
            (num, line.strip())
            for num, line in enumerate(text.splitlines(), start=1)
            if line.strip()
        ]
        self.pos = 0

    def next(self, expected: str) -> tuple[int, str]:
        if self.pos >= len(self.lines):
            raise ValueError(f"Unexpected end of input, expected {expected}")
        item = self.lines[self.pos]
        self.pos += 1
        return item

    def at_end(self) -> bool:
        return self.pos >= len(self.lines)


def _parse_number(token: str, line_num: int) -> Fraction:
    try:
        return Fraction(token)
    except (ValueError, ZeroDivisionError):
        raise ValueError(f"Line {line_num}: invalid number {token!r}") from None


def _parse_count(reader: _LineReader, expected: str) -> int:
    line_num, text = reader.next(expected)
    try:
        count = int(text)
    except ValueError:
        raise ValueError(f"Line {line_num}: expected {expected}, got {text!r}") from None
    if count < 0:
        raise ValueError(f"Line {line_num}: {expected} cannot be negative")
    return count


def parse_point(text: str, line_num: int = 0) -> Point:
    """Parse "x,y" where x and y are integers, decimals or n/d fractions."""
    parts = text.split(",")
    if len(parts) != 2:
        raise ValueError(f"Line {line_num}: expected point 'x,y', got {text!r}")
    return (_parse_number(parts[0].strip(), line_num), _parse_number(parts[1].strip(), line_num))


def parse_problem(text: str) -> Problem:
    """Parse problem file content."""
    reader = _LineReader(text)

    silhouette = []
    for _ in range(_parse_count(reader, "polygon count")):
        polygon = []
        for _ in range(_parse_count(reader, "vertex count")):
            line_num, line = reader.next("vertex")
            polygon.append(parse_point(line, line_num))
        silhouette.append(polygon)

    skeleton = []
    if not reader.at_end():
        for _ in range(_parse_count(reader, "segment count")):
            line_num, line = reader.next("segment")
            points = line.split()
            if len(points) != 2:
                raise ValueError(f"Line {line_num}: expected segment 'x1,y1 x2,y2', got {line!r}")
            skeleton.append((parse_point(points[0], line_num), parse_point(points[1], line_num)))

    return Problem(silhouette, skeleton)


def load_problem(filepath: Union[str, Path]) -> Problem:
    """Load and parse a problem file."""
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"File not found: {filepath}")

    return parse_problem(filepath.read_text(encoding='utf-8'))


def is_simple_problem(problem: Problem) -> bool:
    """A problem the simple solver handles: one convex silhouette polygon."""
    return len(problem.silhouette) == 1 and is_convex(problem.silhouette[0])


def find_simple_problems(
    directory: Union[str, Path],
    pattern: str = "*.txt"
) -> Iterator[tuple[Path, Problem]]:
    """
    Yield (path, problem) for every simple problem in a directory.

    Files are visited in sorted order. A file that fails to parse raises.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"Directory not found: {directory}")

    for path in sorted(directory.glob(pattern)):
        problem = load_problem(path)
        if is_simple_problem(problem):
            yield path, problem
