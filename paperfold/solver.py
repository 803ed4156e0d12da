"""
Simple fold solver for convex silhouettes.

Algorithm:
1. Reject targets whose bounding box is wider or taller than the sheet
2. Translate the sheet so its origin sits on the target's minimum corner
3. For every target edge, in order, extend the edge to a full chord of the
   unit square and fold the material on the side away from the target's
   center over onto the other side
4. Repeat step 3 until every vertex of every fragment lies on the inner
   side of every target edge
5. Drop fragments that collapsed to fewer than three vertices

Each fold maps over all current fragments and replaces the whole
collection, so splitting a fragment never touches its siblings.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional, Union

from .config import SolverConfig
from .folds import (
    Fragment,
    fold_polygon_left,
    fold_polygon_right,
    translate_fragment,
)
from .geometry import (
    DEFAULT_EPS,
    ON_LEFT,
    ON_RIGHT,
    Point,
    Polygon,
    Segment,
    bounding_box,
    clean_polygon,
    elongate,
    polygon_center,
    polygon_edges,
    relative_to,
)
from .replay import unfold_polygon


# Result statuses
SOLVED = "solved"
TOO_LARGE = "too_large"
NOT_CONVERGED = "not_converged"

# Event kinds
FOLD_LEFT = "fold_left"
FOLD_RIGHT = "fold_right"
TRANSLATE = "translate"


class SolverError(Exception):
    """The simple solver could not produce a folding for a target."""


class SizePreconditionError(SolverError):
    """Target is wider or taller than the unit sheet."""


class NonConvergenceError(SolverError):
    """Fold passes hit the configured bound without fitting the silhouette."""


@dataclass
class FoldEvent:
    """
    One operation applied to one fragment, reported to an observer.

    Attributes:
        kind: FOLD_LEFT, FOLD_RIGHT or TRANSLATE
        operand: The crease segment, or the translation vector
        before: Fragment outline before the operation
        after: Outlines produced (empty, one or two)
    """
    kind: str
    operand: Union[Segment, Point]
    before: Polygon
    after: list[Polygon]


FoldObserver = Callable[[FoldEvent], None]


@dataclass
class SolveResult:
    """Outcome of a solver run. Fragments are only kept on success."""
    status: str
    fragments: list[Fragment] = field(default_factory=list)
    passes: int = 0

    @property
    def ok(self) -> bool:
        return self.status == SOLVED

    def raise_for_status(self) -> None:
        """Raise the SolverError matching a failed status."""
        if self.status == TOO_LARGE:
            raise SizePreconditionError("Polygon size by X or Y is > 1, it needs to be rotated first")
        if self.status == NOT_CONVERGED:
            raise NonConvergenceError(
                f"Silhouette not inside target after {self.passes} passes"
            )


class SolverState:
    """
    The folded sheet: an unordered collection of fragments.

    Every operation computes a new fragment list from the current one and
    replaces it. The optional observer sees each per-fragment step and is
    never consulted by the solver itself.
    """

    def __init__(
        self,
        fragments: Optional[list[Fragment]] = None,
        eps: float = DEFAULT_EPS,
        observer: Optional[FoldObserver] = None
    ):
        self.fragments = list(fragments) if fragments is not None else [Fragment.initial()]
        self.eps = eps
        self.observer = observer

    def __len__(self):
        return len(self.fragments)

    def __iter__(self) -> Iterator[Fragment]:
        return iter(self.fragments)

    def _map(self, kind: str, operand, step: Callable[[Fragment], list[Fragment]]) -> None:
        new_fragments = []
        for fragment in self.fragments:
            produced = step(fragment)
            if self.observer is not None:
                self.observer(FoldEvent(
                    kind=kind,
                    operand=operand,
                    before=fragment.vertices,
                    after=[f.vertices for f in produced]
                ))
            new_fragments.extend(produced)
        self.fragments = new_fragments

    def fold_left(self, crease: Segment) -> None:
        """Reflect everything left of the crease onto the right side."""
        self._map(FOLD_LEFT, crease, lambda f: fold_polygon_left(crease, f, self.eps))

    def fold_right(self, crease: Segment) -> None:
        """Reflect everything right of the crease onto the left side."""
        self._map(FOLD_RIGHT, crease, lambda f: fold_polygon_right(crease, f, self.eps))

    def auto_fold(self, center: Point, crease: Segment) -> str:
        """
        Fold the side of the crease away from center onto the side holding it.

        Returns:
            FOLD_RIGHT when center is strictly left of the crease,
            FOLD_LEFT otherwise (right of it or on it).
        """
        if relative_to(center, crease, self.eps) == ON_LEFT:
            self.fold_right(crease)
            return FOLD_RIGHT
        self.fold_left(crease)
        return FOLD_LEFT

    def translate(self, vector: Point) -> None:
        """Shift every fragment by vector."""
        self._map(TRANSLATE, vector, lambda f: [translate_fragment(vector, f)])

    def silhouette(self) -> list[Point]:
        """All fragment vertices together."""
        return [p for fragment in self.fragments for p in fragment.polygon]

    def is_everything_inside(self, target: Polygon) -> bool:
        """
        Check that the silhouette lies within a convex target.

        For each target edge, all silhouette points must be on one side of
        it (points on the edge's line count for either side).
        """
        silhouette = self.silhouette()
        for edge in polygon_edges(target):
            sides = {relative_to(p, edge, self.eps) for p in silhouette}
            if ON_LEFT in sides and ON_RIGHT in sides:
                return False
        return True

    def remove_single_points(self, min_vertices: int = 3) -> None:
        """Drop degenerate fragments left behind by cuts."""
        self.fragments = [f for f in self.fragments if len(f.polygon) >= min_vertices]


def check_size_xy(target: Polygon) -> bool:
    """Check that the target's extent along X and Y is at most 1."""
    bbox = bounding_box(target)
    return bbox.width <= 1 and bbox.height <= 1


def translate_to_origin(state: SolverState, target: Polygon) -> None:
    """Move the sheet so its origin lands on the target's minimum corner."""
    state.translate(bounding_box(target).min_corner)


def simple_solve(
    target: Polygon,
    state: Optional[SolverState] = None,
    config: Optional[SolverConfig] = None,
    observer: Optional[FoldObserver] = None
) -> SolveResult:
    """
    Fold the sheet until it fits inside a convex target.

    Args:
        target: Convex polygon vertices (checked by the caller)
        state: Sheet to fold; a fresh unit square when omitted
        config: Pass bound, tolerance and pruning threshold
        observer: Receives a FoldEvent for every per-fragment operation
            when a fresh state is created

    Returns:
        SolveResult with status SOLVED, TOO_LARGE or NOT_CONVERGED.

    Raises:
        ValueError: If the target has fewer than 3 distinct vertices or
            the config is invalid.
    """
    config = (config or SolverConfig()).check()
    eps = config.tolerance

    target = clean_polygon(list(target), eps)
    if len(target) < 3:
        raise ValueError(f"Target polygon needs at least 3 distinct vertices, got {len(target)}")

    if not check_size_xy(target):
        return SolveResult(TOO_LARGE)

    if state is None:
        state = SolverState(eps=eps, observer=observer)

    translate_to_origin(state, target)

    creases = [elongate(edge) for edge in polygon_edges(target)]
    center = polygon_center(target)

    passes = 0
    while True:
        if passes >= config.max_passes:
            return SolveResult(NOT_CONVERGED, passes=passes)
        passes += 1

        for crease in creases:
            state.auto_fold(center, crease)

        if state.is_everything_inside(target):
            break

    state.remove_single_points(config.min_fragment_vertices)
    return SolveResult(SOLVED, fragments=list(state.fragments), passes=passes)


def run_simple_solver(
    target: Polygon,
    config: Optional[SolverConfig] = None,
    observer: Optional[FoldObserver] = None
) -> tuple[list[Polygon], list[Fragment]]:
    """
    Solve a target starting from a fresh unit square.

    Returns:
        (unfolded, fragments): each fragment's outline replayed back onto the
        original sheet, and the folded fragments themselves.

    Raises:
        SizePreconditionError: Target does not fit a unit square.
        NonConvergenceError: Pass bound reached.
    """
    result = simple_solve(target, config=config, observer=observer)
    result.raise_for_status()

    unfolded = [unfold_polygon(f) for f in result.fragments]
    return (unfolded, result.fragments)
