"""
Fold history and the single-crease fold step.

A fragment is one piece of paper tracked through the fold sequence. It
carries its current outline and the history of operations applied to it
since the initial unit square.

History ordering:
  Fragment.history is a tuple with the MOST RECENT operation first. Every
  consumer must say which order it walks; oldest_first() gives the other
  direction.

Fold step:
  The crease is a line. cut_polygon() splits a fragment into the piece on
  the left of the crease and the piece on the right.
  - fold left: the left piece is reflected across the crease (FoldLeft
    recorded), the right piece stays where it is.
  - fold right: the right piece is reflected (FoldRight recorded), the
    left piece stays.
  An empty piece produces nothing, so a crease that misses the fragment
  leaves it untouched with no entry added to its history.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Union

from .geometry import (
    DEFAULT_EPS,
    Point,
    Polygon,
    Segment,
    cut_polygon,
    flip_polygon,
    format_point,
    format_segment,
    translate_polygon,
)


UNIT_SQUARE: Polygon = [(0, 0), (1, 0), (1, 1), (0, 1)]


@dataclass(frozen=True)
class Translate:
    """Rigid shift mapping the origin to vector."""
    vector: Point

    def __str__(self):
        return f"Translate {format_point(self.vector)}"


@dataclass(frozen=True)
class FoldLeft:
    """Material on the left of the crease was reflected across it."""
    crease: Segment

    def __str__(self):
        return f"FoldLeft {format_segment(self.crease)}"


@dataclass(frozen=True)
class FoldRight:
    """Material on the right of the crease was reflected across it."""
    crease: Segment

    def __str__(self):
        return f"FoldRight {format_segment(self.crease)}"


Fold = Union[Translate, FoldLeft, FoldRight]


@dataclass(frozen=True)
class Fragment:
    """A piece of paper: its history (most recent first) and current outline."""
    history: tuple[Fold, ...] = ()
    polygon: tuple[Point, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept lists for convenience but store tuples so fragments stay hashable
        object.__setattr__(self, "history", tuple(self.history))
        object.__setattr__(self, "polygon", tuple(self.polygon))

    @classmethod
    def initial(cls) -> "Fragment":
        """The whole sheet before any operation."""
        return cls((), UNIT_SQUARE)

    def with_fold(self, fold: Fold, polygon: Polygon) -> "Fragment":
        """New fragment with fold prepended to the history."""
        return Fragment((fold,) + self.history, polygon)

    def with_polygon(self, polygon: Polygon) -> "Fragment":
        """Same history, different outline."""
        return Fragment(self.history, polygon)

    def oldest_first(self) -> list[Fold]:
        return list(reversed(self.history))

    @property
    def vertices(self) -> list[Point]:
        return list(self.polygon)

    def __len__(self):
        return len(self.polygon)


def fold_polygon_left(crease: Segment, fragment: Fragment,
                      eps: float = DEFAULT_EPS) -> list[Fragment]:
    """
    Fold the left side of a fragment over the crease.

    Returns:
        Zero to two fragments: the reflected left piece (with FoldLeft
        recorded) followed by the untouched right piece.
    """
    left, right = cut_polygon(crease, list(fragment.polygon), eps)

    if not right:
        if not left:
            return []
        return [fragment.with_fold(FoldLeft(crease), flip_polygon(crease, left))]
    if not left:
        return [fragment.with_polygon(right)]
    return [
        fragment.with_fold(FoldLeft(crease), flip_polygon(crease, left)),
        fragment.with_polygon(right),
    ]


def fold_polygon_right(crease: Segment, fragment: Fragment,
                       eps: float = DEFAULT_EPS) -> list[Fragment]:
    """
    Fold the right side of a fragment over the crease.

    Returns:
        Zero to two fragments: the untouched left piece followed by the
        reflected right piece (with FoldRight recorded).
    """
    left, right = cut_polygon(crease, list(fragment.polygon), eps)

    if not right:
        if not left:
            return []
        return [fragment.with_polygon(left)]
    if not left:
        return [fragment.with_fold(FoldRight(crease), flip_polygon(crease, right))]
    return [
        fragment.with_polygon(left),
        fragment.with_fold(FoldRight(crease), flip_polygon(crease, right)),
    ]


def translate_fragment(vector: Point, fragment: Fragment) -> Fragment:
    """Shift a fragment, recording Translate in its history."""
    return fragment.with_fold(Translate(vector), translate_polygon(vector, list(fragment.polygon)))
