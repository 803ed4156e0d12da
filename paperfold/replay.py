"""
Replay a fragment's history to recover where it came from.

Both functions walk the history OLDEST FIRST (the reverse of how it is
stored) and use the same per-step operation:
  - Translate(v): translate by -v
  - FoldLeft(seg) / FoldRight(seg): reflect across seg

Reflection is its own inverse, so for a fragment with a single crease, or
creases that commute, unfold_polygon() returns the fragment's outline on
the original sheet exactly. Longer histories of non-commuting creases are
replayed in the same recorded order; see DESIGN.md before changing it.
"""

from .folds import Fold, FoldLeft, FoldRight, Fragment, Translate
from .geometry import Polygon, flip_polygon, translate_polygon


def _undo(fold: Fold, polygon: Polygon) -> Polygon:
    if isinstance(fold, Translate):
        vx, vy = fold.vector
        return translate_polygon((-vx, -vy), polygon)
    if isinstance(fold, (FoldLeft, FoldRight)):
        return flip_polygon(fold.crease, polygon)
    raise TypeError(f"Unknown fold operation: {fold!r}")


def unfold_polygon(fragment: Fragment) -> Polygon:
    """Outline of a fragment placed back on the unfolded sheet."""
    polygon = list(fragment.polygon)
    for fold in fragment.oldest_first():
        polygon = _undo(fold, polygon)
    return polygon


def apply_transform(history, polygon: Polygon) -> Polygon:
    """
    Replay a history (stored most recent first) against a base polygon.

    Uses exactly the per-step operations of unfold_polygon(), oldest first.
    """
    result = list(polygon)
    for fold in reversed(tuple(history)):
        result = _undo(fold, result)
    return result


def folded_silhouette(fragments: list[Fragment]) -> list[Polygon]:
    """Current outlines of all fragments."""
    return [list(f.polygon) for f in fragments]


def unfolded_silhouette(fragments: list[Fragment]) -> list[Polygon]:
    """Every fragment's outline on the original sheet."""
    return [unfold_polygon(f) for f in fragments]
