"""Unit tests for fold history and the fold step."""

import pytest
from fractions import Fraction as F

from paperfold.folds import (
    UNIT_SQUARE,
    FoldLeft,
    FoldRight,
    Fragment,
    Translate,
    fold_polygon_left,
    fold_polygon_right,
    translate_fragment,
)
from paperfold.geometry import polygon_area


# y = 1/2, directed towards +x: left is the top half
MIDLINE = ((F(0), F(1, 2)), (F(1), F(1, 2)))
# y = 2, misses the sheet entirely (sheet is on its right)
ABOVE = ((F(0), F(2)), (F(1), F(2)))


class TestFragment:
    """Tests for the Fragment value type."""

    def test_initial(self):
        """Initial fragment is the unit square with no history."""
        fragment = Fragment.initial()
        assert fragment.history == ()
        assert fragment.vertices == UNIT_SQUARE

    def test_stores_tuples(self):
        """Lists are stored as tuples so fragments are hashable."""
        fragment = Fragment([Translate((0, 0))], [(0, 0), (1, 0), (0, 1)])
        assert isinstance(fragment.polygon, tuple)
        assert hash(fragment) == hash(Fragment((Translate((0, 0)),), ((0, 0), (1, 0), (0, 1))))

    def test_with_fold_prepends(self):
        """The most recent fold comes first."""
        first = Translate((F(1, 2), 0))
        second = FoldLeft(MIDLINE)
        fragment = Fragment.initial().with_fold(first, UNIT_SQUARE).with_fold(second, UNIT_SQUARE)
        assert fragment.history == (second, first)
        assert fragment.oldest_first() == [first, second]

    def test_fold_str(self):
        assert str(Translate((F(1, 2), 0))) == "Translate 1/2,0"
        assert str(FoldRight(((0, 0), (1, 1)))) == "FoldRight 0,0 1,1"


class TestFoldLeft:
    """Tests for folding the left side over."""

    def test_split(self):
        """A crease through the sheet produces the reflected top and the untouched bottom."""
        result = fold_polygon_left(MIDLINE, Fragment.initial(), eps=0)

        assert len(result) == 2
        folded, kept = result
        assert folded.history == (FoldLeft(MIDLINE),)
        assert kept.history == ()
        assert set(folded.polygon) == set(kept.polygon)
        assert all(y <= F(1, 2) for _, y in folded.polygon)

    def test_far_side_empty(self):
        """Nothing to fold: fragment kept as is, no crease recorded."""
        fragment = Fragment.initial()
        result = fold_polygon_left(ABOVE, fragment, eps=0)
        assert result == [fragment]

    def test_kept_side_empty(self):
        """Everything is on the folded side: one reflected fragment."""
        crease = ((F(0), F(-1)), (F(1), F(-1)))  # sheet is on the left
        result = fold_polygon_left(crease, Fragment.initial(), eps=0)

        assert len(result) == 1
        assert result[0].history == (FoldLeft(crease),)
        assert all(y <= -1 for _, y in result[0].polygon)

    def test_area_conserved(self):
        result = fold_polygon_left(((0.0, 0.2), (1.0, 0.7)), Fragment.initial())
        assert sum(polygon_area(list(f.polygon)) for f in result) == pytest.approx(1.0)


class TestFoldRight:
    """Tests for folding the right side over."""

    def test_split(self):
        """Mirror image of the left fold: untouched top, reflected bottom."""
        result = fold_polygon_right(MIDLINE, Fragment.initial(), eps=0)

        assert len(result) == 2
        kept, folded = result
        assert kept.history == ()
        assert folded.history == (FoldRight(MIDLINE),)
        assert all(y >= F(1, 2) for _, y in folded.polygon)

    def test_far_side_empty(self):
        """Sheet entirely on the left of the crease stays put."""
        crease = ((F(0), F(-1)), (F(1), F(-1)))
        fragment = Fragment.initial()
        assert fold_polygon_right(crease, fragment, eps=0) == [fragment]

    def test_kept_side_empty(self):
        """Sheet entirely on the right is reflected whole."""
        result = fold_polygon_right(ABOVE, Fragment.initial(), eps=0)

        assert len(result) == 1
        assert result[0].history == (FoldRight(ABOVE),)
        assert all(y >= 3 for _, y in result[0].polygon)

    def test_crease_along_edge_does_not_split(self):
        """A crease on the sheet's boundary adds no fragment and no history."""
        crease = ((F(0), F(0)), (F(1), F(0)))
        fragment = Fragment.initial()
        assert fold_polygon_right(crease, fragment, eps=0) == [fragment]

    def test_history_is_shared_prefix(self):
        """Fragments split from one ancestor share its history."""
        ancestor = translate_fragment((F(0), F(0)), Fragment.initial())
        kept, folded = fold_polygon_right(MIDLINE, ancestor, eps=0)
        assert kept.history == ancestor.history
        assert folded.history[1:] == ancestor.history


class TestTranslateFragment:
    """Tests for translating a fragment."""

    def test_translate(self):
        fragment = translate_fragment((F(1, 2), F(1, 4)), Fragment.initial())
        assert fragment.history == (Translate((F(1, 2), F(1, 4))),)
        assert fragment.polygon[0] == (F(1, 2), F(1, 4))
        assert fragment.polygon[2] == (F(3, 2), F(5, 4))
