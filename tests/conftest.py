"""Pytest fixtures for paperfold tests."""

import pytest
import sys
from fractions import Fraction
from pathlib import Path

# Add repository root to path for imports
ROOT_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT_DIR))


F = Fraction


@pytest.fixture
def unit_square() -> list:
    """The sheet itself, counter-clockwise."""
    return [(F(0), F(0)), (F(1), F(0)), (F(1), F(1)), (F(0), F(1))]


@pytest.fixture
def right_triangle() -> list:
    """Lower-left half of the unit square."""
    return [(F(0), F(0)), (F(1), F(0)), (F(0), F(1))]


@pytest.fixture
def half_rectangle() -> list:
    """Bottom half of the unit square."""
    return [(F(0), F(0)), (F(1), F(0)), (F(1), F(1, 2)), (F(0), F(1, 2))]


@pytest.fixture
def wide_polygon() -> list:
    """A target 1.5 wide, too large for the sheet."""
    return [(F(0), F(0)), (F(3, 2), F(0)), (F(3, 2), F(1, 2)), (F(0), F(1, 2))]


@pytest.fixture
def triangle_problem_text() -> str:
    """Problem file content with the right triangle silhouette."""
    return """1
3
0,0
1,0
0,1
3
0,0 1,0
1,0 0,1
0,1 0,0
"""


@pytest.fixture
def nonconvex_problem_text() -> str:
    """Problem file content with an L-shaped silhouette."""
    return """1
6
0,0
1,0
1,1/2
1/2,1/2
1/2,1
0,1
0
"""


@pytest.fixture
def problem_dir(tmp_path, triangle_problem_text, nonconvex_problem_text) -> Path:
    """Directory holding one simple and one non-simple problem."""
    (tmp_path / "001.txt").write_text(triangle_problem_text)
    (tmp_path / "002.txt").write_text(nonconvex_problem_text)
    return tmp_path
