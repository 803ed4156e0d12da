"""
paperfold - Fold a unit square of paper into a convex silhouette.

The solver cuts and reflects the sheet along the target's extended edges
until every fragment lies inside the target, keeping each fragment's fold
history so its place on the unfolded sheet can be recovered.
"""

__version__ = "1.0.0"

from .config import SolverConfig
from .folds import FoldLeft, FoldRight, Fragment, Translate, UNIT_SQUARE
from .problem import Problem, find_simple_problems, is_simple_problem, load_problem, parse_problem
from .replay import apply_transform, unfold_polygon
from .solver import (
    FoldEvent,
    NonConvergenceError,
    SizePreconditionError,
    SolveResult,
    SolverError,
    SolverState,
    run_simple_solver,
    simple_solve,
)
