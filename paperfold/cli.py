"""
Command-line fold solver.

Usage:
    paperfold <problem.txt> [<problem.txt> ...] [options]
    paperfold --dir <problems/> [options]

Options:
    --dir           Solve every simple problem in a directory
    --max-passes    Fold passes before giving up (default: from config, 64)
    --tolerance     On-line tolerance, a number or preset name
    --config        JSON solver config (default: <problem>.solver_config.json)
    --verbose       Print every fold and translate

Example:
    paperfold problems/101.txt --verbose
    paperfold --dir problems --max-passes 20
"""

import sys
import argparse
from pathlib import Path
from typing import Optional

from .config import SolverConfig, TOLERANCE_PRESETS
from .geometry import format_point, format_polygon, format_segment, polygon_area
from .problem import Problem, find_simple_problems, is_simple_problem, load_problem
from .solver import FoldEvent, TRANSLATE, simple_solve


def print_event(event: FoldEvent) -> None:
    """Observer printing a trace line per fragment operation."""
    if event.kind == TRANSLATE:
        print(f"  Translate <{format_polygon(event.before)}> by <{format_point(event.operand)}>")
        return

    print(f"  {event.kind}: cut <{format_polygon(event.before)}> with <{format_segment(event.operand)}>:")
    for polygon in event.after:
        print(f"\t<{format_polygon(polygon)}>")


def _parse_tolerance(value: str) -> float:
    if value in TOLERANCE_PRESETS:
        return TOLERANCE_PRESETS[value]
    try:
        return float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"tolerance must be a number or one of {', '.join(TOLERANCE_PRESETS)}"
        ) from None


def _build_config(args, problem_path: Path) -> SolverConfig:
    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        config = SolverConfig.load(config_path)
    else:
        config = SolverConfig.load_for_problem(problem_path)

    if args.max_passes is not None:
        config.max_passes = args.max_passes
    if args.tolerance is not None:
        config.tolerance = args.tolerance
    if args.verbose:
        config.verbose = True
    return config.check()


def solve_problem(path: Path, problem: Problem, config: SolverConfig) -> bool:
    """Solve one problem and print a summary line. Returns True on success."""
    observer = print_event if config.verbose else None
    result = simple_solve(problem.target, config=config, observer=observer)

    if not result.ok:
        print(f"{path.name}: FAILED ({result.status}, {result.passes} passes)")
        return False

    area = sum(polygon_area(list(f.polygon)) for f in result.fragments)
    print(
        f"{path.name}: solved in {result.passes} passes, "
        f"{len(result.fragments)} fragments, folded area {float(area):.6f}"
    )
    return True


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog='paperfold',
        description='Fold a unit square into convex silhouette problems',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s problems/101.txt
  %(prog)s problems/101.txt --verbose
  %(prog)s --dir problems --max-passes 20
        """
    )
    parser.add_argument('problems', nargs='*', help='Problem files (.txt)')
    parser.add_argument('--dir', dest='directory',
                        help='Solve every simple problem in this directory')
    parser.add_argument('--max-passes', type=int, default=None,
                        help='Fold passes before giving up (default: 64)')
    parser.add_argument('--tolerance', type=_parse_tolerance, default=None,
                        help='On-line tolerance: number or exact/float/loose')
    parser.add_argument('--config', help='JSON solver config file')
    parser.add_argument('--verbose', action='store_true',
                        help='Print every fold and translate')

    args = parser.parse_args(argv)

    if not args.problems and not args.directory:
        parser.error("give at least one problem file or --dir")

    failures = 0

    try:
        jobs = []
        for name in args.problems:
            path = Path(name)
            problem = load_problem(path)
            if not is_simple_problem(problem):
                print(f"{path.name}: skipped (not a single convex polygon)")
                continue
            jobs.append((path, problem))

        if args.directory:
            jobs.extend(find_simple_problems(args.directory))

        if not jobs:
            print("No simple problems found")
            return 0

        for path, problem in jobs:
            config = _build_config(args, path)
            if not solve_problem(path, problem, config):
                failures += 1

    except (FileNotFoundError, ValueError) as e:
        print(f"ERROR: {e}")
        return 1

    if failures:
        print(f"{failures} of {len(jobs)} problems failed")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
