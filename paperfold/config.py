"""
Configuration for the fold solver.

Defines the iteration bound, numeric tolerance and fragment pruning
threshold used by the convergence loop.
"""

from dataclasses import dataclass
import json
from pathlib import Path


@dataclass
class SolverConfig:
    """
    Settings for one solver run.

    Attributes:
        max_passes: Upper bound on full passes over the target edges before
            the run is reported as not converged
        tolerance: Distance below which a point counts as on a crease
            (0 = exact, for rational coordinates)
        min_fragment_vertices: Fragments with fewer vertices are pruned
            after convergence
        verbose: Print every fold and translate from the command line tool
    """
    max_passes: int = 64
    tolerance: float = 1e-9
    min_fragment_vertices: int = 3
    verbose: bool = False

    def validate(self) -> list[str]:
        """
        Validate configuration values.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if self.max_passes < 1:
            errors.append(f"max_passes must be >= 1, got {self.max_passes}")

        if self.tolerance < 0:
            errors.append(f"tolerance cannot be negative, got {self.tolerance}")
        if self.tolerance > 1e-3:
            errors.append(f"tolerance {self.tolerance} is too coarse for a unit sheet (max recommended: 1e-3)")

        if self.min_fragment_vertices < 3:
            errors.append(f"min_fragment_vertices must be >= 3, got {self.min_fragment_vertices}")

        return errors

    def check(self) -> "SolverConfig":
        """Raise ValueError listing every problem if the config is invalid."""
        errors = self.validate()
        if errors:
            raise ValueError("Invalid solver config: " + "; ".join(errors))
        return self

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "max_passes": self.max_passes,
            "tolerance": self.tolerance,
            "min_fragment_vertices": self.min_fragment_vertices,
            "verbose": self.verbose,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SolverConfig":
        """Create from dictionary."""
        # Tolerance may be given by preset name
        tolerance = data.get("tolerance", 1e-9)
        if isinstance(tolerance, str):
            if tolerance not in TOLERANCE_PRESETS:
                raise ValueError(f"Unknown tolerance preset: {tolerance}")
            tolerance = TOLERANCE_PRESETS[tolerance]

        return cls(
            max_passes=data.get("max_passes", 64),
            tolerance=tolerance,
            min_fragment_vertices=data.get("min_fragment_vertices", 3),
            verbose=data.get("verbose", False),
        )

    def save(self, filepath: Path | str) -> None:
        """Save configuration to JSON file."""
        filepath = Path(filepath)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filepath: Path | str) -> "SolverConfig":
        """Load configuration from JSON file."""
        filepath = Path(filepath)
        if not filepath.exists():
            return cls()  # Return defaults if file doesn't exist

        with open(filepath, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data)

    @classmethod
    def load_for_problem(cls, problem_filepath: Path | str) -> "SolverConfig":
        """
        Load configuration for a specific problem file.

        Looks for <problem_name>.solver_config.json next to the problem file.
        Returns defaults if config file doesn't exist.
        """
        problem_path = Path(problem_filepath)
        config_path = problem_path.with_suffix('.solver_config.json')
        return cls.load(config_path)

    def save_for_problem(self, problem_filepath: Path | str) -> None:
        """Save as <problem_name>.solver_config.json next to the problem file."""
        problem_path = Path(problem_filepath)
        config_path = problem_path.with_suffix('.solver_config.json')
        self.save(config_path)


# Tolerance presets by coordinate type
TOLERANCE_PRESETS = {
    "exact": 0.0,    # Fraction coordinates
    "float": 1e-9,   # Float coordinates on a unit sheet
    "loose": 1e-6,   # Noisy float input
}
