"""
Configuration schemas for pose trajectory interpolation runs.
Unified configuration for interpolation tolerances, trajectory sources,
query batches and output handling.
"""

from dataclasses import dataclass, field
from typing import List
from pathlib import Path


SUPPORTED_FORMATS = ('csv', 'keyframes')
SUPPORTED_CONTAINERS = ('sequence', 'mapping', 'sequential')


@dataclass
class InterpolationSettings:
    """Numerical tolerances used by the interpolation engine."""
    # Above this quaternion dot product SLERP falls back to normalized lerp
    parallel_threshold: float = 0.9995
    # Bracketing samples closer than this are treated as one sample
    timestamp_epsilon: float = 1e-9
    # Tolerance for deciding whether a query time hit an original sample
    original_timestamp_tolerance: float = 1e-9


@dataclass
class TrajectorySource:
    """Where the recorded trajectory comes from and how it is held in memory."""
    path: str = ""  # Relative to config file directory
    format: str = "csv"
    container: str = "sequence"


@dataclass
class QuerySettings:
    """Batch of query times evaluated against the trajectory."""
    times: List[float] = field(default_factory=list)
    max_workers: int = 1
    show_progress: bool = False


@dataclass
class OutputSettings:
    """Output handling for interpolated results."""
    output_dir: str = "interpolation_results"
    save_csv: bool = True
    save_plot: bool = False
    print_results: bool = True


@dataclass
class PoseTimeConfig:
    """
    Complete configuration for one interpolation run.
    """
    name: str = "Unnamed Trajectory"

    interpolation: InterpolationSettings = field(default_factory=InterpolationSettings)
    trajectory: TrajectorySource = field(default_factory=TrajectorySource)
    queries: QuerySettings = field(default_factory=QuerySettings)
    output: OutputSettings = field(default_factory=OutputSettings)

    def get_output_directory(self, project_root: Path) -> Path:
        """Get the full output directory path under data/results/."""
        return project_root / "data" / "results" / self.output.output_dir
