"""
Configuration manager for pose trajectory interpolation runs.
Handles loading of YAML run configurations and path resolution.
"""

import yaml
import logging
from pathlib import Path
from typing import Union

# Project Imports
from .posetime_config_schemas import (
    PoseTimeConfig,
    InterpolationSettings,
    TrajectorySource,
    QuerySettings,
    OutputSettings,
    SUPPORTED_FORMATS,
    SUPPORTED_CONTAINERS,
)

logger = logging.getLogger(__name__)


class PoseTimeConfigManager:
    """
    Configuration manager for interpolation runs.
    Handles configuration loading and path resolution.
    """

    def __init__(self, project_root: Path = None):
        """Initialize the configuration manager."""
        if project_root is None:
            self.project_root = Path(__file__).parent.parent.parent
        else:
            self.project_root = Path(project_root)

        self.configs_dir = self.project_root / "data" / "configs"

        # Directory of the most recently loaded config file
        self.config_directory = None

    def load_config(self, config_path: Union[str, Path]) -> PoseTimeConfig:
        """
        Load a run configuration from a YAML file.

        Args:
            config_path: Path to configuration YAML file, absolute or relative
                to data/configs

        Returns:
            PoseTimeConfig: Loaded configuration

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the trajectory format or container is unknown
        """
        config_path = Path(config_path)

        if not config_path.is_absolute():
            config_path = self.configs_dir / config_path

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        self.config_directory = config_path.parent
        logger.info(f"Loading interpolation config from: {config_path}")

        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f) or {}

        config = PoseTimeConfig()
        config.name = config_data.get('name', 'Unnamed Trajectory')

        if 'interpolation' in config_data:
            interp = config_data['interpolation']
            config.interpolation = InterpolationSettings(
                parallel_threshold=float(interp.get('parallel_threshold', 0.9995)),
                timestamp_epsilon=float(interp.get('timestamp_epsilon', 1e-9)),
                original_timestamp_tolerance=float(interp.get('original_timestamp_tolerance', 1e-9))
            )

        if 'trajectory' in config_data:
            traj = config_data['trajectory']
            config.trajectory = TrajectorySource(
                path=traj.get('path', ''),
                format=traj.get('format', 'csv'),
                container=traj.get('container', 'sequence')
            )

        if 'queries' in config_data:
            queries = config_data['queries']
            config.queries = QuerySettings(
                times=[float(t) for t in queries.get('times', [])],
                max_workers=int(queries.get('max_workers', 1)),
                show_progress=bool(queries.get('show_progress', False))
            )

        if 'output' in config_data:
            output = config_data['output']
            config.output = OutputSettings(
                output_dir=output.get('output_dir', 'interpolation_results'),
                save_csv=bool(output.get('save_csv', True)),
                save_plot=bool(output.get('save_plot', False)),
                print_results=bool(output.get('print_results', True))
            )

        if config.trajectory.format not in SUPPORTED_FORMATS:
            raise ValueError(f"Unknown trajectory format: {config.trajectory.format}")
        if config.trajectory.container not in SUPPORTED_CONTAINERS:
            raise ValueError(f"Unknown trajectory container: {config.trajectory.container}")

        logger.info(f"Loaded config: {config.name} with {len(config.queries.times)} query times")
        return config

    def get_trajectory_path(self, config: PoseTimeConfig) -> Path:
        """
        Get the full path to the trajectory file.
        Relative paths are resolved against the config file directory.
        """
        trajectory_path = Path(config.trajectory.path)
        if not trajectory_path.is_absolute():
            base = self.config_directory if self.config_directory is not None else self.configs_dir
            trajectory_path = base / trajectory_path

        if not trajectory_path.exists():
            raise FileNotFoundError(f"Trajectory file not found: {trajectory_path}")

        return trajectory_path

    def load_trajectory(self, config: PoseTimeConfig):
        """
        Load the configured trajectory into the configured container kind.

        Returns:
            TrajectoryView over the loaded samples
        """
        from posetime.io.trajectory_loader import load_trajectory

        return load_trajectory(
            self.get_trajectory_path(config),
            file_format=config.trajectory.format,
            container=config.trajectory.container
        )

    def get_output_directory(self, config: PoseTimeConfig) -> Path:
        """
        Get the output directory path.
        Creates it under data/results/<output_dir_name>.
        """
        output_dir = config.get_output_directory(self.project_root)
        output_dir.mkdir(parents=True, exist_ok=True)
        return output_dir
