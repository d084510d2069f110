#!/usr/bin/env python3
"""
posetime Example 2: Config-Driven Batch Interpolation
=====================================================

Loads a run configuration, reads the trajectory it points to, evaluates the
configured query times and writes the results.

Run from project root:
    python examples/02_config_batch.py [config.yaml]

Expected output:
    - Interpolated poses printed to the console
    - CSV (and optionally PNG) under data/results/<output_dir>/
"""

import sys
import logging
from pathlib import Path

# Setup project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from posetime.config import PoseTimeConfigManager
from posetime.interpolation import interpolate_many
from posetime.io import print_interpolation_results, save_interpolated_poses


def main():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    config_name = sys.argv[1] if len(sys.argv) > 1 else "square_path.yaml"

    # =========================================================================
    # SETUP
    # =========================================================================
    config_manager = PoseTimeConfigManager(PROJECT_ROOT)
    config = config_manager.load_config(config_name)
    trajectory = config_manager.load_trajectory(config)

    # =========================================================================
    # INTERPOLATION
    # =========================================================================
    times = config.queries.times
    results = interpolate_many(
        trajectory,
        times,
        settings=config.interpolation,
        max_workers=config.queries.max_workers,
        show_progress=config.queries.show_progress
    )

    # =========================================================================
    # OUTPUT
    # =========================================================================
    tolerance = config.interpolation.original_timestamp_tolerance
    if config.output.print_results:
        print_interpolation_results(trajectory, times, results, tolerance=tolerance)

    output_dir = config_manager.get_output_directory(config)
    if config.output.save_csv:
        save_interpolated_poses(output_dir, results, trajectory=trajectory, tolerance=tolerance)

    if config.output.save_plot:
        from posetime.visualization import create_trajectory_plot, setup_matplotlib_backend
        setup_matplotlib_backend(headless=True)
        create_trajectory_plot(trajectory, results, title=config.name, output_dir=output_dir)


if __name__ == "__main__":
    main()
