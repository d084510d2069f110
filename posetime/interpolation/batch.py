"""
Batch querying of many times against a single trajectory.

Queries are independent and read-only, so large batches can be spread over
a thread pool. Small batches are evaluated in the calling thread.
"""

import time
import logging
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Any, Iterable, List, Optional

import numpy as np
from tqdm.auto import tqdm

from posetime.config.posetime_config_schemas import InterpolationSettings
from .errors import TrajectoryError
from .pose_interpolator import QueryResult, interpolate_at
from .trajectory_view import as_trajectory

logger = logging.getLogger(__name__)

# Below this many queries per worker a pool costs more than it saves
MIN_QUERIES_PER_WORKER = 4


def interpolate_many(
    trajectory: Any,
    times: Iterable[float],
    settings: Optional[InterpolationSettings] = None,
    max_workers: Optional[int] = None,
    show_progress: bool = False
) -> List[QueryResult]:
    """
    Evaluate interpolate_at for every query time.

    Args:
        trajectory: TrajectoryView or container of TimedPose ordered by time
        times: Query time or iterable of query times in seconds
        settings: Interpolation tolerances (defaults if None)
        max_workers: Number of worker threads; None or 1 runs sequentially
        show_progress: If True, display tqdm progress bar

    Returns:
        One result per query time, in input order. Failed queries appear as
        EmptyTrajectory / OutOfRange values, they are not raised.
    """
    view = as_trajectory(trajectory)
    if isinstance(times, Iterator):
        times = list(times)
    query_times = np.atleast_1d(np.asarray(times, dtype=np.float64)).tolist()
    num_queries = len(query_times)
    workers = max_workers or 1

    logger.info(f"Interpolating {num_queries} poses from {view}")
    start = time.time()

    query = partial(interpolate_at, view, settings=settings)

    if workers <= 1 or num_queries < workers * MIN_QUERIES_PER_WORKER:
        time_iter = query_times
        if show_progress:
            time_iter = tqdm(time_iter, desc="Interpolating poses", unit="pose", mininterval=0.3)
        results = [query(t) for t in time_iter]
    else:
        logger.debug(f"Using {workers} worker threads")
        with ThreadPoolExecutor(max_workers=workers) as executor:
            mapped = executor.map(query, query_times)
            if show_progress:
                mapped = tqdm(mapped, total=num_queries, desc="Interpolating poses", unit="pose", mininterval=0.3)
            results = list(mapped)

    failures = sum(isinstance(result, TrajectoryError) for result in results)
    if failures:
        logger.warning(f"{failures} of {num_queries} queries fell outside the trajectory")
    logger.info(f"Interpolated {num_queries - failures} poses ({time.time() - start:.3f}s)")

    return results
