"""
Plot Styling and Configuration Module
=====================================

Shared styling constants and matplotlib backend configuration for
trajectory plots.

Constants:
    PLOT_DPI: High DPI for publication-quality plots
    FIGURE_SIZE: Consistent figure dimensions
    SAMPLE_STYLE / INTERPOLATED_STYLE: Marker styles for recorded vs interpolated poses

Functions:
    setup_matplotlib_backend: Configure matplotlib backend for headless use
"""

import logging
from typing import Dict, Any

logger = logging.getLogger(__name__)

# Plot configuration constants
PLOT_DPI = 150
FIGURE_SIZE = (12, 8)

AXIS_COLORS = ('tab:red', 'tab:green', 'tab:blue', 'tab:gray')

SAMPLE_STYLE: Dict[str, Any] = {'marker': 'o', 's': 30, 'alpha': 0.9}
INTERPOLATED_STYLE: Dict[str, Any] = {'marker': 'x', 's': 24, 'alpha': 0.8}


def setup_matplotlib_backend(headless: bool) -> None:
    """
    Configure matplotlib backend.

    Uses the non-interactive 'Agg' backend when headless so plots can be
    saved on servers and in test runs. Must be called before pyplot is
    imported anywhere.

    Args:
        headless: True if no display is available
    """
    if headless:
        logger.info("Configuring matplotlib for headless use (non-interactive backend)")
        import matplotlib
        matplotlib.use('Agg')
    else:
        logger.debug("Using default matplotlib backend for interactive plotting")
