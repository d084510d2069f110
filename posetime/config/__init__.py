"""
Configuration module for posetime.

YAML run configurations are parsed into dataclass schemas by
PoseTimeConfigManager.
"""

from .posetime_config_schemas import (
    InterpolationSettings,
    TrajectorySource,
    QuerySettings,
    OutputSettings,
    PoseTimeConfig,
)
from .posetime_config_manager import PoseTimeConfigManager

__all__ = [
    'InterpolationSettings',
    'TrajectorySource',
    'QuerySettings',
    'OutputSettings',
    'PoseTimeConfig',
    'PoseTimeConfigManager',
]
