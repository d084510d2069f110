from .geometry_utils import point_distance, rotation_angle_between

__all__ = [
    'point_distance',
    'rotation_angle_between',
]
