"""
Common utilities for swerve kinematics.

Includes angle normalization and conversion helpers.
"""

from .angles import normalize_angle, angle_diff, rad_to_deg

__all__ = [
    'normalize_angle',
    'angle_diff',
    'rad_to_deg',
]
