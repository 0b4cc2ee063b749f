"""
Heading helpers for swerve module angles.

Module headings come out of atan2, so they live on (-pi, pi]. Comparing
two headings has to go through the wrap at ±pi.
"""

import numpy as np


def normalize_angle(angle):
    """
    Wrap heading(s) onto [-pi, pi] via atan2(sin, cos).

    Parameters
    ----------
    angle : float or np.ndarray
        Heading(s) in radians, any range

    Returns
    -------
    float or np.ndarray
        Wrapped heading(s)
    """
    return np.arctan2(np.sin(angle), np.cos(angle))


def angle_diff(angle1, angle2):
    """
    Signed shortest rotation from heading `angle2` to heading `angle1`.

    Parameters
    ----------
    angle1, angle2 : float or np.ndarray
        Headings in radians

    Returns
    -------
    float or np.ndarray
        Rotation in [-pi, pi]; modules at pi and -pi give 0
    """
    return normalize_angle(np.asarray(angle1) - np.asarray(angle2))


def rad_to_deg(angle):
    """Convert radians to degrees."""
    return np.rad2deg(angle)
