"""
Swerve module geometry.

Each module is described by its displacement from the robot's center of
rotation, expressed in the robot frame (x forward, y left, meters).
"""

from dataclasses import dataclass


# Module order used everywhere in the package
MODULE_NAMES = ("front_left", "front_right", "back_left", "back_right")


@dataclass(frozen=True)
class ModuleGeometry:
    """Displacement of one module from the rotation center (meters)."""
    rx: float
    ry: float


def rectangular_geometry(wheelbase, track_width):
    """
    Module geometries for a rectangular chassis centered on the rotation center.

    Parameters
    ----------
    wheelbase : float
        Distance between front and back modules (m)
    track_width : float
        Distance between left and right modules (m)

    Returns
    -------
    tuple of ModuleGeometry
        (front_left, front_right, back_left, back_right)
    """
    half_l = wheelbase / 2.0
    half_w = track_width / 2.0

    return (
        ModuleGeometry( half_l,  half_w),  # FL
        ModuleGeometry( half_l, -half_w),  # FR
        ModuleGeometry(-half_l,  half_w),  # BL
        ModuleGeometry(-half_l, -half_w),  # BR
    )
