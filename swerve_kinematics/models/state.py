"""
Swerve module state: the (speed, angle) pair a module controller tracks.
"""

from dataclasses import dataclass

import numpy as np

from ..common.angles import rad_to_deg


@dataclass(frozen=True)
class ModuleState:
    """
    Target state for a single swerve module.

    Parameters
    ----------
    speed : float
        Wheel ground speed (m/s), non-negative
    angle : float
        Steering angle (rad) in (-pi, pi], measured from the robot x-axis
    """
    speed: float
    angle: float

    @property
    def angle_degrees(self):
        return float(rad_to_deg(self.angle))

    def __str__(self):
        return (f"Velocity: {self.speed:.8f}m/s, "
                f"Angle (rads): {self.angle:.8f}rads, "
                f"Angle (degs): {self.angle_degrees:.8f}degs")


def states_to_array(states):
    """
    Stack module states into an array.

    Parameters
    ----------
    states : sequence of ModuleState

    Returns
    -------
    np.ndarray
        Array (N, 2) with columns [speed, angle]
    """
    return np.array([[s.speed, s.angle] for s in states], dtype=np.float64).reshape(-1, 2)
