"""
Swerve Kinematics Library

Inverse kinematics for four-module swerve drive robots.
Maps a robot-frame velocity command (vx, vy, omega) to the speed and
steering angle each module has to track.

Author: Swerve Kinematics Team
License: MIT
"""

__version__ = "1.0.0"

from .models.geometry import ModuleGeometry, MODULE_NAMES, rectangular_geometry
from .models.state import ModuleState, states_to_array
from .kinematics.swerve import KinematicsEngine
from .kinematics.validator import KinematicValidator

__all__ = [
    'ModuleGeometry',
    'MODULE_NAMES',
    'rectangular_geometry',
    'ModuleState',
    'states_to_array',
    'KinematicsEngine',
    'KinematicValidator',
]
