"""
Kinematics module for swerve drive robots.
"""

from .swerve import KinematicsEngine
from .validator import KinematicValidator

__all__ = ['KinematicsEngine', 'KinematicValidator']
