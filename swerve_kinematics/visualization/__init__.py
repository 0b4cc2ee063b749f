"""
Visualization utilities for swerve kinematics.
"""

from .modules import plot_module_states

__all__ = [
    'plot_module_states',
]
