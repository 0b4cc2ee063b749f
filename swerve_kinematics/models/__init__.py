"""
Value types describing swerve modules.

Module geometry is fixed at configuration time; module states are
produced fresh on every kinematics evaluation.
"""

from .geometry import ModuleGeometry, MODULE_NAMES, rectangular_geometry
from .state import ModuleState, states_to_array

__all__ = [
    'ModuleGeometry',
    'MODULE_NAMES',
    'rectangular_geometry',
    'ModuleState',
    'states_to_array',
]
