"""
Command sweeps over the swerve kinematics.
"""

from .sweep import sweep_commands, summarize_sweep, print_sweep_summary

__all__ = [
    'sweep_commands',
    'summarize_sweep',
    'print_sweep_summary',
]
