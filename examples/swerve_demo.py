"""
Swerve Drive Kinematics Example

This example demonstrates how to build a KinematicsEngine for a
rectangular four-module swerve chassis, validate its geometry, and
compute module states for a few velocity commands.

Command: u = [vx, vy, omega]
Output: one (speed, angle) state per module, in fl, fr, bl, br order
"""

import matplotlib.pyplot as plt
import sys
import os
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from swerve_kinematics import KinematicsEngine, KinematicValidator, MODULE_NAMES, rectangular_geometry
from swerve_kinematics.visualization import plot_module_states

# ============================================================================
# CONFIGURATION
# ============================================================================
WHEELBASE = 0.6     # front-to-back module distance (m)
TRACK_WIDTH = 0.6   # left-to-right module distance (m)

# (label, vx [m/s], vy [m/s], omega [rad/s])
COMMANDS = [
    ('forward', 1.0, 0.0, 0.0),
    ('strafe_left', 0.0, 1.0, 0.0),
    ('spin_ccw', 0.0, 0.0, 1.0),
    ('arc', 1.0, 0.5, 0.8),
]

# Output results path
RESULTS_PATH = Path(__file__).parent.parent / 'results' / 'swerve_demo'
# ============================================================================


def run_swerve_demo():
    """Run swerve kinematics example."""
    
    print("\n" + "="*60)
    print("Swerve Drive Kinematics Example")
    print("="*60 + "\n")
    
    geometries = rectangular_geometry(WHEELBASE, TRACK_WIDTH)
    engine = KinematicsEngine(*geometries)
    print(engine)
    
    KinematicValidator.test_kinematic_consistency(engine, verbose=True)
    
    RESULTS_PATH.mkdir(parents=True, exist_ok=True)
    
    for label, vx, vy, omega in COMMANDS:
        states = engine.transform(vx, vy, omega)
        
        print(f"\nCommand '{label}': vx={vx:+.2f} m/s, vy={vy:+.2f} m/s, omega={omega:+.2f} rad/s")
        for name, state in zip(MODULE_NAMES, states):
            print(f"  {name:<12} {state}")
        
        fig_path = RESULTS_PATH / f'modules_{label}.png'
        fig, _ = plot_module_states(geometries, states,
                                    title=f"Module States: {label}",
                                    save_path=fig_path, show=False)
        plt.close(fig)
        print(f"  Saved: {fig_path}")
    
    print("\n" + "="*60)
    print("Swerve Example Complete!")
    print(f"Results saved to '{RESULTS_PATH}' directory")
    print("="*60)


if __name__ == "__main__":
    run_swerve_demo()
