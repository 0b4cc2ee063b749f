"""
Command Sweep Example

Sweeps the angular rate at a fixed translation command and records every
module's speed and steering angle. The table is written to CSV and the
curves are plotted against omega.
"""

import numpy as np
import matplotlib.pyplot as plt
import sys
import os
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from swerve_kinematics import KinematicsEngine, MODULE_NAMES, rectangular_geometry
from swerve_kinematics.analysis import sweep_commands, summarize_sweep, print_sweep_summary

# ============================================================================
# CONFIGURATION
# ============================================================================
WHEELBASE = 0.6         # m
TRACK_WIDTH = 0.5       # m
VX = 1.0                # fixed forward velocity (m/s)
VY = 0.0                # fixed lateral velocity (m/s)
OMEGA_RANGE = (-3.0, 3.0)   # rad/s
N_STEPS = 121
MAX_MODULE_SPEED = 1.5  # module speed limit (m/s)

RESULTS_PATH = Path(__file__).parent.parent / 'results' / 'command_sweep'
# ============================================================================


def run_command_sweep():
    """Run omega sweep and save table and figure."""
    
    print("\n" + "="*60)
    print("Command Sweep - Swerve Drive")
    print("="*60 + "\n")
    
    engine = KinematicsEngine(*rectangular_geometry(WHEELBASE, TRACK_WIDTH))
    
    omegas = np.linspace(OMEGA_RANGE[0], OMEGA_RANGE[1], N_STEPS)
    commands = np.column_stack([np.full(N_STEPS, VX), np.full(N_STEPS, VY), omegas])
    
    df = sweep_commands(engine, commands)
    summary = summarize_sweep(df, max_module_speed=MAX_MODULE_SPEED)
    print_sweep_summary(summary, title=f"Omega Sweep (vx={VX}, vy={VY})")
    
    RESULTS_PATH.mkdir(parents=True, exist_ok=True)
    csv_path = RESULTS_PATH / 'omega_sweep.csv'
    df.to_csv(csv_path, index=False)
    print(f"  Saved: {csv_path}")
    
    fig, axes = plt.subplots(2, 1, figsize=(10, 8), sharex=True)
    for name in MODULE_NAMES:
        axes[0].plot(df['omega'], df[f'{name}_speed'], linewidth=2, label=name)
        axes[1].plot(df['omega'], np.rad2deg(df[f'{name}_angle']), linewidth=2, label=name)
    
    axes[0].axhline(MAX_MODULE_SPEED, color='k', linestyle='--', alpha=0.6, label='limit')
    axes[0].set_ylabel('Speed (m/s)', fontsize=12)
    axes[1].set_ylabel('Angle (deg)', fontsize=12)
    axes[1].set_xlabel('Omega (rad/s)', fontsize=12)
    for ax in axes:
        ax.grid(True, alpha=0.3)
        ax.legend(fontsize=10)
    fig.suptitle('Module States vs Angular Rate', fontsize=14)
    plt.tight_layout()
    
    fig_path = RESULTS_PATH / 'omega_sweep.png'
    plt.savefig(fig_path, dpi=300, bbox_inches='tight')
    plt.close(fig)
    print(f"  Saved: {fig_path}")


if __name__ == "__main__":
    run_command_sweep()
