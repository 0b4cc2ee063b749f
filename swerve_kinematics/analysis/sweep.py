"""
Tabulate module states over a set of velocity commands.

Useful for checking which commands drive a module past its speed limit
before deploying a new geometry.
"""

import numpy as np
import pandas as pd

from ..models.geometry import MODULE_NAMES


def sweep_commands(engine, commands):
    """
    Evaluate the engine for every command.
    
    Parameters
    ----------
    engine : KinematicsEngine
        Engine to evaluate
    commands : array_like
        Commands (N, 3), each row [vx, vy, omega]
        
    Returns
    -------
    pd.DataFrame
        One row per command with columns vx, vy, omega and
        `<module>_speed`, `<module>_angle` for each module
    """
    commands = np.asarray(commands, dtype=np.float64).reshape(-1, 3)
    
    rows = []
    for vx, vy, omega in commands:
        row = {'vx': vx, 'vy': vy, 'omega': omega}
        for name, state in zip(MODULE_NAMES, engine.transform(vx, vy, omega)):
            row[f'{name}_speed'] = state.speed
            row[f'{name}_angle'] = state.angle
        rows.append(row)
    
    columns = ['vx', 'vy', 'omega']
    for name in MODULE_NAMES:
        columns += [f'{name}_speed', f'{name}_angle']
    
    return pd.DataFrame(rows, columns=columns)


def summarize_sweep(df, max_module_speed=None):
    """
    Summarize a sweep table.
    
    Parameters
    ----------
    df : pd.DataFrame
        Table from sweep_commands
    max_module_speed : float, optional
        Speed limit of a module (m/s). If given, commands exceeding it
        on any module are counted.
        
    Returns
    -------
    dict
        Peak speed per module, overall peak speed and, when a limit is
        given, the number of saturating commands
    """
    speed_cols = [f'{name}_speed' for name in MODULE_NAMES]
    
    summary = {}
    summary['peak_speed'] = {name: float(df[col].max()) if len(df) else 0.0
                             for name, col in zip(MODULE_NAMES, speed_cols)}
    summary['peak_speed_total'] = max(summary['peak_speed'].values())
    
    if max_module_speed is not None:
        saturated = (df[speed_cols] > max_module_speed).any(axis=1)
        summary['n_saturated'] = int(saturated.sum())
    
    return summary


def print_sweep_summary(summary, title="Command Sweep"):
    """
    Print sweep summary in a formatted way.
    
    Parameters
    ----------
    summary : dict
        Dictionary from summarize_sweep
    title : str, optional
        Heading for display
    """
    print(f"\n{title} Summary")
    print("=" * 50)
    
    for name, peak in summary['peak_speed'].items():
        print(f"Peak speed {name:<12}: {peak:.4f} m/s")
    print(f"Peak speed overall     : {summary['peak_speed_total']:.4f} m/s")
    
    if 'n_saturated' in summary:
        print(f"Saturating commands    : {summary['n_saturated']}")
    
    print("=" * 50)
