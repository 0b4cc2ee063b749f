"""
Module state visualization.

Draws the chassis seen from above with one velocity arrow per module.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon

from ..models.geometry import MODULE_NAMES


def plot_module_states(geometries, states, title="Swerve Module States",
                       figsize=(9, 9), save_path=None, show=True):
    """
    Plot module positions and commanded velocity vectors.
    
    Parameters
    ----------
    geometries : sequence of ModuleGeometry
        Exactly four module displacements in (fl, fr, bl, br) order
    states : sequence of ModuleState
        Four module states in the same order
    title : str, optional
        Plot title
    figsize : tuple, optional
        Figure size (width, height)
    save_path : str, optional
        Path to save figure. If None, figure is not saved.
    show : bool, optional
        Whether to display the plot
        
    Returns
    -------
    fig, ax
        Matplotlib figure and axes
    """
    fig, ax = plt.subplots(figsize=figsize)
    
    positions = np.array([[g.rx, g.ry] for g in geometries], dtype=np.float64)
    extent = max(float(np.max(np.abs(positions))), 0.1)
    
    # Chassis outline through the corners (fl, fr, br, bl)
    outline = positions[[0, 1, 3, 2]]
    ax.add_patch(Polygon(outline, closed=True, fill=False,
                         edgecolor='black', linewidth=2.5))
    
    # Robot frame axes
    arrow_len = extent * 0.5
    ax.arrow(0, 0, arrow_len, 0, head_width=extent*0.05, head_length=extent*0.08,
             fc='red', ec='red', linewidth=2, zorder=10)
    ax.arrow(0, 0, 0, arrow_len, head_width=extent*0.05, head_length=extent*0.08,
             fc='green', ec='green', linewidth=2, zorder=10)
    ax.plot(0, 0, 'ko', markersize=8, zorder=10)
    
    # Scale arrows so the fastest module reaches one chassis half-length
    max_speed = max((s.speed for s in states), default=0.0)
    scale = extent / max_speed if max_speed > 0 else 0.0
    
    colors = ['#1f77b4', '#ff7f0e', '#2ca02c', '#d62728']
    for (x, y), state, name, color in zip(positions, states, MODULE_NAMES, colors):
        ax.plot(x, y, 'o', color=color, markersize=14,
                label=f'{name} ({state.speed:.2f} m/s, {state.angle_degrees:.0f}°)',
                zorder=5)
        
        dx = state.speed * scale * np.cos(state.angle)
        dy = state.speed * scale * np.sin(state.angle)
        ax.quiver(x, y, dx, dy, angles='xy', scale_units='xy', scale=1,
                  color=color, width=0.008, zorder=6)
    
    ax.set_xlim(-extent*2.2, extent*2.2)
    ax.set_ylim(-extent*2.2, extent*2.2)
    ax.set_aspect('equal')
    ax.grid(True, alpha=0.3)
    ax.legend(loc='upper left', fontsize=10)
    ax.set_title(title, fontsize=14, fontweight='bold')
    ax.set_xlabel('X [m]', fontsize=12)
    ax.set_ylabel('Y [m]', fontsize=12)
    
    plt.tight_layout()
    
    if save_path:
        plt.savefig(save_path, dpi=300, bbox_inches='tight')
    
    if show:
        plt.show()
    
    return fig, ax
