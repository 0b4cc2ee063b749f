"""
Inverse kinematics for a four-module swerve drive.

Maps a robot-frame velocity command to the speed and steering angle of
each module.

Command: u = [vx, vy, omega]
- (vx, vy): robot-frame linear velocity (m/s)
- omega: angular velocity about the rotation center (rad/s, CCW positive)

Module velocities: v = M @ u, with M of shape (8, 3)
- rows (2i, 2i+1): x/y velocity of module i
- module order: front-left, front-right, back-left, back-right
"""

import numpy as np

from ..models.state import ModuleState


class KinematicsEngine:
    """
    Swerve drive inverse kinematics.
    
    A point offset by (rx, ry) from the rotation center moves with
    (vx - omega*ry, vy + omega*rx) under the robot velocity (vx, vy, omega).
    Stacking that relation for the four modules gives a constant matrix
    which is evaluated once per control cycle.
    
    The engine holds no mutable state after construction and can be
    shared between callers. To change geometry, build a new engine.
    
    Parameters
    ----------
    fl, fr, bl, br : ModuleGeometry
        Front-left, front-right, back-left and back-right module
        displacements from the rotation center (m)
    """
    
    def __init__(self, fl, fr, bl, br):
        self._geometries = (fl, fr, bl, br)
        
        # Compute kinematic matrix M
        self._compute_kinematic_matrix()
    
    def _compute_kinematic_matrix(self):
        """Compute the (8, 3) kinematic matrix M from module geometry."""
        # Build M matrix: [x_fl, y_fl, ..., x_br, y_br]^T = M * [vx, vy, omega]^T
        # Row 2i:   [1, 0, -ry_i]
        # Row 2i+1: [0, 1,  rx_i]
        M = np.zeros((8, 3))
        for i, module in enumerate(self._geometries):
            M[2*i, 0] = 1.0
            M[2*i, 2] = -module.ry
            M[2*i + 1, 1] = 1.0
            M[2*i + 1, 2] = module.rx
        
        M.setflags(write=False)
        self._M = M
    
    @property
    def matrix(self):
        """Read-only (8, 3) kinematic matrix."""
        return self._M
    
    @property
    def geometries(self):
        """Module geometries in (fl, fr, bl, br) order."""
        return self._geometries
    
    def module_velocities(self, vx, vy, omega):
        """
        Compute the planar velocity of every module contact point.
        
        Parameters
        ----------
        vx, vy : float
            Robot-frame linear velocity (m/s)
        omega : float
            Angular velocity (rad/s)
            
        Returns
        -------
        np.ndarray
            Array (4, 2): [x, y] velocity per module (m/s)
        """
        u = np.array([vx, vy, omega], dtype=np.float64)
        components = self._M @ u
        
        return components.reshape(4, 2)
    
    def transform(self, vx, vy, omega):
        """
        Compute module states from the desired robot velocity.
        
        No clamping or validation is applied; non-finite commands
        propagate into the returned states.
        
        Parameters
        ----------
        vx, vy : float
            Robot-frame linear velocity (m/s)
        omega : float
            Angular velocity (rad/s)
            
        Returns
        -------
        list of ModuleState
            States in (fl, fr, bl, br) order
        """
        components = self.module_velocities(vx, vy, omega)
        x, y = components[:, 0], components[:, 1]
        
        speeds = np.sqrt(x**2 + y**2)
        angles = np.arctan2(y, x)
        
        return [ModuleState(float(s), float(a)) for s, a in zip(speeds, angles)]
    
    def __repr__(self):
        fl, fr, bl, br = self._geometries
        return f"KinematicsEngine(fl={fl!r}, fr={fr!r}, bl={bl!r}, br={br!r})"
