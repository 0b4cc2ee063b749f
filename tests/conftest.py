import matplotlib
matplotlib.use("Agg")

import pytest

from swerve_kinematics import KinematicsEngine, ModuleGeometry


@pytest.fixture
def square_geometry():
    """Corners at ±0.3 m, in (fl, fr, bl, br) order."""
    return (
        ModuleGeometry(0.3, 0.3),
        ModuleGeometry(0.3, -0.3),
        ModuleGeometry(-0.3, 0.3),
        ModuleGeometry(-0.3, -0.3),
    )


@pytest.fixture
def square_engine(square_geometry):
    return KinematicsEngine(*square_geometry)


@pytest.fixture
def skewed_geometry():
    """Asymmetric layout so every module sees a different velocity."""
    return (
        ModuleGeometry(0.42, 0.25),
        ModuleGeometry(0.31, -0.18),
        ModuleGeometry(-0.27, 0.33),
        ModuleGeometry(-0.5, -0.12),
    )
