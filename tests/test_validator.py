import numpy as np
import pytest

from swerve_kinematics import KinematicsEngine, KinematicValidator, ModuleGeometry, rectangular_geometry


def test_square_chassis_passes(square_engine):
    results = KinematicValidator.test_kinematic_consistency(square_engine, verbose=False)
    
    assert results['rank'] == 3
    assert results['reconstruction_error'] < 1e-10
    assert results['rotation_symmetric']
    assert results['rotation_quarter_turns']
    assert results['all_pass']
    assert [s.speed for s in results['forward']] == pytest.approx([1.0] * 4)
    assert [s.angle for s in results['sideways']] == pytest.approx([np.pi / 2] * 4)


def test_asymmetric_chassis_reported(skewed_geometry):
    engine = KinematicsEngine(*skewed_geometry)
    results = KinematicValidator.test_kinematic_consistency(engine, verbose=False)
    
    assert not results['rotation_symmetric']
    assert not results['rotation_quarter_turns']
    assert results['all_pass']


def test_degenerate_geometry_reported_not_raised(capsys):
    engine = KinematicsEngine(*[ModuleGeometry(0.0, 0.0)] * 4)
    results = KinematicValidator.test_kinematic_consistency(engine, verbose=True)
    
    assert results['rank'] == 2
    assert results['reconstruction_error'] == pytest.approx(1.0)
    assert not results['all_pass']
    
    out = capsys.readouterr().out
    assert "Rank deficient" in out
    assert "ISSUES DETECTED" in out


def test_verbose_report(square_engine, capsys):
    KinematicValidator.test_kinematic_consistency(square_engine, verbose=True)
    out = capsys.readouterr().out
    assert "SWERVE KINEMATIC CONSISTENCY TESTS" in out
    assert "front_left" in out
    assert "ALL TESTS PASSED" in out


def test_quiet_mode_prints_nothing(square_engine, capsys):
    KinematicValidator.test_kinematic_consistency(square_engine, verbose=False)
    assert capsys.readouterr().out == ""


def test_rectangular_chassis_headings_not_quarter_turns(capsys):
    engine = KinematicsEngine(*rectangular_geometry(0.6, 0.5))
    results = KinematicValidator.test_kinematic_consistency(engine, verbose=True)
    
    # Same distance to every corner, but the corner diagonals are not perpendicular
    assert results['rotation_symmetric']
    assert not results['rotation_quarter_turns']
    assert results['all_pass']
    assert "Headings not spaced by 90°" in capsys.readouterr().out


def test_square_chassis_reports_quarter_turns(square_engine, capsys):
    KinematicValidator.test_kinematic_consistency(square_engine, verbose=True)
    assert "Headings differ by multiples of 90°" in capsys.readouterr().out
