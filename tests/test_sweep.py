import numpy as np
import pytest

from swerve_kinematics import MODULE_NAMES
from swerve_kinematics.analysis import sweep_commands, summarize_sweep, print_sweep_summary


def test_sweep_table_layout(square_engine):
    commands = [[1.0, 0.0, 0.0], [0.0, 0.0, 1.0], [0.5, 0.5, -1.0]]
    df = sweep_commands(square_engine, commands)
    
    assert len(df) == 3
    assert list(df.columns[:3]) == ['vx', 'vy', 'omega']
    for name in MODULE_NAMES:
        assert f'{name}_speed' in df.columns
        assert f'{name}_angle' in df.columns


def test_sweep_matches_transform(square_engine):
    df = sweep_commands(square_engine, [[0.0, 0.0, 1.0]])
    states = square_engine.transform(0.0, 0.0, 1.0)
    for name, state in zip(MODULE_NAMES, states):
        assert df.loc[0, f'{name}_speed'] == pytest.approx(state.speed)
        assert df.loc[0, f'{name}_angle'] == pytest.approx(state.angle)


def test_summary_counts_saturation(square_engine):
    commands = np.column_stack([np.ones(5), np.zeros(5), np.linspace(0.0, 4.0, 5)])
    df = sweep_commands(square_engine, commands)
    summary = summarize_sweep(df, max_module_speed=1.5)
    
    # Peak at omega=4: x = 1 - 4*(-0.3) on the right side -> (2.2, 1.2)
    assert summary['peak_speed_total'] == pytest.approx(np.hypot(2.2, 1.2))
    assert summary['peak_speed']['front_right'] == pytest.approx(np.hypot(2.2, 1.2))
    assert summary['n_saturated'] == 3


def test_summary_without_limit(square_engine):
    summary = summarize_sweep(sweep_commands(square_engine, [[1.0, 0.0, 0.0]]))
    assert 'n_saturated' not in summary
    assert summary['peak_speed_total'] == pytest.approx(1.0)


def test_print_summary(square_engine, capsys):
    summary = summarize_sweep(sweep_commands(square_engine, [[1.0, 0.0, 0.0]]), max_module_speed=2.0)
    print_sweep_summary(summary, title="Unit")
    out = capsys.readouterr().out
    assert "Unit Summary" in out
    assert "Saturating commands    : 0" in out
