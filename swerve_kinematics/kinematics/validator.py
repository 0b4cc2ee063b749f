"""
Kinematic validation tools for swerve drive robots.

Provides sanity checks on module geometry before the engine is put in a
control loop.
"""

import numpy as np

from ..common.angles import angle_diff
from ..models.geometry import MODULE_NAMES


class KinematicValidator:
    """
    Tool to validate swerve kinematics.
    
    Problems are reported in the returned results, never raised; the
    engine itself accepts any geometry.
    """
    
    @staticmethod
    def _print_states(states):
        for name, state in zip(MODULE_NAMES, states):
            print(f"   {name:<12} speed = {state.speed:+.4f} m/s, "
                  f"angle = {state.angle:+.4f} rad ({state.angle_degrees:+.1f}°)")
    
    @staticmethod
    def test_kinematic_consistency(engine, verbose=True):
        """
        Test kinematic matrix for physical consistency.
        
        Tests performed:
        1. Pure X translation
        2. Pure Y translation
        3. Pure rotation (symmetric chassis gives equal module speeds)
           and headings spaced by multiples of 90 degrees
        4. Matrix rank = 3 (full controllability)
        5. Reconstructability: M_pinv @ M ≈ I
        
        Parameters
        ----------
        engine : KinematicsEngine
            Engine to test
        verbose : bool
            Whether to print detailed results
        
        Returns
        -------
        results : dict
            Dictionary with test results
        """
        if verbose:
            print("=" * 70)
            print("SWERVE KINEMATIC CONSISTENCY TESTS")
            print("=" * 70)
        
        results = {}
        
        # Test 1: Forward motion (X direction)
        forward = engine.transform(1.0, 0.0, 0.0)
        if verbose:
            print(f"\n1. Forward motion (vx = 1.0 m/s, X-direction):")
            KinematicValidator._print_states(forward)
        results['forward'] = forward
        
        # Test 2: Sideways motion (Y direction)
        sideways = engine.transform(0.0, 1.0, 0.0)
        if verbose:
            print(f"\n2. Sideways motion (vy = 1.0 m/s, Y-direction):")
            KinematicValidator._print_states(sideways)
        results['sideways'] = sideways
        
        # Test 3: Pure rotation
        rotation = engine.transform(0.0, 0.0, 1.0)
        speeds = np.array([s.speed for s in rotation])
        mag_std = float(np.std(speeds))
        symmetric = mag_std < 0.01
        
        # Headings relative to the front-left module, in quarter turns
        headings = np.array([s.angle for s in rotation])
        quarter_turns = angle_diff(headings, headings[0]) / (np.pi / 2)
        quarter_aligned = bool(np.allclose(quarter_turns, np.round(quarter_turns), atol=1e-6))
        if verbose:
            print(f"\n3. Pure rotation (omega = 1.0 rad/s, CCW):")
            KinematicValidator._print_states(rotation)
            print(f"   Average speed: {np.mean(speeds):.4f} m/s")
            print(f"   Std of speeds: {mag_std:.6f}")
            if symmetric:
                print(f"   ✓ All modules travel equally (symmetric)")
            else:
                print(f"   ⚠ Asymmetric module speeds (check geometry)")
            if quarter_aligned:
                print(f"   ✓ Headings differ by multiples of 90°")
            else:
                print(f"   ⚠ Headings not spaced by 90° (non-square layout)")
        results['rotation'] = rotation
        results['rotation_symmetric'] = symmetric
        results['rotation_quarter_turns'] = quarter_aligned
        
        # Test 4: Matrix rank
        M = engine.matrix
        rank = int(np.linalg.matrix_rank(M))
        if verbose:
            print(f"\n4. Matrix rank: {rank}/3")
            if rank == 3:
                print(f"   ✓ Full rank → Robot is fully controllable")
            else:
                print(f"   ✗ Rank deficient → Rotation is not observable at the modules")
        results['rank'] = rank
        
        # Test 5: Reconstructability
        M_pinv = np.linalg.pinv(M)
        reconstruction_product = M_pinv @ M
        reconstruction_error = float(np.linalg.norm(reconstruction_product - np.eye(3), 'fro'))
        if verbose:
            print(f"\n5. Reconstruction test (M_pinv @ M ≈ I):")
            print(f"   Frobenius norm error: {reconstruction_error:.2e}")
            if reconstruction_error < 1e-10:
                print(f"   ✓ Excellent reconstructability")
            elif reconstruction_error < 1e-6:
                print(f"   ✓ Good reconstructability")
            else:
                print(f"   ⚠ Poor reconstructability (degenerate geometry?)")
        results['reconstruction_error'] = reconstruction_error
        
        # Overall assessment
        all_pass = (rank == 3 and reconstruction_error < 1e-6)
        if verbose:
            print("\n" + "=" * 70)
            if all_pass:
                print("✓ ALL TESTS PASSED - Kinematics are correct")
            else:
                print("⚠ ISSUES DETECTED - Review module configuration")
            print("=" * 70 + "\n")
        
        results['all_pass'] = all_pass
        return results
