import numpy as np
import pytest

from geomatsim.principal import principal_stresses, principal_to_stress

SAMPLES = [
    [1.0, 2.0, 3.0, 0.5, -0.25, 0.75],
    [-10.0, -4.0, -6.0, 2.0, 1.0, -3.0],
    [5.0, 5.0, 5.0, 0.0, 0.0, 0.0],
    [0.0, 0.0, 0.0, 1.0, 1.0, 1.0],
]


def _matrix(sig):
    s0, s1, s2, s3, s4, s5 = sig
    return np.array([[s0, s3, s5], [s3, s1, s4], [s5, s4, s2]], dtype=float)


@pytest.mark.parametrize("sig", SAMPLES)
def test_decomposition_invariants(sig):
    values, dirs = principal_stresses(sig)
    a = _matrix(sig)
    assert all(values[k] <= values[k + 1] for k in range(2))
    assert values.sum() == pytest.approx(sig[0] + sig[1] + sig[2])
    np.testing.assert_allclose(dirs @ dirs.T, np.eye(3), atol=1e-12)
    for k in range(3):
        np.testing.assert_allclose(a @ dirs[k], values[k] * dirs[k], atol=1e-10)


@pytest.mark.parametrize("sig", SAMPLES)
def test_round_trip(sig):
    values, dirs = principal_stresses(sig)
    np.testing.assert_allclose(principal_to_stress(dirs, values), sig, atol=1e-10)


def test_round_trip_accepts_flat_directions():
    sig = SAMPLES[0]
    values, dirs = principal_stresses(sig)
    np.testing.assert_allclose(
        principal_to_stress(dirs.ravel().tolist(), values), sig, atol=1e-10
    )


def test_diagonal_values_sorted():
    values, _ = principal_stresses([3.0, -1.0, 2.0, 0.0, 0.0, 0.0])
    assert values.tolist() == pytest.approx([-1.0, 2.0, 3.0])


def test_identity_directions():
    result = principal_to_stress(np.eye(3), [4.0, -2.0, 7.0])
    assert result.tolist() == [4.0, -2.0, 7.0, 0.0, 0.0, 0.0]


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        principal_stresses([1.0, 2.0])


def test_singular_directions_rejected():
    with pytest.raises(ValueError):
        principal_to_stress(np.zeros((3, 3)), [1.0, 2.0, 3.0])


def test_wrong_principal_count_rejected():
    with pytest.raises(ValueError):
        principal_to_stress(np.eye(3), [1.0, 2.0])