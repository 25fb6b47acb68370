"""Conversion between Voigt stress vectors and principal stresses."""

from __future__ import annotations

import numpy as np


class PrincipalStressError(ArithmeticError):
    """Raised when the eigenvalue computation does not converge."""


def _as_voigt(sig) -> np.ndarray:
    vec = np.asarray(sig, dtype=float)
    if vec.shape != (6,):
        raise ValueError("stress vector must have 6 components")
    return vec


def principal_stresses(sig) -> tuple[np.ndarray, np.ndarray]:
    """Principal stresses of ``(sxx, syy, szz, sxy, syz, sxz)``.

    Returns ``(values, directions)``: values in ascending order and a 3x3
    array whose rows are the matching unit principal directions.
    """
    s0, s1, s2, s3, s4, s5 = _as_voigt(sig)
    tensor = np.array([[s0, s3, s5], [s3, s1, s4], [s5, s4, s2]])
    try:
        values, vectors = np.linalg.eigh(tensor)
    except np.linalg.LinAlgError as exc:
        raise PrincipalStressError("the algorithm failed to compute eigenvalues") from exc
    return values, vectors.T.copy()


def principal_to_stress(directions, principal) -> np.ndarray:
    """Rebuild the Voigt stress vector from principal values and directions.

    ``directions`` holds the principal directions as rows (3x3 or 9 values).
    """
    dirs = np.asarray(directions, dtype=float).reshape(3, 3)
    ps = np.asarray(principal, dtype=float)
    if ps.shape != (3,):
        raise ValueError("three principal values are required")
    try:
        inverse = np.linalg.inv(dirs)
    except np.linalg.LinAlgError as exc:
        raise ValueError("direction matrix is singular") from exc
    tensor = inverse @ (np.diag(ps) @ dirs)
    return np.array(
        [
            tensor[0, 0],
            tensor[1, 1],
            tensor[2, 2],
            tensor[0, 1],
            tensor[1, 2],
            tensor[0, 2],
        ]
    )