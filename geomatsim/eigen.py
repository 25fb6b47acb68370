"""Jacobi eigen-solver for a symmetric 3x3 stress tensor in Voigt form."""

from __future__ import annotations

import math
import warnings

import numpy as np

_NEQ = 3
_SIGNIFICANT_FIGURES = 3
_MAX_ITERATIONS = 50


def _tensor(sig) -> list[list[float]]:
    values = [float(s) for s in sig]
    if len(values) != 6:
        raise ValueError("stress vector must have 6 components")
    s0, s1, s2, s3, s4, s5 = values
    return [[s0, s3, s5], [s3, s1, s4], [s5, s4, s2]]


def jacobi(sig) -> tuple[np.ndarray, np.ndarray]:
    """Eigenvalues and eigenvectors of the tensor given as
    ``(sxx, syy, szz, sxy, syz, sxz)``.

    Returns ``(values, vectors)``: values in ascending order and a 3x3
    array whose columns are the matching eigenvectors.
    """
    a = _tensor(sig)
    n = _NEQ
    ev = [a[i][i] for i in range(n)]
    v = [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]
    tol = 0.1**_SIGNIFICANT_FIGURES
    total = sum(abs(x) for row in a for x in row)

    if total <= 0.0:
        return np.array(ev), np.array(v)

    def rotate_row(k: int, i: int, j: int, co: float, si: float) -> None:
        tt = v[k][i]
        v[k][i] = co * tt + si * v[k][j]
        v[k][j] = -si * tt + co * v[k][j]

    iterations = 0
    while True:
        ssum = 0.0
        for j in range(1, n):
            for i in range(j - 1):
                if abs(a[i][j]) / total <= tol:
                    continue
                ssum += abs(a[i][j])
                angle = math.atan2(a[i][j] * 2.0, ev[i] - ev[j]) / 2.0
                si = math.sin(angle)
                co = math.cos(angle)

                for k in range(i):
                    tt = a[k][i]
                    a[k][i] = co * tt + si * a[k][j]
                    a[k][j] = -si * tt + co * a[k][j]
                    rotate_row(k, i, j, co, si)

                tt = ev[i]
                ev[i] = co * tt + si * a[i][j]
                aij = -si * tt + co * a[i][j]
                rotate_row(i, i, j, co, si)

                for k in range(i + 1, j):
                    tt = a[i][k]
                    a[i][k] = co * tt + si * a[k][j]
                    a[k][j] = -si * tt + co * a[k][j]
                    rotate_row(k, i, j, co, si)

                tt = a[i][j]
                aji = co * tt + si * ev[j]
                ev[j] = -si * tt + co * ev[j]
                rotate_row(j, i, j, co, si)

                for k in range(j + 1, n):
                    tt = a[i][k]
                    a[i][k] = co * tt + si * a[j][k]
                    a[j][k] = -si * tt + co * a[j][k]
                    rotate_row(k, i, j, co, si)

                ev[i] = co * ev[i] + si * aji
                ev[j] = -si * aij + co * ev[j]
                a[i][j] = 0.0

        iterations += 1
        if iterations > _MAX_ITERATIONS:
            warnings.warn("jacobi: too many iterations", RuntimeWarning, stacklevel=2)
        if not abs(ssum) / total > tol:
            break

    order = sorted(range(n), key=lambda k: ev[k])
    values = np.array([ev[k] for k in order])
    vectors = np.array(v)[:, order]
    return values, vectors