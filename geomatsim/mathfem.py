"""Small numerical helpers: sign, clamping, cubic roots and 1-D minimisation."""

from __future__ import annotations

import math
from typing import Callable

CUBIC_ZERO = 1.0e-100
GOLDEN_C = 0.38196601
GOLDEN_R = 1.0 - GOLDEN_C
BRENT_MAXITER = 100


def sgn(x: float) -> float:
    """Return -1.0 for negative values and 1.0 otherwise (zero included)."""
    negative = x < 0.0
    return 1.0 - 2.0 * float(negative)


def cbrt(x: float) -> float:
    """Real cubic root of ``x``."""
    return sgn(x) * abs(x) ** (1.0 / 3.0)


def clamp(a: float, lower: float, upper: float) -> float:
    """Clamp ``a`` into the interval [lower, upper]."""
    if a <= lower:
        return lower
    if a >= upper:
        return upper
    return a


def macbra(x: float) -> float:
    """Positive part of ``x``."""
    return x if x >= 0 else 0


def negbra(x: float) -> float:
    """Negative part of ``x``."""
    return x if x <= 0 else 0


def nearest(x: float) -> int:
    """Nearest integer, halves rounded up."""
    return math.floor(x + 0.5)


def _quadratic(b: float, c: float, d: float, zero: float, strict: bool) -> tuple[float, ...]:
    disc = c * c - 4.0 * b * d
    if disc < 0.0:
        return ()
    if abs(c) < zero:
        ratio = -d / b
        if ratio > 0.0 or (not strict and ratio == 0.0):
            root = math.sqrt(ratio)
            return (root, -root)
        return ()
    half = -(c + sgn(c) * math.sqrt(disc)) / 2.0
    return (half / b, d / half)


def cubic(a: float, b: float, c: float, d: float) -> tuple[float, ...]:
    """Real roots of ``a*x**3 + b*x**2 + c*x + d = 0``.

    Degenerate leading coefficients fall back to the quadratic or linear
    equation. The returned tuple holds only the roots that were resolved.
    """
    norm = 1e-6 * (abs(a) + abs(b) + abs(c)) + CUBIC_ZERO

    if abs(a) <= norm:
        if abs(b) <= norm:
            if abs(c) <= norm:
                return (0.0,) if abs(d) <= norm else ()
            return (-d / c,)
        return _quadratic(b, c, d, norm, strict=True)

    lead = a
    a = b / (lead * 3.0)
    b = c / lead
    c = d / lead
    p = b - a * a * 3.0
    q = 2.0 * a * a * a - a * b + c
    disc = q * q / 4.0 + p * p * p / 27.0

    if abs(disc) < CUBIC_ZERO:
        if abs(p * q) < CUBIC_ZERO:
            root = 0.0 - a
            return (root, root, root)
        r2 = cbrt(q / 2.0) - a
        r1 = -2.0 * r2 - a
        return (r1, r2)

    if disc > 0.0:
        u = -q / 2.0 + math.sqrt(disc)
        v = -q - u
        return (cbrt(u) + cbrt(v) - a,)

    p = math.sqrt(abs(p) / 3.0)
    ratio = -q / (2.0 * p * p * p)
    if abs(ratio) > 1.0:
        ratio = sgn(ratio)
    phi = math.acos(ratio) / 3.0
    cp = math.cos(phi)
    sp = math.sqrt(3.0) * math.sin(phi)
    return (2 * p * cp - a, -p * (cp + sp) - a, -p * (cp - sp) - a)


def cubic3r(a: float, b: float, c: float, d: float) -> tuple[float, ...]:
    """Real roots of a cubic assumed to have three real roots.

    Used for principal stresses, where rounding may otherwise lose roots.
    Degenerate leading coefficients fall back to lower-order equations.
    """
    if abs(a) < CUBIC_ZERO:
        if abs(b) < CUBIC_ZERO:
            if abs(c) < CUBIC_ZERO:
                return ()
            return (-d / c,)
        return _quadratic(b, c, d, CUBIC_ZERO, strict=False)

    lead = a
    a = b / lead
    b = c / lead
    c = d / lead

    q = (a * a - 3.0 * b) / 9.0
    r = (2.0 * a * a * a - 9.0 * a * b + 27.0 * c) / 54.0

    q3 = q * q * q
    if q3 < 0.0:
        ratio = math.nan
    elif q3 == 0.0:
        ratio = math.copysign(math.inf, r) if r != 0.0 else math.nan
    else:
        ratio = r / math.sqrt(q3)
    if abs(ratio) > 1.0:
        ratio = sgn(ratio)

    phi = math.acos(ratio) if not math.isnan(ratio) else math.nan
    p = math.sqrt(q) if q >= 0.0 else math.nan
    third = a / 3.0
    return (
        -2.0 * p * math.cos(phi / 3.0) - third,
        -2.0 * p * math.cos((phi + 2.0 * math.pi) / 3.0) - third,
        -2.0 * p * math.cos((phi - 2.0 * math.pi) / 3.0) - third,
    )


def iperm(val: int, rank: int) -> int:
    """Cyclic successor of ``val`` in 1..rank (rank 3: 1,2,3 -> 2,3,1)."""
    return 1 if val + 1 > rank else val + 1


def gss(
    ax: float, bx: float, cx: float, f: Callable[[float], float], tol: float
) -> tuple[float, float]:
    """Golden section search for a minimum bracketed by ax < bx < cx.

    Returns ``(xmin, fmin)``.
    """
    x0 = ax
    x3 = cx
    if abs(cx - bx) > abs(bx - ax):
        x1 = bx
        x2 = bx + GOLDEN_C * (cx - bx)
    else:
        x2 = bx
        x1 = bx - GOLDEN_C * (bx - ax)

    f1 = f(x1)
    f2 = f(x2)

    while abs(x3 - x0) > tol * (abs(x1) + abs(x2)):
        if f2 < f1:
            x0, x1 = x1, x2
            x2 = GOLDEN_R * x1 + GOLDEN_C * x3
            f1 = f2
            f2 = f(x2)
        else:
            x3, x2 = x2, x1
            x1 = GOLDEN_R * x2 + GOLDEN_C * x0
            f2 = f1
            f1 = f(x1)

    if f1 < f2:
        return x1, f1
    return x2, f2


def brent(
    ax: float, bx: float, cx: float, f: Callable[[float], float], tol: float
) -> tuple[float, float]:
    """Brent's minimisation for a minimum bracketed by ax, bx, cx.

    Returns ``(xmin, fmin)``; gives the best point found after
    ``BRENT_MAXITER`` iterations if convergence was not reached.
    """
    x_left, x_right = ax, cx
    d = 0.0
    e = 0.0
    x = v = w = bx
    fx = fv = fw = f(x)

    for _ in range(BRENT_MAXITER):
        x_mid = 0.5 * (x_left + x_right)
        tol1 = tol * abs(x) + 1.0e-10
        tol2 = 2.0 * tol1
        if abs(x - x_mid) <= tol2 - 0.5 * (x_right - x_left):
            return x, fx

        golden_step = True
        if abs(e) > tol1:
            r = (x - w) * (fx - fv)
            q = (x - v) * (fx - fw)
            p = (x - v) * q - (x - w) * r
            q = 2.0 * (q - r)
            if q > 0:
                p = -p
            else:
                q = -q
            e_tmp = e
            e = d
            if abs(p) < abs(0.5 * q * e_tmp) and p < q * (x - x_left) and p < q * (x_right - x):
                d = p / q
                u = x + d
                if (u - x_left) < tol2 or (x_right - u) < tol2:
                    d = tol1 if x < x_mid else -tol1
                golden_step = False

        if golden_step:
            e = x_right - x if x < x_mid else -(x - x_left)
            d = GOLDEN_C * e

        if abs(d) >= tol1:
            u = x + d
        else:
            u = x + (tol1 if d > 0 else -tol1)

        fu = f(u)

        if fu <= fx:
            if u >= x:
                x_left = x
            else:
                x_right = x
            v, w, x = w, x, u
            fv, fw, fx = fw, fx, fu
        else:
            if u < x:
                x_left = u
            else:
                x_right = u
            if fu <= fw or w == x:
                v, w = w, u
                fv, fw = fw, fu
            elif fu <= fv or v == x or v == w:
                v = u
                fv = fu

    return x, fx