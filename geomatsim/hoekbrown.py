"""Hoek-Brown rock material."""

from __future__ import annotations

import math

import numpy as np

from geomatsim.base import (
    PlasticFlag,
    StructProp,
    _elastic_increment,
    _read_props,
    _voigt,
    update_history,
)
from geomatsim.druckerprager import _Cone


class HoekBrownMaterial(StructProp):
    """Hoek-Brown material.

    Properties: density, Young's modulus, Poisson's ratio, s, mb, sigci, a,
    s3cv, the table numbers for m, s, a, c and the multiplier, and dep.
    The plastic correction is the cone return with zero friction, cohesion,
    dilation and tensile strength.
    """

    type_id = 5
    nprops = 14

    def __init__(self, num: int, props) -> None:
        self.matnum = num
        self._cm = _read_props(props, self.nprops, "Hoek-Brown")
        self.init()

    @property
    def props(self) -> tuple[float, ...]:
        return self._cm

    @property
    def density(self) -> float:
        return self._cm[0]

    def calcmass(self, evol: float) -> float:
        return evol * self.density

    def wavespeed(self) -> float:
        rho, young, mu = self._cm[:3]
        return math.sqrt(young * (1 - mu) / ((1 + mu) * (1 - 2 * mu) * rho))

    def init(self) -> None:
        cm = self._cm
        young, poisson = cm[1], cm[2]
        self.s, self.mb, self.sigci, self.a, self.s3cv = cm[3:8]
        self.m_table, self.s_table, self.a_table, self.c_table, self.mul_table = (
            int(v) for v in cm[8:13]
        )
        self.dep = cm[13]

        self.bulk = young / (1.0 - 2.0 * poisson) / 3.0
        self.shear = young / (1.0 + poisson) / 2.0
        self._e1 = self.bulk + 4.0 / 3.0 * self.shear
        self._e2 = self.bulk - 2.0 / 3.0 * self.shear
        self._g2 = 2.0 * self.shear
        self._cone = _Cone.build(self.bulk, self.shear, 0.0, 0.0, 0.0, 0.0)

    def calcstress(self, sig, eps, his, dt, tt, state) -> tuple[np.ndarray, PlasticFlag]:
        state = update_history(state)
        trial = _voigt(sig) + _elastic_increment(self._e1, self._e2, self._g2, eps)
        return self._cone.apply(trial, state)