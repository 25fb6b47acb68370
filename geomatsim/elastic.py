"""Linear isotropic elastic material."""

from __future__ import annotations

import math

import numpy as np

from geomatsim.base import (
    PlasticFlag,
    StructProp,
    _elastic_increment,
    _read_props,
    _voigt,
)


class ElasticMaterial(StructProp):
    """Isotropic elastic material with properties (density, Young, Poisson)."""

    type_id = 1
    nprops = 3

    def __init__(self, num: int, props) -> None:
        self.matnum = num
        self._cm = _read_props(props, self.nprops, "elastic")
        self.init()

    @property
    def props(self) -> tuple[float, ...]:
        return self._cm

    @property
    def density(self) -> float:
        return self._cm[0]

    def calcmass(self, evol: float) -> float:
        return evol * self.density

    def init(self) -> None:
        _, young, poisson = self._cm
        self.bulk = young / 3 / (1 - 2.0 * poisson)
        self.shear = young / 2 / (1 + poisson)
        self._e1 = self.bulk + 4.0 / 3.0 * self.shear
        self._e2 = self.bulk - 2.0 / 3.0 * self.shear
        self._g2 = 2.0 * self.shear

    def calcstress(self, sig, eps, his, dt, tt, state) -> tuple[np.ndarray, PlasticFlag]:
        stress = _voigt(sig) + _elastic_increment(self._e1, self._e2, self._g2, eps)
        return stress, PlasticFlag(int(state))

    def wavespeed(self) -> float:
        rho, young, mu = self._cm
        return math.sqrt(young * (1 - mu) / ((1 + mu) * (1 - 2 * mu) * rho))