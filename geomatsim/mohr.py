"""Mohr-Coulomb elasto-plastic material with tension cut-off."""

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
from geomatsim.principal import principal_stresses, principal_to_stress

_DEG_RAD = math.pi / 180.0


class MohrCoulombMaterial(StructProp):
    """Mohr-Coulomb material.

    Properties: density, Young's modulus, Poisson's ratio, cohesion,
    friction angle, dilation angle (degrees) and tensile strength.
    """

    type_id = 2
    nprops = 7

    def __init__(self, num: int, props) -> None:
        self.matnum = num
        self._cm = _read_props(props, self.nprops, "Mohr-Coulomb")
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
        _, young, poisson, cohesion, friction, dilation, tension = self._cm
        self.bulk = young / (1.0 - 2.0 * poisson) / 3.0
        self.shear = young / (1.0 + poisson) / 2.0
        self._e1 = self.bulk + 4.0 / 3.0 * self.shear
        self._e2 = self.bulk - 2.0 / 3.0 * self.shear
        self._g2 = 2.0 * self.shear

        rsin = math.sin(friction * _DEG_RAD)
        self._nph = (1.0 + rsin) / (1.0 - rsin)
        self._csn = 2.0 * cohesion * math.sqrt(self._nph)
        if friction:
            apex = cohesion * math.cos(friction * _DEG_RAD) / rsin
            tension = min(tension, apex)
        self.tension = tension

        rsin = math.sin(dilation * _DEG_RAD)
        rnps = (1.0 + rsin) / (1.0 - rsin)
        ra = self._e1 - rnps * self._e2
        rb = self._e2 - rnps * self._e1
        rd = ra - rb * self._nph
        self._sc1 = ra / rd
        self._sc3 = rb / rd
        self._sc2 = self._e2 * (1.0 - rnps) / rd
        self._bisc = math.sqrt(1.0 + self._nph * self._nph) + self._nph
        self._e21 = self._e2 / self._e1

    def calcstress(self, sig, eps, his, dt, tt, state) -> tuple[np.ndarray, PlasticFlag]:
        state = update_history(state)
        trial = _voigt(sig) + _elastic_increment(self._e1, self._e2, self._g2, eps)

        values, directions = principal_stresses(trial)
        pmin, pmid, pmax = (float(v) for v in values)

        fsurf = pmin - self._nph * pmax + self._csn
        tsurf = self.tension - pmax
        pdiv = -tsurf + (pmin - self._nph * self.tension + self._csn) * self._bisc

        if fsurf < 0.0 and pdiv < 0.0:
            state |= PlasticFlag.SHEAR_NOW
            pmin -= fsurf * self._sc1
            pmid -= fsurf * self._sc2
            pmax -= fsurf * self._sc3
        elif tsurf < 0.0 and pdiv > 0.0:
            state |= PlasticFlag.TENSION_NOW
            correction = self._e21 * tsurf
            pmin += correction
            pmid += correction
            pmax = self.tension
        else:
            return trial, state

        return principal_to_stress(directions, (pmin, pmid, pmax)), state