"""Drucker-Prager elasto-plastic material with tension cut-off."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from geomatsim.base import (
    PlasticFlag,
    StructProp,
    _elastic_increment,
    _read_props,
    _voigt,
    update_history,
)


@dataclass(frozen=True)
class _Cone:
    """Constants of a Drucker-Prager yield cone with tension cut-off."""

    qphi: float
    kphi: float
    kq: float
    gkq: float
    shear: float
    tand: float
    facg: float
    tension: float

    @classmethod
    def build(
        cls, bulk: float, shear: float, qphi: float, kphi: float, qpsi: float, tension: float
    ) -> "_Cone":
        kq = bulk * qpsi
        gkq = shear + kq * qphi
        tand = math.sqrt(qphi * qphi + 1.0) - qphi
        facg = kphi - (qphi + tand) * tension
        # the tensile strength never exceeds the cone apex
        apex = kphi / qphi if qphi else tension
        return cls(qphi, kphi, kq, gkq, shear, tand, facg, min(apex, tension))

    def apply(self, trial: np.ndarray, state: PlasticFlag) -> tuple[np.ndarray, PlasticFlag]:
        """Return the trial stress to the admissible region."""
        mean = float(trial[0] + trial[1] + trial[2]) / 3.0
        dev = trial.copy()
        dev[:3] -= mean
        taui = math.sqrt(
            0.5 * float(np.dot(dev[:3], dev[:3])) + float(np.dot(dev[3:], dev[3:]))
        )
        fi = taui + self.qphi * mean - self.kphi
        dsig = mean - self.tension

        if dsig < 0.0:
            if not fi > 0.0:
                return trial, state
        elif not taui - self.tand * mean - self.facg > 0.0:
            stress = trial.copy()
            stress[:3] -= dsig
            return stress, state | PlasticFlag.TENSION_NOW

        lam = fi / self.gkq
        taun = taui - lam * self.shear
        new_mean = mean - lam * self.kq
        ratio = taun / taui if taui else 0.0
        stress = dev * ratio
        stress[:3] += new_mean
        return stress, state | PlasticFlag.SHEAR_NOW


class DruckerPragerMaterial(StructProp):
    """Drucker-Prager material.

    Properties: density, Young's modulus, Poisson's ratio, friction
    coefficient, cohesion term, dilation coefficient and tensile strength.
    """

    type_id = 3
    nprops = 7

    def __init__(self, num: int, props) -> None:
        self.matnum = num
        self._cm = _read_props(props, self.nprops, "Drucker-Prager")
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
        _, young, poisson, qphi, kphi, qpsi, tension = self._cm
        self.bulk = young / (1.0 - 2.0 * poisson) / 3.0
        self.shear = young / (1.0 + poisson) / 2.0
        self._e1 = self.bulk + 4.0 / 3.0 * self.shear
        self._e2 = self.bulk - 2.0 / 3.0 * self.shear
        self._g2 = 2.0 * self.shear
        self._cone = _Cone.build(self.bulk, self.shear, qphi, kphi, qpsi, tension)
        self.tension = self._cone.tension

    def calcstress(self, sig, eps, his, dt, tt, state) -> tuple[np.ndarray, PlasticFlag]:
        state = update_history(state)
        trial = _voigt(sig) + _elastic_increment(self._e1, self._e2, self._g2, eps)
        return self._cone.apply(trial, state)