"""Void material: no mass, no stiffness."""

from __future__ import annotations

import numpy as np

from geomatsim.base import PlasticFlag, StructProp, _voigt


class NullMaterial(StructProp):
    """Material that carries no mass and produces no stress."""

    type_id = 0
    nprops = 0

    def __init__(self, num: int, props=()) -> None:
        self.matnum = num

    @property
    def props(self) -> tuple[float, ...]:
        return ()

    @property
    def density(self) -> float:
        return 0.0

    def calcmass(self, evol: float) -> float:
        return 0.0

    def calcstress(self, sig, eps, his, dt, tt, state) -> tuple[np.ndarray, PlasticFlag]:
        return _voigt(sig), PlasticFlag(int(state))

    def wavespeed(self) -> float:
        return 0.0

    def init(self) -> None:
        return None