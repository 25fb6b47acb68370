"""Common interface of structural material models and their plasticity flags."""

from __future__ import annotations

import abc
import enum
import warnings
from typing import ClassVar

import numpy as np


class PlasticFlag(enum.IntFlag):
    """Plasticity state of an integration point."""

    NONE = 0
    SHEAR_NOW = 0x01
    TENSION_NOW = 0x02
    SHEAR_PAST = 0x04
    TENSION_PAST = 0x08


def update_history(state) -> PlasticFlag:
    """Turn the 'now' plasticity flags of ``state`` into 'past' flags."""
    value = int(state)
    if value & PlasticFlag.SHEAR_NOW:
        value |= int(PlasticFlag.SHEAR_PAST)
    value &= ~int(PlasticFlag.SHEAR_NOW)
    if value & PlasticFlag.TENSION_NOW:
        value |= int(PlasticFlag.TENSION_PAST)
    value &= ~int(PlasticFlag.TENSION_NOW)
    return PlasticFlag(value)


def _voigt(values) -> np.ndarray:
    vec = np.array(values, dtype=float)
    if vec.shape != (6,):
        raise ValueError("stress and strain vectors must have 6 components")
    return vec


def _read_props(props, count: int, name: str) -> tuple[float, ...]:
    values = tuple(float(p) for p in props)
    if len(values) < count:
        raise ValueError(f"{name} material needs {count} properties, got {len(values)}")
    if len(values) != count:
        warnings.warn(
            f"{name} material expects {count} properties, got {len(values)}",
            UserWarning,
            stacklevel=3,
        )
    return values[:count]


def _elastic_increment(e1: float, e2: float, g2: float, eps) -> np.ndarray:
    d11, d22, d33, d12, d23, d13 = _voigt(eps)
    return np.array(
        [
            d11 * e1 + (d22 + d33) * e2,
            (d11 + d33) * e2 + d22 * e1,
            (d11 + d22) * e2 + d33 * e1,
            d12 * g2,
            d23 * g2,
            d13 * g2,
        ]
    )


class StructProp(abc.ABC):
    """Material and geometrical properties shared by a set of elements."""

    type_id: ClassVar[int]
    nprops: ClassVar[int]
    matnum: int

    @property
    @abc.abstractmethod
    def props(self) -> tuple[float, ...]:
        """The material constants as given."""

    @property
    @abc.abstractmethod
    def density(self) -> float:
        """Mass density of the material."""

    @abc.abstractmethod
    def calcmass(self, evol: float) -> float:
        """Mass of an element of volume ``evol``."""

    @abc.abstractmethod
    def calcstress(self, sig, eps, his, dt, tt, state) -> tuple[np.ndarray, PlasticFlag]:
        """Update stress ``sig`` by strain increment ``eps``.

        Returns the new stress vector and the new plasticity state.
        """

    @abc.abstractmethod
    def wavespeed(self) -> float:
        """Speed of the dilatational wave in the material."""

    @abc.abstractmethod
    def init(self) -> None:
        """Compute the derived constants from the material properties."""