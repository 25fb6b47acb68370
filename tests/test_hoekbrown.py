import numpy as np
import pytest

from geomatsim.base import PlasticFlag
from geomatsim.elastic import ElasticMaterial
from geomatsim.hoekbrown import HoekBrownMaterial

PROPS = (2600.0, 2.0e9, 0.2, 1.0, 10.0, 5e7, 0.5, 0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 0.0)


@pytest.fixture
def material():
    return HoekBrownMaterial(4, PROPS)


def test_properties_are_read_in_order(material):
    assert material.props == PROPS
    assert material.mb == PROPS[4]
    assert material.sigci == PROPS[5]
    assert (material.m_table, material.mul_table) == (1, 5)
    assert material.matnum == 4


def test_hydrostatic_compression_is_elastic(material):
    eps = (-1e-6, -1e-6, -1e-6, 0.0, 0.0, 0.0)
    elastic = ElasticMaterial(1, PROPS[:3])
    expected, _ = elastic.calcstress(np.zeros(6), eps, None, 0.0, 0.0, 0)
    stress, state = material.calcstress(np.zeros(6), eps, None, 0.0, 0.0, 0)
    assert np.allclose(stress, expected)
    assert state == PlasticFlag.NONE


def test_deviatoric_compression_returns_to_hydrostatic(material):
    sig = np.array([-3e6, -2e6, -1e6, 5e5, 0.0, 1e5])
    stress, state = material.calcstress(sig, np.zeros(6), None, 0.0, 0.0, 0)
    mean = sig[:3].mean()
    assert np.allclose(stress, [mean] * 3 + [0.0] * 3)
    assert state == PlasticFlag.SHEAR_NOW


def test_hydrostatic_tension_is_released(material):
    sig = np.array([1e5, 1e5, 1e5, 0.0, 0.0, 0.0])
    stress, state = material.calcstress(sig, np.zeros(6), None, 0.0, 0.0, PlasticFlag.TENSION_NOW)
    assert np.allclose(stress, np.zeros(6))
    assert state == PlasticFlag.TENSION_NOW | PlasticFlag.TENSION_PAST


def test_mass_and_wavespeed(material):
    elastic = ElasticMaterial(1, PROPS[:3])
    assert material.calcmass(0.5) == pytest.approx(0.5 * PROPS[0])
    assert material.wavespeed() == pytest.approx(elastic.wavespeed())


def test_too_few_properties_raise():
    with pytest.raises(ValueError):
        HoekBrownMaterial(1, PROPS[:7])