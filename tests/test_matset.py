import pytest

from geomatsim.elastic import ElasticMaterial
from geomatsim.matset import Matset, create_material
from geomatsim.mohr import MohrCoulombMaterial

ELASTIC = (2500.0, 1e9, 0.25)
MOHR = (2500.0, 1e9, 0.25, 1e6, 30.0, 0.0, 1e5)


def test_initial_slots_are_empty():
    mats = Matset(3)
    assert len(mats) == 3
    assert mats[0] is None
    assert mats.last() == 0


def test_add_appends_and_updates_last():
    mats = Matset(2)
    prop = ElasticMaterial(7, ELASTIC)
    mats.add(prop)
    assert len(mats) == 3
    assert mats[2] is prop
    assert mats.last() == 3


def test_add_props_builds_by_type():
    mats = Matset()
    elastic = mats.add_props(1, 1, ELASTIC)
    mohr = mats.add_props(2, 2, MOHR)
    assert isinstance(elastic, ElasticMaterial)
    assert isinstance(mohr, MohrCoulombMaterial)
    assert mats[0] is elastic and mats[1] is mohr


def test_get_finds_material_by_number():
    mats = Matset(1)
    mats.add_props(5, 1, ELASTIC)
    mats.add_props(9, 2, MOHR)
    assert mats.get(9).matnum == 9
    assert mats.get(5).props == ELASTIC


def test_get_missing_number_raises():
    mats = Matset()
    mats.add_props(1, 1, ELASTIC)
    with pytest.raises(KeyError):
        mats.get(2)


def test_unknown_type_raises():
    mats = Matset()
    with pytest.raises(ValueError):
        mats.add_props(1, 99, ELASTIC)
    assert len(mats) == 0


def test_create_material_keeps_properties():
    prop = create_material(3, 2, MOHR)
    assert prop.matnum == 3
    assert prop.props == MOHR
    assert prop.density == MOHR[0]