import pytest

from geomatsim.base import PlasticFlag, StructProp, update_history


def test_shear_now_becomes_past():
    assert update_history(PlasticFlag.SHEAR_NOW) == PlasticFlag.SHEAR_PAST


def test_tension_now_becomes_past():
    assert update_history(PlasticFlag.TENSION_NOW) == PlasticFlag.TENSION_PAST


def test_both_now_flags_move_to_past():
    state = PlasticFlag.SHEAR_NOW | PlasticFlag.TENSION_NOW
    assert update_history(state) == PlasticFlag.SHEAR_PAST | PlasticFlag.TENSION_PAST


def test_past_flags_are_kept():
    state = PlasticFlag.SHEAR_PAST | PlasticFlag.TENSION_NOW
    assert update_history(state) == PlasticFlag.SHEAR_PAST | PlasticFlag.TENSION_PAST


def test_plain_int_state_is_accepted():
    assert update_history(int(PlasticFlag.SHEAR_NOW)) == PlasticFlag.SHEAR_PAST


def test_empty_state_stays_empty():
    assert update_history(PlasticFlag.NONE) == PlasticFlag.NONE


def test_history_is_idempotent():
    state = update_history(PlasticFlag.SHEAR_NOW | PlasticFlag.TENSION_NOW)
    assert update_history(state) == state


def test_struct_prop_is_abstract():
    with pytest.raises(TypeError):
        StructProp()