"""Collection of the materials defined for a model."""

from __future__ import annotations

from typing import Iterable

from geomatsim.base import StructProp
from geomatsim.elastic import ElasticMaterial
from geomatsim.mohr import MohrCoulombMaterial

_MATERIAL_TYPES: dict[int, type[StructProp]] = {
    1: ElasticMaterial,
    2: MohrCoulombMaterial,
}


def create_material(num: int, mtype: int, props: Iterable[float]) -> StructProp:
    """Build material number ``num`` of type ``mtype`` (1 elastic, 2 Mohr-Coulomb)."""
    try:
        cls = _MATERIAL_TYPES[mtype]
    except KeyError:
        raise ValueError(f"unknown material type {mtype}") from None
    return cls(num, props)


class Matset:
    """Growable table of material properties; slots may be empty."""

    def __init__(self, initsize: int = 0) -> None:
        self._props: list[StructProp | None] = [None] * initsize

    def __len__(self) -> int:
        return len(self._props)

    def __getitem__(self, i: int) -> StructProp | None:
        return self._props[i]

    def last(self) -> int:
        """One past the index of the last defined material, 0 if none."""
        for index in range(len(self._props) - 1, -1, -1):
            if self._props[index] is not None:
                return index + 1
        return 0

    def add(self, prop: StructProp) -> None:
        """Append a material at the end of the table."""
        self._props.append(prop)

    def add_props(self, num: int, mtype: int, props: Iterable[float]) -> StructProp:
        """Create a material from its type and properties and append it."""
        prop = create_material(num, mtype, props)
        self.add(prop)
        return prop

    def get(self, mnum: int) -> StructProp:
        """The first material whose number is ``mnum``."""
        for prop in self._props:
            if prop is not None and prop.matnum == mnum:
                return prop
        raise KeyError(mnum)