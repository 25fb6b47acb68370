"""Material models for geomaterials (elastic, Mohr-Coulomb, Drucker-Prager,
Hoek-Brown, null), a material collection, and the numerics they use."""

__version__ = "0.1.0"
__all__ = [
    "base",
    "druckerprager",
    "eigen",
    "elastic",
    "hoekbrown",
    "mathfem",
    "matset",
    "mohr",
    "null",
    "principal",
]