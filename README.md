# geomatsim

Constitutive models for geomaterials, written for use inside an explicit
finite element stress update, together with the small numerical tools they
rely on.

Stresses and strain increments are six-component Voigt vectors in the order
`xx, yy, zz, xy, yz, xz`.

## Materials

Every material is a subclass of `StructProp` (`geomatsim.base`). Each one is
built as `Material(num, props)`, where `num` is the material number (kept as
`matnum`) and `props` is a sequence of constants. Too few constants raise
`ValueError`; a different count than expected gives a `UserWarning` and the
extra values are ignored. The derived constants are computed by `init()`,
which the constructor already calls.

Each material offers:

- `props`: the constants as given, `density`: the first constant,
- `calcmass(evol)`: `evol * density`,
- `wavespeed()`: the dilatational wave speed
  `sqrt(E (1 - nu) / ((1 + nu)(1 - 2 nu) rho))`,
- `calcstress(sig, eps, his, dt, tt, state)`: returns `(new_stress, new_state)`
  with the stress as a NumPy array and the state as a `PlasticFlag`. The
  arguments `his`, `dt` and `tt` are accepted and not used.
- class attributes `type_id` and `nprops`.

The materials:

- `ElasticMaterial` (`geomatsim.elastic`, type 1): linear isotropic
  elasticity. Properties: density, Young's modulus, Poisson's ratio. The state
  is passed through unchanged.
- `MohrCoulombMaterial` (`geomatsim.mohr`, type 2): Mohr-Coulomb plasticity
  with a tension cut-off, corrected in principal stress space. Properties:
  density, Young's modulus, Poisson's ratio, cohesion, friction angle
  (degrees), dilation angle (degrees), tensile strength. The tensile strength
  is limited to the cone apex when the friction angle is not zero.
- `DruckerPragerMaterial` (`geomatsim.druckerprager`, type 3): Drucker-Prager
  plasticity with a tension cut-off. Properties: density, Young's modulus,
  Poisson's ratio, friction coefficient, cohesion term, dilation coefficient,
  tensile strength.
- `HoekBrownMaterial` (`geomatsim.hoekbrown`, type 5): takes the fourteen
  Hoek-Brown constants (density, Young's modulus, Poisson's ratio, s, mb,
  sigci, a, s3cv, the m, s, a, c and multiplier table numbers, dep) and stores
  them as attributes. Its stress update is the Drucker-Prager style return with
  friction, cohesion, dilation and tensile strength all zero; the Hoek-Brown
  constants themselves do not enter the stress update.
- `NullMaterial` (`geomatsim.null`, type 0): no mass, no wave speed, and the
  stress is returned unchanged.

### Plasticity state

`PlasticFlag` is an `IntFlag` with `SHEAR_NOW`, `TENSION_NOW`, `SHEAR_PAST`
and `TENSION_PAST`. At the start of each plastic stress update,
`update_history(state)` turns the "now" flags into "past" flags; the step then
sets `SHEAR_NOW` or `TENSION_NOW` if the point yielded.

### Material collections

`Matset` (`geomatsim.matset`) is a growable table of materials:

- `Matset(initsize)` starts with `initsize` empty slots,
- `len(matset)` and `matset[i]` give the size and the slot (possibly `None`),
- `last()` is one past the index of the last filled slot, 0 if none,
- `add(prop)` appends a material,
- `add_props(num, mtype, props)` builds a material and appends it,
- `get(mnum)` returns the first material with that number, or raises
  `KeyError`.

`create_material(num, mtype, props)` builds a material from a type code:
1 for `ElasticMaterial`, 2 for `MohrCoulombMaterial`. Any other code raises
`ValueError`.

## Numerics

- `geomatsim.mathfem`
  - `cubic(a, b, c, d)`: real roots of `a x^3 + b x^2 + c x + d = 0` as a
    tuple, falling back to the quadratic or linear case for vanishing leading
    coefficients; the tuple holds only the roots found.
  - `cubic3r(a, b, c, d)`: the same for a cubic assumed to have three real
    roots, as met in principal stress calculations.
  - `gss(ax, bx, cx, f, tol)`: golden-section search; returns `(xmin, fmin)`.
  - `brent(ax, bx, cx, f, tol)`: Brent minimisation, at most 100 iterations;
    returns `(xmin, fmin)`.
  - `sgn`, `cbrt`, `clamp`, `macbra`, `negbra`, `nearest`, `iperm`.
- `geomatsim.eigen.jacobi(sig)`: eigenvalues (ascending) and eigenvectors (as
  columns) of the symmetric tensor of a Voigt stress, by Jacobi rotations.
  A `RuntimeWarning` is given after more than 50 sweeps.
- `geomatsim.principal`
  - `principal_stresses(sig)`: ascending principal values and a 3x3 array whose
    rows are the principal directions. Raises `PrincipalStressError` if the
    eigenvalue computation fails.
  - `principal_to_stress(directions, principal)`: rebuilds the Voigt stress
    from directions (rows) and principal values. A singular direction matrix
    raises `ValueError`.

## Installing

```
pip install .
```

Tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from geomatsim.base import PlasticFlag
from geomatsim.mohr import MohrCoulombMaterial

rock = MohrCoulombMaterial(1, [2500.0, 20e9, 0.25, 5e6, 30.0, 0.0, 1e6])

sig = [0.0] * 6
eps = [1e-4, 0.0, 0.0, 0.0, 0.0, 0.0]
state = PlasticFlag.NONE

sig, state = rock.calcstress(sig, eps, None, 1e-6, 0.0, state)
print(sig, state)
print(rock.wavespeed(), rock.calcmass(2.0))
```

Solving a cubic:

```python
from geomatsim.mathfem import cubic

roots = cubic(1.0, -6.0, 11.0, -6.0)   # roots of (x-1)(x-2)(x-3)
```

## What this package does not do

It is a library of material models only. It has no input file reader, no mesh,
elements or finite element solver, no time stepping, no result output and no
command-line program; the calling code supplies the stress and strain
increments and keeps the returned stress and plasticity state.