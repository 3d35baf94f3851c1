from collections.abc import Iterator, Sequence
import functools
import itertools
from typing import Callable

import numpy as np

from hfwalk.basis import basis_function
from hfwalk.integrals import coulomb as coulomb_lib
from hfwalk.integrals import gaussian
from hfwalk.integrals import kinetic as kinetic_lib
from hfwalk.integrals import overlap as overlap_lib
from hfwalk.structure import atom as atom_lib

# An operator on primitive Gaussian families. For N input families with max
# degrees d1,...,dN it returns an array of shape
# (d1+1,)*3 + ... + (dN+1,)*3 indexed by the Cartesian powers.
PrimitiveOperator = Callable[..., np.ndarray]


def _primitives(
    f: basis_function.BasisFunction,
) -> Iterator[tuple[gaussian.GaussianBasis3d, float]]:
    for exponent, coefficient in zip(f.exponents, f.coefficients):
        g = gaussian.GaussianBasis3d(
            max_degree=f.max_degree, exponent=exponent, center=f.center
        )
        yield g, coefficient


def _contract(
    operator: PrimitiveOperator, *functions: basis_function.BasisFunction
) -> float:
    """Sums a primitive operator over all primitive combinations.

    Each primitive tensor is evaluated at the Cartesian powers of the basis
    functions and weighted by the product of contraction coefficients.
    """
    index = sum((f.powers for f in functions), ())

    value = 0.0
    for primitives in itertools.product(*(_primitives(f) for f in functions)):
        gaussians = [g for g, _ in primitives]
        weight = np.prod([c for _, c in primitives])
        value += weight * operator(*gaussians)[index]

    return float(value)


def overlap(
    p: basis_function.BasisFunction, q: basis_function.BasisFunction
) -> float:
    """<p|q>"""
    return _contract(overlap_lib.overlap_3d, p, q)


def laplacian(
    p: basis_function.BasisFunction, q: basis_function.BasisFunction
) -> float:
    """<p|nabla^2|q>"""
    return _contract(kinetic_lib.laplacian_3d, p, q)


def kinetic(
    p: basis_function.BasisFunction, q: basis_function.BasisFunction
) -> float:
    """<p|-1/2 nabla^2|q>"""
    return -0.5 * laplacian(p, q)


def nuclear_attraction(
    p: basis_function.BasisFunction,
    q: basis_function.BasisFunction,
    atoms: Sequence[atom_lib.Atom],
) -> float:
    """The attraction to every nucleus: -sum_i Z_i <p|1/|r - R_i||q>"""
    value = 0.0
    for atom in atoms:
        operator = functools.partial(coulomb_lib.one_electron, C=atom.position)
        value -= atom.number * _contract(operator, p, q)

    return value


def coulomb(
    p: basis_function.BasisFunction,
    q: basis_function.BasisFunction,
    r: basis_function.BasisFunction,
    s: basis_function.BasisFunction,
) -> float:
    """The electron repulsion integral (pq|rs) in chemists' notation.

    (pq|rs) = integral p(r1) q(r1) r(r2) s(r2) / |r1 - r2| dr1 dr2
    """
    return _contract(coulomb_lib.two_electron, p, q, r, s)
