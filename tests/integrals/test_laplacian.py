import dataclasses
import pytest

import numpy as np

from hfwalk.integrals import gaussian
from hfwalk.integrals import kinetic


@dataclasses.dataclass
class _TestCase:
    d1: int
    d2: int
    expected_values: list[tuple[tuple[int, ...], float]]


# The expected values were computed using sympy:
# import sympy as sp
#
# def laplacian_3d(powers1, powers2, a, b, A, B):
#   x, y, z = coords = sp.symbols('x,y,z')
#   g1 = build_cartesian_gaussian_3d(coords, powers1, a, A)
#   g2 = build_cartesian_gaussian_3d(coords, powers2, b, B)
#   nabla_g2 = sp.diff(g2, x, 2) + sp.diff(g2, y, 2) + sp.diff(g2, z, 2)
#   res = sp.integrate(
#       g1 * nabla_g2,
#       (x, -sp.oo, sp.oo), (y, -sp.oo, sp.oo), (z, -sp.oo, sp.oo))
#   return float(res.evalf())
#
# a, A = sp.Rational(1, 2), [-2, 0, 1]
# b, B = sp.Rational(1, 5), [1, 2, -1]
_VALUES = {
    (0, 0, 0, 0, 0, 0): 0.4447744656845183,
    (1, 1, 1, 0, 0, 0): 0.27769726675615586,
    (0, 0, 0, 1, 1, 1): -4.339019793064935,
    (1, 1, 1, 1, 1, 1): 0.11032576884112527,
    (1, 0, 1, 0, 1, 0): -0.69424316689038956,
    (0, 1, 0, 1, 0, 1): 1.73560791722597396,
    (2, 2, 2, 0, 0, 0): -0.44676243789090492,
    (2, 1, 0, 1, 0, 1): 2.0360720605318074,
    (2, 2, 2, 1, 1, 1): -0.7693172854848539,
    (0, 0, 0, 2, 2, 2): -41.13682590933385796,
    (2, 2, 2, 2, 2, 2): 7.92099471611946715,
    (0, 1, 2, 2, 1, 0): 2.65032668218701906,
    (0, 0, 0, 3, 3, 3): -501.21026299968980311,
    (1, 1, 1, 3, 3, 3): 22.72527940186406781,
    (2, 2, 2, 3, 3, 3): 13.10644008629708424,
    (2, 1, 0, 1, 2, 3): -10.11178187978127418,
}


def _case(d1: int, d2: int) -> _TestCase:
    return _TestCase(
        d1=d1,
        d2=d2,
        expected_values=[
            (coords, value)
            for coords, value in _VALUES.items()
            if max(coords[:3]) <= d1 and max(coords[3:]) <= d2
        ],
    )


_TEST_CASES = [
    _case(d1, d2) for d1, d2 in [(0, 0), (1, 0), (0, 1), (1, 1), (2, 2), (2, 3)]
]


@pytest.mark.parametrize("case", _TEST_CASES)
def test_laplacian_3d(case):
    g1 = gaussian.GaussianBasis3d(
        max_degree=case.d1, exponent=0.5, center=np.array([-2.0, 0.0, 1.0])
    )
    g2 = gaussian.GaussianBasis3d(
        max_degree=case.d2, exponent=0.2, center=np.array([1.0, 2.0, -1.0])
    )

    L = kinetic.laplacian_3d(g1, g2)
    assert L.shape == (case.d1 + 1,) * 3 + (case.d2 + 1,) * 3

    for coords, expected in case.expected_values:
        np.testing.assert_allclose(L[coords], expected, rtol=1e-10, atol=1e-12)


def test_laplacian_3d_is_hermitian():
    g1 = gaussian.GaussianBasis3d(
        max_degree=2, exponent=0.9, center=np.array([0.3, -0.1, 0.5])
    )
    g2 = gaussian.GaussianBasis3d(
        max_degree=1, exponent=0.4, center=np.array([-0.7, 0.2, 0.0])
    )

    L_12 = kinetic.laplacian_3d(g1, g2)
    L_21 = kinetic.laplacian_3d(g2, g1)

    np.testing.assert_allclose(
        L_12, np.transpose(L_21, (3, 4, 5, 0, 1, 2)), rtol=1e-10, atol=1e-12
    )
