import dataclasses
import pytest

import numpy as np

from hfwalk.adapters import bse
from hfwalk.basis import contracted_gto


@dataclasses.dataclass
class _TestCase:
    basis_name: str
    element: int
    expected_gtos: list[contracted_gto.ContractedGTO]


_TEST_CASES = [
    _TestCase(
        basis_name="sto-3g",
        element=1,
        expected_gtos=[
            contracted_gto.ContractedGTO(
                primitive_type=contracted_gto.PrimitiveType.CARTESIAN,
                angular_momentum=(0,),
                exponents=np.array([3.425250914, 0.6239137298, 0.1688554040]),
                coefficients=np.array(
                    [[0.1543289673, 0.5353281423, 0.4446345422]]
                ),
            )
        ],
    ),
    _TestCase(
        basis_name="6-21g",
        element=1,
        expected_gtos=[
            contracted_gto.ContractedGTO(
                primitive_type=contracted_gto.PrimitiveType.CARTESIAN,
                angular_momentum=(0,),
                exponents=np.array([5.4471780, 0.8245470]),
                coefficients=np.array([[0.1562850, 0.9046910]]),
            ),
            contracted_gto.ContractedGTO(
                primitive_type=contracted_gto.PrimitiveType.CARTESIAN,
                angular_momentum=(0,),
                exponents=np.array([0.1831920]),
                coefficients=np.array([[1.0]]),
            ),
        ],
    ),
]


@pytest.mark.parametrize("case", _TEST_CASES)
def test_load(case):
    gtos = bse.load(case.basis_name, case.element)

    assert len(gtos) == len(case.expected_gtos)
    for gto, expected in zip(gtos, case.expected_gtos):
        assert gto.primitive_type == expected.primitive_type
        assert gto.angular_momentum == expected.angular_momentum
        np.testing.assert_allclose(gto.exponents, expected.exponents, rtol=1e-6)
        np.testing.assert_allclose(
            gto.coefficients, expected.coefficients, rtol=1e-6
        )


def test_unknown_basis():
    with pytest.raises(LookupError):
        bse.load("not-a-basis-set", 1)


def test_fetcher():
    fetcher = bse.fetcher("sto-3g")

    assert len(fetcher(1)) == 1
