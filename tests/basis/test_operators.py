import numpy as np

from hfwalk.basis import basis_function
from hfwalk.basis import contracted_gto
from hfwalk.basis import operators
from hfwalk.structure import atom as atom_lib


def _s_function(exponent: float, center) -> basis_function.BasisFunction:
    gto = contracted_gto.ContractedGTO(
        primitive_type=contracted_gto.PrimitiveType.CARTESIAN,
        angular_momentum=(0,),
        exponents=np.array([exponent]),
        coefficients=np.array([[1.0]]),
    )
    (f,) = basis_function.expand_gto(gto, np.asarray(center, dtype=np.float64))
    return f


def test_overlap_of_normalized_s_functions():
    a, b = 0.6, 1.3
    R = np.array([0.3, -0.4, 1.2])
    p = _s_function(a, np.zeros(3))
    q = _s_function(b, R)

    expected = (2 * np.sqrt(a * b) / (a + b)) ** 1.5 * np.exp(
        -a * b / (a + b) * np.dot(R, R)
    )

    np.testing.assert_allclose(operators.overlap(p, q), expected, rtol=1e-12)
    np.testing.assert_allclose(operators.overlap(q, p), expected, rtol=1e-12)


def test_kinetic_of_normalized_s_function():
    a = 0.9
    p = _s_function(a, [1.0, 2.0, 3.0])

    np.testing.assert_allclose(operators.kinetic(p, p), 1.5 * a, rtol=1e-12)
    np.testing.assert_allclose(
        operators.laplacian(p, p), -3.0 * a, rtol=1e-12
    )


def test_nuclear_attraction_same_center():
    a = 0.4
    center = [0.0, 0.0, 0.5]
    p = _s_function(a, center)
    atoms = [atom_lib.make_atom("He", *center)]

    expected = -2 * 2 * np.sqrt(2 * a / np.pi)

    np.testing.assert_allclose(
        operators.nuclear_attraction(p, p, atoms), expected, rtol=1e-12
    )


def test_nuclear_attraction_sums_over_atoms():
    p = _s_function(0.5, [0.0, 0.0, 0.0])
    q = _s_function(0.8, [0.0, 0.0, 1.0])
    atom1 = atom_lib.make_atom("H", 0.0, 0.0, 0.0)
    atom2 = atom_lib.make_atom("Li", 0.0, 1.0, 1.0)

    total = operators.nuclear_attraction(p, q, [atom1, atom2])
    separate = operators.nuclear_attraction(
        p, q, [atom1]
    ) + operators.nuclear_attraction(p, q, [atom2])

    assert total < 0
    np.testing.assert_allclose(total, separate, rtol=1e-12)


def test_coulomb_same_center():
    a = 0.7
    p = _s_function(a, [0.2, 0.0, 0.0])

    expected = 2 * np.sqrt(a / np.pi)

    np.testing.assert_allclose(
        operators.coulomb(p, p, p, p), expected, rtol=1e-12
    )


def test_coulomb_symmetry():
    p = _s_function(0.5, [0.0, 0.0, 0.0])
    q = _s_function(0.8, [0.0, 0.0, 1.4])
    r = _s_function(1.1, [0.5, 0.0, 0.7])

    pqrr = operators.coulomb(p, q, r, r)

    np.testing.assert_allclose(operators.coulomb(q, p, r, r), pqrr, rtol=1e-10)
    np.testing.assert_allclose(operators.coulomb(r, r, p, q), pqrr, rtol=1e-10)
