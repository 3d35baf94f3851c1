from collections.abc import Sequence
import itertools

import numpy as np

from hfwalk.basis import basis_function
from hfwalk.basis import operators


def coulomb_tensor(
    basis: Sequence[basis_function.BasisFunction],
) -> np.ndarray:
    """Computes the electron repulsion tensor J.

    J[p, q, r, s] = (pq|rs)
      = integral chi_p(r1) chi_q(r1) chi_r(r2) chi_s(r2) / |r1 - r2|

    Every quadruple is evaluated on its own, so the 8-fold permutation
    symmetry of J is a property of the integrals and not of this loop.

    Returns:
        A numpy array of shape (N, N, N, N) where N=len(basis)
    """
    n_basis = len(basis)
    J = np.empty((n_basis,) * 4, dtype=np.float64)

    for p, q, r, s in itertools.product(range(n_basis), repeat=4):
        J[p, q, r, s] = operators.coulomb(basis[p], basis[q], basis[r], basis[s])

    return J


def exchange_tensor(J: np.ndarray) -> np.ndarray:
    """Reorders J for the exchange contraction: K[p, q, r, s] = J[p, r, q, s]"""
    return np.transpose(J, (0, 2, 1, 3))


def rhf_tensor(J: np.ndarray, K: np.ndarray) -> np.ndarray:
    """The closed shell two-electron tensor Q = 2J - K.

    Contracting Q with a density C C^T gives the Coulomb minus exchange
    part of the Fock matrix.
    """
    return 2 * J - K
