from collections.abc import Sequence
from typing import Callable

import numpy as np

from hfwalk.basis import basis_function
from hfwalk.basis import operators
from hfwalk.structure import atom as atom_lib

_PairOperator = Callable[
    [basis_function.BasisFunction, basis_function.BasisFunction], float
]


def one_electron_matrix(
    basis: Sequence[basis_function.BasisFunction], operator: _PairOperator
) -> np.ndarray:
    """Evaluates a one-electron operator on every pair of basis functions.

    Returns:
        A numpy array M of shape (N, N) with M[p, q] = operator(basis[p],
        basis[q]) where N=len(basis).
    """
    return np.array(
        [[operator(p, q) for q in basis] for p in basis], dtype=np.float64
    )


def overlap_matrix(
    basis: Sequence[basis_function.BasisFunction],
) -> np.ndarray:
    """Computes the overlap matrix S

    Returns:
        A numpy array of shape (N, N) where N=len(basis)
    """
    return one_electron_matrix(basis, operators.overlap)


def kinetic_matrix(
    basis: Sequence[basis_function.BasisFunction],
) -> np.ndarray:
    """Computes the kinetic energy matrix T

    Returns:
        A numpy array of shape (N, N) where N=len(basis)
    """
    return one_electron_matrix(basis, operators.kinetic)


def nuclear_attraction_matrix(
    basis: Sequence[basis_function.BasisFunction],
    atoms: Sequence[atom_lib.Atom],
) -> np.ndarray:
    """Computes the nuclear attraction matrix A, summed over all nuclei.

    Returns:
        A numpy array of shape (N, N) where N=len(basis)
    """
    return one_electron_matrix(
        basis, lambda p, q: operators.nuclear_attraction(p, q, atoms)
    )


def core_hamiltonian_matrix(
    basis: Sequence[basis_function.BasisFunction],
    atoms: Sequence[atom_lib.Atom],
) -> np.ndarray:
    """Computes the core Hamiltonian matrix h = T + A

    Returns:
        A numpy array of shape (N, N) where N=len(basis)
    """
    T = kinetic_matrix(basis)
    A = nuclear_attraction_matrix(basis, atoms)

    return T + A
