import numpy as np


def density_matrix(C: np.ndarray) -> np.ndarray:
    """The density-like matrix C C^T of the occupied orbitals.

    Args:
        C: Occupied orbital coefficients. shape (n_basis, n_occupied)
    """
    return C @ C.T


def fock_matrix(C: np.ndarray, h: np.ndarray, Q: np.ndarray) -> np.ndarray:
    """Builds the closed shell Fock matrix.

    F(C)[p, q] = h[p, q] + sum_{rs} Q[p, q, r, s] (C C^T)[r, s]

    Args:
        C: Occupied orbital coefficients. shape (n_basis, n_occupied)
        h: The core Hamiltonian. shape (n_basis, n_basis)
        Q: The tensor 2J - K. shape (n_basis,) * 4
    Returns:
        The Fock matrix. shape (n_basis, n_basis)
    """
    return h + np.einsum("pqrs,rs->pq", Q, density_matrix(C))


def electronic_energy(C: np.ndarray, h: np.ndarray, F: np.ndarray) -> float:
    """Computes the closed shell electronic energy.

    E = sum_{pq} (h + F)[p, q] (C C^T)[q, p] = <C, (h + F) C>

    The real part is taken so that complex coefficients with a vanishing
    imaginary part are accepted.
    """
    return float(np.real(np.vdot(C, (h + F) @ C)))
