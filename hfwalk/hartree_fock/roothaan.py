import numpy as np
import scipy.linalg


def orthogonalize_basis(
    S: np.ndarray, linear_dep_threshold: float = 1e-8
) -> np.ndarray:
    """
    Computes the canonical orthogonalization matrix X = U s^(-1/2).

    Args:
        S: Overlap matrix (N, N)
        linear_dep_threshold: The smallest accepted eigenvalue of S.

    Returns:
        X: Transformation matrix of shape (N, N). Satisfies X.T @ S @ X = I.

    Raises:
        numpy.linalg.LinAlgError: If S has an eigenvalue below
            linear_dep_threshold, i.e. the basis is numerically linearly
            dependent.
    """
    # S = U * s * U.T
    vals, vecs = np.linalg.eigh(S)

    if vals[0] < linear_dep_threshold:
        raise np.linalg.LinAlgError(
            f"The overlap matrix is numerically singular: smallest eigenvalue "
            f"{vals[0]:.3e} is below {linear_dep_threshold:.3e}"
        )

    return vecs * (1.0 / np.sqrt(vals))


def solve(F: np.ndarray, X: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """
    Solves the Roothaan-Hall equations FC = SCE.

    This is the generalized symmetric eigenproblem for the pair (F, S),
    reduced to a standard one by the orthogonalizer of S.

    Args:
        F: The Fock matrix in the atomic orbital basis. shape (N, N)
        X: The orthogonalization matrix such that X.T @ S @ X = I.
            shape (N, N).

    Returns:
        orbital_energies: Ascending, shape (N,).
        coefficients: Matrix of shape (N, N). Column n is the orbital with
            energy orbital_energies[n].
    """
    # F' = X.T * F * X
    F_prime = X.T @ F @ X

    # Only the lower triangle is read so F' is treated as exactly symmetric.
    epsilon, C_prime = scipy.linalg.eigh(F_prime)

    # C = X * C'
    return epsilon, X @ C_prime
