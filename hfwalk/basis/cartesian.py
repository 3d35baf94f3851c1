import functools

import numpy as np

from hfwalk.integrals import gaussian
from hfwalk.integrals import overlap


@functools.cache
def _cartesian_powers(l: int) -> tuple[tuple[int, int, int], ...]:
    return tuple(
        (i, j, l - i - j)
        for i in range(l, -1, -1)
        for j in range(l - i, -1, -1)
    )


def generate_cartesian_powers(l: int) -> np.ndarray:
    """Generates the Cartesian powers for the given angular momentum.

    The powers are ordered x-major, e.g. for l=1: x, y, z.

    Returns:
        A numpy array of shape (M, 3) where M = (l + 2 choose 2) containing
        every triple (i, j, k) of non-negative integers with i + j + k = l.
    """
    if l < 0:
        raise ValueError(f"Angular momentum must be non-negative. Got {l}")

    return np.array(_cartesian_powers(l), dtype=np.int32)


def compute_normalization_constants(
    exponent: float, powers: np.ndarray
) -> np.ndarray:
    """Computes the inverse L^2 norms of primitive Cartesian Gaussians.

    Args:
        exponent: The exponent of the Gaussian primitives.
        powers: An array of shape (N, 3) with the Cartesian powers
                (i, j, k) of each primitive.

    Returns:
        An array of shape (N,).
    """
    powers = np.asarray(powers)
    g = gaussian.GaussianBasis3d(
        max_degree=int(np.max(powers)),
        exponent=exponent,
        center=np.zeros(3),
    )

    S = overlap.overlap_3d(g, g)
    ix, iy, iz = powers.T
    return 1.0 / np.sqrt(S[ix, iy, iz, ix, iy, iz])
