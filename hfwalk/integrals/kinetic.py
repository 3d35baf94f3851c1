import numpy as np

from hfwalk.integrals import gaussian
from hfwalk.integrals import overlap


def _laplacian_1d_from_overlap_1d(S: np.ndarray, b: float) -> np.ndarray:
    """Applies the second derivative to the second Gaussian.

    Formula:
    L[i, j] = j(j-1)S[i, j-2] - 2b(2j+1)S[i, j] + 4b^2 S[i, j+2]

    Args:
        S: A 1D overlap matrix whose second Gaussian has been boosted by two
           degrees. Shape: (nrows, ncols) with ncols >= 3.
        b: The exponent of the second Gaussian.

    Returns:
        An array L of shape (nrows, ncols - 2).
    """
    n_cols = S.shape[1] - 2
    columns = []
    for j in range(n_cols):
        column = -2 * b * (2 * j + 1) * S[:, j] + 4 * b**2 * S[:, j + 2]
        if j >= 2:
            column += j * (j - 1) * S[:, j - 2]
        columns.append(column)

    return np.stack(columns, axis=1)


def laplacian_3d(
    g1: gaussian.GaussianBasis3d, g2: gaussian.GaussianBasis3d
) -> np.ndarray:
    """Computes the matrix elements of the Laplacian operator.

    L[ix,iy,iz,jx,jy,jz] = integral G1 (d^2/dx^2 + d^2/dy^2 + d^2/dz^2) G2

    which splits into
      L_x S_y S_z + S_x L_y S_z + S_x S_y L_z

    Multiply by -0.5 to get the kinetic energy.

    Returns:
        An array with shape (d1+1, d1+1, d1+1, d2+1, d2+1, d2+1).
    """
    # The second derivative raises the degree of g2 by two.
    g2_boosted = gaussian.GaussianBasis3d(
        max_degree=g2.max_degree + 2, exponent=g2.exponent, center=g2.center
    )

    S_x, S_y, S_z = [
        overlap.overlap_1d(
            gaussian.gaussian_3d_to_1d(g1, dim),
            gaussian.gaussian_3d_to_1d(g2_boosted, dim),
        )
        for dim in range(3)
    ]
    L_x, L_y, L_z = [
        _laplacian_1d_from_overlap_1d(S, g2.exponent) for S in (S_x, S_y, S_z)
    ]

    # Drop the boosted columns of the overlaps.
    S_x, S_y, S_z = S_x[:, :-2], S_y[:, :-2], S_z[:, :-2]

    return (
        np.einsum("ad,be,cf->abcdef", L_x, S_y, S_z)
        + np.einsum("ad,be,cf->abcdef", S_x, L_y, S_z)
        + np.einsum("ad,be,cf->abcdef", S_x, S_y, L_z)
    )
