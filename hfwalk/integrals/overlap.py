import numpy as np

from hfwalk.integrals import gaussian


def _vertical_transfer(
    s_00: float, g1: gaussian.GaussianBasis1d, g2: gaussian.GaussianBasis1d
) -> np.ndarray:
    """Computes the column S[:, 0] up to degree d1 + d2.

    Formula: S[i, 0] = (P - A) * S[i-1, 0] + ((i-1)/2p) * S[i-2, 0]
    """
    p = g1.exponent + g2.exponent
    PA = (g1.exponent * g1.center + g2.exponent * g2.center) / p - g1.center

    column = [s_00]
    for i in range(1, g1.max_degree + g2.max_degree + 1):
        s_i = PA * column[i - 1]
        if i > 1:
            s_i += ((i - 1) / (2 * p)) * column[i - 2]
        column.append(s_i)

    return np.array(column, dtype=np.float64)


def _horizontal_transfer(
    s_col0: np.ndarray,
    g1: gaussian.GaussianBasis1d,
    g2: gaussian.GaussianBasis1d,
) -> np.ndarray:
    """Shifts degree from the first Gaussian to the second.

    Formula: S[i, j] = (A - B) * S[i, j-1] + S[i+1, j-1]

    The j-th column is valid for i < len(s_col0) - j so only the first
    g1.max_degree + 1 rows are kept.
    """
    AB = g1.center - g2.center
    columns = [s_col0]
    for _ in range(g2.max_degree):
        prev = columns[-1]
        columns.append(AB * prev[:-1] + prev[1:])

    n_rows = g1.max_degree + 1
    return np.stack([column[:n_rows] for column in columns], axis=1)


def overlap_1d(
    g1: gaussian.GaussianBasis1d, g2: gaussian.GaussianBasis1d
) -> np.ndarray:
    """Computes the 1D overlap matrix between two Gaussians.

    S[i, j] = integral (x-A)^i e^(-a(x-A)^2) (x-B)^j e^(-b(x-B)^2) dx

    Returns:
      An array S of shape (g1.max_degree + 1, g2.max_degree + 1).
    """
    p = g1.exponent + g2.exponent
    s_00 = np.sqrt(np.pi / p) * gaussian.overlap_prefactor_1d(g1, g2)

    return _horizontal_transfer(_vertical_transfer(s_00, g1, g2), g1, g2)


def overlap_3d(
    g1: gaussian.GaussianBasis3d, g2: gaussian.GaussianBasis3d
) -> np.ndarray:
    """Computes the overlap integrals between two 3D Gaussian families.

    The 3D integral factors into x, y and z parts:
      S[ix,iy,iz,jx,jy,jz] = S_x[ix, jx] * S_y[iy, jy] * S_z[iz, jz]

    Returns:
        An array S with shape (d1+1, d1+1, d1+1, d2+1, d2+1, d2+1).
    """
    S_x, S_y, S_z = [
        overlap_1d(
            gaussian.gaussian_3d_to_1d(g1, dim),
            gaussian.gaussian_3d_to_1d(g2, dim),
        )
        for dim in range(3)
    ]

    return np.einsum("ad,be,cf->abcdef", S_x, S_y, S_z)
