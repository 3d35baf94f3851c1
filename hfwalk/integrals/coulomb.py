import numpy as np
from scipy import special

from hfwalk.integrals import gaussian

# Below this threshold the Boys function is evaluated with its first order
# Taylor expansion. The truncation error x^2 / (2(2n+5)) is far below machine
# epsilon there.
_SMALL_X_THRESHOLD = 1e-12


def boys(n, x):
    r"""Computes the Boys function F_n(x) = integral_0^1 t^(2n) e^(-x t^2) dt.

    For x above the threshold we use

    $$
    F_n(x) = \frac{\Gamma(n + 1/2) \cdot P(n + 1/2, x)}{2 x^{n + 1/2}}
    $$

    where P is the regularized lower incomplete gamma function, and below it

    $$
    F_n(x) \approx \frac{1}{2n + 1} - \frac{x}{2n + 3}
    $$

    Args:
        n: The order. An int or an integer array.
        x: The non-negative argument. Broadcasts against n.
    """
    n = np.asarray(n, dtype=np.float64)
    x = np.asarray(x, dtype=np.float64)

    safe_x = np.maximum(x, _SMALL_X_THRESHOLD)
    exact = (
        special.gamma(n + 0.5)
        * special.gammainc(n + 0.5, safe_x)
        / (2 * safe_x ** (n + 0.5))
    )
    limit = 1.0 / (2 * n + 1) - x / (2 * n + 3)

    return np.where(x < _SMALL_X_THRESHOLD, limit, exact)


def _vertical_transfer(
    V: np.ndarray, size_new: int, s: float, p: float, PA: float, PC: float
) -> np.ndarray:
    """Adds a Cartesian degree axis of size size_new to V.

    Axis 0 of V is the auxiliary order n. The new axis i is appended last:

    V[n,...,i] =    (P - A)V[n,...,i-1]
                -(s/p)(P-C)V[n+1,...,i-1]
               +((i-1)/(2p))V[n,...,i-2]
         -(((i-1)s)/(2p^2))V[n+1,...,i-2]

    Each step consumes one auxiliary order, so the output keeps the first
    V.shape[0] - size_new + 1 orders.
    """
    levels = [V]
    for i in range(1, size_new):
        prev = levels[i - 1]
        v_i = PA * prev[:-1] - (s / p) * PC * prev[1:]
        if i > 1:
            prev2 = levels[i - 2]
            v_i = (
                v_i
                + ((i - 1) / (2 * p)) * prev2[:-2]
                - ((i - 1) * s / (2 * p**2)) * prev2[1:-1]
            )
        levels.append(v_i)

    n_valid = V.shape[0] - size_new + 1
    return np.stack([level[:n_valid] for level in levels], axis=-1)


def _V(
    g1: gaussian.GaussianBasis3d,
    g2: gaussian.GaussianBasis3d,
    s: float,
    C: np.ndarray,
) -> np.ndarray:
    """Auxiliary integrals with all of the degree on g1.

    The degree of g2 is ignored.

    Returns:
        An array of shape (d1+1, d1+1, d1+1) indexed by [ix, iy, iz].
    """
    p = g1.exponent + g2.exponent
    P = gaussian.product_center(g1, g2)
    A = g1.center

    d = g1.max_degree
    K = gaussian.overlap_prefactor_3d(g1, g2)
    V = K * boys(np.arange(3 * d + 1), s * np.sum(np.square(P - C)))

    for dim in range(3):
        V = _vertical_transfer(V, d + 1, s, p, P[dim] - A[dim], P[dim] - C[dim])

    return V[0]


def _horizontal_transfer(
    I: np.ndarray, axis: int, size_new: int, AB: float
) -> np.ndarray:
    """Moves degree from the Gaussian on `axis` to a new last axis j.

    Formula: I[...,i,...,j] = (A - B)I[...,i,...,j-1] + I[...,i+1,...,j-1]

    The source axis shrinks by size_new - 1.
    """
    I_0 = np.moveaxis(I, axis, 0)

    columns = [I_0]
    for _ in range(1, size_new):
        prev = columns[-1]
        columns.append(AB * prev[:-1] + prev[1:])

    n_valid = I_0.shape[0] - size_new + 1
    I_new = np.stack([column[:n_valid] for column in columns], axis=-1)

    return np.moveaxis(I_new, 0, axis)


def _electron_transfer(
    I: np.ndarray, axis: int, size_new: int, p: float, q: float, alpha: float
) -> np.ndarray:
    """Moves degree from electron one (on `axis`) to electron two.

    The new axis k is appended last:

    I[...,i,...,k] =
      alpha I[...,i,...,k-1]
      +(i/(2q))I[...,i-1,...,k-1]
      +((k-1)/(2q))I[...,i,...,k-2]
      -(p/q)I[...,i+1,...,k-1]

    where alpha = -(b(A - B) + d(C - D))/q. The source axis shrinks by
    size_new - 1.
    """
    I_0 = np.moveaxis(I, axis, 0)
    size_src = I_0.shape[0]
    i_index = np.arange(size_src).reshape((-1,) + (1,) * (I_0.ndim - 1))

    levels = [I_0]
    for k in range(1, size_new):
        prev = levels[k - 1]
        # I[i-1, k-1], zero for i = 0.
        down = np.concatenate([np.zeros_like(prev[:1]), prev[:-2]])

        I_k = (
            alpha * prev[:-1]
            + (i_index[: size_src - k] / (2 * q)) * down
            - (p / q) * prev[1:]
        )
        if k > 1:
            I_k = I_k + ((k - 1) / (2 * q)) * levels[k - 2][:-2]
        levels.append(I_k)

    n_valid = size_src - size_new + 1
    I_new = np.stack([level[:n_valid] for level in levels], axis=-1)

    return np.moveaxis(I_new, 0, axis)


def one_electron(
    g1: gaussian.GaussianBasis3d,
    g2: gaussian.GaussianBasis3d,
    C: np.ndarray,
) -> np.ndarray:
    """Computes the one electron Coulomb integral with center C.

    I[ix,iy,iz,jx,jy,jz] = integral G1(r) G2(r) / |r - C| dr

    where G1 has center A, exponent a and G2 has center B, exponent b.

    Returns:
      An array of shape (d1+1, d1+1, d1+1, d2+1, d2+1, d2+1).
    """
    a, A, d1 = g1.exponent, g1.center, g1.max_degree
    b, B, d2 = g2.exponent, g2.center, g2.max_degree

    # All of the degree starts on g1 and is moved to g2 afterwards.
    padded_g1 = gaussian.with_degree(g1, d1 + d2)
    I = (2 * np.pi / (a + b)) * _V(padded_g1, g2, a + b, C)

    for dim in range(3):
        I = _horizontal_transfer(I, dim, d2 + 1, A[dim] - B[dim])

    return I


def two_electron(
    g1: gaussian.GaussianBasis3d,
    g2: gaussian.GaussianBasis3d,
    g3: gaussian.GaussianBasis3d,
    g4: gaussian.GaussianBasis3d,
) -> np.ndarray:
    """Computes the two electron Coulomb repulsion integral.

    I[i, j, k, l] =
        integral G1(r1) G2(r1) G3(r2) G4(r2) / |r1 - r2| dr1 dr2

    where i, j, k, l are the Cartesian powers (x, y, z) of G1, G2, G3, G4.
    This is (12|34) in chemists' notation.

    Returns:
        An array of shape
        (d1+1, d1+1, d1+1, d2+1, d2+1, d2+1,
         d3+1, d3+1, d3+1, d4+1, d4+1, d4+1)
    """
    d1, d2, d3, d4 = (g.max_degree for g in (g1, g2, g3, g4))
    a, b, c, d = (g.exponent for g in (g1, g2, g3, g4))
    A, B, C, D = (g.center for g in (g1, g2, g3, g4))

    p = a + b
    q = c + d
    s = (p * q) / (p + q)
    Q = gaussian.product_center(g3, g4)

    # All of the degree starts on g1. It is moved to g3 by electron transfer
    # and then to g2 and g4 by horizontal transfers.
    padded_g1 = gaussian.with_degree(g1, d1 + d2 + d3 + d4)
    prefactor = (
        2
        * np.power(np.pi, 5 / 2)
        / (p * q * np.sqrt(p + q))
        * gaussian.overlap_prefactor_3d(g3, g4)
    )
    I = prefactor * _V(padded_g1, g2, s, Q)

    # Axes: g1 (x,y,z), g3 (x,y,z)
    for dim in range(3):
        alpha = -(b * (A[dim] - B[dim]) + d * (C[dim] - D[dim])) / q
        I = _electron_transfer(I, dim, d3 + d4 + 1, p, q, alpha)

    # Axes: g1, g3, g2
    for dim in range(3):
        I = _horizontal_transfer(I, dim, d2 + 1, A[dim] - B[dim])

    # Axes: g1, g3, g2, g4
    for dim in range(3):
        I = _horizontal_transfer(I, 3 + dim, d4 + 1, C[dim] - D[dim])

    return np.moveaxis(I, [3, 4, 5], [6, 7, 8])
