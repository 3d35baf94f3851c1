import dataclasses

import numpy as np


@dataclasses.dataclass(frozen=True)
class GaussianBasis1d:
    """The family (x-A)^i e^(-a(x-A)^2) for 0 <= i <= max_degree."""

    max_degree: int
    exponent: float
    center: float


@dataclasses.dataclass(frozen=True)
class GaussianBasis3d:
    """The family of Cartesian Gaussians

    (x-Ax)^i (y-Ay)^j (z-Az)^k e^(-a|r-A|^2)

    for 0 <= i, j, k <= max_degree.
    """

    max_degree: int
    exponent: float
    center: np.ndarray  # shape (3,)


def gaussian_3d_to_1d(g: GaussianBasis3d, dim: int) -> GaussianBasis1d:
    return GaussianBasis1d(
        max_degree=g.max_degree, exponent=g.exponent, center=g.center[dim]
    )


def with_degree(g: GaussianBasis3d, max_degree: int) -> GaussianBasis3d:
    """Returns a copy of g with a different max_degree."""
    return dataclasses.replace(g, max_degree=max_degree)


def product_center(g1: GaussianBasis3d, g2: GaussianBasis3d) -> np.ndarray:
    """The center P = (aA + bB) / (a + b) of the Gaussian product."""
    p = g1.exponent + g2.exponent
    return (g1.exponent * g1.center + g2.exponent * g2.center) / p


def overlap_prefactor_1d(g1: GaussianBasis1d, g2: GaussianBasis1d) -> float:
    mu = (g1.exponent * g2.exponent) / (g1.exponent + g2.exponent)
    diff = g1.center - g2.center
    return np.exp(-mu * np.square(diff))


def overlap_prefactor_3d(g1: GaussianBasis3d, g2: GaussianBasis3d) -> float:
    mu = (g1.exponent * g2.exponent) / (g1.exponent + g2.exponent)
    diff = g1.center - g2.center
    return np.exp(-mu * np.dot(diff, diff))
