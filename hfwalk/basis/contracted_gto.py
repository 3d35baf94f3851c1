import dataclasses
import enum

import numpy as np


class PrimitiveType(enum.Enum):
    """The type of primitive Gaussian function."""

    CARTESIAN = 1
    SPHERICAL = 2


@dataclasses.dataclass
class ContractedGTO:
    """A contracted Gaussian-type orbital shell group, as read from a basis set.

    All shells in the group share the exponents. A contracted basis function
    of shell s is

    psi(r) = sum_{d=1}^K c_d * N(alpha_d, i, j, k) * G(r; A, alpha_d, i, j, k)

    where:
    1. A = (A_x, A_y, A_z) is the center of the atom the group is placed on
    2. alpha_d = exponents[d] for 0 <= d < K
    3. c_d = coefficients[s, d]
    4. i + j + k = angular_momentum[s]
    5. G(r; A, alpha, i, j, k) = (x-A_x)^i (y-A_y)^j (z-A_z)^k e^(-alpha|r-A|^2)
    6. N(alpha, i, j, k) is the inverse of the L^2 norm of G
    """

    primitive_type: PrimitiveType

    # The angular momentum for each shell. shape (N_shell,)
    angular_momentum: tuple[int, ...]

    # shape (K,)
    exponents: np.ndarray

    # shape (N_shell, K)
    coefficients: np.ndarray

    def __post_init__(self):
        self.exponents = np.asarray(self.exponents, dtype=np.float64)
        self.coefficients = np.asarray(self.coefficients, dtype=np.float64)

        if self.coefficients.shape != (
            len(self.angular_momentum),
            self.exponents.shape[0],
        ):
            raise ValueError(
                f"Expected coefficients of shape "
                f"{(len(self.angular_momentum), self.exponents.shape[0])}, "
                f"got {self.coefficients.shape}"
            )
