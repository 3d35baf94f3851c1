from collections.abc import Sequence
import dataclasses
from typing import Callable

import numpy as np

from hfwalk.basis import cartesian
from hfwalk.basis import contracted_gto
from hfwalk.structure import molecule as molecule_lib

# Fetches the contracted GTOs of a basis set for a given atomic number.
BasisFetcher = Callable[[int], Sequence[contracted_gto.ContractedGTO]]


@dataclasses.dataclass(frozen=True, eq=False)
class BasisFunction:
    """A single contracted Cartesian Gaussian basis function.

    psi(r) = sum_d coefficients[d] * G(r; center, exponents[d], powers)

    The coefficients already include the primitive normalization constants.
    """

    # shape (3,)
    center: np.ndarray

    # The Cartesian powers (i, j, k).
    powers: tuple[int, int, int]

    # shape (K,)
    exponents: np.ndarray

    # shape (K,)
    coefficients: np.ndarray

    # The index of the atom this function is centered on.
    atom_index: int = 0

    @property
    def angular_momentum(self) -> int:
        return sum(self.powers)

    @property
    def max_degree(self) -> int:
        """The largest Cartesian power."""
        return max(self.powers)

    @property
    def n_primitives(self) -> int:
        return self.exponents.shape[0]


def expand_gto(
    gto: contracted_gto.ContractedGTO,
    center: np.ndarray,
    atom_index: int = 0,
) -> list[BasisFunction]:
    """Expands a contracted GTO into basis functions at the given center.

    The functions are ordered by shell and then by Cartesian powers.
    """
    if gto.primitive_type != contracted_gto.PrimitiveType.CARTESIAN:
        raise NotImplementedError(
            "Only Cartesian contracted GTOs are supported currently."
        )

    functions = []
    for l, shell_coefficients in zip(gto.angular_momentum, gto.coefficients):
        powers = cartesian.generate_cartesian_powers(l)

        # shape (K, N_cart)
        norms = np.stack(
            [
                cartesian.compute_normalization_constants(a, powers)
                for a in gto.exponents
            ]
        )

        for n, (i, j, k) in enumerate(powers.tolist()):
            functions.append(
                BasisFunction(
                    center=np.asarray(center, dtype=np.float64),
                    powers=(i, j, k),
                    exponents=gto.exponents,
                    coefficients=shell_coefficients * norms[:, n],
                    atom_index=atom_index,
                )
            )

    return functions


def build(
    molecule: molecule_lib.Molecule, basis_fetcher: BasisFetcher
) -> list[BasisFunction]:
    """Places a basis set on every atom of the molecule.

    The order is fixed: by atom, then by the basis set's own shell order,
    then by Cartesian powers. All matrices and tensors are indexed against
    this order.
    """
    basis = []
    for atom_index, atom in enumerate(molecule.atoms):
        for gto in basis_fetcher(atom.number):
            basis.extend(expand_gto(gto, atom.position, atom_index))

    return basis
