"""Restricted Hartree-Fock for H2 in the 6-21G basis.

Run with

    python -m hfwalk.walkthrough

Each stage of the calculation is logged: the molecule, the basis, the
integral tables, the SCF loop and the final energy.
"""

import logging
from typing import Optional

import numpy as np

from hfwalk.adapters import bse
from hfwalk.basis import basis_function
from hfwalk.hartree_fock import scf
from hfwalk.structure import atom as atom_lib
from hfwalk.structure import molecule as molecule_lib

logger = logging.getLogger(__name__)

# Bohr
BOND_LENGTH = 2.0

BASIS_NAME = "6-21g"

# The total energy of H2 in 6-21G at BOND_LENGTH, in Hartree.
REFERENCE_ENERGY = -1.0802700699226433
REFERENCE_TOLERANCE = 1e-8


def build_h2(d: float = BOND_LENGTH) -> molecule_lib.Molecule:
    """Two hydrogen atoms on the x axis, d Bohr apart."""
    return molecule_lib.Molecule(
        atoms=[
            atom_lib.make_atom("H", 0.0, 0.0, 0.0),
            atom_lib.make_atom("H", d, 0.0, 0.0),
        ]
    )


def run(
    d: float = BOND_LENGTH,
    basis_fetcher: Optional[basis_function.BasisFetcher] = None,
    options: scf.Options = scf.Options(),
) -> scf.Result:
    """Computes the RHF ground state of H2 at bond length d.

    Args:
        d: The bond length in Bohr.
        basis_fetcher: Maps an atomic number to its contracted GTOs.
            Defaults to BASIS_NAME from the Basis Set Exchange.
        options: SCF options.
    """
    if basis_fetcher is None:
        basis_fetcher = bse.fetcher(BASIS_NAME)

    molecule = build_h2(d)
    logger.info(
        "Molecule: %d atoms, %d electrons, %d occupied orbitals",
        len(molecule.atoms),
        molecule.n_electrons,
        molecule.n_occupied,
    )
    for atom in molecule.atoms:
        logger.info("  %s at %s", atom.symbol, atom.position)

    context = scf.build_context(
        molecule, basis_fetcher, options.linear_dep_threshold
    )
    logger.info("Basis functions: %d", context.n_basis)
    for n, f in enumerate(context.basis):
        logger.info(
            "  %d: atom %d, powers %s, %d primitives",
            n,
            f.atom_index,
            f.powers,
            f.n_primitives,
        )

    with np.printoptions(precision=6, suppress=True):
        logger.debug("Overlap matrix S:\n%s", context.S)
        logger.debug("Kinetic matrix T:\n%s", context.T)
        logger.debug("Nuclear attraction matrix A:\n%s", context.A)
        logger.debug("Core Hamiltonian h:\n%s", context.h)
    logger.info("Nuclear repulsion energy: %.12f", context.nuclear_energy)

    result = scf.run(context, options)

    with np.printoptions(precision=6, suppress=True):
        logger.debug("Orbital energies: %s", result.orbital_energies)
        logger.debug("Occupied orbitals:\n%s", result.orbitals)

    return result


def main(log_level: int = logging.INFO):
    """Runs the walkthrough and checks the total energy against the reference.

    Raises:
        RuntimeError: If the total energy misses REFERENCE_ENERGY by more
            than REFERENCE_TOLERANCE.
    """
    logging.basicConfig(level=log_level, format="%(message)s")

    result = run()
    error = abs(result.total_energy - REFERENCE_ENERGY)

    logger.info("Electronic energy: %.12f", result.electronic_energy)
    logger.info("Total energy:      %.16f", result.total_energy)
    logger.info("Reference energy:  %.16f", REFERENCE_ENERGY)
    logger.info("Error:             %.3e", error)

    if error > REFERENCE_TOLERANCE:
        raise RuntimeError(
            f"The total energy {result.total_energy:.16f} differs from the "
            f"reference {REFERENCE_ENERGY:.16f} by {error:.3e}"
        )


if __name__ == "__main__":
    main()
