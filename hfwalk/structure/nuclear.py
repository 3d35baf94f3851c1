import itertools

import numpy as np

from hfwalk.structure import molecule


def repulsion_energy(mol: molecule.Molecule) -> float:
    """Computes the nuclear repulsion energy.

    E_NN = 1/2 sum_{i != j} Z_i Z_j / |R_i - R_j|

    Every unordered pair appears twice in the ordered sum so we sum once
    over the pairs instead.
    """
    energy = 0.0

    for atom1, atom2 in itertools.combinations(mol.atoms, 2):
        dist = np.linalg.norm(atom1.position - atom2.position)
        energy += (atom1.number * atom2.number) / dist

    return float(energy)
