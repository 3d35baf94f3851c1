from .one_electron import (
    overlap_matrix,
    kinetic_matrix,
    nuclear_attraction_matrix,
    core_hamiltonian_matrix,
)
from .two_electron import coulomb_tensor, exchange_tensor, rhf_tensor
from .fock import fock_matrix, electronic_energy
from . import scf
