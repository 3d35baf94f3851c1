from .atom import Atom, make_atom
from .molecule import Molecule
from .nuclear import repulsion_energy as nuclear_repulsion_energy
