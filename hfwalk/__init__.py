from . import adapters

from . import integrals
from .integrals.gaussian import GaussianBasis1d, GaussianBasis3d

from . import basis
from .basis.basis_function import BasisFunction
from .basis.contracted_gto import ContractedGTO, PrimitiveType

from . import hartree_fock

from . import structure
from .structure.atom import Atom
from .structure.molecule import Molecule
