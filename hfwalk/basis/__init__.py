from .contracted_gto import ContractedGTO, PrimitiveType
from .basis_function import BasisFunction, BasisFetcher, build as build_basis
from .operators import (
    overlap,
    laplacian,
    kinetic,
    nuclear_attraction,
    coulomb,
)
