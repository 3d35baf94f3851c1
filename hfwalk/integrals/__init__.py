from .gaussian import GaussianBasis1d, GaussianBasis3d
from .overlap import overlap_1d, overlap_3d
from .kinetic import laplacian_3d
from .coulomb import boys, one_electron, two_electron
