import pytest

from hfwalk.adapters import bse
from hfwalk.hartree_fock import scf
from hfwalk.structure import atom as atom_lib
from hfwalk.structure import molecule as molecule_lib


@pytest.fixture(scope="session")
def h2_molecule():
    return molecule_lib.Molecule(
        atoms=[
            atom_lib.make_atom("H", 0.0, 0.0, 0.0),
            atom_lib.make_atom("H", 2.0, 0.0, 0.0),
        ]
    )


@pytest.fixture(scope="session")
def h2_context(h2_molecule):
    """The integral tables of H2 in the 6-21G basis."""
    return scf.build_context(h2_molecule, bse.fetcher("6-21g"))
