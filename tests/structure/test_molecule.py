import pytest

from hfwalk.structure import atom as atom_lib
from hfwalk.structure import molecule as molecule_lib


def test_h2():
    molecule = molecule_lib.Molecule(
        atoms=[
            atom_lib.make_atom("H", 0.0, 0.0, 0.0),
            atom_lib.make_atom("H", 2.0, 0.0, 0.0),
        ]
    )

    assert isinstance(molecule.atoms, tuple)
    assert molecule.n_electrons == 2
    assert molecule.n_occupied == 1


def test_water():
    molecule = molecule_lib.Molecule(
        atoms=[
            atom_lib.make_atom("O", 0.0, 0.0, 0.0),
            atom_lib.make_atom("H", 1.8, 0.0, 0.0),
            atom_lib.make_atom("H", 0.0, 1.8, 0.0),
        ]
    )

    assert molecule.n_electrons == 10
    assert molecule.n_occupied == 5


def test_odd_electron_count():
    molecule = molecule_lib.Molecule(
        atoms=[atom_lib.make_atom("H", 0.0, 0.0, 0.0)]
    )

    assert molecule.n_electrons == 1
    with pytest.raises(ValueError):
        molecule.n_occupied
