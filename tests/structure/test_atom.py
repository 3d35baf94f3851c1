import pytest

import numpy as np

from hfwalk.structure import atom as atom_lib
from hfwalk.structure import elements


def test_make_atom():
    atom = atom_lib.make_atom("Li", 0.0, 1.0, -2.0)

    assert atom.symbol == "Li"
    assert atom.number == 3
    assert atom.position.dtype == np.float64
    np.testing.assert_array_equal(atom.position, [0.0, 1.0, -2.0])


def test_position_is_read_only():
    position = np.array([0.0, 0.0, 0.0])
    atom = atom_lib.Atom(symbol="H", number=1, position=position)

    # The atom keeps its own copy.
    position[0] = 1.0
    assert atom.position[0] == 0.0

    with pytest.raises(ValueError):
        atom.position[0] = 1.0


@pytest.mark.parametrize(
    "number, position",
    [
        (1, np.array([0.0, 0.0])),
        (1, np.array([0.0, np.nan, 0.0])),
        (1, np.array([np.inf, 0.0, 0.0])),
        (0, np.array([0.0, 0.0, 0.0])),
    ],
)
def test_invalid_atom(number, position):
    with pytest.raises(ValueError):
        atom_lib.Atom(symbol="H", number=number, position=position)


@pytest.mark.parametrize(
    "symbol, expected",
    [("H", 1), ("he", 2), ("O", 8), ("Kr", 36)],
)
def test_atomic_number(symbol, expected):
    assert elements.atomic_number(symbol) == expected


def test_atomic_number_unknown_symbol():
    with pytest.raises(LookupError):
        elements.atomic_number("Xx")
