from collections.abc import Sequence
import dataclasses

from hfwalk.structure import atom as atom_lib


@dataclasses.dataclass(frozen=True)
class Molecule:
    atoms: Sequence[atom_lib.Atom]

    def __post_init__(self):
        object.__setattr__(self, "atoms", tuple(self.atoms))

    @property
    def n_electrons(self) -> int:
        """The number of electrons in the neutral molecule."""
        return sum(atom.number for atom in self.atoms)

    @property
    def n_occupied(self) -> int:
        """The number of doubly occupied orbitals in a closed shell state.

        Raises:
            ValueError: If the number of electrons is odd.
        """
        n_electrons = self.n_electrons
        if n_electrons % 2 != 0:
            raise ValueError(
                f"The number of electrons must be even. Got {n_electrons}"
            )

        return n_electrons // 2
