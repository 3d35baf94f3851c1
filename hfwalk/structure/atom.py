import dataclasses

import numpy as np

from hfwalk.structure import elements


@dataclasses.dataclass(frozen=True, eq=False)
class Atom:
    symbol: str
    number: int  # Nuclear charge

    # Position in Bohr units. shape (3,)
    position: np.ndarray

    def __post_init__(self):
        position = np.array(self.position, dtype=np.float64)
        if position.shape != (3,):
            raise ValueError(
                f"Expected a position of shape (3,), got {position.shape}"
            )
        if not np.all(np.isfinite(position)):
            raise ValueError(f"Position must be finite, got {position}")
        if self.number < 1:
            raise ValueError(
                f"Nuclear charge must be positive, got {self.number}"
            )

        position.flags.writeable = False
        object.__setattr__(self, "position", position)


def make_atom(symbol: str, x: float, y: float, z: float) -> Atom:
    """Builds an Atom from an element symbol and a position in Bohr."""
    return Atom(
        symbol=symbol,
        number=elements.atomic_number(symbol),
        position=np.array([x, y, z], dtype=np.float64),
    )
