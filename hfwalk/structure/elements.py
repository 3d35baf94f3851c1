"""Element symbols ordered by atomic number, hydrogen through krypton."""

SYMBOLS = (
    "H", "He",
    "Li", "Be", "B", "C", "N", "O", "F", "Ne",
    "Na", "Mg", "Al", "Si", "P", "S", "Cl", "Ar",
    "K", "Ca", "Sc", "Ti", "V", "Cr", "Mn", "Fe", "Co", "Ni", "Cu", "Zn",
    "Ga", "Ge", "As", "Se", "Br", "Kr",
)  # fmt: skip

_NUMBERS = {symbol.lower(): number for number, symbol in enumerate(SYMBOLS, 1)}


def atomic_number(symbol: str) -> int:
    """Looks up the nuclear charge of an element symbol (case insensitive)."""
    try:
        return _NUMBERS[symbol.strip().lower()]
    except KeyError:
        raise LookupError(f"Unknown element symbol: {symbol!r}") from None
