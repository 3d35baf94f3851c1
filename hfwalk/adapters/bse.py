import functools

import basis_set_exchange as bse

from hfwalk.adapters import bse_file
from hfwalk.basis import contracted_gto


def load(basis_name: str, element: int) -> list[contracted_gto.ContractedGTO]:
    """Loads contracted GTOs for a given element from the Basis Set Exchange.

    Raises:
        LookupError: If the basis set does not exist or does not cover the
            element.
    """
    try:
        bse_data = bse.get_basis(basis_name, elements=[element])
    except KeyError as e:
        raise LookupError(
            f"Basis set {basis_name!r} is not available for element {element}"
        ) from e

    return bse_file.element_shells(bse_data, element, basis_name)


def fetcher(basis_name: str):
    """Returns a basis fetcher backed by the Basis Set Exchange."""
    return functools.partial(load, basis_name)
