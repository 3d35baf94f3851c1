"""Reads basis sets stored in the Basis Set Exchange JSON format."""

from collections.abc import Mapping, Sequence
import functools
import os
from typing import Any

from basis_set_exchange import fileio
import numpy as np

from hfwalk.basis import contracted_gto

_STR_TO_PRIMITIVE_TYPE = {
    "gto": contracted_gto.PrimitiveType.CARTESIAN,
    "gto_cartesian": contracted_gto.PrimitiveType.CARTESIAN,
    "gto_spherical": contracted_gto.PrimitiveType.SPHERICAL,
}


def parse_shells(
    electron_shells: Sequence[Mapping[str, Any]],
) -> list[contracted_gto.ContractedGTO]:
    """Converts BSE electron shells to contracted GTOs."""
    contracted_gtos = []
    for shell in electron_shells:
        angular_momentum = list(shell["angular_momentum"])
        if len(angular_momentum) == 1:
            angular_momentum *= len(shell["coefficients"])

        contracted_gtos.append(
            contracted_gto.ContractedGTO(
                primitive_type=_STR_TO_PRIMITIVE_TYPE[shell["function_type"]],
                angular_momentum=tuple(angular_momentum),
                exponents=np.array(shell["exponents"], dtype=np.float64),
                coefficients=np.array(shell["coefficients"], dtype=np.float64),
            )
        )

    return contracted_gtos


def element_shells(
    bse_data: Mapping[str, Any], element: int, basis_name: str
) -> list[contracted_gto.ContractedGTO]:
    """Extracts the contracted GTOs of one element from a BSE document."""
    elements = bse_data.get("elements", {})
    if str(element) not in elements:
        raise LookupError(
            f"Basis set {basis_name!r} has no entry for element {element}"
        )

    return parse_shells(elements[str(element)]["electron_shells"])


def load_file(
    path: str | os.PathLike, element: int
) -> list[contracted_gto.ContractedGTO]:
    """Loads contracted GTOs for a given element from a BSE JSON file.

    Raises:
        LookupError: If the file cannot be read or has no entry for the
            element.
    """
    path = os.fspath(path)
    try:
        bse_data = fileio.read_json_basis(path)
    except OSError as e:
        raise LookupError(f"Cannot read basis set file {path!r}") from e

    return element_shells(bse_data, element, path)


def file_fetcher(path: str | os.PathLike):
    """Returns a basis fetcher reading from a BSE JSON file."""
    return functools.partial(load_file, path)
