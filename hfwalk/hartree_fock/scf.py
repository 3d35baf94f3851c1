import dataclasses
import logging
from typing import Callable, Optional

import numpy as np

from hfwalk.basis import basis_function
from hfwalk.hartree_fock import fock
from hfwalk.hartree_fock import one_electron
from hfwalk.hartree_fock import roothaan
from hfwalk.hartree_fock import two_electron
from hfwalk.structure import molecule as molecule_lib
from hfwalk.structure import nuclear

logger = logging.getLogger(__name__)

SolverCallback = Callable[["State"], None]


@dataclasses.dataclass
class Options:
    # The SCF map is applied exactly this many times. There is no
    # convergence test.
    n_iterations: int = 100

    # Seed of the random initial guess.
    seed: int = 2077

    # The smallest accepted eigenvalue of the overlap matrix.
    linear_dep_threshold: float = 1e-8

    callback_interval: int = 10
    callback: Optional[SolverCallback] = None

    def __post_init__(self):
        if self.n_iterations < 0:
            raise ValueError("n_iterations must be >= 0")
        if self.callback_interval < 1:
            raise ValueError("callback_interval must be >= 1")


@dataclasses.dataclass
class Context:
    """The integral tables of a molecule. Computed once before the SCF loop."""

    molecule: molecule_lib.Molecule
    basis: list[basis_function.BasisFunction]

    # One electron matrices. shape (n_basis, n_basis)
    S: np.ndarray
    T: np.ndarray
    A: np.ndarray
    h: np.ndarray

    # Two electron tensors. shape (n_basis,) * 4
    J: np.ndarray
    K: np.ndarray
    Q: np.ndarray

    # Orthogonalizer matrix. shape (n_basis, n_basis)
    X: np.ndarray

    nuclear_energy: float
    n_occupied: int

    @property
    def n_basis(self) -> int:
        return len(self.basis)


@dataclasses.dataclass
class State:
    iteration: int
    context: Context

    # Occupied orbital coefficients. shape (n_basis, n_occupied)
    C: np.ndarray

    # Fock matrix built from C. shape (n_basis, n_basis)
    F: np.ndarray

    electronic_energy: float
    total_energy: float


@dataclasses.dataclass
class Result:
    iterations: int

    electronic_energy: float
    nuclear_energy: float
    total_energy: float

    # The integral tables used in the calculation.
    context: Context

    # Eigenvalues of the final Fock matrix. shape (n_basis,)
    orbital_energies: np.ndarray

    # The occupied molecular orbital coefficients.
    # shape (n_basis, n_occupied)
    orbitals: np.ndarray

    # C C^T for the occupied orbitals.
    # shape (n_basis, n_basis)
    density: np.ndarray


def build_context(
    molecule: molecule_lib.Molecule,
    basis_fetcher: basis_function.BasisFetcher,
    linear_dep_threshold: float = 1e-8,
) -> Context:
    """Places the basis on the molecule and computes all integral tables."""
    n_occupied = molecule.n_occupied
    basis = basis_function.build(molecule, basis_fetcher)
    logger.info(
        "Built %d basis functions on %d atoms", len(basis), len(molecule.atoms)
    )

    S = one_electron.overlap_matrix(basis)
    T = one_electron.kinetic_matrix(basis)
    A = one_electron.nuclear_attraction_matrix(basis, molecule.atoms)

    J = two_electron.coulomb_tensor(basis)
    K = two_electron.exchange_tensor(J)

    return Context(
        molecule=molecule,
        basis=basis,
        S=S,
        T=T,
        A=A,
        h=T + A,
        J=J,
        K=K,
        Q=two_electron.rhf_tensor(J, K),
        X=roothaan.orthogonalize_basis(S, linear_dep_threshold),
        nuclear_energy=nuclear.repulsion_energy(molecule),
        n_occupied=n_occupied,
    )


def initial_coefficients(
    n_basis: int, n_occupied: int, seed: int = 2077
) -> np.ndarray:
    """A random initial guess with orthonormal columns.

    Returns:
        The Q factor of a matrix of uniform [0, 1) draws.
        shape (n_basis, n_occupied)
    """
    if not 0 < n_occupied <= n_basis:
        raise ValueError(
            f"Cannot place {n_occupied} occupied orbitals in {n_basis} "
            "basis functions"
        )

    rng = np.random.default_rng(seed)
    C, _ = np.linalg.qr(rng.random((n_basis, n_occupied)))

    return C


def scf_update(C: np.ndarray, context: Context) -> np.ndarray:
    """One application of the SCF map.

    Builds F(C), solves F C' = S C' E and returns the eigenvectors of the
    n_occupied lowest eigenvalues.
    """
    F = fock.fock_matrix(C, context.h, context.Q)
    _, C_all = roothaan.solve(F, context.X)

    return C_all[:, : context.n_occupied]


def electronic_energy(C: np.ndarray, context: Context) -> float:
    F = fock.fock_matrix(C, context.h, context.Q)
    return fock.electronic_energy(C, context.h, F)


def total_energy(C: np.ndarray, context: Context) -> float:
    """The electronic energy of C plus the nuclear repulsion."""
    return electronic_energy(C, context) + context.nuclear_energy


def _build_state(iteration: int, C: np.ndarray, context: Context) -> State:
    F = fock.fock_matrix(C, context.h, context.Q)
    energy = fock.electronic_energy(C, context.h, F)

    return State(
        iteration=iteration,
        context=context,
        C=C,
        F=F,
        electronic_energy=energy,
        total_energy=energy + context.nuclear_energy,
    )


def _maybe_run_callback(state: State, options: Options) -> None:
    if state.iteration % options.callback_interval != 0:
        return

    logger.debug(
        "Iteration %d: total energy = %.12f",
        state.iteration,
        state.total_energy,
    )
    if options.callback is not None:
        options.callback(state)


def build_result(state: State) -> Result:
    orbital_energies, _ = roothaan.solve(state.F, state.context.X)

    return Result(
        iterations=state.iteration,
        electronic_energy=state.electronic_energy,
        nuclear_energy=state.context.nuclear_energy,
        total_energy=state.total_energy,
        context=state.context,
        orbital_energies=orbital_energies,
        orbitals=state.C,
        density=fock.density_matrix(state.C),
    )


def run(context: Context, options: Options = Options()) -> Result:
    """Iterates the SCF map on precomputed integral tables.

    The map is applied exactly options.n_iterations times starting from
    the seeded random guess.
    """
    C = initial_coefficients(context.n_basis, context.n_occupied, options.seed)
    state = _build_state(0, C, context)
    _maybe_run_callback(state, options)

    for iteration in range(1, options.n_iterations + 1):
        C = scf_update(state.C, context)
        state = _build_state(iteration, C, context)
        _maybe_run_callback(state, options)

    logger.info(
        "Finished %d SCF iterations: total energy = %.12f",
        state.iteration,
        state.total_energy,
    )
    return build_result(state)


def solve(
    molecule: molecule_lib.Molecule,
    basis_fetcher: basis_function.BasisFetcher,
    options: Options = Options(),
) -> Result:
    """Performs the self-consistent field (SCF) procedure to compute the
    molecular orbital coefficients and energy.

    Returns:
        A Result object containing the final energy and orbital coefficients.
    """
    context = build_context(
        molecule, basis_fetcher, options.linear_dep_threshold
    )
    return run(context, options)
