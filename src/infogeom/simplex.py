"""Membership checks for the probability simplex Δ^{N-1}.

A point p ∈ Δ^{N-1} is a vector of N categorical masses with
    p_i ≥ 0  and  Σ_i p_i = 1.

Numerically both conditions are checked against a caller-supplied
tolerance tol ≥ 0:
    p_i ≥ -tol           (entries in [-tol, 0) are rounding noise)
    |Σ_i p_i - 1| ≤ tol

Inputs that pass are returned unchanged: nothing is clipped or
renormalized.

Domain Contracts:
    Shape: one-dimensional, N ≥ 1
    Entries: finite reals
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np


class SimplexError(ValueError):
    """Raised when a vector is not a point on the probability simplex."""
    pass


class NonFiniteMass(SimplexError):
    """An entry is NaN or infinite."""

    def __init__(self, index: int, value: float):
        self.index = index
        self.value = value
        super().__init__(f"Entry {index} is not finite (got {value})")


class NegativeMass(SimplexError):
    """An entry lies below -tol."""

    def __init__(self, index: int, value: float, tol: float):
        self.index = index
        self.value = value
        self.tol = tol
        super().__init__(
            f"Entry {index} has negative mass {value!r} (below -tol = {-tol!r})"
        )


class SumMismatch(SimplexError):
    """Entries do not sum to 1 within tol."""

    def __init__(self, observed_sum: float, tol: float):
        self.observed_sum = observed_sum
        self.tol = tol
        super().__init__(
            f"Entries sum to {observed_sum!r}, which differs from 1 by more than tol = {tol!r}"
        )


def _validate_tolerance(tol: float) -> float:
    """Raise ValueError unless tol is a finite number >= 0."""
    tol = float(tol)
    if not np.isfinite(tol) or tol < 0:
        raise ValueError(f"tol must be a finite number >= 0 (got {tol})")
    return tol


def as_distribution(p) -> np.ndarray:
    """Coerce a sequence of masses to a 1-D float array.

    Raises
    ------
    SimplexError
        If the input is not one-dimensional.
    """
    arr = np.asarray(p, dtype=float)
    if arr.ndim != 1:
        raise SimplexError(f"Expected a 1-D sequence of masses, got shape {arr.shape}")
    return arr


def validate_simplex(p, tol: float) -> np.ndarray:
    """Check that p is a point on the probability simplex within tol.

    Checks run in order and the first violation is raised:

    1. every entry is finite,
    2. every entry is ≥ -tol (entries equal to -tol are accepted),
    3. |Σ p_i - 1| ≤ tol.

    Parameters
    ----------
    p : array-like
        Categorical masses, shape (N,), N ≥ 1.
    tol : float
        Nonnegative tolerance.

    Returns
    -------
    p : ndarray
        The input as a float array, unmodified.

    Raises
    ------
    NonFiniteMass, NegativeMass, SumMismatch
        For the first failed check (all subclasses of SimplexError).
    SimplexError
        If p is not 1-D or is empty.
    ValueError
        If tol is negative or not finite.
    """
    tol = _validate_tolerance(tol)
    arr = as_distribution(p)
    if arr.size == 0:
        raise SimplexError("A distribution needs at least one component")

    nonfinite = np.flatnonzero(~np.isfinite(arr))
    if nonfinite.size > 0:
        i = int(nonfinite[0])
        raise NonFiniteMass(i, float(arr[i]))

    negative = np.flatnonzero(arr < -tol)
    if negative.size > 0:
        i = int(negative[0])
        raise NegativeMass(i, float(arr[i]), tol)

    total = float(np.sum(arr))
    if abs(total - 1.0) > tol:
        raise SumMismatch(total, tol)

    return arr


def is_on_simplex(p, tol: float) -> bool:
    """Return True if p passes validate_simplex(p, tol)."""
    try:
        validate_simplex(p, tol)
    except SimplexError:
        return False
    return True


class SimplexDiagnostics(NamedTuple):
    """Summary of how a vector sits relative to the simplex.

    Attributes
    ----------
    n_components : int
        Number of entries N.
    total : float
        Σ p_i (NaN if any entry is not finite).
    sum_deviation : float
        |Σ p_i - 1|.
    min_entry : float
        Smallest entry (NaN for empty input).
    n_negative_within_tol : int
        Entries in [-tol, 0): accepted and passed through as-is.
    n_negative_beyond_tol : int
        Entries below -tol: rejected.
    n_nonfinite : int
        NaN or infinite entries.
    tol : float
        Tolerance the vector was checked against.
    """
    n_components: int
    total: float
    sum_deviation: float
    min_entry: float
    n_negative_within_tol: int
    n_negative_beyond_tol: int
    n_nonfinite: int
    tol: float

    def is_valid(self) -> bool:
        """Return True if validate_simplex would accept the vector."""
        return (self.n_components > 0 and
                self.n_nonfinite == 0 and
                self.n_negative_beyond_tol == 0 and
                self.sum_deviation <= self.tol)

    def summary(self) -> str:
        """Return a human-readable summary."""
        lines = [
            f"Simplex Diagnostics ({self.n_components} components, tol = {self.tol:.3g})",
            f"  Sum: {self.total:.17g} (deviation {self.sum_deviation:.3g})",
            f"  Min entry: {self.min_entry:.6g}",
            f"  Negative: {self.n_negative_within_tol} within tol, "
            f"{self.n_negative_beyond_tol} beyond tol",
            f"  Non-finite: {self.n_nonfinite}",
            f"  Valid: {self.is_valid()}",
        ]
        return "\n".join(lines)


def simplex_diagnostics(p, tol: float) -> SimplexDiagnostics:
    """Report every simplex condition for p without raising on violations.

    Parameters
    ----------
    p : array-like
        Categorical masses, shape (N,).
    tol : float
        Nonnegative tolerance.

    Returns
    -------
    SimplexDiagnostics
        Named tuple with per-condition counts and the observed sum.
    """
    tol = _validate_tolerance(tol)
    arr = as_distribution(p)

    finite = np.isfinite(arr)
    n_nonfinite = int(np.sum(~finite))
    vals = arr[finite]

    total = float(np.sum(arr))

    return SimplexDiagnostics(
        n_components=int(arr.size),
        total=total,
        sum_deviation=abs(total - 1.0),
        min_entry=float(np.min(arr)) if arr.size > 0 else float("nan"),
        n_negative_within_tol=int(np.sum((vals < 0) & (vals >= -tol))),
        n_negative_beyond_tol=int(np.sum(vals < -tol)),
        n_nonfinite=n_nonfinite,
        tol=tol,
    )


__all__ = [
    "SimplexError",
    "NonFiniteMass",
    "NegativeMass",
    "SumMismatch",
    "validate_simplex",
    "is_on_simplex",
    "simplex_diagnostics",
    "SimplexDiagnostics",
]
