"""Fisher–Rao and Hellinger distances between categorical distributions.

Both distances are built on the Bhattacharyya coefficient

    BC(p, q) = Σ_i √(p_i q_i) ∈ [0, 1].

Under the square-root embedding p ↦ √p the simplex lands on the positive
orthant of the unit sphere, and BC is the cosine of the angle between √p
and √q. This gives closed forms:

1. Fisher–Rao distance: d_FR(p, q) = 2 arccos(BC(p, q)) ∈ [0, π]
2. Hellinger distance:  H(p, q) = √(1 - BC(p, q)) ∈ [0, 1]

so that d_FR = 2 arccos(1 - H²).

References:
    Amari & Nagaoka (2000), "Methods of Information Geometry", §2.
    Nielsen, "An elementary introduction to information geometry" (2020).
"""

from __future__ import annotations

import numpy as np

from .simplex import SimplexError, _validate_tolerance, as_distribution, validate_simplex

# Rao only: BC within this many tol of 1 is treated as exactly 1
_IDENTITY_SNAP_FACTOR = 10.0


class DistanceError(ValueError):
    """Raised when a distance cannot be computed for the given inputs."""
    pass


class DimensionMismatch(DistanceError):
    """The two distributions have different lengths."""

    def __init__(self, len_p: int, len_q: int):
        self.len_p = len_p
        self.len_q = len_q
        super().__init__(f"Length mismatch: len(p) = {len_p}, len(q) = {len_q}")


class InvalidSimplex(DistanceError):
    """One of the inputs is not on the probability simplex.

    Attributes
    ----------
    argument : str
        Which input failed, "p" or "q".
    reason : SimplexError
        The validator error (NegativeMass, SumMismatch, ...).
    """

    def __init__(self, argument: str, reason: SimplexError):
        self.argument = argument
        self.reason = reason
        super().__init__(f"{argument} is not on the probability simplex: {reason}")


def _validated_pair(p, q, tol: float) -> tuple[np.ndarray, np.ndarray]:
    """Length check, then tol, then validate p and q in that order."""
    arrays = []
    for name, x in (("p", p), ("q", q)):
        try:
            arrays.append(as_distribution(x))
        except SimplexError as err:
            raise InvalidSimplex(name, err) from err
    p_arr, q_arr = arrays

    if p_arr.size != q_arr.size:
        raise DimensionMismatch(p_arr.size, q_arr.size)

    tol = _validate_tolerance(tol)
    for name, x in (("p", p_arr), ("q", q_arr)):
        try:
            validate_simplex(x, tol)
        except SimplexError as err:
            raise InvalidSimplex(name, err) from err
    return p_arr, q_arr


def _bhattacharyya_coefficient(p: np.ndarray, q: np.ndarray) -> float:
    """Σ √(p_i q_i) for validated, equal-length p and q.

    Entries in [-tol, 0) can make a product slightly negative; each product
    is clamped to 0 before the square root.
    """
    products = np.maximum(p * q, 0.0)
    return float(np.sum(np.sqrt(products)))


def _rao_from_similarity(bc: float, tol: float) -> float:
    """2 arccos(BC) with BC clamped to [-1, 1].

    arccos is steep near 1, so BC within 10·tol of 1 is snapped to 1 and
    identical inputs give exactly 0.
    """
    bc = min(max(bc, -1.0), 1.0)
    if 1.0 - bc <= _IDENTITY_SNAP_FACTOR * tol:
        bc = 1.0
    return float(2.0 * np.arccos(bc))


def _hellinger_from_similarity(bc: float) -> float:
    bc = min(max(bc, 0.0), 1.0)
    h_squared = max(1.0 - bc, 0.0)
    return float(np.sqrt(h_squared))


def rao_distance_categorical(p, q, tol: float) -> float:
    """Compute the Fisher–Rao distance between categorical distributions.

    d_FR(p, q) = 2 arccos(Σ_i √(p_i q_i))

    This is the geodesic distance between √p and √q on the unit sphere,
    scaled by 2 so that it matches the Fisher information metric.

    Parameters
    ----------
    p : array-like
        First distribution, shape (N,).
    q : array-like
        Second distribution, shape (N,).
    tol : float
        Nonnegative tolerance for the simplex checks (typically 1e-12).

    Returns
    -------
    d : float
        Distance in radians, in [0, π].

    Raises
    ------
    DimensionMismatch
        If len(p) != len(q). Checked before validation.
    InvalidSimplex
        If p or q is not on the simplex within tol.
    ValueError
        If tol is negative or not finite.

    Examples
    --------
    >>> rao_distance_categorical([1.0, 0.0], [0.0, 1.0], 1e-9)
    3.141592653589793
    """
    p, q = _validated_pair(p, q, tol)
    return _rao_from_similarity(_bhattacharyya_coefficient(p, q), tol)


def hellinger(p, q, tol: float) -> float:
    """Compute the Hellinger distance between categorical distributions.

    H(p, q) = √(1 - Σ_i √(p_i q_i))

    Equivalently H = ||√p - √q|| / √2 for p, q on the simplex.

    Parameters
    ----------
    p : array-like
        First distribution, shape (N,).
    q : array-like
        Second distribution, shape (N,).
    tol : float
        Nonnegative tolerance for the simplex checks.

    Returns
    -------
    d : float
        Distance in [0, 1].

    Raises
    ------
    DimensionMismatch
        If len(p) != len(q).
    InvalidSimplex
        If p or q is not on the simplex within tol.
    ValueError
        If tol is negative or not finite.
    """
    p, q = _validated_pair(p, q, tol)
    return _hellinger_from_similarity(_bhattacharyya_coefficient(p, q))


def compare_distances(p, q, tol: float) -> dict:
    """Compute every distance between p and q from a single validation pass.

    Parameters
    ----------
    p : array-like
        First distribution, shape (N,).
    q : array-like
        Second distribution, shape (N,).
    tol : float
        Nonnegative tolerance for the simplex checks.

    Returns
    -------
    distances : dict
        {'rao': float, 'hellinger': float}
    """
    p, q = _validated_pair(p, q, tol)
    bc = _bhattacharyya_coefficient(p, q)
    return {
        'rao': _rao_from_similarity(bc, tol),
        'hellinger': _hellinger_from_similarity(bc),
    }


__all__ = [
    "rao_distance_categorical",
    "hellinger",
    "compare_distances",
    "DistanceError",
    "DimensionMismatch",
    "InvalidSimplex",
]
