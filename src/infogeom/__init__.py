"""infogeom: information-geometric distances on the probability simplex.

This package computes closed-form distances between categorical
distributions p, q ∈ Δ^{N-1}, including:

- Simplex membership checks against an explicit tolerance
- Fisher–Rao distance d_FR = 2 arccos(BC(p, q)) via the sphere embedding p ↦ √p
- Hellinger distance H = √(1 - BC(p, q))

where BC(p, q) = Σ_i √(p_i q_i) is the Bhattacharyya coefficient.

Every call takes the tolerance explicitly; there is no global state.

References:
    - Amari & Nagaoka (2000), "Methods of Information Geometry"
    - Nielsen's divergence / information geometry portal,
      https://franknielsen.github.io/IG/index.html
"""

from infogeom.simplex import (
    validate_simplex,
    is_on_simplex,
    simplex_diagnostics,
    SimplexDiagnostics,
    SimplexError,
    NonFiniteMass,
    NegativeMass,
    SumMismatch,
)
from infogeom.distances import (
    rao_distance_categorical,
    hellinger,
    compare_distances,
    DistanceError,
    DimensionMismatch,
    InvalidSimplex,
)

__version__ = "0.1.0"

__all__ = [
    # simplex
    "validate_simplex",
    "is_on_simplex",
    "simplex_diagnostics",
    "SimplexDiagnostics",
    "SimplexError",
    "NonFiniteMass",
    "NegativeMass",
    "SumMismatch",
    # distances
    "rao_distance_categorical",
    "hellinger",
    "compare_distances",
    "DistanceError",
    "DimensionMismatch",
    "InvalidSimplex",
]
