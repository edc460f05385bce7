"""
Cartographic Projection Engine.

Converts geographic coordinates on a reference ellipsoid to planar
projected coordinates and back, from a PROJ-style definition string.

This package provides:
- Parameter parsing and reference catalogs (ellipsoids, datums, units,
  prime meridians)
- Configuration resolution into a single immutable record
- The forward/inverse pipeline shared by all projections
- Geographic, Mercator, Lambert Conformal Conic and Equirectangular kernels

Datum shifts (grid or 3/7-parameter) are parsed and recorded, never applied.
"""

from cartography.errors import (
    ProjectionError,
    UnsupportedProjectionError,
    InvalidParameterError,
    TransformError,
    OutOfRangeError,
    PoleDegenerateError,
    NonConvergenceError,
)

from cartography.parameters import (
    ParameterSet,
    parse_definition,
    parse_dms,
)

from cartography.resolver import (
    DatumKind,
    ResolvedConfiguration,
    resolve,
)

from cartography.numerics import (
    msfn,
    tsfn,
    phi2,
    adj_lng,
)

from cartography.kernels import (
    ProjectionKind,
    ProjectionKernel,
)

from cartography.projection import (
    Projection,
    new_projection,
)

__all__ = [
    # Errors
    "ProjectionError",
    "UnsupportedProjectionError",
    "InvalidParameterError",
    "TransformError",
    "OutOfRangeError",
    "PoleDegenerateError",
    "NonConvergenceError",
    # Parameters
    "ParameterSet",
    "parse_definition",
    "parse_dms",
    # Resolution
    "DatumKind",
    "ResolvedConfiguration",
    "resolve",
    # Numerics
    "msfn",
    "tsfn",
    "phi2",
    "adj_lng",
    # Kernels
    "ProjectionKind",
    "ProjectionKernel",
    # Handle
    "Projection",
    "new_projection",
]
