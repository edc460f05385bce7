"""
Transform Wrapper: the coordinate pipeline shared by every projection.

Kernels only see normalised coordinates: meridian-relative longitude and
geodetic latitude in radians on the way in, unit-sphere planar
coordinates on the way out. Everything else (bounds, pole snapping,
geocentric latitude, central meridian, longitude wrapping, axis length,
false origin, linear unit) is handled here, identically for all kernels.

Failure propagation
-------------------
A failed forward call raises with ``coordinates == (HUGE_VAL, HUGE_VAL)``.
Batch callers write that pair in place of the point; a later `inverse`
call on a poisoned pair fails immediately without re-deriving the cause.
"""

from typing import Callable, Tuple

import numpy as np

from common.constants import EPS10, HALF_PI, HUGE_VAL, LONGITUDE_SANITY_BOUND
from cartography.errors import OutOfRangeError
from cartography.numerics import adj_lng
from cartography.resolver import ResolvedConfiguration

KernelFunction = Callable[[float, float], Tuple[float, float]]


def forward(
    config: ResolvedConfiguration,
    kernel_forward: KernelFunction,
    lon: float,
    lat: float
) -> Tuple[float, float]:
    """Project geographic coordinates through a kernel.

    Parameters
    ----------
    config : ResolvedConfiguration
        The resolved projection configuration.
    kernel_forward : callable
        ``(lam, phi) -> (x, y)`` on the unit sphere.
    lon, lat : float
        Geographic coordinates in radians.

    Returns
    -------
    Tuple[float, float]
        (x, y) in the configuration's linear unit.

    Raises
    ------
    OutOfRangeError
        Non-finite input, latitude beyond a pole or longitude beyond the
        sanity bound.
    TransformError
        Any kernel failure, unchanged.
    """
    t = np.abs(lat) - HALF_PI
    if (not np.isfinite(lon) or not np.isfinite(lat)
            or t > EPS10 or np.abs(lon) > LONGITUDE_SANITY_BOUND):
        raise OutOfRangeError(
            f"Coordinate out of range: lon={lon}, lat={lat} (radians)"
        )

    if np.abs(t) <= EPS10:
        lat = np.copysign(HALF_PI, lat)
    elif config.geoc:
        lat = np.arctan(config.r_one_es * np.tan(lat))

    lam = lon - config.lam0
    if not config.over:
        lam = adj_lng(lam)

    x, y = kernel_forward(lam, lat)

    x = config.fr_meter * (config.a * x + config.x0)
    y = config.fr_meter * (config.a * y + config.y0)
    return float(x), float(y)


def inverse(
    config: ResolvedConfiguration,
    kernel_inverse: KernelFunction,
    x: float,
    y: float
) -> Tuple[float, float]:
    """Unproject planar coordinates through a kernel.

    Parameters
    ----------
    config : ResolvedConfiguration
        The resolved projection configuration.
    kernel_inverse : callable
        ``(x, y) -> (lam, phi)`` on the unit sphere.
    x, y : float
        Planar coordinates in the configuration's linear unit.

    Returns
    -------
    Tuple[float, float]
        (lon, lat) in radians.

    Raises
    ------
    OutOfRangeError
        Either input is the poisoned value left by a failed forward call.
    TransformError
        Any kernel failure, unchanged.
    """
    if x == HUGE_VAL or y == HUGE_VAL:
        raise OutOfRangeError("Input carries the out-of-range marker")

    x = (x * config.to_meter - config.x0) * config.ra
    y = (y * config.to_meter - config.y0) * config.ra

    lam, phi = kernel_inverse(x, y)

    lam += config.lam0
    if not config.over:
        if config.lon_wrap_center is not None:
            lam = config.lon_wrap_center + adj_lng(lam - config.lon_wrap_center)
        else:
            lam = adj_lng(lam)

    if config.geoc and np.abs(np.abs(phi) - HALF_PI) > EPS10:
        phi = np.arctan(config.one_es * np.tan(phi))

    return float(lam), float(phi)
