"""
Numeric helpers shared by the conformal projection kernels.

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual.
  USGS Prof. Paper 1395, eq. 7-7, 7-9, 14-15, 15-9.
- PROJ 4 `pj_msfn.c`, `pj_tsfn.c`, `pj_phi2.c`, `adjlon.c`
"""

import numpy as np

from common.constants import EPS10, HALF_PI, PHI2_MAX_ITERATIONS, TWO_PI
from cartography.errors import NonConvergenceError


def msfn(sinphi: float, cosphi: float, es: float) -> float:
    """Radius-of-parallel factor ``m = cos(phi) / sqrt(1 - e^2 sin^2(phi))``.

    Parameters
    ----------
    sinphi, cosphi : float
        Sine and cosine of the geodetic latitude.
    es : float
        Squared eccentricity of the ellipsoid.

    Returns
    -------
    float
        The factor m (Snyder eq. 14-15); equals ``cosphi`` on a sphere.
    """
    return cosphi / np.sqrt(1.0 - es * sinphi * sinphi)


def tsfn(phi: float, sinphi: float, e: float) -> float:
    """Isometric-latitude function ``t`` (Snyder eq. 15-9).

    Parameters
    ----------
    phi : float
        Geodetic latitude in radians.
    sinphi : float
        ``sin(phi)``, passed in because callers already have it.
    e : float
        Eccentricity (not squared).

    Returns
    -------
    float
        ``tan(pi/4 - phi/2) / ((1 - e sin phi) / (1 + e sin phi))^(e/2)``.
        Zero at the north pole.
    """
    sinphi *= e
    return np.tan(0.5 * (HALF_PI - phi)) / np.power(
        (1.0 - sinphi) / (1.0 + sinphi), 0.5 * e
    )


def phi2(e: float, ts: float) -> float:
    """Recover geodetic latitude from the isometric-latitude value ``ts``.

    Fixed-point iteration (Snyder eq. 7-9) starting from the spherical
    solution ``pi/2 - 2 atan(ts)``.

    Parameters
    ----------
    e : float
        Eccentricity (not squared).
    ts : float
        Value of `tsfn` at the latitude being sought.

    Returns
    -------
    float
        Latitude in radians.

    Raises
    ------
    NonConvergenceError
        If the latitude step does not fall below EPS10 within the
        iteration budget.
    """
    eccnth = 0.5 * e
    phi = HALF_PI - 2.0 * np.arctan(ts)

    for _ in range(PHI2_MAX_ITERATIONS):
        con = e * np.sin(phi)
        dphi = HALF_PI - 2.0 * np.arctan(
            ts * np.power((1.0 - con) / (1.0 + con), eccnth)
        ) - phi
        phi += dphi
        if np.abs(dphi) < EPS10:
            return float(phi)

    raise NonConvergenceError(
        f"Latitude solver did not converge in {PHI2_MAX_ITERATIONS} "
        f"iterations (e={e}, ts={ts})"
    )


def adj_lng(x: float) -> float:
    """Normalise a longitude into ``(-pi, pi]``.

    Values already in range are returned unchanged. Otherwise whole turns
    are removed after shifting by pi, and the result is shifted back.
    """
    if -np.pi < x <= np.pi:
        return x
    x += np.pi
    x -= TWO_PI * np.floor(x / TWO_PI)
    x -= np.pi
    # floor() leaves [-pi, pi); -pi belongs at the other end of the range
    if x <= -np.pi:
        x += TWO_PI
    return float(x)
