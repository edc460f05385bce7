"""
Geodetic Constants and Numeric Tolerances for the Projection Engine.

This module provides the reference values and tolerances shared by the
configuration resolver, the transform wrapper and the projection kernels.
Reference values carry their provenance; tolerances are plain `Final`
floats because they are conventions, not measurements.

References
----------
- WGS84 parameters: NIMA TR8350.2, Third Edition, 2000
- Radius series: Snyder, J.P. (1987). Map Projections - A Working Manual,
  USGS Prof. Paper 1395, eq. 3-12 and 3-13
- Tolerances: PROJ 4 (`projects.h`, `pj_fwd.c`, `pj_inv.c`)
"""

from dataclasses import dataclass
from typing import Final
import numpy as np


@dataclass(frozen=True)
class Constant:
    """A reference constant with uncertainty and provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    uncertainty : float
        The standard uncertainty (1-sigma) of the constant.
    unit : str
        The SI unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    uncertainty: float
    unit: str
    source: str
    description: str


class GeodeticConstants:
    """Registry of reference values used by the projection engine.

    WGS84 Ellipsoid
    ---------------
    Used to recognise a configuration that is WGS84 in all but name, so
    the datum can be tagged as the WGS84 identity shift.
    """

    # =========================================================================
    # WGS84 Ellipsoid Parameters
    # Reference: NIMA TR8350.2, Third Edition, 2000
    # =========================================================================

    WGS84_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="WGS84, NIMA TR8350.2",
        description="Semi-major axis (equatorial radius) of WGS84 ellipsoid"
    )

    WGS84_ECCENTRICITY_SQUARED: Final[Constant] = Constant(
        value=0.006694379990,
        uncertainty=5e-11,
        unit="dimensionless",
        source="WGS84/GRS80, PROJ pj_init.c",
        description="First eccentricity squared shared by WGS84 and GRS80"
    )

    # =========================================================================
    # Angle conversions
    # =========================================================================

    ARCSECOND_TO_RADIAN: Final[Constant] = Constant(
        value=4.84813681109535993589914102357e-6,
        uncertainty=0.0,  # Defined exactly
        unit="rad per arcsec",
        source="pi / 648000",
        description="Conversion factor from arc-seconds to radians"
    )


# Angular constants
HALF_PI: Final[float] = np.pi / 2
FORT_PI: Final[float] = np.pi / 4
TWO_PI: Final[float] = 2 * np.pi

# Tolerances
EPS10: Final[float] = 1.0e-10
LONGITUDE_SANITY_BOUND: Final[float] = 10.0  # radians
PHI2_MAX_ITERATIONS: Final[int] = 15

# Poisoned coordinate value written on a failed transform
HUGE_VAL: Final[float] = float("inf")

# Authalic radius series (R_A)
SIXTH: Final[float] = 1.0 / 6.0
RA4: Final[float] = 17.0 / 360.0
RA6: Final[float] = 67.0 / 3024.0

# Volumetric radius series (R_V)
RV4: Final[float] = 5.0 / 72.0
RV6: Final[float] = 55.0 / 1296.0

# Seven-parameter datum scale is given in parts per million
PPM: Final[float] = 1.0e6
