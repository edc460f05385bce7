"""
Mercator kernel (normal aspect, ellipsoidal and spherical).

References
----------
- Snyder (1987), pp. 38-47, eq. 7-1, 7-2, 7-4, 7-7, 7-9
"""

from dataclasses import dataclass, replace
from typing import Tuple

import numpy as np

from common.constants import EPS10, FORT_PI, HALF_PI
from common.logging_config import get_logger
from cartography.errors import InvalidParameterError, PoleDegenerateError
from cartography.kernels.base import ProjectionKernel, ProjectionKind
from cartography.numerics import msfn, phi2, tsfn

logger = get_logger(__name__)


@dataclass(frozen=True)
class MercatorKernel(ProjectionKernel):
    """Mercator projection.

    Attributes
    ----------
    k0 : float
        Scale factor on the equator; derived from ``lat_ts`` when given.
    e, es : float
        Eccentricity and its square; ``es == 0`` selects the sphere.
    """
    k0: float
    e: float
    es: float

    kind = ProjectionKind.MERCATOR

    @classmethod
    def initialize(cls, config, params):
        k0 = config.k0
        phits = params.get_degree("lat_ts")
        if phits is not None:
            phits = np.abs(phits)
            if phits >= HALF_PI:
                raise InvalidParameterError(
                    "Latitude of true scale must be below 90 degrees",
                    parameter="lat_ts",
                )
            if config.es != 0:
                k0 = float(msfn(np.sin(phits), np.cos(phits), config.es))
            else:
                k0 = float(np.cos(phits))
            config = replace(config, k0=k0)

        logger.debug(f"Mercator k0={k0} ({'ellipsoid' if config.es else 'sphere'})")
        return cls(k0=k0, e=config.e, es=config.es), config

    def forward(self, lam: float, phi: float) -> Tuple[float, float]:
        if np.abs(np.abs(phi) - HALF_PI) <= EPS10:
            raise PoleDegenerateError("Mercator is unbounded at the poles")

        x = self.k0 * lam
        if self.es != 0:
            y = -self.k0 * np.log(tsfn(phi, np.sin(phi), self.e))
        else:
            y = self.k0 * np.log(np.tan(FORT_PI + 0.5 * phi))
        return x, y

    def inverse(self, x: float, y: float) -> Tuple[float, float]:
        lam = x / self.k0
        if self.es != 0:
            phi = phi2(self.e, np.exp(-y / self.k0))
        else:
            phi = HALF_PI - 2.0 * np.arctan(np.exp(-y / self.k0))
        return lam, phi
