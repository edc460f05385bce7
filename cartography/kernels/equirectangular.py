"""
Equirectangular (Plate Carree when the true-scale latitude is zero).

The origin latitude is not applied: ``y`` is the latitude itself.

References
----------
- Snyder (1987), p. 90, eq. 12-1 to 12-3
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from common.constants import EPS10
from cartography.errors import InvalidParameterError
from cartography.kernels.base import ProjectionKernel, ProjectionKind


@dataclass(frozen=True)
class EquirectangularKernel(ProjectionKernel):
    """Equirectangular projection.

    Attributes
    ----------
    rc : float
        ``cos(lat_1)``, the east-west scale on the unit sphere.
    """
    rc: float

    kind = ProjectionKind.EQUIRECTANGULAR

    @classmethod
    def initialize(cls, config, params):
        key = "lat_1" if "lat_1" in params else "lat_ts"
        phi1 = params.get_degree(key) or 0.0
        rc = float(np.cos(phi1))
        if rc <= EPS10:
            raise InvalidParameterError(
                "Latitude of true scale must be below 90 degrees",
                parameter=key,
            )
        return cls(rc=rc), config

    def forward(self, lam: float, phi: float) -> Tuple[float, float]:
        return self.rc * lam, phi

    def inverse(self, x: float, y: float) -> Tuple[float, float]:
        return x / self.rc, y
