"""
Lambert Conformal Conic kernel, secant or tangent, ellipsoid or sphere.

The cone is described by three constants: the exponent ``n``, the shape
constant ``c`` and the radius of the origin parallel ``rho0``. Forward and
inverse both go through the polar form ``(rho, theta = n * lam)``.

References
----------
- Snyder (1987), pp. 104-110, eq. 15-1 to 15-11 and 14-4
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
class LambertConformalConicKernel(ProjectionKernel):
    """Lambert Conformal Conic projection.

    Attributes
    ----------
    n : float
        Cone exponent; its sign tells which pole is the cone apex.
    c : float
        Shape constant (Snyder's F).
    rho0 : float
        Radius of the origin latitude; zero when the origin is a pole.
    k0 : float
        Scale factor.
    e, es : float
        Eccentricity and its square; ``es == 0`` selects the sphere.
    phi1, phi2 : float
        Standard parallels in radians.
    """
    n: float
    c: float
    rho0: float
    k0: float
    e: float
    es: float
    phi1: float
    phi2: float

    kind = ProjectionKind.LAMBERT_CONFORMAL_CONIC

    @classmethod
    def initialize(cls, config, params):
        phi1 = params.get_degree("lat_1") or 0.0
        phi2_ = params.get_degree("lat_2")
        if phi2_ is None:
            phi2_ = phi1
            if "lat_0" not in params:
                config = replace(config, phi0=phi1)

        if np.abs(phi1) + EPS10 >= HALF_PI or np.abs(phi2_) + EPS10 >= HALF_PI:
            raise InvalidParameterError(
                "Standard parallels must lie strictly between the poles",
                parameter="lat_1",
            )
        if np.abs(phi1 + phi2_) <= EPS10:
            raise InvalidParameterError(
                "Standard parallels must not be symmetric about the equator",
                parameter="lat_2",
            )

        sinphi = np.sin(phi1)
        cosphi = np.cos(phi1)
        n = sinphi
        secant = np.abs(phi1 - phi2_) >= EPS10
        phi0 = config.phi0
        at_pole = np.abs(np.abs(phi0) - HALF_PI) < EPS10

        if config.es != 0:
            e = config.e
            m1 = msfn(sinphi, cosphi, config.es)
            ml1 = tsfn(phi1, sinphi, e)
            if secant:
                sinphi2 = np.sin(phi2_)
                n = np.log(m1 / msfn(sinphi2, np.cos(phi2_), config.es))
                n /= np.log(ml1 / tsfn(phi2_, sinphi2, e))
            c = m1 * np.power(ml1, -n) / n
            rho0 = 0.0 if at_pole else c * np.power(tsfn(phi0, np.sin(phi0), e), n)
        else:
            if secant:
                n = np.log(cosphi / np.cos(phi2_)) / np.log(
                    np.tan(FORT_PI + 0.5 * phi2_) / np.tan(FORT_PI + 0.5 * phi1)
                )
            c = cosphi * np.power(np.tan(FORT_PI + 0.5 * phi1), n) / n
            rho0 = 0.0 if at_pole else c * np.power(np.tan(FORT_PI + 0.5 * phi0), -n)

        logger.debug(
            f"LCC {'secant' if secant else 'tangent'}: n={n:.12f} c={c:.12f} "
            f"rho0={rho0:.12f}"
        )
        kernel = cls(
            n=float(n),
            c=float(c),
            rho0=float(rho0),
            k0=config.k0,
            e=config.e,
            es=config.es,
            phi1=float(phi1),
            phi2=float(phi2_),
        )
        return kernel, config

    def _rho(self, phi: float) -> float:
        if self.es != 0:
            return self.c * np.power(tsfn(phi, np.sin(phi), self.e), self.n)
        return self.c * np.power(np.tan(FORT_PI + 0.5 * phi), -self.n)

    def forward(self, lam: float, phi: float) -> Tuple[float, float]:
        if np.abs(np.abs(phi) - HALF_PI) < EPS10:
            if phi * self.n <= 0:
                raise PoleDegenerateError(
                    "Pole is at infinity for this cone orientation"
                )
            rho = 0.0
        else:
            rho = self._rho(phi)

        theta = self.n * lam
        x = self.k0 * (rho * np.sin(theta))
        y = self.k0 * (self.rho0 - rho * np.cos(theta))
        return x, y

    def inverse(self, x: float, y: float) -> Tuple[float, float]:
        x /= self.k0
        y = self.rho0 - y / self.k0
        rho = np.hypot(x, y)

        if rho == 0:
            return 0.0, HALF_PI if self.n > 0 else -HALF_PI

        if self.n < 0:
            rho, x, y = -rho, -x, -y

        if self.es != 0:
            phi = phi2(self.e, np.power(rho / self.c, 1.0 / self.n))
        else:
            phi = 2.0 * np.arctan(np.power(self.c / rho, 1.0 / self.n)) - HALF_PI
        lam = np.arctan2(x, y) / self.n
        return lam, phi
