"""
Projection kernels and the code -> kernel table.

Selection is a single lookup over a closed set; there is no plugin
mechanism.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Type

from cartography.kernels.base import ProjectionKernel, ProjectionKind
from cartography.kernels.equirectangular import EquirectangularKernel
from cartography.kernels.geographic import GeographicKernel
from cartography.kernels.lambert import LambertConformalConicKernel
from cartography.kernels.mercator import MercatorKernel

PROJECTION_CODES: Mapping[str, ProjectionKind] = MappingProxyType({
    "longlat": ProjectionKind.GEOGRAPHIC,
    "latlong": ProjectionKind.GEOGRAPHIC,
    "lonlat": ProjectionKind.GEOGRAPHIC,
    "latlon": ProjectionKind.GEOGRAPHIC,
    "merc": ProjectionKind.MERCATOR,
    "lcc": ProjectionKind.LAMBERT_CONFORMAL_CONIC,
    "eqc": ProjectionKind.EQUIRECTANGULAR,
})

KERNELS: Mapping[ProjectionKind, Type[ProjectionKernel]] = MappingProxyType({
    ProjectionKind.GEOGRAPHIC: GeographicKernel,
    ProjectionKind.MERCATOR: MercatorKernel,
    ProjectionKind.LAMBERT_CONFORMAL_CONIC: LambertConformalConicKernel,
    ProjectionKind.EQUIRECTANGULAR: EquirectangularKernel,
})


def lookup_kernel(code: str) -> Optional[Type[ProjectionKernel]]:
    """Return the kernel class for a ``proj`` code, or None if unknown."""
    kind = PROJECTION_CODES.get(code)
    if kind is None:
        return None
    return KERNELS[kind]


__all__ = [
    "ProjectionKernel",
    "ProjectionKind",
    "GeographicKernel",
    "MercatorKernel",
    "LambertConformalConicKernel",
    "EquirectangularKernel",
    "PROJECTION_CODES",
    "KERNELS",
    "lookup_kernel",
]
