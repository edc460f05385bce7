"""
Projection handle: a resolved configuration bound to one kernel.

Entry point
-----------
>>> proj = new_projection("+proj=merc +a=6378137 +b=6378137 +lat_ts=0 +units=m")
>>> x, y = proj.forward(np.radians(18.5), np.radians(54.2))
>>> lon, lat = proj.inverse(x, y)

Handles are immutable and keep no caches, so one handle may be shared by
any number of threads once constructed.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np
import pint
from numpy.typing import ArrayLike, NDArray

from common.logging_config import get_logger
from common.units import to_length_quantity
from cartography import transform
from cartography.errors import TransformError, UnsupportedProjectionError
from cartography.kernels import ProjectionKernel, ProjectionKind, lookup_kernel
from cartography.parameters import parse_definition
from cartography.resolver import ResolvedConfiguration, resolve

logger = get_logger(__name__)


@dataclass(frozen=True)
class Projection:
    """A ready-to-use projection.

    Attributes
    ----------
    config : ResolvedConfiguration
        Configuration after kernel initialisation.
    kernel : ProjectionKernel
        The projection-specific mathematics.

    Notes
    -----
    Geographic coordinates are radians; planar coordinates are in the
    configuration's linear unit (metres unless ``+units``/``+to_meter``
    say otherwise).
    """
    config: ResolvedConfiguration
    kernel: ProjectionKernel

    @classmethod
    def from_definition(cls, definition: str) -> "Projection":
        """Build a projection from a ``+key=value`` definition string.

        Raises
        ------
        UnsupportedProjectionError
            Missing or unknown ``proj`` code.
        InvalidParameterError
            Any parameter the resolver or kernel rejects.
        """
        params = parse_definition(definition)
        if not params.get_string("proj"):
            raise UnsupportedProjectionError("Definition has no +proj code")

        config, params = resolve(params)

        kernel_cls = lookup_kernel(config.proj)
        if kernel_cls is None:
            raise UnsupportedProjectionError(
                f"Unsupported projection '{config.proj}'"
            )
        kernel, config = kernel_cls.initialize(config, params)

        logger.debug(f"Built {kernel.kind.name} projection from '{definition}'")
        return cls(config=config, kernel=kernel)

    @property
    def kind(self) -> ProjectionKind:
        return self.kernel.kind

    def forward(self, lon: float, lat: float) -> Tuple[float, float]:
        """Project (lon, lat) in radians to planar (x, y)."""
        return transform.forward(self.config, self.kernel.forward, lon, lat)

    def inverse(self, x: float, y: float) -> Tuple[float, float]:
        """Unproject planar (x, y) to (lon, lat) in radians."""
        return transform.inverse(self.config, self.kernel.inverse, x, y)

    def is_geographic(self) -> bool:
        return self.kernel.is_geographic

    def linear_unit_to_meters(self) -> float:
        return self.config.to_meter

    def prime_meridian_offset_radians(self) -> float:
        return self.config.from_greenwich

    def radius(self) -> float:
        """Semi-major axis (or sphere radius) in metres."""
        return self.config.a

    def planar_to_meters(self, x: float, y: float) -> Tuple[pint.Quantity, pint.Quantity]:
        """Express planar coordinates as pint lengths in metres."""
        to_meter = self.config.to_meter
        return to_length_quantity(x, to_meter), to_length_quantity(y, to_meter)

    def batch_forward(
        self,
        lons: ArrayLike,
        lats: ArrayLike,
        errcheck: bool = False
    ) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
        """Project arrays of coordinates.

        Parameters
        ----------
        lons, lats : array_like
            Coordinates in radians; broadcast against each other.
        errcheck : bool
            If True, re-raise the first per-point failure. Otherwise failed
            points are written as ``inf`` so that `batch_inverse` keeps
            them poisoned.

        Returns
        -------
        Tuple[ndarray, ndarray]
            (x, y) arrays.
        """
        return self._batch(self.forward, lons, lats, errcheck)

    def batch_inverse(
        self,
        xs: ArrayLike,
        ys: ArrayLike,
        errcheck: bool = False
    ) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
        """Unproject arrays of coordinates; see `batch_forward`."""
        return self._batch(self.inverse, xs, ys, errcheck)

    @staticmethod
    def _batch(func, first: ArrayLike, second: ArrayLike, errcheck: bool):
        first, second = np.broadcast_arrays(
            np.asarray(first, dtype=np.float64), np.asarray(second, dtype=np.float64)
        )
        out_first = np.empty(first.shape, dtype=np.float64)
        out_second = np.empty(first.shape, dtype=np.float64)

        for idx in np.ndindex(first.shape):
            try:
                out_first[idx], out_second[idx] = func(first[idx], second[idx])
            except TransformError as e:
                if errcheck:
                    raise
                out_first[idx], out_second[idx] = e.coordinates

        return out_first, out_second


def new_projection(definition: str) -> Projection:
    """Build a `Projection` from a PROJ-style definition string."""
    return Projection.from_definition(definition)
