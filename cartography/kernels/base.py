"""
Kernel interface shared by all projection families.

A kernel is the projection-specific mathematics only. It works in
normalised coordinates: meridian-relative longitude and geodetic latitude
in radians on one side, unit-sphere planar coordinates on the other. The
`cartography.transform` wrapper does everything common to all kernels.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Tuple

from cartography.parameters import ParameterSet
from cartography.resolver import ResolvedConfiguration


class ProjectionKind(Enum):
    """The closed set of supported projection families."""
    GEOGRAPHIC = "longlat"
    MERCATOR = "merc"
    LAMBERT_CONFORMAL_CONIC = "lcc"
    EQUIRECTANGULAR = "eqc"


class ProjectionKernel(ABC):
    """Abstract base class for projection kernels.

    Kernels are immutable: all constants are derived once by `initialize`
    and instances hold no mutable state, so one kernel can serve
    concurrent callers.
    """

    kind: ProjectionKind

    @classmethod
    @abstractmethod
    def initialize(
        cls,
        config: ResolvedConfiguration,
        params: ParameterSet
    ) -> Tuple["ProjectionKernel", ResolvedConfiguration]:
        """Derive kernel constants from the resolved configuration.

        Parameters
        ----------
        config : ResolvedConfiguration
            Configuration produced by the resolver.
        params : ParameterSet
            Parameters with catalog defaults applied.

        Returns
        -------
        Tuple[ProjectionKernel, ResolvedConfiguration]
            The kernel and the configuration, with any placement fields
            the kernel overrides (a new object; the input is untouched).

        Raises
        ------
        InvalidParameterError
            If the projection parameters are degenerate.
        """
        pass

    @abstractmethod
    def forward(self, lam: float, phi: float) -> Tuple[float, float]:
        """Map (meridian-relative longitude, latitude) to unit-sphere (x, y)."""
        pass

    @abstractmethod
    def inverse(self, x: float, y: float) -> Tuple[float, float]:
        """Map unit-sphere (x, y) to (meridian-relative longitude, latitude)."""
        pass

    @property
    def is_geographic(self) -> bool:
        """Whether the projection's native domain is geographic."""
        return False
