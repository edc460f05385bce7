"""Geographic (identity) kernel for ``longlat`` and its synonyms."""

from dataclasses import dataclass, replace
from typing import Tuple

from cartography.kernels.base import ProjectionKernel, ProjectionKind


@dataclass(frozen=True)
class GeographicKernel(ProjectionKernel):
    """Identity projection.

    The wrapper scales kernel output by the axis length, so the kernel
    divides by it on the way out and multiplies on the way back. The net
    result is radians in, radians out.
    """
    a: float

    kind = ProjectionKind.GEOGRAPHIC

    @classmethod
    def initialize(cls, config, params):
        config = replace(config, x0=0.0, y0=0.0)
        return cls(a=config.a), config

    def forward(self, lam: float, phi: float) -> Tuple[float, float]:
        return lam / self.a, phi / self.a

    def inverse(self, x: float, y: float) -> Tuple[float, float]:
        return x * self.a, y * self.a

    @property
    def is_geographic(self) -> bool:
        return True
