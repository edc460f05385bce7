"""
Exception Hierarchy for the Projection Engine.

Construction-time errors (parameter resolution, kernel initialisation) are
raised from `new_projection` and no handle is returned. Per-call errors are
raised from `forward`/`inverse` and leave the handle usable. Per-call errors
carry the poisoned coordinate pair in ``coordinates`` so that batch callers
can write it in place of the failed point.
"""

from typing import Optional, Tuple

from common.constants import HUGE_VAL


class ProjectionError(Exception):
    """Base class for every error raised by the projection engine."""


class UnsupportedProjectionError(ProjectionError):
    """The ``proj`` code is missing or names no known projection."""


class InvalidParameterError(ProjectionError, ValueError):
    """A parameter is malformed or outside its legal range.

    Parameters
    ----------
    message : str
        Description of the problem.
    parameter : str, optional
        Name of the offending parameter.
    """

    def __init__(self, message: str, parameter: Optional[str] = None):
        super().__init__(message)
        self.parameter = parameter


class TransformError(ProjectionError):
    """Base class for per-call forward/inverse failures."""

    coordinates: Tuple[float, float] = (HUGE_VAL, HUGE_VAL)


class OutOfRangeError(TransformError, ValueError):
    """Input coordinates fall outside the sanity bounds, or carry the
    poisoned value left by an earlier failed transform."""


class PoleDegenerateError(OutOfRangeError):
    """The projection is singular at the requested pole."""


class NonConvergenceError(TransformError, ArithmeticError):
    """The iterative latitude solver exhausted its iteration budget."""
