"""
Consistency Checks for Projection Handles.

This module verifies, at runtime, properties every projection must obey
regardless of its family.

Check Categories
----------------
1. Round trip (inverse(forward(p)) recovers p)
2. Longitude normalisation (idempotent, lands in (-pi, pi])
3. Finite output (no NaN leaking out of a successful forward call)
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np
from numpy.typing import ArrayLike

from common.logging_config import get_logger
from cartography.errors import TransformError
from cartography.numerics import adj_lng
from cartography.projection import Projection

logger = get_logger(__name__)


@dataclass
class ValidationResult:
    """Result of a validation check.

    Attributes
    ----------
    test_name : str
        Name of the check.
    passed : bool
        Whether the check passed.
    message : str
        Description of result.
    details : dict
        Additional details.
    """
    test_name: str
    passed: bool
    message: str
    details: Dict[str, Any]


class ProjectionConsistencyChecker:
    """Checker for the forward/inverse consistency of a projection.

    Points the projection rejects (out of domain, poles) are counted as
    skipped rather than failed.
    """

    def __init__(
        self,
        strict_mode: bool = False,
        log_violations: bool = True
    ):
        """Initialize the checker.

        Parameters
        ----------
        strict_mode : bool
            If True, raise AssertionError on a failed check.
        log_violations : bool
            Whether to log failed checks.
        """
        self.strict_mode = strict_mode
        self.log_violations = log_violations
        self._logger = get_logger("ProjectionConsistencyChecker")

    def check_all(
        self,
        projection: Projection,
        lons: ArrayLike,
        lats: ArrayLike,
        tolerance: float = 1e-5
    ) -> List[ValidationResult]:
        """Run every check on a grid of geographic points.

        Parameters
        ----------
        projection : Projection
            The projection under test.
        lons, lats : array_like
            Sample coordinates in radians.
        tolerance : float
            Round-trip tolerance in radians.

        Returns
        -------
        List[ValidationResult]
            Results of all checks.
        """
        results = [
            self.check_round_trip(projection, lons, lats, tolerance),
            self.check_finite_output(projection, lons, lats),
            self.check_longitude_normalization(lons),
        ]
        return results

    def check_round_trip(
        self,
        projection: Projection,
        lons: ArrayLike,
        lats: ArrayLike,
        tolerance: float = 1e-5
    ) -> ValidationResult:
        """Check that inverse(forward(p)) recovers p."""
        lons = np.ravel(np.asarray(lons, dtype=np.float64))
        lats = np.ravel(np.asarray(lats, dtype=np.float64))

        max_error = 0.0
        failures = 0
        skipped = 0
        worst: Optional[tuple] = None

        for lon, lat in zip(lons, lats):
            try:
                x, y = projection.forward(lon, lat)
                lon1, lat1 = projection.inverse(x, y)
            except TransformError:
                skipped += 1
                continue

            error = max(np.abs(adj_lng(lon1 - lon)), np.abs(lat1 - lat))
            if error > max_error:
                max_error, worst = float(error), (float(lon), float(lat))
            if error > tolerance:
                failures += 1

        return self._report(ValidationResult(
            test_name="round_trip",
            passed=failures == 0,
            message=f"Round trip check: {failures} violations, {skipped} skipped",
            details={
                'max_error_rad': max_error,
                'worst_point': worst,
                'num_violations': failures,
                'num_skipped': skipped,
                'tolerance': tolerance,
            }
        ))

    def check_finite_output(
        self,
        projection: Projection,
        lons: ArrayLike,
        lats: ArrayLike
    ) -> ValidationResult:
        """Check that successful forward calls never return NaN or inf."""
        xs, ys = projection.batch_forward(lons, lats)
        poisoned = np.isinf(xs) | np.isinf(ys)
        bad = np.isnan(xs) | np.isnan(ys)
        num_bad = int(np.sum(bad))

        return self._report(ValidationResult(
            test_name="finite_output",
            passed=num_bad == 0,
            message=f"Finite output check: {num_bad} NaN results",
            details={
                'num_nan': num_bad,
                'num_rejected': int(np.sum(poisoned)),
            }
        ))

    def check_longitude_normalization(
        self,
        samples: ArrayLike
    ) -> ValidationResult:
        """Check that adj_lng is idempotent and lands in (-pi, pi]."""
        samples = np.ravel(np.asarray(samples, dtype=np.float64))
        out_of_range = 0
        not_idempotent = 0

        for value in samples:
            once = adj_lng(value)
            if not -np.pi < once <= np.pi:
                out_of_range += 1
            if adj_lng(once) != once:
                not_idempotent += 1

        num_violations = out_of_range + not_idempotent
        return self._report(ValidationResult(
            test_name="longitude_normalization",
            passed=num_violations == 0,
            message=f"Longitude normalisation check: {num_violations} violations",
            details={
                'out_of_range': out_of_range,
                'not_idempotent': not_idempotent,
            }
        ))

    def _report(self, result: ValidationResult) -> ValidationResult:
        if not result.passed:
            if self.log_violations:
                self._logger.warning(f"{result.test_name} FAILED | {result.message}")
            if self.strict_mode:
                raise AssertionError(f"{result.test_name}: {result.message}")
        return result
