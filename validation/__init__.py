"""
Validation Framework for the Projection Engine.

This module provides runtime consistency checks for projection handles.
"""

from validation.consistency import (
    ProjectionConsistencyChecker,
    ValidationResult,
)

__all__ = [
    "ProjectionConsistencyChecker",
    "ValidationResult",
]
