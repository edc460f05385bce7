"""
Common utilities and infrastructure for the projection engine.

This package provides foundational components used across all modules:
- Geodetic reference constants and numeric tolerances
- Unit registry for linear projection units
- Logging infrastructure
"""

from common.constants import GeodeticConstants, Constant
from common.units import ureg, Q_, length_factor
from common.logging_config import get_logger

__all__ = [
    "GeodeticConstants",
    "Constant",
    "ureg",
    "Q_",
    "length_factor",
    "get_logger",
]
