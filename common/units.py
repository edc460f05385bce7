"""
Unit Registry for Linear Projection Units.

Named linear units (`+units=ft`) come from the reference catalog. Explicit
overrides (`+to_meter=...`, `+vto_meter=...`) are free-form and are parsed
here through the `pint` registry, so all of the following are accepted:

>>> length_factor("0.3048")
0.3048
>>> length_factor("1/3")
0.3333333333333333
>>> length_factor("0.3048 m")
0.3048

Anything that is not a plain number or a length raises `ValueError`.
"""

import tokenize
from typing import Union

import numpy as np
import pint
from pint import UnitRegistry as PintUnitRegistry

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity


def length_factor(expression: str) -> float:
    """Evaluate a unit expression as metres per unit.

    Parameters
    ----------
    expression : str
        A number (``"0.3048"``), a ratio (``"1/3"``) or a length
        expression (``"0.3048 m"``, ``"survey_foot"``).

    Returns
    -------
    float
        Metres per unit.

    Raises
    ------
    ValueError
        If the expression cannot be parsed, names an unknown unit, has a
        dimensionality other than length, or is not finite and strictly
        positive.
    """
    try:
        quantity = Q_(ureg.parse_expression(expression))
        if quantity.dimensionless:
            factor = float(quantity.to('dimensionless').magnitude)
        else:
            factor = float(quantity.to('meter').magnitude)
    except pint.DimensionalityError as e:
        raise ValueError(
            f"Unit expression '{expression}' is not a length"
        ) from e
    # pint's tokenizer and evaluator surface malformed input as
    # TokenError, AssertionError or ZeroDivisionError
    except (pint.errors.PintError, SyntaxError, TypeError, ZeroDivisionError,
            tokenize.TokenError, AssertionError) as e:
        raise ValueError(
            f"Cannot parse unit expression '{expression}'"
        ) from e

    if not np.isfinite(factor) or factor <= 0:
        raise ValueError(
            f"Unit expression '{expression}' must be finite and positive, got {factor}"
        )
    return factor


def to_length_quantity(value: Union[float, pint.Quantity], to_meter: float) -> pint.Quantity:
    """Attach metres to a value expressed in a projection's linear unit.

    Parameters
    ----------
    value : float or pint.Quantity
        Planar coordinate in the projection's linear unit, or an existing
        length quantity (returned converted to metres).
    to_meter : float
        Metres per projection unit.

    Returns
    -------
    pint.Quantity
        The value in metres.
    """
    if isinstance(value, pint.Quantity):
        return value.to('meter')
    return Q_(value * to_meter, 'meter')
