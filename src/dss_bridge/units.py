# src/dss_bridge/units.py
import logging
import numbers
from typing import Union

import numpy as np
import pint

from .native.exceptions import MarshalError

logger = logging.getLogger(__name__)
ureg = pint.UnitRegistry()
Quantity = ureg.Quantity
logger.debug("Pint Unit Registry initialized.")

QuantityLike = Union[numbers.Real, str, pint.Quantity]


def to_magnitude(value: QuantityLike, unit: str, operation: str = "") -> float:
    """
    Converts a quantity-like input into a plain float expressed in `unit`.

    Plain numbers are taken to be in `unit` already, which is how the engine's
    entry points expect them. Strings are parsed by pint (e.g. "15 min",
    "1.2 MW"); a bare numeric string is treated like a plain number.
    """
    if isinstance(value, (bool, np.bool_)):
        raise MarshalError(operation=operation, details=f"Expected a number or quantity, got boolean {value!r}.")
    # Covers numpy scalars as well as int and float.
    if isinstance(value, numbers.Real):
        return float(value)
    try:
        quantity = ureg.Quantity(value) if isinstance(value, str) else value
        if not isinstance(quantity, pint.Quantity):
            raise TypeError(f"unsupported input type {type(value).__name__}")
        if quantity.unitless:
            return float(quantity.magnitude)
        return float(quantity.to(unit).magnitude)
    except (pint.DimensionalityError, pint.UndefinedUnitError, TypeError, ValueError, AttributeError) as e:
        raise MarshalError(
            operation=operation,
            details=f"Cannot convert {value!r} to '{unit}': {e}",
        ) from e
