"""Unit algebra for mass and volume measurements.

Every conversion goes through the family base unit (KG for mass, L for
volume): the amount is first divided by the multiplier of its own unit, then
multiplied by the multiplier of the target unit, and finally rounded to two
decimals (half-up). Adding a unit to a family only needs its multiplier in
UNIT_MULTIPLIERS.

Quantities and prices share round_two so both stay in step.
"""
from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP
import logging

from kitchen.domain.Unit import (
    BASE_UNITS, INGREDIENT_TYPES, UNIT_MULTIPLIERS, UnitFamily, ValidUnit
)
from kitchen.utilities.errors import IncompatibleUnits

__all__ = [
    "round_two", "get_multiplier", "family_of", "base_unit", "convert",
    "convert_to_standard", "auto_merge_unit", "convert_ingredient", "standard_unit_price",
    "is_lossless", "finer_unit", "standardize",
]

logger = logging.getLogger(__name__)

_TWO_PLACES = Decimal("0.01")


def round_two(value: float) -> float:
    """Round to two decimals, ties away from zero (half-up on the value scaled by 100)."""
    return float(Decimal(repr(float(value))).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def get_multiplier(unit: ValidUnit) -> float:
    return UNIT_MULTIPLIERS[unit]


def family_of(unit: ValidUnit) -> UnitFamily:
    return unit.family


def base_unit(family: UnitFamily) -> ValidUnit:
    return BASE_UNITS[family]


def convert(amount: float, source: ValidUnit, target: ValidUnit) -> float:
    """Convert an amount between two units of the same family."""
    if source is None or target is None or family_of(source) is not family_of(target):
        raise IncompatibleUnits(source, target)
    in_base = amount / get_multiplier(source)
    return round_two(in_base * get_multiplier(target))


def auto_merge_unit(measurement, target: ValidUnit | None) -> None:
    """Convert a measurement in place to `target`.

    Nothing happens when either the target or the current unit is missing.
    """
    if target is None or measurement.unit is None:
        return
    converted = convert(measurement.amount, measurement.unit, target)
    logger.debug(f"{measurement.name}: {measurement.amount} {measurement.unit} -> {converted} {target}")
    measurement.amount = converted
    measurement.unit = target


def is_lossless(amount: float, source: ValidUnit, target: ValidUnit) -> bool:
    """True when converting to `target` and back gives `amount` again."""
    return convert(convert(amount, source, target), target, source) == amount


def finer_unit(first: ValidUnit, second: ValidUnit) -> ValidUnit:
    '''The unit with the larger multiplier; amounts expressed in it lose nothing to rounding.'''
    if family_of(first) is not family_of(second):
        raise IncompatibleUnits(second, first)
    return first if get_multiplier(first) >= get_multiplier(second) else second


def convert_ingredient(ingredient, target: ValidUnit) -> None:
    auto_merge_unit(ingredient, target)


def convert_to_standard(measurement) -> None:
    """Convert to KG (SOLID) or L (LIQUID) based on the ingredient type tag.

    A missing or unrecognized tag leaves the measurement untouched.
    """
    if measurement is None:
        return
    family = INGREDIENT_TYPES.get(measurement.ingredient_type or "")
    if family is None:
        return
    auto_merge_unit(measurement, base_unit(family))


def standard_unit_price(unit: ValidUnit, unit_price: float) -> float:
    """Price per base unit (per KG or per L) for a price given per `unit`."""
    return round_two(get_multiplier(unit) * unit_price)


def standardize(measurement) -> None:
    """Like convert_to_standard, but only when the base unit keeps the amount exact.

    2 G stays 2 G instead of becoming 0.0 KG; 3300 G becomes 3.3 KG.
    """
    if measurement is None or measurement.unit is None:
        return
    family = INGREDIENT_TYPES.get(measurement.ingredient_type or "")
    if family is None:
        return
    target = base_unit(family)
    if is_lossless(measurement.amount, measurement.unit, target):
        auto_merge_unit(measurement, target)
