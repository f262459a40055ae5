"""Measurement value object: a named amount in one of the valid units."""
from typing import Optional
from kitchen.domain.Unit import UnitRegistry, ValidUnit
from kitchen.utilities.naming import create_key


class Measurement:
    def __init__(self, name: str = "", amount: float = 0.0, unit: Optional[ValidUnit] = None,
                 ingredient_type: Optional[str] = None):
        # ingredient_type defaults to the family of the unit (SOLID / LIQUID)
        self.name = name
        self.amount = amount
        self.unit = unit
        if ingredient_type is None and unit is not None:
            ingredient_type = UnitRegistry.ingredient_type_of(unit)
        self.ingredient_type = ingredient_type.upper() if ingredient_type else None

    @property
    def amount(self) -> float:
        return self._amount

    @amount.setter
    def amount(self, value: float):
        if value is None or value < 0:
            raise ValueError(f"Amount cannot be negative: {value}")
        self._amount = float(value)

    @property
    def unit(self) -> Optional[ValidUnit]:
        return self._unit

    @unit.setter
    def unit(self, value: Optional[ValidUnit]):
        if value is not None and not isinstance(value, ValidUnit):
            raise ValueError(f"Not a valid unit: {value}")
        self._unit = value

    @property
    def key(self) -> str:
        return create_key(self.name)

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self.key, self.amount, self.unit) == (other.key, other.amount, other.unit)

    def __str__(self) -> str:
        return f"{self.name} - {self.amount:g} {self.unit or ''}".rstrip()

    __repr__ = __str__
