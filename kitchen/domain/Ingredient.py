"""Ingredient domain entity: a measured lot with a value and an expiry date."""
from datetime import date, timedelta
from typing import Optional
from kitchen.domain.Measurement import Measurement
from kitchen.domain.Unit import ValidUnit
from kitchen.logic.units import converter
from kitchen.utilities.constants import DATE_FORMAT
from kitchen.utilities.errors import NullIngredient


class Ingredient(Measurement):
    def __init__(self, name: str = "", amount: float = 0.0, unit: ValidUnit = ValidUnit.G,
                 value: float = 0.0, expiry_date: Optional[date] = None):
        super().__init__(name, amount, unit)
        self.value = value
        self.expiry_date = expiry_date if expiry_date is not None else date.today()

    @classmethod
    def expiring_in(cls, name: str, amount: float, unit: ValidUnit, value: float, days: int,
                    today: Optional[date] = None):
        '''Creates an ingredient that expires `days` days from today.'''
        return cls(name, amount, unit, value, (today or date.today()) + timedelta(days=days))

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, value: float):
        if value is None or value < 0:
            raise ValueError(f"Value cannot be negative: {value}")
        self._value = float(value)

    def is_mergeable(self, other: "Ingredient") -> bool:
        return other is not None and self.key == other.key and self.expiry_date == other.expiry_date

    def merge(self, other: "Ingredient"):
        '''
        Merges a lot with the same name and expiry date into this one.
        Both amounts are expressed in the finer of the two units before summing,
        and the result moves to the family base unit only when that is exact,
        so neither the merge order nor rounding can change the outcome.
        '''
        if other is None:
            raise NullIngredient()
        if not self.is_mergeable(other):
            raise ValueError(f"Cannot merge '{other.name}' ({other.expiry_date}) into '{self.name}' ({self.expiry_date})")
        common = converter.finer_unit(self.unit, other.unit)
        total = converter.convert(self.amount, self.unit, common) + converter.convert(other.amount, other.unit, common)
        self.amount = converter.round_two(total)
        self.unit = common
        self.value = converter.round_two(self.value + other.value)
        converter.standardize(self)
        return self

    def is_expired(self, today: Optional[date] = None) -> bool:
        return self.expiry_date < (today or date.today())

    def days_left(self, today: Optional[date] = None) -> int:
        return (self.expiry_date - (today or date.today())).days

    def copy(self) -> "Ingredient":
        return Ingredient(self.name, self.amount, self.unit, self.value, self.expiry_date)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return ((self.key, self.amount, self.unit, self.value, self.expiry_date)
                == (other.key, other.amount, other.unit, other.value, other.expiry_date))

    def __str__(self) -> str:
        return (f"{self.name} - {self.amount:g} {self.unit} - Value: {self.value:.2f}"
                f" - Exp: {self.expiry_date.strftime(DATE_FORMAT)}")

    __repr__ = __str__

    def to_dict(self):
        '''Converts the Ingredient object to a dictionary for reporting.'''
        return {
            "name": self.name,
            "amount": self.amount,
            "unit": self.unit.value,
            "value": self.value,
            "expiry_date": self.expiry_date.strftime(DATE_FORMAT),
        }
