"""Unit vocabulary: the closed set of mass and volume units and their families."""
from enum import Enum
from typing import Dict, Optional


class UnitFamily(Enum):
    MASS = "mass"
    VOLUME = "volume"


class ValidUnit(Enum):
    KG = "kg"
    G = "g"
    L = "l"
    DL = "dl"
    ML = "ml"

    @property
    def family(self) -> UnitFamily:
        return UnitFamily.MASS if self in (ValidUnit.KG, ValidUnit.G) else UnitFamily.VOLUME

    def __str__(self) -> str:
        return self.name


# Multiplier relative to the family base unit (KG for mass, L for volume)
UNIT_MULTIPLIERS: Dict[ValidUnit, float] = {
    ValidUnit.KG: 1.0,
    ValidUnit.G: 1000.0,
    ValidUnit.L: 1.0,
    ValidUnit.DL: 10.0,
    ValidUnit.ML: 1000.0,
}

BASE_UNITS: Dict[UnitFamily, ValidUnit] = {
    UnitFamily.MASS: ValidUnit.KG,
    UnitFamily.VOLUME: ValidUnit.L,
}

# Ingredient type tag -> family it is measured in
INGREDIENT_TYPES: Dict[str, UnitFamily] = {
    "SOLID": UnitFamily.MASS,
    "LIQUID": UnitFamily.VOLUME,
}


class UnitRegistry:
    @staticmethod
    def find_unit(token: Optional[str]) -> Optional[ValidUnit]:
        '''Resolves a unit token case-insensitively, None when unknown.'''
        if not token:
            return None
        try:
            return ValidUnit(token.strip().lower())
        except ValueError:
            return None

    @staticmethod
    def ingredient_type_of(unit: ValidUnit) -> str:
        return "SOLID" if unit.family is UnitFamily.MASS else "LIQUID"
