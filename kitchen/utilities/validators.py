"""
Input records produced by the scanner and the wizards, validated with Pydantic.
"""
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kitchen.domain.Ingredient import Ingredient
from kitchen.domain.Measurement import Measurement
from kitchen.domain.Unit import ValidUnit
from kitchen.utilities.constants import ValidCommand
from kitchen.utilities.naming import create_key


class CommandInput(BaseModel):
    """One parsed command line: command word, optional subcommand and free-form remainder."""
    model_config = ConfigDict(frozen=True)

    command: ValidCommand = ValidCommand.UNKNOWN
    subcommand: Optional[str] = None
    remainder: Optional[str] = None

    @field_validator('subcommand')
    @classmethod
    def lower_subcommand(cls, v):
        return v.lower() if v else None

    @field_validator('remainder')
    @classmethod
    def empty_remainder_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def has_subcommand(self) -> bool:
        return self.subcommand is not None

    def has_remainder(self) -> bool:
        return self.remainder is not None


class UnitInput(BaseModel):
    """An amount followed by one of the valid unit tokens."""
    model_config = ConfigDict(frozen=True)

    amount: float
    unit: ValidUnit


class IngredientInput(BaseModel):
    """Schema for the add-ingredient wizard."""
    name: str = Field(..., min_length=1, max_length=100)
    amount: float = Field(..., ge=0)
    unit: ValidUnit
    value: float = Field(..., ge=0)
    days_until_expiry: int = Field(..., ge=0)

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    def to_ingredient(self, today: Optional[date] = None):
        return Ingredient.expiring_in(self.name, self.amount, self.unit, self.value,
                                      self.days_until_expiry, today=today)


class MeasurementInput(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    amount: float = Field(..., ge=0)
    unit: ValidUnit

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        return v.strip()

    def to_measurement(self) -> Measurement:
        return Measurement(self.name, self.amount, self.unit)


class StepInput(BaseModel):
    instruction: str = Field(..., min_length=1)
    ingredients: List[MeasurementInput] = Field(default_factory=list)

    @field_validator('instruction')
    @classmethod
    def strip_instruction(cls, v):
        return v.strip()


class RecipeInput(BaseModel):
    """Schema for the add-recipe wizard."""
    name: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    steps: List[StepInput] = Field(default_factory=list)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate recipe name."""
        if not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v.strip()

    @field_validator('steps')
    @classmethod
    def validate_steps(cls, v):
        """Ensure recipe has at least one step and one unit family per ingredient."""
        if not v:
            raise ValueError('Recipe must have at least one step')
        families = {}
        for step in v:
            for measurement in step.ingredients:
                key = create_key(measurement.name)
                family = families.setdefault(key, measurement.unit.family)
                if family is not measurement.unit.family:
                    raise ValueError(f"'{measurement.name}' is measured in both {family.value} and {measurement.unit.family.value} units")
        return v
