"""Recipe domain entity: name, description and steps, each step with its measured ingredients."""
from typing import Dict, List, Optional
from kitchen.domain.Measurement import Measurement
from kitchen.logic.units import converter
from kitchen.utilities.naming import create_key


class Step:
    def __init__(self, instruction: str = "", ingredients: Optional[List[Measurement]] = None):
        self.instruction = instruction
        self.ingredients = ingredients[:] if ingredients else []

    def __str__(self) -> str:
        if not self.ingredients:
            return self.instruction
        return f"{self.instruction} ({', '.join(str(m) for m in self.ingredients)})"

    __repr__ = __str__


class Recipe:
    def __init__(self, name: str = "", description: str = "", steps: Optional[List[Step]] = None):
        self.name = name
        self.description = description
        self.steps = steps[:] if steps else []

    @property
    def key(self) -> str:
        return create_key(self.name)

    def requirements(self) -> List[Measurement]:
        '''
        Total amount needed of every ingredient across all steps. Repeated
        ingredients are summed in the unit of their first appearance.
        '''
        totals: Dict[str, Measurement] = {}
        for step in self.steps:
            for measurement in step.ingredients:
                total = totals.get(measurement.key)
                if total is None:
                    totals[measurement.key] = Measurement(measurement.name, measurement.amount, measurement.unit)
                    continue
                extra = converter.convert(measurement.amount, measurement.unit, total.unit)
                total.amount = converter.round_two(total.amount + extra)
        return list(totals.values())

    def check_ingredients(self, storage) -> bool:
        """Return True if the storage holds enough of every required ingredient."""
        return storage.is_ingredient_enough(self.requirements())

    def __str__(self) -> str:
        lines = [self.name]
        if self.description:
            lines.append(f"\t{self.description}")
        for number, step in enumerate(self.steps, start=1):
            lines.append(f"\t{number}. {step}")
        return "\n".join(lines)

    __repr__ = __str__

    @staticmethod
    def from_input(recipe_input):
        '''Creates a Recipe from a validated RecipeInput.'''
        steps = [
            Step(step.instruction, [m.to_measurement() for m in step.ingredients])
            for step in recipe_input.steps
        ]
        return Recipe(recipe_input.name, recipe_input.description, steps)
