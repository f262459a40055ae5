"""Recipe book kept for the session, plus the interactive recipe wizard."""
from __future__ import annotations
from typing import Dict, List, Optional
import logging

from kitchen.domain.Recipe import Recipe
from kitchen.utilities.naming import create_key
from kitchen.utilities.validators import MeasurementInput, RecipeInput, StepInput

logger = logging.getLogger(__name__)

__all__ = ["RecipeManager"]


class RecipeManager:
    def __init__(self):
        self._recipes: Dict[str, Recipe] = {}

    def add_recipe(self, recipe: Recipe) -> bool:
        if recipe is None or not recipe.key or recipe.key in self._recipes:
            return False
        self._recipes[recipe.key] = recipe
        logger.info(f"Added recipe {recipe.name}")
        return True

    def remove_recipe(self, name: str) -> Optional[Recipe]:
        return self._recipes.pop(create_key(name), None)

    def find_recipe(self, name: str) -> Optional[Recipe]:
        return self._recipes.get(create_key(name))

    def get_recipes(self) -> List[Recipe]:
        return list(self._recipes.values())

    def suggest_recipes(self, storage) -> List[Recipe]:
        """Recipes whose every ingredient the storage can cover."""
        return [recipe for recipe in self._recipes.values() if recipe.check_ingredients(storage)]

    def construct_recipe(self, scanner, name: Optional[str] = None) -> Recipe:
        '''
        Asks for the description, the steps and the ingredients of each step.
        Raises Aborted when the user types the abort sentinel, and a pydantic
        ValidationError when the collected recipe is not usable.
        '''
        output = scanner.output
        if not name:
            output.print_input_prompt("Please enter a name for the recipe:")
            name = scanner.collect_valid_string()
        output.print_input_prompt("Please enter a short description:")
        description = scanner.collect_valid_string()
        output.print_input_prompt("How many steps does the recipe have?")
        step_count = scanner.collect_valid_integer()

        steps: List[StepInput] = []
        for number in range(1, step_count + 1):
            output.print_input_prompt(f"Step {number}, instruction:")
            instruction = scanner.collect_valid_string()
            output.print_input_prompt(f"Step {number}, how many ingredients?")
            ingredient_count = scanner.collect_valid_integer()
            ingredients: List[MeasurementInput] = []
            for _ in range(ingredient_count):
                output.print_input_prompt("Ingredient name:")
                ingredient_name = scanner.collect_valid_string()
                output.print_input_prompt(f"Amount and unit of {ingredient_name} (e.g. 200 g):")
                unit_input = scanner.collect_valid_unit_input()
                ingredients.append(MeasurementInput(name=ingredient_name, amount=unit_input.amount, unit=unit_input.unit))
            steps.append(StepInput(instruction=instruction, ingredients=ingredients))

        return Recipe.from_input(RecipeInput(name=name, description=description, steps=steps))
