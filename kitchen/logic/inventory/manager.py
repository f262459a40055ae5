"""Inventory manager: the named ingredient storages of the session."""
from __future__ import annotations
from datetime import date
from typing import Dict, List, Optional
import logging

from kitchen.domain.Ingredient import Ingredient
from kitchen.domain.IngredientStorage import IngredientStorage
from kitchen.utilities.naming import create_key
from kitchen.utilities.validators import IngredientInput

logger = logging.getLogger(__name__)

__all__ = ["InventoryManager"]


class InventoryManager:
    def __init__(self, event_bus=None):
        self._storages: Dict[str, IngredientStorage] = {}
        self._event_bus = event_bus

    def create_ingredient_storage(self, storage_name: str) -> Optional[IngredientStorage]:
        """Create a storage; None when the name is blank or already taken."""
        key = create_key(storage_name)
        if not key or key in self._storages:
            return None
        storage = IngredientStorage(" ".join(storage_name.split()))
        if self._event_bus is not None:
            storage.set_event_bus(self._event_bus)
        self._storages[key] = storage
        logger.info(f"Created storage {storage.storage_name}")
        return storage

    def remove_ingredient_storage(self, storage_name: str) -> Optional[IngredientStorage]:
        storage = self._storages.pop(create_key(storage_name), None)
        if storage is not None:
            logger.info(f"Removed storage {storage.storage_name}")
        return storage

    def get_storage(self, storage_name: str) -> Optional[IngredientStorage]:
        return self._storages.get(create_key(storage_name))

    def get_storages(self) -> List[IngredientStorage]:
        return list(self._storages.values())

    def get_storage_names(self) -> List[str]:
        return [storage.storage_name for storage in self._storages.values()]

    def create_ingredient(self, name: str, scanner, today: Optional[date] = None) -> Ingredient:
        '''
        Asks for amount and unit, value and days until expiry of a new ingredient.
        Raises Aborted when the user types the abort sentinel.
        '''
        output = scanner.output
        output.print_input_prompt(f"Amount and unit of {name} (e.g. 1.5 kg):")
        unit_input = scanner.collect_valid_unit_input()
        output.print_input_prompt("Value (price) of the ingredient:")
        value = scanner.collect_valid_float()
        output.print_input_prompt("Days until it expires:")
        days = scanner.collect_valid_integer()
        ingredient_input = IngredientInput(
            name=name, amount=unit_input.amount, unit=unit_input.unit, value=value, days_until_expiry=days
        )
        return ingredient_input.to_ingredient(today=today)
