"""IngredientStorage aggregate: ingredient lots grouped by name and expiry date.

Lots live in an arena keyed by an integer id; a secondary index maps each
identity key to the ordered ids of its lots. Lots with the same key and
expiry date are merged on insert, so each (key, expiry date) pair appears
at most once, and a key disappears from the index together with its last lot.
"""
from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple
import logging

from kitchen.domain.Ingredient import Ingredient
from kitchen.domain.Measurement import Measurement
from kitchen.events.Event_Bus import GLOBAL_EVENT_BUS
from kitchen.events.event_helpers import (
    publish_expired_removed, publish_near_expiry, publish_nothing_to_check
)
from kitchen.logic.units import converter
from kitchen.utilities.config import DAYS_BEFORE_EXPIRY
from kitchen.utilities.errors import NullIngredient
from kitchen.utilities.naming import capitalize_each_word, create_key

logger = logging.getLogger(__name__)


class IngredientStorage:
    def __init__(self, storage_name: str):
        self.storage_name = storage_name
        self._arena: Dict[int, Ingredient] = {}
        self._index: Dict[str, List[int]] = {}
        self._next_id = 0
        self._event_bus = GLOBAL_EVENT_BUS

    # --- Observer helpers -------------------------------------------------
    def set_event_bus(self, bus):
        self._event_bus = bus
        return self

    def _evaluate_item(self, item: Ingredient):
        days_left = item.days_left()
        if days_left <= DAYS_BEFORE_EXPIRY:
            publish_near_expiry(self.storage_name, item, days_left, DAYS_BEFORE_EXPIRY, bus=self._event_bus)

    # --- Arena / index ------------------------------------------------------
    def _store(self, ingredient: Ingredient):
        entry_id = self._next_id
        self._next_id += 1
        self._arena[entry_id] = ingredient
        self._index.setdefault(ingredient.key, []).append(entry_id)

    def _discard(self, key: str, entry_id: int):
        del self._arena[entry_id]
        ids = self._index[key]
        ids.remove(entry_id)
        if not ids:
            del self._index[key]

    def _entries(self, name) -> List[Tuple[int, Ingredient]]:
        return [(entry_id, self._arena[entry_id]) for entry_id in self._index.get(create_key(name), [])]

    @property
    def key(self) -> str:
        return create_key(self.storage_name)

    # --- Operations --------------------------------------------------------
    def add_ingredient(self, new_ingredient: Ingredient):
        '''
        Adds an ingredient to the storage. A lot with the same name and expiry
        date absorbs it, otherwise a copy is stored as a new lot. Returns the
        stored lot; the caller's object is never held by the storage.
        '''
        if new_ingredient is None:
            raise NullIngredient()
        matches = self.find_ingredient(new_ingredient.name, new_ingredient.expiry_date)
        if matches:
            target = matches[0].merge(new_ingredient)
            logger.info(f"Merged {new_ingredient.name} into existing lot in {self.storage_name}")
        else:
            target = new_ingredient.copy()
            self._store(target)
            logger.info(f"Stored new lot of {new_ingredient.name} in {self.storage_name}")
        self._evaluate_item(target)
        return target

    def remove_ingredient(self, ingredient: Optional[Ingredient]) -> bool:
        '''
        Removes the first lot equal to the given ingredient. Returns False if no lot matched.
        '''
        if ingredient is None:
            return False
        for entry_id, stored in self._entries(ingredient.key):
            if stored == ingredient:
                self._discard(ingredient.key, entry_id)
                return True
        return False

    def is_ingredient_enough(self, requirements: Iterable[Measurement]) -> bool:
        '''
        True when every required measurement is covered by the lots of the same
        name. Stops at the first requirement that cannot be met.
        '''
        for measurement in requirements:
            lots = self.find_ingredient(measurement.name)
            if not lots or not self._is_amount_enough(lots, measurement):
                return False
        return True

    def _is_amount_enough(self, lots: List[Ingredient], measurement: Measurement) -> bool:
        total = sum(converter.convert(lot.amount, lot.unit, measurement.unit) for lot in lots)
        return converter.round_two(total) >= measurement.amount

    def remove_expired(self, today: Optional[date] = None) -> Optional[List[Ingredient]]:
        '''
        Removes every lot that expired before today and returns them.
        Returns None, without sweeping, when the storage holds nothing.
        '''
        if not self._arena:
            logger.info(f"No ingredients in {self.storage_name} to check for expiry")
            publish_nothing_to_check(self.storage_name, bus=self._event_bus)
            return None
        today = today or date.today()
        removed: List[Ingredient] = []
        for key in list(self._index):
            for entry_id in list(self._index[key]):
                ingredient = self._arena[entry_id]
                if ingredient.is_expired(today):
                    removed.append(ingredient)
                    self._discard(key, entry_id)
        logger.info(f"Removed {len(removed)} expired ingredients from {self.storage_name}")
        publish_expired_removed(self.storage_name, removed, bus=self._event_bus)
        return removed

    def find_ingredient(self, ingredient_name: str, expiry_date: Optional[date] = None) -> List[Ingredient]:
        '''
        Lots stored under the name. With an expiry date, only the (at most one)
        lot expiring that day.
        '''
        lots = [ingredient for _, ingredient in self._entries(ingredient_name)]
        if expiry_date is not None:
            lots = [ingredient for ingredient in lots if ingredient.expiry_date == expiry_date][:1]
        return lots

    def is_ingredient_present(self, ingredient_name: str) -> bool:
        return create_key(ingredient_name) in self._index

    def get_all_ingredients(self) -> List[Ingredient]:
        return [self._arena[entry_id] for ids in self._index.values() for entry_id in ids]

    def get_all_expired(self, today: Optional[date] = None) -> List[Ingredient]:
        return [ingredient for ingredient in self.get_all_ingredients() if ingredient.is_expired(today)]

    def get_ingredient_overview(self) -> List[str]:
        return [capitalize_each_word(key) for key in self._index]

    def get_all_value(self) -> float:
        return converter.round_two(sum(ingredient.value for ingredient in self._arena.values()))

    def clear(self) -> int:
        '''Removes every lot and returns how many were dropped.'''
        count = len(self._arena)
        self._arena.clear()
        self._index.clear()
        return count

    def __len__(self) -> int:
        return len(self._arena)

    def __str__(self) -> str:
        if not self._arena:
            return f"{self.storage_name}\n\t(Empty)"
        items_str = ",\n\t".join(str(item) for item in self.get_all_ingredients())
        return f"{self.storage_name}\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()
