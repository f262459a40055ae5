"""Session context handed to every command: managers, console I/O, active storage and history."""
from __future__ import annotations
from typing import List, Optional
import logging

from kitchen.domain.IngredientStorage import IngredientStorage
from kitchen.events.Event_Bus import EventBus
from kitchen.events.event_helpers import publish_operation_status
from kitchen.infra.Input_Scanner import InputScanner
from kitchen.infra.Output_Handler import OutputHandler
from kitchen.logic.inventory.manager import InventoryManager
from kitchen.logic.recipes.manager import RecipeManager

logger = logging.getLogger(__name__)


class Session:
    def __init__(self, scanner: Optional[InputScanner] = None, output: Optional[OutputHandler] = None,
                 event_bus: Optional[EventBus] = None):
        self.output = output if output is not None else OutputHandler()
        self.scanner = scanner if scanner is not None else InputScanner(output=self.output)
        self.event_bus = event_bus if event_bus is not None else EventBus()
        self.inventory = InventoryManager(self.event_bus)
        self.recipes = RecipeManager()
        self.active_storage: Optional[IngredientStorage] = None
        # previously active storages, most recent last
        self.history: List[IngredientStorage] = []
        self.running = True

    def report(self, success: bool, verb: str, subject):
        publish_operation_status(success, verb, subject, bus=self.event_bus)

    def go_to(self, storage: IngredientStorage):
        if self.active_storage is not None and self.active_storage is not storage:
            self.history.append(self.active_storage)
        self.active_storage = storage
        logger.debug(f"Active storage: {storage.storage_name}")

    def go_back(self) -> Optional[IngredientStorage]:
        if not self.history:
            return None
        self.active_storage = self.history.pop()
        return self.active_storage

    def forget(self, storage: IngredientStorage):
        '''Drops a removed storage from the history and, if needed, from the active selection.'''
        self.history = [previous for previous in self.history if previous is not storage]
        if self.active_storage is storage:
            self.active_storage = self.history.pop() if self.history else None

    def clear_history(self) -> int:
        count = len(self.history)
        self.history.clear()
        return count

    def terminate(self):
        self.running = False
