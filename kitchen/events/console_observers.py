"""Console-facing observers.

Subscribes an OutputHandler to a bus for:
  - command.operation_status
  - storage.expired_removed
  - storage.nothing_to_check
  - storage.near_expiry

Commands and storages never print by themselves; they publish, and these
observers turn the payloads into console lines.
"""
from __future__ import annotations
from typing import Any, Dict

from .Event_Bus import (
    EventBus, OPERATION_STATUS, STORAGE_EXPIRED_REMOVED, STORAGE_NEAR_EXPIRY, STORAGE_NOTHING_TO_CHECK
)


class ConsoleObserver:
    def __init__(self, output):
        self.output = output

    def on_operation_status(self, event_name: str, payload: Dict[str, Any]):
        self.output.print_operation_status(payload['success'], payload['verb'], payload['subject'])

    def on_expired_removed(self, event_name: str, payload: Dict[str, Any]):
        removed = payload.get('removed', [])
        if removed:
            self.output.print_list(f"{len(removed)} expired ingredients were removed:", removed)
        else:
            self.output.print_output("No expired ingredients were found.")

    def on_nothing_to_check(self, event_name: str, payload: Dict[str, Any]):
        self.output.print_output(f"No ingredients in {payload.get('storage', '')} to check for expiry.")

    def on_near_expiry(self, event_name: str, payload: Dict[str, Any]):
        ing = payload.get('ingredient')
        days_left = payload.get('days_left', 0)
        name = getattr(ing, 'name', '')
        if days_left < 0:
            self.output.print_output(f"Note: {name} has already expired.")
        else:
            self.output.print_output(f"Note: {name} expires in {days_left} day(s).")


def start(bus: EventBus, output) -> ConsoleObserver:
    """Idempotent start: subscribe one observer per bus."""
    observer = getattr(bus, "_console_observer", None)
    if observer is not None:
        return observer
    observer = ConsoleObserver(output)
    bus.subscribe(OPERATION_STATUS, observer.on_operation_status)
    bus.subscribe(STORAGE_EXPIRED_REMOVED, observer.on_expired_removed)
    bus.subscribe(STORAGE_NOTHING_TO_CHECK, observer.on_nothing_to_check)
    bus.subscribe(STORAGE_NEAR_EXPIRY, observer.on_near_expiry)
    bus._console_observer = observer
    return observer


__all__ = ['ConsoleObserver', 'start']
