"""In-process event bus connecting storages and commands to the console.

Event names and their payloads:
  command.operation_status -> {"success": bool, "verb": str, "subject": str}
  storage.expired_removed -> {"storage": str, "removed": List[Ingredient]}
  storage.nothing_to_check -> {"storage": str}
  storage.near_expiry -> {"storage": str, "ingredient": Ingredient, "days_left": int, "threshold": int}

Listeners are callables taking (event_name, payload).
"""
from __future__ import annotations
from collections import defaultdict
from typing import Any, Callable, Dict, List, Mapping
import logging

logger = logging.getLogger(__name__)

OPERATION_STATUS = "command.operation_status"
STORAGE_EXPIRED_REMOVED = "storage.expired_removed"
STORAGE_NOTHING_TO_CHECK = "storage.nothing_to_check"
STORAGE_NEAR_EXPIRY = "storage.near_expiry"

KNOWN_EVENTS = frozenset({OPERATION_STATUS, STORAGE_EXPIRED_REMOVED, STORAGE_NOTHING_TO_CHECK, STORAGE_NEAR_EXPIRY})

Payload = Mapping[str, Any]
Listener = Callable[[str, Payload], None]


class EventBus:
    def __init__(self):
        self._listeners: Dict[str, List[Listener]] = defaultdict(list)

    def subscribe(self, event_name: str, listener: Listener) -> Callable[[], None]:
        '''
        Registers a listener once per event and returns a function that detaches it again.
        '''
        if event_name not in KNOWN_EVENTS:
            logger.warning(f"Subscribing to unknown event {event_name}")
        listeners = self._listeners[event_name]
        if listener not in listeners:
            listeners.append(listener)

        def detach():
            if listener in listeners:
                listeners.remove(listener)
        return detach

    def listener_count(self, event_name: str) -> int:
        return len(self._listeners.get(event_name, ()))

    def publish(self, event_name: str, payload: Payload) -> int:
        '''Delivers the payload to every listener; returns how many handled it without failing.'''
        delivered = 0
        for listener in list(self._listeners.get(event_name, ())):
            try:
                listener(event_name, payload)
                delivered += 1
            except Exception as e:
                logger.error(f"Listener {listener!r} failed on {event_name}: {e}")
        logger.debug(f"{event_name} delivered to {delivered} listener(s)")
        return delivered


GLOBAL_EVENT_BUS = EventBus()


__all__ = [
    'EventBus', 'GLOBAL_EVENT_BUS', 'KNOWN_EVENTS', 'Payload', 'Listener',
    'OPERATION_STATUS', 'STORAGE_EXPIRED_REMOVED', 'STORAGE_NOTHING_TO_CHECK', 'STORAGE_NEAR_EXPIRY'
]
