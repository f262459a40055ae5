"""Event helper utilities.

Quick import:
    from kitchen.events.event_helpers import (
        publish_operation_status, publish_expired_removed, publish_nothing_to_check,
        publish_near_expiry
    )

Every helper takes the bus explicitly; `None` falls back to the global bus.
"""
from __future__ import annotations
from typing import Any, Iterable, Optional
from .Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS,
    OPERATION_STATUS, STORAGE_EXPIRED_REMOVED, STORAGE_NOTHING_TO_CHECK, STORAGE_NEAR_EXPIRY
)

__all__ = [
    'publish_operation_status', 'publish_expired_removed', 'publish_nothing_to_check',
    'publish_near_expiry'
]


def _bus(bus: Optional[EventBus]) -> EventBus:
    return bus if bus is not None else GLOBAL_EVENT_BUS


def publish_operation_status(success: bool, verb: str, subject: Any, bus: Optional[EventBus] = None):
    """Publish a command.operation_status event."""
    _bus(bus).publish(OPERATION_STATUS, {
        'success': bool(success),
        'verb': verb,
        'subject': '' if subject is None else str(subject)
    })


def publish_expired_removed(storage_name: str, removed: Iterable[Any], bus: Optional[EventBus] = None):
    """Publish the ingredients swept out of a storage (possibly none)."""
    _bus(bus).publish(STORAGE_EXPIRED_REMOVED, {
        'storage': storage_name,
        'removed': list(removed)
    })


def publish_nothing_to_check(storage_name: str, bus: Optional[EventBus] = None):
    """Publish a storage.nothing_to_check event (expiry sweep on an empty storage)."""
    _bus(bus).publish(STORAGE_NOTHING_TO_CHECK, {'storage': storage_name})


def publish_near_expiry(storage_name: str, ingredient: Any, days_left: int, threshold: int,
                        bus: Optional[EventBus] = None):
    """Publish a storage.near_expiry event."""
    _bus(bus).publish(STORAGE_NEAR_EXPIRY, {
        'storage': storage_name,
        'ingredient': ingredient,
        'days_left': days_left,
        'threshold': threshold
    })
