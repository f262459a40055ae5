"""
Statistics for the stats command.
Summarises lots, value and freshness of one storage or of the whole inventory.
"""
from datetime import date
from typing import Any, Dict, List, Optional
import logging

from kitchen.logic.units.converter import round_two
from kitchen.utilities.config import DAYS_BEFORE_EXPIRY

logger = logging.getLogger(__name__)


class StorageStats:
    """Generate statistics for one ingredient storage."""

    def __init__(self, storage, today: Optional[date] = None):
        self.storage = storage
        self.today = today or date.today()

    def lot_count(self) -> int:
        return len(self.storage)

    def ingredient_count(self) -> int:
        """Distinct ingredient names, however many lots each has."""
        return len(self.storage.get_ingredient_overview())

    def total_value(self) -> float:
        return self.storage.get_all_value()

    def expired_value(self) -> float:
        return round_two(sum(i.value for i in self.storage.get_all_expired(self.today)))

    def expired_count(self) -> int:
        return len(self.storage.get_all_expired(self.today))

    def expiring_soon(self, window: Optional[int] = None) -> List[Dict[str, Any]]:
        """Lots expiring within `window` days that have not expired yet, soonest first."""
        expiring_window = window if window is not None else DAYS_BEFORE_EXPIRY
        result: List[Dict[str, Any]] = []
        for ingredient in self.storage.get_all_ingredients():
            days_left = ingredient.days_left(self.today)
            if 0 <= days_left <= expiring_window:
                entry = ingredient.to_dict()
                entry['days_left'] = days_left
                result.append(entry)
        result.sort(key=lambda x: (x['days_left'], x['name']))
        return result

    def summary(self) -> Dict[str, Any]:
        return {
            'ingredients': self.ingredient_count(),
            'lots': self.lot_count(),
            'total_value': f"{self.total_value():.2f}",
            'expired_lots': self.expired_count(),
            'expired_value': f"{self.expired_value():.2f}",
            'expiring_soon': len(self.expiring_soon()),
        }


class InventoryStats:
    """Generate statistics across every storage of an inventory manager."""

    def __init__(self, manager, today: Optional[date] = None):
        self.manager = manager
        self.today = today or date.today()

    def _storage_stats(self) -> List[StorageStats]:
        return [StorageStats(storage, self.today) for storage in self.manager.get_storages()]

    def per_storage(self) -> Dict[str, Dict[str, Any]]:
        return {stats.storage.storage_name: stats.summary() for stats in self._storage_stats()}

    def total_value(self) -> float:
        return round_two(sum(stats.total_value() for stats in self._storage_stats()))

    def most_valuable_storage(self) -> Optional[str]:
        all_stats = self._storage_stats()
        if not all_stats:
            return None
        best = max(all_stats, key=lambda stats: stats.total_value())
        return best.storage.storage_name

    def summary(self) -> Dict[str, Any]:
        all_stats = self._storage_stats()
        logger.debug(f"Computing inventory stats over {len(all_stats)} storages")
        return {
            'storages': len(all_stats),
            'lots': sum(stats.lot_count() for stats in all_stats),
            'total_value': f"{self.total_value():.2f}",
            'expired_lots': sum(stats.expired_count() for stats in all_stats),
            'most_valuable_storage': self.most_valuable_storage() or '-',
        }
