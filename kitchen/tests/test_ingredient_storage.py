from datetime import date, timedelta
import unittest
from kitchen.domain.Ingredient import Ingredient
from kitchen.domain.IngredientStorage import IngredientStorage
from kitchen.domain.Measurement import Measurement
from kitchen.domain.Unit import ValidUnit
from kitchen.events.Event_Bus import (
    EventBus, STORAGE_EXPIRED_REMOVED, STORAGE_NEAR_EXPIRY, STORAGE_NOTHING_TO_CHECK
)
from kitchen.utilities.errors import IncompatibleUnits, NullIngredient


class TestIngredientStorage(unittest.TestCase):

    def setUp(self):
        self.events = []
        bus = EventBus()
        for name in (STORAGE_EXPIRED_REMOVED, STORAGE_NOTHING_TO_CHECK, STORAGE_NEAR_EXPIRY):
            bus.subscribe(name, lambda event_name, payload: self.events.append((event_name, payload)))
        self.storage = IngredientStorage("Fridge").set_event_bus(bus)
        self.day = date.today() + timedelta(days=10)

    def _events(self, name):
        return [payload for event_name, payload in self.events if event_name == name]

    def test_add_none(self):
        with self.assertRaises(NullIngredient):
            self.storage.add_ingredient(None)

    def test_same_day_lots_merge(self):
        self.storage.add_ingredient(Ingredient("test", 3, ValidUnit.KG, 30.0, self.day))
        self.storage.add_ingredient(Ingredient("Test", 300, ValidUnit.G, 40.0, self.day))
        lots = self.storage.find_ingredient("test")
        self.assertEqual(len(lots), 1)
        self.assertEqual(lots[0].amount, 3.3)
        self.assertEqual(lots[0].unit, ValidUnit.KG)
        self.assertEqual(lots[0].value, 70.0)
        self.assertEqual(len(self.storage), 1)

    def test_small_gram_lots_merge_without_loss(self):
        self.storage.add_ingredient(Ingredient("saffron", 2, ValidUnit.G, 50, self.day))
        self.storage.add_ingredient(Ingredient("saffron", 1, ValidUnit.G, 25, self.day))
        lots = self.storage.find_ingredient("saffron")
        self.assertEqual((lots[0].amount, lots[0].unit, lots[0].value), (3.0, ValidUnit.G, 75.0))
        self.assertTrue(self.storage.is_ingredient_enough([Measurement("saffron", 3, ValidUnit.G)]))

    def test_small_milliliter_lots_merge_without_loss(self):
        self.storage.add_ingredient(Ingredient("vanilla", 4, ValidUnit.ML, 8, self.day))
        self.storage.add_ingredient(Ingredient("vanilla", 3, ValidUnit.ML, 6, self.day))
        lots = self.storage.find_ingredient("vanilla")
        self.assertEqual((lots[0].amount, lots[0].unit), (7.0, ValidUnit.ML))

    def test_mixed_unit_merge_keeps_the_finer_unit_in_any_order(self):
        self.storage.add_ingredient(Ingredient("pepper", 0.01, ValidUnit.KG, 3, self.day))
        self.storage.add_ingredient(Ingredient("pepper", 2, ValidUnit.G, 1, self.day))
        other = IngredientStorage("Pantry").set_event_bus(EventBus())
        other.add_ingredient(Ingredient("pepper", 2, ValidUnit.G, 1, self.day))
        other.add_ingredient(Ingredient("pepper", 0.01, ValidUnit.KG, 3, self.day))
        for storage in (self.storage, other):
            lot = storage.find_ingredient("pepper")[0]
            self.assertEqual((lot.amount, lot.unit, lot.value), (12.0, ValidUnit.G, 4.0))

    def test_storage_keeps_its_own_copy(self):
        butter = Ingredient("butter", 250, ValidUnit.G, 25, self.day)
        other = IngredientStorage("Pantry").set_event_bus(EventBus())
        stored = self.storage.add_ingredient(butter)
        other.add_ingredient(butter)
        self.assertIsNot(stored, butter)
        self.storage.add_ingredient(Ingredient("butter", 250, ValidUnit.G, 25, self.day))
        self.assertEqual(butter.amount, 250)
        self.assertEqual(other.find_ingredient("butter")[0].amount, 250)
        self.assertEqual((stored.amount, stored.unit), (0.5, ValidUnit.KG))

    def test_names_are_normalized(self):
        self.storage.add_ingredient(Ingredient("  Whole   Milk", 1, ValidUnit.L, 20, self.day))
        self.storage.add_ingredient(Ingredient("whole milk", 5, ValidUnit.DL, 10, self.day))
        lots = self.storage.find_ingredient("WHOLE MILK")
        self.assertEqual(len(lots), 1)
        self.assertEqual(lots[0].amount, 1.5)
        self.assertEqual(self.storage.get_ingredient_overview(), ["Whole Milk"])

    def test_distinct_dates_do_not_merge(self):
        other_day = self.day + timedelta(days=3)
        first = Ingredient("butter", 250, ValidUnit.G, 25, self.day)
        second = Ingredient("butter", 500, ValidUnit.G, 45, other_day)
        self.storage.add_ingredient(first)
        self.storage.add_ingredient(second)
        self.assertEqual(self.storage.find_ingredient("butter"), [first, second])
        self.assertEqual(self.storage.find_ingredient("butter", self.day), [first])
        self.assertEqual(self.storage.find_ingredient("butter", other_day), [second])
        self.assertEqual(self.storage.find_ingredient("butter", self.day - timedelta(days=1)), [])

    def test_remove_last_lot_drops_the_key(self):
        butter = Ingredient("butter", 250, ValidUnit.G, 25, self.day)
        self.storage.add_ingredient(butter)
        self.assertTrue(self.storage.remove_ingredient(Ingredient("butter", 250, ValidUnit.G, 25, self.day)))
        self.assertEqual(self.storage.find_ingredient("butter"), [])
        self.assertFalse(self.storage.is_ingredient_present("butter"))
        self.assertEqual(len(self.storage), 0)

    def test_remove_keeps_other_lots(self):
        first = Ingredient("butter", 250, ValidUnit.G, 25, self.day)
        second = Ingredient("butter", 500, ValidUnit.G, 45, self.day + timedelta(days=1))
        self.storage.add_ingredient(first)
        self.storage.add_ingredient(second)
        self.assertTrue(self.storage.remove_ingredient(second))
        self.assertEqual(self.storage.find_ingredient("butter"), [first])

    def test_remove_absent(self):
        self.assertFalse(self.storage.remove_ingredient(Ingredient("ghost", 1, ValidUnit.G, 1, self.day)))
        self.assertFalse(self.storage.remove_ingredient(None))

    def test_is_ingredient_enough(self):
        self.storage.add_ingredient(Ingredient("flour", 500, ValidUnit.G, 10, self.day))
        self.storage.add_ingredient(Ingredient("flour", 1, ValidUnit.KG, 18, self.day + timedelta(days=5)))
        self.assertTrue(self.storage.is_ingredient_enough([Measurement("flour", 1.4, ValidUnit.KG)]))
        self.assertTrue(self.storage.is_ingredient_enough([Measurement("Flour", 1500, ValidUnit.G)]))
        self.assertFalse(self.storage.is_ingredient_enough([Measurement("flour", 1.6, ValidUnit.KG)]))
        self.assertFalse(self.storage.is_ingredient_enough([Measurement("sugar", 1, ValidUnit.G)]))
        self.assertTrue(self.storage.is_ingredient_enough([]))
        # stored lots keep their own units
        self.assertEqual([lot.unit for lot in self.storage.find_ingredient("flour")], [ValidUnit.G, ValidUnit.KG])

    def test_is_ingredient_enough_short_circuits(self):
        self.storage.add_ingredient(Ingredient("flour", 1, ValidUnit.KG, 18, self.day))
        seen = []

        def requirements():
            for measurement in (Measurement("flour", 5, ValidUnit.KG), Measurement("flour", 1, ValidUnit.L)):
                seen.append(measurement)
                yield measurement

        # the second requirement would raise IncompatibleUnits if it were evaluated
        self.assertFalse(self.storage.is_ingredient_enough(requirements()))
        self.assertEqual(len(seen), 1)

    def test_is_ingredient_enough_incompatible_units(self):
        self.storage.add_ingredient(Ingredient("flour", 1, ValidUnit.KG, 18, self.day))
        with self.assertRaises(IncompatibleUnits):
            self.storage.is_ingredient_enough([Measurement("flour", 1, ValidUnit.L)])

    def test_is_ingredient_enough_needs_a_unit(self):
        self.storage.add_ingredient(Ingredient("flour", 1, ValidUnit.KG, 18, self.day))
        with self.assertRaises(IncompatibleUnits):
            self.storage.is_ingredient_enough([Measurement("flour", 1)])

    def test_remove_expired_on_empty_storage(self):
        self.assertIsNone(self.storage.remove_expired())
        self.assertEqual(len(self._events(STORAGE_NOTHING_TO_CHECK)), 1)
        self.assertEqual(self._events(STORAGE_EXPIRED_REMOVED), [])

    def test_remove_expired(self):
        today = date.today()
        old = Ingredient("yoghurt", 5, ValidUnit.DL, 15, today - timedelta(days=1))
        fresh = Ingredient("yoghurt", 5, ValidUnit.DL, 15, today)
        gone = Ingredient("cream", 2, ValidUnit.DL, 12, today - timedelta(days=3))
        for ingredient in (old, fresh, gone):
            self.storage.add_ingredient(ingredient)
        removed = self.storage.remove_expired()
        self.assertCountEqual(removed, [old, gone])
        self.assertEqual(self.storage.find_ingredient("yoghurt"), [fresh])
        self.assertFalse(self.storage.is_ingredient_present("cream"))
        self.assertCountEqual(self._events(STORAGE_EXPIRED_REMOVED)[0]['removed'], [old, gone])

    def test_remove_expired_nothing_found(self):
        self.storage.add_ingredient(Ingredient("rice", 1, ValidUnit.KG, 20, self.day))
        self.assertEqual(self.storage.remove_expired(), [])
        self.assertEqual(self._events(STORAGE_EXPIRED_REMOVED)[0]['removed'], [])

    def test_near_expiry_is_published(self):
        self.storage.add_ingredient(Ingredient.expiring_in("fish", 400, ValidUnit.G, 80, 1))
        self.storage.add_ingredient(Ingredient.expiring_in("rice", 1, ValidUnit.KG, 20, 300))
        near = self._events(STORAGE_NEAR_EXPIRY)
        self.assertEqual([payload['ingredient'].name for payload in near], ["fish"])
        self.assertEqual(near[0]['days_left'], 1)

    def test_value_and_clear(self):
        self.storage.add_ingredient(Ingredient("rice", 1, ValidUnit.KG, 20.5, self.day))
        self.storage.add_ingredient(Ingredient("oil", 1, ValidUnit.L, 49.99, self.day))
        self.assertEqual(self.storage.get_all_value(), 70.49)
        self.assertEqual(self.storage.clear(), 2)
        self.assertEqual(self.storage.get_all_ingredients(), [])
        self.assertIn("(Empty)", str(self.storage))


if __name__ == '__main__':
    unittest.main()
