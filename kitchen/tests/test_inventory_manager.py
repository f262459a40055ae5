from datetime import date
import io
import unittest
from kitchen.domain.Unit import ValidUnit
from kitchen.events.Event_Bus import EventBus, STORAGE_NOTHING_TO_CHECK
from kitchen.infra.Input_Scanner import InputScanner
from kitchen.infra.Output_Handler import OutputHandler
from kitchen.logic.inventory.manager import InventoryManager
from kitchen.utilities.errors import Aborted


class TestInventoryManager(unittest.TestCase):

    def setUp(self):
        self.bus = EventBus()
        self.manager = InventoryManager(self.bus)
        self.out = io.StringIO()

    def scanner(self, text):
        return InputScanner(io.StringIO(text), OutputHandler(self.out))

    def test_create_storage(self):
        fridge = self.manager.create_ingredient_storage("  Big   Fridge ")
        self.assertEqual(fridge.storage_name, "Big Fridge")
        self.assertIsNone(self.manager.create_ingredient_storage("big fridge"))
        self.assertIsNone(self.manager.create_ingredient_storage("   "))
        self.assertIs(self.manager.get_storage("BIG FRIDGE"), fridge)
        self.assertEqual(self.manager.get_storage_names(), ["Big Fridge"])

    def test_storages_share_the_manager_bus(self):
        received = []
        self.bus.subscribe(STORAGE_NOTHING_TO_CHECK, lambda name, payload: received.append(payload))
        self.manager.create_ingredient_storage("Freezer").remove_expired()
        self.assertEqual(received, [{'storage': 'Freezer'}])

    def test_remove_storage(self):
        self.manager.create_ingredient_storage("Freezer")
        self.assertEqual(self.manager.remove_ingredient_storage("freezer").storage_name, "Freezer")
        self.assertIsNone(self.manager.remove_ingredient_storage("freezer"))
        self.assertEqual(self.manager.get_storages(), [])

    def test_create_ingredient(self):
        today = date(2024, 3, 1)
        ingredient = self.manager.create_ingredient("Milk", self.scanner("1.5 l\n-2\n22.9\n6\n"), today=today)
        self.assertEqual(ingredient.name, "Milk")
        self.assertEqual((ingredient.amount, ingredient.unit), (1.5, ValidUnit.L))
        self.assertEqual(ingredient.value, 22.9)
        self.assertEqual(ingredient.expiry_date, date(2024, 3, 7))
        self.assertIn("Value cannot be negative.", self.out.getvalue())

    def test_create_ingredient_abort(self):
        with self.assertRaises(Aborted):
            self.manager.create_ingredient("Milk", self.scanner("1 l\nabort\n"))


if __name__ == '__main__':
    unittest.main()
