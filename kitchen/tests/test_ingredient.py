from datetime import date, timedelta
import unittest
from kitchen.domain.Ingredient import Ingredient
from kitchen.domain.Unit import ValidUnit
from kitchen.logic.units import converter
from kitchen.utilities.errors import IncompatibleUnits, NullIngredient


class TestIngredient(unittest.TestCase):

    def setUp(self):
        self.expiry = date.today() + timedelta(days=4)
        self.test_ingredient = Ingredient("test", 3, ValidUnit.KG, 30.0, self.expiry)
        self.merged_ingredient = Ingredient("test", 300, ValidUnit.G, 40.0, self.expiry)

    def test_merge(self):
        self.test_ingredient.merge(self.merged_ingredient)
        self.assertEqual(self.test_ingredient.name, "test")
        self.assertEqual(self.test_ingredient.amount, 3.3)
        self.assertEqual(self.test_ingredient.unit, ValidUnit.KG)
        self.assertEqual(self.test_ingredient.value, 70.0)
        self.assertEqual(self.test_ingredient.expiry_date, self.expiry)

    def test_merge_order_does_not_matter(self):
        self.merged_ingredient.merge(self.test_ingredient)
        self.assertEqual(self.merged_ingredient.amount, 3.3)
        self.assertEqual(self.merged_ingredient.unit, ValidUnit.KG)
        self.assertEqual(self.merged_ingredient.value, 70.0)
        self.assertEqual(self.merged_ingredient.expiry_date, self.expiry)

    def test_merge_leaves_incoming_untouched(self):
        self.test_ingredient.merge(self.merged_ingredient)
        self.assertEqual(self.merged_ingredient.amount, 300)
        self.assertEqual(self.merged_ingredient.unit, ValidUnit.G)

    def test_merge_small_amounts_stays_in_the_finer_unit(self):
        pinch = Ingredient("test", 2, ValidUnit.G, 1.0, self.expiry)
        pinch.merge(Ingredient("test", 1, ValidUnit.G, 2.0, self.expiry))
        self.assertEqual((pinch.amount, pinch.unit, pinch.value), (3.0, ValidUnit.G, 3.0))

    def test_merge_across_families_fails(self):
        with self.assertRaises(IncompatibleUnits):
            self.test_ingredient.merge(Ingredient("test", 1, ValidUnit.L, 1.0, self.expiry))
        self.assertEqual((self.test_ingredient.amount, self.test_ingredient.unit), (3.0, ValidUnit.KG))

    def test_copy(self):
        duplicate = self.test_ingredient.copy()
        self.assertEqual(duplicate, self.test_ingredient)
        self.assertIsNot(duplicate, self.test_ingredient)
        duplicate.amount = 1
        self.assertEqual(self.test_ingredient.amount, 3)

    def test_merge_rejects_other_dates_and_none(self):
        other_day = Ingredient("test", 1, ValidUnit.KG, 1.0, self.expiry + timedelta(days=1))
        with self.assertRaises(ValueError):
            self.test_ingredient.merge(other_day)
        with self.assertRaises(NullIngredient):
            self.test_ingredient.merge(None)

    def test_convert(self):
        converter.convert_ingredient(self.test_ingredient, ValidUnit.G)
        self.assertEqual(self.test_ingredient.unit, ValidUnit.G)
        self.assertEqual(self.test_ingredient.amount, 3000)

    def test_set_amount(self):
        with self.assertRaises(ValueError):
            self.test_ingredient.amount = -123
        with self.assertRaises(ValueError):
            self.test_ingredient.value = -1

    def test_equals(self):
        ingredient1 = Ingredient("test", 3.3, ValidUnit.KG, 70.0, self.expiry)
        ingredient2 = Ingredient(" TEST ", 3.3, ValidUnit.KG, 70.0, self.expiry)
        self.assertEqual(ingredient1, ingredient2)
        self.assertNotEqual(ingredient1, Ingredient("test", 3.3, ValidUnit.KG, 71.0, self.expiry))

    def test_expiring_in(self):
        today = date(2024, 12, 1)
        ingredient = Ingredient.expiring_in("milk", 1, ValidUnit.L, 20, 4, today=today)
        self.assertEqual(ingredient.expiry_date, date(2024, 12, 5))
        self.assertEqual(ingredient.days_left(today), 4)
        self.assertFalse(ingredient.is_expired(today))
        self.assertTrue(ingredient.is_expired(date(2024, 12, 6)))
        self.assertEqual(ingredient.ingredient_type, "LIQUID")


if __name__ == '__main__':
    unittest.main()
