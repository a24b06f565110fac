import random
import unittest
from sme.domain.Inventory import InventoryStore
from sme.domain.Outcome import Failure
from sme.events.Event_Bus import EventBus, INVENTORY_LOW_STOCK


class TestInventoryStore(unittest.TestCase):

    def setUp(self):
        self.bus = EventBus()
        self.events = []
        self.bus.subscribe(INVENTORY_LOW_STOCK, lambda name, payload: self.events.append(payload))
        self.store = InventoryStore(event_bus=self.bus)
        self.case15 = self.store.add_product("Apple iPhone 15 Case", "Accessories", 799.0, 5, 3)
        self.charger = self.store.add_product("Apple iPhone 15 Charger", "Accessories", 1499.0, 15, 5)
        self.s24 = self.store.add_product("Samsung S24 Case", "Accessories", 699.0, 2, 5)
        self.cable1 = self.store.add_product("USB-C Cable 1m", "Cables", 299.0, 25, 10)
        self.cable2 = self.store.add_product("USB-C Cable 2m", "Cables", 399.0, 8, 10)

    def test_ids_are_sequential_per_store(self):
        self.assertEqual([p.id for p in (self.case15, self.charger, self.s24, self.cable1, self.cable2)],
                         [1, 2, 3, 4, 5])
        other = InventoryStore(event_bus=EventBus())
        self.assertEqual(other.add_product("Anything", "", 1.0, 1, 0).id, 1)

    def test_search_by_prefix_case_insensitive(self):
        names = [p.name for p in self.store.search_by_prefix("APPLE")]
        self.assertEqual(names, ["Apple iPhone 15 Case", "Apple iPhone 15 Charger"])
        names = [p.name for p in self.store.search_by_prefix("usb-c cable ")]
        self.assertEqual(names, ["USB-C Cable 1m", "USB-C Cable 2m"])

    def test_search_empty_prefix_returns_all(self):
        self.assertEqual(len(self.store.search_by_prefix("")), 5)
        self.assertEqual(self.store.search_by_prefix(""), self.store.list_all())

    def test_search_absent_prefix(self):
        self.assertEqual(self.store.search_by_prefix("xiaomi"), [])

    def test_search_middle_of_name_does_not_match(self):
        self.assertEqual(self.store.search_by_prefix("iphone"), [])

    def test_list_all_sorted_by_name(self):
        names = [p.name.lower() for p in self.store.list_all()]
        self.assertEqual(names, sorted(names))

    def test_duplicate_names_both_listed(self):
        dup = self.store.add_product("usb-c cable 1m", "Cables", 250.0, 1, 0)
        found = self.store.search_by_prefix("usb-c cable 1")
        self.assertEqual([p.id for p in found], [self.cable1.id, dup.id])

    def test_low_stock_alerts_ascending(self):
        alerts = self.store.low_stock_alerts(5)
        self.assertEqual([p.id for p in alerts], [self.s24.id, self.cable2.id])
        for p in alerts:
            self.assertLessEqual(p.stock, p.reorder_level)

    def test_low_stock_alerts_limit(self):
        self.assertEqual([p.id for p in self.store.low_stock_alerts(1)], [self.s24.id])
        self.assertEqual(self.store.low_stock_alerts(0), [])

    def test_low_stock_alerts_does_not_mutate_ranking(self):
        first = self.store.low_stock_alerts(5)
        second = self.store.low_stock_alerts(5)
        self.assertEqual(first, second)

    def test_low_stock_ties_broken_by_id(self):
        a = self.store.add_product("Tie A", "", 1.0, 1, 3)
        b = self.store.add_product("Tie B", "", 1.0, 1, 3)
        ids = [p.id for p in self.store.low_stock_alerts(10)]
        self.assertEqual(ids[:2], [a.id, b.id])

    def test_update_stock_repositions(self):
        self.assertTrue(self.store.update_stock(self.s24.id, 10))
        self.assertEqual(self.s24.stock, 12)
        self.assertEqual([p.id for p in self.store.low_stock_alerts(5)], [self.cable2.id])
        self.assertTrue(self.store.update_stock(self.charger.id, -14))
        self.assertEqual([p.id for p in self.store.low_stock_alerts(5)], [self.charger.id, self.cable2.id])

    def test_update_stock_allows_negative(self):
        outcome = self.store.update_stock(self.s24.id, -5)
        self.assertTrue(outcome)
        self.assertEqual(self.s24.stock, -3)
        self.assertEqual(self.store.low_stock_alerts(1), [self.s24])

    def test_update_stock_unknown(self):
        outcome = self.store.update_stock(99, 1)
        self.assertFalse(outcome)
        self.assertEqual(outcome.failure, Failure.NOT_FOUND)

    def test_sell_product(self):
        self.assertTrue(self.store.sell_product(self.cable1.id, 20))
        self.assertEqual(self.cable1.stock, 5)
        self.assertEqual(self.store.low_stock_alerts(1), [self.s24])
        self.assertIn(self.cable1, self.store.low_stock_alerts(5))

    def test_sell_rejections_leave_state(self):
        before = [p.to_dict() for p in self.store.list_all()]
        self.assertEqual(self.store.sell_product(42, 1).failure, Failure.NOT_FOUND)
        self.assertEqual(self.store.sell_product(self.s24.id, 0).failure, Failure.INVALID_QUANTITY)
        self.assertEqual(self.store.sell_product(self.s24.id, -1).failure, Failure.INVALID_QUANTITY)
        self.assertEqual(self.store.sell_product(self.s24.id, 3).failure, Failure.INVALID_QUANTITY)
        self.assertEqual([p.to_dict() for p in self.store.list_all()], before)

    def test_sell_exact_stock(self):
        self.assertTrue(self.store.sell_product(self.s24.id, 2))
        self.assertEqual(self.s24.stock, 0)

    def test_random_sells_never_negative(self):
        rng = random.Random(7)
        ids = [p.id for p in self.store.list_all()]
        for _ in range(300):
            pid = rng.choice(ids)
            self.store.sell_product(pid, rng.randint(-2, 10))
            if rng.random() < 0.2:
                self.store.update_stock(pid, rng.randint(0, 5))
        for p in self.store.list_all():
            self.assertGreaterEqual(p.stock, 0)
        alerts = self.store.low_stock_alerts(100)
        self.assertEqual(alerts, sorted(alerts, key=lambda p: (p.stock, p.id)))
        expected = sorted((p for p in self.store.list_all() if p.is_low_stock()), key=lambda p: (p.stock, p.id))
        self.assertEqual(alerts, expected)

    def test_low_stock_event_published(self):
        names = [e['product'].name for e in self.events]
        self.assertEqual(names, ["Samsung S24 Case", "USB-C Cable 2m"])
        self.events.clear()
        self.store.sell_product(self.case15.id, 2)
        self.assertEqual(len(self.events), 1)
        self.assertEqual(self.events[0]['remaining'], 3)
        self.assertEqual(self.events[0]['threshold'], 3)

    def test_outside_stock_change_cannot_bypass_ranking(self):
        store = InventoryStore(event_bus=EventBus())
        a = store.add_product("A", "X", 1.0, 5, 10)
        b = store.add_product("B", "X", 1.0, 3, 10)
        found = store.search_by_prefix("a")[0]
        with self.assertRaises(AttributeError):
            found.stock = 1
        self.assertFalse(hasattr(found, "adjust_stock"))
        self.assertEqual([p.id for p in store.low_stock_alerts(5)], [b.id, a.id])
        store.update_stock(a.id, -4)
        alerts = store.low_stock_alerts(5)
        self.assertEqual([(p.name, p.stock) for p in alerts], [("A", 1), ("B", 3)])

    def test_count(self):
        self.assertEqual(self.store.count(), 5)
        self.assertEqual(len(self.store), 5)
        self.assertIs(self.store.get(self.s24.id), self.s24)
        self.assertIsNone(self.store.get(100))


if __name__ == '__main__':
    unittest.main()
