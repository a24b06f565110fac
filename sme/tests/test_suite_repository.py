import json
import os
import shutil
import tempfile
import unittest
from datetime import date, timedelta
from pydantic import ValidationError
from sme.infra.Suite_Repository import load_suite, read_suite_from_json
from sme import main as sme_main


def _sample_data():
    today = date.today()
    return {
        "products": [
            {"name": "Apple iPhone 15 Case", "category": "Accessories", "price": 799.0, "stock": 5, "reorder_level": 3},
            {"name": "Samsung S24 Case", "category": "Accessories", "price": 699.0, "stock": 2, "reorder_level": 5},
            {"name": "USB-C Cable 2m", "category": "Cables", "price": 399.0, "stock": 8, "reorder_level": 10},
        ],
        "receivables": [
            {"amount": 18000, "due_date": (today + timedelta(days=3)).isoformat()},
        ],
        "payables": [
            {"amount": 12000, "due_date": (today + timedelta(days=2)).isoformat(), "impact_score": 60},
            {"amount": 8000, "due_date": (today + timedelta(days=5)).isoformat(), "impact_score": 30},
            {"amount": 15000, "due_date": (today + timedelta(days=10)).isoformat(), "impact_score": 80},
        ],
        "leads": [
            {"name": "Rohit Sharma", "email": "rohit@xyz.com", "phone": "9876543210"},
            {"name": "Rahul Verma", "email": "rahul.v@abc.in", "phone": "9898989898"},
        ],
        "tasks": [
            {"name": "Collect requirements", "duration_days": 3},
            {"name": "Set up inventory", "duration_days": 2},
            {"name": "Integrate billing", "duration_days": 4},
            {"name": "Test & train staff", "duration_days": 2},
        ],
        "dependencies": [
            {"task": "Set up inventory", "depends_on": "Collect requirements"},
            {"task": "Integrate billing", "depends_on": "Set up inventory"},
            {"task": "Test & train staff", "depends_on": "Integrate billing"},
        ],
    }


class TestSuiteRepository(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def test_load_populates_every_store(self):
        suite = load_suite(_sample_data())
        summary = suite.summary()
        self.assertEqual(summary['products'], 3)
        self.assertEqual(summary['low_stock'], 2)
        self.assertEqual(summary['leads'], 2)
        self.assertEqual(summary['tasks'], 4)
        self.assertEqual([u['id'] for u in summary['upcoming']], [2, 1, 3, 4])
        self.assertEqual(summary['upcoming'][0]['kind'], 'payable')
        critical = suite.workflow.critical_path()
        self.assertEqual(critical.total_duration, 11)
        self.assertEqual([p.amount for p in suite.finance.pick_payables_to_pay(20000)], [12000, 8000])

    def test_alerts_recorded_while_loading(self):
        suite = load_suite(_sample_data())
        names = [e['name'] for e in suite.alerts.get_events()['events']]
        self.assertEqual(names, ["Samsung S24 Case", "USB-C Cable 2m"])

    def test_cycle_in_data_raises(self):
        data = _sample_data()
        data["dependencies"].append({"task": "Collect requirements", "depends_on": "Test & train staff"})
        with self.assertRaises(ValueError):
            load_suite(data)

    def test_invalid_data_raises(self):
        data = _sample_data()
        data["payables"][0]["impact_score"] = 0
        with self.assertRaises(ValidationError):
            load_suite(data)

    def test_suites_are_independent(self):
        first = load_suite(_sample_data())
        second = load_suite(_sample_data())
        first.inventory.sell_product(1, 5)
        self.assertEqual(second.inventory.get(1).stock, 5)
        self.assertEqual(len(second.alerts), 2)

    def test_read_from_json_and_main(self):
        path = os.path.join(self.tmpdir, "suite.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump(_sample_data(), f)
        suite = read_suite_from_json(path)
        self.assertEqual(suite.workflow.task_count(), 4)
        with self.assertLogs("sme", level="INFO") as logs:
            self.assertEqual(sme_main.main([path]), 0)
        self.assertTrue(any("Critical path (11 days)" in line for line in logs.output))

    def test_main_usage(self):
        with self.assertLogs("sme", level="ERROR"):
            self.assertEqual(sme_main.main([]), 2)
