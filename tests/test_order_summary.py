"""Unit tests for bread_order.services.orders.summarize: grouping orders by item."""

import unittest

from bread_order.schemas.orders import SUMMARY_SUBJECT
from bread_order.services.orders import summarize


class TestSummarize(unittest.TestCase):
    def test_groups_in_first_seen_order(self) -> None:
        summary = summarize(
            [
                {"item": "Rye", "qty": 2},
                {"item": "Baguette", "qty": 1},
                {"item": "Rye", "qty": 5},
            ]
        )
        self.assertEqual(summary.subject, SUMMARY_SUBJECT)
        self.assertEqual(summary.totals, {"Rye": 7, "Baguette": 1})
        self.assertEqual(summary.lines, ["Rye: 7", "Baguette: 1"])
        self.assertEqual(summary.order_count, 3)

    def test_empty(self) -> None:
        summary = summarize([])
        self.assertEqual(summary.lines, [])
        self.assertEqual(summary.totals, {})
        self.assertEqual(summary.order_count, 0)

    def test_skips_malformed_records(self) -> None:
        summary = summarize(
            [
                {"item": "Rye", "qty": 2},
                {"item": "Rye", "qty": "3"},
                {"item": "Rye", "qty": True},
                {"qty": 4},
                "Rye",
            ]
        )
        self.assertEqual(summary.totals, {"Rye": 2})
        self.assertEqual(summary.order_count, 1)


if __name__ == "__main__":
    unittest.main()
