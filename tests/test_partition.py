"""Unit tests for partition_products: exhaustive, disjoint, order-preserving."""

import unittest

from backend.partition import partition_products
from models import PricedProduct, Product


def _priced(name: str, percentage: float) -> PricedProduct:
    return PricedProduct(
        product=Product(name=name, url=f"https://example.com/{name}", price=100.0),
        percentage=percentage,
    )


class TestPartitionProducts(unittest.TestCase):
    def test_empty_input(self) -> None:
        split = partition_products([])

        self.assertEqual(split.discounted, ())
        self.assertEqual(split.other, ())

    def test_positive_percentage_is_discounted(self) -> None:
        records = [_priced("a", 10), _priced("b", 0), _priced("c", 25)]

        split = partition_products(records)

        self.assertEqual([p.name for p in split.discounted], ["a", "c"])
        self.assertEqual([p.name for p in split.other], ["b"])

    def test_fractional_percentage_counts_as_discounted(self) -> None:
        split = partition_products([_priced("tiny", 0.01)])

        self.assertEqual([p.name for p in split.discounted], ["tiny"])

    def test_every_record_lands_in_exactly_one_group(self) -> None:
        percentages = [0, 5, 0, 40, 0, 0, 12.5, 100, 0]
        records = [_priced(f"p{i}", pct) for i, pct in enumerate(percentages)]

        split = partition_products(records)

        self.assertEqual(len(split.discounted) + len(split.other), len(records))
        names = [p.name for p in split.discounted] + [p.name for p in split.other]
        self.assertCountEqual(names, [r.product.name for r in records])
        self.assertTrue(set(split.discounted).isdisjoint(split.other))

    def test_order_is_preserved_within_groups(self) -> None:
        percentages = [30, 0, 10, 0, 20, 0]
        records = [_priced(f"p{i}", pct) for i, pct in enumerate(percentages)]

        split = partition_products(records)

        self.assertEqual([p.name for p in split.discounted], ["p0", "p2", "p4"])
        self.assertEqual([p.name for p in split.other], ["p1", "p3", "p5"])

    def test_groups_follow_discounted_flag(self) -> None:
        records = [_priced("zero", 0), _priced("some", 3)]

        split = partition_products(records)

        self.assertEqual(
            [r.product.name for r in records if r.discounted],
            [p.name for p in split.discounted],
        )
        self.assertEqual(
            [r.product.name for r in records if not r.discounted],
            [p.name for p in split.other],
        )

    def test_accepts_any_iterable(self) -> None:
        split = partition_products(_priced(n, 1) for n in ("x", "y"))

        self.assertEqual([p.name for p in split.discounted], ["x", "y"])
