"""
Splits loaded records into discounted and other products.

A record is discounted iff its percentage is greater than zero. The split is
stable: each output keeps the relative order of the input.
"""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from models import PricedProduct, Product


@dataclass(frozen=True)
class Partition:
    discounted: tuple[Product, ...]
    other: tuple[Product, ...]


def partition_products(records: Iterable[PricedProduct]) -> Partition:
    discounted: list[Product] = []
    other: list[Product] = []
    for record in records:
        if record.discounted:
            discounted.append(record.product)
        else:
            other.append(record.product)
    return Partition(discounted=tuple(discounted), other=tuple(other))
