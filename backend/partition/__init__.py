from .partition import Partition, partition_products

__all__ = ["Partition", "partition_products"]
