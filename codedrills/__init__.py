"""LRU cache, chained hash map, matrix helpers, sphere mesh and a headless solar-system model."""

__version__ = "0.1.0"
__all__ = ["lrucache", "hashmap", "transforms", "sphere", "solar"]