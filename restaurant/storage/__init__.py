"""
Storage layer: one JSON file per collection.
"""

from restaurant.storage.json_store import JsonStore, DataStores

__all__ = [
    "JsonStore",
    "DataStores",
]
