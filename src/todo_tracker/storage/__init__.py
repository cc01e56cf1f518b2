"""
Persistence backends implementing core.ports.TaskStorage.

- json_storage.py: JsonFileStorage (whole collection in one JSON file, atomic replace)
"""

from .json_storage import JsonFileStorage

__all__ = ["JsonFileStorage"]
