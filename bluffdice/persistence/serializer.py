"""
serializer.py
JSON helpers shared by the persistence layer (JsonFileStore) and the simulation script.
"""

import json
from typing import Any


def dumps(obj: Any) -> str:
    """
    Serialize a Python object (including dataclasses) to a JSON string.
    Args:
        obj: Object to serialize.
    Returns:
        str: JSON string.
    """
    return json.dumps(obj, default=lambda o: getattr(o, '__dict__', str(o)), sort_keys=True)


def loads(s: str):
    """Deserialize a JSON string to a Python object (dict/list)."""
    return json.loads(s)
