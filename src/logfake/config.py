"""Configuration collaborator for the fake.

The fake only ever reads and writes one setting, ``logging.default``
(the channel used when none is named). The repository is a nested dict
addressed with dotted keys, handed to LogFake at construction time.

Config files are optional JSON layered over the defaults:

    {"logging": {"default": "stack"}}
"""

import copy
import json


DEFAULT_CHANNEL_KEY = "logging.default"

DEFAULTS = {
    "logging": {
        "default": "stack",
    },
}

_MISSING = object()


class Repository:
    """Nested-dict configuration with dotted key access."""

    def __init__(self, items=None):
        self._items = copy.deepcopy(DEFAULTS) if items is None else dict(items)

    def has(self, key):
        """Return True if the dotted key exists (even when set to None)."""
        return self._lookup(key) is not _MISSING

    def get(self, key, default=None):
        """Return the value at a dotted key, or `default` when absent."""
        value = self._lookup(key)
        return default if value is _MISSING else value

    def set(self, key, value):
        """Set the value at a dotted key, creating parents as needed."""
        *parents, leaf = key.split(".")
        node = self._items
        for part in parents:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[leaf] = value

    def all(self):
        """Return a deep copy of every setting."""
        return copy.deepcopy(self._items)

    def _lookup(self, key):
        node = self._items
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return _MISSING
            node = node[part]
        return node


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON file, returning empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def merge(base, override):
    """Recursively merge `override` into a copy of `base`."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path=None):
    """Build a Repository from a JSON file layered over DEFAULTS."""
    items = DEFAULTS
    if path is not None:
        items = merge(DEFAULTS, load_json(path))
    return Repository(copy.deepcopy(items))
