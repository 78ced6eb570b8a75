"""Logic for deep merging configuration dictionaries."""

from typing import Any

# List-valued keys whose user entries extend the defaults instead of replacing them.
ADDITIVE_KEYS = frozenset({"hidden_base_types"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Objects are merged recursively.
    - Arrays in 'update' replace 'base' arrays, except for ADDITIVE_KEYS,
      which are merged, deduplicated and kept in first-seen order.
    """
    result = base.copy()
    for key, value in update.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        elif key in ADDITIVE_KEYS and isinstance(value, list) and isinstance(current, list):
            result[key] = list(dict.fromkeys([*current, *value]))
        else:
            result[key] = value
    return result
