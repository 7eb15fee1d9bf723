"""Dictionary helpers used across Markd."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

__all__ = ["deep_merge", "set_nested"]


def deep_merge(base: Mapping[str, object], override: Mapping[str, object]) -> dict[str, object]:
    """Recursively merge two mappings, giving precedence to override.

    Lists and scalars in override replace the base value; None never does.
    """
    result: dict[str, object] = dict(base)

    for key, override_value in override.items():
        if override_value is None:
            continue

        existing_value = result.get(key)

        if isinstance(existing_value, Mapping) and isinstance(override_value, Mapping):
            result[key] = deep_merge(existing_value, override_value)
        elif isinstance(override_value, list):
            result[key] = list(override_value)
        else:
            result[key] = override_value

    return result


def set_nested(data: dict[str, object], path: Sequence[str], value: object) -> None:
    """Set value at path inside data, creating (or replacing non-dict) parents."""
    if not path:
        raise ValueError("path must not be empty")

    cursor = data
    *parents, leaf = path
    for segment in parents:
        child = cursor.get(segment)
        if not isinstance(child, dict):
            child = {}
            cursor[segment] = child
        cursor = child
    cursor[leaf] = value
