"""Logic for deep merging configuration dictionaries."""

from typing import Any

KEYED_LISTS = {"lang_detectors": "lang"}


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Objects are merged recursively.
    - Arrays in 'update' replace 'base' arrays, EXCEPT for keyed lists.
    - 'lang_detectors' merges by 'lang': same-language entries are replaced,
      new languages are appended.
    """
    result = base.copy()
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif (
            key in KEYED_LISTS
            and isinstance(value, list)
            and isinstance(result.get(key), list)
        ):
            result[key] = _merge_keyed_list(result[key], value, KEYED_LISTS[key])
        else:
            result[key] = value
    return result


def _merge_keyed_list(
    base: list[Any], update: list[Any], id_key: str
) -> list[Any]:
    """Merge two lists of mappings on an identifying key, keeping base order."""
    merged = list(base)
    positions = {
        entry.get(id_key): i
        for i, entry in enumerate(merged)
        if isinstance(entry, dict) and entry.get(id_key) is not None
    }
    for entry in update:
        ident = entry.get(id_key) if isinstance(entry, dict) else None
        if ident is not None and ident in positions:
            merged[positions[ident]] = entry
        else:
            if ident is not None:
                positions[ident] = len(merged)
            merged.append(entry)
    return merged
