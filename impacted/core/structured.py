"""Helpers for safely working with dynamic (untyped) structures.

Use these at boundaries where we ingest JSON (sfdx-project.json) or YAML
(release configs). They provide runtime validation and static type narrowing.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]
ObjList = list[object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    """Return obj as StrDict if it matches, else None."""
    if is_str_dict(obj):
        return obj
    return None


def as_obj_list(obj: object) -> ObjList | None:
    """Return obj as ObjList if it is a list, else None."""
    if isinstance(obj, list):
        return cast(ObjList, obj)
    return None


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value from a mapping, stripping whitespace.

    Returns None if missing, not a str, or empty after stripping.
    """
    value = table.get(key)
    if not isinstance(value, str):
        return None
    s = value.strip()
    return s or None


def get_text(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value from a mapping exactly as written.

    Unlike :func:`get_str`, surrounding whitespace is kept. Returns None if
    missing, not a str, or empty.
    """
    value = table.get(key)
    if not isinstance(value, str) or not value:
        return None
    return value


def get_bool(table: Mapping[str, object], key: str) -> bool | None:
    """Get a boolean value from a mapping (None if missing or not a bool)."""
    value = table.get(key)
    if isinstance(value, bool):
        return value
    return None


def get_list(table: Mapping[str, object], key: str) -> ObjList | None:
    """Get a list from a mapping."""
    return as_obj_list(table.get(key))


def get_str_list(table: Mapping[str, object], key: str) -> tuple[str, ...]:
    """Get a list of strings from a mapping.

    Non-string items are dropped; a missing or non-list value yields ().
    YAML scalars such as ``- 123`` are not coerced.
    """
    items = get_list(table, key)
    if items is None:
        return ()
    return tuple(item for item in items if isinstance(item, str))
