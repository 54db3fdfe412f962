# menuclasses/options.py
"""
Read-only views over the options bag handed to the merger.

Menu options arrive in whatever shape the caller has at hand: a plain dict, a
template Context, a dataclass or a SimpleNamespace built from a menu
definition. The merger only ever needs to ask two things of it, whether a key
is present and what its value is, so each shape gets a small adapter exposing
``has()`` and ``get()``.
"""

from typing import Any

from .exceptions import InvalidClassValue


class MappingOptions:
    """Options backed by anything with ``in`` and ``.get()`` (dict, Context, QueryDict)."""

    def __init__(self, data):
        self._data = data

    def has(self, key: str) -> bool:
        return key in self._data

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def __repr__(self):
        return f"MappingOptions({self._data!r})"


class ObjectOptions:
    """Options backed by attributes of an arbitrary object."""

    def __init__(self, obj):
        self._obj = obj

    def has(self, key: str) -> bool:
        return hasattr(self._obj, key)

    def get(self, key: str, default: Any = None) -> Any:
        return getattr(self._obj, key, default)

    def __repr__(self):
        return f"ObjectOptions({self._obj!r})"


def as_options(value) -> "MappingOptions | ObjectOptions":
    """Wrap ``value`` in the adapter matching its shape."""
    if isinstance(value, (MappingOptions, ObjectOptions)):
        return value
    if value is None:
        return MappingOptions({})
    if hasattr(value, "__contains__") and hasattr(value, "get"):
        return MappingOptions(value)
    return ObjectOptions(value)


def as_attributes(value, key: str = "attributes") -> dict:
    """
    Copy an attribute set into a plain dict.

    Accepts mappings (anything with ``keys()`` and item access) and plain
    objects, whose public instance attributes are used. Empty values give an
    empty dict.
    """
    if not value:
        return {}
    if hasattr(value, "keys") and hasattr(value, "__getitem__"):
        return {name: value[name] for name in value.keys()}
    if isinstance(value, (str, bytes, int, float, list, tuple)):
        raise InvalidClassValue(key, value, expected="a mapping of attributes or an object")
    try:
        fields = vars(value)
    except TypeError:
        raise InvalidClassValue(
            key, value, expected="a mapping of attributes or an object"
        ) from None
    return {name: v for name, v in fields.items() if not name.startswith("_")}
