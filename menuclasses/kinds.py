# menuclasses/kinds.py
"""
Element kinds a menu node can be decorated as, and the option key names each
kind reads from the options bag.
"""

from enum import Enum
from typing import Optional


class ElementKind(Enum):
    LINK = "link"
    ITEM_CONTAINER = "item-container"
    SUBMENU_CONTAINER = "submenu-container"

    @property
    def prefix(self) -> str:
        """Key prefix used for this kind's option names (a_class, li_atts, ...)."""
        return _PREFIXES[self]

    @classmethod
    def coerce(cls, value) -> "ElementKind":
        """
        Accept an ElementKind, its value ("link") or a markup alias ("a", "li",
        "submenu", "ul").
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        try:
            return _ALIASES[key]
        except KeyError:
            raise ValueError(f"Unknown menu element kind: {value!r}") from None

    def atts_keys(self, depth: int, order_index: Optional[int] = None) -> list[str]:
        """Attribute-map option keys in precedence order (lowest first)."""
        keys = [f"{self.prefix}_atts", f"{self.prefix}_atts_{depth}"]
        if has_order(order_index):
            keys.append(f"{self.prefix}_atts_order_{order_index}")
        return keys

    def class_keys(self, depth: int, order_index: Optional[int] = None) -> list[str]:
        """Class option keys in precedence order (lowest first)."""
        keys = [f"{self.prefix}_class", f"{self.prefix}_class_{depth}"]
        # Order-level class overrides are keyed by depth, not by order index.
        if has_order(order_index):
            keys.append(f"{self.prefix}_class_order_{depth}")
        return keys


_PREFIXES = {
    ElementKind.LINK: "a",
    ElementKind.ITEM_CONTAINER: "li",
    ElementKind.SUBMENU_CONTAINER: "submenu",
}

_ALIASES = {
    "link": ElementKind.LINK,
    "a": ElementKind.LINK,
    "item-container": ElementKind.ITEM_CONTAINER,
    "item": ElementKind.ITEM_CONTAINER,
    "li": ElementKind.ITEM_CONTAINER,
    "submenu-container": ElementKind.SUBMENU_CONTAINER,
    "submenu": ElementKind.SUBMENU_CONTAINER,
    "ul": ElementKind.SUBMENU_CONTAINER,
}


def has_order(order_index: Optional[int]) -> bool:
    """None, negative (the -1 sentinel) and non-numeric values mean "no order index"."""
    if order_index is None or order_index == "":
        return False
    try:
        return int(order_index) >= 0
    except (TypeError, ValueError):
        return False
