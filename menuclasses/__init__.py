"""
Attribute and class merging for rendered menu trees.

Public entry points delegate to the shared merger configured from Django
settings; build an ``AttributeMerger`` directly for custom un-escape rules.
"""

from .conf import get_default_merger
from .exceptions import InvalidClassValue, MenuClassesError
from .kinds import ElementKind
from .merger import AttributeMerger, split_classes
from .options import MappingOptions, ObjectOptions, as_options
from .unescape import UnescapeRules


def merge_attributes(kind, base_attrs, options, depth, order_index=None):
    return get_default_merger().merge_attributes(
        kind, base_attrs, options, depth, order_index
    )


def merge_classes(kind, classes, options, depth, order_index=None):
    return get_default_merger().merge_classes(kind, classes, options, depth, order_index)


def unescape_classes(classes):
    """Un-escape a class string or token list with the configured rules."""
    return get_default_merger().unescape(split_classes(classes))


def link_attributes(attrs, options, depth, order_index=None):
    return get_default_merger().link_attributes(attrs, options, depth, order_index)


def item_classes(classes, options, depth, order_index=None):
    return get_default_merger().item_classes(classes, options, depth, order_index)


def submenu_classes(classes, options, depth):
    return get_default_merger().submenu_classes(classes, options, depth)


__all__ = [
    "AttributeMerger",
    "ElementKind",
    "InvalidClassValue",
    "MappingOptions",
    "MenuClassesError",
    "ObjectOptions",
    "UnescapeRules",
    "as_options",
    "item_classes",
    "link_attributes",
    "merge_attributes",
    "merge_classes",
    "split_classes",
    "submenu_classes",
    "unescape_classes",
]
