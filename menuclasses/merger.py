# menuclasses/merger.py
"""
Merge caller-supplied attribute and class overrides into menu nodes.

The menu renderer calls the merger once per node for each element it emits:
the link (``a``), the item container (``li``) and, when the node has
children, the submenu container (``submenu``). Overrides are looked up in the
options bag by naming convention, lowest precedence first:

    {prefix}_atts                 {prefix}_class
    {prefix}_atts_{depth}         {prefix}_class_{depth}
    {prefix}_atts_order_{index}   {prefix}_class_order_{depth}

Non-class attributes from later maps replace earlier ones. Classes never
replace: base classes, classes from the ``*_atts*`` maps and classes from the
``*_class*`` keys are concatenated in that order, each source exactly once,
and the whole list is un-escaped in a single pass at the end.

Example:
    >>> merger = AttributeMerger()
    >>> merger.merge_attributes(
    ...     "link",
    ...     {},
    ...     {"a_atts": {"target": "_blank"}, "a_class": "btn", "a_class_1": "hover___underline"},
    ...     1,
    ...     3,
    ... )
    {'target': '_blank', 'class': 'btn hover:underline'}
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from .exceptions import InvalidClassValue
from .kinds import ElementKind
from .options import as_attributes, as_options
from .unescape import UnescapeRules

logger = logging.getLogger(__name__)


def split_classes(value, key: str = "class") -> List[str]:
    """
    Normalise a class value into a list of tokens.

    Strings are split on whitespace, lists and tuples are taken as they are.
    Empty tokens are dropped. ``None`` is an empty list.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    if isinstance(value, (list, tuple)):
        if not all(isinstance(token, str) for token in value):
            raise InvalidClassValue(key, value)
        return [token for token in value if token.strip()]
    raise InvalidClassValue(key, value)


class AttributeMerger:
    """
    Stateless merger of menu node attributes.

    Holds only its un-escape rules, which are fixed at construction, so one
    instance can be shared across threads and render calls.
    """

    def __init__(self, unescape_rules: Optional[UnescapeRules] = None):
        self.unescape_rules = unescape_rules or UnescapeRules()

    def merge_attributes(
        self,
        kind,
        base_attrs: Any,
        options: Any,
        depth: int,
        order_index: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Return a new attribute dict for one node.

        Args:
            kind: ElementKind or its name/alias ("link", "li", "submenu", ...)
            base_attrs: Attributes the renderer computed for the node (mapping or object)
            options: Options bag (dict, template Context, or any object)
            depth: Nesting depth of the node, 0 for the root level
            order_index: Position among siblings; None or -1 when not applicable

        Returns:
            Merged attributes, always with a ``class`` key
        """
        kind = ElementKind.coerce(kind)
        bag = as_options(options)

        attrs = as_attributes(base_attrs)
        classes = split_classes(attrs.get("class"))

        for key in kind.atts_keys(depth, order_index):
            if not bag.has(key):
                continue
            override = bag.get(key)
            if override is None:
                continue
            logger.debug("Applying %s to %s at depth %s", key, kind.value, depth)
            for name, value in as_attributes(override, key).items():
                if name == "class":
                    classes.extend(split_classes(value, key))
                else:
                    attrs[name] = value

        for key in kind.class_keys(depth, order_index):
            if not bag.has(key):
                continue
            logger.debug("Adding classes from %s to %s", key, kind.value)
            classes.extend(split_classes(bag.get(key), key))

        attrs["class"] = " ".join(self.unescape(classes))
        return attrs

    def merge_classes(
        self,
        kind,
        classes: Any,
        options: Any,
        depth: int,
        order_index: Optional[int] = None,
    ) -> List[str]:
        """Merge overrides into a bare class list and return the resulting tokens."""
        merged = self.merge_attributes(
            kind, {"class": classes}, options, depth, order_index
        )
        return merged["class"].split()

    def unescape(self, classes: Iterable[str]) -> List[str]:
        """Apply the un-escape rules to every token, dropping tokens left empty."""
        return [
            token for token in self.unescape_rules.apply_all(classes) if token.strip()
        ]

    # Shortcuts for the three render-time hook points.

    def link_attributes(self, attrs, options, depth, order_index=None):
        return self.merge_attributes(ElementKind.LINK, attrs, options, depth, order_index)

    def item_classes(self, classes, options, depth, order_index=None):
        return self.merge_classes(
            ElementKind.ITEM_CONTAINER, classes, options, depth, order_index
        )

    def submenu_classes(self, classes, options, depth):
        return self.merge_classes(ElementKind.SUBMENU_CONTAINER, classes, options, depth)
