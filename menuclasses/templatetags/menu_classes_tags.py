# menuclasses/templatetags/menu_classes_tags.py

from django import template
from django.forms.utils import flatatt

from menuclasses import merge_attributes, merge_classes, unescape_classes

register = template.Library()


@register.simple_tag
def menu_attrs(kind, attrs, options=None, depth=0, order_index=None):
    """
    Render merged attributes for a menu element as an HTML attribute string.

    Usage:
      <a{% menu_attrs "link" link.attrs menu_options depth forloop.counter0 %}>
      <ul{% menu_attrs "submenu" None menu_options depth %}>
    """
    merged = merge_attributes(kind, attrs, options, depth, order_index)
    if not merged["class"]:
        merged.pop("class")
    return flatatt(merged)


@register.simple_tag
def menu_classes(kind, classes, options=None, depth=0, order_index=None):
    """Render the merged class string for a menu element."""
    return " ".join(merge_classes(kind, classes, options, depth, order_index))


@register.filter(name="unescape_classes")
def unescape_classes_filter(value):
    """Turn escaped tokens such as hover___underline back into hover:underline."""
    return " ".join(unescape_classes(value or ""))
