"""Tests for element kinds and option key naming."""

import pytest

from menuclasses.kinds import ElementKind, has_order


class TestElementKind:
    """Tests for ElementKind coercion and prefixes."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("link", ElementKind.LINK),
            ("a", ElementKind.LINK),
            ("item-container", ElementKind.ITEM_CONTAINER),
            ("li", ElementKind.ITEM_CONTAINER),
            ("submenu-container", ElementKind.SUBMENU_CONTAINER),
            ("submenu", ElementKind.SUBMENU_CONTAINER),
            ("ul", ElementKind.SUBMENU_CONTAINER),
            (" LI ", ElementKind.ITEM_CONTAINER),
            (ElementKind.LINK, ElementKind.LINK),
        ],
    )
    def test_coerce_accepts_names_and_aliases(self, value, expected) -> None:
        assert ElementKind.coerce(value) is expected

    def test_coerce_rejects_unknown_kind(self) -> None:
        with pytest.raises(ValueError, match="Unknown menu element kind"):
            ElementKind.coerce("div")

    def test_prefixes(self) -> None:
        assert ElementKind.LINK.prefix == "a"
        assert ElementKind.ITEM_CONTAINER.prefix == "li"
        assert ElementKind.SUBMENU_CONTAINER.prefix == "submenu"


class TestOptionKeys:
    """Tests for the key names each kind reads."""

    def test_atts_keys_with_order_index(self) -> None:
        assert ElementKind.LINK.atts_keys(2, 5) == ["a_atts", "a_atts_2", "a_atts_order_5"]

    def test_atts_keys_without_order_index(self) -> None:
        assert ElementKind.SUBMENU_CONTAINER.atts_keys(1) == [
            "submenu_atts",
            "submenu_atts_1",
        ]

    def test_class_order_key_uses_depth(self) -> None:
        """The order-level class key is built from depth, not the order index."""
        assert ElementKind.ITEM_CONTAINER.class_keys(3, 7) == [
            "li_class",
            "li_class_3",
            "li_class_order_3",
        ]

    def test_non_numeric_order_index_is_skipped(self) -> None:
        assert ElementKind.LINK.atts_keys(1, "first") == ["a_atts", "a_atts_1"]

    def test_sentinel_order_index_is_skipped(self) -> None:
        assert ElementKind.LINK.atts_keys(0, -1) == ["a_atts", "a_atts_0"]
        assert ElementKind.LINK.class_keys(0, -1) == ["a_class", "a_class_0"]

    def test_has_order(self) -> None:
        assert has_order(0) is True
        assert has_order(4) is True
        assert has_order(None) is False
        assert has_order(-1) is False
        assert has_order("") is False  # unresolved template variable
        assert has_order("first") is False
        assert has_order("2") is True
