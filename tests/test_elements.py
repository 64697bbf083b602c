"""Tests for the element model and tree locator."""

from kbd_list.elements import Element, Ref, TreeLocator

from .helpers import INDEX_ATTR, build_list


class TestElement:
    def test_closest_walks_ancestors(self) -> None:
        root = build_list(2)
        span = root.children[1].children[0]
        assert span.closest(INDEX_ATTR) is root.children[1]

    def test_closest_none_without_attribute(self) -> None:
        root = build_list(2)
        assert root.closest(INDEX_ATTR) is None

    def test_iter_tree_document_order(self) -> None:
        root = build_list(2)
        tags = [el.tag for el in root.iter_tree()]
        assert tags == ["ul", "li", "span", "li", "span"]


class TestTreeLocator:
    def test_finds_row_by_index(self) -> None:
        root = build_list(3)
        assert TreeLocator(root).locate(INDEX_ATTR, 2) is root.children[2]

    def test_missing_index(self) -> None:
        assert TreeLocator(build_list(3)).locate(INDEX_ATTR, 7) is None

    def test_ambiguous_match(self) -> None:
        root = build_list(3)
        root.append(Element(attributes={INDEX_ATTR: "1"}))
        assert TreeLocator(root).locate(INDEX_ATTR, 1) is None

    def test_string_equality(self) -> None:
        root = Element()
        root.append(Element(attributes={INDEX_ATTR: "01"}))
        assert TreeLocator(root).locate(INDEX_ATTR, 1) is None

    def test_empty_attribute_name(self) -> None:
        assert TreeLocator(build_list(3)).locate("", 0) is None


def test_ref_holds_current() -> None:
    ref: Ref[int] = Ref()
    assert ref.current is None
    ref.current = 5
    assert ref.current == 5
