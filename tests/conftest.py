"""Shared fixtures for list navigation tests."""

import pytest

from kbd_list.elements import Element, TreeLocator

from .helpers import FakeContainer, build_list


@pytest.fixture
def container() -> FakeContainer:
    return FakeContainer()


@pytest.fixture
def list_root() -> Element:
    """Five rendered rows, 20 units tall each."""
    return build_list(5)


@pytest.fixture
def locator(list_root: Element) -> TreeLocator:
    return TreeLocator(list_root)
