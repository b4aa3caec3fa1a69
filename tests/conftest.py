"""Shared fixtures for the customlist tests."""

import pytest

from customlist import CustomList


@pytest.fixture
def empty_list():
    return CustomList()


@pytest.fixture
def one_two_three():
    items = CustomList()
    items.add(1)
    items.add(2)
    items.add(3)
    return items
