"""Tests for ListConfig construction and validation."""

import pytest

from customlist import CustomList, DEFAULT_CONFIG, ListConfig
from customlist.config import (
    DEFAULT_GROWTH_FACTOR,
    DEFAULT_INITIAL_CAPACITY,
    ENV_GROWTH_FACTOR,
    ENV_INITIAL_CAPACITY,
)


def test_defaults():
    config = ListConfig()
    assert config.initial_capacity == DEFAULT_INITIAL_CAPACITY
    assert config.growth_factor == DEFAULT_GROWTH_FACTOR
    assert DEFAULT_CONFIG == config


@pytest.mark.parametrize("kwargs", [
    {"initial_capacity": 0},
    {"initial_capacity": -5},
    {"growth_factor": 1},
    {"initial_capacity": "10"},
    {"initial_capacity": True},
    {"growth_factor": True},
])
def test_rejects_invalid_values(kwargs):
    with pytest.raises(ValueError):
        ListConfig(**kwargs)


def test_next_capacity_from_empty_uses_initial_capacity():
    config = ListConfig(initial_capacity=4, growth_factor=2)
    assert config.next_capacity(0, 1) == 4


def test_next_capacity_multiplies_current():
    config = ListConfig(initial_capacity=4, growth_factor=3)
    assert config.next_capacity(4, 5) == 12


def test_next_capacity_honours_large_requests():
    config = ListConfig(initial_capacity=4, growth_factor=2)
    assert config.next_capacity(4, 50) == 50
    assert config.next_capacity(0, 50) == 50


def test_from_config_reads_list_section():
    config = ListConfig.from_config({"list": {"initial_capacity": 32, "growth_factor": 4}})
    assert config.initial_capacity == 32
    assert config.growth_factor == 4


def test_from_config_missing_section_uses_defaults():
    assert ListConfig.from_config({}) == ListConfig()


def test_from_config_partial_section():
    config = ListConfig.from_config({"list": {"growth_factor": 3}})
    assert config.initial_capacity == DEFAULT_INITIAL_CAPACITY
    assert config.growth_factor == 3


def test_from_env(monkeypatch):
    monkeypatch.setenv(ENV_INITIAL_CAPACITY, "2")
    monkeypatch.setenv(ENV_GROWTH_FACTOR, "5")
    config = ListConfig.from_env()
    assert config.initial_capacity == 2
    assert config.growth_factor == 5


def test_from_env_unset_uses_defaults(monkeypatch):
    monkeypatch.delenv(ENV_INITIAL_CAPACITY, raising=False)
    monkeypatch.delenv(ENV_GROWTH_FACTOR, raising=False)
    assert ListConfig.from_env() == ListConfig()


def test_from_env_rejects_garbage(monkeypatch):
    monkeypatch.setenv(ENV_INITIAL_CAPACITY, "lots")
    with pytest.raises(ValueError, match=ENV_INITIAL_CAPACITY):
        ListConfig.from_env()


def test_list_uses_given_config():
    items = CustomList(ListConfig(initial_capacity=3))
    assert items.capacity == 0
    items.add("a")
    assert items.capacity == 3
