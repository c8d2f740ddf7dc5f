"""Pytest configuration and fixtures."""

import itertools

import pytest

from rpgcombat.models import Character, HealthPotion, Weapon


@pytest.fixture
def id_factory():
    """Deterministic character id generator."""
    counter = itertools.count(1)
    return lambda: f"char-{next(counter)}"


@pytest.fixture
def hero(id_factory):
    """Fresh level 1 character."""
    return Character.new(id_factory=id_factory, name="hero")


@pytest.fixture
def villain(id_factory):
    """Fresh level 1 character with no shared factions."""
    return Character.new(id_factory=id_factory, name="villain")


@pytest.fixture
def sword():
    """Weapon with a few uses left."""
    return Weapon(name="sword", max_health=3, attack=50)


@pytest.fixture
def potion():
    """Health potion holding 100 points of charge."""
    return HealthPotion(name="potion", max_health=100)
