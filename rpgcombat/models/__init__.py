"""Data models module for rpgcombat."""

# Health capability
from rpgcombat.models.health import Health

# Levels
from rpgcombat.models.level import Level

# Characters
from rpgcombat.models.character import Character

# Magical objects
from rpgcombat.models.objects import HealthPotion, MagicalObject, Weapon

__all__ = [
    # Health capability
    "Health",
    # Levels
    "Level",
    # Characters
    "Character",
    # Magical objects
    "MagicalObject",
    "Weapon",
    "HealthPotion",
]
