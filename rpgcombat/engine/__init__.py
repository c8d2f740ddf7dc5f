"""Combat rules engine package."""

from rpgcombat.engine.factions import are_allies, shared_factions
from rpgcombat.engine.leveling import max_health_for, scale_damage
from rpgcombat.engine.rules import deal_damage, heal, heal_self

__all__ = [
    "are_allies",
    "shared_factions",
    "max_health_for",
    "scale_damage",
    "deal_damage",
    "heal",
    "heal_self",
]
