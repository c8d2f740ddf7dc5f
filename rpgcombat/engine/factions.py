"""Faction membership and alliance."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rpgcombat.models.character import Character


def shared_factions(first: "Character", second: "Character") -> set[str]:
    """Faction labels held by both characters."""
    return first.factions & second.factions


def are_allies(first: "Character", second: "Character") -> bool:
    """Two characters are allies when they hold at least one faction in common."""
    return bool(shared_factions(first, second))
