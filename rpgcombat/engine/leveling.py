"""Level-driven health caps and damage scaling."""

from rpgcombat.config import (
    DEFAULT_BASE_MAX_HEALTH,
    DEFAULT_HIGH_LEVEL_MAX_HEALTH,
    DEFAULT_HIGH_LEVEL_THRESHOLD,
    DEFAULT_LEVEL_GAP,
)


def max_health_for(level: int) -> int:
    """Health cap for a character of the given level."""
    if level >= DEFAULT_HIGH_LEVEL_THRESHOLD:
        return DEFAULT_HIGH_LEVEL_MAX_HEALTH
    return DEFAULT_BASE_MAX_HEALTH


def scale_damage(damage: int, level_difference: int) -> int:
    """
    Adjust raw damage for the attacker/defender level gap.

    Args:
        damage: Raw damage requested by the attacker
        level_difference: Attacker level minus defender level

    Returns:
        Damage after scaling, truncated toward zero
    """
    if level_difference >= DEFAULT_LEVEL_GAP:
        return damage * 3 // 2
    if level_difference <= -DEFAULT_LEVEL_GAP:
        return damage // 2
    return damage
