"""Character-to-character damage and healing rules."""

import logging
from typing import TYPE_CHECKING

from rpgcombat.engine.factions import shared_factions
from rpgcombat.engine.leveling import scale_damage
from rpgcombat.errors import (
    DeadHealerError,
    DeadTargetError,
    FullHealthError,
    NotSelfOrAllyError,
    RuleViolation,
    SameCharacterError,
    SameFactionError,
)
from rpgcombat.helpers.debug import log_call

if TYPE_CHECKING:
    from rpgcombat.models.character import Character

logger = logging.getLogger(__name__)


def _check_amount(amount: int) -> None:
    if amount < 0:
        raise ValueError(f"Amount must be non-negative, got {amount}")


@log_call
def deal_damage(attacker: "Character", defender: "Character", amount: int) -> None:
    """
    Attacker deals damage to defender.

    Damage is scaled up by half when the attacker is 5 or more levels above
    the defender and halved when 5 or more levels below.

    Args:
        attacker: Character dealing damage
        defender: Character receiving damage
        amount: Raw damage before level scaling

    Raises:
        SameCharacterError: If attacker and defender are the same character
        SameFactionError: If they share a faction
        DeadTargetError: If the defender is already dead
    """
    _check_amount(amount)
    try:
        if attacker.same_character(defender):
            raise SameCharacterError(f"{attacker} cannot damage itself")
        common = shared_factions(attacker, defender)
        if common:
            raise SameFactionError(
                f"{attacker} and {defender} share factions {sorted(common)}"
            )
        if not defender.is_alive():
            raise DeadTargetError(f"{defender} is already dead")
    except RuleViolation as e:
        logger.warning(f"Damage rejected ({e.reason.value}): {e}")
        raise

    damage = scale_damage(amount, attacker.level.difference(defender.level))
    defender.take_damage(damage)
    logger.info(f"{attacker} dealt {damage} damage to {defender}")


@log_call
def heal(healer: "Character", target: "Character", amount: int) -> None:
    """
    Healer restores health to itself or an ally.

    Healing is capped at the target's max health. Dead targets can be healed;
    only the healer has to be alive.

    Args:
        healer: Character doing the healing
        target: Character receiving health
        amount: Health to restore

    Raises:
        DeadHealerError: If the healer is dead
        NotSelfOrAllyError: If target is neither the healer nor an ally
        FullHealthError: If the target is already at full health
    """
    _check_amount(amount)
    try:
        if not healer.is_alive():
            raise DeadHealerError(f"{healer} is dead and cannot heal")
        if not (healer.same_character(target) or healer.is_ally(target)):
            raise NotSelfOrAllyError(f"{healer} can only heal itself or allies, not {target}")
        if target.is_at_full_health():
            raise FullHealthError(f"{target} is already at full health")
    except RuleViolation as e:
        logger.warning(f"Heal rejected ({e.reason.value}): {e}")
        raise

    target.gain_health(amount)
    logger.info(f"{healer} healed {target} for up to {amount}")


def heal_self(character: "Character", amount: int) -> None:
    """Heal a character using its own power."""
    heal(character, character, amount)
