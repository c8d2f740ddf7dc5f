"""Rule violations raised by the combat and healing rules."""

from enum import Enum


class ViolationReason(str, Enum):
    """Why a damage or heal attempt was rejected."""

    SAME_CHARACTER = "same_character"
    SAME_FACTION = "same_faction"
    DEAD_TARGET = "dead_target"
    DEAD_HEALER = "dead"
    NOT_SELF_OR_ALLY = "not_self_or_ally"
    FULL_HEALTH = "full_health"
    DESTROYED = "destroyed"


class RuleViolation(ValueError):
    """
    A damage or heal attempt that the rules reject.

    Raising one never leaves a partial mutation behind: every check runs
    before any health is touched.
    """

    reason: ViolationReason

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DamageError(RuleViolation):
    """Rejected damage attempt."""


class HealError(RuleViolation):
    """Rejected heal attempt."""


class SameCharacterError(DamageError):
    reason = ViolationReason.SAME_CHARACTER


class SameFactionError(DamageError):
    reason = ViolationReason.SAME_FACTION


class DeadTargetError(DamageError):
    reason = ViolationReason.DEAD_TARGET


class DeadHealerError(HealError):
    reason = ViolationReason.DEAD_HEALER


class NotSelfOrAllyError(HealError):
    reason = ViolationReason.NOT_SELF_OR_ALLY


class FullHealthError(HealError):
    reason = ViolationReason.FULL_HEALTH


class ObjectDestroyedError(DamageError, HealError):
    """The weapon or potion has no durability left."""

    reason = ViolationReason.DESTROYED
