"""Magical object models: weapons and health potions."""

import logging
from typing import TYPE_CHECKING, ClassVar, Optional

from pydantic import BaseModel, Field, model_validator

from rpgcombat.errors import DeadTargetError, FullHealthError, ObjectDestroyedError
from rpgcombat.models.health import Health

if TYPE_CHECKING:
    from rpgcombat.models.character import Character

logger = logging.getLogger(__name__)


class MagicalObject(Health, BaseModel):
    """
    Base for magical items.

    An object's health is its durability (remaining uses or charge), not
    combat hit points. An object with no health left is destroyed.
    """

    name: Optional[str] = Field(default=None, description="Display name (logging only)")
    max_health: int = Field(ge=1, frozen=True, description="Durability capacity")
    health: Optional[int] = Field(
        default=None, ge=0, description="Current durability (defaults to capacity)"
    )

    @model_validator(mode="after")
    def fill_health(self) -> "MagicalObject":
        if self.health is None:
            self.health = self.max_health
        else:
            self.health = self._clamp_health(self.health)
        return self

    def _ensure_not_destroyed(self) -> None:
        if not self.is_alive():
            raise ObjectDestroyedError(f"{self} is destroyed")

    def _wear(self, amount: int) -> None:
        self.health = self._clamp_health(self.health - amount)
        if not self.is_alive():
            logger.info(f"{self} has been destroyed")

    def __str__(self) -> str:
        label = self.name or type(self).__name__
        return f"{label} ({self.health}/{self.max_health})"


class Weapon(MagicalObject):
    """A magical object that deals a fixed amount of damage per use."""

    WEAR_PER_USE: ClassVar[int] = 1

    attack: int = Field(ge=0, frozen=True, description="Damage dealt per use")

    def deal_damage(self, target: "Character") -> None:
        """
        Strike a character with this weapon.

        Costs one point of durability per successful use regardless of the
        damage dealt. No level scaling applies.

        Args:
            target: Character to strike

        Raises:
            ObjectDestroyedError: If the weapon has no durability left
            DeadTargetError: If the target is already dead
        """
        self._ensure_not_destroyed()
        if not target.is_alive():
            raise DeadTargetError(f"{target} is already dead")

        self._wear(self.WEAR_PER_USE)
        target.take_damage(self.attack)
        logger.info(f"{self} dealt {self.attack} damage to {target}")


class HealthPotion(MagicalObject):
    """A magical object whose durability is spent as healing charge."""

    def heal(self, target: "Character", amount: int) -> int:
        """
        Heal a character from the potion's remaining charge.

        The amount applied is limited by the request, the potion's charge and
        the target's headroom; the potion is debited exactly what the target
        gains.

        Args:
            target: Character to heal
            amount: Requested healing

        Returns:
            Amount actually applied

        Raises:
            ValueError: If amount is negative
            ObjectDestroyedError: If the potion is empty
            FullHealthError: If the target is already at full health
        """
        if amount < 0:
            raise ValueError(f"Heal amount must be non-negative, got {amount}")
        self._ensure_not_destroyed()
        if target.is_at_full_health():
            raise FullHealthError(f"{target} is already at full health")

        applied = min(amount, self.health, target.can_heal_amount())
        self._wear(applied)
        target.gain_health(applied)
        logger.info(f"{self} healed {target} for {applied}")
        return applied
