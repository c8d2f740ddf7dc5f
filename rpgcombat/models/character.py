"""Character model."""

import logging
import uuid
from typing import Any, Callable, Iterable, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from rpgcombat.config import DEFAULT_STARTING_LEVEL
from rpgcombat.engine.factions import are_allies
from rpgcombat.models.health import Health
from rpgcombat.models.level import Level

logger = logging.getLogger(__name__)


def new_character_id() -> str:
    """Default id factory: a random 128-bit hex string."""
    return uuid.uuid4().hex


class Character(Health, BaseModel):
    """A combatant with leveled health and faction membership."""

    character_id: str = Field(
        default_factory=new_character_id, frozen=True, description="Unique character identifier"
    )
    name: Optional[str] = Field(default=None, description="Display name (logging only)")
    level: Level = Field(
        default_factory=lambda: Level(value=DEFAULT_STARTING_LEVEL),
        frozen=True,
        description="Character level",
    )
    health: Optional[int] = Field(
        default=None, ge=0, description="Current health points (defaults to the level cap)"
    )
    factions: set[str] = Field(default_factory=set, description="Faction labels held")

    @field_validator("level", mode="before")
    @classmethod
    def coerce_level(cls, value: Any) -> Any:
        """Accept a plain int wherever a level is expected."""
        if isinstance(value, int) and not isinstance(value, bool):
            return {"value": value}
        return value

    @model_validator(mode="after")
    def fill_health(self) -> "Character":
        """Start at full health, and never above the cap."""
        if self.health is None:
            self.health = self.max_health
        else:
            self.health = self._clamp_health(self.health)
        return self

    @classmethod
    def new(
        cls,
        level: int = DEFAULT_STARTING_LEVEL,
        factions: Iterable[str] = (),
        id_factory: Optional[Callable[[], str]] = None,
        name: Optional[str] = None,
    ) -> "Character":
        """
        Create a character at full health.

        Args:
            level: Starting level
            factions: Initial faction labels
            id_factory: Optional id generator (defaults to random uuid hex)
            name: Optional display name

        Returns:
            New Character
        """
        data: dict[str, Any] = {"level": level, "factions": set(factions), "name": name}
        if id_factory is not None:
            data["character_id"] = id_factory()
        return cls(**data)

    @property
    def max_health(self) -> int:
        return self.level.max_health

    def set_health(self, value: int) -> None:
        self.health = self._clamp_health(value)

    def take_damage(self, damage: int) -> bool:
        """
        Subtract damage from health, stopping at zero.

        Returns:
            True if the character is still alive
        """
        was_alive = self.is_alive()
        self.set_health(max(0, self.health - damage))
        if was_alive and not self.is_alive():
            logger.info(f"{self} has died")
        return self.is_alive()

    def gain_health(self, amount: int) -> None:
        self.set_health(self.health + amount)

    def same_character(self, other: "Character") -> bool:
        return self.character_id == other.character_id

    def is_ally(self, other: "Character") -> bool:
        return are_allies(self, other)

    def join_faction(self, faction: str) -> None:
        self.factions.add(faction)

    def leave_faction(self, faction: str) -> None:
        self.factions.discard(faction)

    def __str__(self) -> str:
        label = self.name or self.character_id[:8]
        return f"{label} (lvl {self.level.value}, {self.health}/{self.max_health})"
