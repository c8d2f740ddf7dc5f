"""Character level model."""

from pydantic import BaseModel, ConfigDict, Field

from rpgcombat.engine.leveling import max_health_for


class Level(BaseModel):
    """A character level, 1 or higher."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    value: int = Field(ge=1, description="Level number")

    @property
    def max_health(self) -> int:
        """Health cap granted by this level."""
        return max_health_for(self.value)

    def difference(self, other: "Level") -> int:
        return self.value - other.value

    def __int__(self) -> int:
        return self.value
