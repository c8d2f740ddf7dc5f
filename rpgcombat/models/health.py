"""Health capability shared by characters and magical objects."""


class Health:
    """
    Mixin for anything with a bounded health pool.

    Subclasses provide ``health`` and ``max_health``; everything else is
    derived from those two values.
    """

    def is_alive(self) -> bool:
        return self.health > 0

    def is_at_full_health(self) -> bool:
        return self.health == self.max_health

    def can_heal_amount(self) -> int:
        """Headroom left before the health cap."""
        return self.max_health - self.health

    def _clamp_health(self, value: int) -> int:
        return max(0, min(value, self.max_health))
