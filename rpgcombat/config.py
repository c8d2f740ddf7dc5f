"""Central configuration defaults and constants for rpgcombat."""

import os


def positive_int_env(name: str, default: str) -> int:
    """Read an integer setting that must be at least 1."""
    value = int(os.getenv(name, default))
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")
    return value


# Health Caps
DEFAULT_BASE_MAX_HEALTH = positive_int_env("RPGCOMBAT_BASE_MAX_HEALTH", "1000")
DEFAULT_HIGH_LEVEL_MAX_HEALTH = positive_int_env("RPGCOMBAT_HIGH_LEVEL_MAX_HEALTH", "1500")
DEFAULT_HIGH_LEVEL_THRESHOLD = positive_int_env("RPGCOMBAT_HIGH_LEVEL_THRESHOLD", "6")  # First level with the raised cap

# Leveling
DEFAULT_STARTING_LEVEL = positive_int_env("RPGCOMBAT_STARTING_LEVEL", "1")
DEFAULT_LEVEL_GAP = positive_int_env("RPGCOMBAT_LEVEL_GAP", "5")  # Level difference that triggers damage scaling

# Tracing
DEFAULT_LOG_CALLS = os.getenv("RPGCOMBAT_LOG_CALLS", "true").lower() in ("true", "1", "yes", "on")
