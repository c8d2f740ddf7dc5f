"""rpgcombat package."""
