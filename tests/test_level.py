"""Tests for Level and the leveling policy."""

import pytest
from pydantic import ValidationError

from rpgcombat.engine.leveling import max_health_for, scale_damage
from rpgcombat.models import Level


class TestMaxHealth:
    """Test suite for level-derived health caps."""

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5])
    def test_low_levels_cap_at_1000(self, level):
        """Test that levels below 6 cap health at 1000."""
        assert max_health_for(level) == 1000
        assert Level(value=level).max_health == 1000

    @pytest.mark.parametrize("level", [6, 7, 10, 100])
    def test_high_levels_cap_at_1500(self, level):
        """Test that level 6 and above cap health at 1500."""
        assert max_health_for(level) == 1500
        assert Level(value=level).max_health == 1500


class TestLevel:
    """Test suite for Level construction."""

    def test_zero_level_fails_fast(self):
        """Test that a level of zero is rejected at construction."""
        with pytest.raises(ValidationError):
            Level(value=0)

    def test_negative_level_fails_fast(self):
        """Test that negative levels are rejected at construction."""
        with pytest.raises(ValueError):
            Level(value=-3)

    def test_level_is_immutable(self):
        """Test that a level cannot be changed once built."""
        level = Level(value=2)
        with pytest.raises(ValidationError):
            level.value = 3

    def test_difference(self):
        """Test level difference is attacker minus defender."""
        assert Level(value=6).difference(Level(value=1)) == 5
        assert Level(value=1).difference(Level(value=6)) == -5
        assert int(Level(value=4)) == 4


class TestScaleDamage:
    """Test suite for level-gap damage scaling."""

    def test_large_positive_gap_adds_half(self):
        """Test that a gap of 5 or more multiplies damage by 1.5."""
        assert scale_damage(20, 5) == 30
        assert scale_damage(20, 9) == 30

    def test_large_negative_gap_halves(self):
        """Test that a gap of -5 or less halves damage."""
        assert scale_damage(20, -5) == 10
        assert scale_damage(20, -12) == 10

    def test_small_gap_unchanged(self):
        """Test that gaps inside (-5, 5) leave damage alone."""
        for gap in range(-4, 5):
            assert scale_damage(20, gap) == 20

    def test_scaling_truncates(self):
        """Test integer truncation on odd damage values."""
        assert scale_damage(7, 5) == 10
        assert scale_damage(7, -5) == 3
