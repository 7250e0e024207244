"""Tests for the power-up effect engine."""
import pytest

from tank_game import powerups
from tank_game.entities import PowerUpKind


class TestEffects:

    def test_every_kind_has_an_effect(self):
        assert set(powerups.EFFECTS) == set(PowerUpKind)
        assert [k for k, e in powerups.EFFECTS.items() if not e.timed] == [PowerUpKind.HEALTH]

    @pytest.mark.parametrize("kind, attr, value", [
        (PowerUpKind.SPEED, "speed", 6.0),
        (PowerUpKind.DAMAGE, "damage_multiplier", 2.0),
        (PowerUpKind.SHIELD, "damage_taken_factor", 0.3),
        (PowerUpKind.RAPID, "fire_interval", 100.0),
    ])
    def test_modifiers(self, world, kind, attr, value):
        powerups.activate(world, kind)
        assert getattr(world.player, attr) == pytest.approx(value)
        assert world.player.power_up is kind


class TestReplacement:

    def test_new_power_up_replaces_old_without_stacking(self, world):
        powerups.activate(world, PowerUpKind.SPEED)
        powerups.activate(world, PowerUpKind.RAPID)
        player = world.player
        assert player.power_up is PowerUpKind.RAPID
        assert player.speed == player.base_speed
        assert player.fire_interval == 100.0
        assert player.shots == 3

    def test_same_kind_twice_does_not_compound(self, world):
        powerups.activate(world, PowerUpKind.DAMAGE)
        powerups.activate(world, PowerUpKind.DAMAGE)
        assert world.player.damage_multiplier == 2.0

    def test_replacement_refreshes_expiry(self, world):
        world.now = 0.0
        powerups.activate(world, PowerUpKind.SPEED)
        world.now = 4000.0
        powerups.activate(world, PowerUpKind.SHIELD)
        assert world.player.power_up_expires == 14000.0

    def test_health_keeps_timed_effect(self, world):
        powerups.activate(world, PowerUpKind.SHIELD)
        world.player.health = 95
        powerups.activate(world, PowerUpKind.HEALTH)
        assert world.player.health == 100
        assert world.player.power_up is PowerUpKind.SHIELD
        assert world.player.damage_taken_factor == 0.3


class TestTimers:

    def test_expiry_restores_baseline(self, world):
        world.now = 0.0
        powerups.activate(world, PowerUpKind.RAPID)
        world.pending.clear()

        world.now = 9999.0
        powerups.update_power_up_state(world)
        assert world.player.power_up is PowerUpKind.RAPID

        world.now = 10000.0
        powerups.update_power_up_state(world)
        player = world.player
        assert player.power_up is None
        assert player.power_up_expires is None
        assert player.fire_interval == player.base_fire_interval
        assert player.shots == 1
        assert [n.text for n in world.pending] == ["RAPID FIRE EXPIRED"]

    def test_reactivation_does_not_extend(self, world):
        world.now = 0.0
        powerups.activate(world, PowerUpKind.SPEED)
        world.player.speed = 1.0  # knocked off by something else

        world.now = 5000.0
        world.input.activate = True
        powerups.update_power_up_state(world)
        assert world.input.activate is False
        assert world.player.speed == pytest.approx(6.0)
        assert world.player.power_up_expires == 10000.0

    def test_reactivation_without_power_up(self, world):
        assert powerups.reactivate(world) is False
        world.input.activate = True
        powerups.update_power_up_state(world)
        assert world.input.activate is False
        assert world.pending == []

    def test_remaining_seconds(self, world):
        assert powerups.remaining_seconds(world.player, 0.0) is None
        world.now = 0.0
        powerups.activate(world, PowerUpKind.SHIELD)
        assert powerups.remaining_seconds(world.player, 0.0) == 10
        assert powerups.remaining_seconds(world.player, 1500.0) == 9
        assert powerups.remaining_seconds(world.player, 12000.0) == 0
