"""Tests for collision and damage resolution."""
import pytest

from conftest import make_bullet, make_enemy, make_power_up
from tank_game.collisions import handle_collisions
from tank_game.entities import PowerUpKind


class TestBulletsVsEnemies:

    def test_hit_damages_and_consumes_bullet(self, world):
        enemy = world.enemies.add(make_enemy(300, 300, health=50))
        world.bullets.add(make_bullet(300, 300))
        handle_collisions(world)
        assert enemy.health == 25
        assert len(world.bullets) == 0
        assert world.enemies.items() == (enemy,)
        assert world.score == 0
        assert world.stats.enemies_hit == 1

    def test_kill_scores_once(self, world):
        enemy = world.enemies.add(make_enemy(300, 300, health=25))
        world.bullets.add(make_bullet(300, 300))
        world.bullets.add(make_bullet(301, 301))
        handle_collisions(world)

        assert enemy.health <= 0
        assert enemy not in world.enemies.items()
        assert len(world.enemies) == 0
        assert world.score == 100
        assert world.kills == 1
        # the second bullet found nothing left to hit
        assert len(world.bullets) == 1
        assert len(world.explosions) == 1
        assert len(world.particles) == 15

    def test_bullet_hits_only_one_enemy(self, world):
        first = world.enemies.add(make_enemy(300, 300, health=50))
        second = world.enemies.add(make_enemy(305, 300, health=50))
        world.bullets.add(make_bullet(302, 300))
        handle_collisions(world)
        assert first.health == 25
        assert second.health == 50

    def test_damage_multiplier(self, world):
        world.enemies.add(make_enemy(300, 300, health=50))
        world.bullets.add(make_bullet(300, 300, damage_multiplier=2.0))
        handle_collisions(world)
        assert len(world.enemies) == 0

    def test_score_scales_with_level(self, world):
        world.level = 3
        world.kills = 20
        world.enemies.add(make_enemy(300, 300, health=10))
        world.bullets.add(make_bullet(300, 300))
        handle_collisions(world)
        assert world.score == 300

    def test_tenth_kill_levels_up(self, world):
        world.kills = 9
        world.enemies.add(make_enemy(300, 300, health=10))
        world.bullets.add(make_bullet(300, 300))
        handle_collisions(world)
        assert world.kills == 10
        assert world.level == 2
        assert world.score == 100  # scored at the level the kill happened on

    def test_miss_outside_box(self, world):
        enemy = world.enemies.add(make_enemy(300, 300, health=50))
        world.bullets.add(make_bullet(300 + 17.5, 300))
        handle_collisions(world)
        assert enemy.health == 50
        assert len(world.bullets) == 1


class TestEnemyBulletsVsPlayer:

    def test_hit(self, world):
        world.enemy_bullets.add(make_bullet(505, 345))
        handle_collisions(world)
        assert world.player.health == 90
        assert len(world.enemy_bullets) == 0
        assert len(world.explosions) == 1
        assert world.stats.damage_taken == 10

    def test_shield_reduces_damage(self, world):
        world.player.damage_taken_factor = 0.3
        world.enemy_bullets.add(make_bullet(500, 350))
        handle_collisions(world)
        assert world.player.health == pytest.approx(97)

    def test_invulnerable_player_is_skipped(self, world):
        world.player.invulnerable_until = world.now + 1000
        world.enemy_bullets.add(make_bullet(500, 350))
        handle_collisions(world)
        assert world.player.health == 100
        assert len(world.enemy_bullets) == 1

    def test_death_clamps_and_stops_damage(self, world):
        world.player.health = 5
        world.enemy_bullets.add(make_bullet(500, 350))
        world.enemy_bullets.add(make_bullet(501, 351))
        handle_collisions(world)

        assert world.game_over
        assert world.player.health == 0
        assert world.stats.damage_taken == 5
        assert len(world.enemy_bullets) == 1

        handle_collisions(world)
        assert world.player.health == 0
        assert len(world.enemy_bullets) == 1


class TestPlayerVsPowerUps:

    def test_health_pickup_caps_at_max(self, world):
        world.player.health = 70
        world.power_ups.add(make_power_up(510, 350, PowerUpKind.HEALTH))
        handle_collisions(world)
        assert world.player.health == 100
        assert len(world.power_ups) == 0
        assert world.player.power_up is None
        assert len(world.particles) == 10

    def test_pickup_radius(self, world):
        near = world.power_ups.add(make_power_up(539, 350, PowerUpKind.SPEED))
        far = world.power_ups.add(make_power_up(500, 390, PowerUpKind.DAMAGE))
        handle_collisions(world)
        assert not near.alive
        assert far.alive

    def test_timed_pickup_activates(self, world):
        world.now = 1000.0
        world.power_ups.add(make_power_up(500, 350, PowerUpKind.SPEED))
        handle_collisions(world)
        assert world.player.power_up is PowerUpKind.SPEED
        assert world.player.power_up_expires == 11000.0
        assert world.player.speed == pytest.approx(6.0)

    def test_pickup_applies_on_the_tick_the_player_dies(self, world):
        world.player.health = 5
        world.enemy_bullets.add(make_bullet(500, 350))
        world.power_ups.add(make_power_up(500, 350, PowerUpKind.SHIELD))
        handle_collisions(world)
        assert world.game_over
        assert world.player.power_up is PowerUpKind.SHIELD

    def test_same_tick_pickups_follow_collection_order(self, world):
        world.power_ups.add(make_power_up(500, 350, PowerUpKind.SPEED))
        world.power_ups.add(make_power_up(500, 350, PowerUpKind.DAMAGE))
        handle_collisions(world)
        assert world.player.power_up is PowerUpKind.DAMAGE
        assert world.player.speed == world.player.base_speed
        assert world.player.damage_multiplier == 2.0

    def test_same_tick_pickups_reverse_order(self, world):
        # the farther one is first in the collection and still wins the slot first
        world.power_ups.add(make_power_up(530, 350, PowerUpKind.DAMAGE))
        world.power_ups.add(make_power_up(500, 350, PowerUpKind.SPEED))
        handle_collisions(world)
        assert world.player.power_up is PowerUpKind.SPEED
        assert world.player.damage_multiplier == 1.0
        texts = [n.text for n in world.pending]
        assert texts == ["DAMAGE BOOST ACTIVATED", "SPEED BOOST ACTIVATED"]

    def test_health_then_status_in_one_tick(self, world):
        world.player.health = 50
        world.power_ups.add(make_power_up(500, 350, PowerUpKind.HEALTH))
        world.power_ups.add(make_power_up(500, 350, PowerUpKind.RAPID))
        handle_collisions(world)
        assert world.player.health == 80
        assert world.player.power_up is PowerUpKind.RAPID
        assert world.player.shots == 3
