"""
Collision and damage resolution, run once per tick after movement

Order is fixed: player bullets vs enemies, enemy bullets vs player, then
player vs power-ups. Pickups still apply on the tick the player dies.
"""

from __future__ import annotations

import logging

from . import powerups
from .effects import ENEMY_RED, HIT_ORANGE, explosion, particle_burst
from .progression import check_level_up
from .utils import circle_collide, clamp, point_in_box
from .world import World

logger = logging.getLogger(__name__)


def handle_collisions(world: World):
    _bullets_vs_enemies(world)
    _enemy_bullets_vs_player(world)
    _player_vs_power_ups(world)


def _bullets_vs_enemies(world: World):
    cfg = world.config
    for b in world.bullets:
        for e in world.enemies:
            if not e.alive:
                continue
            if not point_in_box(b.x, b.y, e.x, e.y, e.size, e.size):
                continue

            e.health -= cfg.bullet_damage * b.damage_multiplier
            b.alive = False
            world.stats.enemies_hit += 1

            if e.health <= 0:
                e.alive = False
                explosion(world, e.x, e.y, ENEMY_RED)
                world.score += cfg.score_per_kill * world.level
                world.kills += 1
                check_level_up(world)
            break

    world.enemies.compact()
    world.bullets.compact()


def _enemy_bullets_vs_player(world: World):
    player = world.player
    if world.game_over or player.is_invulnerable(world.now):
        return

    cfg = world.config
    for b in world.enemy_bullets:
        if not point_in_box(b.x, b.y, player.x, player.y, player.size, player.size):
            continue

        dmg = cfg.enemy_bullet_damage * player.damage_taken_factor
        before = player.health
        player.health = clamp(player.health - dmg, 0.0, player.max_health)
        world.stats.damage_taken += before - player.health
        b.alive = False
        explosion(world, player.x, player.y, HIT_ORANGE, max_radius=20.0)

        if player.health <= 0:
            world.game_over = True
            logger.info("Player destroyed: score %d, level %d, kills %d",
                        world.score, world.level, world.kills)
            break

    world.enemy_bullets.compact()


def _player_vs_power_ups(world: World):
    player = world.player
    for p in world.power_ups:
        if not circle_collide(player.x, player.y, player.size / 2, p.x, p.y, p.size / 2):
            continue
        p.alive = False
        world.stats.power_ups_collected += 1
        powerups.activate(world, p.kind)
        particle_burst(world, p.x, p.y, powerups.EFFECTS[p.kind].color, count=10)
        logger.debug("Picked up %s", p.kind.value)

    world.power_ups.compact()
