"""
Timed spawning of enemies and power-ups
"""

from __future__ import annotations

import logging

from .entities import Enemy, PowerUp, PowerUpKind
from .progression import enemy_stats_for_level
from .world import World

logger = logging.getLogger(__name__)

SIDES = ("top", "right", "bottom", "left")
POWER_UP_KINDS = tuple(PowerUpKind)


def spawn_logic(world: World):
    """Emit an enemy and/or a power-up if their timers have elapsed"""
    cfg = world.config
    now = world.now

    if now - world.last_enemy_spawn > world.spawn_interval:
        world.last_enemy_spawn = now
        if cfg.max_enemies is None or len(world.enemies) < cfg.max_enemies:
            spawn_enemy(world)

    if now - world.last_power_up_spawn > cfg.power_up_interval_ms:
        world.last_power_up_spawn = now
        spawn_power_up(world)


def spawn_enemy(world: World) -> Enemy:
    # Spawn just outside a random edge so enemies drive in from off-screen
    cfg = world.config
    rng = world.rng
    side = rng.choice(SIDES)
    margin = cfg.enemy_size / 2

    if side == "top":
        x = rng.uniform(0, cfg.width)
        y = -margin
    elif side == "right":
        x = cfg.width + margin
        y = rng.uniform(0, cfg.height)
    elif side == "bottom":
        x = rng.uniform(0, cfg.width)
        y = cfg.height + margin
    else:
        x = -margin
        y = rng.uniform(0, cfg.height)

    stats = enemy_stats_for_level(world.level, cfg)
    speed = min(cfg.enemy_max_speed, stats.speed + rng.uniform(0.0, cfg.enemy_speed_jitter))

    enemy = world.enemies.add(Enemy(
        x=x,
        y=y,
        size=cfg.enemy_size,
        health=stats.health,
        max_health=stats.health,
        speed=speed,
        shoot_cooldown=stats.shoot_cooldown,
        last_shot=world.now,
    ))
    logger.debug("Enemy spawned on %s edge at (%.0f, %.0f), level %d", side, x, y, world.level)
    return enemy


def spawn_power_up(world: World) -> PowerUp:
    cfg = world.config
    rng = world.rng
    margin = cfg.power_up_margin
    power_up = world.power_ups.add(PowerUp(
        x=rng.uniform(margin, cfg.width - margin),
        y=rng.uniform(margin, cfg.height - margin),
        kind=rng.choice(POWER_UP_KINDS),
        spawned_at=world.now,
        size=cfg.power_up_size,
    ))
    logger.debug("Power-up %s spawned at (%.0f, %.0f)", power_up.kind.value, power_up.x, power_up.y)
    return power_up
