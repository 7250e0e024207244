"""
Progression: kill-driven levels and the difficulty curve
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import GameConfig
from .effects import LEVEL_GOLD, particle_burst
from .world import World

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnemyStats:
    """Level-scaled enemy parameters (speed before per-spawn jitter)"""
    health: float
    speed: float
    shoot_cooldown: float


def level_for_kills(kills: int, kills_per_level: int = 10) -> int:
    return kills // kills_per_level + 1


def spawn_interval_for_level(level: int, config: GameConfig) -> float:
    interval = config.base_spawn_interval_ms - (level - 1) * config.spawn_interval_step_ms
    return max(config.min_spawn_interval_ms, interval)


def enemy_stats_for_level(level: int, config: GameConfig) -> EnemyStats:
    steps = level - 1
    return EnemyStats(
        health=config.enemy_base_health + steps * config.enemy_health_per_level,
        speed=min(config.enemy_max_speed,
                  config.enemy_base_speed + steps * config.enemy_speed_per_level),
        shoot_cooldown=max(config.enemy_min_cooldown_ms,
                           config.enemy_base_cooldown_ms - steps * config.enemy_cooldown_per_level_ms),
    )


def check_level_up(world: World) -> bool:
    """Raise the level if kills warrant it. Returns True on a level-up."""
    cfg = world.config
    new_level = level_for_kills(world.kills, cfg.kills_per_level)
    if new_level <= world.level:
        return False

    world.level = new_level
    world.spawn_interval = spawn_interval_for_level(new_level, cfg)
    world.player.invulnerable_until = world.now + cfg.level_up_invulnerability_ms
    world.notify(f"LEVEL {new_level}!")
    particle_burst(world, world.player.x, world.player.y, LEVEL_GOLD, count=30)
    logger.info("Level up: %d (spawn interval %.0f ms)", new_level, world.spawn_interval)
    return True
