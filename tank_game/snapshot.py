"""
Immutable views of the world handed to render, HUD and game-over sinks
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .entities import Color, PowerUpKind
from .powerups import EFFECTS, remaining_seconds
from .world import World


@dataclass(frozen=True)
class TankView:
    x: float
    y: float
    size: float
    angle: float
    turret_angle: float
    health: float
    max_health: float


@dataclass(frozen=True)
class BulletView:
    x: float
    y: float
    radius: float


@dataclass(frozen=True)
class ParticleView:
    x: float
    y: float
    size: float
    color: Color
    alpha: float


@dataclass(frozen=True)
class ExplosionView:
    x: float
    y: float
    radius: float
    color: Color
    alpha: float


@dataclass(frozen=True)
class PowerUpView:
    x: float
    y: float
    size: float
    kind: PowerUpKind
    rotation: float
    color: Color


@dataclass(frozen=True)
class HudState:
    score: int
    health: int
    max_health: int
    enemy_count: int
    level: int
    kills: int
    power_up_label: Optional[str]
    power_up_seconds: Optional[int]  # None means no timed effect

    @property
    def power_up_text(self) -> str:
        if self.power_up_label is None or self.power_up_seconds is None:
            return "∞"
        return f"{self.power_up_label} {self.power_up_seconds}s"


@dataclass(frozen=True)
class GameOverReport:
    score: int
    level: int
    kills: int


@dataclass(frozen=True)
class WorldSnapshot:
    width: int
    height: int
    now: float
    player: TankView
    invulnerable: bool
    enemies: Tuple[TankView, ...]
    bullets: Tuple[BulletView, ...]
    enemy_bullets: Tuple[BulletView, ...]
    particles: Tuple[ParticleView, ...]
    explosions: Tuple[ExplosionView, ...]
    power_ups: Tuple[PowerUpView, ...]
    hud: HudState
    started: bool
    game_over: bool


def hud_state(world: World) -> HudState:
    player = world.player
    kind = player.power_up
    return HudState(
        score=world.score,
        health=max(0, math.floor(player.health)),
        max_health=int(player.max_health),
        enemy_count=len(world.enemies),
        level=world.level,
        kills=world.kills,
        power_up_label=EFFECTS[kind].label if kind is not None else None,
        power_up_seconds=remaining_seconds(player, world.now),
    )


def _tank(t) -> TankView:
    return TankView(t.x, t.y, t.size, t.angle, t.turret_angle, t.health, t.max_health)


def take_snapshot(world: World) -> WorldSnapshot:
    cfg = world.config
    return WorldSnapshot(
        width=cfg.width,
        height=cfg.height,
        now=world.now,
        player=_tank(world.player),
        invulnerable=world.player.is_invulnerable(world.now),
        enemies=tuple(_tank(e) for e in world.enemies),
        bullets=tuple(BulletView(b.x, b.y, b.radius) for b in world.bullets),
        enemy_bullets=tuple(BulletView(b.x, b.y, b.radius) for b in world.enemy_bullets),
        particles=tuple(
            ParticleView(p.x, p.y, p.size, p.color, p.life / p.max_life) for p in world.particles
        ),
        explosions=tuple(
            ExplosionView(e.x, e.y, e.radius, e.color, e.life / cfg.explosion_life)
            for e in world.explosions
        ),
        power_ups=tuple(
            PowerUpView(p.x, p.y, p.size, p.kind, p.rotation, EFFECTS[p.kind].color)
            for p in world.power_ups
        ),
        hud=hud_state(world),
        started=world.started,
        game_over=world.game_over,
    )


def minimap_point(x: float, y: float, scale: float, offset: Tuple[float, float] = (0.0, 0.0)):
    """World position -> minimap position; the same transform for every entity"""
    return offset[0] + x * scale, offset[1] + y * scale
