"""
World state owned by a single game session
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional

from .config import GameConfig
from .entities import Bullet, Enemy, Explosion, Particle, Player, PowerUp
from .stores import EntityStore


@dataclass
class InputState:
    """Latest input as written by the host's event handlers; last value wins"""
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    pointer_x: float = 0.0
    pointer_y: float = 0.0
    firing: bool = False
    activate: bool = False  # one-shot, cleared when consumed

    def direction(self):
        """Raw (dx, dy) in {-1, 0, 1}; screen y grows downward"""
        dx = (1 if self.right else 0) - (1 if self.left else 0)
        dy = (1 if self.down else 0) - (1 if self.up else 0)
        return dx, dy

    def release_all(self) -> None:
        self.up = self.down = self.left = self.right = False
        self.firing = False
        self.activate = False


@dataclass(frozen=True)
class Notification:
    """Transient message for the notification sink"""
    text: str
    duration_ms: float


@dataclass
class Stats:
    """Running counters for logs and the headless env"""
    shots_fired: int = 0
    enemies_hit: int = 0
    damage_taken: float = 0.0
    power_ups_collected: int = 0


@dataclass
class World:
    """Everything the simulation reads and writes during a tick"""
    config: GameConfig
    rng: random.Random
    player: Player
    input: InputState = field(default_factory=InputState)
    enemies: EntityStore[Enemy] = field(default_factory=EntityStore)
    bullets: EntityStore[Bullet] = field(default_factory=EntityStore)
    enemy_bullets: EntityStore[Bullet] = field(default_factory=EntityStore)
    particles: EntityStore[Particle] = field(default_factory=EntityStore)
    explosions: EntityStore[Explosion] = field(default_factory=EntityStore)
    power_ups: EntityStore[PowerUp] = field(default_factory=EntityStore)
    score: int = 0
    level: int = 1
    kills: int = 0
    now: float = 0.0
    last_enemy_spawn: float = 0.0
    last_power_up_spawn: float = 0.0
    spawn_interval: float = 2000.0
    started: bool = False
    game_over: bool = False
    stats: Stats = field(default_factory=Stats)
    pending: List[Notification] = field(default_factory=list)

    @classmethod
    def create(cls, config: GameConfig, rng: Optional[random.Random] = None) -> "World":
        player = Player(
            x=config.width / 2,
            y=config.height / 2,
            size=config.player_size,
            health=config.player_max_health,
            max_health=config.player_max_health,
            base_speed=config.player_speed,
            speed=config.player_speed,
            base_fire_interval=config.fire_interval_ms,
            fire_interval=config.fire_interval_ms,
        )
        return cls(
            config=config,
            rng=rng if rng is not None else random.Random(),
            player=player,
            spawn_interval=config.base_spawn_interval_ms,
        )

    def notify(self, text: str) -> None:
        self.pending.append(Notification(text, self.config.notification_ms))

    def drain_notifications(self) -> List[Notification]:
        out, self.pending = self.pending, []
        return out
