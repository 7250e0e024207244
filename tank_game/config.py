"""
Game configuration

All tunable constants live on one frozen dataclass so a session, the
headless environment and the RL configs can share and override them.
Distances are in pixels, speeds in pixels per frame, times in milliseconds.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class GameConfig:
    """Tunable constants for one game session"""

    # Play area
    width: int = 1000
    height: int = 700

    # Player tank
    player_size: float = 50.0
    player_speed: float = 4.0
    player_max_health: float = 100.0
    fire_interval_ms: float = 300.0
    muzzle_offset: float = 30.0

    # Projectiles
    bullet_speed: float = 8.0
    bullet_radius: float = 6.0
    bullet_damage: float = 25.0
    enemy_bullet_speed: float = 4.0
    enemy_bullet_damage: float = 10.0
    enemy_muzzle_offset: float = 20.0

    # Enemy tanks
    enemy_size: float = 35.0
    enemy_base_health: float = 50.0
    enemy_health_per_level: float = 10.0
    enemy_base_speed: float = 1.0
    enemy_speed_per_level: float = 0.25
    enemy_speed_jitter: float = 0.5
    enemy_max_speed: float = 3.0
    enemy_base_cooldown_ms: float = 2000.0
    enemy_cooldown_per_level_ms: float = 100.0
    enemy_min_cooldown_ms: float = 800.0
    pursuit_distance: float = 200.0
    orbit_speed_factor: float = 0.5
    firing_range: float = 400.0
    aim_lead_frames: float = 20.0
    max_enemies: Optional[int] = None

    # Spawning
    base_spawn_interval_ms: float = 2000.0
    spawn_interval_step_ms: float = 150.0
    min_spawn_interval_ms: float = 500.0
    power_up_interval_ms: float = 10000.0
    power_up_margin: float = 50.0
    power_up_size: float = 30.0
    power_up_lifetime_ms: float = 15000.0

    # Power-up effects
    power_up_duration_ms: float = 10000.0
    speed_boost: float = 1.5
    damage_boost: float = 2.0
    shield_factor: float = 0.3
    rapid_fire_interval_ms: float = 100.0
    rapid_spread: float = 0.2
    heal_amount: float = 30.0

    # Progression
    score_per_kill: int = 100
    kills_per_level: int = 10
    level_up_invulnerability_ms: float = 2000.0

    # Effects and notifications
    particle_life: int = 60
    particle_speed: float = 3.0
    explosion_life: int = 30
    explosion_ease: float = 0.2
    notification_ms: float = 2000.0

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"play area must be positive, got {self.width}x{self.height}")
        if self.player_max_health <= 0:
            raise ValueError("player_max_health must be positive")
        if self.kills_per_level <= 0:
            raise ValueError("kills_per_level must be positive")
        if self.min_spawn_interval_ms <= 0 or self.min_spawn_interval_ms > self.base_spawn_interval_ms:
            raise ValueError("min_spawn_interval_ms must be in (0, base_spawn_interval_ms]")
        if self.enemy_min_cooldown_ms > self.enemy_base_cooldown_ms:
            raise ValueError("enemy_min_cooldown_ms cannot exceed enemy_base_cooldown_ms")
        if self.spawn_interval_step_ms < 0 or self.enemy_cooldown_per_level_ms < 0:
            raise ValueError("difficulty steps must not be negative")
        if self.enemy_health_per_level < 0 or self.enemy_speed_per_level < 0:
            raise ValueError("enemy scaling must not be negative")
        if self.max_enemies is not None and self.max_enemies < 0:
            raise ValueError("max_enemies must be None or >= 0")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def with_overrides(self, **overrides) -> "GameConfig":
        return replace(self, **overrides)
