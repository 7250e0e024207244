"""
Game entity dataclasses
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

Color = Tuple[int, int, int]


class PowerUpKind(str, Enum):
    """Collectible power-up kinds"""
    SPEED = "speed"
    DAMAGE = "damage"
    SHIELD = "shield"
    RAPID = "rapid"
    HEALTH = "health"


@dataclass
class Player:
    """Player tank"""
    x: float
    y: float
    size: float = 50.0
    angle: float = 0.0  # body, follows movement input
    turret_angle: float = 0.0  # follows the pointer
    health: float = 100.0
    max_health: float = 100.0
    base_speed: float = 4.0
    speed: float = 4.0
    base_fire_interval: float = 300.0  # ms
    fire_interval: float = 300.0
    last_shot: float = float("-inf")
    damage_multiplier: float = 1.0
    damage_taken_factor: float = 1.0
    shots: int = 1
    power_up: Optional[PowerUpKind] = None
    power_up_expires: Optional[float] = None
    invulnerable_until: Optional[float] = None

    def is_invulnerable(self, now: float) -> bool:
        return self.invulnerable_until is not None and now < self.invulnerable_until


@dataclass
class Enemy:
    """Enemy tank that hunts the player"""
    x: float
    y: float
    health: float
    max_health: float
    speed: float
    shoot_cooldown: float  # ms
    last_shot: float
    size: float = 35.0
    angle: float = 0.0
    turret_angle: float = 0.0
    alive: bool = True


@dataclass
class Bullet:
    """Projectile fired by the player or an enemy"""
    x: float
    y: float
    vx: float
    vy: float
    radius: float = 6.0
    damage_multiplier: float = 1.0
    alive: bool = True


@dataclass
class Particle:
    """Decorative debris; no gameplay effect"""
    x: float
    y: float
    vx: float
    vy: float
    life: int
    max_life: int
    color: Color
    size: float
    alive: bool = True


@dataclass
class Explosion:
    """Expanding ring that eases toward its max radius"""
    x: float
    y: float
    max_radius: float
    life: int
    color: Color
    radius: float = 0.0
    alive: bool = True


@dataclass
class PowerUp:
    """Collectible lying on the field"""
    x: float
    y: float
    kind: PowerUpKind
    spawned_at: float
    size: float = 30.0
    rotation: float = 0.0
    alive: bool = True
