"""
Power-up effect engine

Each PowerUpKind maps to a PowerUpEffect carrying its stat modifier. The
player holds at most one timed effect; baseline stats are restored before
any effect is applied so modifiers never stack.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict

from .config import GameConfig
from .entities import Color, Player, PowerUpKind
from .utils import clamp
from .world import World

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PowerUpEffect:
    label: str
    color: Color
    timed: bool
    apply: Callable[[Player, GameConfig], None]


def _speed(player: Player, cfg: GameConfig):
    player.speed = player.base_speed * cfg.speed_boost


def _damage(player: Player, cfg: GameConfig):
    player.damage_multiplier = cfg.damage_boost


def _shield(player: Player, cfg: GameConfig):
    player.damage_taken_factor = cfg.shield_factor


def _rapid(player: Player, cfg: GameConfig):
    player.fire_interval = cfg.rapid_fire_interval_ms
    player.shots = 3


def _heal(player: Player, cfg: GameConfig):
    player.health = clamp(player.health + cfg.heal_amount, 0.0, player.max_health)


EFFECTS: Dict[PowerUpKind, PowerUpEffect] = {
    PowerUpKind.SPEED: PowerUpEffect("SPEED BOOST", (52, 152, 219), True, _speed),
    PowerUpKind.DAMAGE: PowerUpEffect("DAMAGE BOOST", (231, 76, 60), True, _damage),
    PowerUpKind.SHIELD: PowerUpEffect("SHIELD", (155, 89, 182), True, _shield),
    PowerUpKind.RAPID: PowerUpEffect("RAPID FIRE", (241, 196, 15), True, _rapid),
    PowerUpKind.HEALTH: PowerUpEffect("HEALTH", (46, 204, 113), False, _heal),
}


def reset_to_baseline(player: Player):
    player.speed = player.base_speed
    player.fire_interval = player.base_fire_interval
    player.damage_multiplier = 1.0
    player.damage_taken_factor = 1.0
    player.shots = 1


def activate(world: World, kind: PowerUpKind):
    """Apply a collected power-up to the player.

    Health is instant and leaves any timed effect in place. Every other kind
    replaces the active effect with a fresh expiry.
    """
    player = world.player
    effect = EFFECTS[kind]
    if not effect.timed:
        effect.apply(player, world.config)
        world.notify(f"+{world.config.heal_amount:g} {effect.label}")
        return

    reset_to_baseline(player)
    effect.apply(player, world.config)
    player.power_up = kind
    player.power_up_expires = world.now + world.config.power_up_duration_ms
    world.notify(f"{effect.label} ACTIVATED")
    logger.debug("Power-up %s active until %.0f", kind.value, player.power_up_expires)


def reactivate(world: World) -> bool:
    """Re-apply the current effect without consuming or extending it"""
    player = world.player
    if player.power_up is None:
        return False
    reset_to_baseline(player)
    EFFECTS[player.power_up].apply(player, world.config)
    world.notify(f"{EFFECTS[player.power_up].label} ACTIVATED")
    return True


def expire(world: World):
    player = world.player
    if player.power_up is None:
        return
    label = EFFECTS[player.power_up].label
    reset_to_baseline(player)
    player.power_up = None
    player.power_up_expires = None
    world.notify(f"{label} EXPIRED")


def update_power_up_state(world: World):
    """Per-tick expiry check and one-shot re-activation request"""
    player = world.player
    if player.power_up_expires is not None and world.now >= player.power_up_expires:
        expire(world)
    if world.input.activate:
        world.input.activate = False
        reactivate(world)


def remaining_seconds(player: Player, now: float):
    """Whole seconds left on the active effect, or None when none is active"""
    if player.power_up is None or player.power_up_expires is None:
        return None
    left_ms = max(0.0, player.power_up_expires - now)
    return int(-(-left_ms // 1000))
