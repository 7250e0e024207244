"""
Movement and targeting for the player, enemies and projectiles
"""

from __future__ import annotations

import math
from typing import List

from .entities import Bullet, Enemy
from .utils import angle_to, clamp, distance, normalize, out_of_bounds
from .world import World
from .stores import EntityStore


def update_player(world: World):
    player = world.player
    inp = world.input
    cfg = world.config

    dx, dy = normalize(*inp.direction())
    if dx or dy:
        player.x += dx * player.speed
        player.y += dy * player.speed
        player.angle = math.atan2(dy, dx)

    # Keep player in bounds
    half = player.size / 2
    player.x = clamp(player.x, half, cfg.width - half)
    player.y = clamp(player.y, half, cfg.height - half)

    player.turret_angle = angle_to(player.x, player.y, inp.pointer_x, inp.pointer_y)

    if inp.firing and world.now - player.last_shot >= player.fire_interval:
        fire_player(world)


def fire_player(world: World) -> List[Bullet]:
    """Fire from the turret; rapid fire adds two barrels either side"""
    player = world.player
    cfg = world.config
    if player.shots > 1:
        spread = cfg.rapid_spread
        angles = [player.turret_angle - spread, player.turret_angle, player.turret_angle + spread]
    else:
        angles = [player.turret_angle]

    fired = []
    for a in angles:
        cos_a, sin_a = math.cos(a), math.sin(a)
        fired.append(world.bullets.add(Bullet(
            x=player.x + cos_a * cfg.muzzle_offset,
            y=player.y + sin_a * cfg.muzzle_offset,
            vx=cos_a * cfg.bullet_speed,
            vy=sin_a * cfg.bullet_speed,
            radius=cfg.bullet_radius,
            damage_multiplier=player.damage_multiplier,
        )))
    player.last_shot = world.now
    world.stats.shots_fired += 1
    return fired


def predicted_player_position(world: World):
    """Where enemies aim: current position led by the keys currently held.

    Held input is a stand-in for velocity; a tank that just stopped is
    still aimed at as if it were moving this frame.
    """
    player = world.player
    dx, dy = normalize(*world.input.direction())
    lead = player.speed * world.config.aim_lead_frames
    return player.x + dx * lead, player.y + dy * lead


def update_enemies(world: World):
    player = world.player
    cfg = world.config
    now = world.now

    for e in world.enemies:
        to_px = player.x - e.x
        to_py = player.y - e.y
        dist = distance(e.x, e.y, player.x, player.y)

        if dist > cfg.pursuit_distance:
            nx, ny = normalize(to_px, to_py)
            e.x += nx * e.speed
            e.y += ny * e.speed
            e.angle = math.atan2(ny, nx)
        else:
            # Circle the player instead of ramming
            orbit = math.atan2(to_py, to_px) + math.pi / 2
            step = e.speed * cfg.orbit_speed_factor
            e.x += math.cos(orbit) * step
            e.y += math.sin(orbit) * step
            e.angle = orbit

        e.turret_angle = angle_to(e.x, e.y, player.x, player.y)

        if now - e.last_shot > e.shoot_cooldown and dist < cfg.firing_range:
            enemy_fire(world, e)


def enemy_fire(world: World, enemy: Enemy) -> Bullet:
    cfg = world.config
    tx, ty = predicted_player_position(world)
    aim = angle_to(enemy.x, enemy.y, tx, ty)
    cos_a, sin_a = math.cos(aim), math.sin(aim)
    enemy.last_shot = world.now
    return world.enemy_bullets.add(Bullet(
        x=enemy.x + cos_a * cfg.enemy_muzzle_offset,
        y=enemy.y + sin_a * cfg.enemy_muzzle_offset,
        vx=cos_a * cfg.enemy_bullet_speed,
        vy=sin_a * cfg.enemy_bullet_speed,
        radius=cfg.bullet_radius,
    ))


def cull_out_of_bounds(store: EntityStore[Bullet], width: float, height: float) -> int:
    """Remove bullets outside the play area; running it twice changes nothing"""
    for b in store:
        if out_of_bounds(b.x, b.y, width, height):
            b.alive = False
    return store.compact()


def update_bullets(world: World):
    cfg = world.config
    for store in (world.bullets, world.enemy_bullets):
        for b in store:
            b.x += b.vx
            b.y += b.vy
        cull_out_of_bounds(store, cfg.width, cfg.height)


def update_power_ups(world: World):
    lifetime = world.config.power_up_lifetime_ms
    for p in world.power_ups:
        p.rotation = (p.rotation + 0.05) % (2 * math.pi)
        if world.now - p.spawned_at > lifetime:
            p.alive = False
    world.power_ups.compact()
