"""
Visual effects: particle bursts and explosion rings
"""

from __future__ import annotations

from .entities import Color, Explosion, Particle
from .world import World

ENEMY_RED: Color = (231, 76, 60)
HIT_ORANGE: Color = (243, 156, 18)
LEVEL_GOLD: Color = (241, 196, 15)


def particle_burst(world: World, x: float, y: float, color: Color, count: int = 15):
    """Scatter ``count`` particles from (x, y)"""
    cfg = world.config
    rng = world.rng
    for _ in range(count):
        world.particles.add(Particle(
            x=x,
            y=y,
            vx=rng.uniform(-cfg.particle_speed, cfg.particle_speed),
            vy=rng.uniform(-cfg.particle_speed, cfg.particle_speed),
            life=cfg.particle_life,
            max_life=cfg.particle_life,
            color=color,
            size=rng.uniform(2.0, 6.0),
        ))


def explosion(world: World, x: float, y: float, color: Color, max_radius: float = 40.0,
              particles: int = 15):
    """Explosion ring plus a particle burst"""
    world.explosions.add(Explosion(
        x=x, y=y, max_radius=max_radius, life=world.config.explosion_life, color=color,
    ))
    if particles:
        particle_burst(world, x, y, color, particles)


def update_particles(world: World):
    for p in world.particles:
        p.x += p.vx
        p.y += p.vy
        p.life -= 1
        if p.life <= 0:
            p.alive = False
    world.particles.compact()


def update_explosions(world: World):
    ease = world.config.explosion_ease
    for e in world.explosions:
        e.radius += (e.max_radius - e.radius) * ease
        e.life -= 1
        if e.life <= 0:
            e.alive = False
    world.explosions.compact()
