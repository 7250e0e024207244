"""Shared fixtures: a manual clock and a started, seeded session."""
import pytest

from tank_game import GameSession, ManualClock
from tank_game.entities import Bullet, Enemy, PowerUp


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def session(clock):
    s = GameSession(clock=clock, seed=1234)
    s.start()
    return s


@pytest.fixture
def world(session):
    return session.world


def make_enemy(x, y, health=50.0, **kwargs):
    params = dict(
        x=x, y=y, health=health, max_health=max(health, 50.0),
        speed=1.0, shoot_cooldown=2000.0, last_shot=0.0,
    )
    params.update(kwargs)
    return Enemy(**params)


def make_bullet(x, y, vx=0.0, vy=0.0, **kwargs):
    return Bullet(x=x, y=y, vx=vx, vy=vy, **kwargs)


def make_power_up(x, y, kind, spawned_at=0.0):
    return PowerUp(x=x, y=y, kind=kind, spawned_at=spawned_at)
