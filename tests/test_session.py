"""Tests for the frame orchestrator and the snapshot/HUD views."""
import dataclasses

import pytest

from conftest import make_bullet, make_power_up
from tank_game import GameSession, ManualClock
from tank_game.entities import PowerUpKind
from tank_game.snapshot import WorldSnapshot, minimap_point


class Recorder:
    def __init__(self):
        self.frames = []
        self.huds = []
        self.notes = []
        self.reports = []

    def attach(self, session):
        session.on_render = self.frames.append
        session.on_hud = self.huds.append
        session.on_notify = self.notes.append
        session.on_game_over = self.reports.append
        return self


class TestGuard:

    def test_unstarted_session_does_nothing(self, clock):
        session = GameSession(clock=clock, seed=1)
        rec = Recorder().attach(session)
        clock.advance(60000)
        assert session.tick() is True
        assert len(session.world.enemies) == 0
        assert rec.frames == []

    def test_start_is_idempotent(self, session, clock):
        clock.advance(500)
        session.start()
        assert session.world.last_enemy_spawn == 0.0


class TestTick:

    def test_sinks_receive_each_frame(self, session, clock):
        rec = Recorder().attach(session)
        clock.advance(16)
        assert session.tick() is True
        assert len(rec.frames) == 1
        assert isinstance(rec.frames[0], WorldSnapshot)
        assert rec.huds[0].health == 100
        assert rec.huds[0].level == 1

    def test_enemy_spawns_through_tick(self, session, clock):
        rec = Recorder().attach(session)
        clock.set(2001)
        session.tick()
        assert len(session.world.enemies) == 1
        assert rec.huds[-1].enemy_count == 1

    def test_explicit_timestamp_overrides_clock(self, session):
        session.tick(timestamp=2001.0)
        assert session.world.now == 2001.0
        assert len(session.world.enemies) == 1

    def test_pickup_notification_is_flushed(self, session, clock):
        rec = Recorder().attach(session)
        session.world.power_ups.add(make_power_up(500, 350, PowerUpKind.SPEED))
        clock.advance(16)
        session.tick()
        assert [n.text for n in rec.notes] == ["SPEED BOOST ACTIVATED"]
        assert rec.notes[0].duration_ms == session.config.notification_ms
        assert session.world.pending == []
        assert rec.huds[-1].power_up_text == "SPEED BOOST 10s"

    def test_game_over_reported_once_and_ticks_stop(self, session, clock):
        rec = Recorder().attach(session)
        world = session.world
        world.player.health = 5
        world.score, world.kills = 1200, 7
        world.enemy_bullets.add(make_bullet(500, 350))

        clock.advance(16)
        assert session.tick() is False
        assert session.game_over
        assert rec.huds[-1].health == 0
        assert len(rec.reports) == 1
        assert (rec.reports[0].score, rec.reports[0].level, rec.reports[0].kills) == (1200, 1, 7)

        clock.advance(16)
        frames = len(rec.frames)
        assert session.tick() is False
        assert len(rec.frames) == frames
        assert len(rec.reports) == 1
        assert world.player.health == 0

    def test_restart_resets_world(self, session, clock):
        world = session.world
        world.player.health = 0
        world.game_over = True
        world.score = 500
        inp = session.input
        inp.firing = True

        clock.advance(100)
        session.restart()
        assert session.world is not world
        assert session.running
        assert session.world.score == 0
        assert session.world.player.health == 100
        assert session.world.last_enemy_spawn == 100
        assert session.world.input is inp
        assert inp.firing is False

    def test_sessions_are_independent(self):
        a = GameSession(clock=ManualClock(), seed=1)
        b = GameSession(clock=ManualClock(), seed=1)
        a.start()
        b.start()
        a.world.score = 999
        assert b.world.score == 0
        assert a.world.enemies is not b.world.enemies


class TestSnapshot:

    def test_snapshot_is_frozen(self, session):
        snap = session.snapshot()
        with pytest.raises(dataclasses.FrozenInstanceError):
            snap.player.x = 0
        assert isinstance(snap.enemies, tuple)

    def test_snapshot_does_not_track_later_changes(self, session):
        snap = session.snapshot()
        session.world.player.x = 10
        assert snap.player.x == 500

    def test_hud_floors_and_clamps_health(self, session):
        session.world.player.health = 42.7
        assert session.hud().health == 42
        session.world.player.health = -3
        assert session.hud().health == 0

    def test_hud_without_power_up_is_unlimited(self, session):
        hud = session.hud()
        assert hud.power_up_label is None
        assert hud.power_up_seconds is None
        assert hud.power_up_text == "∞"

    def test_minimap_transform(self):
        assert minimap_point(500, 350, 0.15, (840, 10)) == pytest.approx((915, 62.5))
