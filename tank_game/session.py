"""
GameSession - the frame orchestrator
------------------------------------
Owns one World and advances it one step per rendered frame:

    guard -> spawn -> update -> collide -> render -> HUD/notifications

The host (arcade window, gym env, a test) calls ``tick`` once per frame and
stops calling it when ``tick`` returns False. Render, HUD, notification and
game-over consumers are plain callables receiving immutable values.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from .clock import MonotonicClock
from .collisions import handle_collisions
from .config import GameConfig
from .effects import update_explosions, update_particles
from .movement import update_bullets, update_enemies, update_player, update_power_ups
from .powerups import update_power_up_state
from .snapshot import GameOverReport, HudState, WorldSnapshot, hud_state, take_snapshot
from .spawner import spawn_logic
from .world import InputState, Notification, World

logger = logging.getLogger(__name__)

RenderSink = Callable[[WorldSnapshot], None]
HudSink = Callable[[HudState], None]
NotificationSink = Callable[[Notification], None]
GameOverSink = Callable[[GameOverReport], None]


class GameSession:
    """Single-player game session driven by a per-frame callback"""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        clock=None,
        seed: Optional[int] = None,
        on_render: Optional[RenderSink] = None,
        on_hud: Optional[HudSink] = None,
        on_notify: Optional[NotificationSink] = None,
        on_game_over: Optional[GameOverSink] = None,
    ):
        self.config = config or GameConfig()
        self.clock = clock or MonotonicClock()
        self.rng = random.Random(seed)
        self.on_render = on_render
        self.on_hud = on_hud
        self.on_notify = on_notify
        self.on_game_over = on_game_over

        self.input = InputState()
        self.world = self._new_world()
        self._reported = False

    def _new_world(self) -> World:
        world = World.create(self.config, self.rng)
        world.input = self.input
        world.now = self.clock.now()
        return world

    # ----------------------------
    # Lifecycle
    # ----------------------------

    @property
    def started(self) -> bool:
        return self.world.started

    @property
    def game_over(self) -> bool:
        return self.world.game_over

    @property
    def running(self) -> bool:
        return self.world.started and not self.world.game_over

    def start(self):
        world = self.world
        if world.started:
            return
        now = self.clock.now()
        world.now = now
        world.last_enemy_spawn = now
        world.last_power_up_spawn = now
        world.started = True
        logger.info("Game started (%dx%d)", self.config.width, self.config.height)

    def restart(self):
        """Throw the world away and start a fresh one"""
        self.input.release_all()
        self.world = self._new_world()
        self._reported = False
        logger.info("Game restarted")
        self.start()

    # ----------------------------
    # Frame
    # ----------------------------

    def tick(self, timestamp: Optional[float] = None) -> bool:
        """Advance one frame. Returns whether the host should schedule another."""
        world = self.world
        if not world.started or world.game_over:
            return not world.game_over

        world.now = self.clock.now() if timestamp is None else timestamp

        spawn_logic(world)

        update_power_up_state(world)
        update_player(world)
        update_bullets(world)
        update_enemies(world)
        update_particles(world)
        update_power_ups(world)
        update_explosions(world)

        handle_collisions(world)

        if self.on_render is not None:
            self.on_render(take_snapshot(world))
        if self.on_hud is not None:
            self.on_hud(hud_state(world))
        for note in world.drain_notifications():
            if self.on_notify is not None:
                self.on_notify(note)

        if world.game_over and not self._reported:
            self._reported = True
            if self.on_game_over is not None:
                self.on_game_over(self.report())

        return not world.game_over

    # ----------------------------
    # Read-only views
    # ----------------------------

    def snapshot(self) -> WorldSnapshot:
        return take_snapshot(self.world)

    def hud(self) -> HudState:
        return hud_state(self.world)

    def report(self) -> GameOverReport:
        return GameOverReport(score=self.world.score, level=self.world.level, kills=self.world.kills)
