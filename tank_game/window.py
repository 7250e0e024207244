"""
Arcade front end: draws WorldSnapshots and feeds input into a GameSession

World coordinates have y growing downward; arcade's grow upward, so every
draw call goes through ``_sy``.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import arcade

from .session import GameSession
from .snapshot import GameOverReport, TankView, WorldSnapshot, minimap_point
from .world import Notification

logger = logging.getLogger(__name__)

PLAYER_SPRITE = "player_tank.png"
ENEMY_SPRITE = "enemy_tank.png"

MOVE_KEYS = {
    arcade.key.W: "up", arcade.key.UP: "up",
    arcade.key.S: "down", arcade.key.DOWN: "down",
    arcade.key.A: "left", arcade.key.LEFT: "left",
    arcade.key.D: "right", arcade.key.RIGHT: "right",
}

MINIMAP_SCALE = 0.15


def load_tank_textures(asset_dir: Optional[Path]) -> Dict[str, Optional[arcade.Texture]]:
    """Load optional tank sprites; anything missing falls back to plain shapes"""
    textures: Dict[str, Optional[arcade.Texture]] = {"player": None, "enemy": None}
    if asset_dir is None:
        return textures
    for key, name in (("player", PLAYER_SPRITE), ("enemy", ENEMY_SPRITE)):
        path = Path(asset_dir) / name
        try:
            textures[key] = arcade.load_texture(path)
        except (FileNotFoundError, OSError) as exc:
            logger.warning("Tank sprite %s unavailable (%s); drawing fallback shape", path, exc)
    return textures


class TankWindow(arcade.Window):
    """Arcade window rendering a tank session.

    With ``interactive=True`` the window drives the session from on_update and
    forwards keyboard/mouse input. The headless env uses ``interactive=False``
    and only asks it to draw.
    """

    def __init__(self, session: GameSession, interactive: bool = True,
                 asset_dir: Optional[Path] = None, title: str = "Tank Arena"):
        super().__init__(session.config.width, session.config.height, title)
        self.session = session
        self.interactive = interactive
        self.textures = load_tank_textures(asset_dir)
        self.notifications: List[Tuple[str, float]] = []
        self.final: Optional[GameOverReport] = None

        if interactive:
            session.on_notify = self._push_notification
            session.on_game_over = self._show_game_over

        # Colors
        self.BG = (18, 18, 22)
        self.PLAYER_C = (46, 204, 113)
        self.PLAYER_EDGE = (39, 174, 96)
        self.TURRET_C = (30, 132, 73)
        self.ENEMY_C = (231, 76, 60)
        self.ENEMY_EDGE = (192, 57, 43)
        self.BULLET_C = (243, 156, 18)
        self.ENEMY_BULLET_C = (231, 76, 60)
        self.HUD_C = (220, 220, 220)

    # ----------------------------
    # Sinks
    # ----------------------------

    def _push_notification(self, note: Notification):
        self.notifications.append((note.text, self.session.clock.now() + note.duration_ms))

    def _show_game_over(self, report: GameOverReport):
        self.final = report

    # ----------------------------
    # Arcade callbacks
    # ----------------------------

    def on_update(self, delta_time: float):
        if self.interactive:
            self.session.tick()

    def on_key_press(self, symbol: int, modifiers: int):
        if not self.interactive:
            return
        inp = self.session.input
        if symbol in MOVE_KEYS:
            setattr(inp, MOVE_KEYS[symbol], True)
        elif symbol == arcade.key.SPACE:
            inp.activate = True
        elif symbol in (arcade.key.ENTER, arcade.key.RETURN) and not self.session.started:
            self.session.start()
        elif symbol == arcade.key.R and self.session.game_over:
            self.final = None
            self.notifications.clear()
            self.session.restart()
        elif symbol == arcade.key.ESCAPE:
            self.close()

    def on_key_release(self, symbol: int, modifiers: int):
        if self.interactive and symbol in MOVE_KEYS:
            setattr(self.session.input, MOVE_KEYS[symbol], False)

    def on_mouse_motion(self, x: int, y: int, dx: int, dy: int):
        if self.interactive:
            self.session.input.pointer_x = x
            self.session.input.pointer_y = self.height - y

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
        if not self.interactive:
            return
        if not self.session.started:
            self.session.start()
        self.session.input.firing = True

    def on_mouse_release(self, x: int, y: int, button: int, modifiers: int):
        if self.interactive:
            self.session.input.firing = False

    def on_draw(self):
        self.clear()
        arcade.set_background_color(self.BG)
        snap = self.session.snapshot()

        for p in snap.particles:
            arcade.draw_circle_filled(p.x, self._sy(p.y), p.size, p.color + (int(255 * p.alpha),))

        for pu in snap.power_ups:
            self._draw_power_up(pu)

        for b in snap.bullets:
            arcade.draw_circle_filled(b.x, self._sy(b.y), b.radius, self.BULLET_C)
        for b in snap.enemy_bullets:
            arcade.draw_circle_filled(b.x, self._sy(b.y), b.radius, self.ENEMY_BULLET_C)

        for e in snap.enemies:
            self._draw_tank(e, self.textures["enemy"], self.ENEMY_C, self.ENEMY_EDGE)
            self._draw_health_bar(e, 40, 4, (52, 73, 94), self.ENEMY_C)

        self._draw_tank(snap.player, self.textures["player"], self.PLAYER_C, self.PLAYER_EDGE)
        self._draw_health_bar(snap.player, 50, 5, (231, 76, 60), self.PLAYER_C)
        if snap.invulnerable:
            arcade.draw_circle_outline(snap.player.x, self._sy(snap.player.y),
                                       snap.player.size * 0.8, (241, 196, 15), 2)

        for ex in snap.explosions:
            arcade.draw_circle_outline(ex.x, self._sy(ex.y), max(1.0, ex.radius),
                                       ex.color + (int(255 * ex.alpha),), 3)

        self._draw_minimap(snap)
        self._draw_hud(snap)
        self._draw_notifications()

        if not snap.started:
            self._draw_banner("TANK ARENA", "Press ENTER or click to start")
        elif snap.game_over:
            report = self.final or self.session.report()
            self._draw_banner(
                "GAME OVER",
                f"Score {report.score}   Level {report.level}   Kills {report.kills}   -   R to restart",
            )

    # ----------------------------
    # Drawing helpers
    # ----------------------------

    def _sy(self, y: float) -> float:
        return self.height - y

    def _draw_tank(self, tank: TankView, texture, body_c, edge_c):
        x, y = tank.x, self._sy(tank.y)
        rect = arcade.XYWH(x, y, tank.size, tank.size)
        if texture is not None:
            arcade.draw_texture_rect(texture, rect, angle=math.degrees(tank.angle))
        else:
            arcade.draw_rect_filled(rect, body_c)
            arcade.draw_rect_outline(rect, edge_c, 2)

        # Barrel doubles as the direction indicator
        length = tank.size * 0.5
        arcade.draw_line(
            x, y,
            x + math.cos(tank.turret_angle) * length,
            y - math.sin(tank.turret_angle) * length,
            self.TURRET_C if body_c == self.PLAYER_C else edge_c,
            8,
        )

    def _draw_health_bar(self, tank: TankView, bar_w: float, bar_h: float, back_c, fill_c):
        x0 = tank.x - bar_w / 2
        top = self._sy(tank.y - tank.size / 2 - 8)
        arcade.draw_lrbt_rectangle_filled(x0, x0 + bar_w, top - bar_h, top, back_c)
        fill = bar_w * max(0.0, tank.health) / tank.max_health
        if fill > 0:
            arcade.draw_lrbt_rectangle_filled(x0, x0 + fill, top - bar_h, top, fill_c)

    def _draw_power_up(self, pu):
        rect = arcade.XYWH(pu.x, self._sy(pu.y), pu.size, pu.size)
        arcade.draw_rect_filled(rect, pu.color, tilt_angle=math.degrees(pu.rotation))
        arcade.draw_text(pu.kind.value[0].upper(), pu.x, self._sy(pu.y), (255, 255, 255), 12,
                         anchor_x="center", anchor_y="center", bold=True)

    def _draw_minimap(self, snap: WorldSnapshot):
        mw, mh = snap.width * MINIMAP_SCALE, snap.height * MINIMAP_SCALE
        ox, oy = snap.width - mw - 10, 10.0
        arcade.draw_lrbt_rectangle_filled(ox, ox + mw, self._sy(oy + mh), self._sy(oy), (0, 0, 0, 160))

        def dot(x, y, radius, color):
            mx, my = minimap_point(x, y, MINIMAP_SCALE, (ox, oy))
            arcade.draw_circle_filled(mx, self._sy(my), radius, color)

        for pu in snap.power_ups:
            dot(pu.x, pu.y, 2, pu.color)
        for e in snap.enemies:
            dot(e.x, e.y, 2, self.ENEMY_C)
        dot(snap.player.x, snap.player.y, 3, self.PLAYER_C)

    def _draw_hud(self, snap: WorldSnapshot):
        hud = snap.hud
        txt = (f"Score: {hud.score}   Health: {hud.health}   Enemies: {hud.enemy_count}   "
               f"Level: {hud.level}   Power-up: {hud.power_up_text}")
        arcade.draw_text(txt, 12, self.height - 24, self.HUD_C, 14)

    def _draw_notifications(self):
        now = self.session.clock.now()
        self.notifications = [(t, until) for t, until in self.notifications if until > now]
        for i, (text, _) in enumerate(self.notifications[-3:]):
            arcade.draw_text(text, self.width / 2, self.height - 70 - i * 28, (241, 196, 15), 20,
                             anchor_x="center", bold=True)

    def _draw_banner(self, title: str, subtitle: str):
        arcade.draw_lrbt_rectangle_filled(0, self.width, 0, self.height, (0, 0, 0, 170))
        arcade.draw_text(title, self.width / 2, self.height / 2 + 20, (255, 255, 255), 40,
                         anchor_x="center", bold=True)
        arcade.draw_text(subtitle, self.width / 2, self.height / 2 - 30, self.HUD_C, 16,
                         anchor_x="center")
