"""
TankEnv - headless Gymnasium wrapper around a GameSession
---------------------------------------------------------
- One env step == one game frame; a ManualClock advances ``frame_ms`` per step
- MultiDiscrete action space: [move(9), fire(2), aim(8)]
- Vector observation: player state + K nearest enemies + B nearest enemy
  bullets + M nearest power-ups
- Arcade window for "human" rendering (imported lazily), numpy frame for
  "rgb_array"

Quick test:
    python -m tank_game.tank_env
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .clock import ManualClock
from .config import GameConfig
from .session import GameSession
from .utils import clamp, seed_everything

# (up, down, left, right) per move action
MOVES: Tuple[Tuple[bool, bool, bool, bool], ...] = (
    (False, False, False, False),  # stay
    (True, False, False, False),   # up
    (False, True, False, False),   # down
    (False, False, True, False),   # left
    (False, False, False, True),   # right
    (True, False, True, False),    # up-left
    (True, False, False, True),    # up-right
    (False, True, True, False),    # down-left
    (False, True, False, True),    # down-right
)

AIM_DISTANCE = 100.0

DEFAULT_REWARDS = {
    "R_KILL": 1.0,
    "R_HIT": 0.2,
    "R_PICKUP": 0.5,
    "R_DAMAGE": 2.0,  # per fraction of max health lost
    "R_SHOT": 0.005,
    "R_TIME": 0.001,
    "R_DEATH": 5.0,
}


class TankEnv(gym.Env):
    """Tank arena as a Gymnasium environment"""

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        frame_ms: float = 1000 / 60,
        max_steps: int = 3600,  # 60s at 60 FPS
        k_enemies: int = 5,
        b_bullets: int = 5,
        m_power_ups: int = 2,
        reward_config: Optional[Dict[str, float]] = None,
        game_config: Optional[Dict[str, Any]] = None,
    ):
        super().__init__()

        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render_mode: {render_mode}")
        self.render_mode = render_mode

        self.config = GameConfig.from_dict(game_config or {})
        self.frame_ms = frame_ms
        self.max_steps = max_steps
        self.k_enemies = k_enemies
        self.b_bullets = b_bullets
        self.m_power_ups = m_power_ups

        self.rewards = dict(DEFAULT_REWARDS)
        if reward_config:
            self.rewards.update({k: v for k, v in reward_config.items() if k.startswith("R_")})

        self.action_space = spaces.MultiDiscrete([len(MOVES), 2, 8])

        # Player: pos(2) health(1) fire-ready(1) invulnerable(1) power-up(1) level(1)
        # Each enemy: rel pos(2) health(1)
        # Each enemy bullet: rel pos(2) vel(2)
        # Each power-up: rel pos(2)
        obs_dim = 7 + self.k_enemies * 3 + self.b_bullets * 4 + self.m_power_ups * 2
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._aim_dirs = []
        for i in range(8):
            ang = (math.pi * 2) * (i / 8.0)
            self._aim_dirs.append((math.cos(ang), math.sin(ang)))

        self.clock: ManualClock = None  # type: ignore
        self.session: GameSession = None  # type: ignore
        self._window = None
        self._step_count = 0
        self._last_counts: Dict[str, float] = {}

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)

        session_seed = seed if seed is not None else int(self.np_random.integers(0, 2**31 - 1))
        self.clock = ManualClock()
        self.session = GameSession(config=self.config, clock=self.clock, seed=session_seed)
        self.session.start()
        if self._window is not None:
            self._window.session = self.session

        self._step_count = 0
        self._last_counts = self._counts()

        return self._get_obs(), self._get_info()

    def step(self, action):
        move, fire, aim = int(action[0]), int(action[1]), int(action[2])
        self._apply_action(move, fire, aim)

        self.session.tick(self.clock.advance(self.frame_ms))

        reward = self._compute_reward()

        terminated = self.session.game_over
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # ----------------------------
    # Action / observation / reward
    # ----------------------------

    def _apply_action(self, move: int, fire: int, aim: int):
        inp = self.session.input
        inp.up, inp.down, inp.left, inp.right = MOVES[move % len(MOVES)]
        dx, dy = self._aim_dirs[aim % 8]
        player = self.session.world.player
        inp.pointer_x = player.x + dx * AIM_DISTANCE
        inp.pointer_y = player.y + dy * AIM_DISTANCE
        inp.firing = bool(fire)

    def _counts(self) -> Dict[str, float]:
        world = self.session.world
        return {
            "kills": world.kills,
            "hits": world.stats.enemies_hit,
            "pickups": world.stats.power_ups_collected,
            "damage": world.stats.damage_taken,
            "shots": world.stats.shots_fired,
        }

    def _compute_reward(self) -> float:
        counts = self._counts()
        delta = {k: counts[k] - self._last_counts.get(k, 0) for k in counts}
        self._last_counts = counts
        r = self.rewards
        max_health = self.session.world.player.max_health

        reward = 0.0
        reward += r["R_KILL"] * delta["kills"]
        reward += r["R_HIT"] * delta["hits"]
        reward += r["R_PICKUP"] * delta["pickups"]
        reward -= r["R_DAMAGE"] * delta["damage"] / max_health
        reward -= r["R_SHOT"] * delta["shots"]
        reward -= r["R_TIME"]

        if self.session.game_over:
            reward -= r["R_DEATH"]

        return float(reward)

    def _get_obs(self) -> np.ndarray:
        world = self.session.world
        cfg = self.config
        p = world.player
        w, h = cfg.width, cfg.height

        def rel(x, y):
            return [clamp((x - p.x) / w, -1, 1), clamp((y - p.y) / h, -1, 1)]

        def nearest(items, n):
            return sorted(items, key=lambda o: (o.x - p.x) ** 2 + (o.y - p.y) ** 2)[:n]

        ready = world.now - p.last_shot >= p.fire_interval
        obs_parts: List[float] = [
            (p.x / w) * 2 - 1,
            (p.y / h) * 2 - 1,
            (p.health / p.max_health) * 2 - 1,
            1.0 if ready else -1.0,
            1.0 if p.is_invulnerable(world.now) else -1.0,
            1.0 if p.power_up is not None else -1.0,
            clamp(world.level / 10.0, 0, 1) * 2 - 1,
        ]

        enemies = nearest(world.enemies.items(), self.k_enemies)
        for i in range(self.k_enemies):
            if i < len(enemies):
                e = enemies[i]
                obs_parts += rel(e.x, e.y) + [(e.health / e.max_health) * 2 - 1]
            else:
                obs_parts += [0.0, 0.0, 0.0]

        bullets = nearest(world.enemy_bullets.items(), self.b_bullets)
        speed = max(1e-6, cfg.enemy_bullet_speed)
        for i in range(self.b_bullets):
            if i < len(bullets):
                b = bullets[i]
                obs_parts += rel(b.x, b.y) + [clamp(b.vx / speed, -1, 1), clamp(b.vy / speed, -1, 1)]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        power_ups = nearest(world.power_ups.items(), self.m_power_ups)
        for i in range(self.m_power_ups):
            if i < len(power_ups):
                obs_parts += rel(power_ups[i].x, power_ups[i].y)
            else:
                obs_parts += [0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _get_info(self) -> Dict[str, Any]:
        world = self.session.world
        return {
            "score": world.score,
            "kills": world.kills,
            "level": world.level,
            "health": world.player.health,
            "damage_taken": world.stats.damage_taken,
            "power_ups_collected": world.stats.power_ups_collected,
            "num_enemies": len(world.enemies),
            "num_enemy_bullets": len(world.enemy_bullets),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self.render_mode == "human":
            if self._window is None:
                from .window import TankWindow
                self._window = TankWindow(self.session, interactive=False)
            self._window.dispatch_events()
            self._window.on_draw()
            self._window.flip()
            return None

        return self._render_rgb_array()

    def _render_rgb_array(self) -> np.ndarray:
        """Flat-shaded frame: tanks, bullets and power-ups as filled boxes"""
        snap = self.session.snapshot()
        frame = np.zeros((snap.height, snap.width, 3), dtype=np.uint8)
        frame[:, :] = (18, 18, 22)

        for pu in snap.power_ups:
            _fill_box(frame, pu.x, pu.y, pu.size, pu.size, pu.color)
        for e in snap.enemies:
            _fill_box(frame, e.x, e.y, e.size, e.size, (231, 76, 60))
        _fill_box(frame, snap.player.x, snap.player.y, snap.player.size, snap.player.size, (46, 204, 113))
        for b in snap.bullets:
            _fill_box(frame, b.x, b.y, b.radius * 2, b.radius * 2, (243, 156, 18))
        for b in snap.enemy_bullets:
            _fill_box(frame, b.x, b.y, b.radius * 2, b.radius * 2, (255, 80, 80))
        return frame

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


def _fill_box(frame: np.ndarray, cx: float, cy: float, w: float, h: float, color):
    height, width = frame.shape[:2]
    x0 = int(clamp(cx - w / 2, 0, width))
    x1 = int(clamp(cx + w / 2, 0, width))
    y0 = int(clamp(cy - h / 2, 0, height))
    y1 = int(clamp(cy + h / 2, 0, height))
    if x1 > x0 and y1 > y0:
        frame[y0:y1, x0:x1] = color


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: int = 42):
    """Run a random episode for testing"""
    env = TankEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    print("Running episode... close the window to exit early.")
    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    print(f"Random episode return: {total:.2f}  "
          f"score={info['score']} kills={info['kills']} level={info['level']}")
    env.close()
    return total, info


if __name__ == "__main__":
    run_random_episode(render=True)
