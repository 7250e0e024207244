"""Tank arena - top-down tank arcade simulation"""

from .clock import ManualClock, MonotonicClock
from .config import GameConfig
from .entities import PowerUpKind
from .session import GameSession
from .snapshot import GameOverReport, HudState, WorldSnapshot
from .tank_env import TankEnv, run_random_episode

__all__ = [
    'GameConfig',
    'GameSession',
    'GameOverReport',
    'HudState',
    'ManualClock',
    'MonotonicClock',
    'PowerUpKind',
    'TankEnv',
    'WorldSnapshot',
    'run_random_episode',
]
