"""
Action-space wrappers for algorithms that cannot consume MultiDiscrete
"""

import numpy as np
import gymnasium as gym
from gymnasium import spaces


class MultiDiscreteToDiscreteWrapper(gym.ActionWrapper):
    """
    Flattens MultiDiscrete([9, 2, 8]) to Discrete(9*2*8=144) for DQN.
    """

    def __init__(self, env):
        super().__init__(env)
        self.orig_action_space = env.action_space
        self._nvec = env.action_space.nvec
        self.n_total = int(np.prod(self._nvec))
        self.action_space = spaces.Discrete(self.n_total)

    def action(self, action):
        """Convert flat discrete action to MultiDiscrete."""
        indices = []
        remaining = int(action)
        for n in reversed(self._nvec):
            indices.append(remaining % n)
            remaining //= n
        return np.array(list(reversed(indices)), dtype=np.int64)
