"""
Training configuration for the tank environment
Reward shaping presets and algorithm hyperparameters
"""

# Environment parameters
ENV_CONFIG = {
    # "render_mode": None,  # Don't render during training - too slow with parallel envs
    "frame_ms": 1000 / 60,
    "max_steps": 3600,  # 60 seconds at 60 FPS
    "k_enemies": 5,
    "b_bullets": 5,
    "m_power_ups": 2,
    "game_config": {
        "width": 1000,
        "height": 700,
        "max_enemies": 12,
    },
}

# ==============================================================================
# REWARD SHAPING CONFIGURATIONS
# ==============================================================================

# BASELINE: balanced combat and survival
REWARD_CONFIG_BASELINE = {
    "name": "baseline",
    "description": "Balanced reward shaping",
    "R_KILL": 1.0,       # Enemy destroyed
    "R_HIT": 0.2,        # Bullet landed
    "R_PICKUP": 0.5,     # Power-up collected
    "R_DAMAGE": 2.0,     # Per fraction of max health lost
    "R_SHOT": 0.005,     # Per trigger pull
    "R_TIME": 0.001,     # Per frame
    "R_DEATH": 5.0,      # Game over
}

# SURVIVAL: dodge first, shoot second
REWARD_CONFIG_SURVIVAL = {
    "name": "survival",
    "description": "Higher damage/death penalties, lower combat rewards",
    "R_KILL": 0.5,
    "R_HIT": 0.1,
    "R_PICKUP": 0.5,
    "R_DAMAGE": 6.0,
    "R_SHOT": 0.01,
    "R_TIME": 0.0005,
    "R_DEATH": 10.0,
}

# AGGRESSIVE: clear waves quickly, accept hits
REWARD_CONFIG_AGGRESSIVE = {
    "name": "aggressive",
    "description": "Higher kill/pickup rewards, lower penalties",
    "R_KILL": 2.0,
    "R_HIT": 0.4,
    "R_PICKUP": 1.0,
    "R_DAMAGE": 1.0,
    "R_SHOT": 0.002,
    "R_TIME": 0.002,
    "R_DEATH": 3.0,
}

REWARD_CONFIGS = {
    "baseline": REWARD_CONFIG_BASELINE,
    "survival": REWARD_CONFIG_SURVIVAL,
    "aggressive": REWARD_CONFIG_AGGRESSIVE,
}

# ==============================================================================
# ALGORITHM HYPERPARAMETERS
# ==============================================================================

PPO_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 3e-4,
    "n_steps": 2048,
    "batch_size": 256,
    "n_epochs": 10,
    "gamma": 0.99,
    "gae_lambda": 0.95,
    "clip_range": 0.2,
    "ent_coef": 0.01,
    "vf_coef": 0.5,
    "max_grad_norm": 0.5,
    "verbose": 1,
}

DQN_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 1e-4,
    "buffer_size": 100_000,
    "learning_starts": 2000,
    "batch_size": 128,
    "tau": 1.0,
    "gamma": 0.99,
    "train_freq": 4,
    "gradient_steps": 1,
    "target_update_interval": 1000,
    "exploration_fraction": 0.1,
    "exploration_initial_eps": 1.0,
    "exploration_final_eps": 0.05,
    "verbose": 1,
}

# ==============================================================================
# TRAINING SETTINGS
# ==============================================================================

TRAINING_CONFIG = {
    "total_timesteps": 1_000_000,
    "save_freq": 20_000,
    "eval_freq": 10_000,
    "log_dir": "./logs",
    "model_dir": "./models",
    "tensorboard_log": "./tensorboard_logs",
}
