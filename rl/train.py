"""
Training script for the tank environment using Stable-Baselines3
Supports PPO and DQN with per-episode metrics tracking.
"""

import os
import argparse
from typing import Optional

from stable_baselines3 import PPO, DQN
from stable_baselines3.common.vec_env import DummyVecEnv, VecNormalize
from stable_baselines3.common.callbacks import CheckpointCallback, EvalCallback
from stable_baselines3.common.monitor import Monitor

from tank_game import TankEnv
from rl.configs.tank_config import (
    ENV_CONFIG, REWARD_CONFIGS, PPO_CONFIG, DQN_CONFIG, TRAINING_CONFIG,
)
from rl.metrics_callback import MetricsCallback, TensorboardMetricsCallback
from rl.wrappers import MultiDiscreteToDiscreteWrapper


def make_env(seed: Optional[int] = None, reward_name: str = "baseline", wrap_for_dqn: bool = False):
    """Factory function to create the environment"""
    def _init():
        env = TankEnv(reward_config=REWARD_CONFIGS[reward_name], **ENV_CONFIG)
        if wrap_for_dqn:
            env = MultiDiscreteToDiscreteWrapper(env)
        env = Monitor(env)
        if seed is not None:
            env.reset(seed=seed)
        return env
    return _init


def _callbacks(eval_env, algo: str, save_dir: str, log_dir: str, n_envs: int = 1):
    checkpoint_callback = CheckpointCallback(
        save_freq=TRAINING_CONFIG["save_freq"] // n_envs,
        save_path=save_dir,
        name_prefix=f"{algo}_tank",
    )
    eval_callback = EvalCallback(
        eval_env,
        best_model_save_path=save_dir,
        log_path=log_dir,
        eval_freq=TRAINING_CONFIG["eval_freq"] // n_envs,
        deterministic=True,
        render=False,
    )
    metrics_callback = MetricsCallback(log_dir=log_dir, algo_name=algo, verbose=1)
    tb_callback = TensorboardMetricsCallback(verbose=0)
    return metrics_callback, [checkpoint_callback, eval_callback, metrics_callback, tb_callback]


def _print_summary(algo: str, final_path: str, metrics_callback: MetricsCallback):
    print(f"\n{'='*60}")
    print(f"{algo.upper()} Training complete! Model saved to {final_path}")
    summary = metrics_callback.get_summary()
    if summary:
        print(f"Mean Reward: {summary['mean_reward']:.2f} ± {summary['std_reward']:.2f}")
        print(f"Mean Kills: {summary['mean_kills']:.1f}  Max Level: {summary['max_level']}")
        print(f"Total Episodes: {summary['total_episodes']}")
    print(f"{'='*60}\n")


def train_ppo(
    total_timesteps: int = None,
    reward_name: str = "baseline",
    save_dir: str = "./models/ppo",
    log_dir: str = "./logs/ppo",
    tensorboard_log: str = "./tensorboard_logs/ppo",
    n_envs: int = 4,
):
    """Train PPO agent on the tank environment"""

    if total_timesteps is None:
        total_timesteps = TRAINING_CONFIG["total_timesteps"]

    os.makedirs(save_dir, exist_ok=True)
    os.makedirs(log_dir, exist_ok=True)

    print(f"\n{'='*60}")
    print(f"Training PPO for {total_timesteps:,} timesteps ({reward_name} rewards)...")
    print(f"Using {n_envs} parallel environments")
    print(f"{'='*60}\n")

    env = DummyVecEnv([make_env(seed=i, reward_name=reward_name) for i in range(n_envs)])
    env = VecNormalize(env, norm_obs=True, norm_reward=True)

    eval_env = DummyVecEnv([make_env(seed=100, reward_name=reward_name)])
    eval_env = VecNormalize(eval_env, norm_obs=True, norm_reward=False, training=False)

    metrics_callback, callbacks = _callbacks(eval_env, "ppo", save_dir, log_dir, n_envs)

    model = PPO(env=env, tensorboard_log=tensorboard_log, **PPO_CONFIG)
    model.learn(total_timesteps=total_timesteps, callback=callbacks)

    final_path = os.path.join(save_dir, "ppo_tank_final")
    model.save(final_path)
    env.save(os.path.join(save_dir, "vec_normalize.pkl"))

    _print_summary("ppo", final_path, metrics_callback)
    return model, metrics_callback


def train_dqn(
    total_timesteps: int = None,
    reward_name: str = "baseline",
    save_dir: str = "./models/dqn",
    log_dir: str = "./logs/dqn",
    tensorboard_log: str = "./tensorboard_logs/dqn",
):
    """Train DQN agent on the tank environment"""

    if total_timesteps is None:
        total_timesteps = TRAINING_CONFIG["total_timesteps"]

    os.makedirs(save_dir, exist_ok=True)
    os.makedirs(log_dir, exist_ok=True)

    print(f"\n{'='*60}")
    print(f"Training DQN for {total_timesteps:,} timesteps ({reward_name} rewards)...")
    print("Using MultiDiscrete->Discrete action wrapper (144 actions)")
    print(f"{'='*60}\n")

    env = DummyVecEnv([make_env(seed=0, reward_name=reward_name, wrap_for_dqn=True)])
    eval_env = DummyVecEnv([make_env(seed=100, reward_name=reward_name, wrap_for_dqn=True)])

    metrics_callback, callbacks = _callbacks(eval_env, "dqn", save_dir, log_dir)

    model = DQN(env=env, tensorboard_log=tensorboard_log, **DQN_CONFIG)
    model.learn(total_timesteps=total_timesteps, callback=callbacks)

    final_path = os.path.join(save_dir, "dqn_tank_final")
    model.save(final_path)

    _print_summary("dqn", final_path, metrics_callback)
    return model, metrics_callback


def main():
    parser = argparse.ArgumentParser(description="Train RL agent on the tank environment")
    parser.add_argument(
        "--algo",
        type=str,
        default="ppo",
        choices=["ppo", "dqn", "all"],
        help="RL algorithm to use (default: ppo)",
    )
    parser.add_argument(
        "--rewards",
        type=str,
        default="baseline",
        choices=sorted(REWARD_CONFIGS),
        help="Reward shaping preset (default: baseline)",
    )
    parser.add_argument(
        "--timesteps",
        type=int,
        default=None,
        help=f"Total timesteps to train (default: {TRAINING_CONFIG['total_timesteps']})",
    )
    parser.add_argument(
        "--n-envs",
        type=int,
        default=4,
        help="Number of parallel environments for PPO (default: 4)",
    )

    args = parser.parse_args()

    if args.algo == "ppo":
        train_ppo(total_timesteps=args.timesteps, reward_name=args.rewards, n_envs=args.n_envs)
    elif args.algo == "dqn":
        train_dqn(total_timesteps=args.timesteps, reward_name=args.rewards)
    elif args.algo == "all":
        print("Training all algorithms sequentially...")
        train_dqn(total_timesteps=args.timesteps, reward_name=args.rewards)
        train_ppo(total_timesteps=args.timesteps, reward_name=args.rewards, n_envs=args.n_envs)


if __name__ == "__main__":
    main()
