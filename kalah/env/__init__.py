from .gym_env import KalahEnv

__all__ = ["KalahEnv"]
