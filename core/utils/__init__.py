"""Utility helpers shared across core packages.

Kept limited to environment helpers so that ``config`` modules can import
them without pulling in feature packages.
"""

from .env import get_bool_env, get_env, get_int_env, get_list_env

__all__ = [
    "get_bool_env",
    "get_env",
    "get_int_env",
    "get_list_env",
]
