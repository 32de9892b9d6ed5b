from .env import Env
from .load_env import load_env
from .logging_settings import configure_logging_from_env
from .time_parser import TimeParser

__all__ = [
    "Env",
    "TimeParser",
    "configure_logging_from_env",
    "load_env",
]
