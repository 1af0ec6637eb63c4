from dotenv import load_dotenv

from .configuration import Configuration
from .loader import get_bool_env, get_int_env, get_str_env, load_yaml_config

load_dotenv()

__all__ = [
    "Configuration",
    "load_yaml_config",
    "get_bool_env",
    "get_int_env",
    "get_str_env",
]
