import logging
import os
import re
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

TRUE_VALUES = {"1", "yes", "on", "true", "y"}


def get_bool_env(name: str, default: bool = False) -> bool:
    '''get bool env'''
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in TRUE_VALUES


def get_str_env(name: str, default: str = "") -> str:
    '''get str env'''
    val = os.getenv(name)
    return default if val is None else str(val).strip()


def get_int_env(name: str, default: int = 0) -> int:
    '''get int env'''
    val = os.getenv(name)
    if val is None:
        return default
    try:
        return int(val.strip())
    except ValueError:
        logger.warning(f"Invalid integer value for {name}: {val}. Using default {default}.")
        return default


_ENV_REFERENCE = re.compile(r"^\$(?:\{(\w+)\}|(\w+))$")


def resolve_env_refs(value: Any) -> Any:
    '''replace "$NAME" or "${NAME}" values with env vars, recursing into dicts and lists'''
    if isinstance(value, dict):
        return {key: resolve_env_refs(item) for key, item in value.items()}
    if isinstance(value, list):
        return [resolve_env_refs(item) for item in value]
    if isinstance(value, str):
        match = _ENV_REFERENCE.match(value)
        if match:
            env_var = match.group(1) or match.group(2)
            return os.getenv(env_var, env_var)
    return value


_config_cache: Dict[str, Dict[str, Any]] = {}


def load_yaml_config(file_path: str) -> Dict[str, Any]:
    '''load and process yaml config file'''
    if not os.path.exists(file_path):
        logger.debug(f"Config file not found: {file_path}")
        return {}
    if file_path in _config_cache:
        return _config_cache[file_path]

    with open(file_path, "r") as f:
        config = yaml.safe_load(f)
    if not isinstance(config, dict):
        config = {}
    processed_config = resolve_env_refs(config)

    _config_cache[file_path] = processed_config
    return processed_config
