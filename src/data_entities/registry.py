"""
Configuration registry for data entities.

Holds the two remap hooks applied to raw input before Asset and Candle
validate it. The process-wide registry is exported as ``config``; entities
also accept an explicit ``config=`` keyword so callers can pass their own
EntityConfig instead of relying on shared state.

Example usage:
    from data_entities import config, ConfigKey

    config.set("remapAsset", lambda info: replace(info, name=info.name.upper()))
    config.set({ConfigKey.REMAP_CANDLE: my_candle_hook})
"""

import importlib
import logging
import os
import threading
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Union

import yaml
from dotenv import load_dotenv

from .constants import (
    ENV_REMAP_ASSET,
    ENV_REMAP_CANDLE,
    REMAP_ASSET_KEY,
    REMAP_CANDLE_KEY,
)
from .exceptions import ConfigLoadError, UnknownConfigKey

logger = logging.getLogger(__name__)

RemapHook = Callable[[Any], Any]


class ConfigKey(str, Enum):
    """The closed set of config keys."""
    REMAP_ASSET = REMAP_ASSET_KEY
    REMAP_CANDLE = REMAP_CANDLE_KEY


ENV_VARS: Dict[ConfigKey, str] = {
    ConfigKey.REMAP_ASSET: ENV_REMAP_ASSET,
    ConfigKey.REMAP_CANDLE: ENV_REMAP_CANDLE,
}


def identity(data: Any) -> Any:
    """Default remap hook."""
    return data


def _resolve_key(key: Any) -> ConfigKey:
    """Map a ConfigKey or its string value to ConfigKey, rejecting anything else."""
    if isinstance(key, ConfigKey):
        return key
    if isinstance(key, str):
        try:
            return ConfigKey(key)
        except ValueError:
            pass
    logger.error(f"Rejected unknown config key: {key!r}")
    raise UnknownConfigKey(f'Unknown config key: "{key}"')


class EntityConfig:
    """
    Thread-safe store of remap hooks.

    Only the keys in ConfigKey exist. Every hook defaults to the identity
    function. Writes are serialized by a lock; the last writer wins.
    """

    def __init__(self):
        """Initialize registry with identity hooks."""
        self._lock = threading.RLock()
        self._hooks: Dict[ConfigKey, RemapHook] = {key: identity for key in ConfigKey}

    def get(self, key: Union[ConfigKey, str]) -> RemapHook:
        """
        Get the current hook for key.

        Raises:
            UnknownConfigKey: If key is not a ConfigKey
        """
        config_key = _resolve_key(key)
        with self._lock:
            return self._hooks[config_key]

    def set(
        self,
        key_or_values: Union[ConfigKey, str, Mapping[Any, Optional[RemapHook]]],
        value: Optional[RemapHook] = None,
    ) -> None:
        """
        Replace one hook, or several at once.

        ``set(key, hook)`` replaces a single hook; a None hook is a no-op.
        ``set({key: hook, ...})`` validates every key and hook before
        applying any of them; None hooks in the mapping are skipped.

        Raises:
            UnknownConfigKey: If any key is not a ConfigKey
            TypeError: If any hook is not callable
        """
        if isinstance(key_or_values, Mapping):
            resolved = [(_resolve_key(key), hook) for key, hook in key_or_values.items()]
            updates = {key: hook for key, hook in resolved if hook is not None}
        else:
            config_key = _resolve_key(key_or_values)
            if value is None:
                logger.debug(f"Ignoring empty value for config key {config_key.value}")
                return
            updates = {config_key: value}

        for config_key, hook in updates.items():
            if not callable(hook):
                raise TypeError(
                    f'Config value for "{config_key.value}" must be callable, '
                    f"got {type(hook).__name__}"
                )

        with self._lock:
            self._hooks.update(updates)

        for config_key in updates:
            logger.info(f"Config hook {config_key.value} replaced")

    def reset(self) -> None:
        """Restore identity hooks for every key."""
        with self._lock:
            self._hooks = {key: identity for key in ConfigKey}
        logger.info("Config hooks reset to defaults")

    def snapshot(self) -> Mapping[ConfigKey, RemapHook]:
        """Return a read-only copy of the current hooks."""
        with self._lock:
            return MappingProxyType(dict(self._hooks))


config = EntityConfig()


def resolve_hook(path: str) -> RemapHook:
    """
    Import a hook from a ``package.module:callable`` path.

    Raises:
        ConfigLoadError: If the path is malformed, cannot be imported or
            does not name a callable
    """
    if not isinstance(path, str):
        raise ConfigLoadError(f"Hook path must be a string, got {type(path).__name__}")

    module_name, _, attr_path = path.strip().partition(":")
    if not module_name or not attr_path:
        raise ConfigLoadError(f"Invalid hook path {path!r}, expected 'module:callable'")

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigLoadError(f"Cannot import module {module_name!r}: {e}") from e

    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as e:
            raise ConfigLoadError(f"Cannot resolve {attr_path!r} in {module_name!r}") from e

    if not callable(target):
        raise ConfigLoadError(f"Hook {path!r} is not callable")
    return target


def load_config_file(path: Union[str, Path], registry: Optional[EntityConfig] = None) -> None:
    """
    Install hooks listed in a YAML file.

    File format::

        remapAsset: my_package.hooks:remap_asset
        remapCandle: my_package.hooks:remap_candle

    Raises:
        FileNotFoundError: If the file does not exist
        UnknownConfigKey: If the file names an unknown key
        ConfigLoadError: If the file is malformed or a hook cannot be resolved
    """
    if registry is None:
        registry = config
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigLoadError(f"Cannot parse config file {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigLoadError(f"Config file {config_path} must contain a mapping")

    keys = [_resolve_key(key) for key in data]
    hooks = {key: resolve_hook(data[key.value]) for key in keys}
    registry.set(hooks)
    logger.info(f"Loaded {len(hooks)} config hook(s) from {config_path}")


def load_config_from_env(
    registry: Optional[EntityConfig] = None,
    dotenv_path: Optional[Union[str, Path]] = None,
) -> None:
    """
    Install hooks named by environment variables.

    Reads an optional .env file first, then DATA_ENTITIES_REMAP_ASSET and
    DATA_ENTITIES_REMAP_CANDLE. Unset variables leave their hooks unchanged.

    Raises:
        ConfigLoadError: If a variable names a hook that cannot be resolved
    """
    if registry is None:
        registry = config
    load_dotenv(dotenv_path)

    hooks = {
        key: resolve_hook(os.environ[env_var])
        for key, env_var in ENV_VARS.items()
        if os.environ.get(env_var)
    }
    registry.set(hooks)
    if hooks:
        logger.info(f"Loaded {len(hooks)} config hook(s) from environment")
