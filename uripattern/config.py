"""
Config system - typed settings for pattern compilation and caching.

Merge precedence (later overrides earlier):
defaults < .env file < environment variables < manual overrides
"""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger("uripattern.config")


class ConfigError(Exception):
    """Raised when configuration validation fails."""
    pass


@dataclass(frozen=True)
class PatternConfig:
    """Settings for the compile cache."""
    cache_enabled: bool = True
    cache_size: int = 1000
    cache_ttl: Optional[float] = None
    cache_stats: bool = True

    def __post_init__(self):
        if self.cache_size < 0:
            raise ConfigError(f"cache_size must be >= 0, got {self.cache_size}")
        if self.cache_ttl is not None and self.cache_ttl <= 0:
            raise ConfigError(f"cache_ttl must be > 0, got {self.cache_ttl}")

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


_TRUE = ("true", "yes", "on", "1")
_FALSE = ("false", "no", "off", "0")


def _parse_value(name: str, value: Any, default: Any) -> Any:
    """Coerce a raw (usually string) value to the type of the field's default."""
    if not isinstance(value, str):
        return value

    text = value.strip()
    try:
        if isinstance(default, bool):
            if text.lower() in _TRUE:
                return True
            if text.lower() in _FALSE:
                return False
            raise ValueError(text)
        if isinstance(default, int):
            return int(text)
        if name == "cache_ttl":
            if text.lower() in ("", "none", "null"):
                return None
            return float(text)
    except ValueError:
        raise ConfigError(f"Invalid value for {name}: {value!r}") from None
    return text


def _read_env_file(path: str) -> Dict[str, str]:
    """Read KEY=VALUE lines from a .env file."""
    env_path = Path(path)
    if not env_path.exists():
        logger.debug("Env file %s not found, skipping", path)
        return {}

    values = {}
    with open(env_path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if "=" in line:
                key, value = line.split("=", 1)
                values[key.strip()] = value.strip().strip("\"'")
    return values


def load_config(
    env_prefix: str = "URIPATTERN_",
    env_file: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> PatternConfig:
    """
    Load configuration from multiple sources.

    Args:
        env_prefix: Prefix for environment variables, e.g. URIPATTERN_CACHE_SIZE
        env_file: Path to .env file
        overrides: Manual overrides (highest precedence)

    Returns:
        Validated PatternConfig
    """
    raw: Dict[str, Any] = {}
    sources = []
    if env_file:
        sources.append(_read_env_file(env_file))
    sources.append(dict(os.environ))

    known = {f.name for f in fields(PatternConfig)}
    for source in sources:
        for key, value in source.items():
            if not key.startswith(env_prefix):
                continue
            name = key[len(env_prefix):].lower()
            if name in known:
                raw[name] = value

    if overrides:
        unknown = set(overrides) - known
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        raw.update(overrides)

    defaults = PatternConfig()
    values = {
        name: _parse_value(name, value, getattr(defaults, name))
        for name, value in raw.items()
    }
    config = PatternConfig(**values)
    logger.debug("Loaded pattern config: %s", config.to_dict())
    return config
