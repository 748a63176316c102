"""
Configuration dataclasses for stepwise.

Configuration is immutable and provided as Python objects. A current
configuration is kept per thread, and can be loaded from a YAML file.
"""

import dataclasses
import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import yaml

logger = logging.getLogger(__name__)

_VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class StepwiseConfig:
    """Behaviour switches for dispatch resolution."""

    verify_distance_type: bool = True
    """Reject position types whose declared Distance is not a signed integer type."""

    dispatch_log_level: str = "DEBUG"
    """Level at which each position type's resolved algorithms are logged."""

    def __post_init__(self):
        level = str(self.dispatch_log_level).upper()
        if level not in _VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid dispatch_log_level '{self.dispatch_log_level}'. "
                f"Valid levels are: {', '.join(_VALID_LOG_LEVELS)}"
            )
        object.__setattr__(self, 'dispatch_log_level', level)

    @property
    def dispatch_log_levelno(self) -> int:
        return getattr(logging, self.dispatch_log_level)


_DEFAULT_CONFIG = StepwiseConfig()

_config_context = threading.local()


def get_default_config() -> StepwiseConfig:
    return _DEFAULT_CONFIG


def set_current_config(config: Optional[StepwiseConfig]) -> None:
    """Set the config used by the current thread. ``None`` restores the default."""
    _config_context.value = config

def get_current_config() -> StepwiseConfig:
    """Get the current thread's config, falling back to the default instance."""
    config = getattr(_config_context, 'value', None)
    return config if config is not None else _DEFAULT_CONFIG


def load_config_from_file(config_file: Union[str, Path]) -> StepwiseConfig:
    """
    Load a StepwiseConfig from a YAML file.

    Keys present in the file override the defaults; missing keys keep them.

    Args:
        config_file: Path to a YAML file holding a mapping

    Returns:
        The loaded configuration

    Raises:
        ValueError: If the file does not hold a mapping or names unknown fields
        yaml.YAMLError: If the file is not valid YAML
    """
    config_file = Path(config_file)
    logger.info(f"Loading StepwiseConfig from {config_file}")

    with open(config_file, 'r', encoding='utf-8') as f:
        loaded_data = yaml.safe_load(f)

    if loaded_data is None:
        loaded_data = {}
    if not isinstance(loaded_data, dict):
        raise ValueError(
            f"Config file {config_file} must contain a mapping, got {type(loaded_data).__name__}"
        )

    known_fields = {f.name for f in dataclasses.fields(StepwiseConfig)}
    unknown = sorted(set(loaded_data) - known_fields)
    if unknown:
        raise ValueError(
            f"Unknown config field(s) in {config_file}: {', '.join(unknown)}. "
            f"Valid fields are: {', '.join(sorted(known_fields))}"
        )

    return StepwiseConfig(**{**dataclasses.asdict(_DEFAULT_CONFIG), **loaded_data})
