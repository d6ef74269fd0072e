"""Configuration loading for Jaegerlite.

Configuration is merged from, lowest to highest priority: defaults, a TOML
file, ``JAEGERLITE_*`` environment variables, and explicit overrides.

Example ``jaegerlite.toml``::

    [sampler]
    default_rate = 0.1

    [[sampler.operations]]
    operation = "checkout"
    rate = 1.0

    [propagation]
    trace_id_header = "uber-trace-id"
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator

from jaegerlite.context.propagators import TRACE_ID_HEADER
from jaegerlite.errors import ConfigError
from jaegerlite.samplers.probabilistic_categorizer import DEFAULT_OPERATION

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "jaegerlite.toml"

# Environment variable -> (section, key, converter)
_ENV_VARS = {
    "JAEGERLITE_SAMPLER_DEFAULT_RATE": ("sampler", "default_rate", float),
    "JAEGERLITE_TRACE_ID_HEADER": ("propagation", "trace_id_header", str),
}


class OperationSamplingRate(BaseModel):
    """Sampling rate for operations whose name starts with ``operation``."""

    operation: str = Field(min_length=1)
    rate: float = Field(ge=0.0, le=1.0)

    @field_validator("operation")
    @classmethod
    def _not_default(cls, value: str) -> str:
        if value == DEFAULT_OPERATION:
            raise ValueError("use sampler.default_rate for the default rate")
        return value


class SamplerConfig(BaseModel):
    default_rate: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    operations: List[OperationSamplingRate] = Field(default_factory=list)

    def rate_list(self) -> List[Tuple[str, float]]:
        """Ordered ``(name, rate)`` pairs, with the default rate last."""
        rates = [(op.operation, op.rate) for op in self.operations]
        if self.default_rate is not None:
            rates.append((DEFAULT_OPERATION, self.default_rate))
        return rates


class PropagationConfig(BaseModel):
    trace_id_header: str = Field(default=TRACE_ID_HEADER, min_length=1)


class JaegerliteConfig(BaseModel):
    sampler: SamplerConfig = Field(default_factory=SamplerConfig)
    propagation: PropagationConfig = Field(default_factory=PropagationConfig)


def load_toml_config(path: str) -> Dict[str, Any]:
    """
    Load a TOML config file.

    Returns:
        Parsed file contents, or an empty dict if the file does not exist

    Raises:
        ConfigError: if the file is not valid TOML
    """
    config_path = Path(path)
    if not config_path.is_file():
        return {}
    try:
        with config_path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in config file: {e}", {"path": str(config_path)}) from e


def find_config_file() -> Optional[str]:
    """Look for ``jaegerlite.toml`` in the current directory, then in ``~/.config/jaegerlite``."""
    candidates = [
        Path.cwd() / CONFIG_FILE_NAME,
        Path.home() / ".config" / "jaegerlite" / CONFIG_FILE_NAME,
    ]
    for candidate in candidates:
        if candidate.is_file():
            return str(candidate)
    return None


def load_config_from_env() -> Dict[str, Any]:
    """
    Read ``JAEGERLITE_*`` environment variables into a nested config dict.

    Unset variables are left out of the result.

    Raises:
        ConfigError: if a variable cannot be converted to its type
    """
    result: Dict[str, Dict[str, Any]] = {}
    for env_name, (section, key, convert) in _ENV_VARS.items():
        raw = os.environ.get(env_name)
        if raw is None:
            continue
        try:
            value = convert(raw)
        except ValueError as e:
            raise ConfigError(f"Invalid value for {env_name}", {"value": raw}) from e
        result.setdefault(section, {})[key] = value
    return result


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(
    config_file: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> JaegerliteConfig:
    """
    Load and validate configuration.

    Args:
        config_file: Path to a TOML file; searched for when not given
        overrides: Nested dict applied last

    Raises:
        ConfigError: if the file is unreadable or the merged config is invalid
    """
    path = config_file or find_config_file()
    data: Dict[str, Any] = {}
    if path:
        logger.debug(f"Loading config file {path}")
        data = load_toml_config(path)
    data = _merge(data, load_config_from_env())
    if overrides:
        data = _merge(data, overrides)

    try:
        return JaegerliteConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def validate_config(
    config_file: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> Tuple[bool, str, Optional[JaegerliteConfig]]:
    """
    Load configuration without raising.

    Returns:
        Tuple of (is_valid, message, config or None)
    """
    try:
        config = load_config(config_file=config_file, overrides=overrides)
    except ConfigError as e:
        return False, str(e), None
    return True, "Configuration is valid", config
