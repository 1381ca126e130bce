"""
Configuration utilities for loading, parsing, and writing polysum config files.
"""
import configparser
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union
from pydantic import ValidationError
from models.settings import HashingSettings
from utils.config.config_normalizer import ConfigNormalizer
from utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "./config/polysum_config.ini"

_TRUE_VALUES = ('true', '1', 'yes', 'on', 'enabled')
_FALSE_VALUES = ('false', '0', 'no', 'off', 'disabled')


def load_configuration(path: Optional[str] = None) -> Dict[str, Dict[str, Any]]:
    """
    Load the configuration file, normalize section names and apply environment overrides.

    A missing file is not an error: polysum runs on built-in defaults plus any
    POLYSUM_* environment variables.

    Args:
        path (Optional[str]): Path to the INI configuration file.

    Returns:
        Dict[str, Dict[str, Any]]: Normalized configuration.

    Raises:
        ConfigurationError: If the file exists but is not valid INI.
    """
    parser = configparser.ConfigParser()
    if path and Path(path).is_file():
        try:
            parser.read(path, encoding="utf-8")
        except configparser.Error as e:
            raise ConfigurationError(f"Invalid configuration file {path}: {e}") from e
        logger.debug(f"Loaded configuration from: {path}")
    else:
        logger.debug(f"No configuration file at {path}, using defaults")
    return ConfigNormalizer().normalize_and_override(parser)


def get_config_value(
    config: Optional[Dict[str, Dict[str, Any]]],
    section: str,
    key: str,
    fallback: Any = None,
    value_type: type = str
) -> Any:
    """
    Get a configuration value with case-insensitive lookup and type conversion.

    Args:
        config: Normalized configuration dict
        section: Configuration section name
        key: Configuration key name
        fallback: Default value if not found or empty
        value_type: Type to convert the value to (str, int, bool)

    Returns:
        Configuration value converted to specified type or fallback

    Raises:
        ConfigurationError: If the value cannot be converted to the specified type
    """
    if config is None:
        return fallback

    section_data = config.get(ConfigNormalizer().canonical_section(section.strip()), {})
    value = section_data.get(key.strip().lower())

    if value is None or (isinstance(value, str) and not value.strip()):
        return fallback

    try:
        if value_type == bool and isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_VALUES:
                return True
            if lowered in _FALSE_VALUES:
                return False
            raise ValueError(f"expected one of {_TRUE_VALUES + _FALSE_VALUES}")
        if value_type == str:
            return str(value).strip()
        return value_type(value)
    except (ValueError, TypeError) as e:
        raise ConfigurationError(
            f"Failed to convert config value [{section}].{key}='{value}' to {value_type.__name__}: {e}"
        ) from e


def load_settings(config: Optional[Dict[str, Dict[str, Any]]]) -> HashingSettings:
    """
    Build validated HashingSettings from a normalized configuration.

    Args:
        config: Normalized configuration dict, or None for defaults.

    Returns:
        HashingSettings: Validated settings.

    Raises:
        ConfigurationError: If any value is invalid.
    """
    values = {
        "algorithm": get_config_value(config, "hashing", "algorithm"),
        "mode": get_config_value(config, "hashing", "mode"),
        "prefix": get_config_value(config, "hashing", "prefix", value_type=bool),
        "chunk_size": get_config_value(config, "hashing", "chunk_size", value_type=int),
        "max_workers": get_config_value(config, "hashing", "max_workers", value_type=int),
    }
    # Unset values fall back to the model defaults
    values = {key: value for key, value in values.items() if value is not None}
    try:
        settings = HashingSettings(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid [hashing] configuration: {e}") from e
    logger.debug(f"Effective settings: {settings.model_dump()}")
    return settings


def write_temp_config(config_dict: dict, tmp_path: Union[str, Path]) -> Path:
    """
    Write a temporary config.ini file from a dictionary of config sections.

    Args:
        config_dict (dict): Dictionary of config sections and values.
        tmp_path (Union[str, Path]): Path to temporary directory.

    Returns:
        Path: Path to the written config file.
    """
    config = configparser.ConfigParser()
    for section, values in config_dict.items():
        config[section] = values

    config_path = Path(tmp_path) / "test_polysum_config.ini"
    with open(config_path, "w") as f:
        config.write(f)

    return config_path
