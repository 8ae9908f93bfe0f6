"""
Delivery Receipt Configuration

This module defines the receipt handling configuration and the factory functions
that build it from keyword arguments, environment variables and JSON files.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .exceptions import DLRConfigurationException
from .utils import resolve_timezone


def _parse_bool(value: str) -> bool:
    return value.lower() in ('true', '1', 'yes')


@dataclass
class ReceiptConfig:
    """Delivery receipt handling configuration"""

    # Zone the receipt dates are expressed in
    timezone: str = 'UTC'
    # Require every field except text
    strict: bool = True
    # Detect receipts by optional parameters instead of esm_class
    detect_dlr_by_opts: bool = False
    # Acknowledge malformed receipts with ESME_RUNKNOWNERR instead of ESME_ROK
    reject_malformed_receipts: bool = False
    log_level: str = 'INFO'

    def validate(self) -> None:
        """Validate receipt configuration"""
        if not self.timezone:
            raise DLRConfigurationException(
                'timezone cannot be empty', config_key='timezone'
            )
        resolve_timezone(self.timezone)

        for name in ('strict', 'detect_dlr_by_opts', 'reject_malformed_receipts'):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise DLRConfigurationException(
                    f'{name} must be a boolean, got {value!r}',
                    config_key=name,
                    config_value=str(value),
                )

        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if self.log_level.upper() not in valid_levels:
            raise DLRConfigurationException(
                f'Invalid log level: {self.log_level}',
                config_key='log_level',
                config_value=self.log_level,
            )


def create_receipt_config(**kwargs) -> ReceiptConfig:
    """
    Create a validated receipt configuration.

    Args:
        **kwargs: Configuration parameters

    Returns:
        Validated ReceiptConfig instance

    Raises:
        DLRConfigurationException: If configuration is invalid
    """
    try:
        config = ReceiptConfig(**kwargs)
    except TypeError as e:
        raise DLRConfigurationException(
            f'Unknown configuration option: {e}', original_error=e
        ) from e
    config.validate()
    return config


def load_config_from_env(prefix: str = 'SMPP_DLR_') -> Dict[str, Any]:
    """
    Load configuration from environment variables.

    Args:
        prefix: Environment variable prefix

    Returns:
        Dictionary of configuration values
    """
    config: Dict[str, Any] = {}

    env_mappings = {
        f'{prefix}TIMEZONE': 'timezone',
        f'{prefix}STRICT': ('strict', _parse_bool),
        f'{prefix}DETECT_DLR_BY_OPTS': ('detect_dlr_by_opts', _parse_bool),
        f'{prefix}REJECT_MALFORMED_RECEIPTS': (
            'reject_malformed_receipts',
            _parse_bool,
        ),
        f'{prefix}LOG_LEVEL': 'log_level',
    }

    for env_var, mapping in env_mappings.items():
        value = os.getenv(env_var)
        if value is None:
            continue
        if isinstance(mapping, tuple):
            key, converter = mapping
            config[key] = converter(value)
        else:
            config[mapping] = value

    return config


def load_config_from_file(file_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from JSON file.

    Args:
        file_path: Path to configuration file

    Returns:
        Dictionary of configuration values

    Raises:
        DLRConfigurationException: If file cannot be read or parsed
    """
    path = Path(file_path)
    if not path.exists():
        raise DLRConfigurationException(f'Configuration file not found: {file_path}')

    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise DLRConfigurationException(
            f'Invalid JSON in configuration file: {e}', original_error=e
        ) from e
    except OSError as e:
        raise DLRConfigurationException(
            f'Error reading configuration file: {e}', original_error=e
        ) from e

    if not isinstance(config, dict):
        raise DLRConfigurationException('Configuration file must contain a JSON object')

    return config


def merge_configurations(*configs: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge configuration dictionaries.
    Later configurations override earlier ones.
    """
    result: Dict[str, Any] = {}
    for config in configs:
        if isinstance(config, dict):
            result.update(config)
    return result


def create_receipt_config_from_sources(
    file_path: Optional[Union[str, Path]] = None,
    env_prefix: str = 'SMPP_DLR_',
    **overrides,
) -> ReceiptConfig:
    """
    Create receipt configuration from multiple sources.

    Priority order (highest to lowest):
    1. Keyword overrides
    2. Environment variables
    3. Configuration file
    4. Defaults

    Args:
        file_path: Optional configuration file path
        env_prefix: Environment variable prefix
        **overrides: Direct configuration overrides

    Returns:
        Validated ReceiptConfig instance
    """
    configs = []

    if file_path:
        configs.append(load_config_from_file(file_path))

    configs.append(load_config_from_env(env_prefix))

    if overrides:
        configs.append(overrides)

    return create_receipt_config(**merge_configurations(*configs))


__all__ = [
    'ReceiptConfig',
    'create_receipt_config',
    'load_config_from_env',
    'load_config_from_file',
    'merge_configurations',
    'create_receipt_config_from_sources',
]
