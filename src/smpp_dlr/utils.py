"""
Delivery Receipt Utilities Module

This module provides helper functions shared by the codec, configuration and handler,
including logging setup and time zone resolution.
"""

import logging
from datetime import timezone, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .exceptions import DLRConfigurationException

TimeZoneLike = Union[str, tzinfo, None]


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """Set up basic logging configuration."""
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(
        level=level, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def resolve_timezone(tz: TimeZoneLike = None) -> tzinfo:
    """
    Resolve a time zone argument to a tzinfo instance.

    Args:
        tz: A tzinfo, an IANA zone name such as 'Europe/Paris', 'UTC', or None

    Returns:
        tzinfo to attach to receipt dates, UTC when tz is None

    Raises:
        DLRConfigurationException: If the zone name is unknown
    """
    if tz is None:
        return timezone.utc
    if isinstance(tz, tzinfo):
        return tz
    if tz.upper() in ('UTC', 'Z'):
        return timezone.utc

    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise DLRConfigurationException(
            f'Unknown time zone: {tz}',
            config_key='timezone',
            config_value=tz,
            original_error=e,
        ) from e


def parse_decimal(value: Optional[str]) -> Optional[int]:
    """Parse a signed base-10 integer made of ASCII digits, None if not one."""
    if not value:
        return None
    digits = value[1:] if value[0] in '+-' else value
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    return int(value)


__all__ = [
    'TimeZoneLike',
    'setup_logging',
    'resolve_timezone',
    'parse_decimal',
]
