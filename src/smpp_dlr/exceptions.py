"""
Delivery Receipt Exception Classes

This module defines all exception classes raised by the delivery receipt codec,
its configuration layer and the receipt handler.
"""

from enum import IntEnum
from typing import Any, Dict, Optional


class DLRErrorCode(IntEnum):
    """Error codes for categorizing delivery receipt failures."""

    UNKNOWN = 0
    CONVERSION_FAILED = 2000
    INVALID_ERROR_CODE_LENGTH = 2001
    UNSUPPORTED_FIELD = 2002
    MISSING_FIELD = 2003
    CONFIGURATION_ERROR = 2010


class DLRException(Exception):
    """Base exception for all delivery receipt errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[DLRErrorCode] = None,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
        **kwargs,
    ):
        super().__init__(message)
        self.error_code = error_code
        self.context = context or {}
        self.original_error = original_error
        self.details = kwargs

    def __str__(self) -> str:
        """Enhanced string representation with context."""
        parts = [super().__str__()]

        if self.error_code is not None:
            parts.append(f'Error Code: {self.error_code.name} ({self.error_code.value})')

        if self.context:
            context_str = ', '.join(f'{k}={v}' for k, v in self.context.items())
            parts.append(f'Context: {context_str}')

        return ' | '.join(parts)


class DeliveryReceiptException(DLRException):
    """Base exception for delivery receipt text that cannot be parsed."""


class FieldConversionError(DeliveryReceiptException):
    """A located field's value could not be converted to its target type."""

    def __init__(
        self,
        label: str,
        value: str,
        target: str,
        original_error: Optional[Exception] = None,
        **kwargs,
    ):
        super().__init__(
            f'Unable to convert [{label}] field with value [{value}] into {target}',
            error_code=DLRErrorCode.CONVERSION_FAILED,
            context={'field': label, 'value': value},
            original_error=original_error,
            **kwargs,
        )
        self.label = label
        self.value = value
        self.target = target


class InvalidErrorCodeLength(DeliveryReceiptException):
    """The err field is longer than the wire format allows."""

    def __init__(self, value: str, max_length: int = 3, **kwargs):
        super().__init__(
            f'The [err] field was not of a valid length of <= {max_length}',
            error_code=DLRErrorCode.INVALID_ERROR_CODE_LENGTH,
            context={'value': value, 'max_length': max_length},
            **kwargs,
        )
        self.value = value
        self.max_length = max_length


class UnsupportedFieldError(DeliveryReceiptException):
    """A located label has no converter."""

    def __init__(self, label: str, **kwargs):
        super().__init__(
            f'Unsupported field [{label}] found',
            error_code=DLRErrorCode.UNSUPPORTED_FIELD,
            context={'field': label},
            **kwargs,
        )
        self.label = label


class MissingFieldError(DeliveryReceiptException):
    """A required field was absent or empty in strict mode."""

    def __init__(self, field: str, **kwargs):
        super().__init__(
            f'Unable to find [{field}] field or empty value in delivery receipt message',
            error_code=DLRErrorCode.MISSING_FIELD,
            context={'field': field},
            **kwargs,
        )
        self.field = field


class DLRConfigurationException(DLRException):
    """Exception raised for configuration-related errors."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[str] = None,
        original_error: Optional[Exception] = None,
        **kwargs,
    ):
        context = {}
        if config_key:
            context['config_key'] = config_key
        if config_value:
            context['config_value'] = config_value

        super().__init__(
            message,
            error_code=DLRErrorCode.CONFIGURATION_ERROR,
            context=context,
            original_error=original_error,
            **kwargs,
        )
        self.config_key = config_key
        self.config_value = config_value
