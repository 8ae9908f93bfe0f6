"""
Delivery Receipt Field Value Converters

This module converts the stripped value of each located field into its typed
form, raising a field-specific DeliveryReceiptException when it cannot.
"""

from datetime import datetime, tzinfo

from ..constants import MAX_ERROR_CODE_LENGTH, MessageState
from ..exceptions import FieldConversionError, InvalidErrorCodeLength
from ..utils import parse_decimal
from .fields import ReceiptField

# Date layouts, selected by value length; two digit years are read as 20yy
DATE_FORMAT = '%Y%m%d%H%M'  # yyMMddHHmm
DATE_FORMAT_WITH_SECONDS = '%Y%m%d%H%M%S'  # yyMMddHHmmss
DATE_FORMAT_FULL_YEAR_WITH_SECONDS = '%Y%m%d%H%M%S'  # yyyyMMddHHmmss

DATE_LENGTH = 10
DATE_LENGTH_WITH_SECONDS = 12
DATE_LENGTH_FULL_YEAR_WITH_SECONDS = 14


def parse_receipt_date(value: str, tz: tzinfo) -> datetime:
    """
    Parse a receipt date, picking the layout from the value length.

    14 characters are read as yyyyMMddHHmmss, 12 as yyMMddHHmmss and anything
    else as yyMMddHHmm.

    Args:
        value: Date digits as found in the receipt
        tz: Time zone the date is expressed in

    Returns:
        Aware datetime in tz

    Raises:
        ValueError: If the value does not match the selected layout
    """
    if len(value) == DATE_LENGTH_FULL_YEAR_WITH_SECONDS:
        layout, text = DATE_FORMAT_FULL_YEAR_WITH_SECONDS, value
    elif len(value) == DATE_LENGTH_WITH_SECONDS:
        layout, text = DATE_FORMAT_WITH_SECONDS, f'20{value}'
    else:
        layout, text = DATE_FORMAT, f'20{value}'
        # strptime accepts single digit fields, the wire layout is fixed width
        if len(value) != DATE_LENGTH:
            raise ValueError(f'{value!r} is not a {DATE_LENGTH} digit date')

    if not (value.isascii() and value.isdigit()):
        raise ValueError(f'{value!r} is not a numeric date')

    return datetime.strptime(text, layout).replace(tzinfo=tz)


def convert_count(field: ReceiptField, value: str) -> int:
    """Convert the sub: or dlvrd: value into an integer."""
    count = parse_decimal(value)
    if count is None:
        raise FieldConversionError(field.name_text, value, 'an integer')
    return count


def convert_date(field: ReceiptField, value: str, tz: tzinfo) -> datetime:
    """Convert the submit date: or done date: value into a datetime."""
    try:
        return parse_receipt_date(value, tz)
    except ValueError as e:
        raise FieldConversionError(
            field.name_text, value, 'a datetime object', original_error=e
        ) from e


def convert_state(value: str) -> MessageState:
    """Convert the stat: value into a MessageState."""
    state = MessageState.from_text(value)
    if state == MessageState.INVALID:
        raise FieldConversionError(ReceiptField.STAT.name_text, value, 'a valid state')
    return state


def convert_error_code(value: str) -> str:
    """Validate the length of the err: value and return it unchanged."""
    if len(value) > MAX_ERROR_CODE_LENGTH:
        raise InvalidErrorCodeLength(value, MAX_ERROR_CODE_LENGTH)
    return value


__all__ = [
    'parse_receipt_date',
    'convert_count',
    'convert_date',
    'convert_state',
    'convert_error_code',
]
