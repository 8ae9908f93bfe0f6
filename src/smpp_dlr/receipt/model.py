"""
Delivery Receipt Data Model

This module defines the DeliveryReceipt record carried in the short message of a
deliver_sm or data_sm PDU, plus the message id helpers.
"""

import string
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..constants import MessageState, get_state_text
from ..utils import parse_decimal


@dataclass
class DeliveryReceipt:
    """
    Structured delivery receipt.

    Every field defaults to None, meaning the value is absent. The two error code
    representations are kept in sync by set_error_code and set_raw_error_code, but
    may diverge when the attributes are assigned directly.
    """

    message_id: Optional[str] = None
    submit_count: Optional[int] = None
    delivered_count: Optional[int] = None
    submit_date: Optional[datetime] = None
    done_date: Optional[datetime] = None
    final_state: Optional[MessageState] = None
    error_code: Optional[int] = None
    raw_error_code: Optional[str] = None
    text: Optional[str] = None

    def __post_init__(self) -> None:
        if self.raw_error_code is None and self.error_code is not None:
            self.raw_error_code = f'{self.error_code:03d}'

    def set_error_code(self, error_code: int) -> None:
        """Set the numeric error code and regenerate its 3 digit raw form."""
        self.error_code = error_code
        self.raw_error_code = f'{error_code:03d}'

    def set_raw_error_code(self, raw_error_code: Optional[str]) -> None:
        """
        Set the raw error code.

        The numeric error code is updated when the raw value is a base-10
        integer and left unchanged otherwise.
        """
        self.raw_error_code = raw_error_code
        parsed = parse_decimal(raw_error_code)
        if parsed is not None:
            self.error_code = parsed

    def set_message_id_from_int(self, message_id: int) -> None:
        """Set the message id from a number, zero padded to 10 digits."""
        self.message_id = f'{message_id:010d}'

    def message_id_as_int(self) -> int:
        """
        Interpret the message id as a decimal number.

        Raises:
            ValueError: If the message id is absent or not numeric
        """
        parsed = parse_decimal(self.message_id)
        if parsed is None:
            raise ValueError(f'Message id is not a decimal number: {self.message_id!r}')
        return parsed

    @property
    def state_text(self) -> str:
        return get_state_text(self.final_state)

    def to_short_message(self) -> str:
        """Render the canonical receipt text."""
        from .codec import serialize_receipt

        return serialize_receipt(self)

    def __str__(self) -> str:
        state_value = int(self.final_state) if self.final_state is not None else None
        return (
            f'(id={self.message_id} sub={self.submit_count} '
            f'dlvrd={self.delivered_count} submitDate={self.submit_date} '
            f'doneDate={self.done_date} state={self.state_text}[{state_value}] '
            f'err={self.raw_error_code} text=[{self.text}])'
        )


def message_id_to_hex(value: int) -> str:
    """Format a numeric message id as lower-case hex without a prefix."""
    return f'{value:x}'


def message_id_from_hex(value: str) -> int:
    """
    Parse a hexadecimal message id.

    Raises:
        ValueError: If value is not hexadecimal
    """
    digits = value[1:] if value[:1] in ('+', '-') else value
    if not digits or any(c not in string.hexdigits for c in digits):
        raise ValueError(f'Message id is not hexadecimal: {value!r}')
    return int(value, 16)


__all__ = [
    'DeliveryReceipt',
    'message_id_to_hex',
    'message_id_from_hex',
]
