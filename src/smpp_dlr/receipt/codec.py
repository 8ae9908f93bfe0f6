"""
Delivery Receipt Text Codec

This module parses the free-form delivery receipt text found in the short message
of a deliver_sm into a DeliveryReceipt, and renders a DeliveryReceipt back into the
canonical text:

    id:<id> sub:<NNN> dlvrd:<NNN> submit date:<yyMMddHHmm> done date:<yyMMddHHmm>
    stat:<STATE> err:<EEE> text:<up to 20 chars>

Parsing accepts the fields in any order, any subset of them, labels in any case
and irregular whitespace between fields.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Callable, Dict, Optional

from ..constants import (
    BAD_STATE_TEXT,
    COUNT_WIDTH,
    EMPTY_DATE_TEXT,
    MAX_TEXT_LENGTH,
    STATE_SHORT_CODES,
    MessageState,
)
from ..exceptions import MissingFieldError, UnsupportedFieldError
from ..utils import TimeZoneLike, parse_decimal, resolve_timezone
from .converters import convert_count, convert_date, convert_error_code, convert_state
from .fields import ReceiptField, locate_fields, slice_fields
from .model import DeliveryReceipt

logger = logging.getLogger(__name__)


@dataclass
class _ReceiptBuilder:
    """Optional field values accumulated while scanning receipt text"""

    message_id: Optional[str] = None
    submit_count: Optional[int] = None
    delivered_count: Optional[int] = None
    submit_date: Optional[datetime] = None
    done_date: Optional[datetime] = None
    final_state: Optional[MessageState] = None
    error_code: Optional[int] = None
    raw_error_code: Optional[str] = None
    text: Optional[str] = None

    def apply(self, field: ReceiptField, value: str, tz: tzinfo) -> None:
        """Convert a non-empty field value and store it."""
        handler = _FIELD_HANDLERS.get(field)
        if handler is None:
            raise UnsupportedFieldError(field.name_text)
        handler(self, value, tz)

    def set_id(self, value: str, tz: tzinfo) -> None:
        self.message_id = value

    def set_sub(self, value: str, tz: tzinfo) -> None:
        self.submit_count = convert_count(ReceiptField.SUB, value)

    def set_dlvrd(self, value: str, tz: tzinfo) -> None:
        self.delivered_count = convert_count(ReceiptField.DLVRD, value)

    def set_submit_date(self, value: str, tz: tzinfo) -> None:
        self.submit_date = convert_date(ReceiptField.SUBMIT_DATE, value, tz)

    def set_done_date(self, value: str, tz: tzinfo) -> None:
        self.done_date = convert_date(ReceiptField.DONE_DATE, value, tz)

    def set_stat(self, value: str, tz: tzinfo) -> None:
        self.final_state = convert_state(value)

    def set_err(self, value: str, tz: tzinfo) -> None:
        self.raw_error_code = convert_error_code(value)
        parsed = parse_decimal(value)
        if parsed is not None:
            self.error_code = parsed

    def set_text(self, value: str, tz: tzinfo) -> None:
        self.text = value

    def check_complete(self) -> None:
        """
        Verify that every required field was found.

        Raises:
            MissingFieldError: Naming the first missing field, checked in the
                order id, sub, dlvrd, submit date, done date, stat, err
        """
        if not self.message_id:
            raise MissingFieldError(ReceiptField.ID.name_text)
        if self.submit_count is None or self.submit_count < 0:
            raise MissingFieldError(ReceiptField.SUB.name_text)
        if self.delivered_count is None or self.delivered_count < 0:
            raise MissingFieldError(ReceiptField.DLVRD.name_text)
        if self.submit_date is None:
            raise MissingFieldError(ReceiptField.SUBMIT_DATE.name_text)
        if self.done_date is None:
            raise MissingFieldError(ReceiptField.DONE_DATE.name_text)
        if self.final_state is None or self.final_state == MessageState.INVALID:
            raise MissingFieldError(ReceiptField.STAT.name_text)
        if not self.raw_error_code and self.error_code is None:
            raise MissingFieldError(ReceiptField.ERR.name_text)

    def build(self) -> DeliveryReceipt:
        return DeliveryReceipt(
            message_id=self.message_id,
            submit_count=self.submit_count,
            delivered_count=self.delivered_count,
            submit_date=self.submit_date,
            done_date=self.done_date,
            final_state=self.final_state,
            error_code=self.error_code,
            raw_error_code=self.raw_error_code,
            text=self.text,
        )


_FIELD_HANDLERS: Dict[ReceiptField, Callable[[_ReceiptBuilder, str, tzinfo], None]] = {
    ReceiptField.ID: _ReceiptBuilder.set_id,
    ReceiptField.SUB: _ReceiptBuilder.set_sub,
    ReceiptField.DLVRD: _ReceiptBuilder.set_dlvrd,
    ReceiptField.SUBMIT_DATE: _ReceiptBuilder.set_submit_date,
    ReceiptField.DONE_DATE: _ReceiptBuilder.set_done_date,
    ReceiptField.STAT: _ReceiptBuilder.set_stat,
    ReceiptField.ERR: _ReceiptBuilder.set_err,
    ReceiptField.TEXT: _ReceiptBuilder.set_text,
}


def parse_receipt(
    short_message: str, tz: TimeZoneLike = None, strict: bool = True
) -> DeliveryReceipt:
    """
    Parse delivery receipt text into a DeliveryReceipt.

    Args:
        short_message: Receipt text, already decoded from the PDU
        tz: Time zone of the submit and done dates (tzinfo or zone name),
            UTC when omitted
        strict: Require every field except text to be present

    Returns:
        Parsed DeliveryReceipt; fields missing from the text are None

    Raises:
        FieldConversionError: If a present field has a malformed value
        InvalidErrorCodeLength: If the err field is longer than 3 characters
        UnsupportedFieldError: If a located label has no converter
        MissingFieldError: If strict and a required field is absent
    """
    zone = resolve_timezone(tz)
    builder = _ReceiptBuilder()

    for field, value in slice_fields(short_message, locate_fields(short_message)):
        if value:
            builder.apply(field, value, zone)

    if strict:
        builder.check_complete()

    receipt = builder.build()
    logger.debug(f'Parsed delivery receipt: {receipt}')
    return receipt


def _format_count(count: Optional[int]) -> str:
    return f'{count or 0:0{COUNT_WIDTH}d}'


def _format_date(value: Optional[datetime]) -> str:
    if value is None:
        return EMPTY_DATE_TEXT
    return value.strftime('%y%m%d%H%M')


def _format_state(state: Optional[MessageState]) -> str:
    return STATE_SHORT_CODES.get(state, BAD_STATE_TEXT)


def serialize_receipt(receipt: DeliveryReceipt) -> str:
    """
    Render a DeliveryReceipt as canonical receipt text.

    Fields are written in the fixed order id, sub, dlvrd, submit date, done
    date, stat, err, text. Absent values degrade to defaults (000 counts,
    0000000000 dates, BADSTAT state, empty err and text) so this never raises.
    Text is cut to its first 20 characters.

    Args:
        receipt: Receipt to render

    Returns:
        Canonical receipt text
    """
    text = receipt.text or ''
    values = {
        ReceiptField.ID: receipt.message_id or '',
        ReceiptField.SUB: _format_count(receipt.submit_count),
        ReceiptField.DLVRD: _format_count(receipt.delivered_count),
        ReceiptField.SUBMIT_DATE: _format_date(receipt.submit_date),
        ReceiptField.DONE_DATE: _format_date(receipt.done_date),
        ReceiptField.STAT: _format_state(receipt.final_state),
        ReceiptField.ERR: receipt.raw_error_code or '',
        ReceiptField.TEXT: text[:MAX_TEXT_LENGTH],
    }
    return ' '.join(f'{field.label}{values[field]}' for field in ReceiptField)


__all__ = [
    'parse_receipt',
    'serialize_receipt',
]
