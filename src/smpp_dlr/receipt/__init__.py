"""
Delivery receipt text codec.
"""

from .codec import parse_receipt, serialize_receipt
from .converters import parse_receipt_date
from .fields import ReceiptField, locate_fields, slice_fields
from .model import DeliveryReceipt, message_id_from_hex, message_id_to_hex

__all__ = [
    'DeliveryReceipt',
    'ReceiptField',
    'locate_fields',
    'slice_fields',
    'parse_receipt_date',
    'parse_receipt',
    'serialize_receipt',
    'message_id_to_hex',
    'message_id_from_hex',
]
