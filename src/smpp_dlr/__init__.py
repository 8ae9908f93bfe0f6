"""
SMPP DLR - Delivery Receipt Text Codec

Parses the free-form delivery receipt text carried in the short message of an SMPP
deliver_sm into a structured record, and renders a record back into the canonical
receipt text.

This package provides:
- Order independent, case insensitive receipt parsing with strict and lenient modes
- Canonical receipt serialization
- Typed errors naming the offending field
- A handler that detects receipts in deliver_sm PDUs and decides how to acknowledge them

Quick Start:
    from smpp_dlr import parse_receipt, serialize_receipt

    receipt = parse_receipt(
        'id:1234567890 sub:001 dlvrd:001 submit date:2101011200 '
        'done date:2101011205 stat:DELIVRD err:000 text:Hello World',
        tz='UTC',
    )
    print(receipt.final_state.name, serialize_receipt(receipt))
"""

# Configuration management
from .config import (
    ReceiptConfig,
    create_receipt_config,
    create_receipt_config_from_sources,
    load_config_from_env,
    load_config_from_file,
)

# Constants and enums
from .constants import CommandStatus, EsmClass, MessageState, get_state_text

# Exception classes
from .exceptions import (
    DeliveryReceiptException,
    DLRConfigurationException,
    DLRErrorCode,
    DLRException,
    FieldConversionError,
    InvalidErrorCodeLength,
    MissingFieldError,
    UnsupportedFieldError,
)

# Receipt handling
from .handler import ReceiptHandler, ReceiptOutcome, is_delivery_receipt_esm_class

# Codec
from .receipt import (
    DeliveryReceipt,
    ReceiptField,
    message_id_from_hex,
    message_id_to_hex,
    parse_receipt,
    serialize_receipt,
)

__all__ = [
    # Codec
    'DeliveryReceipt',
    'ReceiptField',
    'parse_receipt',
    'serialize_receipt',
    'message_id_to_hex',
    'message_id_from_hex',
    # Handler
    'ReceiptHandler',
    'ReceiptOutcome',
    'is_delivery_receipt_esm_class',
    # Constants
    'MessageState',
    'EsmClass',
    'CommandStatus',
    'get_state_text',
    # Configuration
    'ReceiptConfig',
    'create_receipt_config',
    'create_receipt_config_from_sources',
    'load_config_from_env',
    'load_config_from_file',
    # Exceptions
    'DLRException',
    'DLRErrorCode',
    'DeliveryReceiptException',
    'FieldConversionError',
    'InvalidErrorCodeLength',
    'UnsupportedFieldError',
    'MissingFieldError',
    'DLRConfigurationException',
]

# Module-level configuration
import logging  # noqa: E402

# Set up default logging to reduce noise unless explicitly configured
logging.getLogger(__name__).addHandler(logging.NullHandler())
