#!/usr/bin/env python3
"""
Delivery Receipt Example

Parses a few delivery receipts the way an ESME would on receiving deliver_sm PDUs,
then renders a receipt back into canonical text.
"""

import logging

from smpp_dlr import (
    DeliveryReceipt,
    ReceiptHandler,
    create_receipt_config_from_sources,
    serialize_receipt,
)
from smpp_dlr.constants import EsmClass
from smpp_dlr.utils import setup_logging

logger = logging.getLogger(__name__)

SAMPLE_RECEIPTS = [
    'id:1234567890 sub:001 dlvrd:001 submit date:2101011200 '
    'done date:2101011205 stat:DELIVRD err:000 text:Hello World',
    'STAT:UNDELIV ERR:034 ID:a1b2c3 SUB:001 DLVRD:000 '
    'SUBMIT DATE:2101011200 DONE DATE:2101011300',
    'id:77 sub:001 dlvrd:001 submit date:2101011200 stat:DELIVRD err:1234',
]


def on_receipt(source_addr: str, receipt: DeliveryReceipt) -> None:
    """Print each parsed receipt"""
    print(f'[{source_addr}] {receipt}')


def main() -> None:
    config = create_receipt_config_from_sources()
    setup_logging(config.log_level)

    handler = ReceiptHandler(config, on_receipt=on_receipt)

    for text in SAMPLE_RECEIPTS:
        outcome = handler.handle_deliver_sm(
            text, source_addr='5678', esm_class=EsmClass.SMSC_DELIVERY_RECEIPT
        )
        if not outcome.ok:
            logger.info(
                f'Acknowledging malformed receipt with status '
                f'0x{outcome.command_status:08X}'
            )
        elif outcome.receipt is not None:
            print(f'Canonical: {serialize_receipt(outcome.receipt)}')


if __name__ == '__main__':
    main()
