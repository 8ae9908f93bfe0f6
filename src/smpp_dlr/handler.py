"""
Delivery Receipt Handler

This module decides whether an inbound deliver_sm carries a delivery receipt,
parses its already decoded short message, and reports the command status to
acknowledge it with. A malformed receipt is logged and still acknowledged; the
receipt text is best-effort telemetry, not something the peer can resend.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .config import ReceiptConfig
from .constants import ESM_CLASS_MESSAGE_TYPE_MASK, CommandStatus, EsmClass
from .exceptions import DeliveryReceiptException
from .receipt import DeliveryReceipt, parse_receipt
from .utils import resolve_timezone

logger = logging.getLogger(__name__)


def is_delivery_receipt_esm_class(esm_class: int) -> bool:
    """
    Check whether esm_class marks any kind of delivery receipt.

    True for an SMSC delivery receipt, SME delivery or manual acknowledgement,
    conversation abort, or an intermediate delivery notification.
    """
    return bool(
        esm_class & ESM_CLASS_MESSAGE_TYPE_MASK
        or esm_class & EsmClass.INTERMEDIATE_DELIVERY_NOTIFICATION
    )


@dataclass
class ReceiptOutcome:
    """Result of handling one deliver_sm short message"""

    is_receipt: bool = False
    receipt: Optional[DeliveryReceipt] = None
    command_status: int = CommandStatus.ESME_ROK
    error: Optional[DeliveryReceiptException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ReceiptHandler:
    """
    Delivery receipt handler for inbound deliver_sm PDUs.

    Example:
        handler = ReceiptHandler(create_receipt_config(timezone='UTC'))
        outcome = handler.handle_deliver_sm(text, source_addr='1234', esm_class=0x04)
        send_deliver_sm_resp(sequence_number, outcome.command_status)
    """

    def __init__(
        self,
        config: Optional[ReceiptConfig] = None,
        on_receipt: Optional[Callable[[str, DeliveryReceipt], Any]] = None,
    ) -> None:
        self.config = config or ReceiptConfig()
        self.config.validate()
        self.timezone = resolve_timezone(self.config.timezone)
        self.on_receipt = on_receipt

    def is_delivery_receipt(
        self, esm_class: int, optional_params: Optional[Any] = None
    ) -> bool:
        """Check whether a deliver_sm should be treated as a delivery receipt."""
        if self.config.detect_dlr_by_opts:
            return optional_params is not None
        return is_delivery_receipt_esm_class(esm_class)

    def handle_deliver_sm(
        self,
        short_message: str,
        source_addr: str = '',
        esm_class: int = EsmClass.DEFAULT,
        optional_params: Optional[Any] = None,
    ) -> ReceiptOutcome:
        """
        Handle the decoded short message of a deliver_sm.

        Args:
            short_message: Short message text, already decoded
            source_addr: Source address, used for logging
            esm_class: esm_class of the PDU
            optional_params: Optional parameters of the PDU, None if it has none

        Returns:
            ReceiptOutcome holding the parsed receipt or the parse error, and
            the command status for the deliver_sm_resp
        """
        logger.info(
            f'SMS message received: {short_message.strip()}, source address: {source_addr}'
        )

        if not self.is_delivery_receipt(esm_class, optional_params):
            return ReceiptOutcome()

        try:
            receipt = parse_receipt(short_message, self.timezone, self.config.strict)
        except DeliveryReceiptException as e:
            logger.warning(f'Error while handling delivery from {source_addr}: {e}')
            status = (
                CommandStatus.ESME_RUNKNOWNERR
                if self.config.reject_malformed_receipts
                else CommandStatus.ESME_ROK
            )
            return ReceiptOutcome(is_receipt=True, command_status=status, error=e)

        logger.info(
            f'Received delivery from {source_addr} at {receipt.done_date} '
            f'with message-id {receipt.message_id} and status {receipt.state_text}'
        )

        if self.on_receipt:
            try:
                self.on_receipt(source_addr, receipt)
            except Exception as e:
                logger.exception(f'Error in receipt handler: {e}')

        return ReceiptOutcome(is_receipt=True, receipt=receipt)


__all__ = [
    'ReceiptHandler',
    'ReceiptOutcome',
    'is_delivery_receipt_esm_class',
]
