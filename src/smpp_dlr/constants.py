"""
Delivery Receipt Constants and Enumerations

This module contains the message states, esm_class bits, command status values and
field widths used by the delivery receipt codec and handler.
"""

from enum import IntEnum
from typing import Dict, Optional


class MessageState(IntEnum):
    """Message State values for delivery receipts"""

    INVALID = -1  # Not a valid state, never serialized
    ENROUTE = 0x01  # The message is in enroute state
    DELIVERED = 0x02  # Message is delivered to destination
    EXPIRED = 0x03  # Message expired before delivery
    DELETED = 0x04  # Message has been deleted
    UNDELIVERABLE = 0x05  # Message is undeliverable
    ACCEPTED = 0x06  # Message is in accepted state
    UNKNOWN = 0x07  # Message is invalid state
    REJECTED = 0x08  # Message is in a rejected state

    @property
    def short_code(self) -> str:
        """Seven character code used in the stat: field."""
        return STATE_SHORT_CODES.get(self, BAD_STATE_TEXT)

    @classmethod
    def from_text(cls, state_text: Optional[str]) -> 'MessageState':
        """Map a stat: value to a state, INVALID when unrecognized."""
        if state_text is None:
            return cls.INVALID
        return _STATES_BY_SHORT_CODE.get(state_text.upper(), cls.INVALID)


class EsmClass(IntEnum):
    """ESM Class values - Message Type bits"""

    DEFAULT = 0x00  # Default message type
    SMSC_DELIVERY_RECEIPT = 0x04  # SMSC Delivery Receipt
    ESME_DELIVERY_ACK = 0x08  # SME Delivery Acknowledgement
    MANUAL_USER_ACK = 0x10  # SME Manual/User Acknowledgement
    CONVERSATION_ABORT = 0x18  # Conversation Abort (Korean CDMA)
    INTERMEDIATE_DELIVERY_NOTIFICATION = 0x20  # Intermediate Delivery Notification


class CommandStatus(IntEnum):
    """Command Status values used when acknowledging a deliver_sm"""

    ESME_ROK = 0x00000000  # No Error
    ESME_RUNKNOWNERR = 0x000000FF  # Unknown Error


# Message type bits of esm_class
ESM_CLASS_MESSAGE_TYPE_MASK = 0x1C

# Field limits
MAX_ERROR_CODE_LENGTH = 3
MAX_TEXT_LENGTH = 20
COUNT_WIDTH = 3

BAD_STATE_TEXT = 'BADSTAT'
EMPTY_DATE_TEXT = '0000000000'

STATE_SHORT_CODES: Dict[MessageState, str] = {
    MessageState.DELIVERED: 'DELIVRD',
    MessageState.EXPIRED: 'EXPIRED',
    MessageState.DELETED: 'DELETED',
    MessageState.UNDELIVERABLE: 'UNDELIV',
    MessageState.ACCEPTED: 'ACCEPTD',
    MessageState.UNKNOWN: 'UNKNOWN',
    MessageState.REJECTED: 'REJECTD',
    MessageState.ENROUTE: 'ENROUTE',
}

_STATES_BY_SHORT_CODE: Dict[str, MessageState] = {
    code: state for state, code in STATE_SHORT_CODES.items()
}


def get_state_text(state: Optional[MessageState]) -> str:
    """
    Get the long, human readable name of a message state.

    Args:
        state: Message state, or None when unset

    Returns:
        State name such as DELIVERED, or BADSTAT for unset/invalid states
    """
    if state is None or state == MessageState.INVALID:
        return BAD_STATE_TEXT
    try:
        return MessageState(state).name
    except ValueError:
        return BAD_STATE_TEXT
