"""
Shared test fixtures and configuration for delivery receipt unit tests.
"""

from datetime import datetime, timezone

import pytest

from smpp_dlr.constants import MessageState
from smpp_dlr.receipt.model import DeliveryReceipt

CANONICAL_TEXT = (
    'id:1234567890 sub:001 dlvrd:001 submit date:2101011200 '
    'done date:2101011205 stat:DELIVRD err:000 text:Hello World'
)

FIELD_FRAGMENTS = [
    'id:1234567890',
    'sub:001',
    'dlvrd:001',
    'submit date:2101011200',
    'done date:2101011205',
    'stat:DELIVRD',
    'err:000',
    'text:Hello World',
]


@pytest.fixture
def canonical_text():
    """Canonical receipt text with every field present."""
    return CANONICAL_TEXT


@pytest.fixture
def field_fragments():
    """Receipt text split into one fragment per field."""
    return list(FIELD_FRAGMENTS)


@pytest.fixture
def sample_receipt():
    """Receipt matching canonical_text."""
    receipt = DeliveryReceipt(
        message_id='1234567890',
        submit_count=1,
        delivered_count=1,
        submit_date=datetime(2021, 1, 1, 12, 0, tzinfo=timezone.utc),
        done_date=datetime(2021, 1, 1, 12, 5, tzinfo=timezone.utc),
        final_state=MessageState.DELIVERED,
        text='Hello World',
    )
    receipt.set_error_code(0)
    return receipt


@pytest.fixture
def text_without():
    """Build canonical text with the fragment for one label left out."""

    def build(label):
        return ' '.join(f for f in FIELD_FRAGMENTS if not f.startswith(label))

    return build
