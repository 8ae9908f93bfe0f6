"""Unit tests for the DeliveryReceipt model."""

import pytest

from smpp_dlr.constants import MessageState
from smpp_dlr.receipt.model import (
    DeliveryReceipt,
    message_id_from_hex,
    message_id_to_hex,
)


class TestDeliveryReceipt:
    """Test DeliveryReceipt."""

    def test_defaults_are_absent(self):
        """Test a new receipt has every field unset."""
        receipt = DeliveryReceipt()

        assert receipt.message_id is None
        assert receipt.submit_count is None
        assert receipt.final_state is None
        assert receipt.error_code is None
        assert receipt.raw_error_code is None

    def test_constructor_derives_raw_error_code(self):
        """Test a numeric error code passed to the constructor fills the raw form."""
        assert DeliveryReceipt(error_code=5).raw_error_code == '005'
        assert DeliveryReceipt(error_code=5, raw_error_code='X').raw_error_code == 'X'

    def test_set_error_code_regenerates_raw(self):
        """Test set_error_code zero pads the raw form."""
        receipt = DeliveryReceipt()
        receipt.set_error_code(7)

        assert receipt.error_code == 7
        assert receipt.raw_error_code == '007'

    def test_set_raw_error_code_parses_number(self):
        """Test numeric raw codes update the integer code."""
        receipt = DeliveryReceipt()
        receipt.set_raw_error_code('042')

        assert receipt.raw_error_code == '042'
        assert receipt.error_code == 42

    def test_set_raw_error_code_keeps_previous_on_failure(self):
        """Test a non-numeric raw code leaves the integer code alone."""
        receipt = DeliveryReceipt()
        receipt.set_error_code(5)
        receipt.set_raw_error_code('ABC')

        assert receipt.raw_error_code == 'ABC'
        assert receipt.error_code == 5

    def test_set_message_id_from_int(self):
        """Test numeric ids are zero padded to 10 digits."""
        receipt = DeliveryReceipt()
        receipt.set_message_id_from_int(42)

        assert receipt.message_id == '0000000042'
        assert receipt.message_id_as_int() == 42

    def test_message_id_as_int_not_numeric(self):
        """Test non-numeric ids raise ValueError."""
        with pytest.raises(ValueError, match='not a decimal number'):
            DeliveryReceipt(message_id='abc').message_id_as_int()

    def test_state_text(self):
        """Test state_text gives the long state name."""
        assert DeliveryReceipt(final_state=MessageState.UNDELIVERABLE).state_text == (
            'UNDELIVERABLE'
        )
        assert DeliveryReceipt().state_text == 'BADSTAT'

    def test_str(self):
        """Test the readable representation."""
        receipt = DeliveryReceipt(
            message_id='1', submit_count=1, final_state=MessageState.DELIVERED, text='hi'
        )
        text = str(receipt)

        assert text.startswith('(id=1 sub=1 ')
        assert 'state=DELIVERED[2]' in text
        assert text.endswith('text=[hi])')

    def test_to_short_message(self, sample_receipt, canonical_text):
        """Test to_short_message renders canonical text."""
        assert sample_receipt.to_short_message() == canonical_text


class TestMessageIdHex:
    """Test hexadecimal message id helpers."""

    def test_to_hex(self):
        """Test numeric ids format as lower-case hex."""
        assert message_id_to_hex(255) == 'ff'

    def test_from_hex(self):
        """Test hex ids parse back to numbers."""
        assert message_id_from_hex('FF') == 255

    def test_from_hex_invalid(self):
        """Test invalid hex raises ValueError."""
        with pytest.raises(ValueError):
            message_id_from_hex('xyz')

    @pytest.mark.parametrize('value', ['0x1f', '1_f', ' ff', 'ff\n', ''])
    def test_from_hex_rejects_python_syntax(self, value):
        """Test prefixes, underscores and whitespace are not hex digits."""
        with pytest.raises(ValueError, match='not hexadecimal'):
            message_id_from_hex(value)
