"""Unit tests for receipt field value converters."""

from datetime import datetime, timedelta, timezone

import pytest

from smpp_dlr.constants import MessageState
from smpp_dlr.exceptions import FieldConversionError, InvalidErrorCodeLength
from smpp_dlr.receipt.converters import (
    convert_count,
    convert_date,
    convert_error_code,
    convert_state,
    parse_receipt_date,
)
from smpp_dlr.receipt.fields import ReceiptField

UTC = timezone.utc


class TestParseReceiptDate:
    """Test parse_receipt_date layout dispatch."""

    def test_ten_digits_without_seconds(self):
        """Test yyMMddHHmm."""
        result = parse_receipt_date('2101011205', UTC)
        assert result == datetime(2021, 1, 1, 12, 5, tzinfo=UTC)

    def test_twelve_digits_with_seconds(self):
        """Test yyMMddHHmmss."""
        result = parse_receipt_date('210101120530', UTC)
        assert result == datetime(2021, 1, 1, 12, 5, 30, tzinfo=UTC)

    def test_fourteen_digits_full_year(self):
        """Test yyyyMMddHHmmss."""
        result = parse_receipt_date('20210101120530', UTC)
        assert result == datetime(2021, 1, 1, 12, 5, 30, tzinfo=UTC)

    def test_two_digit_year_in_current_century(self):
        """Test two digit years are read as 20yy."""
        assert parse_receipt_date('9912311159', UTC).year == 2099

    def test_zone_applied(self):
        """Test the caller's zone is attached to the parsed date."""
        zone = timezone(timedelta(hours=2))
        result = parse_receipt_date('2101011200', zone)

        assert result.tzinfo is zone
        assert result == datetime(2021, 1, 1, 10, 0, tzinfo=UTC)

    @pytest.mark.parametrize(
        'value', ['210101120', '21010112000', '2101011200000', 'abcdefghij', '2113011200']
    )
    def test_invalid_values(self, value):
        """Test values not matching their selected layout are rejected."""
        with pytest.raises(ValueError):
            parse_receipt_date(value, UTC)


class TestConvertCount:
    """Test convert_count."""

    def test_zero_padded(self):
        """Test zero padded counts parse as integers."""
        assert convert_count(ReceiptField.SUB, '007') == 7

    def test_invalid_count(self):
        """Test non-numeric counts name the field and value."""
        with pytest.raises(FieldConversionError, match=r'\[dlvrd\].*\[x1\]') as exc_info:
            convert_count(ReceiptField.DLVRD, 'x1')

        assert exc_info.value.label == 'dlvrd'
        assert exc_info.value.value == 'x1'

    def test_underscore_rejected(self):
        """Test Python-only integer syntax is rejected."""
        with pytest.raises(FieldConversionError):
            convert_count(ReceiptField.SUB, '1_0')


class TestConvertDate:
    """Test convert_date."""

    def test_valid(self):
        """Test valid dates convert."""
        result = convert_date(ReceiptField.DONE_DATE, '2101011205', UTC)
        assert result == datetime(2021, 1, 1, 12, 5, tzinfo=UTC)

    def test_invalid_names_field(self):
        """Test invalid dates raise FieldConversionError for their field."""
        with pytest.raises(FieldConversionError, match='submit date') as exc_info:
            convert_date(ReceiptField.SUBMIT_DATE, '21-01-01', UTC)

        assert exc_info.value.label == 'submit date'
        assert isinstance(exc_info.value.original_error, ValueError)


class TestConvertState:
    """Test convert_state."""

    @pytest.mark.parametrize(
        'text,state',
        [
            ('DELIVRD', MessageState.DELIVERED),
            ('EXPIRED', MessageState.EXPIRED),
            ('DELETED', MessageState.DELETED),
            ('UNDELIV', MessageState.UNDELIVERABLE),
            ('ACCEPTD', MessageState.ACCEPTED),
            ('UNKNOWN', MessageState.UNKNOWN),
            ('REJECTD', MessageState.REJECTED),
            ('ENROUTE', MessageState.ENROUTE),
            ('delivrd', MessageState.DELIVERED),
        ],
    )
    def test_known_states(self, text, state):
        """Test every short code maps to its state."""
        assert convert_state(text) == state

    @pytest.mark.parametrize('text', ['DELIVERED', 'BADSTAT', 'OK'])
    def test_unknown_state(self, text):
        """Test unrecognized state text is rejected."""
        with pytest.raises(FieldConversionError, match='valid state'):
            convert_state(text)


class TestConvertErrorCode:
    """Test convert_error_code."""

    @pytest.mark.parametrize('value', ['', '0', '00', '000', 'ABC'])
    def test_up_to_three_chars(self, value):
        """Test values of length 0 to 3 are accepted unchanged."""
        assert convert_error_code(value) == value

    def test_four_chars_rejected(self):
        """Test values longer than 3 characters are rejected."""
        with pytest.raises(InvalidErrorCodeLength, match='<= 3') as exc_info:
            convert_error_code('ABCD')

        assert exc_info.value.value == 'ABCD'
