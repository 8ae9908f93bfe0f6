"""
Delivery Receipt Field Catalog

This module defines the labels recognized in delivery receipt text and the two
scanning steps that turn raw text into labelled value spans: locating every label
and slicing the text between consecutive labels.
"""

import logging
import re
from enum import Enum
from typing import List, Tuple

logger = logging.getLogger(__name__)


class ReceiptField(Enum):
    """Recognized delivery receipt labels, in canonical order"""

    ID = 'id:'
    SUB = 'sub:'
    DLVRD = 'dlvrd:'
    SUBMIT_DATE = 'submit date:'
    DONE_DATE = 'done date:'
    STAT = 'stat:'
    ERR = 'err:'
    TEXT = 'text:'

    @property
    def label(self) -> str:
        return self.value

    @property
    def name_text(self) -> str:
        """Label without its trailing colon, as used in error messages."""
        return self.value[:-1]


_LABEL_PATTERNS = {
    field: re.compile(re.escape(field.label), re.IGNORECASE) for field in ReceiptField
}

LocatedField = Tuple[int, ReceiptField]


def locate_fields(text: str) -> List[LocatedField]:
    """
    Find the first occurrence of every known label in receipt text.

    Args:
        text: Receipt text, in its original case

    Returns:
        (start_offset, field) pairs ordered by offset; labels that do not
        occur are left out
    """
    located = []
    for field, pattern in _LABEL_PATTERNS.items():
        match = pattern.search(text)
        if match is not None:
            located.append((match.start(), field))

    located.sort(key=lambda item: item[0])
    logger.debug(f'Located receipt fields: {[f.name_text for _, f in located]}')
    return located


def slice_fields(
    text: str, located: List[LocatedField]
) -> List[Tuple[ReceiptField, str]]:
    """
    Cut the value owned by each located label out of the text.

    A value runs from the end of its label up to the start of the next
    located label, or to the end of the text for the last one.

    Args:
        text: Receipt text, in its original case
        located: Output of locate_fields for the same text

    Returns:
        (field, stripped_value) pairs in the same order; the value is ''
        when nothing but whitespace follows the label
    """
    values = []
    for index, (start, field) in enumerate(located):
        value_start = start + len(field.label)
        if index + 1 < len(located):
            value_end = located[index + 1][0]
        else:
            value_end = len(text)
        values.append((field, text[value_start:value_end].strip()))
    return values


__all__ = [
    'ReceiptField',
    'LocatedField',
    'locate_fields',
    'slice_fields',
]
