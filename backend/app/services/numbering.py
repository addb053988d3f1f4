"""Quotation number policy: ``<PREFIX>-<YEAR>-<NNNN>``.

The sequence runs for the lifetime of the database and is not reset when the
year rolls over, so ``CRY-2025-0042`` can be followed by ``CRY-2026-0043``.
This module only computes the next number; uniqueness under concurrent
writers is enforced by the store (unique constraint plus retry).
"""

import re
from typing import Optional

SEQUENCE_WIDTH = 4

# PREFIX-YYYY-SEQ: the trailing group is the sequence
_STANDARD_NUMBER = re.compile(r"^.*-\d{4}-(\d+)$")
_NON_DIGITS = re.compile(r"\D")


class MalformedSequenceState(RuntimeError):
    """The last issued number holds no digits to continue the sequence from."""


def extract_sequence(quotation_number: str) -> int:
    """Return the numeric sequence carried by an issued quotation number.

    Numbers in the standard format yield their trailing group. Any other
    format falls back to every digit in the string, in order.
    """
    match = _STANDARD_NUMBER.match(quotation_number.strip())
    digits = match.group(1) if match else _NON_DIGITS.sub("", quotation_number)
    if not digits:
        raise MalformedSequenceState(f"Quotation number {quotation_number!r} contains no sequence digits")
    return int(digits)


def format_quotation_number(prefix: str, year: int, sequence: int) -> str:
    return f"{prefix}-{year}-{sequence:0{SEQUENCE_WIDTH}d}"


def next_quotation_number(last_issued_number: Optional[str], prefix: str, year: int) -> str:
    if not prefix or not prefix.strip():
        raise ValueError("Quotation prefix must not be empty")
    if last_issued_number is None:
        sequence = 1
    else:
        sequence = extract_sequence(last_issued_number) + 1
    return format_quotation_number(prefix.strip(), year, sequence)
