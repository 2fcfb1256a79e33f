"""Identifier grammar decoder - pure functions, no I/O.

An identifier looks like::

    123456789202501.<32 hex chars>.INV.pdf

The leading 15 digits are the composite number: business number (9), year (4)
and month (2) packed without separators.
"""
import re
from dataclasses import dataclass
from typing import Iterable, Tuple

from ..errors import GrammarMismatchError

COMPOSITE_NUMBER_LENGTH = 15
BUSINESS_NUMBER_LENGTH = 9
YEAR_LENGTH = 4
MONTH_LENGTH = 2
REFERENCE_TASK_ID_LENGTH = 32

_COMPOSITE_PATTERN = re.compile(r"(\d{9})(\d{4})(\d{2})", re.ASCII)


def build_identifier_pattern(extensions: Iterable[str] = ("pdf",)) -> str:
    """Build the anchored identifier pattern for the given extensions."""
    alternatives = "|".join(re.escape(ext) for ext in extensions)
    if not alternatives:
        raise ValueError("At least one extension is required")
    return (
        r"^(?P<CompositeNumber>\d{15})"
        r"\.(?P<ReferenceTaskId>[a-fA-F0-9]{32})"
        r"\.(?P<DocumentType>[A-Z]{3})"
        rf"\.(?P<Extension>{alternatives})$"
    )


IDENTIFIER_PATTERN = build_identifier_pattern()


@dataclass(frozen=True)
class IdentifierCaptures:
    """Named captures of a successfully decoded identifier."""
    composite_number: str
    business_number: str
    year: str
    month: str
    reference_task_id: str
    document_type: str
    extension: str


def split_composite_number(composite: str) -> Tuple[str, str, str]:
    """Split the 15-digit composite into (business_number, year, month)."""
    match = _COMPOSITE_PATTERN.fullmatch(composite)
    if match is None:
        raise ValueError(f"Composite number must be {COMPOSITE_NUMBER_LENGTH} digits: {composite!r}")
    return match.group(1), match.group(2), match.group(3)


def decode_identifier(raw: str, pattern: str = IDENTIFIER_PATTERN) -> IdentifierCaptures:
    """
    Decode a raw identifier against the grammar.

    There is a single anchored match attempt; anything short of a full match
    raises.

    Raises:
        GrammarMismatchError: If ``raw`` does not match ``pattern``
    """
    # fullmatch keeps "$" from accepting a trailing newline
    match = re.fullmatch(pattern, raw, re.ASCII)
    if match is None:
        raise GrammarMismatchError(raw, pattern)

    composite = match.group("CompositeNumber")
    business_number, year, month = split_composite_number(composite)
    return IdentifierCaptures(
        composite_number=composite,
        business_number=business_number,
        year=year,
        month=month,
        reference_task_id=match.group("ReferenceTaskId"),
        document_type=match.group("DocumentType"),
        extension=match.group("Extension"),
    )
