import logging
import math
import re
from typing import Optional

from Bio.SeqUtils import gc_fraction

from ...constants.constants import *
from ...models.sequence_models import CleanedSequence, SequenceValidation
from ...settings import settings

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")
_NON_DNA_RE = re.compile(r"[^ATGC]")


def round_one_decimal(value: float) -> float:
    # Half-up rounding; round() would round 12.25 down to 12.2.
    return math.floor(value * 10 + 0.5) / 10


def _strip_fasta_headers(text: str) -> str:
    lines = text.split("\n")
    return "".join(line for line in lines if not line.strip().startswith(FASTA_HEADER_MARKER))


def clean_sequence(text: Optional[str]) -> CleanedSequence:
    text = text or ""
    was_fasta = FASTA_HEADER_MARKER in text

    cleaned = _strip_fasta_headers(text)
    cleaned = _WHITESPACE_RE.sub("", cleaned).upper()

    was_converted = RNA_URACIL in cleaned
    if was_converted:
        cleaned = cleaned.replace(RNA_URACIL, DNA_THYMINE)

    cleaned = _NON_DNA_RE.sub("", cleaned)

    return CleanedSequence(cleaned=cleaned, was_converted=was_converted, was_fasta=was_fasta)


def find_invalid_characters(text: Optional[str]) -> list[str]:
    body = _WHITESPACE_RE.sub("", _strip_fasta_headers(text or "")).upper()

    invalid: list[str] = []
    for char in body:
        if char not in UNREPORTED_CHARACTERS and char not in invalid:
            invalid.append(char)
    return invalid


def calculate_gc_content(sequence: str) -> float:
    if not sequence:
        return 0.0
    return round_one_decimal(gc_fraction(sequence) * 100)


def validate_sequence(
    text: Optional[str],
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
) -> SequenceValidation:
    """Normalize raw pasted or uploaded text into a validated DNA sequence.

    FASTA header lines are dropped, whitespace removed, the text uppercased,
    U converted to T and anything outside ACGT discarded. Length problems are
    reported through ``error`` and ``is_valid``; this function does not raise.

    A sequence above ``max_length`` is returned truncated for display while
    ``length`` and ``gc_content`` describe the full cleaned sequence.
    """
    min_length = settings.min_sequence_length if min_length is None else min_length
    max_length = settings.max_sequence_length if max_length is None else max_length

    result = clean_sequence(text)
    cleaned = result.cleaned
    invalid_characters = find_invalid_characters(text)
    length = len(cleaned)

    common = {
        "invalid_characters": invalid_characters,
        "was_converted": result.was_converted,
        "was_fasta": result.was_fasta,
    }

    if length == 0:
        return SequenceValidation(
            is_valid=False,
            cleaned_sequence="",
            length=0,
            gc_content=0.0,
            error=NO_VALID_SEQUENCE_ERROR,
            **common,
        )

    gc_content = calculate_gc_content(cleaned)

    if length < min_length:
        return SequenceValidation(
            is_valid=False,
            cleaned_sequence=cleaned,
            length=length,
            gc_content=gc_content,
            error=SEQUENCE_TOO_SHORT_ERROR.format(length=length, minimum=min_length),
            **common,
        )

    if length > max_length:
        logger.debug(f"Truncating {length} bp sequence to {max_length} bp for display")
        return SequenceValidation(
            is_valid=False,
            cleaned_sequence=cleaned[:max_length],
            length=length,
            gc_content=gc_content,
            error=SEQUENCE_TOO_LONG_ERROR.format(length=length, maximum=max_length),
            **common,
        )

    return SequenceValidation(
        is_valid=True,
        cleaned_sequence=cleaned,
        length=length,
        gc_content=gc_content,
        **common,
    )
