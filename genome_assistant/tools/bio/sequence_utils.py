import logging

from ...constants.constants import *
from ...models.sequence_models import ExampleSequence, FastaEntry, SequenceStats
from .sequence_validation import round_one_decimal

logger = logging.getLogger(__name__)


EXAMPLE_SEQUENCES = [
    ExampleSequence(
        name="Cardiac Enhancer",
        description="A regulatory element active in cardiac tissue development",
        sequence="ATGCGTACGTAGCTAGCTGATCGATCG" + "TAGCTAGCTGATCGATCG" * 9,
        sequence_type="enhancer",
    ),
    ExampleSequence(
        name="Promoter Region",
        description="Contains TATA box and transcription start site",
        sequence="TATAAAAGGCCGCG" + "TACG" * 43,
        sequence_type="promoter",
    ),
    ExampleSequence(
        name="Silencer Element",
        description="Represses gene expression when bound by specific factors",
        sequence="GCGCGCATATATATAGCGCGCGCGC" + "TAGC" * 38 + "TA",
        sequence_type="silencer",
    ),
    ExampleSequence(
        name="CTCF Binding Site",
        description="Chromatin organization and insulator function",
        sequence="CCGCGAGGAGGCAGCA" * 11 + "C",
        sequence_type="insulator",
    ),
]


def parse_fasta(text: str) -> list[FastaEntry]:
    entries: list[FastaEntry] = []
    current_header = ""
    current_sequence = ""

    for line in (text or "").split("\n"):
        trimmed = line.strip()
        if trimmed.startswith(FASTA_HEADER_MARKER):
            if current_sequence:
                entries.append(FastaEntry(header=current_header, sequence=current_sequence))
            current_header = trimmed[1:]
            current_sequence = ""
        else:
            current_sequence += trimmed

    if current_sequence:
        entries.append(FastaEntry(header=current_header, sequence=current_sequence))

    return entries


def format_sequence(sequence: str, line_length: int = DEFAULT_FORMAT_LINE_LENGTH) -> str:
    if line_length <= 0:
        raise ValueError("line_length must be positive")
    return "\n".join(sequence[i : i + line_length] for i in range(0, len(sequence), line_length))


def get_sequence_stats(sequence: str) -> SequenceStats:
    upper = (sequence or "").upper()
    counts = {base: upper.count(base) for base in DNA_BASES}

    total = len(upper)
    gc_content = ((counts["G"] + counts["C"]) / total) * 100 if total > 0 else 0.0
    at_content = ((counts["A"] + counts["T"]) / total) * 100 if total > 0 else 0.0

    return SequenceStats(
        length=total,
        gc_content=round_one_decimal(gc_content),
        at_content=round_one_decimal(at_content),
        a_count=counts["A"],
        t_count=counts["T"],
        g_count=counts["G"],
        c_count=counts["C"],
        gc_assessment=_assess_gc_content(gc_content),
    )


def _assess_gc_content(gc_content: float) -> str:
    if gc_content < GC_LOW_THRESHOLD:
        return "Low GC content"
    elif gc_content > GC_HIGH_THRESHOLD:
        return "High GC content"
    else:
        return "Optimal GC content"


def read_sequence_file(data: bytes) -> str:
    text = data.decode("utf-8", errors="replace")
    logger.info(f"Imported sequence file ({len(data):,} bytes)")
    return text
