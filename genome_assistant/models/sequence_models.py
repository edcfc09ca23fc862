from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class CleanedSequence:
    cleaned: str
    was_converted: bool
    was_fasta: bool


@dataclass(frozen=True)
class SequenceValidation:
    is_valid: bool
    cleaned_sequence: str
    length: int
    gc_content: float
    invalid_characters: list[str] = field(default_factory=list)
    error: Optional[str] = None
    was_converted: bool = False
    was_fasta: bool = False

    @property
    def is_truncated(self) -> bool:
        return len(self.cleaned_sequence) < self.length


@dataclass
class SequenceStats:
    length: int
    gc_content: float
    at_content: float
    a_count: int
    t_count: int
    g_count: int
    c_count: int
    gc_assessment: str


@dataclass
class FastaEntry:
    header: str
    sequence: str


@dataclass(frozen=True)
class ExampleSequence:
    name: str
    description: str
    sequence: str
    sequence_type: str
